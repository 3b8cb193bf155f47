"""Guided trip design with Mbaye: intent detection, recommendation, scoring and replies"""
import logging
import math
import re
import time
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.enums import ChatRole, ExpertContext
from app.data.destinations import DESTINATIONS, UNIVERSAL_EXPERIENCES
from app.schemas.chat import ChatMessage
from app.schemas.expert import (
    ClientPreferences,
    DestinationList,
    DestinationSummary,
    ExpertRequest,
    ExpertResponse,
    SavedItinerarySummary,
)
from app.schemas.itinerary import SaveItineraryRequest
from app.services.advisor import extract_client_info
from app.services.itineraries import DEFAULT_DURATION, save_itinerary
from app.services.whatsapp import format_budget

logger = logging.getLogger(__name__)

INTENT_GREETING = "initial-inquiry"
INTENT_CONFIRM = "confirm-proposal"
INTENT_MODIFY = "request-modification"
INTENT_BUDGET = "ask-budget-info"
INTENT_PRACTICAL = "ask-practical-info"
INTENT_OTHER = "general-question"

GREETING_PATTERN = re.compile(r"^(bonjour|hello|salut|bonsoir)[\s.,!]*$")
CONFIRM_PATTERN = re.compile(
    r"^(oui|yes|ok|d'accord|parfait|très bien|ça me va|c'est bon|validé|je valide)[\s.,!]*$"
)
CONFIRM_PHRASES = ["je valide", "c'est parfait", "ça me convient", "planning me plaît"]
BOOKING_WORDS = ["réserver", "confirmer", "ok pour"]
MODIFY_WORDS = ["modifier", "changer", "différent", "autre"]
BUDGET_WORDS = ["budget", "prix", "coût", "tarif"]
PRACTICAL_WORDS = ["transport", "comment", "pratique", "détails"]

# Which experience categories answer each interest a traveller can mention
INTEREST_CATEGORIES = {
    "culture": {"cultural-immersion", "historical-tour"},
    "nature": {"nature-wildlife"},
    "art": {"traditional-craft"},
    "gastronomie": {"teranga-experience"},
}

DEFAULT_BUDGET = {"min": 100000, "max": 500000, "currency": "XOF"}
RECOMMENDED_COST = {
    "min": 200000,
    "max": 400000,
    "currency": "FCFA",
    "includes": ["Transport", "Guide", "Expériences de base"],
    "excludes": ["Hébergement", "Repas", "Vols internationaux"],
}
DEFAULT_DESTINATION_COUNT = 2
MAX_DESTINATIONS = 5


def determine_intent(message: str) -> str:
    text = message.lower().strip()

    if GREETING_PATTERN.match(text):
        return INTENT_GREETING
    if CONFIRM_PATTERN.match(text) or any(phrase in text for phrase in CONFIRM_PHRASES):
        return INTENT_CONFIRM
    if any(word in text for word in BOOKING_WORDS):
        return INTENT_CONFIRM
    if any(word in text for word in MODIFY_WORDS):
        return INTENT_MODIFY
    if any(word in text for word in BUDGET_WORDS):
        return INTENT_BUDGET
    if any(word in text for word in PRACTICAL_WORDS):
        return INTENT_PRACTICAL
    return INTENT_OTHER


def resolve_context(context: ExpertContext, intent: str) -> ExpertContext:
    if intent == INTENT_CONFIRM and context == ExpertContext.ITINERARY_PROPOSAL:
        return ExpertContext.BOOKING_CONFIRMATION
    if intent == INTENT_MODIFY:
        return ExpertContext.MODIFICATION_REQUEST
    if intent == INTENT_PRACTICAL:
        return ExpertContext.PRACTICAL_DETAILS
    return context


def list_destinations() -> DestinationList:
    destinations = [DestinationSummary(**d) for d in DESTINATIONS]
    return DestinationList(destinations=destinations, total_count=len(destinations))


def _destination_categories(destination: Dict[str, Any]) -> set:
    return {exp["category"] for exp in destination["experiences"]}


def _covers(destination: Dict[str, Any], interest: str) -> bool:
    categories = INTEREST_CATEGORIES.get(interest, {interest})
    if _destination_categories(destination) & categories:
        return True
    return any(interest.lower() in tag.lower() for tag in destination["tags"])


def select_destinations(interests: List[str]) -> List[Dict[str, Any]]:
    matched = [d for d in DESTINATIONS if any(_covers(d, i) for i in interests)]
    return (matched or DESTINATIONS[:DEFAULT_DESTINATION_COUNT])[:MAX_DESTINATIONS]


def client_budget(extracted: Dict[str, Any]) -> Dict[str, Any]:
    amount = (extracted.get("budget") or {}).get("amount")
    if not amount:
        return dict(DEFAULT_BUDGET)
    return {
        "min": amount * 0.8,
        "max": amount * 1.2,
        "currency": extracted["budget"]["currency"],
    }


def build_recommendation(
    preferences: ClientPreferences,
    extracted: Dict[str, Any],
) -> Dict[str, Any]:
    interests = list(preferences.interests)
    for interest in (extracted.get("preferences") or {}).get("interests", []):
        if interest not in interests:
            interests.append(interest)

    destinations = select_destinations(interests)
    duration = (extracted.get("dates") or {}).get("duration") or DEFAULT_DURATION
    group_size = (extracted.get("groupInfo") or {}).get("size") or 1

    return {
        "itinerary": {
            "id": f"itinerary-{int(time.time() * 1000)}",
            "name": "Découverte Authentique du Sénégal",
            "status": "ai-generated",
            "duration": duration,
            "groupSize": group_size,
            "interests": interests,
            "budget": client_budget(extracted),
            "destinations": [
                {
                    "id": d["id"],
                    "name": d["name"],
                    "region": d["region"],
                    "type": d["type"],
                    "description": d["description"],
                    "mbayeRecommendation": d["mbaye_recommendation"],
                    "categories": sorted(_destination_categories(d)),
                }
                for d in destinations
            ],
            "experiences": [
                {"id": e["id"], "name": e["name"], "category": e["category"]}
                for e in UNIVERSAL_EXPERIENCES[:1]
            ],
            "totalCost": dict(RECOMMENDED_COST),
            "transportPlan": {
                "totalDistance": 250,
                "totalDuration": "6h30",
                "vehicleRecommendation": {
                    "type": "premium",
                    "reason": "Confort optimal pour découverte culturelle",
                    "features": ["Climatisation", "GPS", "Sièges confortables"],
                },
                "driverNotes": "Mbaye vous accompagnera personnellement pour cette découverte",
            },
            "personalizedNotes": "Itinéraire conçu spécialement pour votre profil de voyageur",
        },
        "reasoning": (
            "Basé sur vos préférences pour l'authenticité culturelle et votre budget, j'ai sélectionné "
            "des sites emblématiques qui vous offriront une vraie immersion dans la culture sénégalaise."
        ),
        "alternatives": [
            {
                "title": "Option Nature",
                "description": "Accent sur les parcs nationaux et la faune",
                "costDifference": 50000,
                "durationDifference": 1,
                "whyRecommended": "Pour les amoureux de la nature et des oiseaux",
            },
        ],
        "confidenceScore": 0.85,
        "questionsForUser": [
            "Préférez-vous un hébergement en hôtel ou chez l'habitant ?",
            "Êtes-vous intéressé par les activités artisanales ?",
        ],
    }


def score_recommendation(recommendation: Dict[str, Any]) -> float:
    """Fit of a recommendation out of 100: variety, interest coverage, budget and logistics."""
    itinerary = recommendation["itinerary"]
    destinations = itinerary["destinations"]
    score = 0.0

    if destinations:
        score += 20
        regions = {d["region"] for d in destinations}
        score += min(len(regions) * 5, 20)

        interests = itinerary.get("interests") or []
        covered = 0
        for interest in interests:
            wanted = INTEREST_CATEGORIES.get(interest, {interest})
            if any(wanted & set(d["categories"]) for d in destinations):
                covered += 1
        score += covered / max(len(interests), 1) * 30

    budget = itinerary.get("budget")
    if budget:
        proposed_max = itinerary["totalCost"]["max"]
        if proposed_max <= budget["max"]:
            score += 20
        elif proposed_max <= budget["max"] * 1.2:
            score += 10

    if itinerary["transportPlan"].get("totalDuration"):
        score += 10

    return min(round(score, 1), 100.0)


def _welcome() -> str:
    return (
        "Salut ! Mbaye à votre service. Je suis chauffeur-guide au Sénégal depuis plus de 20 ans.\n\n"
        "Alors, le Sénégal vous tente ? Parfait choix ! \n\n"
        "Pour vous concocter le voyage parfait, dites-moi :\n"
        "🎯 **Vos centres d'intérêt** : culture, plages, nature, histoire ?  \n"
        "📅 **Votre durée** de séjour  \n"
        "👥 **Nombre de personnes** dans votre groupe\n\n"
        "Et hop, je vous concocte quelque chose d'authentique !"
    )


def _gathering(extracted: Dict[str, Any]) -> str:
    interests = (extracted.get("preferences") or {}).get("interests", [])
    duration = (extracted.get("dates") or {}).get("duration")
    budget = extracted.get("budget")
    group_size = (extracted.get("groupInfo") or {}).get("size")

    response = "OK, je vois mieux ! "
    if interests:
        response += f"{' + '.join(interests)} - excellent mélange ! "
    if duration:
        if duration > 10:
            verdict = "parfait pour bien approfondir"
        elif duration > 5:
            verdict = "idéal pour un bon aperçu"
        else:
            verdict = "court mais faisable"
        response += f"{duration} jours, c'est {verdict} ! "
    if budget:
        response += f"Budget {budget['amount']} {budget['currency']}, très bien. "
    if group_size:
        response += f"À {group_size}, vous allez bien profiter. "

    response += "\n\nPour finaliser votre itinéraire, j'ai besoin de savoir :"

    missing = []
    if not duration:
        missing.append("📅 **Combien de jours** exactement ?")
    if not budget and not group_size:
        missing.append("💰 **Budget approximatif** pour le groupe ?")
    if not interests:
        missing.append("🎯 **Vos priorités** : détente, découverte culturelle, nature ?")

    if missing:
        response += "\n\n" + "\n".join(missing)
    else:
        response += "\n\nParfait, j'ai tout ce qu'il faut ! Laissez-moi vous concocter quelque chose..."
    return response


def _proposal(recommendation: Dict[str, Any], score: float) -> str:
    itinerary = recommendation["itinerary"]
    duration = itinerary["duration"]
    destinations = itinerary["destinations"]
    pacing = max(2, math.ceil(duration / max(len(destinations), 1)))

    lines = [
        "Parfait ! Voici l'itinéraire que je vous propose :\n",
        f"# 🇸🇳 **{itinerary['name']}**\n",
    ]

    day = 1
    for destination in destinations:
        stay = min(pacing, duration - day + 1)
        if stay < 1:
            break
        end = day + stay - 1
        if stay == 1:
            lines.append(f"## Jour {day} : {destination['name']}")
        else:
            lines.append(f"## Jours {day}-{end} : {destination['name']}")
        lines.append(f"{destination['description']}\n")
        lines.append(f"**Conseil Mbaye :** {destination['mbayeRecommendation']}\n")
        day = end + 1

    cost = itinerary["totalCost"]
    lines.append("## 💰 **Budget total**")
    lines.append(format_budget(cost["min"], cost["max"], cost["currency"]))
    lines.append(f"*Transport, guide et {', '.join(cost['includes'])} inclus*\n")

    vehicle = itinerary["transportPlan"]["vehicleRecommendation"]["type"]
    lines.append("## 🚗 **Votre chauffeur-guide**")
    lines.append(
        f"Je vous accompagne personnellement dans un véhicule {vehicle} confortable avec climat, "
        "WiFi et tout l'équipement nécessaire.\n"
    )

    confirm = (
        '**Si ce planning vous convient, dites "oui" et je prépare un texte pour envoi par '
        "WhatsApp au chauffeur Mbaye.**\n"
    )
    if score >= 85:
        lines.append("Cet itinéraire vous correspond parfaitement ! ✅\n")
        lines.append(confirm)
        lines.append("Vous pourrez ensuite partager directement les détails avec lui pour finaliser votre réservation.")
    elif score >= 70:
        lines.append(confirm)
        lines.append("Sinon, indiquez-moi ce que vous souhaitez ajuster.")
    else:
        lines.append("Je peux adapter cet itinéraire selon vos préférences. Que souhaitez-vous modifier ?\n")
        lines.append("Une fois ajusté à vos envies, je préparerai un texte pour contacter Mbaye directement.")

    return "\n".join(lines)


def _practical() -> str:
    return (
        "Parfait ! Voici les détails pratiques :\n\n"
        "## 🚗 **Transport & Guide**\n"
        "- Véhicule climatisé avec GPS et WiFi\n"
        "- Guide culturel et linguistique\n"
        "- Flexibilité totale d'horaires\n\n"
        "## 🎯 **Services inclus**\n"
        "- Contacts privilégiés (artisans, familles, restaurants)\n"
        "- Assistance 24h/24\n"
        "- Conseils négociation et découvertes\n\n"
        "## 💡 **Bonus authentiques**\n"
        "- Initiation wolof et thé à la menthe\n"
        "- Photos souvenirs avec communautés\n"
        "- Arrêts spontanés selon opportunités\n\n"
        f"**Prêt à réserver ?** Contactez-moi au **{settings.WHATSAPP_PHONE_NUMBER}** (WhatsApp)"
    )


def _modification() -> str:
    return (
        "D'accord ! Dites-moi ce que vous aimeriez modifier :\n\n"
        "🎯 **Destinations** : autres lieux à privilégier ?\n"
        "📅 **Durée** : plus/moins de temps quelque part ?\n"
        "💰 **Budget** : ajuster les prestations ?\n"
        "🚗 **Rythme** : plus détendu ou plus intensif ?\n\n"
        "J'adapte tout selon vos souhaits."
    )


def _confirmation(recommendation: Dict[str, Any], extracted: Dict[str, Any]) -> str:
    itinerary = recommendation["itinerary"]
    names = ", ".join(d["name"] for d in itinerary["destinations"][:3])
    cost = itinerary["totalCost"]
    budget = format_budget(cost["min"], cost["max"], cost["currency"])
    travellers = (extracted.get("groupInfo") or {}).get("size") or 1

    return (
        "Perfect ! ✅ Votre planning est validé !\n\n"
        "## 📋 **RÉCAPITULATIF DE VOTRE VOYAGE**\n\n"
        f"**🎯 Destinations principales :** {names}\n"
        f"**📅 Durée :** {itinerary['duration']} jours\n"
        f"**💰 Budget estimé :** {budget}\n"
        "**🚗 Guide :** Mbaye Diop (20 ans d'expérience)\n\n"
        "---\n\n"
        "**📱 MESSAGE POUR MBAYE (WhatsApp) :**\n\n"
        "*Salut Mbaye ! Je souhaite réserver un voyage au Sénégal :\n\n"
        f"• Destinations : {names}\n"
        f"• Durée : {itinerary['duration']} jours  \n"
        f"• Budget : {budget}\n"
        f"• Voyageurs : {travellers} personne(s)\n\n"
        "Peux-tu me confirmer la disponibilité et les détails pratiques ?\n\n"
        "Merci ! 🙏*\n\n"
        "---\n\n"
        f"**💬 Envoyez ce message à Mbaye : {settings.WHATSAPP_PHONE_NUMBER}**\n\n"
        "Votre planning détaillé a été sauvegardé et sera visible dans l'encart ci-dessous."
    )


def has_basic_info(extracted: Dict[str, Any]) -> bool:
    return any(key in extracted for key in ("budget", "dates", "groupInfo"))


def has_enough_info(extracted: Dict[str, Any]) -> bool:
    interests = (extracted.get("preferences") or {}).get("interests", [])
    duration = (extracted.get("dates") or {}).get("duration")
    group_size = (extracted.get("groupInfo") or {}).get("size")
    return bool((duration or extracted.get("budget")) and (interests or group_size))


def compose_reply(
    context: ExpertContext,
    recommendation: Dict[str, Any],
    extracted: Dict[str, Any],
    score: float,
) -> Tuple[ExpertContext, str]:
    """Reply for the conversation stage, moving ahead when enough is already known.

    Returns the stage actually answered alongside the text.
    """
    if context == ExpertContext.INITIAL_INQUIRY:
        if not has_basic_info(extracted):
            return context, _welcome()
        context = ExpertContext.PREFERENCE_GATHERING

    if context == ExpertContext.PREFERENCE_GATHERING:
        if not has_enough_info(extracted):
            return context, _gathering(extracted)
        context = ExpertContext.ITINERARY_PROPOSAL

    if context == ExpertContext.ITINERARY_PROPOSAL:
        return context, _proposal(recommendation, score)
    if context == ExpertContext.PRACTICAL_DETAILS:
        return context, _practical()
    if context == ExpertContext.MODIFICATION_REQUEST:
        return context, _modification()
    return context, _confirmation(recommendation, extracted)


def suggested_actions(context: ExpertContext, score: float) -> List[str]:
    if context == ExpertContext.INITIAL_INQUIRY:
        return [
            "Parlez-moi de vos centres d'intérêt",
            "Combien de temps avez-vous ?",
            "Quel est votre budget approximatif ?",
        ]
    if context == ExpertContext.PREFERENCE_GATHERING:
        return ["Cette proposition me plaît", "J'aimerais voir autre chose", "Donnez-moi plus de détails"]
    if context == ExpertContext.ITINERARY_PROPOSAL:
        if score >= 80:
            return ["Parfait, je valide !", "Une petite modification...", "Infos pratiques SVP"]
        return ["Proposez-moi une alternative", "Ajustez le budget", "Modifiez les destinations"]
    if context == ExpertContext.PRACTICAL_DETAILS:
        return ["Comment réserver ?", "Que dois-je apporter ?", "Contact WhatsApp"]
    return ["Recommencez l'itinéraire", "Contactez Mbaye", "Plus d'informations"]


def next_steps(context: ExpertContext, score: float) -> List[str]:
    if context == ExpertContext.INITIAL_INQUIRY:
        return ["Préciser les préférences", "Établir le budget", "Définir la durée"]
    if context == ExpertContext.PREFERENCE_GATHERING:
        return ["Générer la proposition", "Affiner les intérêts", "Calculer les coûts"]
    if context == ExpertContext.ITINERARY_PROPOSAL:
        if score >= 80:
            return ["Finaliser les détails", "Procéder à la réservation", "Contact WhatsApp"]
        return ["Ajuster la proposition", "Explorer alternatives", "Reconsidérer budget"]
    if context == ExpertContext.PRACTICAL_DETAILS:
        return ["Réservation WhatsApp", "Préparation voyage", "Suivi personnalisé"]
    return ["Continuer la conversation", "Clarifier les besoins", "Proposer assistance"]


async def _save_confirmed(
    recommendation: Dict[str, Any],
    extracted: Dict[str, Any],
    reply: str,
    db: Optional[AsyncSession],
) -> Optional[SavedItinerarySummary]:
    try:
        saved = await save_itinerary(
            SaveItineraryRequest(
                recommendation=recommendation,
                extracted_info=extracted,
                conversational_response=reply,
            ),
            db,
        )
    except Exception as e:
        logger.warning(f"Could not save confirmed itinerary: {e}")
        return None
    return SavedItinerarySummary(
        id=saved.itinerary_id,
        title=saved.title,
        whatsapp_message=saved.whatsapp_message,
        whatsapp_url=saved.whatsapp_url,
        planning_url=saved.planning_url,
    )


async def advise(request: ExpertRequest, db: Optional[AsyncSession] = None) -> ExpertResponse:
    history = request.conversation_history + [ChatMessage(role=ChatRole.USER, content=request.message)]
    extracted = extract_client_info(history)

    intent = determine_intent(request.message)
    context = resolve_context(request.context, intent)

    recommendation = build_recommendation(request.client_preferences, extracted)
    score = score_recommendation(recommendation)
    context, reply = compose_reply(context, recommendation, extracted, score)
    logger.info(f"Expert reply for stage {context} (intent {intent}, score {score})")

    saved = None
    if context == ExpertContext.BOOKING_CONFIRMATION:
        saved = await _save_confirmed(recommendation, extracted, reply, db)

    return ExpertResponse(
        message=reply,
        recommendation=recommendation,
        extracted_info=extracted,
        score=score,
        context=context,
        detected_intent=intent,
        conversation_history=history + [ChatMessage(role=ChatRole.ASSISTANT, content=reply)],
        suggested_actions=suggested_actions(context, score),
        next_steps=next_steps(context, score),
        saved_itinerary=saved,
    )
