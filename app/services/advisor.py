"""Prompt assembly for the travel-advisor chat and trip details read from it"""
import logging
import re
import uuid
from typing import Any, Dict, List, Union

from app.schemas.chat import ChatMessage, ChatRequest, ChatResponse
from app.core.enums import ChatRole
from app.services.ai_providers import generate_ai_response
from app.services.distances import extract_cities_from_prompt, generate_distance_context

logger = logging.getLogger(__name__)

TRAVEL_ADVISOR_PROMPT = """Tu es **Planificateur Sénégal**, l'assistant du chauffeur privé local Mbaye. Tu poses peu de questions mais très ciblées, tu restes concret (lieux précis, durées de route estimées avec marge), et tu fournis **UN SEUL** itinéraire optimisé selon les préférences exprimées, sans jamais dépasser **5 h de conduite par jour**.

## Contraintes non négociables
* **Route journalière <= 5 h** après ajout d'une **marge 15–25 %** (trafic/pauses)
* **Focalisation**: uniquement le **Sénégal** ; pas de réservations ; suggestions sans engagement
* **Clarté**: 3 questions max par tour. Toujours terminer par **1 question** claire
* **Aucun prix** n'est affiché à l'utilisateur

## Destinations principales avec catégories
- **Côte & chill**: Saly, Somone, Popenguine, Joal-Fadiouth
- **Îles & mangroves**: Sine-Saloum (Toubacouta/Palmarin), balade pirogue
- **Histoire & patrimoine**: Gorée, Saint-Louis, musée/architecture
- **Désert & dunes**: Lompoul (coucher de soleil)
- **Faune & parcs**: Bandia, Djoudj (selon saison)
- **Casamance** (si durée suffisante): Cap Skirring / Oussouye

## Temps de trajet indicatifs (avec marge 15-25%)
- Dakar ↔ Saly/Somone/Popenguine/Joal: ~1–2 h
- Dakar ↔ Saint-Louis: ~4–4h30
- Dakar ↔ Lompoul: ~2–3 h
- Saly/Somone ↔ Sine-Saloum: ~2–3 h

## Collecte d'informations (ordre prioritaire)
1. **Durée du voyage** (nb de jours) et **période/saison**
2. **Idée de ce qu'il veut faire ?** Si non → proposer catégories. Si oui → demander liste
3. **Rythme** préféré (CHILL/ROUTE/MIX)
4. **Contraintes**: enfants/personnes âgées, budget/standing

## Style de réponse OBLIGATOIRE
- INTERDICTION ABSOLUE : JSON, code, crochets, accolades, blocs de code
- UNIQUEMENT du texte conversationnel avec émojis et formatage markdown simple
- Trouve l'enchainement des étapes les plus optimisées entre les villes
- Si >5h de route : propose étape intermédiaire
- Parle comme un humain, pas comme une IA technique
- 3 questions max par tour, termine par 1 question claire

Langue: par défaut **FR** ; si l'utilisateur parle une autre langue, t'y adapter immédiatement.

Garde tout en mémoire mais ne montre JAMAIS de structure technique à l'utilisateur."""

FIRST_TURN = (
    "\n\nPREMIÈRE INTERACTION - Accueille chaleureusement le prospect et pose des questions "
    "pour comprendre ses envies de voyage au Sénégal:"
)
TEXT_ONLY = (
    "IMPORTANT : Réponds UNIQUEMENT avec du texte conversationnel. JAMAIS de JSON, code, "
    "ou structure technique. Comme si tu parlais à un ami au téléphone."
)


def _speaker(message: ChatMessage) -> str:
    return "Voyageur" if message.role == ChatRole.USER else "Conseiller"


def build_chat_prompt(message: str, history: List[ChatMessage]) -> str:
    distance_context = generate_distance_context(extract_cities_from_prompt(message))

    if history:
        transcript = "\n".join(f"{_speaker(m)}: {m.content}" for m in history)
        conversation = (
            f"\n\nCONTEXTE DE LA CONVERSATION PRÉCÉDENTE:\n{transcript}"
            "\n\nNOUVELLE QUESTION DU VOYAGEUR:"
        )
    else:
        conversation = FIRST_TURN

    return f'{TRAVEL_ADVISOR_PROMPT}{distance_context}\n\n{conversation}\n"{message}"\n\n{TEXT_ONLY}'


async def chat(request: ChatRequest) -> ChatResponse:
    prompt = build_chat_prompt(request.message, request.conversation_history)
    history = [m.model_dump() for m in request.conversation_history]
    result = await generate_ai_response(prompt, message=request.message, history=history)
    return ChatResponse(
        response=result.text,
        provider=result.provider,
        is_demo=result.is_demo,
        conversation_id=str(uuid.uuid4()),
        error=result.error,
    )


BUDGET_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*(euro|eur|€|franc|cfa|fcfa|\$|dollar)", re.IGNORECASE)
DURATION_PATTERN = re.compile(r"(\d+)\s*(jour|day|semaine|week|mois|month)", re.IGNORECASE)
GROUP_PATTERN = re.compile(r"(\d+)\s*(personne|people|gens|adult|enfant|child)", re.IGNORECASE)

INTEREST_KEYWORDS = {
    "culture": ["culture", "tradition", "histoire", "heritage", "local", "authentique"],
    "nature": ["nature", "parc", "animaux", "safari", "oiseaux", "mer", "plage"],
    "art": ["art", "artisan", "musique", "danse", "festival", "création"],
    "gastronomie": ["cuisine", "manger", "plat", "nourriture", "gastronomie", "thieb"],
    "spirituel": ["spirituel", "religion", "mosquée", "pèlerinage", "méditation"],
    "aventure": ["aventure", "sport", "randonnée", "trek", "actif", "challenge"],
}


def _amount(text: str) -> Union[int, float]:
    value = float(text)
    return int(value) if value.is_integer() else value


def _budget_currency(unit: str) -> str:
    unit = unit.lower()
    if unit in ("€", "euro", "eur"):
        return "EUR"
    if unit in ("$", "dollar"):
        return "USD"
    return "XOF"


def _duration_days(number: str, unit: str) -> int:
    unit = unit.lower()
    if unit in ("semaine", "week"):
        return int(number) * 7
    if unit in ("mois", "month"):
        return int(number) * 30
    return int(number)


def extract_client_info(history: List[ChatMessage]) -> Dict[str, Any]:
    """Pull budget, trip length, group size and interests out of what the traveller wrote.

    Only user turns are read. The largest number found wins for each field, and
    the budget currency follows the first amount mentioned.
    """
    text = " ".join(m.content for m in history if m.role == ChatRole.USER)
    info: Dict[str, Any] = {}

    budgets = BUDGET_PATTERN.findall(text)
    if budgets:
        info["budget"] = {
            "amount": max(_amount(number) for number, _ in budgets),
            "currency": _budget_currency(budgets[0][1]),
            "confidence": 0.7,
        }

    durations = DURATION_PATTERN.findall(text)
    if durations:
        info["dates"] = {
            "duration": max(_duration_days(number, unit) for number, unit in durations),
            "confidence": 0.6,
        }

    sizes = GROUP_PATTERN.findall(text)
    if sizes:
        info["groupInfo"] = {
            "size": max(int(number) for number, _ in sizes),
            "confidence": 0.8,
        }

    lowered = text.lower()
    interests = [
        interest for interest, keywords in INTEREST_KEYWORDS.items()
        if any(keyword in lowered for keyword in keywords)
    ]
    if interests:
        info["preferences"] = {"interests": interests, "confidence": 0.7}

    return info
