"""Canned French answers used when no LLM vendor is reachable"""
import re
from typing import List

GREETING = """🌍 Bonjour et bienvenue ! Je suis votre conseiller voyage spécialisé au Sénégal 🇸🇳

Je suis ravi de vous aider à planifier votre découverte de notre magnifique pays !

Pour vous proposer l'itinéraire parfait, j'aimerais en savoir plus sur vos envies :

🗓️ **Combien de temps** souhaitez-vous rester au Sénégal ?
💰 **Quel est votre budget** approximatif pour ce voyage ?
🎯 **Qu'est-ce qui vous attire le plus** : plages paradisiaques, culture et histoire, safari et nature, ou découverte des villes ?

Dites-moi tout, je vais créer un programme sur-mesure pour vous ! ✨"""

BUDGET = """Parfait ! 💡 Avec ces informations sur votre budget, je peux déjà vous orienter :

**GAMMES DE PRIX AU SÉNÉGAL :**
🏨 Hébergement : 25-300€/nuit selon standing
🚗 Transport privé : 50-150€/jour avec chauffeur
🍽️ Restauration : 5-50€/repas selon lieu
🎭 Activités : 10-100€ selon type

**MES SUGGESTIONS selon votre budget :**
- **Économique** : Cases d'hôtes, transports en commun, restaurants locaux
- **Confort** : Hôtels 3-4⭐, chauffeur privé, mix expériences
- **Premium** : Lodges de luxe, guide privé, expériences VIP

Et côté **durée**, vous pensez à combien de temps ?
Cela m'aiderait aussi à savoir ce qui vous fait le plus rêver : **mer, culture, nature ou aventure** ? 🌊🏛️🌿"""

DURATION = """Excellent ! ⏰ Cette durée nous laisse de belles possibilités !

**VOICI MES RECOMMANDATIONS SELON LE TEMPS :**

**🗓️ 3-5 JOURS** : Focus Dakar + Île de Gorée + Lac Rose
**📅 1 SEMAINE** : Dakar + Saint-Louis + plages de Saly
**🗓️ 2 SEMAINES** : Grand tour avec Casamance ou Niokolo-Koba
**📅 3+ SEMAINES** : Immersion totale multi-régions

**🤔 Pour affiner mes suggestions :**
- Êtes-vous plutôt **détente** ou **découverte active** ?
- Voyagez-vous **en couple, famille, entre amis** ou **solo** ?
- Des **incontournables** en tête (Gorée, plages, safari...) ?

Plus vous me parlez de vos envies, plus mon programme sera parfait ! 🎯"""

INTERESTS = """🎯 Parfait ! Je vois déjà se dessiner votre voyage idéal !

**SELON VOS GOÛTS, voici mes pépites :**

🏖️ **CÔTÉ MER** : Cap Skirring (plages paradisiaques), Saly (animations), Popenguine (nature)

🏛️ **CULTURE & HISTOIRE** : Île de Gorée (émouvant), Saint-Louis (UNESCO), village traditionnel de Toubacouta

🌿 **NATURE & SAFARI** : Niokolo-Koba (lions, hippopotames), Djoudj (oiseaux migrateurs), mangroves de Casamance

**🗺️ ITINÉRAIRE RECOMMANDÉ :**
Jour 1-2 : Arrivée Dakar + Gorée
Jour 3-4 : Saint-Louis + culture wolof
Jour 5-7 : Casamance ou Saly selon préférence

**Une question importante :** préférez-vous un **rythme tranquille** (2-3 lieux max) ou **itinérant** (découvrir un maximum) ?

Dites-moi "GO" quand vous voulez que je finalise votre programme complet ! 🚀"""

CONFIRMATION = """🎉 **VOTRE VOYAGE AU SÉNÉGAL EST PRÊT !**

**📋 RÉCAPITULATIF PERSONNALISÉ :**

**🗓️ PROGRAMME :**
• **Jour 1-2** : Dakar (Marché Sandaga, Monument Renaissance) + Île de Gorée
• **Jour 3-4** : Saint-Louis (ville coloniale, balade en calèche)
• **Jour 5-6** : Lac Rose + villages traditionnels
• **Jour 7** : Saly (détente plage, départ)

**🚗 TRANSPORT :** Chauffeur privé francophone (4x4 climatisé)
**🏨 HÉBERGEMENT :** Mix hôtels charme + case traditionnelle
**🍽️ RESTAURATION :** Découverte gastronomie locale + restaurants sélectionnés

**💰 BUDGET ESTIMÉ :** 800-1200€/personne (selon options)

**📱 PRÊT À RÉSERVER ?**
Cliquez sur "Envoyer via WhatsApp" pour recevoir le programme détaillé et discuter des modalités avec notre équipe !

Votre aventure sénégalaise vous attend ! 🇸🇳✨"""

DAKAR = """🏙️ Dakar est la capitale du Sénégal, point d'arrivée principal.

**Villes proches de Dakar :**
- Île de Gorée (20 min en bateau)
- Lac Rose (1h de route)
- Thiès (1h de route)
- Saly (1h30 de route)

Combien de temps restez-vous au Sénégal ? Cela m'aidera à vous suggérer d'autres villes à visiter ! 🗺️"""

SAINT_LOUIS = """🏛️ Saint-Louis est une ville historique classée UNESCO au nord du Sénégal.

**Distances depuis Saint-Louis :**
- Dakar : 270 km (4h de route)
- Parc national Djoudj : 60 km (1h30)
- Désert de Lompoul : 88 km (1h20)

Souhaitez-vous combiner Saint-Louis avec d'autres régions ? 🌍"""

CASAMANCE = """🌴 La Casamance est la région sud du Sénégal, connue pour ses plages.

**Principales villes de Casamance :**
- Cap Skirring (plages paradisiaques)
- Oussouye (culture diola)
- Ziguinchor (ville principale)

**Distance depuis Dakar :** 550 km (8h+)
Il est recommandé de prendre un vol Dakar-Ziguinchor (1h).

Combien de jours souhaitez-vous passer en Casamance ? ✈️"""

DEFAULT = """Je comprends ! 😊

Pour vous conseiller au mieux sur votre voyage au Sénégal, parlez-moi de :
- 🗓️ **Durée souhaitée** du séjour
- 💰 **Budget approximatif**
- 🎯 **Ce qui vous attire** le plus (plages, culture, nature...)
- 👥 **Avec qui** vous voyagez

Plus j'en sais, plus mes recommandations seront précises !

N'hésitez pas à me dire "GO" quand vous voulez que je finalise votre programme personnalisé ! 🚀"""

_GREETING_WORDS = ("bonjour", "salut", "hello")
_BUDGET_WORDS = ("budget", "euro", "€", "cher")
_DURATION_WORDS = ("jour", "semaine", "temps")
_INTEREST_WORDS = ("plage", "mer", "culture", "histoire", "nature", "safari")
_CONFIRM = re.compile(r"\bgo\b|parfait|valide")

# Checked in order; the first matching rule answers
_RULES = [
    (lambda m: any(w in m for w in _BUDGET_WORDS), BUDGET),
    (lambda m: any(w in m for w in _DURATION_WORDS), DURATION),
    (lambda m: any(w in m for w in _INTEREST_WORDS), INTERESTS),
    (lambda m: _CONFIRM.search(m) is not None, CONFIRMATION),
    (lambda m: "dakar" in m, DAKAR),
    (lambda m: "saint-louis" in m or "saint louis" in m, SAINT_LOUIS),
    (lambda m: "casamance" in m or "cap skirring" in m, CASAMANCE),
]


def get_demo_response(message: str, history: List) -> str:
    msg = message.lower()
    if not history or any(w in msg for w in _GREETING_WORDS):
        return GREETING
    for matches, answer in _RULES:
        if matches(msg):
            return answer
    return DEFAULT
