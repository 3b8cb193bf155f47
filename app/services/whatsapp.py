"""WhatsApp deep links that hand a lead over to the driver"""
import re
from typing import List, Optional
from urllib.parse import quote

from app.schemas.trip import TripQuoteOut, TripRequestIn

WHATSAPP_BASE_URL = "https://wa.me"


def format_amount(value: float) -> str:
    return f"{value:,.0f}".replace(",", " ")


def build_whatsapp_url(phone: str, message: str) -> str:
    digits = re.sub(r"\D", "", phone)
    return f"{WHATSAPP_BASE_URL}/{digits}?text={quote(message, safe='')}"


def format_quote_message(trip: TripRequestIn, quote_out: TripQuoteOut) -> str:
    lines = [
        "Bonjour,",
        "",
        "Je souhaite réserver un transport:",
        f"📍 De: {trip.departure}",
        f"📍 Vers: {trip.destination}",
        f"📅 Date: {trip.date}",
        f"🕐 Heure: {trip.time}",
        f"📆 Durée: {trip.duration_days} jour{'s' if trip.duration_days > 1 else ''}",
        f"👥 Passagers: {trip.passengers}",
        "",
        f"💰 Devis: {format_amount(quote_out.total_price)} FCFA",
        f"🚗 Véhicule: {quote_out.vehicle_info.name}",
        f"📏 Distance: {quote_out.distance:g} km",
        f"⏱️ Durée estimée: {quote_out.duration}",
        "",
        f"Nom: {trip.customer_name}",
        f"Téléphone: {trip.customer_phone}",
        f"Email: {trip.customer_email}",
    ]
    if trip.special_requests:
        lines.append(f"Demandes: {trip.special_requests}")
    lines += ["", "Merci de confirmer la disponibilité."]
    return "\n".join(lines)


def format_budget(budget_min: Optional[float], budget_max: Optional[float], currency: str) -> str:
    if budget_min and budget_max:
        return f"{format_amount(budget_min)} - {format_amount(budget_max)} {currency}"
    return "Sur mesure"


def format_itinerary_message(
    destinations: List[str],
    duration: int,
    budget: str,
    group_size: int,
    client_name: str,
) -> str:
    plural = "s" if group_size > 1 else ""
    return (
        f"🇸🇳 Salut Mbaye ! {client_name} souhaite réserver un voyage au Sénégal :\n"
        "\n"
        f"📍 Destinations : {', '.join(destinations)}\n"
        f"📅 Durée : {duration} jours\n"
        f"👥 Voyageurs : {group_size} personne{plural}\n"
        f"💰 Budget : {budget}\n"
        "\n"
        "Peux-tu me confirmer la disponibilité et envoyer les détails pratiques ?\n"
        "\n"
        "Merci ! 🙏\n"
        "\n"
        "---\n"
        "Planning généré via Transport Sénégal"
    )
