import httpx
import asyncio
import logging
from html import escape
from typing import List, Optional

from app.core.config import settings, is_configured
from app.core.errors import AppError, ExternalServiceError, ServiceUnavailableError
from app.core.metrics import emails_sent
from app.schemas.trip import EmailTripData, TripQuoteOut, TripRequestIn
from app.services.whatsapp import format_amount

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"
RETRY_BACKOFF = 1.0


def email_configured() -> bool:
    return is_configured(settings.RESEND_API_KEY)


async def send_email(
    to: List[str],
    subject: str,
    html: str,
    kind: str = "quote",
    retries: int | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Optional[str]:
    """Deliver through Resend; returns the provider's email id, or None once retries are spent."""
    if retries is None:
        retries = settings.EMAIL_RETRIES

    payload = {"from": settings.EMAIL_FROM, "to": to, "subject": subject, "html": html}
    headers = {"Authorization": f"Bearer {settings.RESEND_API_KEY}"}
    backoff = RETRY_BACKOFF

    for attempt in range(1, retries + 1):
        try:
            async with httpx.AsyncClient(timeout=settings.EMAIL_TIMEOUT, transport=transport) as client:
                response = await client.post(RESEND_API_URL, json=payload, headers=headers)

                if 200 <= response.status_code < 300:
                    email_id = response.json().get("id")
                    logger.info(f"Email '{kind}' delivered ({email_id})")
                    emails_sent.labels(kind=kind, status="sent").inc()
                    return email_id
                else:
                    logger.warning(
                        f"Email delivery failed (attempt {attempt}/{retries}): "
                        f"Status {response.status_code} for '{kind}'"
                    )
        except httpx.TimeoutException:
            logger.warning(f"Email timeout (attempt {attempt}/{retries}) for '{kind}'")
        except Exception as e:
            logger.warning(f"Email delivery error (attempt {attempt}/{retries}): {e} for '{kind}'")

        if attempt < retries:
            await asyncio.sleep(backoff)
            backoff *= 2.0

    logger.error(f"Email delivery failed after {retries} attempts for '{kind}'")
    emails_sent.labels(kind=kind, status="failed").inc()
    return None


def render_quote_email(quote: TripQuoteOut, trip: EmailTripData) -> str:
    steps = "".join(
        f'<div class="route-step"><strong>Étape {i}:</strong> {escape(step.instruction)}<br>'
        f"<small>Distance: {escape(step.distance)} • Durée: {escape(step.duration)}</small></div>"
        for i, step in enumerate(quote.route, start=1)
    )
    features = escape(", ".join(quote.vehicle_info.features))
    return f"""<!DOCTYPE html>
<html>
  <head><meta charset="utf-8"><title>Devis de Transport - Sénégal</title></head>
  <body>
    <div class="container">
      <div class="header">
        <h1>🚗 Votre Devis de Transport</h1>
        <p>Service de transport premium au Sénégal</p>
      </div>
      <div class="section">
        <h2>📋 Détails du voyage</h2>
        <p><strong>Client:</strong> {escape(trip.customer_name)}</p>
        <p><strong>Téléphone:</strong> {escape(trip.customer_phone)}</p>
        <p><strong>De:</strong> {escape(trip.departure)}</p>
        <p><strong>Vers:</strong> {escape(trip.destination)}</p>
        <p><strong>Date:</strong> {escape(trip.date)}</p>
        <p><strong>Heure:</strong> {escape(trip.time)}</p>
      </div>
      <div class="section">
        <h2>💰 Tarification</h2>
        <div class="price-highlight">{format_amount(quote.total_price)} {quote.currency}</div>
        <p><strong>Distance:</strong> {quote.distance:g} km</p>
        <p><strong>Durée estimée:</strong> {escape(quote.duration)}</p>
        <p><strong>Prix de base:</strong> {format_amount(quote.base_price)} {quote.currency}</p>
      </div>
      <div class="section">
        <h2>🚙 Véhicule</h2>
        <p><strong>Modèle:</strong> {escape(quote.vehicle_info.name)}</p>
        <p><strong>Capacité:</strong> {quote.vehicle_info.capacity} passagers</p>
        <p><strong>Équipements:</strong> {features}</p>
      </div>
      <div class="section">
        <h2>🗺️ Itinéraire détaillé</h2>
        {steps}
      </div>
      <div class="footer">
        <p>Pour confirmer votre réservation, contactez-nous:</p>
        <p>📱 WhatsApp: {escape(settings.WHATSAPP_PHONE_NUMBER)}</p>
        <p>🕒 Disponible 24h/24, 7j/7</p>
      </div>
    </div>
  </body>
</html>"""


def quote_subject(departure: str, destination: str) -> str:
    return f"Devis de transport: {departure} → {destination}"


async def send_quote_email(quote: TripQuoteOut, trip: EmailTripData) -> str:
    if not email_configured():
        raise ServiceUnavailableError("Email service is not configured")
    if not trip.customer_email:
        raise AppError("Customer email is required", status_code=400, code="EMAIL_REQUIRED")

    email_id = await send_email(
        [trip.customer_email],
        quote_subject(trip.departure, trip.destination),
        render_quote_email(quote, trip),
        kind="quote",
    )
    if email_id is None:
        raise ExternalServiceError("email", "delivery failed")
    return email_id


async def notify_driver_of_lead(trip: TripRequestIn, quote: TripQuoteOut) -> bool:
    """Background task: forward a fresh lead to the driver's inbox."""
    if not settings.DRIVER_EMAIL or not email_configured():
        return False

    trip_data = EmailTripData(
        departure=trip.departure,
        destination=trip.destination,
        date=trip.date,
        time=trip.time,
        customer_name=trip.customer_name,
        customer_phone=trip.customer_phone,
        customer_email=trip.customer_email,
    )
    email_id = await send_email(
        [settings.DRIVER_EMAIL],
        f"Nouvelle demande ({quote.trip_request_id}): {trip.departure} → {trip.destination}",
        render_quote_email(quote, trip_data),
        kind="lead",
    )
    return email_id is not None
