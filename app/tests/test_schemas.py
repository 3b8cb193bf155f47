from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from app.core.enums import VehicleType
from app.core.response_builders import to_trip_request_input, to_trip_request_record
from app.core.security import sanitize_input
from app.schemas.chat import ChatRequest
from app.schemas.itinerary import SaveItineraryRequest
from app.schemas.trip import TripRequestIn


class TestTripRequestValidation:

    def test_valid_payload(self, valid_trip_data):
        trip = TripRequestIn(**valid_trip_data)
        assert trip.vehicle_type == VehicleType.STANDARD
        assert trip.customer_email == "awa.diop@example.com"

    def test_defaults(self, valid_trip_data):
        data = dict(valid_trip_data)
        for key in ("time", "duration_days", "vehicle_type", "special_requests"):
            data.pop(key)
        trip = TripRequestIn(**data)
        assert trip.time == "08:00"
        assert trip.duration_days == 1
        assert trip.vehicle_type == VehicleType.STANDARD
        assert trip.special_requests is None

    @pytest.mark.parametrize("field,value", [
        ("date", (date.today() - timedelta(days=1)).isoformat()),
        ("date", "2030-02-30"),
        ("date", "15/08/2030"),
        ("time", "25:00"),
        ("time", "8h"),
        ("time", "08:00\n"),
        ("passengers", 0),
        ("passengers", 9),
        ("duration_days", 31),
        ("vehicle_type", "limousine"),
        ("customer_name", "A"),
        ("customer_name", "Awa <b>Diop</b>"),
        ("customer_phone", "call me maybe"),
        ("customer_email", "not-an-email"),
        ("departure", "   "),
    ])
    def test_invalid_field(self, valid_trip_data, field, value):
        data = dict(valid_trip_data, **{field: value})
        with pytest.raises(ValidationError):
            TripRequestIn(**data)

    def test_trailing_newline_in_date_is_rejected(self, valid_trip_data):
        data = dict(valid_trip_data, date=valid_trip_data["date"] + "\n")
        with pytest.raises(ValidationError):
            TripRequestIn(**data)

    def test_today_is_accepted(self, valid_trip_data):
        trip = TripRequestIn(**dict(valid_trip_data, date=date.today().isoformat()))
        assert trip.date == date.today().isoformat()

    def test_accented_names_are_accepted(self, valid_trip_data):
        trip = TripRequestIn(**dict(valid_trip_data, customer_name="Aïssatou N'Diaye-Sène"))
        assert trip.customer_name == "Aïssatou N'Diaye-Sène"

    def test_special_requests_are_sanitized(self, valid_trip_data):
        data = dict(valid_trip_data, special_requests="<script>alert(1)</script>Siège bébé")
        assert TripRequestIn(**data).special_requests == "Siège bébé"

    def test_blank_special_requests_become_none(self, valid_trip_data):
        data = dict(valid_trip_data, special_requests="<script>x</script>")
        assert TripRequestIn(**data).special_requests is None


class TestRecordConversion:

    def test_form_record_form(self, valid_trip_data):
        trip = TripRequestIn(**valid_trip_data)
        record = to_trip_request_record(trip, "42")

        assert record.id == "42"
        assert record.created_at.tzinfo is not None
        assert to_trip_request_input(record) == trip

    def test_old_record_converts_despite_past_date(self, valid_trip_data):
        trip = TripRequestIn(**valid_trip_data)
        created = datetime(2020, 1, 1, tzinfo=timezone.utc)
        record = to_trip_request_record(trip, "demo-1", created_at=created)
        record.date = "2020-01-02"

        back = to_trip_request_input(record)
        assert back.date == "2020-01-02"
        assert back.customer_name == trip.customer_name


class TestSanitizer:

    @pytest.mark.parametrize("raw,expected", [
        ("  Dakar  ", "Dakar"),
        ("<script>alert('x')</script>Thiès", "Thiès"),
        ("<iframe src='x'></iframe>Saly", "Saly"),
        ("javascript:alert(1)", "alert(1)"),
        ("Gorée onclick=evil()", "Gorée evil()"),
        ("a\x00b\x07c", "abc"),
        ("<b>Lac</b> Rose", "bLac/b Rose"),
    ])
    def test_strips_markup(self, raw, expected):
        assert sanitize_input(raw) == expected

    def test_truncates(self):
        assert sanitize_input("x" * 50, max_length=10) == "x" * 10


class TestChatRequest:

    def test_message_is_sanitized(self):
        req = ChatRequest(message="  <script>x</script>Bonjour  ")
        assert req.message == "Bonjour"
        assert req.conversation_history == []

    @pytest.mark.parametrize("message", ["", "<script>x</script>", "x" * 2001])
    def test_rejected_messages(self, message):
        with pytest.raises(ValidationError):
            ChatRequest(message=message)

    def test_history_is_bounded(self):
        history = [{"role": "user", "content": "Salut"}] * 51
        with pytest.raises(ValidationError):
            ChatRequest(message="Bonjour", conversation_history=history)

    def test_unknown_role(self):
        with pytest.raises(ValidationError):
            ChatRequest(message="Bonjour", conversation_history=[{"role": "system", "content": "x"}])


class TestSaveItineraryRequest:

    def test_requires_response_text(self, valid_itinerary_data):
        data = dict(valid_itinerary_data, conversational_response="")
        with pytest.raises(ValidationError):
            SaveItineraryRequest(**data)

    def test_optional_client_fields(self, valid_itinerary_data):
        data = dict(valid_itinerary_data)
        data.pop("client_name")
        data.pop("client_phone")
        req = SaveItineraryRequest(**data)
        assert req.client_name is None
        assert req.client_phone is None
