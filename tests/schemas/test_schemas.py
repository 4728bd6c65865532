"""
Tests for pydantic schemas.

Tests cover:
- Parsing of Duffel response shapes (offers, airports, envelopes)
- Offer expiry
- Validation and payload building of search and order parameters
"""

from datetime import date, datetime, timedelta, timezone
from typing import List

import pytest
from pydantic import ValidationError

from src.booking_gateway.schemas import (
    Airline,
    Airport,
    CardDetails,
    DuffelResponse,
    FlightSearchParams,
    Offer,
    OfferRequestParams,
    OrderParams,
    OrderPassenger,
    Payment,
    PassengerSpec,
    SliceSpec,
)


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================


class TestResponseSchemas:
    """Tests for upstream response models."""

    def test_offer_parses_duffel_shape(self, offer_factory):
        offer = Offer.model_validate(offer_factory())

        assert offer.id == "off_0001"
        assert offer.owner.iata_code == "BA"
        assert len(offer.slices) == 1
        segment = offer.slices[0].segments[0]
        assert segment.flight_number == "0117"
        assert segment.aircraft.name == "Boeing 777-300"
        assert offer.conditions.change_before_departure.allowed is True
        assert offer.conditions.cancel_before_departure.penalty_amount is None
        assert offer.slices[0].num_stops == 0

    def test_offer_requires_total_amount(self, offer_factory):
        payload = offer_factory()
        del payload["total_amount"]

        with pytest.raises(ValidationError):
            Offer.model_validate(payload)

    def test_unknown_fields_pass_through(self, offer_factory):
        payload = offer_factory()
        payload["passenger_identity_documents_required"] = False

        offer = Offer.model_validate(payload)

        assert offer.model_dump()["passenger_identity_documents_required"] is False

    def test_airport_keeps_upstream_country_key(self, airport_factory):
        airport = Airport.model_validate(airport_factory())

        assert airport.country_code == "GB"
        assert airport.time_zone == "Europe/London"
        dumped = airport.model_dump()
        assert dumped["iata_country_code"] == "GB"
        assert "country_code" not in dumped

    def test_segment_keeps_upstream_flight_number_key(self, offer_factory):
        offer = Offer.model_validate(offer_factory())

        segment = offer.model_dump()["slices"][0]["segments"][0]

        assert segment["marketing_carrier_flight_number"] == "0117"
        assert "flight_number" not in segment

    def test_envelope_with_cursors(self, airline_factory):
        body = {
            "data": [airline_factory()],
            "meta": {"limit": 1, "after": "g2wAAAAB", "before": None},
        }

        response = DuffelResponse[List[Airline]].model_validate(body)

        assert response.data[0].name == "British Airways"
        assert response.meta.after == "g2wAAAAB"

    def test_envelope_without_meta(self, airline_factory):
        response = DuffelResponse[Airline].model_validate({"data": airline_factory()})

        assert response.meta is None


class TestOfferExpiry:
    """Tests for Offer.is_expired."""

    def test_future_offer_not_expired(self, offer_factory):
        offer = Offer.model_validate(offer_factory(expires_at="2030-01-01T12:00:00Z"))

        assert not offer.is_expired(datetime(2029, 12, 31, tzinfo=timezone.utc))

    def test_past_offer_expired(self, offer_factory):
        offer = Offer.model_validate(offer_factory(expires_at="2020-01-01T12:00:00Z"))

        assert offer.is_expired()

    def test_expired_at_exact_instant(self, offer_factory):
        offer = Offer.model_validate(offer_factory(expires_at="2030-01-01T12:00:00Z"))

        assert offer.is_expired(datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc))

    def test_naive_now_treated_as_utc(self, offer_factory):
        offer = Offer.model_validate(offer_factory(expires_at="2030-01-01T12:00:00Z"))

        assert not offer.is_expired(datetime(2030, 1, 1, 12, 0) - timedelta(seconds=1))


# =============================================================================
# SEARCH PARAMETERS
# =============================================================================


class TestFlightSearchParams:
    """Tests for FlightSearchParams validation and slice/passenger building."""

    def test_iata_codes_normalized(self):
        params = FlightSearchParams(origin=" lhr", destination="jfk", departure_date=date(2030, 1, 10))

        assert params.origin == "LHR"
        assert params.destination == "JFK"

    def test_invalid_iata_rejected(self):
        with pytest.raises(ValidationError):
            FlightSearchParams(origin="London", destination="JFK", departure_date=date(2030, 1, 10))

    def test_requires_an_adult(self):
        with pytest.raises(ValidationError):
            FlightSearchParams(
                origin="LHR", destination="JFK", departure_date=date(2030, 1, 10), adults=0
            )

    def test_return_before_departure_rejected(self):
        with pytest.raises(ValidationError, match="return_date"):
            FlightSearchParams(
                origin="LHR",
                destination="JFK",
                departure_date=date(2030, 1, 10),
                return_date=date(2030, 1, 9),
            )

    def test_unknown_cabin_class_rejected(self):
        with pytest.raises(ValidationError):
            FlightSearchParams(
                origin="LHR",
                destination="JFK",
                departure_date=date(2030, 1, 10),
                cabin_class="luxury",
            )

    def test_build_passengers(self):
        params = FlightSearchParams(
            origin="LHR",
            destination="JFK",
            departure_date=date(2030, 1, 10),
            adults=2,
            children=1,
            infants=1,
        )

        types = [p.type for p in params.build_passengers()]

        assert types == ["adult", "adult", "child", "infant_without_seat"]

    def test_one_way_builds_single_slice(self):
        params = FlightSearchParams(origin="LHR", destination="JFK", departure_date=date(2030, 1, 10))

        slices = params.build_slices()

        assert len(slices) == 1
        assert (slices[0].origin, slices[0].destination) == ("LHR", "JFK")

    def test_round_trip_builds_return_slice(self):
        params = FlightSearchParams(
            origin="LHR",
            destination="JFK",
            departure_date=date(2030, 1, 10),
            return_date=date(2030, 1, 17),
        )

        slices = params.build_slices()

        assert len(slices) == 2
        assert (slices[1].origin, slices[1].destination) == ("JFK", "LHR")
        assert slices[1].departure_date == date(2030, 1, 17)


class TestOfferRequestParams:
    """Tests for OfferRequestParams payloads."""

    def test_payload_shape(self):
        params = OfferRequestParams(
            slices=[SliceSpec(origin="LHR", destination="JFK", departure_date=date(2030, 1, 10))],
            passengers=[PassengerSpec(type="adult"), PassengerSpec(type="child", age=7)],
        )

        payload = params.to_payload()

        assert payload == {
            "data": {
                "slices": [
                    {"origin": "LHR", "destination": "JFK", "departure_date": "2030-01-10"}
                ],
                "passengers": [{"type": "adult"}, {"type": "child", "age": 7}],
                "cabin_class": "economy",
            }
        }

    def test_optional_constraints_included_when_set(self):
        params = OfferRequestParams(
            slices=[SliceSpec(origin="LHR", destination="JFK", departure_date=date(2030, 1, 10))],
            passengers=[PassengerSpec()],
            cabin_class="business",
            max_connections=0,
            preferred_airlines=["BA"],
        )

        data = params.to_payload()["data"]

        assert data["cabin_class"] == "business"
        assert data["max_connections"] == 0
        assert data["preferred_airlines"] == ["BA"]

    def test_requires_slices_and_passengers(self):
        with pytest.raises(ValidationError):
            OfferRequestParams(slices=[], passengers=[PassengerSpec()])
        with pytest.raises(ValidationError):
            OfferRequestParams(
                slices=[SliceSpec(origin="LHR", destination="JFK", departure_date=date(2030, 1, 10))],
                passengers=[],
            )


# =============================================================================
# ORDER PARAMETERS
# =============================================================================


@pytest.fixture
def card() -> CardDetails:
    return CardDetails(
        number="4242424242424242",
        expiry_month="03",
        expiry_year="30",
        cvc="123",
        name="Ada Lovelace",
        address_line_1="1 Main Street",
        address_city="London",
        address_postal_code="N1 1AA",
        address_country_code="GB",
    )


@pytest.fixture
def passenger() -> OrderPassenger:
    return OrderPassenger(
        id="pas_0001",
        given_name="Ada",
        family_name="Lovelace",
        born_on=date(1985, 12, 10),
        email="ada@example.com",
    )


class TestOrderParams:
    """Tests for OrderParams payloads."""

    def test_defaults_filled_in(self, passenger):
        params = OrderParams(
            selected_offers=["off_0001"],
            passengers=[passenger],
            payments=[Payment(type="balance", amount="210.09", currency="GBP")],
        )

        data = params.to_payload("YourTravelSearch")["data"]

        assert data["passengers"][0]["title"] == "mr"
        assert data["passengers"][0]["identity_documents"] == []
        assert data["passengers"][0]["born_on"] == "1985-12-10"
        assert "phone_number" not in data["passengers"][0]
        assert data["metadata"] == {"source": "YourTravelSearch"}

    def test_explicit_metadata_kept(self, passenger):
        params = OrderParams(
            selected_offers=["off_0001"],
            passengers=[passenger],
            payments=[Payment(type="balance", amount="210.09", currency="GBP")],
            metadata={"booking_channel": "web"},
        )

        assert params.to_payload("YourTravelSearch")["data"]["metadata"] == {"booking_channel": "web"}

    def test_empty_metadata_not_replaced(self, passenger):
        params = OrderParams(
            selected_offers=["off_0001"],
            passengers=[passenger],
            payments=[Payment(type="balance", amount="210.09", currency="GBP")],
            metadata={},
        )

        assert params.to_payload("YourTravelSearch")["data"]["metadata"] == {}

    def test_card_forwarded_verbatim(self, passenger, card):
        params = OrderParams(
            selected_offers=["off_0001"],
            passengers=[passenger],
            payments=[Payment(type="card", amount="210.09", currency="GBP", card=card)],
        )

        payment = params.to_payload("YourTravelSearch")["data"]["payments"][0]

        assert payment["card"]["number"] == "4242424242424242"
        assert payment["card"]["cvc"] == "123"

    def test_card_secrets_hidden_from_repr(self, card):
        text = repr(card)

        assert "4242424242424242" not in text
        assert "123" not in text
        assert "Ada Lovelace" in text

    def test_unknown_payment_type_rejected(self):
        with pytest.raises(ValidationError):
            Payment(type="crypto", amount="1.00", currency="GBP")
