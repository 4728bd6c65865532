"""Pytest configuration for service tests."""

from typing import List
from unittest.mock import AsyncMock

import pytest

from src.booking_gateway.ports.flight_booking_api import FlightBookingAPI
from src.booking_gateway.schemas import Airline, DuffelResponse, Offer, OfferRequest


@pytest.fixture
def fake_api() -> AsyncMock:
    """Booking API port double; every operation is an AsyncMock."""
    api = AsyncMock(spec=FlightBookingAPI)
    api.name = "Fake API"
    return api


@pytest.fixture
def offer_request_response() -> DuffelResponse[OfferRequest]:
    return DuffelResponse[OfferRequest].model_validate({"data": {"id": "orq_0001"}})


@pytest.fixture
def offers_response_factory(offer_factory):
    def factory(*amounts: str) -> DuffelResponse[List[Offer]]:
        return DuffelResponse[List[Offer]].model_validate(
            {
                "data": [
                    offer_factory(offer_id=f"off_{i:04d}", total_amount=amount)
                    for i, amount in enumerate(amounts)
                ],
                "meta": {"limit": 50, "after": None},
            }
        )

    return factory


@pytest.fixture
def airlines_response(airline_factory) -> DuffelResponse[List[Airline]]:
    return DuffelResponse[List[Airline]].model_validate({"data": [airline_factory()]})
