"""
Shared fixtures: Duffel-shaped payload factories.

Payloads follow the Duffel v2 response shapes closely enough for the
pydantic models to validate them.
"""

from typing import Any, Dict, Optional

import pytest


def make_airport(
    iata_code: str = "LHR",
    name: str = "Heathrow Airport",
    city_name: Optional[str] = "London",
    airport_id: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "id": airport_id or f"arp_{iata_code.lower()}_gb",
        "iata_code": iata_code,
        "icao_code": None,
        "name": name,
        "city_name": city_name,
        "iata_country_code": "GB",
        "time_zone": "Europe/London",
        "latitude": 51.47,
        "longitude": -0.4543,
    }


def make_airline(iata_code: str = "BA", name: str = "British Airways") -> Dict[str, Any]:
    return {
        "id": f"arl_{iata_code.lower()}",
        "iata_code": iata_code,
        "name": name,
        "logo_symbol_url": None,
    }


def make_offer(
    offer_id: str = "off_0001",
    total_amount: str = "200.00",
    currency: str = "GBP",
    expires_at: str = "2030-01-01T12:00:00Z",
) -> Dict[str, Any]:
    origin = make_airport("LHR", "Heathrow Airport", "London")
    destination = make_airport("JFK", "John F. Kennedy International Airport", "New York")
    return {
        "id": offer_id,
        "owner": make_airline(),
        "slices": [
            {
                "id": "sli_0001",
                "origin": origin,
                "destination": destination,
                "duration": "PT8H",
                "segments": [
                    {
                        "id": "seg_0001",
                        "origin": origin,
                        "destination": destination,
                        "departing_at": "2030-01-10T09:00:00",
                        "arriving_at": "2030-01-10T12:00:00",
                        "marketing_carrier": make_airline(),
                        "operating_carrier": make_airline(),
                        "marketing_carrier_flight_number": "0117",
                        "aircraft": {"id": "arc_777", "name": "Boeing 777-300", "iata_code": "77W"},
                    }
                ],
            }
        ],
        "total_amount": total_amount,
        "total_currency": currency,
        "tax_amount": "40.00",
        "base_amount": "160.00",
        "expires_at": expires_at,
        "conditions": {
            "change_before_departure": {"allowed": True, "penalty_amount": "50.00"},
            "cancel_before_departure": {"allowed": False},
        },
    }


@pytest.fixture
def anyio_backend():
    """Use only asyncio backend (trio not installed)."""
    return "asyncio"


@pytest.fixture
def airport_factory():
    return make_airport


@pytest.fixture
def airline_factory():
    return make_airline


@pytest.fixture
def offer_factory():
    return make_offer
