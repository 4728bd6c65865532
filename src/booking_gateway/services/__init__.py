"""
Domain services for the booking gateway.

Services orchestrate calls on the booking API port and apply business
logic (pricing, capability probing).
"""

from src.booking_gateway.services.connection_service import (
    ConnectionCheckService,
    ConnectionStatus,
)
from src.booking_gateway.services.flight_search_service import FlightSearchService

__all__ = ["ConnectionCheckService", "ConnectionStatus", "FlightSearchService"]
