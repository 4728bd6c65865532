"""
Port interfaces for the booking gateway.

Ports define the abstract interfaces that services use to talk to external
systems (Ports and Adapters / Hexagonal architecture).
"""

from src.booking_gateway.ports.flight_booking_api import FlightBookingAPI

__all__ = ["FlightBookingAPI"]
