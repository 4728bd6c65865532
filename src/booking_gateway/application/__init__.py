"""
Application layer for the booking gateway.

Provides the public API: a facade over the Duffel client and the domain
services, plus the factory that reads process configuration.
"""

from src.booking_gateway.application.gateway import BookingGateway, create_gateway

__all__ = ["BookingGateway", "create_gateway"]
