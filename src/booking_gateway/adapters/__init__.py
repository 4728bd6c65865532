"""
Adapter implementations for the booking gateway.

Adapters are concrete implementations of the port interfaces.
"""

from src.booking_gateway.adapters.duffel_client import DuffelClient

__all__ = ["DuffelClient"]
