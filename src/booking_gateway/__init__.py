"""
Booking gateway - typed async client for the Duffel flight-booking API.

Layers:
- schemas: pydantic data contracts for requests and responses
- ports: abstract booking API interface
- adapters: Duffel REST implementation
- services: composite flight search with pricing, connection probing
- application: BookingGateway facade and create_gateway factory
"""
