"""
Flight Booking API port interface.

Defines the abstract contract for the upstream flight-booking API. Services
depend on this port, so they can be exercised with in-memory fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, List, Optional, Tuple

if TYPE_CHECKING:
    from src.booking_gateway.schemas.envelope import DuffelResponse
    from src.booking_gateway.schemas.offers import Offer, OfferRequest
    from src.booking_gateway.schemas.orders import Order, OrderCancellation, OrderParams
    from src.booking_gateway.schemas.payments import PaymentIntent, PaymentIntentParams
    from src.booking_gateway.schemas.reference import Airline, ScoredAirport
    from src.booking_gateway.schemas.search import OfferListParams, OfferRequestParams


class FlightBookingAPI(ABC):
    """
    Abstract interface for a flight search and booking backend.

    Implementations:
    - DuffelClient: httpx client for the Duffel REST API
    """

    @abstractmethod
    async def search_airports(
        self,
        query: str,
        limit: int = 8,
        radius: Optional[int] = None,
        coordinates: Optional[Tuple[float, float]] = None,
    ) -> List[ScoredAirport]:
        """
        Search airports by free text, ranked by local relevance.

        Args:
            query: City, airport name or IATA code fragment.
            limit: Maximum number of results.
            radius: Search radius in metres around ``coordinates``.
            coordinates: (latitude, longitude) to search around.

        Returns:
            Ranked airports, best match first.
        """
        ...

    @abstractmethod
    async def list_airlines(
        self,
        limit: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> DuffelResponse[List[Airline]]:
        """One page of airlines; cursors are in ``meta``."""
        ...

    @abstractmethod
    async def create_offer_request(
        self, params: OfferRequestParams
    ) -> DuffelResponse[OfferRequest]:
        """Submit search criteria; the returned id feeds ``list_offers``."""
        ...

    @abstractmethod
    async def list_offers(
        self,
        offer_request_id: str,
        params: Optional[OfferListParams] = None,
    ) -> DuffelResponse[List[Offer]]:
        """Offers produced by a prior offer request."""
        ...

    @abstractmethod
    async def create_order(self, params: OrderParams) -> DuffelResponse[Order]:
        """Book the selected offer(s)."""
        ...

    @abstractmethod
    async def get_order(self, order_id: str) -> DuffelResponse[Order]:
        """Read-only fetch of booking state."""
        ...

    @abstractmethod
    async def create_order_cancellation(
        self, order_id: str
    ) -> DuffelResponse[OrderCancellation]:
        """Quote a cancellation (refund amount) without cancelling yet."""
        ...

    @abstractmethod
    async def confirm_order_cancellation(
        self, cancellation_id: str
    ) -> DuffelResponse[OrderCancellation]:
        """Confirm a quoted cancellation; the order is cancelled afterwards."""
        ...

    @abstractmethod
    async def create_payment_intent(
        self, params: PaymentIntentParams
    ) -> DuffelResponse[PaymentIntent]:
        """Start a card payment; the returned ``client_token`` goes to the card form."""
        ...

    @abstractmethod
    async def confirm_payment_intent(
        self, payment_intent_id: str
    ) -> DuffelResponse[PaymentIntent]:
        """Confirm a payment intent once the card has been collected."""
        ...

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable backend name (e.g., "Duffel API")."""
        ...
