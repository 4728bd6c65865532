"""
BookingGateway - public API of the booking gateway.

Acts as a Facade/Factory: wires the Duffel client and the domain services
together and exposes every search, booking and diagnostic operation behind
one object. ``create_gateway`` is the composition root, the only place the
process environment is read.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from src.booking_gateway.adapters.duffel_client import DuffelClient
from src.booking_gateway.config import (
    DEFAULT_PRICING,
    DuffelSettings,
    PricingConfig,
    load_settings,
)
from src.booking_gateway.ports.flight_booking_api import FlightBookingAPI
from src.booking_gateway.schemas.envelope import DuffelResponse
from src.booking_gateway.schemas.offers import Offer, OfferRequest
from src.booking_gateway.schemas.orders import Order, OrderCancellation, OrderParams
from src.booking_gateway.schemas.payments import PaymentIntent, PaymentIntentParams
from src.booking_gateway.schemas.reference import Airline, ScoredAirport
from src.booking_gateway.schemas.search import (
    FlightSearchParams,
    FlightSearchResult,
    OfferListParams,
    OfferRequestParams,
)
from src.booking_gateway.services.connection_service import (
    ConnectionCheckService,
    ConnectionStatus,
)
from src.booking_gateway.services.flight_search_service import FlightSearchService

logger = logging.getLogger(__name__)


class BookingGateway:
    """
    Entry point for the storefront's flight features.

    Example usage:
        >>> async with create_gateway() as gateway:
        ...     result = await gateway.search_flights(
        ...         FlightSearchParams(
        ...             origin="LHR",
        ...             destination="JFK",
        ...             departure_date=date(2026, 12, 1),
        ...             adults=2,
        ...         )
        ...     )
        ...     for offer in result.data:
        ...         print(offer.id, offer.display_price, offer.total_currency)

    Attributes:
        _api: Flight booking API (DuffelClient unless injected).
        _search_service: Composite search with pricing.
        _connection_service: Capability probes.
    """

    def __init__(
        self,
        settings: Optional[DuffelSettings] = None,
        api: Optional[FlightBookingAPI] = None,
        pricing: Optional[PricingConfig] = None,
    ) -> None:
        """
        Initialize the gateway.

        Args:
            settings: Duffel settings. Ignored when ``api`` is given.
                Defaults to settings without a token.
            api: Custom booking API implementation.
            pricing: Pricing parameters. Defaults to DEFAULT_PRICING.
        """
        if api is not None:
            self._api = api
        else:
            self._api = DuffelClient(settings or DuffelSettings())

        self._search_service = FlightSearchService(self._api, pricing or DEFAULT_PRICING)
        self._connection_service = ConnectionCheckService(self._api)

        logger.debug("BookingGateway initialized with %s", self._api.name)

    @property
    def api(self) -> FlightBookingAPI:
        return self._api

    async def close(self) -> None:
        if isinstance(self._api, DuffelClient):
            await self._api.close()

    async def __aenter__(self) -> "BookingGateway":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def search_airports(
        self,
        query: str,
        limit: int = 8,
        radius: Optional[int] = None,
        coordinates: Optional[Tuple[float, float]] = None,
    ) -> List[ScoredAirport]:
        return await self._api.search_airports(
            query, limit=limit, radius=radius, coordinates=coordinates
        )

    async def list_airlines(
        self,
        limit: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> DuffelResponse[List[Airline]]:
        return await self._api.list_airlines(limit=limit, after=after, before=before)

    async def create_offer_request(
        self, params: OfferRequestParams
    ) -> DuffelResponse[OfferRequest]:
        return await self._api.create_offer_request(params)

    async def list_offers(
        self,
        offer_request_id: str,
        params: Optional[OfferListParams] = None,
    ) -> DuffelResponse[List[Offer]]:
        return await self._api.list_offers(offer_request_id, params)

    async def create_order(self, params: OrderParams) -> DuffelResponse[Order]:
        return await self._api.create_order(params)

    async def get_order(self, order_id: str) -> DuffelResponse[Order]:
        return await self._api.get_order(order_id)

    async def cancel_order(self, order_id: str) -> DuffelResponse[OrderCancellation]:
        """
        Cancel an order: quote the cancellation, then confirm it.

        Returns:
            The confirmed cancellation, including the refund amount.
        """
        quote = await self._api.create_order_cancellation(order_id)
        logger.info(
            "Cancelling order %s (refund %s %s)",
            order_id,
            quote.data.refund_amount,
            quote.data.refund_currency,
        )
        return await self._api.confirm_order_cancellation(quote.data.id)

    async def create_payment_intent(
        self, params: PaymentIntentParams
    ) -> DuffelResponse[PaymentIntent]:
        return await self._api.create_payment_intent(params)

    async def confirm_payment_intent(
        self, payment_intent_id: str
    ) -> DuffelResponse[PaymentIntent]:
        return await self._api.confirm_payment_intent(payment_intent_id)

    async def test_connection(self) -> ConnectionStatus:
        return await self._connection_service.test_connection()

    async def search_flights(self, params: FlightSearchParams) -> FlightSearchResult:
        return await self._search_service.search_flights(params)


def create_gateway(
    api_token: Optional[str] = None,
    env_file: Optional[Union[str, Path]] = None,
    pricing: Optional[PricingConfig] = None,
) -> BookingGateway:
    """
    Build a gateway from the process configuration.

    Args:
        api_token: Overrides the token found in the environment.
        env_file: Optional dotenv file to load first.
        pricing: Pricing parameters. Defaults to DEFAULT_PRICING.

    Returns:
        BookingGateway backed by a DuffelClient.
    """
    settings = load_settings(api_token=api_token, env_file=env_file)
    return BookingGateway(settings=settings, pricing=pricing)
