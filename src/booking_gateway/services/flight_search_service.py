"""
Flight Search Service - composite search with business pricing.

Turns a passenger-count style search into an offer request, fetches the
cheapest offers for it and prices every offer exactly once.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from src.booking_gateway.config import DEFAULT_PRICING, PricingConfig
from src.booking_gateway.pricing import apply_pricing
from src.booking_gateway.schemas.search import (
    FlightSearchParams,
    FlightSearchResult,
    OfferListParams,
    OfferRequestParams,
)

if TYPE_CHECKING:
    from src.booking_gateway.ports.flight_booking_api import FlightBookingAPI

logger = logging.getLogger(__name__)

# Offers fetched per search, cheapest first
SEARCH_OFFER_LIMIT = 50


class FlightSearchService:
    """
    Domain service for end-user flight searches.

    Orchestrates:
    1. Passengers from adult/child/infant counts
    2. Outbound slice, plus a return slice when a return date is given
    3. Offer request, then offers sorted by ascending total amount
    4. Pricing transform on every offer

    Attributes:
        _api: Flight booking API port.
        _pricing: Pricing parameters.
    """

    def __init__(
        self,
        api: FlightBookingAPI,
        pricing: Optional[PricingConfig] = None,
    ) -> None:
        self._api = api
        self._pricing = pricing or DEFAULT_PRICING

    async def search_flights(self, params: FlightSearchParams) -> FlightSearchResult:
        """
        Search flights and return priced offers.

        Args:
            params: Validated search input.

        Returns:
            FlightSearchResult with priced offers (cheapest first) and the
            upstream pagination meta.

        Raises:
            DuffelError: Any upstream failure, logged then re-raised.
        """
        logger.info(
            "Searching flights: %s -> %s on %s%s",
            params.origin,
            params.destination,
            params.departure_date.isoformat(),
            f" returning {params.return_date.isoformat()}" if params.return_date else "",
        )

        try:
            offer_request = await self._api.create_offer_request(
                OfferRequestParams(
                    slices=params.build_slices(),
                    passengers=params.build_passengers(),
                    cabin_class=params.cabin_class,
                )
            )
            offers = await self._api.list_offers(
                offer_request.data.id,
                OfferListParams(limit=SEARCH_OFFER_LIMIT, sort="total_amount"),
            )
            priced = [apply_pricing(offer, self._pricing) for offer in offers.data]
        except Exception as e:
            logger.error("Flight search error: %s", e)
            raise

        logger.info("Flight search returned %d offers", len(priced))

        return FlightSearchResult(data=priced, meta=offers.meta)
