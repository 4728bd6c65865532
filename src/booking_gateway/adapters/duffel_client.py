"""
Duffel API client - typed async wrapper around the Duffel REST API.

Builds authenticated requests, turns upstream failures into the gateway's
exception hierarchy and validates every response body into pydantic
models. Performs no retries, no backoff and no caching.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union

import httpx

from src.booking_gateway.config import DuffelSettings
from src.booking_gateway.exceptions import (
    DuffelAPIError,
    DuffelConfigurationError,
    DuffelNetworkError,
)
from src.booking_gateway.ports.flight_booking_api import FlightBookingAPI
from src.booking_gateway.ranking import (
    DEFAULT_RELEVANCE_WEIGHTS,
    DEFAULT_RESULT_LIMIT,
    RelevanceWeights,
    rank_airports,
)
from src.booking_gateway.schemas.envelope import DuffelResponse
from src.booking_gateway.schemas.offers import Offer, OfferRequest
from src.booking_gateway.schemas.orders import Order, OrderCancellation, OrderParams
from src.booking_gateway.schemas.payments import PaymentIntent, PaymentIntentParams
from src.booking_gateway.schemas.reference import Airline, Airport, ScoredAirport
from src.booking_gateway.schemas.search import OfferListParams, OfferRequestParams

logger = logging.getLogger(__name__)

# Candidates fetched upstream before local re-ranking
AIRPORT_CANDIDATE_LIMIT = 50

QueryParams = Sequence[Tuple[str, Union[str, int]]]


def _require_id(value: str, what: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{what} must not be empty")
    return value.strip()


class DuffelClient(FlightBookingAPI):
    """
    Flight booking API backed by Duffel.

    The underlying ``httpx.AsyncClient`` is created lazily on the first
    request and holds the only state of the instance; settings are
    read-only after construction, so concurrent calls do not interact.

    Example usage:
        >>> async with DuffelClient(DuffelSettings(api_token="duffel_test_x")) as client:
        ...     airports = await client.search_airports("London", limit=3)

    Attributes:
        _settings: Connection settings.
        _weights: Airport relevance weights.
        _client: Async HTTP client (lazy initialized).
    """

    def __init__(
        self,
        settings: DuffelSettings,
        weights: Optional[RelevanceWeights] = None,
    ) -> None:
        """
        Initialize the Duffel client.

        Args:
            settings: Connection settings, including the bearer token.
            weights: Airport relevance weights. If None, uses defaults.
        """
        self._settings = settings
        self._weights = weights or DEFAULT_RELEVANCE_WEIGHTS
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def name(self) -> str:
        return "Duffel API"

    @property
    def settings(self) -> DuffelSettings:
        return self._settings

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create async HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._settings.base_url,
                headers={
                    "Accept": "application/json",
                    "Accept-Encoding": "gzip",
                    "Content-Type": "application/json",
                    "Authorization": f"Bearer {self._settings.api_token}",
                    "Duffel-Version": self._settings.api_version,
                    "User-Agent": self._settings.user_agent,
                },
                timeout=httpx.Timeout(self._settings.request_timeout_s),
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "DuffelClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        json_body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Send one request to the Duffel API.

        The JSON body is parsed whatever the status code; a body that is not
        JSON raises the decoder's own error.

        Args:
            method: HTTP method.
            path: Path below the base URL, e.g. "/air/airlines".
            params: Query string as (key, value) pairs; keys may repeat.
            json_body: Request body.

        Returns:
            Parsed response body (``{"data": ..., "meta": ...}``).

        Raises:
            DuffelConfigurationError: No API token; nothing is sent.
            DuffelNetworkError: The API could not be reached.
            DuffelAPIError: The API answered with a non-2xx status.
        """
        if not self._settings.has_token:
            raise DuffelConfigurationError()

        client = await self._get_client()
        logger.debug("Duffel %s %s params=%s", method, path, params)

        try:
            response = await client.request(method, path, params=params, json=json_body)
        except httpx.TransportError as e:
            logger.debug("Duffel %s %s failed: %r", method, path, e)
            raise DuffelNetworkError() from e

        body = response.json()

        if not response.is_success:
            errors = body.get("errors") if isinstance(body, dict) else None
            errors = errors if isinstance(errors, list) else []
            first = errors[0] if errors and isinstance(errors[0], dict) else {}
            message = first.get("message")
            if not isinstance(message, str):
                message = ""
            raise DuffelAPIError(response.status_code, message, errors)

        return body

    async def search_airports(
        self,
        query: str,
        limit: int = DEFAULT_RESULT_LIMIT,
        radius: Optional[int] = None,
        coordinates: Optional[Tuple[float, float]] = None,
    ) -> List[ScoredAirport]:
        params: List[Tuple[str, Union[str, int]]] = [
            ("name", query),
            ("limit", AIRPORT_CANDIDATE_LIMIT),
        ]
        if radius:
            params.append(("radius", radius))
        if coordinates is not None:
            latitude, longitude = coordinates
            params.append(("lat", str(latitude)))
            params.append(("lng", str(longitude)))

        body = await self._request("GET", "/air/airports", params=params)
        candidates = DuffelResponse[List[Airport]].model_validate(body).data

        ranked = rank_airports(candidates, query, limit=limit, weights=self._weights)
        logger.debug(
            "Airport search %r: %d candidates, %d relevant",
            query,
            len(candidates),
            len(ranked),
        )
        return ranked

    async def list_airlines(
        self,
        limit: Optional[int] = None,
        after: Optional[str] = None,
        before: Optional[str] = None,
    ) -> DuffelResponse[List[Airline]]:
        params: List[Tuple[str, Union[str, int]]] = []
        if limit:
            params.append(("limit", limit))
        if after:
            params.append(("after", after))
        if before:
            params.append(("before", before))

        body = await self._request("GET", "/air/airlines", params=params)
        return DuffelResponse[List[Airline]].model_validate(body)

    async def create_offer_request(
        self, params: OfferRequestParams
    ) -> DuffelResponse[OfferRequest]:
        body = await self._request(
            "POST",
            "/air/offer_requests",
            params=[("return_offers", "false")],
            json_body=params.to_payload(),
        )
        return DuffelResponse[OfferRequest].model_validate(body)

    async def list_offers(
        self,
        offer_request_id: str,
        params: Optional[OfferListParams] = None,
    ) -> DuffelResponse[List[Offer]]:
        params = params or OfferListParams()
        query: List[Tuple[str, Union[str, int]]] = [
            ("offer_request_id", _require_id(offer_request_id, "offer_request_id")),
        ]
        if params.limit:
            query.append(("limit", params.limit))
        if params.sort:
            query.append(("sort", params.sort))
        if params.max_connections is not None:
            query.append(("max_connections", params.max_connections))
        for airline in params.airlines or []:
            query.append(("airlines[]", airline))

        body = await self._request("GET", "/air/offers", params=query)
        return DuffelResponse[List[Offer]].model_validate(body)

    async def create_order(self, params: OrderParams) -> DuffelResponse[Order]:
        logger.info(
            "Creating order for offers %s (%d passengers)",
            ", ".join(params.selected_offers),
            len(params.passengers),
        )
        body = await self._request(
            "POST",
            "/air/orders",
            json_body=params.to_payload(self._settings.order_source),
        )
        return DuffelResponse[Order].model_validate(body)

    async def get_order(self, order_id: str) -> DuffelResponse[Order]:
        order_id = _require_id(order_id, "order_id")
        body = await self._request("GET", f"/air/orders/{order_id}")
        return DuffelResponse[Order].model_validate(body)

    async def create_order_cancellation(
        self, order_id: str
    ) -> DuffelResponse[OrderCancellation]:
        order_id = _require_id(order_id, "order_id")
        body = await self._request(
            "POST",
            "/air/order_cancellations",
            json_body={"data": {"order_id": order_id}},
        )
        return DuffelResponse[OrderCancellation].model_validate(body)

    async def confirm_order_cancellation(
        self, cancellation_id: str
    ) -> DuffelResponse[OrderCancellation]:
        cancellation_id = _require_id(cancellation_id, "cancellation_id")
        body = await self._request(
            "POST",
            f"/air/order_cancellations/{cancellation_id}/actions/confirm",
        )
        return DuffelResponse[OrderCancellation].model_validate(body)

    async def create_payment_intent(
        self, params: PaymentIntentParams
    ) -> DuffelResponse[PaymentIntent]:
        logger.info("Creating payment intent for %s %s", params.amount, params.currency)
        body = await self._request(
            "POST",
            "/payments/payment_intents",
            json_body=params.to_payload(),
        )
        return DuffelResponse[PaymentIntent].model_validate(body)

    async def confirm_payment_intent(
        self, payment_intent_id: str
    ) -> DuffelResponse[PaymentIntent]:
        payment_intent_id = _require_id(payment_intent_id, "payment_intent_id")
        body = await self._request(
            "POST",
            f"/payments/payment_intents/{payment_intent_id}/actions/confirm",
        )
        return DuffelResponse[PaymentIntent].model_validate(body)
