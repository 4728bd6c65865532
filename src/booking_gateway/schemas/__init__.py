"""
Schema definitions for the booking gateway.

Pydantic models as the data contracts for Duffel requests and responses.
"""

from .envelope import Cursors, DuffelResponse, ResponseMeta
from .offers import (
    ConditionRule,
    Offer,
    OfferConditions,
    OfferRequest,
    PricedOffer,
    Segment,
    Slice,
)
from .orders import (
    CardDetails,
    IdentityDocument,
    Order,
    OrderCancellation,
    OrderParams,
    OrderPassenger,
    Payment,
)
from .payments import PaymentIntent, PaymentIntentParams
from .reference import Aircraft, Airline, Airport, ScoredAirport
from .search import (
    FlightSearchParams,
    FlightSearchResult,
    OfferListParams,
    OfferRequestParams,
    PassengerSpec,
    SliceSpec,
)

__all__ = [
    # Envelope
    "Cursors",
    "DuffelResponse",
    "ResponseMeta",
    # Reference data
    "Aircraft",
    "Airline",
    "Airport",
    "ScoredAirport",
    # Offers
    "ConditionRule",
    "Offer",
    "OfferConditions",
    "OfferRequest",
    "PricedOffer",
    "Segment",
    "Slice",
    # Search
    "FlightSearchParams",
    "FlightSearchResult",
    "OfferListParams",
    "OfferRequestParams",
    "PassengerSpec",
    "SliceSpec",
    # Orders
    "CardDetails",
    "IdentityDocument",
    "Order",
    "OrderCancellation",
    "OrderParams",
    "OrderPassenger",
    "Payment",
    # Payments
    "PaymentIntent",
    "PaymentIntentParams",
]
