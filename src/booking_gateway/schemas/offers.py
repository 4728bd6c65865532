"""
Offer schemas.

An Offer is a perishable, priced itinerary quote produced by an offer
request. It is read-only to this library and valid only until
``expires_at``.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from src.booking_gateway.schemas.reference import Aircraft, Airline, Airport


class Segment(BaseModel):
    """A single flown leg operated by one aircraft/flight number."""

    model_config = ConfigDict(extra="allow")

    id: str
    origin: Airport
    destination: Airport
    departing_at: datetime
    arriving_at: datetime
    marketing_carrier: Airline
    operating_carrier: Optional[Airline] = None
    marketing_carrier_flight_number: Optional[str] = None
    aircraft: Optional[Aircraft] = None

    @property
    def flight_number(self) -> Optional[str]:
        return self.marketing_carrier_flight_number


class Slice(BaseModel):
    """One directional leg of an itinerary (outbound or return)."""

    model_config = ConfigDict(extra="allow")

    id: str
    origin: Airport
    destination: Airport
    departure_datetime: Optional[datetime] = None
    arrival_datetime: Optional[datetime] = None
    duration: Optional[str] = None
    segments: List[Segment] = Field(default_factory=list)

    @property
    def num_stops(self) -> int:
        return max(len(self.segments) - 1, 0)


class ConditionRule(BaseModel):
    model_config = ConfigDict(extra="allow")

    allowed: bool
    penalty_amount: Optional[str] = None


class OfferConditions(BaseModel):
    model_config = ConfigDict(extra="allow")

    change_before_departure: Optional[ConditionRule] = None
    cancel_before_departure: Optional[ConditionRule] = None


class Offer(BaseModel):
    """Upstream offer, amounts as the decimal strings Duffel sends."""

    model_config = ConfigDict(extra="allow")

    id: str
    owner: Airline
    slices: List[Slice] = Field(default_factory=list)
    total_amount: str
    total_currency: str
    tax_amount: Optional[str] = None
    base_amount: Optional[str] = None
    expires_at: datetime
    conditions: Optional[OfferConditions] = None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """
        Check whether the quote has perished.

        Naive datetimes (``expires_at`` or ``now``) are treated as UTC.

        Args:
            now: Reference time. Defaults to the current UTC time.

        Returns:
            True once ``expires_at`` is reached; the offer must not be booked.
        """
        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        expires_at = self.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        return now >= expires_at


class PricedOffer(Offer):
    """
    Offer after the business pricing transform.

    Attributes:
        original_amount: Untransformed upstream ``total_amount``.
        total_amount: Transformed amount, two decimal places.
        display_price: Transformed amount as a Decimal.
    """

    original_amount: str
    display_price: Decimal


class OfferRequest(BaseModel):
    """Upstream representation of a submitted search."""

    model_config = ConfigDict(extra="allow")

    id: str
    cabin_class: Optional[str] = None
    live_mode: Optional[bool] = None
    created_at: Optional[datetime] = None
