"""
Search inputs and outputs.

Parameter models validate caller intent before anything is sent upstream.
"""

from datetime import date
from typing import Annotated, Any, Dict, List, Literal, Optional

from pydantic import AfterValidator, BaseModel, Field, model_validator

from src.booking_gateway.schemas.envelope import ResponseMeta
from src.booking_gateway.schemas.offers import PricedOffer

CabinClass = Literal["economy", "premium_economy", "business", "first"]
PassengerType = Literal["adult", "child", "infant_without_seat"]
OfferSort = Literal["total_amount", "-total_amount", "total_duration", "-total_duration"]


def _iata(value: str) -> str:
    value = value.strip().upper()
    if len(value) != 3 or not value.isalpha():
        raise ValueError(f"invalid IATA code: {value!r}")
    return value


IataCode = Annotated[str, AfterValidator(_iata)]


class SliceSpec(BaseModel):
    origin: IataCode
    destination: IataCode
    departure_date: date


class PassengerSpec(BaseModel):
    type: PassengerType = "adult"
    age: Optional[int] = Field(default=None, ge=0)


class OfferRequestParams(BaseModel):
    """Search criteria for ``POST /air/offer_requests``."""

    slices: List[SliceSpec] = Field(min_length=1)
    passengers: List[PassengerSpec] = Field(min_length=1)
    cabin_class: CabinClass = "economy"
    max_connections: Optional[int] = Field(default=None, ge=0)
    preferred_airlines: Optional[List[str]] = None

    def to_payload(self) -> Dict[str, Any]:
        return {"data": self.model_dump(mode="json", exclude_none=True)}


class OfferListParams(BaseModel):
    limit: Optional[int] = Field(default=None, ge=1)
    sort: Optional[OfferSort] = None
    max_connections: Optional[int] = Field(default=None, ge=0)
    airlines: Optional[List[str]] = None


class FlightSearchParams(BaseModel):
    """Input of the composite flight search."""

    origin: IataCode
    destination: IataCode
    departure_date: date
    return_date: Optional[date] = None
    adults: int = Field(default=1, ge=1)
    children: int = Field(default=0, ge=0)
    infants: int = Field(default=0, ge=0)
    cabin_class: CabinClass = "economy"

    @model_validator(mode="after")
    def check_dates(self) -> "FlightSearchParams":
        if self.return_date is not None and self.return_date < self.departure_date:
            raise ValueError("return_date must not be before departure_date")
        return self

    def build_passengers(self) -> List[PassengerSpec]:
        return (
            [PassengerSpec(type="adult") for _ in range(self.adults)]
            + [PassengerSpec(type="child") for _ in range(self.children)]
            + [PassengerSpec(type="infant_without_seat") for _ in range(self.infants)]
        )

    def build_slices(self) -> List[SliceSpec]:
        slices = [
            SliceSpec(
                origin=self.origin,
                destination=self.destination,
                departure_date=self.departure_date,
            )
        ]
        if self.return_date is not None:
            slices.append(
                SliceSpec(
                    origin=self.destination,
                    destination=self.origin,
                    departure_date=self.return_date,
                )
            )
        return slices


class FlightSearchResult(BaseModel):
    data: List[PricedOffer]
    meta: Optional[ResponseMeta] = None
