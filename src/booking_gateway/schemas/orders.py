"""
Booking (order) schemas.

Payment card data is forwarded verbatim to Duffel. It is never stored or
validated beyond shape here, and is kept out of model reprs.
"""

from datetime import date, datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

Title = Literal["mr", "ms", "mrs", "miss", "dr"]
DocumentType = Literal["passport", "identity_card", "driving_licence"]
PaymentType = Literal["balance", "card", "arc_bsp_cash"]


class IdentityDocument(BaseModel):
    type: DocumentType
    unique_identifier: str = Field(repr=False)
    issuing_country_code: str = Field(min_length=2, max_length=2)
    expires_on: Optional[date] = None


class OrderPassenger(BaseModel):
    id: Optional[str] = None
    title: Title = "mr"
    given_name: str = Field(min_length=1)
    family_name: str = Field(min_length=1)
    born_on: date
    email: Optional[str] = None
    phone_number: Optional[str] = None
    identity_documents: List[IdentityDocument] = Field(default_factory=list)


class CardDetails(BaseModel):
    number: str = Field(repr=False)
    expiry_month: str
    expiry_year: str
    cvc: str = Field(repr=False)
    name: str
    address_line_1: str
    address_city: str
    address_region: Optional[str] = None
    address_postal_code: str
    address_country_code: str


class Payment(BaseModel):
    type: PaymentType
    amount: str
    currency: str = Field(min_length=3, max_length=3)
    card: Optional[CardDetails] = None


class OrderParams(BaseModel):
    """Booking request for ``POST /air/orders``."""

    selected_offers: List[str] = Field(min_length=1)
    passengers: List[OrderPassenger] = Field(min_length=1)
    payments: List[Payment] = Field(min_length=1)
    metadata: Optional[Dict[str, Any]] = None

    def to_payload(self, default_source: str) -> Dict[str, Any]:
        data = self.model_dump(mode="json", exclude_none=True)
        data["metadata"] = {"source": default_source} if self.metadata is None else self.metadata
        return {"data": data}


class Order(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    booking_reference: Optional[str] = None
    total_amount: Optional[str] = None
    total_currency: Optional[str] = None
    created_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None


class OrderCancellation(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    order_id: str
    refund_amount: Optional[str] = None
    refund_currency: Optional[str] = None
    expires_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
