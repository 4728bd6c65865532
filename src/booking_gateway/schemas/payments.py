"""
Payment intent schemas.

A payment intent collects a card payment for Duffel balance top-ups before
an order is paid from balance. Card details never pass through here; the
client-side component uses ``client_token`` to collect them.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class PaymentIntentParams(BaseModel):
    amount: str = Field(pattern=r"^\d+(\.\d{1,2})?$")
    currency: str = Field(default="USD", min_length=3, max_length=3)

    def to_payload(self) -> Dict[str, Any]:
        return {"data": {"amount": self.amount, "currency": self.currency.upper()}}


class PaymentIntent(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    amount: Optional[str] = None
    currency: Optional[str] = None
    status: Optional[str] = None
    client_token: Optional[str] = Field(default=None, repr=False)
    confirmed_at: Optional[datetime] = None
    live_mode: Optional[bool] = None
