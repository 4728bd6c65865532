"""
Response envelope shared by every Duffel endpoint.

Success bodies look like ``{"data": ..., "meta": {...}}``; failures look
like ``{"errors": [{"type", "title", "message", "code", ...}]}``.
"""

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class Cursors(BaseModel):
    before: Optional[str] = None
    after: Optional[str] = None


class ResponseMeta(BaseModel):
    """Pagination and tracing metadata returned next to ``data``."""

    model_config = ConfigDict(extra="allow")

    request_id: Optional[str] = None
    status: Optional[int] = None
    limit: Optional[int] = None
    before: Optional[str] = None
    after: Optional[str] = None
    cursors: Optional[Cursors] = None


class DuffelResponse(BaseModel, Generic[T]):
    """Typed success envelope, e.g. ``DuffelResponse[List[Airline]]``."""

    data: T
    meta: Optional[ResponseMeta] = None
