"""Reference data mirrored from the Duffel API: airports, airlines, aircraft."""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Airport(BaseModel):
    """
    Airport (or city-level place) as returned by ``/air/airports`` and
    embedded in offer slices and segments.
    """

    model_config = ConfigDict(extra="allow")

    id: str
    iata_code: Optional[str] = None
    icao_code: Optional[str] = None
    name: str
    city_name: Optional[str] = None
    iata_country_code: Optional[str] = None
    country_name: Optional[str] = None
    time_zone: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @property
    def country_code(self) -> Optional[str]:
        return self.iata_country_code


class ScoredAirport(Airport):
    """Airport search result annotated with its local relevance score."""

    relevance_score: int


class Airline(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    iata_code: Optional[str] = None
    icao_code: Optional[str] = None
    name: str
    logo_symbol_url: Optional[str] = None
    logo_lockup_url: Optional[str] = None


class Aircraft(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str
    iata_code: Optional[str] = None
