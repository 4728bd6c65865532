"""
Relevance ranking for airport search results.

Duffel's airport search is broad, so candidates are re-scored locally
against the free-text query. Scores are additive: an exact city match also
counts as a prefix and a substring match.
"""

from dataclasses import dataclass
from typing import Iterable, List

from src.booking_gateway.schemas.reference import Airport, ScoredAirport

DEFAULT_RESULT_LIMIT = 8


@dataclass(frozen=True)
class RelevanceWeights:
    """
    Points awarded per match type.

    Attributes:
        city_exact: City name equals the query.
        iata_exact: IATA code equals the query.
        city_prefix: City name starts with the query.
        city_contains: City name contains the query.
        name_contains: Airport name contains the query.
        iata_contains: IATA code contains the query.
    """

    city_exact: int = 100
    iata_exact: int = 100
    city_prefix: int = 50
    city_contains: int = 25
    name_contains: int = 15
    iata_contains: int = 30


DEFAULT_RELEVANCE_WEIGHTS = RelevanceWeights()


def score_airport(
    airport: Airport,
    query: str,
    weights: RelevanceWeights = DEFAULT_RELEVANCE_WEIGHTS,
) -> int:
    """
    Case-insensitive relevance of ``airport`` for ``query``.

    The query is matched as given, whitespace included, and a missing
    attribute never matches. An empty query is a prefix and substring of
    every present attribute.
    """
    q = query.lower()
    city = airport.city_name.lower() if airport.city_name is not None else None
    iata = airport.iata_code.lower() if airport.iata_code is not None else None
    name = airport.name.lower() if airport.name is not None else None

    score = 0
    if city is not None:
        if city == q:
            score += weights.city_exact
        if city.startswith(q):
            score += weights.city_prefix
        if q in city:
            score += weights.city_contains
    if iata is not None:
        if iata == q:
            score += weights.iata_exact
        if q in iata:
            score += weights.iata_contains
    if name is not None and q in name:
        score += weights.name_contains
    return score


def rank_airports(
    airports: Iterable[Airport],
    query: str,
    limit: int = DEFAULT_RESULT_LIMIT,
    weights: RelevanceWeights = DEFAULT_RELEVANCE_WEIGHTS,
) -> List[ScoredAirport]:
    """
    Score, filter and order airport candidates.

    Args:
        airports: Candidates in upstream order.
        query: Free-text search query.
        limit: Maximum number of results. Falsy values fall back to
            DEFAULT_RESULT_LIMIT.
        weights: Scoring weights.

    Returns:
        Airports with a positive score, highest first. Ties keep upstream
        order.
    """
    limit = limit or DEFAULT_RESULT_LIMIT

    scored: List[ScoredAirport] = []
    for airport in airports:
        score = score_airport(airport, query, weights)
        if score <= 0:
            continue
        scored.append(
            ScoredAirport.model_validate(
                {**airport.model_dump(), "relevance_score": score}
            )
        )

    scored.sort(key=lambda a: a.relevance_score, reverse=True)
    return scored[:limit]
