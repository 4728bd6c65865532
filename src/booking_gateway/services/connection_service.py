"""
Connection Check Service - best-effort capability probing.

Each probe is a cheap read-only call. Probes run one after another and a
failing probe only removes its capability from the report.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Awaitable, Callable, List, Optional, Tuple

if TYPE_CHECKING:
    from src.booking_gateway.ports.flight_booking_api import FlightBookingAPI

logger = logging.getLogger(__name__)

Probe = Tuple[str, Callable[[], Awaitable[Any]]]


@dataclass(frozen=True)
class ConnectionStatus:
    """
    Outcome of a connection check.

    Attributes:
        connected: True if at least one probe succeeded.
        capabilities: Names of the probes that succeeded, in probe order.
    """

    connected: bool
    capabilities: List[str] = field(default_factory=list)


class ConnectionCheckService:
    """
    Reports which parts of the booking API are reachable with the
    configured credential.

    Default probes:
    - airlines: ``list_airlines(limit=1)``
    - airports: ``search_airports("LHR", limit=1)``
    """

    def __init__(
        self,
        api: FlightBookingAPI,
        probes: Optional[List[Probe]] = None,
    ) -> None:
        self._api = api
        self._probes = probes if probes is not None else self._default_probes()

    def _default_probes(self) -> List[Probe]:
        return [
            ("airlines", lambda: self._api.list_airlines(limit=1)),
            ("airports", lambda: self._api.search_airports("LHR", limit=1)),
        ]

    async def test_connection(self) -> ConnectionStatus:
        """
        Run every probe and collect the ones that succeed.

        Never raises; probe failures are logged and skipped.
        """
        capabilities: List[str] = []
        for name, probe in self._probes:
            try:
                await probe()
            except Exception as e:
                logger.warning("Connection probe '%s' failed: %s", name, e)
                continue
            capabilities.append(name)

        status = ConnectionStatus(connected=bool(capabilities), capabilities=capabilities)
        logger.info(
            "%s connection check: connected=%s capabilities=%s",
            self._api.name,
            status.connected,
            status.capabilities,
        )
        return status
