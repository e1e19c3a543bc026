"""Port interfaces for the fortune lookup client.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - FortuneGatewayPort: Send a validated request, return a Prefecture
   - TransportPort: Perform exactly one raw HTTP exchange

2. **Driving Ports** (external callers call into core)
   - FortunePort: Entry point used by the presentation layer
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from .models import CalendarDate, FortuneRequest, Prefecture


@dataclass(frozen=True)
class HttpRequest:
    """A fully built HTTP request, ready for a transport."""

    method: str
    url: str
    headers: Mapping[str, str]
    body: bytes
    timeout_seconds: float

    def __post_init__(self) -> None:
        """Convert headers to a read-only proxy."""
        if isinstance(self.headers, dict):
            object.__setattr__(self, "headers", MappingProxyType(self.headers))


@dataclass(frozen=True)
class HttpResponse:
    """Raw result of one HTTP exchange."""

    status_code: int
    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class TransportPort(ABC):
    """Port for performing a single HTTP round trip.

    Implementations must not retry and must not cache. Any failure of the
    exchange itself (DNS, refused connection, timeout, cancellation) is
    raised as an exception; the caller classifies it.
    """

    @abstractmethod
    async def send(self, request: HttpRequest) -> HttpResponse:
        """Send the request and return the raw response.

        Args:
            request: The request to send.

        Returns:
            HttpResponse with the status code and raw body bytes, for any
            status, including non-2xx.

        Raises:
            Exception: If the exchange could not be completed.
        """


class FortuneGatewayPort(ABC):
    """Port for fetching a fortune from the remote service."""

    @abstractmethod
    async def fetch_fortune(self, request: FortuneRequest) -> Prefecture:
        """Send a validated request and decode the answer.

        Args:
            request: A FortuneRequest that already passed validation.

        Returns:
            The decoded Prefecture.

        Raises:
            FortuneError: One classified failure per call.
        """


# ============================================================================
# DRIVING PORTS (External callers call into core)
# ============================================================================


class FortunePort(ABC):
    """Port for running a fortune lookup from the presentation layer."""

    @property
    @abstractmethod
    def in_flight(self) -> bool:
        """True while a lookup is being validated or sent."""

    @abstractmethod
    async def execute(
        self,
        name: str,
        birthday: CalendarDate,
        blood_type: str,
        today: CalendarDate | None = None,
    ) -> Prefecture:
        """Validate inputs, fetch, and return the Prefecture.

        Args:
            name: Subject name, must be non-empty.
            birthday: Birth date, with year.
            blood_type: One of a, b, ab, o (any case).
            today: Reference date; defaults to the current local day.

        Returns:
            The decoded Prefecture.

        Raises:
            FortuneError: The single classified failure for this call.
            RequestInFlightError: If another lookup is still running.
        """
