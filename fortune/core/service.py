"""Fortune lookup orchestration.

This module runs one lookup end to end: build the request, validate it,
hand it to the gateway, and surface exactly one outcome.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import FortuneError, InputValidationFailure, RequestInFlightError, Unclassified
from .models import CalendarDate, FortuneRequest, Prefecture
from .ports import FortuneGatewayPort, FortunePort

logger = logging.getLogger(__name__)


class ServiceState(Enum):
    """Lifecycle of a single lookup.

    State transitions:
    - IDLE → VALIDATING: a lookup starts
    - VALIDATING → FAILED: the request failed validation
    - VALIDATING → SENDING: the request is valid
    - SENDING → SUCCEEDED: the gateway returned a Prefecture
    - SENDING → FAILED: the gateway raised a classified failure

    SUCCEEDED and FAILED are terminal for that lookup; the next lookup
    starts again from VALIDATING.
    """

    IDLE = "idle"
    VALIDATING = "validating"
    SENDING = "sending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class FortuneOutcome:
    """The result of fetch_fortune: exactly one of prefecture or error."""

    prefecture: Prefecture | None = None
    error: FortuneError | None = None

    def __post_init__(self) -> None:
        """Enforce that exactly one side is set."""
        if (self.prefecture is None) == (self.error is None):
            raise ValueError("FortuneOutcome needs exactly one of prefecture or error")

    @property
    def succeeded(self) -> bool:
        return self.prefecture is not None


class FortuneService(FortunePort):
    """Implements the fortune lookup use case.

    Uses ports but contains no adapter-specific logic. Concurrent lookups
    on the same instance are rejected with RequestInFlightError.
    """

    def __init__(self, gateway: FortuneGatewayPort):
        self.gateway = gateway
        self.state = ServiceState.IDLE

    @property
    def in_flight(self) -> bool:
        return self.state in {ServiceState.VALIDATING, ServiceState.SENDING}

    async def execute(
        self,
        name: str,
        birthday: CalendarDate,
        blood_type: str,
        today: CalendarDate | None = None,
    ) -> Prefecture:
        """Build, validate, and send one request.

        Steps:
        1. Reject if another lookup is in flight
        2. Build the FortuneRequest (today defaults to the local date)
        3. Validate; stop with InputValidationFailure if a check fails
        4. Fetch via the gateway
        5. Wrap anything unclassified so only FortuneError escapes

        Raises:
            FortuneError: The one classified failure for this lookup.
            RequestInFlightError: If a lookup is already running.
        """
        if self.in_flight:
            raise RequestInFlightError("A fortune lookup is already in progress")

        self._transition(ServiceState.VALIDATING)
        try:
            request = FortuneRequest(
                name=name,
                birthday=birthday,
                blood_type=blood_type,
                today=today if today is not None else CalendarDate.today(),
            )

            issue = request.validate()
            if issue is not None:
                raise InputValidationFailure(issue.reason)

            self._transition(ServiceState.SENDING)
            prefecture = await self.gateway.fetch_fortune(request)
        except FortuneError as e:
            self._fail(e)
            raise
        except Exception as e:
            error = Unclassified(e)
            self._fail(error)
            raise error from e
        except BaseException as e:
            # Cancellation or interpreter shutdown; release the in-flight slot.
            self._transition(ServiceState.FAILED)
            logger.warning(f"Fortune lookup aborted: {type(e).__name__}")
            raise

        self._transition(ServiceState.SUCCEEDED)
        logger.info(f"Fortune lookup succeeded: {prefecture.name}")
        return prefecture

    async def fetch_fortune(
        self,
        name: str,
        birthday: CalendarDate,
        blood_type: str,
        today: CalendarDate | None = None,
    ) -> FortuneOutcome:
        """Run execute() and return its result or classified error as a value.

        Raises:
            RequestInFlightError: If a lookup is already running.
        """
        try:
            prefecture = await self.execute(name, birthday, blood_type, today)
        except FortuneError as e:
            return FortuneOutcome(error=e)
        return FortuneOutcome(prefecture=prefecture)

    def _transition(self, state: ServiceState) -> None:
        logger.debug(f"Fortune lookup state: {self.state.value} -> {state.value}")
        self.state = state

    def _fail(self, error: FortuneError) -> None:
        self._transition(ServiceState.FAILED)
        logger.warning(f"Fortune lookup failed: {error.debug_description}")
