"""Error taxonomy for the fortune lookup pipeline.

Every failure inside the pipeline is re-raised as exactly one subclass of
FortuneError before it leaves the orchestrator. Each subclass carries the
context needed for both a user-facing message and a diagnostic string.
"""

from enum import Enum

from .messages import DEFAULT_LANGUAGE, text


class StatusCategory(Enum):
    """Message category for a non-2xx HTTP status."""

    CLIENT = "client"
    SERVER = "server"
    UNEXPECTED = "unexpected"


class FortuneError(Exception):
    """Base class for all classified pipeline failures."""

    message_key = "unclassified"

    def __init__(self, cause: BaseException | None = None) -> None:
        self.cause = cause
        super().__init__(self.debug_description)

    def message(self, language: str | None = DEFAULT_LANGUAGE) -> str:
        """User-facing message in the given language."""
        return text(self.message_key, language)

    @property
    def debug_description(self) -> str:
        return "Unknown error"

    def _describe_cause(self) -> str:
        if self.cause is None:
            return "no cause"
        detail = str(self.cause)
        return f"{type(self.cause).__name__}: {detail}" if detail else type(self.cause).__name__


class InvalidEndpoint(FortuneError):
    """The service URL could not be built."""

    message_key = "invalid_endpoint"

    def __init__(self, url: str = "") -> None:
        self.url = url
        super().__init__()

    @property
    def debug_description(self) -> str:
        return f"Invalid URL: {self.url!r}" if self.url else "Invalid URL"


class RequestSerializationFailure(FortuneError):
    """The request body could not be encoded."""

    message_key = "request_serialization"

    @property
    def debug_description(self) -> str:
        return f"Encoding error: {self._describe_cause()}"


class TransportFailure(FortuneError):
    """The network exchange itself failed (DNS, refused, timeout, cancel)."""

    message_key = "transport"

    @property
    def debug_description(self) -> str:
        return f"Network error: {self._describe_cause()}"


class InvalidResponseEnvelope(FortuneError):
    """The transport returned something that is not a usable HTTP response."""

    message_key = "invalid_response"

    @property
    def debug_description(self) -> str:
        return "Invalid response from server"


class HttpStatusFailure(FortuneError):
    """The server answered with a status outside 200..299."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__()

    @property
    def category(self) -> StatusCategory:
        if 400 <= self.status_code <= 499:
            return StatusCategory.CLIENT
        if 500 <= self.status_code <= 599:
            return StatusCategory.SERVER
        return StatusCategory.UNEXPECTED

    def message(self, language: str | None = DEFAULT_LANGUAGE) -> str:
        return text(f"http_{self.category.value}", language, status_code=self.status_code)

    @property
    def debug_description(self) -> str:
        return f"HTTP error with status code: {self.status_code}"


class ResponseDecodeFailure(FortuneError):
    """The success body could not be decoded into a Prefecture."""

    message_key = "response_decode"

    @property
    def debug_description(self) -> str:
        return f"Decoding error: {self._describe_cause()}"


class InputValidationFailure(FortuneError):
    """The caller's inputs failed local validation; nothing was sent."""

    message_key = "input_validation"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__()

    @property
    def debug_description(self) -> str:
        return f"Validation error: {self.reason}"


class Unclassified(FortuneError):
    """A failure that matched no other classification."""

    @property
    def debug_description(self) -> str:
        if self.cause is None:
            return "Unknown error"
        return f"Unknown error: {self._describe_cause()}"


class RequestInFlightError(RuntimeError):
    """Raised when a lookup is started while another is still running.

    Not a FortuneError: the pipeline never ran, so there is nothing to
    classify.
    """


def classify_status(status_code: int) -> HttpStatusFailure | None:
    """Return None for 2xx statuses, otherwise the matching failure."""
    if 200 <= status_code <= 299:
        return None
    return HttpStatusFailure(status_code)
