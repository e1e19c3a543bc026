"""Core domain logic for the fortune lookup client.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import (
    FortuneError,
    HttpStatusFailure,
    InputValidationFailure,
    InvalidEndpoint,
    InvalidResponseEnvelope,
    RequestInFlightError,
    RequestSerializationFailure,
    ResponseDecodeFailure,
    StatusCategory,
    TransportFailure,
    Unclassified,
)
from .models import CalendarDate, FortuneRequest, Prefecture, ValidationIssue

__all__ = [
    "CalendarDate",
    "FortuneError",
    "FortuneRequest",
    "HttpStatusFailure",
    "InputValidationFailure",
    "InvalidEndpoint",
    "InvalidResponseEnvelope",
    "Prefecture",
    "RequestInFlightError",
    "RequestSerializationFailure",
    "ResponseDecodeFailure",
    "StatusCategory",
    "TransportFailure",
    "Unclassified",
    "ValidationIssue",
]
