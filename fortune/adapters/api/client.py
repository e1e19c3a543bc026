"""Fortune API client.

Implements FortuneGatewayPort against the remote fortune service: builds
the endpoint and request, performs one exchange through a TransportPort,
and classifies or decodes the answer.
"""

import asyncio
import logging

import httpx

from fortune.core.errors import (
    InvalidEndpoint,
    InvalidResponseEnvelope,
    TransportFailure,
    classify_status,
)
from fortune.core.models import FortuneRequest, Prefecture
from fortune.core.ports import FortuneGatewayPort, HttpRequest, HttpResponse, TransportPort

from .schemas import decode_prefecture, encode_request

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://yumemi-ios-junior-engineer-codecheck.app.swift.cloud"
DEFAULT_ENDPOINT = "/my_fortune"
DEFAULT_API_VERSION = "v1"
DEFAULT_TIMEOUT_SECONDS = 30.0


def build_endpoint_url(base_url: str, endpoint: str) -> str:
    """Append endpoint to the path of base_url with exactly one slash between them.

    Any query string on base_url stays a query string; a fragment is dropped.

    Raises:
        InvalidEndpoint: If base_url is not an absolute http(s) URL.
    """
    try:
        parsed = httpx.URL(base_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise InvalidEndpoint(base_url) from e
    if parsed.scheme not in {"http", "https"} or not parsed.host:
        raise InvalidEndpoint(base_url)

    root = parsed.path.rstrip("/")
    path = endpoint.strip("/")
    joined = f"{root}/{path}" if path else root or "/"
    try:
        return str(parsed.copy_with(path=joined, fragment=None))
    except httpx.InvalidURL as e:
        raise InvalidEndpoint(base_url) from e


class FortuneAPIClient(FortuneGatewayPort):
    """Client for POST /my_fortune."""

    def __init__(
        self,
        transport: TransportPort,
        base_url: str = DEFAULT_BASE_URL,
        endpoint: str = DEFAULT_ENDPOINT,
        api_version: str = DEFAULT_API_VERSION,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.transport = transport
        self.base_url = base_url
        self.endpoint = endpoint
        self.api_version = api_version
        self.timeout_seconds = timeout_seconds

    def build_request(self, request: FortuneRequest) -> HttpRequest:
        """Build the HTTP request for a fortune lookup.

        Raises:
            InvalidEndpoint: If the configured base URL is malformed.
            RequestSerializationFailure: If the body cannot be encoded.
        """
        return HttpRequest(
            method="POST",
            url=build_endpoint_url(self.base_url, self.endpoint),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
                "API-Version": self.api_version,
            },
            body=encode_request(request),
            timeout_seconds=self.timeout_seconds,
        )

    async def fetch_fortune(self, request: FortuneRequest) -> Prefecture:
        """Send the request and return the decoded Prefecture.

        Raises:
            InvalidEndpoint: If the URL could not be built.
            RequestSerializationFailure: If the body could not be encoded.
            TransportFailure: If the exchange failed or was cancelled.
            InvalidResponseEnvelope: If the transport returned no usable response.
            HttpStatusFailure: If the status is outside 200..299.
            ResponseDecodeFailure: If the body is not a valid Prefecture.
        """
        http_request = self.build_request(request)

        try:
            response = await self.transport.send(http_request)
        except asyncio.CancelledError as e:
            logger.warning(f"Request to {http_request.url} was cancelled")
            raise TransportFailure(e) from e
        except Exception as e:
            raise TransportFailure(e) from e

        self._validate_envelope(response)

        failure = classify_status(response.status_code)
        if failure is not None:
            raise failure

        return decode_prefecture(response.body)

    @staticmethod
    def _validate_envelope(response: object) -> None:
        if not isinstance(response, HttpResponse):
            raise InvalidResponseEnvelope()
        status = response.status_code
        if isinstance(status, bool) or not isinstance(status, int) or not 100 <= status <= 599:
            raise InvalidResponseEnvelope()
        if not isinstance(response.body, (bytes, bytearray)):
            raise InvalidResponseEnvelope()
