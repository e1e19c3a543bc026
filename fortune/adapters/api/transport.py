"""httpx transport adapter.

Implements TransportPort with an httpx.AsyncClient that lives only for the
duration of one exchange and is closed on every exit path.
"""

import logging

import httpx

from fortune.core.ports import HttpRequest, HttpResponse, TransportPort

logger = logging.getLogger(__name__)


class HttpxTransport(TransportPort):
    """Sends requests with httpx; never retries."""

    def __init__(self, transport: httpx.AsyncBaseTransport | None = None):
        """Initialize the transport.

        Args:
            transport: Optional low-level httpx transport, e.g.
                httpx.MockTransport in tests. Defaults to the network.
        """
        self.transport = transport

    async def send(self, request: HttpRequest) -> HttpResponse:
        """Perform one round trip.

        Raises:
            httpx.HTTPError: If the exchange fails (connect, DNS, timeout).
        """
        async with httpx.AsyncClient(
            transport=self.transport,
            timeout=request.timeout_seconds,
        ) as client:
            try:
                response = await client.request(
                    request.method,
                    request.url,
                    headers=dict(request.headers),
                    content=request.body,
                )
            except httpx.HTTPError as e:
                logger.debug(f"HTTP exchange with {request.url} failed: {e}")
                raise

        logger.debug(f"{request.method} {request.url} -> {response.status_code}")
        return HttpResponse(
            status_code=response.status_code,
            body=response.content,
            headers=dict(response.headers),
        )
