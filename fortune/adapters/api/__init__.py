"""Adapters for the remote fortune API.

- client: FortuneAPIClient, the FortuneGatewayPort implementation
- schemas: pydantic wire models, request encoder and response decoder
- transport: HttpxTransport, the TransportPort implementation
"""

from .client import FortuneAPIClient, build_endpoint_url
from .schemas import decode_prefecture, encode_request
from .transport import HttpxTransport

__all__ = [
    "FortuneAPIClient",
    "HttpxTransport",
    "build_endpoint_url",
    "decode_prefecture",
    "encode_request",
]
