"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without network access:

- FakeTransportPort: Canned HTTP responses, captured requests
- FakeFortuneGatewayPort: Canned Prefecture or error, captured requests
"""

from .gateway import FakeFortuneGatewayPort
from .transport import FakeTransportPort

__all__ = [
    "FakeFortuneGatewayPort",
    "FakeTransportPort",
]
