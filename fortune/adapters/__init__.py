"""External adapters for the fortune lookup client.

This package contains all external dependencies (httpx, pydantic wire
schemas) and provides implementations of the core port interfaces.

Adapter Organization:

- api/: Fortune API client, wire schemas, and the httpx transport
"""
