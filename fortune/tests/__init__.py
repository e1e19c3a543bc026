"""Test suite for the fortune lookup client.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No network, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - The API client against a fake transport
   - The httpx transport against httpx.MockTransport

3. fakes/: Port implementations for testing
   - In-memory implementations of TransportPort and FortuneGatewayPort
"""
