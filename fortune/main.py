"""Composition root for the fortune lookup client.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here.

Module Structure:
- Configuration loading via config module
- Logging setup
- Adapter instantiation
- Core service initialization
"""

import logging
import sys

from fortune.adapters.api.client import FortuneAPIClient
from fortune.adapters.api.transport import HttpxTransport
from fortune.config import Settings, load_settings
from fortune.core.ports import TransportPort
from fortune.core.service import FortuneService


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def create_fortune_service(
    settings: Settings | None = None,
    transport: TransportPort | None = None,
) -> FortuneService:
    """Wire settings, transport, API client, and the lookup service.

    Args:
        settings: Settings to use. Loaded from the environment if omitted.
        transport: Transport to send requests with. Defaults to httpx.

    Returns:
        A FortuneService ready for execute()/fetch_fortune().
    """
    if settings is None:
        settings = load_settings()

    logger = logging.getLogger(__name__)
    logger.info(
        f"Creating fortune service for {settings.api_base_url} "
        f"(endpoint {settings.api_endpoint}, API version {settings.api_version})"
    )

    client = FortuneAPIClient(
        transport=transport if transport is not None else HttpxTransport(),
        base_url=settings.api_base_url,
        endpoint=settings.api_endpoint,
        api_version=settings.api_version,
        timeout_seconds=settings.request_timeout_seconds,
    )
    return FortuneService(gateway=client)
