"""
Session utilities for generic repository operations.

This module provides the factory for the single HTTP client that is built once
per run and handed to every component that talks to the server.
"""

import importlib.util
import logging

import httpx
from httpx import HTTPTransport

from .constants import CONNECT_TIMEOUT, TRANSFER_TIMEOUT

# Failed requests are never retried, not even at the connection level
MAX_RETRIES = 0


def create_session(timeout: float = TRANSFER_TIMEOUT, max_connections: int = 10) -> httpx.Client:
    """
    Create an httpx client for talking to the repository server.

    Args:
        timeout: Read/write/pool timeout in seconds (default: 300.0)
        max_connections: Maximum number of connections in the pool (default: 10)

    Returns:
        Configured httpx.Client object with:
        - No automatic retries
        - HTTP/2 support when the h2 package is installed
        - Connection pooling
        - Timeout configuration

    Example:
        >>> client = create_session()
        >>> response = client.get(url, auth=httpx.BasicAuth("user", "token"))
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max_connections,
    )

    # Configure timeout (total, connect)
    timeout_config = httpx.Timeout(timeout, connect=CONNECT_TIMEOUT)

    use_http2 = importlib.util.find_spec("h2") is not None
    if not use_http2:
        logging.debug("HTTP/2 support not available (h2 package not installed)")

    transport = HTTPTransport(limits=limits, retries=MAX_RETRIES, http2=use_http2)

    return httpx.Client(
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
    )


__all__ = ["create_session", "MAX_RETRIES"]
