"""Streaming transfer operations for the generic repository API.

This module handles the HTTP side of artifact downloads and uploads. Bodies
are streamed in both directions; neither side is buffered in memory.
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator

import httpx

from ..utils.constants import EXPIRES_HEADER


class TransferMixin:
    """Mixin that provides artifact download and upload requests."""

    # Required attributes
    _send: Callable[..., httpx.Response]
    _check_response: Callable[[httpx.Response, str], None]
    session: Any  # httpx.Client

    @contextmanager
    def stream_artifact(self, url: str) -> Iterator[httpx.Response]:
        """
        Open a streaming GET for an artifact.

        The response is only yielded for a 2xx status; otherwise the body is
        read eagerly and attached to the raised error. The response is closed
        when the context exits.

        Args:
            url: Absolute artifact URL

        Yields:
            Response whose body has not been read yet

        Raises:
            TransportError: If the server cannot be reached
            RemoteStatusError: On a non-2xx status
        """
        operation = "download artifact"
        request = self.session.build_request("GET", url)
        response = self._send(request, operation, stream=True)
        try:
            if not response.is_success:
                try:
                    response.read()
                except httpx.HTTPError as e:
                    logging.debug("Could not read error body from %s: %s", url, e)
                    response._content = b""  # pylint: disable=protected-access
                self._check_response(response, operation)
            yield response
        finally:
            response.close()

    def put_artifact(
        self, url: str, content: Iterable[bytes], *, content_length: int, expires_days: int
    ) -> httpx.Response:
        """
        Upload an artifact with a streamed body.

        Args:
            url: Absolute artifact URL
            content: Iterable producing the file's bytes
            content_length: Exact number of bytes content will produce
            expires_days: Retention in days, 0 keeps the file forever

        Returns:
            Response with its body read (2xx only)

        Raises:
            TransportError: If the server cannot be reached
            TransferInterruptedError: If sending the body fails midway
            RemoteStatusError: On a non-2xx status
        """
        operation = "upload artifact"
        headers = {
            EXPIRES_HEADER: str(expires_days),
            "Content-Length": str(content_length),
        }
        request = self.session.build_request("PUT", url, content=content, headers=headers)
        response = self._send(request, operation)
        self._check_response(response, operation)
        return response


__all__ = ["TransferMixin"]
