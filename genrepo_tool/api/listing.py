"""
Directory listing operations for the generic repository API.

This module fetches one page of a directory listing and decodes it into
typed records. Pagination across pages is driven by the caller.
"""

import logging
from typing import Any, Callable

import httpx
from pydantic import ValidationError

from ..exceptions import DecodeError, MissingPayloadError, RemoteApplicationError
from ..models.api import ListingPage, ListResponse
from ..utils.constants import LIST_ENDPOINT, MAX_PAGE_SIZE, MIN_PAGE_SIZE


class ListingMixin:
    """Mixin that provides the paginated directory listing."""

    # Required attributes
    _url: Callable[[str], str]
    _send: Callable[..., httpx.Response]
    _check_response: Callable[[httpx.Response, str], None]
    session: Any  # httpx.Client

    def list_directory(self, full_path: str, page: int, page_size: int) -> ListingPage:
        """
        Fetch one page of a directory listing.

        Args:
            full_path: Normalized "repo[/dir]" path
            page: 1-based page number
            page_size: Records per page, 1 to 1024

        Returns:
            Decoded ListingPage

        Raises:
            TransportError: If the server cannot be reached
            RemoteStatusError: On a non-2xx status
            DecodeError: If the body is not a valid listing envelope
            RemoteApplicationError: If the envelope carries a non-zero code
            MissingPayloadError: If a success envelope has no data
        """
        if page < 1:
            raise ValueError(f"page must be >= 1: {page}")
        if not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
            raise ValueError(f"page_size must be between {MIN_PAGE_SIZE} and {MAX_PAGE_SIZE}: {page_size}")

        operation = f"list {full_path} (page {page})"
        request = self.session.build_request(
            "GET",
            self._url(LIST_ENDPOINT),
            params={"full_path": full_path, "pagesize": page_size, "page": page},
        )
        response = self._send(request, operation)
        self._check_response(response, operation)

        try:
            envelope = ListResponse.model_validate_json(response.content)
        except ValidationError as e:
            logging.debug("Listing response content: %s", response.text[:500])
            raise DecodeError(f"Invalid listing response: {e}", operation=operation, target=str(request.url)) from e

        if not envelope.is_successful:
            raise RemoteApplicationError(envelope.code, envelope.msg or "", operation=operation, target=full_path)

        if envelope.data is None:
            raise MissingPayloadError("Listing response has no data", operation=operation, target=full_path)

        logging.debug(
            "Listed %s page %d: %d record(s), pagination=%s, total_pages=%s",
            full_path,
            page,
            len(envelope.data.records or []),
            envelope.data.pagination,
            envelope.data.total_pages,
        )
        return envelope.data


__all__ = ["ListingMixin"]
