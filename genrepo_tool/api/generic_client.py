"""
Generic repository API client.

This module provides the GenericRepoClient class, composed from mixins:

Mixins:
    - ListingMixin: Paginated directory listing
    - TransferMixin: Streaming artifact download and upload

The client owns a single httpx.Client built once per run. It is passed by
reference to every component that talks to the server; there is no
module-level client.
"""

# Standard library imports
import logging
from typing import Any, Dict, Optional

# Third-party imports
import httpx

# Local imports
from ..exceptions import RemoteStatusError, TransferInterruptedError, TransportError
from ..models.config import AuthCredentials, ToolConfig
from ..utils import create_session
from ..utils.config_manager import ConfigManager
from ..utils.constants import DEFAULT_BASE_URL, TRANSFER_PREFIX
from ..utils.path_utils import build_artifact_url, join_remote_path
from .listing import ListingMixin
from .transfer import TransferMixin

# Request headers never written to the log
SENSITIVE_HEADERS = ("authorization", "cookie", "x-api-key")


class GenericRepoClient(ListingMixin, TransferMixin):
    """
    A client for a generic artifact repository server.

    Endpoints used:
    - GET  {base_url}/mirrors/api/generic/list   directory listing
    - GET  {base_url}/repository/generic/{repo}/{path}   download
    - PUT  {base_url}/repository/generic/{repo}/{path}   upload

    All requests use HTTP Basic authentication with one static credential
    pair. Requests are never retried.
    """

    def __init__(
        self,
        credentials: AuthCredentials,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[httpx.Client] = None,
    ) -> None:
        """Initialize the client.

        Args:
            credentials: Username/token pair for Basic authentication
            base_url: Server base URL
            session: Optional pre-built httpx client (a new one is created otherwise)
        """
        self.credentials = credentials
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else create_session()
        self._auth = credentials.as_httpx_auth()
        logging.debug("GenericRepoClient initialized for %s", self.base_url)

    @classmethod
    def create_from_config(cls, config: ToolConfig, session: Optional[httpx.Client] = None) -> "GenericRepoClient":
        """Create a client from an already validated configuration."""
        return cls(config.auth, base_url=config.server.base_url, session=session)

    @classmethod
    def create_from_config_file(cls, path: Optional[str] = None) -> "GenericRepoClient":
        """
        Create a client from a TOML configuration file.

        Raises:
            ConfigError: If the file cannot be loaded or validated
        """
        return cls.create_from_config(ConfigManager(path).load_config())

    def close(self) -> None:
        """Close the session and release all connections."""
        if self.session and not self.session.is_closed:
            self.session.close()
            logging.debug("GenericRepoClient session closed and connections released")

    def __enter__(self) -> "GenericRepoClient":
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        """Context manager exit - ensures session is closed."""
        self.close()

    @property
    def request_params(self) -> Dict[str, Any]:
        """Default keyword arguments for every request (authentication)."""
        return {"auth": self._auth}

    def _url(self, endpoint: str) -> str:
        """
        Build a fully qualified URL for an API endpoint.

        Args:
            endpoint: Endpoint path relative to the base URL

        Returns:
            Absolute URL
        """
        return f"{self.base_url}/{join_remote_path(endpoint)}"

    def artifact_url(self, repo: str, relative_path: str) -> str:
        """Absolute URL of an artifact inside a repository."""
        return build_artifact_url(self.base_url, TRANSFER_PREFIX, repo, relative_path)

    def _send(self, request: httpx.Request, operation: str, *, stream: bool = False) -> httpx.Response:
        """
        Send a prepared request, mapping httpx transport failures.

        A failure while writing the request becomes TransferInterruptedError,
        any other transport failure becomes TransportError.

        Args:
            request: Request built with self.session.build_request
            operation: Description of the operation for error messages
            stream: Leave the body unread so it can be streamed

        Returns:
            The response, whatever its status code
        """
        logging.debug("%s %s", request.method, request.url)
        try:
            return self.session.send(request, stream=stream, **self.request_params)
        except (httpx.WriteError, httpx.WriteTimeout) as e:
            raise TransferInterruptedError(
                f"Sending the request failed: {e}", operation=operation, target=str(request.url)
            ) from e
        except httpx.TransportError as e:
            raise TransportError(str(e) or type(e).__name__, operation=operation, target=str(request.url)) from e

    def _log_request_headers(self, response: httpx.Response) -> None:
        """Log request headers with sensitive data redacted."""
        if response.request is not None:
            safe_headers = dict(response.request.headers)
            for sensitive_key in SENSITIVE_HEADERS:
                if sensitive_key in safe_headers:
                    safe_headers[sensitive_key] = "[REDACTED]"
            logging.debug("  Request Headers: %s", safe_headers)

    def _check_response(self, response: httpx.Response, operation: str) -> None:
        """
        Raise RemoteStatusError for any non-2xx response.

        The body must already be read; it is attached to the error for diagnostics.
        """
        if response.is_success:
            return

        logging.debug("Failed to %s: %s %s", operation, response.status_code, response.url)
        self._log_request_headers(response)
        raise RemoteStatusError(response.status_code, response.text, operation=operation, target=str(response.url))


__all__ = ["GenericRepoClient"]
