"""Configuration models for genrepo-tool."""

import httpx
from pydantic import ConfigDict, Field, SecretStr, field_validator

from ..utils.constants import DEFAULT_BASE_URL
from .base import GenericRepoBaseModel


class AuthCredentials(GenericRepoBaseModel):
    """
    Static credential pair used for HTTP Basic authentication.

    The token is kept as a SecretStr so it never shows up in reprs or logs.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    username: str = Field(min_length=1)
    token: SecretStr

    def as_httpx_auth(self) -> httpx.BasicAuth:
        """Build the httpx auth object for these credentials."""
        return httpx.BasicAuth(self.username, self.token.get_secret_value())


class ServerSettings(GenericRepoBaseModel):
    """Server location settings."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    base_url: str = DEFAULT_BASE_URL

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://: {value}")
        return value.rstrip("/")


class ToolConfig(GenericRepoBaseModel):
    """
    Parsed configuration file.

    Attributes:
        auth: Credentials for the repository server
        server: Optional server settings
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    auth: AuthCredentials
    server: ServerSettings = Field(default_factory=ServerSettings)


__all__ = ["AuthCredentials", "ServerSettings", "ToolConfig"]
