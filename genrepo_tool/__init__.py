"""
genrepo-tool - A Python client for generic artifact repositories.

This package downloads the newest artifact matching a name filter from a
paginated repository listing, and uploads local files with an expiry policy
while reconciling server-side checksums with locally computed digests.
"""

from ._version import __version__

__author__ = "Build Infrastructure Team"

# Import main classes and functions for easy access
from .api import GenericRepoClient
from .exceptions import GenericRepoError
from .utils import (
    create_session,
    setup_logging,
    WrappingFormatter,
)
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "GenericRepoClient",
    "GenericRepoError",
    "setup_logging",
    "WrappingFormatter",
    "create_session",
    "cli_main",
    "cli_group",
]
