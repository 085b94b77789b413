"""
Central constants for the genrepo-tool package.

This module consolidates all constants used throughout the codebase
to eliminate magic numbers and strings.
"""

# ============================================================================
# Server and Endpoint Constants
# ============================================================================

# Mirror server hosting the generic repositories
DEFAULT_BASE_URL = "https://mirrors.tencent.com"

# Directory listing API, relative to the base URL
LIST_ENDPOINT = "mirrors/api/generic/list"

# Prefix for artifact downloads and uploads, relative to the base URL
TRANSFER_PREFIX = "repository/generic"

# Header carrying the retention period for uploads (days, 0 = keep forever)
EXPIRES_HEADER = "X-BKREPO-EXPIRES"

# ============================================================================
# Listing Constants
# ============================================================================

DEFAULT_PAGE_SIZE = 50
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 1024

# ============================================================================
# File and Path Constants
# ============================================================================

DEFAULT_CONFIG_PATH = "~/.config/genrepo/config.toml"
DEFAULT_DOWNLOAD_DIR = "downloads"

# Read buffer for hashing and uploads
DIGEST_CHUNK_SIZE = 64 * 1024

# ============================================================================
# API and Network Constants
# ============================================================================

# Connect timeout (seconds)
CONNECT_TIMEOUT = 10.0

# Read/write timeout (seconds); large artifacts stream slowly
TRANSFER_TIMEOUT = 300.0

# ============================================================================
# Logging and Display Constants
# ============================================================================

# Placeholder shown for values the server did not report
UNKNOWN_VALUE = "<unknown>"

# Width for separator lines in console output
SEPARATOR_WIDTH = 80

# Width of the name column in the candidate table
NAME_COLUMN_WIDTH = 60


__all__ = [
    "DEFAULT_BASE_URL",
    "LIST_ENDPOINT",
    "TRANSFER_PREFIX",
    "EXPIRES_HEADER",
    "DEFAULT_PAGE_SIZE",
    "MIN_PAGE_SIZE",
    "MAX_PAGE_SIZE",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_DOWNLOAD_DIR",
    "DIGEST_CHUNK_SIZE",
    "CONNECT_TIMEOUT",
    "TRANSFER_TIMEOUT",
    "UNKNOWN_VALUE",
    "SEPARATOR_WIDTH",
    "NAME_COLUMN_WIDTH",
]
