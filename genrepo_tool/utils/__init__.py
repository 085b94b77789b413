"""
Utility modules for genrepo-tool operations.
"""

from .logger import setup_logging, WrappingFormatter
from .session import create_session
from .path_utils import build_artifact_url, build_full_path, join_remote_path, trim_slashes
from .progress import ClickProgress, NullProgress, ProgressReporter

from . import constants
from . import error_handling
from . import path_utils

__all__ = [
    "setup_logging",
    "WrappingFormatter",
    "create_session",
    "build_artifact_url",
    "build_full_path",
    "join_remote_path",
    "trim_slashes",
    "ClickProgress",
    "NullProgress",
    "ProgressReporter",
    "constants",
    "error_handling",
    "path_utils",
]
