"""
Pydantic models for genrepo-tool.

This package contains all Pydantic models used in the application:
- api: Models for generic repository API responses
- base, artifacts, config, context, results: Domain models
"""

# API Response Models
from .api import (
    GenericApiModel,
    ListingRecord,
    ListingPage,
    ListResponse,
    RemoteChecksums,
    UploadResponse,
)

# Domain Models
from .base import GenericRepoBaseModel
from .artifacts import Candidate, FileDigestResult
from .config import AuthCredentials, ServerSettings, ToolConfig
from .context import DownloadRequest, UploadPlan
from .results import ChecksumComparison, DownloadResult, TransferState, UploadReport

__all__ = [
    # API Models
    "GenericApiModel",
    "ListingRecord",
    "ListingPage",
    "ListResponse",
    "RemoteChecksums",
    "UploadResponse",
    # Domain Models
    "GenericRepoBaseModel",
    "Candidate",
    "FileDigestResult",
    "AuthCredentials",
    "ServerSettings",
    "ToolConfig",
    "DownloadRequest",
    "UploadPlan",
    "ChecksumComparison",
    "DownloadResult",
    "TransferState",
    "UploadReport",
]
