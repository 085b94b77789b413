"""
API client package for the generic repository server.
"""

from .generic_client import GenericRepoClient
from .listing import ListingMixin
from .transfer import TransferMixin

__all__ = ["GenericRepoClient", "ListingMixin", "TransferMixin"]
