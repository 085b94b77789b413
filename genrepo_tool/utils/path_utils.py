"""
Remote path handling utilities.

This module provides centralized functions for building repository paths and
URLs. Every segment is trimmed of leading and trailing slashes before joining,
so repeated normalization always produces the same string.
"""

import os
from typing import Optional


def trim_slashes(segment: Optional[str]) -> str:
    """
    Strip leading and trailing slashes from a path segment.

    Args:
        segment: Path segment (None is treated as empty)

    Returns:
        Segment without surrounding slashes

    Example:
        >>> trim_slashes("/releases/tidb/")
        'releases/tidb'
    """
    return (segment or "").strip("/")


def join_remote_path(*segments: Optional[str]) -> str:
    """
    Join remote path segments with single slashes, dropping empty segments.

    Args:
        *segments: Path segments; surrounding and doubled slashes are dropped

    Returns:
        Joined path without leading or trailing slash

    Example:
        >>> join_remote_path("/repo/", "", "dir//", "file.tar.gz")
        'repo/dir/file.tar.gz'
    """
    parts = []
    for segment in segments:
        parts.extend(part for part in trim_slashes(segment).split("/") if part)
    return "/".join(parts)


def build_full_path(repo: str, remote_dir: Optional[str] = None) -> str:
    """
    Build the listing path for a repository and an optional sub-directory.

    Args:
        repo: Repository name
        remote_dir: Directory inside the repository (empty means root)

    Returns:
        Normalized full path (e.g. "easygraph2_bin/releases")
    """
    return join_remote_path(repo, remote_dir)


def build_artifact_url(base_url: str, prefix: str, repo: str, relative_path: str) -> str:
    """
    Build the absolute URL of an artifact.

    Args:
        base_url: Server base URL
        prefix: Endpoint prefix (e.g. "repository/generic")
        repo: Repository name
        relative_path: Path of the artifact inside the repository

    Returns:
        Absolute artifact URL
    """
    return f"{base_url.rstrip('/')}/{join_remote_path(prefix, repo, relative_path)}"


def ensure_directory_exists(directory: str) -> None:
    """
    Create a directory and any missing parents.

    Args:
        directory: Directory path
    """
    if directory:
        os.makedirs(directory, exist_ok=True)


__all__ = [
    "trim_slashes",
    "join_remote_path",
    "build_full_path",
    "build_artifact_url",
    "ensure_directory_exists",
]
