"""
Console reporting for download and upload results.

Everything here only formats and echoes; nothing touches the network or the
filesystem.
"""

from typing import List, Optional, Sequence

import click

from ..models.artifacts import Candidate, FileDigestResult
from ..models.context import DownloadRequest, UploadPlan
from ..models.results import ChecksumComparison, DownloadResult, UploadReport
from ..utils.constants import NAME_COLUMN_WIDTH, SEPARATOR_WIDTH, UNKNOWN_VALUE


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted size string
    """
    if size_bytes == 0:
        return "0 B"

    size_names = ["B", "KB", "MB", "GB", "TB"]
    size = float(size_bytes)
    i = 0
    while size >= 1024 and i < len(size_names) - 1:
        size /= 1024.0
        i += 1

    return f"{size:.1f} {size_names[i]}"


def format_reported_size(raw: Optional[str]) -> str:
    """Format a size reported by the server, which may be absent or not numeric."""
    if raw is None:
        return UNKNOWN_VALUE
    try:
        return format_file_size(int(raw))
    except ValueError:
        return raw


def _match_label(matches: Optional[bool]) -> str:
    if matches is None:
        return "not reported"
    return "match" if matches else "MISMATCH"


def candidate_table(ranked: Sequence[Candidate]) -> List[str]:
    """
    Render ranked candidates as table lines.

    Args:
        ranked: Candidates in ranking order; the printed index is the one a chooser returns

    Returns:
        Lines of the table, header first
    """
    lines = [f"{'#':>4}  {'Name':<{NAME_COLUMN_WIDTH}}  {'Modified (UTC)':<19}  Size"]
    for index, candidate in enumerate(ranked):
        timestamp = candidate.timestamp.strftime("%Y-%m-%d %H:%M:%S")
        lines.append(
            f"{index:>4}  {candidate.name:<{NAME_COLUMN_WIDTH}}  {timestamp:<19}  "
            f"{format_reported_size(candidate.size)}"
        )
    return lines


def echo_download_query(request: DownloadRequest) -> None:
    """Print which repository, directory and filter are being searched."""
    click.echo(f"Repository:   {request.repo}")
    click.echo(f"Directory:    {request.remote_dir or '/'}")
    click.echo(f"Name filter:  {request.name_filter}")


def echo_candidates(ranked: Sequence[Candidate]) -> None:
    """Print the candidate table."""
    click.echo(f"Found {len(ranked)} matching file(s):")
    for line in candidate_table(ranked):
        click.echo(line)


def echo_checksums(comparison: ChecksumComparison) -> None:
    """Print local and remote checksums with their match status."""
    click.echo(
        f"  md5:    {comparison.local.md5_hex} "
        f"(remote: {comparison.remote_md5 or UNKNOWN_VALUE}, {_match_label(comparison.md5_matches)})"
    )
    click.echo(
        f"  sha256: {comparison.local.sha256_hex} "
        f"(remote: {comparison.remote_sha256 or UNKNOWN_VALUE}, {_match_label(comparison.sha256_matches)})"
    )


def echo_download_result(result: DownloadResult) -> None:
    """Print where a download went and the checksums the listing asserted."""
    click.echo("\n" + "=" * SEPARATOR_WIDTH)
    click.echo(f"Selected:     {result.candidate.name}")
    click.echo(f"Source:       {result.url}")
    click.echo(f"Saved to:     {result.local_path} ({format_file_size(result.bytes_written)})")
    click.echo(f"Expected md5:    {result.expected_md5 or UNKNOWN_VALUE}")
    click.echo(f"Expected sha256: {result.expected_sha256 or UNKNOWN_VALUE}")
    click.echo("=" * SEPARATOR_WIDTH)


def echo_upload_plan(plan: UploadPlan, digest: FileDigestResult) -> None:
    """Print what is about to be uploaded."""
    click.echo(f"Local file:   {plan.local_path}")
    click.echo(f"Repository:   {plan.repo}")
    click.echo(f"Remote path:  {plan.remote_relative_path()}")
    click.echo(f"Expires:      {plan.expires_days} day(s) (0 = keep forever)")
    click.echo(
        f"Local digest: size {digest.size_bytes} bytes, md5 {digest.md5_hex}, sha256 {digest.sha256_hex}"
    )


def echo_upload_report(report: UploadReport) -> None:
    """Print the outcome of an upload or dry run."""
    if report.dry_run:
        click.echo(f"[dry-run] Would upload {report.local_path} -> {report.remote_url}")
        return

    click.echo("\n" + "=" * SEPARATOR_WIDTH)
    click.echo(f"Uploaded:     {report.remote_url}")
    if report.raw_response is not None:
        click.echo(f"Server response: {report.raw_response}")
    else:
        click.echo(f"Download URI: {report.download_uri or report.remote_url}")
        click.echo("Checksums:")
        echo_checksums(report.checksums)
        if report.remote_size is not None:
            click.echo(f"Remote size:  {report.remote_size} ({_match_label(report.size_matches)})")
    click.echo(f"Final path:   {report.final_path}")
    click.echo("=" * SEPARATOR_WIDTH)


__all__ = [
    "format_file_size",
    "format_reported_size",
    "candidate_table",
    "echo_download_query",
    "echo_candidates",
    "echo_checksums",
    "echo_download_result",
    "echo_upload_plan",
    "echo_upload_report",
]
