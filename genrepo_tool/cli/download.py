"""
Download command for genrepo-tool CLI.

This module provides the download command, which finds the newest (or an
interactively chosen) file matching a name filter and saves it locally.
"""

import logging
import sys
from typing import Optional, Sequence

import click

from ..api import GenericRepoClient
from ..exceptions import GenericRepoError, SelectionAbortedError
from ..models.artifacts import Candidate
from ..models.context import DownloadRequest
from ..transfer import run_download, verify_download
from ..transfer.reporting import echo_candidates, echo_checksums, echo_download_query, echo_download_result
from ..utils import ClickProgress, setup_logging
from ..utils.constants import DEFAULT_DOWNLOAD_DIR, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, MIN_PAGE_SIZE
from ..utils.error_handling import handle_generic_error, handle_tool_error


def prompt_for_candidate(ranked: Sequence[Candidate]) -> Optional[int]:
    """
    Ask which of the ranked candidates to download.

    Raises:
        SelectionAbortedError: If the prompt is aborted (Ctrl-C or end of input)
    """
    try:
        return click.prompt(
            "Select a file",
            type=click.IntRange(0, len(ranked) - 1),
            default=0,
            err=True,
        )
    except click.Abort as e:
        raise SelectionAbortedError("Selection aborted by user", operation="select artifact") from e


@click.command()
@click.option("--repo", required=True, help="Repository name, e.g. easygraph2_bin")
@click.option("--package-name", required=True, help="Substring the file name must contain (case-sensitive)")
@click.option("--remote-path", default="", show_default=True, help="Directory inside the repository")
@click.option(
    "--download-dir",
    type=click.Path(file_okay=False),
    default=DEFAULT_DOWNLOAD_DIR,
    show_default=True,
    help="Local directory to save the file in",
)
@click.option("--interactive", is_flag=True, help="Choose the file instead of taking the newest")
@click.option(
    "--page-size",
    type=int,
    default=DEFAULT_PAGE_SIZE,
    show_default=True,
    help=f"Listing page size (clamped to {MIN_PAGE_SIZE}-{MAX_PAGE_SIZE})",
)
@click.option("--verify", is_flag=True, help="Hash the downloaded file and compare it with the listed checksums")
@click.pass_context
def download(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    repo: str,
    package_name: str,
    remote_path: str,
    download_dir: str,
    interactive: bool,
    page_size: int,
    verify: bool,
) -> None:
    """Download the newest file matching a name filter from a generic repository."""
    config = ctx.obj["config"]
    debug = ctx.obj["debug"]

    setup_logging(debug)

    client = None
    try:
        client = GenericRepoClient.create_from_config_file(path=config)
        request = DownloadRequest(
            repo=repo,
            name_filter=package_name,
            remote_dir=remote_path,
            download_dir=download_dir,
            page_size=page_size,
            interactive=interactive,
        )

        echo_download_query(request)
        result = run_download(
            client,
            request,
            chooser=prompt_for_candidate,
            progress=ClickProgress("Downloading"),
            on_ranked=echo_candidates,
        )
        echo_download_result(result)

        if verify:
            comparison = verify_download(result, progress=ClickProgress("Verifying"))
            click.echo("Verification:")
            echo_checksums(comparison)
            if comparison.has_mismatch:
                logging.error("Checksum verification failed for %s", result.local_path)
                sys.exit(1)

    except GenericRepoError as e:
        handle_tool_error(e, "download")
        sys.exit(1)
    except Exception as e:
        handle_generic_error(e, "download")
        sys.exit(1)
    finally:
        # Ensure client session is properly closed
        if client:
            client.close()
            logging.debug("Client session closed")


__all__ = ["download", "prompt_for_candidate"]
