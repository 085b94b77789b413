"""
Upload command for genrepo-tool CLI.

This module provides the upload command, which hashes a local file, uploads
it with a retention period and reports the server's checksums.
"""

import logging
import sys
from typing import Optional

import click

from ..api import GenericRepoClient
from ..exceptions import GenericRepoError
from ..models.context import UploadPlan
from ..models.results import TransferState
from ..transfer import upload_file
from ..transfer.reporting import echo_upload_plan, echo_upload_report
from ..utils import ClickProgress, setup_logging
from ..utils.digest import compute_file_digest
from ..utils.error_handling import handle_generic_error, handle_tool_error


@click.command()
@click.option(
    "--file",
    "file_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Local file to upload",
)
@click.option("--repo", required=True, help="Target repository name")
@click.option("--remote-path", required=True, help="Directory inside the repository, e.g. releases/tidb/")
@click.option("--remote-filename", help="Remote file name (default: the local file name)")
@click.option(
    "--expires-days",
    type=click.IntRange(min=0),
    default=0,
    show_default=True,
    help="Days to keep the file, 0 keeps it forever",
)
@click.option("--dry-run", is_flag=True, help="Only print what would be uploaded")
@click.pass_context
def upload(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    file_path: str,
    repo: str,
    remote_path: str,
    remote_filename: Optional[str],
    expires_days: int,
    dry_run: bool,
) -> None:
    """Upload a file to a generic repository."""
    config = ctx.obj["config"]
    debug = ctx.obj["debug"]

    setup_logging(debug, use_wrapping=True)

    client = None
    try:
        client = GenericRepoClient.create_from_config_file(path=config)
        plan = UploadPlan.from_local_file(
            file_path,
            repo,
            remote_path,
            remote_filename=remote_filename,
            expires_days=expires_days,
        )

        logging.debug("Upload state: %s", TransferState.HASHING.value)
        digest = compute_file_digest(plan.local_path, progress=ClickProgress("Hashing"))
        echo_upload_plan(plan, digest)

        report = upload_file(client, plan, digest, dry_run=dry_run, progress=ClickProgress("Uploading"))
        echo_upload_report(report)

    except GenericRepoError as e:
        handle_tool_error(e, "upload")
        sys.exit(1)
    except Exception as e:
        handle_generic_error(e, "upload")
        sys.exit(1)
    finally:
        # Ensure client session is properly closed
        if client:
            client.close()
            logging.debug("Client session closed")


__all__ = ["upload"]
