"""
Progress reporting for streaming transfers.

Hashing, downloading and uploading all report through the same small
interface: ``start`` once with the expected total (0 when unknown),
``advance`` once per chunk with the chunk's byte length, and ``finish`` once
with the outcome. The pipelines never depend on how progress is rendered.
"""

import sys
from typing import Any, Protocol, runtime_checkable

import click


@runtime_checkable
class ProgressReporter(Protocol):
    """Receiver of byte-count progress events."""

    def start(self, total_bytes: int) -> None:
        """Begin a transfer of total_bytes (0 means unknown)."""
        ...  # pragma: no cover - protocol

    def advance(self, num_bytes: int) -> None:
        """Record one chunk of num_bytes."""
        ...  # pragma: no cover - protocol

    def finish(self, success: bool) -> None:
        """Signal the end of the transfer."""
        ...  # pragma: no cover - protocol


class NullProgress:
    """Reporter that ignores every event."""

    def start(self, total_bytes: int) -> None:
        pass

    def advance(self, num_bytes: int) -> None:
        pass

    def finish(self, success: bool) -> None:
        pass


class ClickProgress:
    """
    Terminal progress bar built on click.progressbar.

    With a known total a bar with percentage is drawn; with an unknown total
    only the running byte count is shown.
    """

    def __init__(self, label: str, file: Any = None) -> None:
        self.label = label
        self.file = file if file is not None else sys.stderr
        self._bar: Any = None
        self._transferred = 0

    def start(self, total_bytes: int) -> None:
        self._transferred = 0
        if total_bytes > 0:
            self._bar = click.progressbar(length=total_bytes, label=self.label, show_pos=True, file=self.file)
            self._bar.__enter__()

    def advance(self, num_bytes: int) -> None:
        self._transferred += num_bytes
        if self._bar is not None:
            self._bar.update(num_bytes)
        else:
            click.echo(f"\r{self.label}: {self._transferred} bytes", nl=False, file=self.file)

    def finish(self, success: bool) -> None:
        if self._bar is not None:
            self._bar.__exit__(None, None, None)
            self._bar = None
        else:
            click.echo("", file=self.file)
        status = "done" if success else "failed"
        click.echo(f"{self.label}: {status} ({self._transferred} bytes)", file=self.file)


__all__ = ["ProgressReporter", "NullProgress", "ClickProgress"]
