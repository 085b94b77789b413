"""Tests for progress reporters."""

import io

from genrepo_tool.utils.progress import ClickProgress, NullProgress, ProgressReporter


def test_reporters_satisfy_protocol(progress):
    """Test every reporter implements the progress protocol."""
    assert isinstance(NullProgress(), ProgressReporter)
    assert isinstance(ClickProgress("x", file=io.StringIO()), ProgressReporter)
    assert isinstance(progress, ProgressReporter)


def test_null_progress_ignores_events():
    """Test NullProgress accepts every event."""
    reporter = NullProgress()
    reporter.start(10)
    reporter.advance(10)
    reporter.finish(True)


class TestClickProgress:
    """Test ClickProgress rendering."""

    def test_known_total(self):
        """Test a known total renders a bar and a final summary."""
        out = io.StringIO()
        reporter = ClickProgress("Downloading", file=out)

        reporter.start(100)
        reporter.advance(40)
        reporter.advance(60)
        reporter.finish(True)

        assert "Downloading: done (100 bytes)" in out.getvalue()

    def test_unknown_total(self):
        """Test an unknown total shows the running byte count."""
        out = io.StringIO()
        reporter = ClickProgress("Downloading", file=out)

        reporter.start(0)
        reporter.advance(5)
        reporter.finish(False)

        output = out.getvalue()
        assert "Downloading: 5 bytes" in output
        assert "Downloading: failed (5 bytes)" in output
