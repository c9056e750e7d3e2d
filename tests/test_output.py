"""Tests for the console output formatter."""

import io

import pytest
from rich.console import Console

from satellite.output import OutputFormatter


class TestOutputFormatter:
    """Tests for OutputFormatter."""

    @pytest.fixture
    def streams(self):
        return io.StringIO(), io.StringIO()

    def make(self, streams, quiet=False):
        out, err = streams
        return OutputFormatter(
            quiet=quiet,
            console=Console(file=out, width=80),
            err_console=Console(file=err, width=80),
        )

    def test_action_title(self, streams):
        """Test titles are upper-cased and underlined."""
        self.make(streams).action_title("Fetching database")

        lines = streams[0].getvalue().splitlines()
        assert lines[-2:] == ["FETCHING DATABASE", "~" * len("Fetching database")]

    def test_warning_and_error_go_to_stderr(self, streams):
        formatter = self.make(streams)

        formatter.warning("Plugin akismet is already active")
        formatter.error("Cannot find WP-CLI at deploy@example.com")

        assert streams[0].getvalue() == ""
        err = streams[1].getvalue()
        assert "Warning: Plugin akismet is already active" in err
        assert "Error: Cannot find WP-CLI at deploy@example.com" in err

    def test_markup_in_messages_is_escaped(self, streams):
        self.make(streams).warning("Plugin [bold]odd[/bold] is not available")

        assert "[bold]odd[/bold]" in streams[1].getvalue()

    def test_quiet_suppresses_non_essential_output(self, streams):
        """Test quiet mode keeps only warnings, errors and success."""
        formatter = self.make(streams, quiet=True)

        formatter.info("Checking remote access")
        formatter.print("plain")
        formatter.action_title("Activating Plugins")
        formatter.success("All done!")

        assert streams[0].getvalue().strip() == "Success: All done!"
