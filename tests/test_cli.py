"""Unit tests for the Satellite CLI commands."""

from pathlib import Path
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from satellite.cli import main
from satellite.settings import SyncOptions
from satellite.sync import SyncStatus

CLEAN_ENV = {
    "WP_ENVIRONMENT_TYPE": None,
    "WP_ENV": None,
    "SATELLITE_CONFIG": None,
    "SATELLITE_SSH_HOST": None,
    "SATELLITE_SSH_USER": None,
    "SATELLITE_SSH_PATH": None,
}


@pytest.fixture
def runner():
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def mock_engine():
    """Mock the sync engine used by the CLI."""
    with patch("satellite.cli.SyncEngine") as mock_engine_class:
        engine = Mock()
        engine.run.return_value = SyncStatus.SUCCESS
        mock_engine_class.return_value = engine
        yield mock_engine_class


class TestMainGroup:
    """Tests for the main CLI group."""

    def test_main_help(self, runner):
        """Test main help lists the sync command."""
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Satellite" in result.output
        assert "sync" in result.output

    def test_sync_help(self, runner):
        result = runner.invoke(main, ["sync", "--help"])
        assert result.exit_code == 0
        assert "--database" in result.output
        assert "--uploads" in result.output
        assert "--environment" in result.output


class TestSyncCommand:
    """Tests for the sync command."""

    def test_sync_database(self, runner, mock_engine):
        """Test flag values become sync options."""
        result = runner.invoke(
            main, ["sync", "--database", "true", "--uploads", "no"], env=CLEAN_ENV
        )

        assert result.exit_code == 0
        engine = mock_engine.return_value
        engine.run.assert_called_once_with(
            SyncOptions(
                database=True,
                uploads=False,
                activate_plugins=True,
                deactivate_plugins=True,
            )
        )

    def test_sync_defaults(self, runner, mock_engine):
        """Test omitted flags keep the defaults."""
        result = runner.invoke(main, ["sync"], env=CLEAN_ENV)

        assert result.exit_code == 0
        engine = mock_engine.return_value
        engine.run.assert_called_once_with(SyncOptions())
        kwargs = mock_engine.call_args.kwargs
        assert kwargs["environment"] == "production"
        config = mock_engine.call_args.args[0]
        assert config.config_file == Path(".env")

    def test_environment_from_env_var(self, runner, mock_engine):
        """Test WP_ENV feeds the environment option."""
        env = dict(CLEAN_ENV, WP_ENV="staging")

        runner.invoke(main, ["sync"], env=env)

        assert mock_engine.call_args.kwargs["environment"] == "staging"

    def test_environment_type_wins(self, runner, mock_engine):
        env = dict(CLEAN_ENV, WP_ENVIRONMENT_TYPE="local", WP_ENV="staging")

        runner.invoke(main, ["sync"], env=env)

        assert mock_engine.call_args.kwargs["environment"] == "local"

    def test_config_option(self, runner, mock_engine, tmp_path):
        """Test --config selects the config file."""
        config_file = tmp_path / "satellite.env"
        config_file.write_text("SATELLITE_SSH_HOST=example.com\n")

        result = runner.invoke(main, ["sync", "--config", str(config_file)], env=CLEAN_ENV)

        assert result.exit_code == 0
        config = mock_engine.call_args.args[0]
        assert config.get("SATELLITE_SSH_HOST") == "example.com"

    def test_aborted_sync_exits_non_zero(self, runner, mock_engine):
        """Test an aborted run exits with status 1."""
        mock_engine.return_value.run.return_value = SyncStatus.ABORTED

        result = runner.invoke(main, ["sync", "--database", "yes"], env=CLEAN_ENV)

        assert result.exit_code == 1

    def test_unsafe_environment_end_to_end(self, runner, tmp_path):
        """Test production is refused with a readable error."""
        result = runner.invoke(
            main,
            ["sync", "--environment", "production", "--config", str(tmp_path / "none")],
            env=CLEAN_ENV,
        )

        assert result.exit_code == 1
        assert "development, local and staging" in result.output

    def test_unsafe_environment_with_undecodable_config(self, runner, tmp_path):
        """Test the environment gate runs before a broken config file is read."""
        config_file = tmp_path / "bad.env"
        config_file.write_bytes(b"SATELLITE_SSH_HOST=\xff\xfe\n")

        result = runner.invoke(
            main,
            ["sync", "--environment", "production", "--config", str(config_file)],
            env=CLEAN_ENV,
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "development, local and staging" in result.output

    def test_undecodable_config_in_safe_environment(self, runner, tmp_path):
        """Test a broken config file aborts with a readable error."""
        config_file = tmp_path / "bad.env"
        config_file.write_bytes(b"SATELLITE_SSH_HOST=\xff\xfe\n")

        result = runner.invoke(
            main,
            ["sync", "--environment", "local", "--config", str(config_file)],
            env=CLEAN_ENV,
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Cannot read config file" in result.output

    @pytest.mark.parametrize("flag", ["--database", "--uploads"])
    def test_bare_flag_means_true(self, runner, mock_engine, flag):
        """Test a flag given without a value switches the feature on."""
        result = runner.invoke(main, ["sync", flag], env=CLEAN_ENV)

        assert result.exit_code == 0
        options = mock_engine.return_value.run.call_args.args[0]
        assert getattr(options, flag.lstrip("-")) is True

    def test_bare_flag_before_another_option(self, runner, mock_engine):
        """Test a bare flag followed by another option does not eat it."""
        result = runner.invoke(main, ["sync", "--database", "--uploads", "yes"], env=CLEAN_ENV)

        assert result.exit_code == 0
        mock_engine.return_value.run.assert_called_once_with(
            SyncOptions(database=True, uploads=True)
        )
