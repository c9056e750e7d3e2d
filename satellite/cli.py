"""CLI interface for Satellite."""

import logging
from pathlib import Path
from typing import Any, Optional

import click

from .config import DEFAULT_CONFIG_FILE, ConfigSource
from .environment import ENVIRONMENT_VARIABLES
from .output import OutputFormatter
from .settings import SyncOptions
from .sync import SyncEngine, SyncStatus
from .utils import DEFAULT_ENVIRONMENT

logger = logging.getLogger(__name__)


@click.group()
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-essential output")
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose/debug logging output",
)
@click.version_option(package_name="satellite-sync")
@click.pass_context
def main(ctx: Any, quiet: bool, verbose: bool) -> None:
    """Satellite - refresh a local WordPress site from a remote one."""
    ctx.ensure_object(dict)
    ctx.obj["out"] = OutputFormatter(quiet=quiet)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%H:%M:%S",
        )
        logging.getLogger("satellite").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


@main.command()
@click.option(
    "--database",
    is_flag=False,
    flag_value="true",
    default=None,
    metavar="[VALUE]",
    help="Fetch the remote database (true, yes or 1; bare flag means true)",
)
@click.option(
    "--uploads",
    is_flag=False,
    flag_value="true",
    default=None,
    metavar="[VALUE]",
    help="Fetch remote uploads (true, yes or 1; bare flag means true)",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILE,
    envvar="SATELLITE_CONFIG",
    show_default=True,
    help="Config file read after environment variables",
)
@click.option(
    "--environment",
    envvar=list(ENVIRONMENT_VARIABLES),
    default=DEFAULT_ENVIRONMENT,
    show_default=True,
    help="Current environment name",
)
@click.pass_context
def sync(
    ctx: Any,
    database: Optional[str],
    uploads: Optional[str],
    config_file: Path,
    environment: str,
) -> None:
    """Pull the remote database and reconcile plugins.

    Connection settings come from SATELLITE_SSH_HOST, SATELLITE_SSH_PORT,
    SATELLITE_SSH_USER and SATELLITE_SSH_PATH, first from the environment
    and then from the config file. SATELLITE_SYNC_ACTIVATE_PLUGINS and
    SATELLITE_SYNC_DEACTIVATE_PLUGINS list plugins to switch on or off.

    Examples:
        satellite sync --database=true
        satellite sync --database=yes --uploads=yes
        satellite sync --database           # Same as --database=true
        satellite sync                      # Plugins only
    """
    out: OutputFormatter = ctx.obj["out"]

    options = SyncOptions.from_flags(database=database, uploads=uploads)
    engine = SyncEngine(
        ConfigSource(config_file=config_file),
        output=out,
        environment=environment,
    )

    if engine.run(options) is not SyncStatus.SUCCESS:
        ctx.exit(1)


if __name__ == "__main__":
    main()
