"""Streaming database transfer from the remote site."""

import logging

from ..output import OutputFormatter
from ..settings import SyncSettings
from ..transport import ProcessRunner, SSHTransport, bash_command, remote_path

logger = logging.getLogger(__name__)


class DatabaseSyncer:
    """Overwrite the local database with the remote one.

    The export is compressed on the remote host, streamed over SSH,
    optionally passed through `pv`, decompressed and imported locally
    without touching the disk.
    """

    def __init__(self, runner: ProcessRunner, output: OutputFormatter):
        self.runner = runner
        self.output = output

    def export_script(self, settings: SyncSettings) -> str:
        """Return the remote shell script that exports and compresses."""
        return (
            f"cd {remote_path(settings.ssh_path)} && "
            f"{remote_path(settings.remote_tool_path)} db export --quiet --single-transaction - "
            "| gzip -cf"
        )

    def commands(
        self, settings: SyncSettings, transport: SSHTransport
    ) -> list[list[str]]:
        """Return the pipeline as a list of argv lists."""
        commands = [transport.command(bash_command(self.export_script(settings)))]
        if settings.has_progress_viewer:
            commands.append(["pv"])
        commands.append(["gunzip", "-c"])
        commands.append([settings.local_tool_path, "db", "import", "--quiet", "-"])
        return commands

    def run(self, settings: SyncSettings, transport: SSHTransport) -> None:
        """Run the export/transfer/import pipeline once."""
        self.output.action_title("Fetching database")
        returncodes = self.runner.pipe(*self.commands(settings, transport))
        logger.debug("Database pipeline finished with %s", returncodes)
