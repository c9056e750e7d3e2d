"""Local process execution and the SSH transport.

All external commands are argv lists; nothing here goes through a local
shell. Remote commands are single strings handed to ``ssh``, which runs
them through the remote user's shell.
"""

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Optional

logger = logging.getLogger(__name__)

# Return code reported when a command could not be started at all
COMMAND_NOT_FOUND = 127


@dataclass(frozen=True)
class CommandResult:
    """Exit status and captured standard output of a finished command."""

    returncode: int
    stdout: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def last_line(self) -> str:
        """Return the last non-empty output line, stripped."""
        lines = [line.strip() for line in self.stdout.splitlines() if line.strip()]
        return lines[-1] if lines else ""


class ProcessRunner:
    """Run local processes, blocking until they finish."""

    def which(self, name: str) -> Optional[str]:
        """Locate an executable on PATH (or check a path containing a slash)."""
        return shutil.which(name)

    def run(self, argv: list[str], capture: bool = True) -> CommandResult:
        """Run a command and wait for it.

        Args:
            argv: Command and arguments
            capture: If True, capture stdout; otherwise it goes to the terminal

        Returns:
            Command result. Commands that cannot be started report
            return code 127.
        """
        logger.debug("Running: %s", shlex.join(argv))
        try:
            completed = subprocess.run(
                argv,
                stdout=subprocess.PIPE if capture else None,
                stderr=subprocess.DEVNULL if capture else None,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.error("Could not run %s: %s", argv[0] if argv else "", e)
            return CommandResult(returncode=COMMAND_NOT_FOUND)
        logger.debug("Exit status %d", completed.returncode)
        return CommandResult(
            returncode=completed.returncode,
            stdout=completed.stdout or "",
        )

    def pipe(self, *commands: list[str]) -> list[int]:
        """Run commands connected stdout-to-stdin, streaming the data.

        The first command reads from the terminal and the last one writes to
        it. Nothing is buffered beyond the OS pipe buffers.

        Returns:
            Return codes of the started commands, in order
        """
        logger.debug("Piping: %s", " | ".join(shlex.join(argv) for argv in commands))
        processes: list[subprocess.Popen] = []
        upstream = None
        try:
            for index, argv in enumerate(commands):
                is_last = index == len(commands) - 1
                process = subprocess.Popen(
                    argv,
                    stdin=upstream,
                    stdout=None if is_last else subprocess.PIPE,
                )
                if upstream is not None:
                    # Let the producer see SIGPIPE if the consumer exits early
                    upstream.close()
                upstream = process.stdout
                processes.append(process)
        except OSError as e:
            logger.error("Could not start pipeline: %s", e)
            if upstream is not None:
                upstream.close()
            for process in processes:
                process.kill()
            return [process.wait() for process in processes] + [COMMAND_NOT_FOUND]

        returncodes = [process.wait() for process in processes]
        logger.debug("Pipeline exit statuses: %s", returncodes)
        return returncodes


class SSHTransport:
    """Invocation template for running commands on the remote host."""

    def __init__(self, host: str, user: str, port: str, runner: ProcessRunner):
        self.host = host
        self.user = user
        self.port = port
        self.runner = runner

    @property
    def target(self) -> str:
        return f"{self.user}@{self.host}"

    @property
    def base_command(self) -> list[str]:
        """Return ``ssh -q -p <port> <user>@<host>`` as an argv list."""
        return ["ssh", "-q", "-p", self.port, self.target]

    def command(self, remote_command: str) -> list[str]:
        """Return the argv that runs remote_command on the host."""
        return [*self.base_command, remote_command]

    def run(self, remote_command: str) -> CommandResult:
        """Run a command remotely and capture its output."""
        return self.runner.run(self.command(remote_command))


def bash_command(script: str) -> str:
    """Wrap a script in ``bash -c`` for the remote shell."""
    return f"bash -c {shlex.quote(script)}"


def remote_path(path: str) -> str:
    """Quote a path for the remote shell, keeping a leading ``~`` expandable.

    Examples:
        >>> remote_path("/srv/my site")
        "'/srv/my site'"
        >>> remote_path("~/sites/app")
        '"$HOME"/sites/app'
        >>> remote_path("~")
        '"$HOME"'
    """
    if path == "~":
        return '"$HOME"'
    if path.startswith("~/"):
        return '"$HOME"/' + shlex.quote(path[2:])
    return shlex.quote(path)
