"""Remote reachability probing."""

import logging
from typing import Optional

from ..exceptions import RemoteUnreachableError
from ..settings import SyncSettings
from ..transport import ProcessRunner, SSHTransport
from ..utils import SSH_CONNECTION_FAILED

logger = logging.getLogger(__name__)


class RemoteProbe:
    """Check that the remote host accepts SSH connections.

    After a successful check the transport is kept on the probe and reused
    for every later remote operation of the run.
    """

    def __init__(self, runner: ProcessRunner):
        self.runner = runner
        self.transport: Optional[SSHTransport] = None

    def check_reachable(self, settings: SyncSettings) -> SSHTransport:
        """Run a no-op command on the remote host.

        Only SSH's own connection failure status (255) counts as unreachable;
        any other exit status is left to later steps.

        Returns:
            The transport to use for the rest of the run

        Raises:
            RemoteUnreachableError: If SSH could not connect
        """
        transport = SSHTransport(
            host=settings.ssh_host,
            user=settings.ssh_user,
            port=settings.ssh_port,
            runner=self.runner,
        )
        result = transport.run("exit")
        logger.debug("SSH probe of %s exited with %d", transport.target, result.returncode)
        if result.returncode == SSH_CONNECTION_FAILED:
            raise RemoteUnreachableError(
                f"Cannot connect to {settings.ssh_target} over SSH"
            )
        self.transport = transport
        return transport
