"""WP-CLI discovery on the local and remote side."""

import logging

from ..exceptions import RemoteToolNotFoundError
from ..settings import SyncSettings
from ..transport import ProcessRunner, SSHTransport, bash_command, remote_path
from ..utils import LOCAL_WP_CANDIDATES, REMOTE_WP_FALLBACKS

logger = logging.getLogger(__name__)


class CommandLocator:
    """Find the `wp` executable by probing candidate paths in order."""

    def __init__(self, runner: ProcessRunner):
        self.runner = runner

    def locate_local(self) -> str:
        """Return the first local candidate found, or an empty string."""
        for path in LOCAL_WP_CANDIDATES:
            if self.runner.which(path):
                logger.debug("Found local WP-CLI at %s", path)
                return path
        logger.warning("Could not find WP-CLI locally, tried %s", LOCAL_WP_CANDIDATES)
        return ""

    def remote_candidates(self, settings: SyncSettings) -> list[str]:
        """Return remote candidates, the site's own vendor/bin/wp first."""
        return [f"{settings.ssh_path}/vendor/bin/wp", *REMOTE_WP_FALLBACKS]

    def locate_remote(self, settings: SyncSettings, transport: SSHTransport) -> str:
        """Return the first remote candidate that exists.

        Raises:
            RemoteToolNotFoundError: If no candidate exists on the host
        """
        for path in self.remote_candidates(settings):
            script = f"test -f {remote_path(path)} && echo true || echo false"
            result = transport.run(bash_command(script))
            if result.last_line == "true":
                logger.debug("Found remote WP-CLI at %s", path)
                return path
        raise RemoteToolNotFoundError(f"Cannot find WP-CLI at {settings.ssh_target}")
