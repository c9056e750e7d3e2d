"""Sync settings and options resolution."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .config import ConfigSource
from .exceptions import MissingSettingsError, UndefinedConfigKeyError
from .output import OutputFormatter
from .transport import ProcessRunner
from .utils import (
    ACTIVATE_PLUGINS_KEY,
    DEACTIVATE_PLUGINS_KEY,
    DEFAULT_SSH_PORT,
    SSH_HOST_KEY,
    SSH_PATH_KEY,
    SSH_PORT_KEY,
    SSH_USER_KEY,
    is_valid_port,
    parse_flag,
    split_plugin_list,
)

logger = logging.getLogger(__name__)

MISSING_SETTINGS_MESSAGE = (
    "You are missing some config settings in your environment. "
    "Please refer to the plugin's README.md."
)


@dataclass(frozen=True)
class SyncSettings:
    """Connection and behaviour settings for a single sync run."""

    ssh_host: str
    ssh_user: str
    ssh_path: str
    ssh_port: str = DEFAULT_SSH_PORT
    plugins_to_activate: Optional[tuple[str, ...]] = None
    """Plugins to activate; None when nothing was configured"""

    plugins_to_deactivate: Optional[tuple[str, ...]] = None
    """Plugins to deactivate; None when nothing was configured"""

    has_progress_viewer: bool = False
    """Whether `pv` is available locally"""

    local_tool_path: str = ""
    remote_tool_path: str = ""

    @property
    def ssh_target(self) -> str:
        """Return the ``user@host`` SSH destination."""
        return f"{self.ssh_user}@{self.ssh_host}"


@dataclass
class SyncOptions:
    """Which features of the sync should run."""

    database: bool = False
    uploads: bool = False
    activate_plugins: bool = True
    deactivate_plugins: bool = True

    @classmethod
    def from_flags(cls, database: Any = None, uploads: Any = None) -> "SyncOptions":
        """Build options from raw user flag values.

        Args:
            database: Raw ``database`` flag value, None when not given
            uploads: Raw ``uploads`` flag value, None when not given

        Examples:
            >>> SyncOptions.from_flags(database="yes").database
            True
            >>> SyncOptions.from_flags(database="on").database
            False
        """
        options = cls()
        options.database = parse_flag(database, options.database)
        options.uploads = parse_flag(uploads, options.uploads)
        return options


class SettingsResolver:
    """Build validated SyncSettings from a ConfigSource.

    The environment layer always takes precedence over the config file.
    """

    def __init__(
        self,
        config: ConfigSource,
        runner: ProcessRunner,
        output: Optional[OutputFormatter] = None,
    ):
        self.config = config
        self.runner = runner
        self.output = output or OutputFormatter()

    def resolve(self) -> SyncSettings:
        """Resolve and validate all settings.

        Returns:
            Fully resolved settings (tool paths are still empty)

        Raises:
            MissingSettingsError: If host, user, path or port is missing, or
                the port is not numeric
        """
        try:
            ssh_host = self._required(SSH_HOST_KEY)
            ssh_user = self._required(SSH_USER_KEY)
            ssh_path = self._required(SSH_PATH_KEY)
        except UndefinedConfigKeyError as e:
            logger.debug("Setting %s is not defined", e)
            raise MissingSettingsError(MISSING_SETTINGS_MESSAGE) from e

        ssh_port = self._port()

        if not all((ssh_host, ssh_port, ssh_user, ssh_path)):
            raise MissingSettingsError(MISSING_SETTINGS_MESSAGE)

        settings = SyncSettings(
            ssh_host=ssh_host,
            ssh_user=ssh_user,
            ssh_path=ssh_path,
            ssh_port=ssh_port,
            plugins_to_activate=self._plugin_list(ACTIVATE_PLUGINS_KEY),
            plugins_to_deactivate=self._plugin_list(DEACTIVATE_PLUGINS_KEY),
            has_progress_viewer=self._has_progress_viewer(),
        )
        logger.debug("Resolved settings: %s", settings)
        return settings

    def _required(self, key: str) -> str:
        return self.config.env(key) or self.config.get(key)

    def _port(self) -> str:
        try:
            port = str(self.config.env(SSH_PORT_KEY) or self.config.get(SSH_PORT_KEY))
        except UndefinedConfigKeyError:
            return DEFAULT_SSH_PORT
        if not is_valid_port(port):
            logger.debug("Discarding invalid SSH port %r", port)
            return ""
        return port

    def _plugin_list(self, key: str) -> Optional[tuple[str, ...]]:
        raw: Optional[str] = self.config.env(key)
        if not raw:
            try:
                raw = self.config.get(key)
            except UndefinedConfigKeyError:
                raw = None
        if raw is None:
            return None
        return split_plugin_list(raw)

    def _has_progress_viewer(self) -> bool:
        has_pv = bool(self.runner.which("pv"))
        if not has_pv:
            self.output.warning(
                "You may wish to install 'pv' to see progress "
                "when running this command."
            )
        return has_pv
