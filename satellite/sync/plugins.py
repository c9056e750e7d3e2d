"""Plugin state reconciliation."""

import logging
from collections.abc import Sequence
from typing import Optional, Protocol

from ..output import OutputFormatter
from ..transport import ProcessRunner

logger = logging.getLogger(__name__)


class PluginHost(Protocol):
    """Queries and actions on the local site's plugins."""

    def is_installed(self, plugin: str) -> bool: ...

    def is_active(self, plugin: str) -> bool: ...

    def activate(self, plugin: str) -> None: ...

    def deactivate(self, plugin: str) -> None: ...


class WpCliPluginHost:
    """PluginHost backed by the local WP-CLI."""

    def __init__(self, runner: ProcessRunner, wp_path: str):
        self.runner = runner
        self.wp_path = wp_path

    def _plugin(self, *args: str, capture: bool = True) -> int:
        return self.runner.run([self.wp_path, "plugin", *args], capture=capture).returncode

    def is_installed(self, plugin: str) -> bool:
        return self._plugin("is-installed", plugin) == 0

    def is_active(self, plugin: str) -> bool:
        return self._plugin("is-active", plugin) == 0

    def activate(self, plugin: str) -> None:
        returncode = self._plugin("activate", plugin, capture=False)
        if returncode != 0:
            logger.warning("wp plugin activate %s exited with %d", plugin, returncode)

    def deactivate(self, plugin: str) -> None:
        returncode = self._plugin("deactivate", plugin, capture=False)
        if returncode != 0:
            logger.warning("wp plugin deactivate %s exited with %d", plugin, returncode)


class PluginReconciler:
    """Bring named plugins to an active or inactive state.

    Plugins are handled one at a time in list order. Missing plugins and
    plugins already in the wanted state only produce a warning.
    """

    def __init__(self, host: PluginHost, output: OutputFormatter):
        self.host = host
        self.output = output

    def activate(self, plugins: Optional[Sequence[str]]) -> None:
        """Activate named plugins."""
        if not plugins:
            return

        self.output.action_title("Activating Plugins")

        for plugin in plugins:
            if not self.host.is_installed(plugin):
                self.output.warning(f"Plugin {plugin} is not available to activate")
            elif self.host.is_active(plugin):
                self.output.warning(f"Plugin {plugin} is already active")
            else:
                self.host.activate(plugin)

    def deactivate(self, plugins: Optional[Sequence[str]]) -> None:
        """Deactivate named plugins."""
        if not plugins:
            return

        self.output.action_title("Deactivating Plugins")

        for plugin in plugins:
            if not self.host.is_installed(plugin):
                self.output.warning(f"Plugin {plugin} is not available to deactivate")
            elif not self.host.is_active(plugin):
                self.output.warning(f"Plugin {plugin} is already inactive")
            else:
                self.host.deactivate(plugin)
