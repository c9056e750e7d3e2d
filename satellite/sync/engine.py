"""Sync engine sequencing a full environment refresh."""

import logging
from dataclasses import replace
from enum import Enum
from typing import Callable, Optional

from ..config import ConfigSource
from ..environment import current_environment, is_safe_environment
from ..exceptions import EnvironmentUnsafeError, SatelliteError
from ..output import OutputFormatter
from ..settings import SettingsResolver, SyncOptions, SyncSettings
from ..transport import ProcessRunner
from .database import DatabaseSyncer
from .hooks import PostImportHook, StripeTestModeHook, fetch_uploads
from .locator import CommandLocator
from .plugins import PluginHost, PluginReconciler, WpCliPluginHost
from .probe import RemoteProbe

logger = logging.getLogger(__name__)

UNSAFE_ENVIRONMENT_MESSAGE = (
    "This can only be run in development, local and staging environments. "
    "Check your WP_ENVIRONMENT_TYPE setting."
)


class SyncStatus(Enum):
    """Where a sync run currently stands."""

    PENDING = "pending"
    SUCCESS = "success"
    ABORTED = "aborted"


class SyncEngine:
    """Pull a remote site's database into the local site.

    Steps run strictly in order. Any SatelliteError aborts the run before
    the next step starts:

    1. environment gate
    2. settings resolution
    3. local WP-CLI discovery
    4. SSH reachability probe
    5. remote WP-CLI discovery
    6. database pipeline and post-import hooks, uploads (per options)
    7. plugin activation, then deactivation (per options)
    """

    def __init__(
        self,
        config: ConfigSource,
        runner: Optional[ProcessRunner] = None,
        output: Optional[OutputFormatter] = None,
        environment: Optional[str] = None,
        plugin_host_factory: Optional[Callable[[ProcessRunner, str], PluginHost]] = None,
        post_import_hooks: Optional[list[PostImportHook]] = None,
        uploads_handler: Callable[[SyncSettings, OutputFormatter], None] = fetch_uploads,
    ):
        """Initialize sync engine.

        Args:
            config: Layered configuration source
            runner: Process runner used for every external command
            output: Output formatter for status and warnings
            environment: Current environment name (read from the process
                environment when omitted)
            plugin_host_factory: Builds the PluginHost from the runner and the
                local WP-CLI path
            post_import_hooks: Hooks run after a database import. Defaults to
                the Stripe test mode hook.
            uploads_handler: Called when uploads are requested
        """
        self.config = config
        self.runner = runner or ProcessRunner()
        self.output = output or OutputFormatter()
        self.environment = environment if environment is not None else current_environment()
        self.plugin_host_factory = plugin_host_factory or WpCliPluginHost
        self.post_import_hooks = post_import_hooks
        self.uploads_handler = uploads_handler

        self.locator = CommandLocator(self.runner)
        self.probe = RemoteProbe(self.runner)
        self.status = SyncStatus.PENDING
        self.settings: Optional[SyncSettings] = None
        self.error: Optional[SatelliteError] = None

    def run(self, options: SyncOptions) -> SyncStatus:
        """Run the sync.

        Args:
            options: Which features to run

        Returns:
            SyncStatus.SUCCESS, or SyncStatus.ABORTED after reporting the error
        """
        logger.debug("Starting sync in %s environment with %s", self.environment, options)
        try:
            self._run(options)
        except SatelliteError as e:
            logger.debug("Sync aborted: %s", e.__class__.__name__)
            self.error = e
            self.status = SyncStatus.ABORTED
            self.output.error(str(e))
            return self.status

        self.status = SyncStatus.SUCCESS
        self.output.print()
        self.output.success("All done!")
        return self.status

    def _run(self, options: SyncOptions) -> None:
        if not is_safe_environment(self.environment):
            raise EnvironmentUnsafeError(UNSAFE_ENVIRONMENT_MESSAGE)

        settings = SettingsResolver(self.config, self.runner, self.output).resolve()
        settings = replace(settings, local_tool_path=self.locator.locate_local())

        transport = self.probe.check_reachable(settings)

        settings = replace(
            settings, remote_tool_path=self.locator.locate_remote(settings, transport)
        )
        self.settings = settings
        self.output.info(f"Syncing from {settings.ssh_target}:{settings.ssh_path}")

        plugin_host = self.plugin_host_factory(self.runner, settings.local_tool_path)

        if options.database:
            DatabaseSyncer(self.runner, self.output).run(settings, transport)
            for hook in self._post_import_hooks(plugin_host):
                hook(settings)

        if options.uploads:
            self.uploads_handler(settings, self.output)

        reconciler = PluginReconciler(plugin_host, self.output)
        if options.activate_plugins:
            reconciler.activate(settings.plugins_to_activate)
        if options.deactivate_plugins:
            reconciler.deactivate(settings.plugins_to_deactivate)

    def _post_import_hooks(self, plugin_host: PluginHost) -> list[PostImportHook]:
        if self.post_import_hooks is not None:
            return self.post_import_hooks
        return [StripeTestModeHook(self.runner, plugin_host, self.output)]
