"""Extension points around the database and uploads steps."""

import logging
from typing import Protocol

from ..output import OutputFormatter
from ..settings import SyncSettings
from ..transport import ProcessRunner
from .plugins import PluginHost

logger = logging.getLogger(__name__)

STRIPE_PLUGIN = "woocommerce-gateway-stripe"
STRIPE_SETTINGS_OPTION = "woocommerce_stripe_settings"


class PostImportHook(Protocol):
    """Called after the remote database has been imported locally."""

    def __call__(self, settings: SyncSettings) -> None: ...


class StripeTestModeHook:
    """Put WooCommerce Stripe in test mode if the gateway is active.

    An imported production database would otherwise leave live payment
    keys enabled on the local site.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        plugin_host: PluginHost,
        output: OutputFormatter,
    ):
        self.runner = runner
        self.plugin_host = plugin_host
        self.output = output

    def __call__(self, settings: SyncSettings) -> None:
        if not (
            self.plugin_host.is_installed(STRIPE_PLUGIN)
            and self.plugin_host.is_active(STRIPE_PLUGIN)
        ):
            return

        self.output.print("Enabling Stripe test mode")
        result = self.runner.run(
            [
                settings.local_tool_path,
                "option",
                "patch",
                "update",
                STRIPE_SETTINGS_OPTION,
                "testmode",
                "yes",
            ]
        )
        if not result.ok:
            logger.warning("Could not enable Stripe test mode (exit %d)", result.returncode)


def fetch_uploads(settings: SyncSettings, output: OutputFormatter) -> None:
    """Download remote uploaded files.

    Not implemented yet; only announces the step.
    """
    output.action_title("Fetching uploads")
    output.warning("Fetching uploads is not implemented yet")
