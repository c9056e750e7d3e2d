"""Constants and small helpers shared across Satellite."""

import re
from typing import Any

# =============================================================================
# Environment gating
# =============================================================================

# Environments in which a sync may overwrite the local site
SAFE_ENVIRONMENTS: frozenset[str] = frozenset({"development", "local", "staging"})

# WordPress falls back to "production" when no environment type is set
DEFAULT_ENVIRONMENT: str = "production"

# =============================================================================
# Settings keys
# =============================================================================

SSH_HOST_KEY = "SATELLITE_SSH_HOST"
SSH_PORT_KEY = "SATELLITE_SSH_PORT"
SSH_USER_KEY = "SATELLITE_SSH_USER"
SSH_PATH_KEY = "SATELLITE_SSH_PATH"
ACTIVATE_PLUGINS_KEY = "SATELLITE_SYNC_ACTIVATE_PLUGINS"
DEACTIVATE_PLUGINS_KEY = "SATELLITE_SYNC_DEACTIVATE_PLUGINS"

DEFAULT_SSH_PORT: str = "22"

# SSH reserves this exit status for its own connection failures
SSH_CONNECTION_FAILED: int = 255

# =============================================================================
# WP-CLI discovery
# =============================================================================

# Possible local `wp` locations, with the most preferable ones first
LOCAL_WP_CANDIDATES: tuple[str, ...] = (
    "./vendor/bin/wp",
    "/usr/local/bin/wp",
    "wp",
)

# Remote candidates that follow the site's own ``vendor/bin/wp``
REMOTE_WP_FALLBACKS: tuple[str, ...] = (
    "/usr/local/bin/wp",
    "wp",
)

# =============================================================================
# Parsing helpers
# =============================================================================

_PORT_PATTERN = re.compile(r"^[0-9]+$")
_PLUGIN_SEPARATOR = re.compile(r"[\s,]+")

# Accepted truthy flag tokens, compared by exact type and value
TRUE_VALUES: tuple[Any, ...] = (True, "true", 1, "1", "yes")


def is_valid_port(value: str) -> bool:
    """Check that a port consists of decimal digits only.

    Examples:
        >>> is_valid_port("2222")
        True
        >>> is_valid_port("22x")
        False
    """
    return bool(_PORT_PATTERN.match(value))


def split_plugin_list(raw: str) -> tuple[str, ...]:
    """Split a comma and/or whitespace separated plugin list.

    Empty tokens are dropped, order is preserved.

    Examples:
        >>> split_plugin_list("plugin-a, plugin-b  plugin-c")
        ('plugin-a', 'plugin-b', 'plugin-c')
        >>> split_plugin_list(" , ")
        ()
    """
    return tuple(token for token in _PLUGIN_SEPARATOR.split(raw) if token)


def is_true_value(value: Any) -> bool:
    """Check whether a user supplied flag value is one of TRUE_VALUES.

    ``True == 1`` in Python, so the type has to match as well as the value.
    """
    return any(
        type(value) is type(candidate) and value == candidate
        for candidate in TRUE_VALUES
    )


def parse_flag(value: Any, default: bool) -> bool:
    """Interpret an optional flag value, keeping the default when absent."""
    if value is None:
        return default
    return is_true_value(value)
