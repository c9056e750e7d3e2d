"""Execution environment gating."""

import os
from collections.abc import Mapping
from typing import Optional

from .utils import DEFAULT_ENVIRONMENT, SAFE_ENVIRONMENTS

ENVIRONMENT_VARIABLES = ("WP_ENVIRONMENT_TYPE", "WP_ENV")


def current_environment(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the name of the current WordPress environment.

    ``WP_ENVIRONMENT_TYPE`` wins over the older ``WP_ENV``; without either
    the environment is treated as production.
    """
    environ = os.environ if environ is None else environ
    for name in ENVIRONMENT_VARIABLES:
        value = environ.get(name)
        if value:
            return value
    return DEFAULT_ENVIRONMENT


def is_safe_environment(name: str) -> bool:
    """Development, local and staging use only (case-sensitive)."""
    return name in SAFE_ENVIRONMENTS
