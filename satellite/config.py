"""Layered configuration lookup.

Settings are looked up in the process environment first and then in a
secondary dotenv-style config file (by default ``.env`` in the site root).
The config file is only read, never exported into ``os.environ``
and only on the first lookup.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Optional

from dotenv import dotenv_values

from .exceptions import ConfigFileError, UndefinedConfigKeyError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".env"


class ConfigSource:
    """Two-layer key lookup: environment variables, then a config file."""

    def __init__(
        self,
        config_file: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        values: Optional[Mapping[str, Optional[str]]] = None,
    ):
        """Initialize config source.

        Args:
            config_file: Path of the dotenv file used as the second layer
            environ: Environment mapping (defaults to ``os.environ``)
            values: Preloaded second-layer values; skips reading config_file
        """
        self.environ = os.environ if environ is None else environ
        self.config_file = config_file or Path(DEFAULT_CONFIG_FILE)
        self._values: Optional[dict[str, Optional[str]]] = (
            None if values is None else dict(values)
        )

    @property
    def values(self) -> dict[str, Optional[str]]:
        """Return the config-file values, reading the file on first use.

        Raises:
            ConfigFileError: If the file exists but cannot be read or decoded
        """
        if self._values is None:
            self._values = self._load(self.config_file)
        return self._values

    @staticmethod
    def _load(path: Path) -> dict[str, Optional[str]]:
        if not path.is_file():
            logger.debug("Config file %s not found, using environment only", path)
            return {}
        logger.debug("Loading config file %s", path)
        try:
            return dict(dotenv_values(path))
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigFileError(f"Cannot read config file {path}: {e}") from e

    def env(self, key: str) -> str:
        """Return the environment value for key, or an empty string."""
        return self.environ.get(key) or ""

    def get(self, key: str) -> str:
        """Return the config-file value for key.

        Raises:
            UndefinedConfigKeyError: If the key is not defined in the file
            ConfigFileError: If the file exists but cannot be read or decoded
        """
        values = self.values
        if key not in values:
            raise UndefinedConfigKeyError(key)
        value = values[key]
        # A bare ``KEY`` line without "=" parses to None
        return "" if value is None else value
