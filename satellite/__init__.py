"""Satellite - refresh a local WordPress site from a remote one."""

from .config import ConfigSource
from .exceptions import (
    ConfigFileError,
    EnvironmentUnsafeError,
    MissingSettingsError,
    RemoteToolNotFoundError,
    RemoteUnreachableError,
    SatelliteError,
    UndefinedConfigKeyError,
)
from .settings import SettingsResolver, SyncOptions, SyncSettings

__all__ = [
    "ConfigSource",
    "SettingsResolver",
    "SyncOptions",
    "SyncSettings",
    "SatelliteError",
    "ConfigFileError",
    "EnvironmentUnsafeError",
    "MissingSettingsError",
    "RemoteToolNotFoundError",
    "RemoteUnreachableError",
    "UndefinedConfigKeyError",
]
