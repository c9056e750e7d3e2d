"""Exceptions raised by Satellite."""


class SatelliteError(Exception):
    """Base exception for fatal sync conditions.

    Raising any subclass aborts the whole sync run.
    """


class EnvironmentUnsafeError(SatelliteError):
    """Raised when the current environment is not allowed to run a sync."""


class MissingSettingsError(SatelliteError):
    """Raised when a required connection setting is missing or invalid."""


class RemoteUnreachableError(SatelliteError):
    """Raised when the remote host cannot be reached over SSH."""


class RemoteToolNotFoundError(SatelliteError):
    """Raised when WP-CLI cannot be found on the remote host."""


class ConfigFileError(SatelliteError):
    """Raised when the config file exists but cannot be read or decoded."""


class UndefinedConfigKeyError(KeyError):
    """Raised by the config layer when a key is not defined.

    This is a lookup signal, not a fatal error on its own.
    """
