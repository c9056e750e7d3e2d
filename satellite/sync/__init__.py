"""Sync engine for Satellite - pull a remote site into the local one."""

from .database import DatabaseSyncer
from .engine import SyncEngine, SyncStatus
from .hooks import PostImportHook, StripeTestModeHook, fetch_uploads
from .locator import CommandLocator
from .plugins import PluginHost, PluginReconciler, WpCliPluginHost
from .probe import RemoteProbe

__all__ = [
    "SyncEngine",
    "SyncStatus",
    "DatabaseSyncer",
    "CommandLocator",
    "RemoteProbe",
    "PluginHost",
    "PluginReconciler",
    "WpCliPluginHost",
    "PostImportHook",
    "StripeTestModeHook",
    "fetch_uploads",
]
