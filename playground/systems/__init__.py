"""Persistence systems: settings store, defaults service, and the game persistence store."""

from .settings_store import SettingsStore
from .defaults import DefaultsKey, DefaultsService, SettingsDefaultsService
from .persistence_store import PersistenceStore

__all__ = ["SettingsStore", "DefaultsKey", "DefaultsService", "SettingsDefaultsService", "PersistenceStore"]
