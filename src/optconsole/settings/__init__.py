"""
Opciones de configuración: tipos, registro y almacén.
"""

from optconsole.settings.types import (
    SettingType,
    SETTING_TYPES,
    MAX_STORED_LEN,
)
from optconsole.settings.registry import Setting, DEFAULT_SETTINGS, find_setting
from optconsole.settings.store import (
    SettingsStore,
    OptionsFile,
    DEFAULT_CAPACITY,
    default_store_path,
)

__all__ = [
    "SettingType",
    "SETTING_TYPES",
    "MAX_STORED_LEN",
    "Setting",
    "DEFAULT_SETTINGS",
    "find_setting",
    "SettingsStore",
    "OptionsFile",
    "DEFAULT_CAPACITY",
    "default_store_path",
]
