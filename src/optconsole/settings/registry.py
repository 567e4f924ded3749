"""
Opciones de configuración registradas.

La lista es fija: su longitud y orden no cambian durante una sesión.
"""

from dataclasses import dataclass

from optconsole.settings.types import (
    SettingType,
    STRING,
    IPV4,
    INT8,
)


@dataclass(frozen=True)
class Setting:
    """Definición de una opción de configuración."""
    name: str
    type: SettingType
    description: str


DEFAULT_SETTINGS: tuple[Setting, ...] = (
    Setting("hostname", STRING, "Host name"),
    Setting("filename", STRING, "Boot filename"),
    Setting("root-path", STRING, "NFS/iSCSI root path"),
    Setting("username", STRING, "User name"),
    Setting("password", STRING, "Password"),
    Setting("initiator-iqn", STRING, "iSCSI initiator name"),
    Setting("priority", INT8, "Priority of these options"),
    Setting("ip", IPV4, "IPv4 address"),
    Setting("netmask", IPV4, "IPv4 subnet mask"),
    Setting("gateway", IPV4, "Default gateway"),
    Setting("dns", IPV4, "DNS server"),
)


def find_setting(settings: tuple[Setting, ...], name: str) -> Setting:
    """Busca una opción por nombre."""
    for setting in settings:
        if setting.name == name:
            return setting
    raise KeyError(f"Opción desconocida: {name}")
