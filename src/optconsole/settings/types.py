"""
Tipos de opciones de configuración.

Cada tipo sabe convertir el texto ingresado por el usuario en un valor
(parse) y volver a mostrarlo en forma canónica (format).
"""

import ipaddress
from typing import Any

from optconsole.errors import InvalidSettingError, SettingRangeError


# Longitud máxima de un valor almacenado (una opción DHCP ocupa hasta 255 bytes)
MAX_STORED_LEN = 255


class SettingType:
    """Tipo base de una opción."""

    name: str = ""
    description: str = ""

    def parse(self, text: str) -> Any:
        """Convierte texto en valor. Lanza SettingsError si no es válido."""
        raise NotImplementedError

    def format(self, value: Any) -> str:
        """Convierte un valor en su texto canónico."""
        return str(value)

    def __repr__(self) -> str:
        return f"<SettingType {self.name}>"


class StringType(SettingType):
    """Texto libre."""

    name = "string"
    description = "string"

    def parse(self, text: str) -> str:
        if len(text.encode("utf-8")) > MAX_STORED_LEN:
            raise SettingRangeError(f"máximo {MAX_STORED_LEN} bytes")
        return text


class IPv4Type(SettingType):
    """Dirección IPv4 en notación decimal con puntos."""

    name = "ipv4"
    description = "IPv4 address"

    def parse(self, text: str) -> ipaddress.IPv4Address:
        try:
            return ipaddress.IPv4Address(text.strip())
        except ValueError:
            raise InvalidSettingError(f"dirección IPv4 inválida: {text!r}")


class IntegerType(SettingType):
    """Entero de ancho fijo, con o sin signo."""

    def __init__(self, bits: int, signed: bool = True):
        self.bits = bits
        self.signed = signed
        prefix = "int" if signed else "uint"
        self.name = f"{prefix}{bits}"
        if signed:
            self.description = f"{bits}-bit integer"
            self.min_value = -(1 << (bits - 1))
            self.max_value = (1 << (bits - 1)) - 1
        else:
            self.description = f"{bits}-bit unsigned integer"
            self.min_value = 0
            self.max_value = (1 << bits) - 1

    def parse(self, text: str) -> int:
        try:
            # Base 0: acepta decimal y hexadecimal con prefijo 0x
            value = int(text.strip(), 0)
        except ValueError:
            raise InvalidSettingError(f"entero inválido: {text!r}")
        if not self.min_value <= value <= self.max_value:
            raise SettingRangeError(
                f"{value} fuera de [{self.min_value}, {self.max_value}]"
            )
        return value


class HexType(SettingType):
    """Cadena de bytes en hexadecimal separada por dos puntos (aa:bb:cc)."""

    name = "hex"
    description = "hex string"

    def parse(self, text: str) -> bytes:
        text = text.strip()
        if not text:
            return b""
        parts = text.split(":")
        if any(not 1 <= len(part) <= 2 for part in parts):
            raise InvalidSettingError(f"hexadecimal inválido: {text!r}")
        try:
            value = bytes(int(part, 16) for part in parts)
        except ValueError:
            raise InvalidSettingError(f"hexadecimal inválido: {text!r}")
        if len(value) > MAX_STORED_LEN:
            raise SettingRangeError(f"máximo {MAX_STORED_LEN} bytes")
        return value

    def format(self, value: bytes) -> str:
        return ":".join(f"{b:02x}" for b in value)


STRING = StringType()
IPV4 = IPv4Type()
INT8 = IntegerType(8)
INT16 = IntegerType(16)
INT32 = IntegerType(32)
UINT8 = IntegerType(8, signed=False)
UINT16 = IntegerType(16, signed=False)
UINT32 = IntegerType(32, signed=False)
HEX = HexType()

# Mapeo de nombres a tipos
SETTING_TYPES = {
    t.name: t
    for t in (STRING, IPV4, INT8, INT16, INT32, UINT8, UINT16, UINT32, HEX)
}
