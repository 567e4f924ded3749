"""
Excepciones del almacén de opciones.

Cada error lleva un código estilo errno (usado como código de salida)
y un motivo legible para mostrar en la consola.
"""

import errno
import os


class SettingsError(Exception):
    """Error base de lectura/escritura de opciones."""

    code: int = errno.EIO

    def __init__(self, message: str = "", code: int = None):
        if code is not None:
            self.code = code
        self.message = message
        super().__init__(message or self.reason)

    @property
    def reason(self) -> str:
        """Motivo legible, equivalente a strerror(code)."""
        return os.strerror(self.code)


class SettingNotFoundError(SettingsError):
    """La opción no tiene valor almacenado."""
    code = errno.ENOENT


class InvalidSettingError(SettingsError):
    """El texto no es válido para el tipo de la opción."""
    code = errno.EINVAL


class SettingRangeError(SettingsError):
    """El valor está fuera del rango admitido por el tipo."""
    code = errno.ERANGE


class PersistError(SettingsError):
    """Fallo al guardar el conjunto completo de opciones."""
    code = errno.EIO


class NoSpaceError(PersistError):
    """Las opciones no caben en el bloque no volátil."""
    code = errno.ENOSPC
