"""
Almacén de opciones respaldado por un archivo JSON.

Los valores se mantienen tipados en memoria; `persist()` guarda el
conjunto completo en disco, como un bloque de almacenamiento no volátil
de capacidad limitada.
"""

import errno
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from optconsole.errors import (
    SettingsError,
    SettingNotFoundError,
    PersistError,
    NoSpaceError,
)
from optconsole.settings.registry import Setting, DEFAULT_SETTINGS, find_setting


logger = logging.getLogger(__name__)

# Tamaño por defecto del bloque no volátil, en bytes
DEFAULT_CAPACITY = 256

# Cada opción ocupa etiqueta + longitud además de sus datos
OPTION_OVERHEAD = 2
END_MARKER_LEN = 1


def default_store_path() -> Path:
    """Ruta por defecto del archivo de opciones."""
    return Path.home() / ".optconsole" / "options.json"


class OptionsFile(BaseModel):
    """Contenido serializado del archivo de opciones."""
    version: int = 1
    values: dict[str, str] = Field(default_factory=dict)


class SettingsStore:
    """Almacén clave/valor de opciones tipadas."""

    def __init__(
        self,
        path: Optional[Path] = None,
        settings: tuple[Setting, ...] = DEFAULT_SETTINGS,
        capacity: int = DEFAULT_CAPACITY,
    ):
        """
        Inicializa el almacén y carga el archivo si existe.

        Args:
            path: Archivo de opciones. Default: ~/.optconsole/options.json
            settings: Opciones registradas (orden fijo)
            capacity: Capacidad del bloque no volátil en bytes
        """
        names = [s.name for s in settings]
        if len(set(names)) != len(names):
            raise ValueError("Los nombres de opciones deben ser únicos")
        if not settings:
            raise ValueError("Se requiere al menos una opción")

        self.path = Path(path) if path is not None else default_store_path()
        self.capacity = capacity
        self._settings = tuple(settings)
        self._values: dict[str, Any] = {}

        if self.path.exists():
            self.load()

    @property
    def settings(self) -> tuple[Setting, ...]:
        """Opciones registradas, en orden de presentación."""
        return self._settings

    def describe(self, setting: Setting) -> str:
        """Descripción legible: nombre (tipo) - descripción."""
        return f"{setting.name} ({setting.type.description}) - {setting.description}"

    def read(self, setting: Setting) -> str:
        """Retorna el valor actual como texto canónico."""
        if setting.name not in self._values:
            raise SettingNotFoundError(setting.name)
        return setting.type.format(self._values[setting.name])

    def write(self, setting: Setting, text: str) -> None:
        """
        Asigna un valor a partir de texto. Texto vacío borra la opción.

        Raises:
            SettingsError: si el texto no es válido para el tipo
        """
        if not text:
            self._values.pop(setting.name, None)
            logger.info("Opción %s borrada", setting.name)
            return

        try:
            value = setting.type.parse(text)
        except SettingsError as e:
            logger.warning("Valor rechazado para %s: %s", setting.name, e)
            raise

        self._values[setting.name] = value
        logger.info("Opción %s = %s", setting.name, setting.type.format(value))

    def used_bytes(self) -> int:
        """Espacio que ocupan las opciones actuales en el bloque no volátil."""
        used = END_MARKER_LEN
        for setting in self._settings:
            if setting.name in self._values:
                text = setting.type.format(self._values[setting.name])
                used += OPTION_OVERHEAD + len(text.encode("utf-8"))
        return used

    def snapshot(self) -> OptionsFile:
        """Valores actuales en forma serializable, en orden de registro."""
        values = {}
        for setting in self._settings:
            if setting.name in self._values:
                values[setting.name] = setting.type.format(self._values[setting.name])
        return OptionsFile(values=values)

    def persist(self) -> Path:
        """
        Guarda todas las opciones en disco.

        Raises:
            NoSpaceError: si no caben en la capacidad configurada
            PersistError: si falla la escritura del archivo
        """
        used = self.used_bytes()
        if used > self.capacity:
            logger.warning(
                "Opciones ocupan %d bytes, capacidad %d", used, self.capacity
            )
            raise NoSpaceError(f"{used} > {self.capacity} bytes")

        payload = self.snapshot().model_dump_json(indent=2)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(payload)
            tmp_path.replace(self.path)
        except OSError as e:
            logger.warning("No se pudo guardar %s: %s", self.path, e)
            raise PersistError(str(e), code=e.errno or errno.EIO) from e

        logger.info("Opciones guardadas en %s (%d bytes)", self.path, used)
        return self.path

    def load(self) -> None:
        """
        Carga las opciones desde disco.

        Un archivo corrupto se trata como vacío; nombres desconocidos y
        valores inválidos se ignoran.
        """
        self._values = {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = OptionsFile.model_validate_json(f.read())
        except (OSError, ValidationError) as e:
            logger.warning("Archivo de opciones ilegible %s: %s", self.path, e)
            return

        for name, text in data.values.items():
            try:
                setting = find_setting(self._settings, name)
            except KeyError:
                logger.warning("Opción desconocida en %s: %s", self.path, name)
                continue
            try:
                self._values[name] = setting.type.parse(text)
            except SettingsError as e:
                logger.warning("Valor inválido para %s en %s: %s", name, self.path, e)
