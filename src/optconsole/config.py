"""Modelos Pydantic para la configuración de la consola."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from optconsole.settings.store import DEFAULT_CAPACITY, default_store_path


class ThemeName(str, Enum):
    """Temas disponibles."""
    DEFAULT = "default"
    NORD = "nord"
    MONOKAI = "monokai"
    MINIMAL = "minimal"


class ConsoleConfig(BaseModel):
    """Configuración de una sesión de la consola de opciones."""
    theme: ThemeName = ThemeName.DEFAULT
    alert_seconds: float = Field(default=2.0, description="Duración visible de una alerta")
    store_path: Path = Field(default_factory=default_store_path)
    capacity: int = Field(default=DEFAULT_CAPACITY, description="Bytes del bloque no volátil")
    log_file: Optional[Path] = None
    debug: bool = False

    @field_validator("alert_seconds")
    @classmethod
    def validate_alert_seconds(cls, v: float) -> float:
        if v < 0:
            raise ValueError("alert_seconds no puede ser negativo")
        return v

    @field_validator("capacity")
    @classmethod
    def validate_capacity(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("capacity debe ser positiva")
        return v
