"""
Estado de la consola de opciones.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from optconsole.settings import Setting, SettingsStore
from optconsole.cli.console.screen import Screen

from .messages import MessageBar
from .widget import SettingWidget


class FormMode:
    """Modos de la consola."""
    BROWSE = "browse"  # Flechas mueven el foco
    EDIT = "edit"      # Las teclas van a la caja de edición


@dataclass
class FormState:
    """Opción con foco y widget asociado. El modo sale del widget."""
    settings: tuple[Setting, ...]
    focus_index: int = 0
    widget: Optional[SettingWidget] = None

    @property
    def editing(self) -> bool:
        return self.widget is not None and self.widget.editing

    @property
    def mode(self) -> str:
        return FormMode.EDIT if self.editing else FormMode.BROWSE

    def next_index(self) -> int:
        """Índice siguiente, sin pasar del último."""
        return min(self.focus_index + 1, len(self.settings) - 1)

    def prev_index(self) -> int:
        """Índice anterior, sin pasar del primero."""
        return max(self.focus_index - 1, 0)


@dataclass
class ConsoleContext:
    """Colaboradores de la consola: almacén, lienzo, mensajes y teclado."""
    store: SettingsStore
    screen: Screen
    messages: MessageBar
    get_key: Callable[[], str]
