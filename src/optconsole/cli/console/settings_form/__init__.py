"""
Consola interactiva de opciones.

Muestra la lista de opciones, permite moverse con las flechas, editar
el valor de la opción con foco y guardar el conjunto con Ctrl-S.
"""

from .layout import layout_row, RowLayout, EMPTY_VALUE, NAME_WIDTH, VALUE_WIDTH
from .models import FormMode, FormState, ConsoleContext
from .widget import SettingWidget, widget_at
from .messages import MessageBar
from .main import settings_ui, main_loop

__all__ = [
    "layout_row",
    "RowLayout",
    "EMPTY_VALUE",
    "NAME_WIDTH",
    "VALUE_WIDTH",
    "FormMode",
    "FormState",
    "ConsoleContext",
    "SettingWidget",
    "widget_at",
    "MessageBar",
    "settings_ui",
    "main_loop",
]
