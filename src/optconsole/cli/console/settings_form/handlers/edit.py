"""
Handler para el modo edición.
"""

from typing import Optional

from optconsole.errors import SettingsError

from ..models import FormState, ConsoleContext


def handle_edit(key: str, state: FormState, ctx: ConsoleContext) -> Optional[int]:
    """Maneja el modo edición."""
    widget = state.widget
    key = widget.edit(key)

    if key == 'enter':
        try:
            widget.save()
        except SettingsError as e:
            ctx.messages.alert(f" Could not set {widget.setting.name}: {e.reason} ")
        # Siempre recargar: se muestra lo que quedó en el almacén
        widget.load()

    elif key == 'ctrl_c':
        widget.load()

    return None
