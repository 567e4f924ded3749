"""
Handler para el modo navegación.
"""

import logging
from typing import Optional

from optconsole.errors import SettingsError

from ..models import FormState, ConsoleContext
from ..widget import widget_at


logger = logging.getLogger(__name__)


def save_configuration(ctx: ConsoleContext) -> int:
    """
    Guarda todas las opciones en el almacenamiento persistente.

    Returns:
        0 si se guardó, o el código del error
    """
    try:
        ctx.store.persist()
    except SettingsError as e:
        ctx.messages.alert(f" Could not save options: {e.reason} ")
        return e.code
    return 0


def handle_browse(key: str, state: FormState, ctx: ConsoleContext) -> Optional[int]:
    """Maneja el modo navegación."""
    next_idx = state.focus_index

    if key == 'down':
        next_idx = state.next_index()

    elif key == 'up':
        next_idx = state.prev_index()

    elif key == 'ctrl_s':
        return save_configuration(ctx)

    else:
        # Cualquier otra tecla inicia la edición de la opción con foco
        state.widget.edit(key)

    if next_idx != state.focus_index:
        # Redibujar la fila anterior sin resaltar
        state.widget.draw(ctx.screen)
        state.widget = widget_at(ctx.store, next_idx)
        state.focus_index = next_idx
        logger.debug("Foco en %s", state.widget.setting.name)

    return None
