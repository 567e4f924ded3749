"""
Handlers de teclas para la consola de opciones.

Cada módulo maneja un modo específico.
"""

from typing import Optional

from ..models import FormState, ConsoleContext

from .browse import handle_browse, save_configuration
from .edit import handle_edit


def handle_key(key: str, state: FormState, ctx: ConsoleContext) -> Optional[int]:
    """
    Maneja una tecla presionada.

    Returns:
        None si debe continuar el loop
        Código de salida de la sesión si debe terminar
    """
    # Modo edición
    if state.editing:
        return handle_edit(key, state, ctx)

    # Modo navegación
    return handle_browse(key, state, ctx)


__all__ = ["handle_key", "handle_browse", "handle_edit", "save_configuration"]
