"""
Función principal de la consola de opciones.
"""

import logging
import time
from typing import Callable, Optional

from optconsole.config import ConsoleConfig
from optconsole.settings import SettingsStore
from optconsole.cli.theme.palette import THEMES
from optconsole.cli.console.screen import Screen
from optconsole.cli.console.terminal import Terminal

from .layout import (
    CPAIR_NORMAL,
    CPAIR_SELECT,
    CPAIR_EDIT,
    CPAIR_ALERT,
    SCREEN_LINES,
    SCREEN_COLS,
)
from .models import FormState, ConsoleContext
from .messages import MessageBar
from .widget import widget_at
from .builders import draw_title_row, draw_info_row, draw_instruction_row
from .handlers import handle_key


logger = logging.getLogger(__name__)


def main_loop(ctx: ConsoleContext) -> int:
    """
    Ciclo de navegación y edición.

    Returns:
        Código de salida del guardado final
    """
    screen = ctx.screen
    state = FormState(settings=ctx.store.settings)

    # Contenido inicial. En orden inverso, para que el último widget
    # creado sea el de la primera opción.
    draw_title_row(ctx)
    screen.color_set(CPAIR_NORMAL)
    for index in reversed(range(len(state.settings))):
        state.widget = widget_at(ctx.store, index)
        state.widget.draw(screen)
    state.focus_index = 0

    while True:
        # Redibujar filas de información e instrucciones
        draw_info_row(ctx, state.widget.setting)
        draw_instruction_row(ctx, state.editing)

        # Redibujar la opción con foco
        screen.color_set(CPAIR_EDIT if state.editing else CPAIR_SELECT)
        state.widget.draw(screen)
        screen.color_set(CPAIR_NORMAL)
        screen.refresh()

        key = ctx.get_key()
        rc = handle_key(key, state, ctx)
        if rc is not None:
            return rc


def settings_ui(
    store: SettingsStore,
    terminal: Optional[Terminal] = None,
    config: Optional[ConsoleConfig] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Ejecuta una sesión interactiva de configuración de opciones.

    Args:
        store: Almacén de opciones a editar
        terminal: Terminal de salida y teclado (default: terminal real)
        config: Configuración de la sesión (tema, duración de alertas)
        sleep: Pausa usada por las alertas

    Returns:
        0 si las opciones se guardaron, o el código del error de guardado
    """
    if config is None:
        config = ConsoleConfig()
    if terminal is None:
        terminal = Terminal()

    palette = THEMES[config.theme]
    cols, lines = terminal.size
    screen = Screen(lines=max(lines, SCREEN_LINES), cols=max(cols, SCREEN_COLS))
    screen.init_pair(CPAIR_NORMAL, palette.pair_normal)
    screen.init_pair(CPAIR_SELECT, palette.pair_select)
    screen.init_pair(CPAIR_EDIT, palette.pair_edit)
    screen.init_pair(CPAIR_ALERT, palette.pair_alert)
    screen.color_set(CPAIR_NORMAL)
    screen.erase()

    ctx = ConsoleContext(
        store=store,
        screen=screen,
        messages=MessageBar(screen, config.alert_seconds, sleep),
        get_key=terminal.get_key,
    )

    logger.info("Sesión iniciada (%d opciones)", len(store.settings))
    terminal.start(screen)
    screen.on_refresh = terminal.refresh
    try:
        rc = main_loop(ctx)
    finally:
        screen.on_refresh = None
        terminal.stop()

    logger.info("Sesión terminada con código %d", rc)
    return rc
