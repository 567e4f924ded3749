"""
Dibujo de las filas de título, información e instrucciones.
"""

from optconsole.settings import Setting

from .layout import TITLE_ROW, INFO_ROW, INSTRUCTION_ROW, INSTRUCTION_PAD
from .models import ConsoleContext


TITLE = "Option configuration console"


def draw_title_row(ctx: ConsoleContext) -> None:
    ctx.messages.msg(TITLE_ROW, TITLE, bold=True)


def draw_info_row(ctx: ConsoleContext, setting: Setting) -> None:
    """Descripción de la opción con foco."""
    ctx.messages.clear(INFO_ROW)
    ctx.messages.msg(INFO_ROW, ctx.store.describe(setting), bold=True)


def draw_instruction_row(ctx: ConsoleContext, editing: bool) -> None:
    """Teclas disponibles según el modo."""
    ctx.messages.clear(INSTRUCTION_ROW)
    if editing:
        ctx.messages.msg(
            INSTRUCTION_ROW,
            "Enter - accept changes" + INSTRUCTION_PAD + "Ctrl-C - discard changes",
        )
    else:
        ctx.messages.msg(INSTRUCTION_ROW, "Ctrl-S - save configuration")
