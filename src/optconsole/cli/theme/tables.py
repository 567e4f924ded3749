"""
Funciones para crear e imprimir tablas Rich.
"""

from rich.table import Table
from rich.text import Text
from rich import box

from optconsole.cli.theme.palette import get_console, get_palette
from optconsole.errors import SettingsError
from optconsole.settings.store import SettingsStore
from optconsole.cli.console.settings_form.layout import EMPTY_VALUE


def create_settings_table(title: str = None) -> Table:
    """Crea la tabla de opciones."""
    p = get_palette()

    table = Table(
        title=title,
        title_style=f"bold {p.primary}",
        border_style=p.border,
        header_style=f"bold {p.secondary}",
        box=box.ROUNDED,
        show_header=True,
        padding=(0, 1),
    )
    table.add_column("Opción", justify="left")
    table.add_column("Tipo", justify="left", style=p.muted)
    table.add_column("Valor", justify="left")
    table.add_column("Descripción", justify="left", style=p.muted)
    return table


def print_settings_table(store: SettingsStore, title: str = "OPCIONES") -> None:
    """Imprime todas las opciones registradas con su valor actual."""
    console = get_console()
    p = get_palette()

    table = create_settings_table(title)

    for setting in store.settings:
        try:
            value = store.read(setting)
            value_style = f"bold {p.accent}"
        except SettingsError:
            value = EMPTY_VALUE
            value_style = p.muted
        table.add_row(
            setting.name,
            setting.type.description,
            Text(value, style=value_style),
            setting.description,
        )

    console.print(table)
