"""
Geometría de la consola de opciones.

Filas fijas de pantalla, pares de color y el formato de ancho fijo de
cada fila de opción:

    ' ' + nombre (15, relleno con puntos) + ' ' + valor (60) + ' '
"""

from dataclasses import dataclass


# Pares de color
CPAIR_NORMAL = 1
CPAIR_SELECT = 2
CPAIR_EDIT = 3
CPAIR_ALERT = 4

# Filas de pantalla
TITLE_ROW = 1
SETTINGS_LIST_ROW = 3
SETTINGS_LIST_COL = 1
INFO_ROW = 20
ALERT_ROW = 20
INSTRUCTION_ROW = 22
INSTRUCTION_PAD = "     "

# Tamaño mínimo del lienzo
SCREEN_LINES = 24
SCREEN_COLS = 80

# Fila de una opción
NAME_WIDTH = 15
VALUE_WIDTH = 60
NAME_OFFSET = 1
VALUE_OFFSET = NAME_OFFSET + NAME_WIDTH + 1
ROW_WIDTH = VALUE_OFFSET + VALUE_WIDTH + 1

# Texto máximo que se puede editar (una opción DHCP)
MAX_VALUE_LEN = 255

EMPTY_VALUE = "<not specified>"


@dataclass(frozen=True)
class RowLayout:
    """Fila de opción ya formateada."""
    text: str
    value_offset: int   # Columna relativa donde empieza el valor
    cursor_offset: int  # Columna relativa tras el último caracter del valor


def layout_row(name: str, value: str) -> RowLayout:
    """
    Formatea una fila de opción de ancho fijo.

    El nombre se recorta a NAME_WIDTH y se rellena con puntos; el valor
    (o EMPTY_VALUE si está vacío) se recorta a VALUE_WIDTH y se rellena
    con espacios.
    """
    shown = value or EMPTY_VALUE
    name_field = name[:NAME_WIDTH].ljust(NAME_WIDTH, ".")
    value_field = shown[:VALUE_WIDTH]
    text = " " * NAME_OFFSET + name_field + " " + value_field.ljust(VALUE_WIDTH) + " "
    return RowLayout(
        text=text,
        value_offset=VALUE_OFFSET,
        cursor_offset=VALUE_OFFSET + len(value_field),
    )
