"""
Caja de edición de una línea.

Edita un texto acotado a `max_len` caracteres dentro de un campo de
`width` columnas en pantalla, desplazándose horizontalmente para que el
cursor siempre quede visible.
"""

from typing import Optional

from optconsole.cli.console.screen import Screen


class EditBox:
    """Editor de línea sobre un campo de pantalla."""

    def __init__(
        self,
        buffer: str,
        max_len: int,
        row: int,
        col: int,
        width: int,
        cursor: Optional[int] = None,
    ):
        """
        Args:
            buffer: Texto inicial (se recorta a max_len)
            max_len: Longitud máxima del texto
            row: Fila en pantalla
            col: Columna donde empieza el campo
            width: Ancho visible del campo
            cursor: Posición inicial del cursor (default: final del texto)
        """
        self.value = buffer[:max_len]
        self.max_len = max_len
        self.row = row
        self.col = col
        self.width = width
        if cursor is None:
            cursor = len(self.value)
        self.cursor = min(max(cursor, 0), len(self.value))
        self.first = 0  # Primer caracter visible

    def handle_key(self, key: str) -> Optional[str]:
        """
        Procesa una tecla.

        Returns:
            None si la tecla fue consumida, o la misma tecla si la caja
            no la maneja (Enter, Ctrl-C, flechas verticales...)
        """
        if len(key) == 1 and key.isprintable():
            if len(self.value) < self.max_len:
                self.value = self.value[:self.cursor] + key + self.value[self.cursor:]
                self.cursor += 1

        elif key == 'backspace':
            if self.cursor > 0:
                self.value = self.value[:self.cursor - 1] + self.value[self.cursor:]
                self.cursor -= 1

        elif key in ('delete', 'ctrl_d'):
            self.value = self.value[:self.cursor] + self.value[self.cursor + 1:]

        elif key in ('left', 'ctrl_b'):
            self.cursor = max(self.cursor - 1, 0)

        elif key in ('right', 'ctrl_f'):
            self.cursor = min(self.cursor + 1, len(self.value))

        elif key in ('home', 'ctrl_a'):
            self.cursor = 0

        elif key in ('end', 'ctrl_e'):
            self.cursor = len(self.value)

        elif key == 'ctrl_k':
            self.value = self.value[:self.cursor]

        elif key == 'ctrl_u':
            self.value = ""
            self.cursor = 0

        else:
            return key

        return None

    def draw(self, screen: Screen) -> None:
        """Dibuja el campo y deja el cursor en la posición de edición."""
        if self.cursor < self.first:
            self.first = self.cursor
        elif self.cursor >= self.first + self.width:
            self.first = self.cursor - self.width + 1

        visible = self.value[self.first:self.first + self.width]
        screen.mvprintw(self.row, self.col, visible.ljust(self.width))
        screen.move(self.row, self.col + self.cursor - self.first)
