"""
Lienzo de caracteres para la consola de opciones.

Emula el modelo de pantalla de curses: pares de color numerados,
posición del cursor, escritura con formato y borrado de filas. Cada
celda guarda su caracter y su estilo Rich; `render()` produce el Text
que se vuelca al terminal.
"""

from typing import Callable, Optional

from rich.style import Style
from rich.text import Text


BOLD = "bold"

# Estilo con que se marca la celda del cursor
CURSOR_STYLE = "reverse"


class Screen:
    """Lienzo de `lines` x `cols` celdas."""

    def __init__(self, lines: int = 24, cols: int = 80):
        self.lines = lines
        self.cols = cols
        self.cursor_row = 0
        self.cursor_col = 0
        self.on_refresh: Optional[Callable[["Screen"], None]] = None
        self._pairs: dict[int, str] = {0: ""}
        self._pair = 0
        self._attrs: list[str] = []
        self._cells = [[(" ", "")] * cols for _ in range(lines)]

    # ------------------------------------------------------------------
    # Atributos
    # ------------------------------------------------------------------

    def init_pair(self, pair: int, style: str) -> None:
        """Registra un par de color ("white on blue")."""
        Style.parse(style)  # valida el estilo al registrarlo
        self._pairs[pair] = style

    def color_set(self, pair: int) -> None:
        """Activa un par de color para las escrituras siguientes."""
        if pair not in self._pairs:
            raise KeyError(f"Par de color no registrado: {pair}")
        self._pair = pair

    @property
    def pair(self) -> int:
        return self._pair

    def attron(self, attr: str) -> None:
        if attr not in self._attrs:
            self._attrs.append(attr)

    def attroff(self, attr: str) -> None:
        if attr in self._attrs:
            self._attrs.remove(attr)

    def current_style(self) -> str:
        """Estilo resultante del par activo más los atributos."""
        return " ".join(s for s in [self._pairs[self._pair], *self._attrs] if s)

    # ------------------------------------------------------------------
    # Escritura
    # ------------------------------------------------------------------

    def move(self, row: int, col: int) -> None:
        """Mueve el cursor, limitado al lienzo."""
        self.cursor_row = min(max(row, 0), self.lines - 1)
        self.cursor_col = min(max(col, 0), self.cols - 1)

    def addstr(self, text: str) -> None:
        """Escribe en la posición del cursor; lo que excede la fila se descarta."""
        style = self.current_style()
        row = self._cells[self.cursor_row]
        col = self.cursor_col
        for ch in text:
            if col >= self.cols:
                break
            row[col] = (ch, style)
            col += 1
        self.cursor_col = min(col, self.cols - 1)

    def mvprintw(self, row: int, col: int, text: str) -> None:
        self.move(row, col)
        self.addstr(text)

    def clrtoeol(self) -> None:
        """Borra desde el cursor hasta el final de la fila."""
        style = self._pairs[self._pair]
        row = self._cells[self.cursor_row]
        for col in range(self.cursor_col, self.cols):
            row[col] = (" ", style)

    def erase(self) -> None:
        """Borra todo el lienzo con el par activo."""
        style = self._pairs[self._pair]
        self._cells = [[(" ", style)] * self.cols for _ in range(self.lines)]
        self.move(0, 0)

    def refresh(self) -> None:
        """Vuelca el lienzo al terminal, si hay uno conectado."""
        if self.on_refresh is not None:
            self.on_refresh(self)

    # ------------------------------------------------------------------
    # Lectura
    # ------------------------------------------------------------------

    def row_text(self, row: int) -> str:
        """Texto visible de una fila."""
        return "".join(ch for ch, _ in self._cells[row])

    def style_at(self, row: int, col: int) -> str:
        return self._cells[row][col][1]

    def render(self) -> Text:
        """Construye el Text Rich del lienzo, marcando la celda del cursor."""
        text = Text(no_wrap=True, overflow="crop", end="")
        for r, row in enumerate(self._cells):
            if r:
                text.append("\n")
            run = ""
            run_style = None
            for c, (ch, style) in enumerate(row):
                if r == self.cursor_row and c == self.cursor_col:
                    style = f"{style} {CURSOR_STYLE}".strip()
                if style != run_style and run:
                    text.append(run, style=run_style or None)
                    run = ""
                run_style = style
                run += ch
            if run:
                text.append(run, style=run_style or None)
        return text
