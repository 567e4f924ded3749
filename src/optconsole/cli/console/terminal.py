"""
Utilidades de terminal para la consola de opciones.

Captura de teclas en modo crudo y pantalla completa con Rich Live.
"""

import codecs
import os
import select
import sys
from typing import Callable, Optional

from rich.console import Console
from rich.live import Live


# Espera por el resto de una secuencia tras un ESC, en segundos
ESCAPE_TIMEOUT = 0.05

# Secuencias ESC [ X / ESC O X
ESCAPE_FINAL_KEYS = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
    "H": "home",
    "F": "end",
}

# Secuencias ESC [ n ~
ESCAPE_TILDE_KEYS = {
    "1": "home",
    "7": "home",
    "4": "end",
    "8": "end",
    "3": "delete",
}

# Segundo byte de teclas especiales en Windows (tras \xe0 o \x00)
WINDOWS_SPECIAL_KEYS = {
    "H": "up",
    "P": "down",
    "K": "left",
    "M": "right",
    "G": "home",
    "O": "end",
    "S": "delete",
}


def decode_key(
    read: Callable[[], str],
    pending: Optional[Callable[[], bool]] = None,
) -> str:
    """
    Decodifica una tecla leyendo caracteres de a uno.

    Args:
        read: Lee un caracter ("" al cerrarse la entrada)
        pending: Indica si hay más entrada esperando. Sin ella, un ESC
            siempre se toma como inicio de secuencia.

    Returns:
        String representando la tecla presionada:
        - 'up', 'down', 'left', 'right', 'home', 'end', 'delete'
        - 'enter': CR o LF
        - 'backspace', 'tab', 'esc'
        - 'ctrl_<letra>': otros caracteres de control (Ctrl-C -> 'ctrl_c')
        - el caracter tal cual (respetando mayúsculas)
    """
    key = read()
    if not key:
        raise EOFError("entrada de teclado cerrada")

    if key == '\x1b':  # Secuencia de escape
        if pending is not None and not pending():
            return 'esc'  # ESC suelto
        key2 = read()
        if key2 == 'O':
            return ESCAPE_FINAL_KEYS.get(read(), 'esc')
        if key2 == '[':
            return _decode_csi(read)
        return 'esc'
    elif key in ('\r', '\n'):
        return 'enter'
    elif key in ('\x7f', '\x08'):
        return 'backspace'
    elif key == '\t':
        return 'tab'
    elif ord(key) < 32:
        return 'ctrl_' + chr(ord(key) + 64).lower()

    return key


def _decode_csi(read: Callable[[], str]) -> str:
    """
    Consume una secuencia CSI completa (tras ESC [) y la nombra.

    Los modificadores (ESC [ 1 ; 5 A = Ctrl+Up) se ignoran.
    """
    params = ""
    ch = read()
    while ch and ' ' <= ch <= '?':  # bytes de parámetro e intermedios
        params += ch
        ch = read()

    if not ch or not '@' <= ch <= '~':
        return 'esc'  # secuencia mal formada
    if ch == '~':
        return ESCAPE_TILDE_KEYS.get(params.split(';')[0], 'esc')
    return ESCAPE_FINAL_KEYS.get(ch, 'esc')


def _posix_reader(fd: int) -> tuple[Callable[[], str], Callable[[], bool]]:
    """Lectura sin buffer del descriptor, decodificando UTF-8."""
    decoder = codecs.getincrementaldecoder("utf-8")("replace")

    def read() -> str:
        while True:
            data = os.read(fd, 1)
            if not data:
                return ""
            ch = decoder.decode(data)
            if ch:
                return ch

    def pending() -> bool:
        ready, _, _ = select.select([fd], [], [], ESCAPE_TIMEOUT)
        return bool(ready)

    return read, pending


def get_key() -> str:
    """Captura una tecla del usuario (bloqueante)."""
    if os.name == 'nt':
        # Windows
        import msvcrt

        key = msvcrt.getwch()
        if key in ('\xe0', '\x00'):  # Tecla especial (flechas)
            return WINDOWS_SPECIAL_KEYS.get(msvcrt.getwch(), 'esc')
        if key == '\x1b':
            return 'esc'
        return decode_key(lambda: key)
    else:
        # Unix/Linux/Mac
        import tty
        import termios

        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            read, pending = _posix_reader(fd)
            return decode_key(read, pending)
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)


class Terminal:
    """Pantalla completa sobre Rich Live más lectura de teclas."""

    def __init__(self, console: Optional[Console] = None):
        if console is None:
            from optconsole.cli.theme import get_console
            console = get_console()
        self.console = console
        self._live: Optional[Live] = None

    @property
    def size(self) -> tuple[int, int]:
        """(columnas, filas) del terminal."""
        width, height = self.console.size
        return width, height

    def start(self, screen) -> None:
        """Entra en pantalla alternativa y dibuja el lienzo inicial."""
        self._live = Live(
            screen.render(),
            console=self.console,
            auto_refresh=False,
            screen=True,
        )
        self._live.start(refresh=True)

    def refresh(self, screen) -> None:
        """Vuelca el lienzo al terminal."""
        if self._live is not None:
            self._live.update(screen.render(), refresh=True)

    def stop(self) -> None:
        """Restaura el terminal."""
        if self._live is not None:
            self._live.stop()
            self._live = None

    def get_key(self) -> str:
        return get_key()
