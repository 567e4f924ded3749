"""
Mensajes centrados y alertas temporales.
"""

import time
from typing import Callable

from optconsole.cli.console.screen import BOLD, Screen

from .layout import ALERT_ROW, CPAIR_ALERT, CPAIR_NORMAL


class MessageBar:
    """Escribe mensajes centrados en filas fijas de la pantalla."""

    def __init__(
        self,
        screen: Screen,
        alert_seconds: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.screen = screen
        self.alert_seconds = alert_seconds
        self.sleep = sleep

    def msg(self, row: int, text: str, bold: bool = False) -> None:
        """Imprime un mensaje centrado en la fila, opcionalmente en negrita."""
        text = text[:self.screen.cols - 1]
        if bold:
            self.screen.attron(BOLD)
        self.screen.mvprintw(row, (self.screen.cols - len(text)) // 2, text)
        if bold:
            self.screen.attroff(BOLD)

    def clear(self, row: int) -> None:
        """Borra la fila completa."""
        self.screen.move(row, 0)
        self.screen.clrtoeol()

    def alert(self, text: str) -> None:
        """
        Muestra una alerta durante `alert_seconds` y la borra.

        Bloquea toda la consola mientras la alerta está visible.
        """
        self.clear(ALERT_ROW)
        self.screen.color_set(CPAIR_ALERT)
        self.msg(ALERT_ROW, text)
        self.screen.refresh()
        self.sleep(self.alert_seconds)
        self.screen.color_set(CPAIR_NORMAL)
        self.clear(ALERT_ROW)
