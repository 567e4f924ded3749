"""
Widget de una opción: valor editable, posición en pantalla y modo.
"""

import logging
from typing import Optional

from optconsole.errors import SettingsError
from optconsole.settings import Setting, SettingsStore
from optconsole.cli.console.screen import Screen
from optconsole.cli.console.editbox import EditBox

from .layout import (
    layout_row,
    MAX_VALUE_LEN,
    VALUE_OFFSET,
    VALUE_WIDTH,
    SETTINGS_LIST_ROW,
    SETTINGS_LIST_COL,
)


logger = logging.getLogger(__name__)


class SettingWidget:
    """Representación editable de una opción en una fila de pantalla."""

    def __init__(self, store: SettingsStore, setting: Setting, row: int, col: int):
        self.store = store
        self.setting = setting
        self.row = row
        self.col = col
        self.editing = False
        self.editbox: Optional[EditBox] = None
        self.load()

    @property
    def value(self) -> str:
        """Texto actual del widget (puede diferir del almacén durante la edición)."""
        return self.editbox.value

    def load(self) -> None:
        """Relee el valor del almacén y vuelve al modo navegación."""
        self.editing = False

        try:
            value = self.store.read(self.setting)
        except SettingsError:
            value = ""

        self.editbox = EditBox(
            value,
            MAX_VALUE_LEN,
            self.row,
            self.col + VALUE_OFFSET,
            VALUE_WIDTH,
        )

    def save(self) -> None:
        """
        Escribe el valor en el almacén.

        Raises:
            SettingsError: tal como la reporta el almacén
        """
        self.store.write(self.setting, self.value)

    def draw(self, screen: Screen) -> None:
        """Dibuja la fila con el par de color activo."""
        layout = layout_row(self.setting.name, self.value)
        screen.mvprintw(self.row, self.col, layout.text)
        screen.move(self.row, self.col + layout.cursor_offset)
        if self.editing:
            self.editbox.draw(screen)

    def edit(self, key: str):
        """
        Pasa una tecla a la caja de edición, entrando en modo edición.

        Returns:
            La tecla si la caja no la consumió, o None
        """
        if not self.editing:
            logger.debug("Editando %s", self.setting.name)
        self.editing = True
        return self.editbox.handle_key(key)


def widget_at(store: SettingsStore, index: int) -> SettingWidget:
    """Crea el widget de la opción en la posición `index` de la lista."""
    return SettingWidget(
        store,
        store.settings[index],
        SETTINGS_LIST_ROW + index,
        SETTINGS_LIST_COL,
    )
