"""Configuración de pytest para tests de optconsole."""

import pytest

from optconsole.settings import Setting, SettingsStore, SETTING_TYPES
from optconsole.cli.console.screen import Screen
from optconsole.cli.console.settings_form import ConsoleContext, MessageBar
from optconsole.cli.console.settings_form.layout import (
    CPAIR_NORMAL,
    CPAIR_SELECT,
    CPAIR_EDIT,
    CPAIR_ALERT,
)


class FakeTerminal:
    """Terminal simulado: teclas guionadas y registro de refrescos."""

    def __init__(self, keys, size=(80, 24)):
        self.keys = list(keys)
        self.size = size
        self.started = False
        self.stopped = False
        self.refreshes = 0

    def start(self, screen):
        self.started = True

    def refresh(self, screen):
        self.refreshes += 1

    def stop(self):
        self.stopped = True

    def get_key(self):
        if not self.keys:
            raise AssertionError("Se agotaron las teclas del guion")
        return self.keys.pop(0)


@pytest.fixture
def sample_settings():
    """Tres opciones de tipos distintos."""
    return (
        Setting("hostname", SETTING_TYPES["string"], "Host name"),
        Setting("ip", SETTING_TYPES["ipv4"], "IPv4 address"),
        Setting("priority", SETTING_TYPES["int8"], "Priority of these options"),
    )


@pytest.fixture
def store_path(tmp_path):
    """Archivo de opciones temporal."""
    return tmp_path / "options.json"


@pytest.fixture
def store(store_path, sample_settings):
    """Almacén vacío con las opciones de ejemplo."""
    return SettingsStore(store_path, settings=sample_settings)


@pytest.fixture
def screen():
    """Lienzo 80x24 con los pares de color registrados."""
    scr = Screen(lines=24, cols=80)
    scr.init_pair(CPAIR_NORMAL, "white on blue")
    scr.init_pair(CPAIR_SELECT, "white on red")
    scr.init_pair(CPAIR_EDIT, "black on cyan")
    scr.init_pair(CPAIR_ALERT, "bold white on red")
    scr.color_set(CPAIR_NORMAL)
    scr.erase()
    return scr


@pytest.fixture
def sleeps():
    """Registro de pausas pedidas por las alertas."""
    return []


@pytest.fixture
def messages(screen, sleeps):
    return MessageBar(screen, alert_seconds=2.0, sleep=sleeps.append)


@pytest.fixture
def make_ctx(store, screen, messages):
    """Crea un ConsoleContext con un guion de teclas."""
    def _make(keys):
        terminal = FakeTerminal(keys)
        return ConsoleContext(
            store=store,
            screen=screen,
            messages=messages,
            get_key=terminal.get_key,
        )
    return _make


@pytest.fixture
def fake_terminal():
    """Fábrica de terminales simulados."""
    return FakeTerminal
