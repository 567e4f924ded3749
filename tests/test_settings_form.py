"""
Tests para la consola de opciones: navegación, edición y guardado.
"""

import errno
import random
from unittest.mock import patch

import pytest

from optconsole.config import ConsoleConfig
from optconsole.settings import SettingsStore
from optconsole.cli.console.settings_form import (
    FormMode,
    FormState,
    main_loop,
    settings_ui,
    widget_at,
)
from optconsole.cli.console.settings_form.handlers import (
    handle_key,
    handle_browse,
    handle_edit,
)
from optconsole.cli.console.settings_form.layout import (
    ALERT_ROW,
    INFO_ROW,
    INSTRUCTION_ROW,
    SETTINGS_LIST_ROW,
    TITLE_ROW,
    VALUE_OFFSET,
)


def make_state(store, index=0):
    """Estado con foco en `index`, en modo navegación."""
    return FormState(
        settings=store.settings,
        focus_index=index,
        widget=widget_at(store, index),
    )


class TestBrowse:
    """Tests del modo navegación."""

    def test_down_and_up_move_focus(self, store, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        handle_browse("down", state, ctx)
        assert state.focus_index == 1
        assert state.widget.setting.name == "ip"
        handle_browse("up", state, ctx)
        assert state.focus_index == 0
        assert state.widget.setting.name == "hostname"

    def test_down_at_last_setting_does_nothing(self, store, make_ctx):
        """Flecha abajo en la última opción: sin cambios ni accesos al almacén."""
        ctx = make_ctx([])
        state = make_state(store, index=2)
        widget = state.widget
        with patch.object(store, "read", wraps=store.read) as read, \
                patch.object(store, "write", wraps=store.write) as write, \
                patch.object(store, "persist", wraps=store.persist) as persist:
            assert handle_browse("down", state, ctx) is None
        assert state.focus_index == 2
        assert state.widget is widget
        read.assert_not_called()
        write.assert_not_called()
        persist.assert_not_called()

    def test_up_at_first_setting_does_nothing(self, store, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        handle_browse("up", state, ctx)
        assert state.focus_index == 0

    def test_focus_always_in_bounds(self, store, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        rng = random.Random(7)
        for _ in range(200):
            handle_browse(rng.choice(["up", "down"]), state, ctx)
            assert 0 <= state.focus_index <= len(store.settings) - 1
            assert state.widget.setting is store.settings[state.focus_index]

    def test_focus_change_reloads_from_store(self, store, sample_settings, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        store.write(sample_settings[1], "10.9.8.7")
        handle_browse("down", state, ctx)
        assert state.widget.value == "10.9.8.7"

    def test_other_key_enters_edit(self, store, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        assert state.mode == FormMode.BROWSE
        handle_browse("a", state, ctx)
        assert state.mode == FormMode.EDIT
        assert state.widget.value == "a"

    def test_enter_in_browse_enters_edit(self, store, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        handle_browse("enter", state, ctx)
        assert state.editing is True
        assert state.widget.value == ""

    def test_save_command_persists(self, store, store_path, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        assert handle_browse("ctrl_s", state, ctx) == 0
        assert store_path.exists()

    def test_save_failure_alerts_and_returns_code(self, store_path, sample_settings, make_ctx, sleeps):
        ctx = make_ctx([])
        store = SettingsStore(store_path, settings=sample_settings, capacity=4)
        store.write(sample_settings[0], "too-big")
        ctx.store = store
        state = make_state(store)

        seen = []
        ctx.screen.on_refresh = lambda scr: seen.append(scr.row_text(ALERT_ROW).strip())

        assert handle_browse("ctrl_s", state, ctx) == errno.ENOSPC
        assert seen == ["Could not save options: No space left on device"]
        assert sleeps == [2.0]


class TestEdit:
    """Tests del modo edición."""

    def test_typing_is_local(self, store, sample_settings, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        with patch.object(store, "write", wraps=store.write) as write:
            for key in ["a", "b", "left", "X"]:
                handle_key(key, state, ctx)
        write.assert_not_called()
        assert state.widget.value == "aXb"
        assert state.editing is True

    def test_commit_writes_and_reloads(self, store, sample_settings, make_ctx):
        ctx = make_ctx([])
        state = make_state(store, index=2)
        for key in "0x10":
            handle_key(key, state, ctx)
        with patch.object(store, "read", wraps=store.read) as read:
            handle_edit("enter", state, ctx)
        read.assert_called_once_with(sample_settings[2])
        assert state.editing is False
        # Se muestra el valor canónico del almacén, no el tecleado
        assert state.widget.value == "16"

    def test_commit_failure_alerts_and_reloads(self, store, sample_settings, make_ctx, sleeps):
        store.write(sample_settings[1], "10.0.0.1")
        ctx = make_ctx([])
        state = make_state(store, index=1)
        seen = []
        ctx.screen.on_refresh = lambda scr: seen.append(scr.row_text(ALERT_ROW).strip())

        for key in "xyz":
            handle_key(key, state, ctx)
        with patch.object(store, "read", wraps=store.read) as read:
            handle_key("enter", state, ctx)

        assert seen == ["Could not set ip: Invalid argument"]
        assert sleeps == [2.0]
        read.assert_called_once()
        assert state.editing is False
        assert state.widget.value == "10.0.0.1"
        assert store.read(sample_settings[1]) == "10.0.0.1"

    def test_cancel_never_writes(self, store, sample_settings, make_ctx):
        """Escribir y cancelar deja el almacén sin cambios."""
        store.write(sample_settings[0], "client")
        ctx = make_ctx([])
        state = make_state(store)
        with patch.object(store, "write", wraps=store.write) as write:
            for key in ["x", "y", "ctrl_c"]:
                handle_key(key, state, ctx)
        write.assert_not_called()
        assert state.mode == FormMode.BROWSE
        assert state.widget.value == "client"
        assert store.read(sample_settings[0]) == "client"

    def test_arrows_do_not_move_focus_while_editing(self, store, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        handle_key("a", state, ctx)
        handle_key("down", state, ctx)
        assert state.focus_index == 0
        assert state.editing is True

    def test_save_command_ignored_while_editing(self, store, store_path, make_ctx):
        ctx = make_ctx([])
        state = make_state(store)
        handle_key("a", state, ctx)
        assert handle_key("ctrl_s", state, ctx) is None
        assert not store_path.exists()


class TestMainLoop:
    """Tests del ciclo completo con teclas guionadas."""

    def test_initial_screen(self, store, make_ctx, screen):
        ctx = make_ctx(["ctrl_s"])
        assert main_loop(ctx) == 0

        assert screen.row_text(TITLE_ROW).strip() == "Option configuration console"
        assert screen.style_at(TITLE_ROW, 40) == "white on blue bold"
        for i, setting in enumerate(store.settings):
            assert screen.row_text(SETTINGS_LIST_ROW + i)[2:].startswith(setting.name)
        assert screen.row_text(INFO_ROW).strip() == "hostname (string) - Host name"
        assert screen.row_text(INSTRUCTION_ROW).strip() == "Ctrl-S - save configuration"
        # Opción con foco resaltada, el resto normal
        assert screen.style_at(SETTINGS_LIST_ROW, 2) == "white on red"
        assert screen.style_at(SETTINGS_LIST_ROW + 1, 2) == "white on blue"

    def test_previous_row_unhighlighted_after_move(self, make_ctx, screen):
        ctx = make_ctx(["down", "ctrl_s"])
        main_loop(ctx)
        assert screen.style_at(SETTINGS_LIST_ROW, 2) == "white on blue"
        assert screen.style_at(SETTINGS_LIST_ROW + 1, 2) == "white on red"
        assert screen.row_text(INFO_ROW).strip() == "ip (IPv4 address) - IPv4 address"

    def test_edit_mode_screen(self, make_ctx, screen):
        refreshed = []
        screen.on_refresh = lambda scr: refreshed.append(
            (scr.row_text(INSTRUCTION_ROW).strip(), scr.style_at(SETTINGS_LIST_ROW, 2))
        )
        ctx = make_ctx(["a", "ctrl_c", "ctrl_s"])
        main_loop(ctx)
        assert refreshed[1] == (
            "Enter - accept changes     Ctrl-C - discard changes",
            "black on cyan",
        )
        assert refreshed[2] == ("Ctrl-S - save configuration", "white on red")

    def test_edit_commit_and_save(self, store, store_path, sample_settings, make_ctx, screen):
        keys = ["down"] + list("192.168.1.5") + ["enter", "ctrl_s"]
        ctx = make_ctx(keys)
        assert main_loop(ctx) == 0
        assert store.read(sample_settings[1]) == "192.168.1.5"
        reloaded = SettingsStore(store_path, settings=sample_settings)
        assert reloaded.read(sample_settings[1]) == "192.168.1.5"
        row = screen.row_text(SETTINGS_LIST_ROW + 1)
        assert row[1 + VALUE_OFFSET:].startswith("192.168.1.5")

    def test_save_without_pending_edit_ends_session(self, store_path, sample_settings, make_ctx):
        ctx = make_ctx(["down", "down", "ctrl_s"])
        assert main_loop(ctx) == 0
        assert store_path.exists()


class TestSettingsUI:
    """Tests de la función de entrada."""

    def test_clean_exit(self, store, fake_terminal, sleeps):
        terminal = fake_terminal(["ctrl_s"])
        rc = settings_ui(store, terminal=terminal, sleep=sleeps.append)
        assert rc == 0
        assert terminal.started and terminal.stopped
        assert terminal.refreshes >= 1

    def test_persist_failure_returned(self, store_path, sample_settings, fake_terminal, sleeps):
        store = SettingsStore(store_path, settings=sample_settings, capacity=4)
        store.write(sample_settings[0], "too-big")
        terminal = fake_terminal(["ctrl_s"])
        config = ConsoleConfig(alert_seconds=0.5)
        rc = settings_ui(store, terminal=terminal, config=config, sleep=sleeps.append)
        assert rc == errno.ENOSPC
        assert sleeps == [0.5]

    def test_terminal_restored_on_error(self, store, fake_terminal, sleeps):
        terminal = fake_terminal([])
        with pytest.raises(AssertionError):
            settings_ui(store, terminal=terminal, sleep=sleeps.append)
        assert terminal.stopped
