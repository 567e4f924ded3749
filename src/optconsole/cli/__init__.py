"""
CLI de optconsole - Consola de configuración de opciones.

Comandos:
- edit: Consola interactiva de pantalla completa
- show: Tabla de opciones con sus valores actuales
- set: Asigna una opción y guarda, sin interfaz interactiva
"""

import errno
from pathlib import Path
from typing import Annotated, Optional

import typer

from optconsole.config import ThemeName
from optconsole.settings.store import DEFAULT_CAPACITY


# Crear aplicación principal
app = typer.Typer(
    name="optconsole",
    help="Consola de configuración de opciones.",
    no_args_is_help=True,
)


StoreOption = Annotated[
    Optional[Path],
    typer.Option("--store", "-s", envvar="OPTCONSOLE_STORE", help="Archivo de opciones"),
]
CapacityOption = Annotated[
    int,
    typer.Option("--capacity", min=1, envvar="OPTCONSOLE_CAPACITY", help="Capacidad del bloque en bytes"),
]
LogFileOption = Annotated[
    Optional[Path],
    typer.Option("--log-file", envvar="OPTCONSOLE_LOG_FILE", help="Archivo de log"),
]
DebugOption = Annotated[
    bool,
    typer.Option("--debug", help="Registrar mensajes de depuración"),
]
ThemeOption = Annotated[
    ThemeName,
    typer.Option("--theme", "-t", envvar="OPTCONSOLE_THEME", help="Tema de colores"),
]


def _build_config(store_path, capacity, theme, log_file, debug, **extra):
    """Arma la configuración, activa el tema y prepara logging."""
    from optconsole.config import ConsoleConfig
    from optconsole.logging_config import configure_logging
    from optconsole.cli.theme import CLITheme

    values = dict(
        capacity=capacity, theme=theme, log_file=log_file, debug=debug, **extra
    )
    if store_path is not None:
        values["store_path"] = store_path
    config = ConsoleConfig(**values)
    configure_logging(config.log_file, config.debug)
    CLITheme.set_theme(config.theme)
    return config


def _open_store(config):
    from optconsole.settings import SettingsStore
    return SettingsStore(config.store_path, capacity=config.capacity)


@app.command()
def edit(
    store_path: StoreOption = None,
    capacity: CapacityOption = DEFAULT_CAPACITY,
    theme: ThemeOption = ThemeName.DEFAULT,
    alert_seconds: Annotated[
        float,
        typer.Option("--alert-seconds", min=0.0, help="Duración de las alertas"),
    ] = 2.0,
    log_file: LogFileOption = None,
    debug: DebugOption = False,
):
    """
    Abre la consola interactiva de opciones.

    Flechas para moverse, cualquier tecla para editar, Enter para aceptar,
    Ctrl-C para descartar y Ctrl-S para guardar y salir.
    """
    from optconsole.cli.console.settings_form import settings_ui

    config = _build_config(
        store_path, capacity, theme, log_file, debug,
        alert_seconds=alert_seconds,
    )
    rc = settings_ui(_open_store(config), config=config)
    raise typer.Exit(rc)


@app.command()
def show(
    store_path: StoreOption = None,
    capacity: CapacityOption = DEFAULT_CAPACITY,
    theme: ThemeOption = ThemeName.DEFAULT,
    log_file: LogFileOption = None,
    debug: DebugOption = False,
):
    """Muestra las opciones registradas y sus valores."""
    from optconsole.cli.theme import print_settings_table

    config = _build_config(store_path, capacity, theme, log_file, debug)
    print_settings_table(_open_store(config))


@app.command("set")
def set_option(
    name: Annotated[str, typer.Argument(help="Nombre de la opción")],
    value: Annotated[str, typer.Argument(help="Nuevo valor (vacío para borrar)")],
    store_path: StoreOption = None,
    capacity: CapacityOption = DEFAULT_CAPACITY,
    theme: ThemeOption = ThemeName.DEFAULT,
    log_file: LogFileOption = None,
    debug: DebugOption = False,
):
    """
    Asigna una opción y guarda el conjunto completo.

    Ejemplo:
        optconsole set ip 192.168.0.10
    """
    from optconsole.errors import SettingsError
    from optconsole.settings import find_setting
    from optconsole.cli.theme import print_success, print_error
    from optconsole.cli.console.settings_form.layout import EMPTY_VALUE

    config = _build_config(store_path, capacity, theme, log_file, debug)
    store = _open_store(config)

    try:
        setting = find_setting(store.settings, name)
    except KeyError:
        print_error(f"Opción desconocida: {name}")
        raise typer.Exit(errno.ENOENT)

    try:
        store.write(setting, value)
        store.persist()
    except SettingsError as e:
        print_error(f"Could not set {name}: {e.reason}")
        raise typer.Exit(e.code)

    shown = store.read(setting) if value else EMPTY_VALUE
    print_success(f"{name} = {shown}")
