"""
Sistema de temas para la interfaz CLI de optconsole.

El paquete esta organizado en modulos:
- palette: Definicion de paletas y gestion de temas (CLITheme, ColorPalette)
- printing: Funciones que imprimen directamente a consola
- tables: Tabla Rich de opciones
"""

from optconsole.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_NORD,
    THEME_MONOKAI,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from optconsole.cli.theme.printing import (
    styled_success,
    styled_error,
    print_success,
    print_error,
)

from optconsole.cli.theme.tables import (
    create_settings_table,
    print_settings_table,
)

__all__ = [
    # palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_NORD",
    "THEME_MONOKAI",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # printing
    "styled_success",
    "styled_error",
    "print_success",
    "print_error",
    # tables
    "create_settings_table",
    "print_settings_table",
]
