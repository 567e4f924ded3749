"""
Definicion de paletas de colores y gestion de temas.
"""

from dataclasses import dataclass
from typing import Optional

from rich.console import Console
from rich.theme import Theme

from optconsole.config import ThemeName


@dataclass
class ColorPalette:
    """Paleta de colores para un tema."""
    # Colores principales
    primary: str      # Títulos, destacados
    secondary: str    # Encabezados de tabla
    accent: str       # Valores importantes

    # Colores semánticos
    success: str
    warning: str
    error: str
    muted: str        # Texto secundario/atenuado
    border: str       # Bordes de tablas

    # Pares de color de la consola de opciones ("fg on bg")
    pair_normal: str  # Fondo general y filas sin foco
    pair_select: str  # Fila con foco en modo navegación
    pair_edit: str    # Fila con foco en modo edición
    pair_alert: str   # Fila de alertas


# Tema por defecto - colores clásicos de la consola de opciones
THEME_DEFAULT = ColorPalette(
    primary="#5f87af",
    secondary="#87afaf",
    accent="#af87af",
    success="#87af87",
    warning="#d7af5f",
    error="#d75f5f",
    muted="#808080",
    border="#5f5f5f",
    pair_normal="white on blue",
    pair_select="white on red",
    pair_edit="black on cyan",
    pair_alert="white on red",
)

# Tema Nord - Paleta ártica
THEME_NORD = ColorPalette(
    primary="#88c0d0",
    secondary="#81a1c1",
    accent="#b48ead",
    success="#a3be8c",
    warning="#ebcb8b",
    error="#bf616a",
    muted="#4c566a",
    border="#3b4252",
    pair_normal="#eceff4 on #2e3440",
    pair_select="#2e3440 on #88c0d0",
    pair_edit="#2e3440 on #a3be8c",
    pair_alert="#eceff4 on #bf616a",
)

# Tema Monokai
THEME_MONOKAI = ColorPalette(
    primary="#66d9ef",
    secondary="#a6e22e",
    accent="#ae81ff",
    success="#a6e22e",
    warning="#e6db74",
    error="#f92672",
    muted="#75715e",
    border="#49483e",
    pair_normal="#f8f8f2 on #272822",
    pair_select="#272822 on #66d9ef",
    pair_edit="#272822 on #e6db74",
    pair_alert="#f8f8f2 on #f92672",
)

# Tema Minimal - Solo grises y un acento
THEME_MINIMAL = ColorPalette(
    primary="#ffffff",
    secondary="#b0b0b0",
    accent="#5fafff",
    success="#87d787",
    warning="#ffd787",
    error="#ff8787",
    muted="#606060",
    border="#404040",
    pair_normal="default on default",
    pair_select="reverse",
    pair_edit="#000000 on #5fafff",
    pair_alert="bold #ff8787",
)

# Mapeo de nombres a temas
THEMES = {
    ThemeName.DEFAULT: THEME_DEFAULT,
    ThemeName.NORD: THEME_NORD,
    ThemeName.MONOKAI: THEME_MONOKAI,
    ThemeName.MINIMAL: THEME_MINIMAL,
}


class CLITheme:
    """Gestor de tema para la CLI."""

    _palette: ColorPalette = THEME_DEFAULT
    _console: Optional[Console] = None

    @classmethod
    def set_theme(cls, theme: ThemeName) -> None:
        """Establece el tema activo."""
        cls._palette = THEMES.get(theme, THEME_DEFAULT)
        cls._console = None  # Resetear console para recrear con nuevo tema

    @classmethod
    def get_palette(cls) -> ColorPalette:
        """Obtiene la paleta de colores actual."""
        return cls._palette

    @classmethod
    def get_console(cls) -> Console:
        """Obtiene la consola Rich con el tema aplicado."""
        if cls._console is None:
            p = cls._palette
            custom_theme = Theme({
                "primary": p.primary,
                "secondary": p.secondary,
                "accent": p.accent,
                "success": p.success,
                "warning": p.warning,
                "error": p.error,
                "muted": p.muted,
                "title": f"bold {p.primary}",
                "value": f"bold {p.accent}",
                "table.header": f"bold {p.secondary}",
            })
            cls._console = Console(theme=custom_theme)
        return cls._console


# Funciones de acceso global
def get_console() -> Console:
    """Obtiene la consola Rich con tema aplicado."""
    return CLITheme.get_console()


def get_palette() -> ColorPalette:
    """Obtiene la paleta de colores actual."""
    return CLITheme.get_palette()
