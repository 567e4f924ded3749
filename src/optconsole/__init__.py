"""
optconsole - Consola de configuración de opciones.

Editor interactivo en terminal para una lista fija de opciones con nombre,
respaldadas por un almacén clave/valor persistente.
"""

__version__ = "0.3.0"
