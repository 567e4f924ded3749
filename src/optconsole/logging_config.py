"""Configuración de logging de la consola."""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3


def configure_logging(log_file: Optional[Path], debug: bool = False) -> Optional[Path]:
    """
    Configura el logging del paquete.

    La consola ocupa toda la pantalla, por lo que nunca se registra en
    stdout/stderr: solo a archivo, o a ningún lado si no se indica uno.

    Args:
        log_file: Archivo de log rotativo, o None para descartar registros
        debug: Si registrar también mensajes DEBUG

    Returns:
        Ruta del archivo de log activo, o None
    """
    log_level = logging.DEBUG if debug else logging.INFO
    package_logger = logging.getLogger("optconsole")
    package_logger.setLevel(log_level)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = False

    if log_file is None:
        package_logger.addHandler(logging.NullHandler())
        return None

    log_file = Path(log_file)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    file_handler.setLevel(log_level)
    package_logger.addHandler(file_handler)

    return log_file
