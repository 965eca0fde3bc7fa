"""
Logging configuration shared by the application and its server.

``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger and routes the uvicorn loggers through it,
so ``run.py`` and the card service write lines in the same format.
Handlers are installed once per process; the level is applied on every
call, so a later ``create_app`` with ``DEBUG`` set still takes effect.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Loggers uvicorn creates with handlers of its own.
SERVER_LOGGERS: Sequence[str] = ("uvicorn", "uvicorn.error", "uvicorn.access")

_CONSOLE_HANDLER = "card_store_api.console"
_FILE_HANDLER = "card_store_api.file"


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(handler.get_name() == name for handler in logger.handlers)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and the server loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path of a file that receives the same records as the console.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not _has_handler(root, _CONSOLE_HANDLER):
        console_handler = logging.StreamHandler()
        console_handler.set_name(_CONSOLE_HANDLER)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile and not _has_handler(root, _FILE_HANDLER):
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(_FILE_HANDLER)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
