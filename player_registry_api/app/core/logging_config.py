"""
Logging setup shared by the API process and ``run.py``.

Application modules log through ``logging.getLogger(__name__)``; the
uvicorn server started by ``run.py`` logs through its own
``uvicorn*`` loggers.  ``setup_logging`` routes both to the same root
handlers and applies ``LOG_LEVEL`` to each of them, so a single
setting controls request logs and player service logs alike.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Prefix of the names given to handlers installed here, so handlers added
# by other code (test runners, embedding servers) are left alone.
HANDLER_PREFIX = "player_registry"

# Loggers created by uvicorn.  They are left without handlers of their
# own and propagate to the root handlers configured here.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def installed_handlers(logger: logging.Logger) -> List[logging.Handler]:
    """Handlers on ``logger`` that were attached by ``setup_logging``."""
    return [h for h in logger.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    console = logging.StreamHandler()
    console.set_name(f"{HANDLER_PREFIX}.console")
    handlers: List[logging.Handler] = [console]
    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.set_name(f"{HANDLER_PREFIX}.file")
        handlers.append(file_handler)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and the uvicorn loggers.

    Handlers are attached only once per process, so repeated calls
    (tests, a second ``create_app``) do not duplicate output.  Levels
    are applied on every call.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        Optional path of a log file written alongside the console.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root = logging.getLogger()
    root.setLevel(numeric_level)

    if not installed_handlers(root):
        for handler in _build_handlers(logfile):
            root.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(numeric_level)
        server_logger.handlers.clear()
        server_logger.propagate = True
