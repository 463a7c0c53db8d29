"""Start de Huiswerkplanner API met uvicorn.

Uvicorn krijgt zijn eigen logconfiguratie zonder kleuren (geen isatty-
aanroepen). Is er een logbestand actief, dan schrijven de uvicorn-loggers
daar ook naartoe, naast de parserlogs uit :mod:`huiswerk.logging_setup`.
"""

from __future__ import annotations

from copy import deepcopy
import logging
import os
import sys
from typing import Any, Optional

import uvicorn
from uvicorn.config import LOGGING_CONFIG
from uvicorn.main import STARTUP_FAILURE

from huiswerk.logging_setup import (
    FILE_FORMAT,
    LOG_HANDLER_NAME,
    FileLogSettings,
    announce_log_destination,
    configure_file_logging,
)

LOGGER = logging.getLogger("huiswerk.launcher")

# uvicorn.error propageert naar uvicorn; access doet dat niet
_FILE_LOGGED_UVICORN_LOGGERS = ("uvicorn", "uvicorn.access")


def _file_handler_config(settings: FileLogSettings) -> dict[str, Any]:
    return {
        "class": "logging.FileHandler",
        "formatter": LOG_HANDLER_NAME,
        "filename": str(settings.path),
        "encoding": "utf-8",
        "level": logging.getLevelName(settings.level),
    }


def get_uvicorn_log_config(settings: Optional[FileLogSettings] = None) -> dict[str, Any]:
    """uvicorn's ``LOGGING_CONFIG`` without colors, plus the file handler when given."""

    log_config: dict[str, Any] = deepcopy(LOGGING_CONFIG)
    for formatter in log_config["formatters"].values():
        formatter["use_colors"] = False

    if settings is None:
        return log_config

    log_config["formatters"][LOG_HANDLER_NAME] = {"()": "logging.Formatter", "fmt": FILE_FORMAT}
    log_config["handlers"][LOG_HANDLER_NAME] = _file_handler_config(settings)
    for name in _FILE_LOGGED_UVICORN_LOGGERS:
        handlers = log_config["loggers"].setdefault(name, {}).setdefault("handlers", [])
        if LOG_HANDLER_NAME not in handlers:
            handlers.append(LOG_HANDLER_NAME)
    return log_config


def main() -> None:
    from huiswerk.app import app

    host = os.getenv("HUISWERK_HOST", "127.0.0.1")
    port = int(os.getenv("HUISWERK_PORT", "8000"))

    settings = configure_file_logging(default_level=logging.WARNING)
    announce_log_destination()
    LOGGER.info("Huiswerkplanner API start op http://%s:%s", host, port)

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=os.getenv("UVICORN_LOG_LEVEL", "info"),
        log_config=get_uvicorn_log_config(settings),
    )
    server = uvicorn.Server(config)
    server.run()

    if not server.started:
        sys.exit(STARTUP_FAILURE)


if __name__ == "__main__":
    main()
