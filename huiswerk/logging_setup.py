"""Bestandslogging voor de parsers, gedeeld door CLI en API-server.

De handler hangt aan de ``huiswerk`` package-logger, niet aan de root-logger,
zodat logs van uvicorn en andere bibliotheken buiten het logbestand blijven.
Het niveau uit ``HUISWERK_LOG_LEVEL`` geldt volledig voor ``huiswerk.parsers``;
de rest van het package logt hooguit vanaf INFO. Zo levert ``DEBUG`` precies
de overgeslagen regels en datums op.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
from pathlib import Path
from typing import Dict, Final, Optional

LOG_HANDLER_NAME: Final = "huiswerkplanner-file"
LOG_LEVEL_ENV_VAR: Final = "HUISWERK_LOG_LEVEL"
LOG_FILE_ENV_VAR: Final = "HUISWERK_LOG_FILE"
FILE_FORMAT: Final = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

PACKAGE_LOGGER: Final = "huiswerk"
PARSER_LOGGER: Final = "huiswerk.parsers"


@dataclass(frozen=True)
class FileLogSettings:
    path: Path
    level: int


_ACTIVE: Optional[FileLogSettings] = None
_PREVIOUS_LEVELS: Dict[str, int] = {}


def get_configured_log_level(default: int = logging.INFO) -> int:
    """Read ``HUISWERK_LOG_LEVEL`` as a number or a level name."""

    value = (os.getenv(LOG_LEVEL_ENV_VAR) or "").strip()
    if not value:
        return default
    if value.isdigit():
        return int(value)
    resolved = logging.getLevelName(value.upper())
    return resolved if isinstance(resolved, int) else default


def log_file_path() -> Path:
    override = os.getenv(LOG_FILE_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.cwd() / "huiswerkplanner.log"


def _find_handler(target: logging.Logger) -> Optional[logging.Handler]:
    for handler in target.handlers:
        if handler.get_name() == LOG_HANDLER_NAME:
            return handler
    return None


def _set_level(name: str, level: int) -> None:
    target = logging.getLogger(name)
    _PREVIOUS_LEVELS.setdefault(name, target.level)
    target.setLevel(level)


def configure_file_logging(default_level: int = logging.INFO) -> Optional[FileLogSettings]:
    """Attach the named file handler to the package logger, once."""

    global _ACTIVE

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    existing = _find_handler(package_logger)
    if existing is not None:
        return _ACTIVE

    path = log_file_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:  # pragma: no cover - afhankelijk van IO
        package_logger.warning("Kon logbestand niet openen (%s): %s", path, exc)
        return None

    level = get_configured_log_level(default_level)
    handler.set_name(LOG_HANDLER_NAME)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    package_logger.addHandler(handler)

    _set_level(PARSER_LOGGER, level)
    _set_level(PACKAGE_LOGGER, max(level, logging.INFO))

    _ACTIVE = FileLogSettings(path=path, level=level)
    logging.getLogger(__name__).info("Logbestand: %s (niveau %s)", path, logging.getLevelName(level))
    return _ACTIVE


def remove_file_logging() -> None:
    """Detach and close the file handler and restore the logger levels."""

    global _ACTIVE

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    handler = _find_handler(package_logger)
    if handler is not None:
        package_logger.removeHandler(handler)
        handler.close()
    for name, level in _PREVIOUS_LEVELS.items():
        logging.getLogger(name).setLevel(level)
    _PREVIOUS_LEVELS.clear()
    _ACTIVE = None


def get_file_handler_settings() -> Optional[FileLogSettings]:
    return _ACTIVE


def announce_log_destination() -> None:
    """Print where parser logs end up."""

    settings = _ACTIVE
    if settings is None:
        print("[logging] Geen logbestand; alleen console-uitvoer.")
        return
    print(
        f"[logging] Parserlogs in {settings.path} (niveau {logging.getLevelName(settings.level)})."
        f" Zet {LOG_LEVEL_ENV_VAR}=DEBUG om overgeslagen regels te zien."
    )


__all__ = [
    "FileLogSettings",
    "LOG_HANDLER_NAME",
    "announce_log_destination",
    "configure_file_logging",
    "get_configured_log_level",
    "get_file_handler_settings",
    "log_file_path",
    "remove_file_logging",
]
