"""Huiswerkplanner: parsers voor geplakte huiswerk- en roostertekst."""

from importlib import metadata
import os

from .parsers import parse_homework_text, parse_schedule_text


def resolve_version() -> str:
    """``HUISWERK_APP_VERSION``, else the installed distribution, else ``0.0.0``."""

    override = (os.getenv("HUISWERK_APP_VERSION") or "").strip()
    if override:
        return override
    try:
        return metadata.version("huiswerkplanner")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = resolve_version()

__all__ = ["__version__", "parse_homework_text", "parse_schedule_text", "resolve_version"]
