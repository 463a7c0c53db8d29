"""
Parser demo CLI voor de Huiswerkplanner.

Voorbeelden::

    huiswerk-parse homework huiswerk.txt --reference 2024-03-14
    huiswerk-parse schedule rooster.txt --json out/rooster.json
    cat rooster.txt | huiswerk-parse schedule
"""

from __future__ import annotations

import argparse
from datetime import date
import json
import logging
from pathlib import Path
import sys
from typing import List, Optional

from .logging_setup import configure_file_logging, remove_file_logging
from .parsers import parse_homework_text, parse_schedule_text
from .parsers.schedule import day_name

logger = logging.getLogger(__name__)


def _read_input(path: Optional[str]) -> str:
    if not path or path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def _print_homework(items) -> None:
    for item in items:
        print(f"▶ {item.deadline.isoformat()}  {item.subject:<22} {item.description}")


def _print_lessons(items) -> None:
    for item in items:
        extra = ", ".join(part for part in (item.teacher_name, item.location) if part)
        suffix = f" ({extra})" if extra else ""
        print(f"▶ {day_name(item.day_of_week):<10} {item.time_start}-{item.time_end}  {item.subject}{suffix}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Huiswerk- en roostertekst omzetten naar gestructureerde items.")
    parser.add_argument("kind", choices=("homework", "schedule"), help="Soort tekst")
    parser.add_argument("path", nargs="?", default=None, help="Pad naar tekstbestand (standaard: stdin)")
    parser.add_argument("--json", type=str, default=None, help="Schrijf resultaten naar JSON-bestand")
    parser.add_argument(
        "--reference",
        type=date.fromisoformat,
        default=None,
        help="Referentiedatum (YYYY-MM-DD) voor relatieve deadlines",
    )
    parser.add_argument("--log-file", action="store_true", help="Schrijf logs ook naar een logbestand")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if not args.log_file:
        return _run(args)
    configure_file_logging()
    try:
        return _run(args)
    finally:
        remove_file_logging()


def _run(args: argparse.Namespace) -> int:
    if args.path and args.path != "-" and not Path(args.path).exists():
        logger.error("Pad bestaat niet: %s", args.path)
        return 2

    text = _read_input(args.path)
    if args.kind == "homework":
        items = parse_homework_text(text, args.reference)
    else:
        items = parse_schedule_text(text)

    if not items:
        print("Niets herkend. Controleer het formaat.")
        return 1

    if args.json:
        out_path = Path(args.json).resolve()
        out_path.parent.mkdir(parents=True, exist_ok=True)
        payload = [item.model_dump(mode="json") for item in items]
        with out_path.open("w", encoding="utf-8") as fh:
            json.dump(payload, fh, ensure_ascii=False, indent=2)
        print(f"JSON weggeschreven naar: {out_path}")
        return 0

    if args.kind == "homework":
        _print_homework(items)
    else:
        _print_lessons(items)
    print(f"\n— Totaal: {len(items)} item(s)")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
