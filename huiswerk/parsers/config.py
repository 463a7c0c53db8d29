"""Parser keyword configuration.

Alle sleutelwoorden voor vakken, dagen, maanden en deadlines staan
gecentraliseerd in dit bestand zodat uitbreiden mogelijk is zonder code.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
import json
import os
from pathlib import Path
from typing import Dict, Tuple

SubjectTable = Tuple[Tuple[str, Tuple[str, ...]], ...]


def _default_subjects() -> SubjectTable:
    return (
        ("nederlands", ("nederlands", "ned", "ne")),
        ("engels", ("engels", "eng", "en")),
        ("wiskunde", ("wiskunde", "wisk", "wi", "math", "maths")),
        ("natuurkunde", ("natuurkunde", "natuur", "nat", "nk")),
        ("scheikunde", ("scheikunde", "schei", "sk")),
        ("biologie", ("biologie", "bio")),
        ("geschiedenis", ("geschiedenis", "gesch", "gs")),
        ("aardrijkskunde", ("aardrijkskunde", "ak")),
        ("economie", ("economie", "econ", "ec")),
        ("informatica", ("informatica", "inf")),
        ("lichamelijke_opvoeding", ("lichamelijke opvoeding", "lo", "gym")),
        ("maatschappijleer", ("maatschappijleer", "ma")),
        ("frans", ("frans", "fr")),
        ("duits", ("duits", "du")),
        ("spaans", ("spaans", "sp")),
        ("latijn", ("latijn", "la")),
        ("grieks", ("grieks", "gr")),
        ("kunst", ("kunst", "kv", "ckv", "tekenen")),
        ("muziek", ("muziek", "mu")),
        ("mentorles", ("mentorles", "mentor")),
    )


@dataclass(frozen=True)
class ParserKeywordConfig:
    subjects: SubjectTable = field(default_factory=_default_subjects)
    # bevat-test: "overmorgen" moet voor "morgen" staan
    relative_days: Tuple[Tuple[str, int], ...] = field(
        default_factory=lambda: (("overmorgen", 2), ("vandaag", 0), ("morgen", 1))
    )
    # 0 = zondag ... 6 = zaterdag; volgorde bepaalt welke dag wint
    weekdays: Tuple[Tuple[str, str, int], ...] = field(
        default_factory=lambda: (
            ("maandag", "ma", 1),
            ("dinsdag", "di", 2),
            ("woensdag", "wo", 3),
            ("donderdag", "do", 4),
            ("vrijdag", "vr", 5),
            ("zaterdag", "za", 6),
            ("zondag", "zo", 0),
        )
    )
    months: Tuple[Tuple[str, int], ...] = field(
        default_factory=lambda: (
            ("januari", 1),
            ("jan", 1),
            ("februari", 2),
            ("feb", 2),
            ("maart", 3),
            ("mrt", 3),
            ("april", 4),
            ("apr", 4),
            ("mei", 5),
            ("juni", 6),
            ("jun", 6),
            ("juli", 7),
            ("jul", 7),
            ("augustus", 8),
            ("aug", 8),
            ("september", 9),
            ("sept", 9),
            ("sep", 9),
            ("oktober", 10),
            ("okt", 10),
            ("oct", 10),
            ("november", 11),
            ("nov", 11),
            ("december", 12),
            ("dec", 12),
        )
    )
    deadline_words: Tuple[str, ...] = field(
        default_factory=lambda: (
            "voor",
            "tegen",
            "uiterlijk",
            "deadline",
            "inleveren",
            "inleverdatum",
        )
    )
    next_week_phrase: str = "volgende week"
    unknown_subject: str = "Onbekend vak"

    def month_lookup(self) -> Dict[str, int]:
        return {name: number for name, number in self.months}


def _load_overrides(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:  # pragma: no cover - config errors runtime
        raise RuntimeError(f"Ongeldige JSON in parser keyword-config: {path}") from exc
    if not isinstance(data, dict):
        raise RuntimeError("Keyword-config moet een JSON-object zijn")
    return data


def _subjects_from_override(value: object) -> SubjectTable:
    if not isinstance(value, dict):
        raise RuntimeError("'subjects' moet een object van vak -> synoniemen zijn")
    table = []
    for canonical, synonyms in value.items():
        if isinstance(synonyms, str):
            synonyms = [synonyms]
        cleaned = tuple(str(s).strip().lower() for s in synonyms if str(s).strip())
        if cleaned:
            table.append((str(canonical).strip().lower(), cleaned))
    return tuple(table)


def load_keyword_config() -> ParserKeywordConfig:
    """Build a keyword-config, optionally overridden via env."""

    overrides: dict | None = None
    env_value = os.environ.get("HUISWERK_PARSER_KEYWORDS")
    if env_value:
        override_path = Path(env_value)
        if override_path.is_file():
            overrides = _load_overrides(override_path)

    base = ParserKeywordConfig()
    if not overrides:
        return base

    payload = {}
    subjects = overrides.get("subjects")
    if subjects:
        payload["subjects"] = _subjects_from_override(subjects)
    words = overrides.get("deadline_words")
    if words:
        if isinstance(words, str):
            payload["deadline_words"] = (words,)
        else:
            payload["deadline_words"] = tuple(str(w) for w in words if str(w).strip())
    if not payload:
        return base
    return ParserKeywordConfig(
        **{name: payload.get(name, getattr(base, name)) for name in base.__dataclass_fields__}
    )


@lru_cache()
def get_keyword_config() -> ParserKeywordConfig:
    """Return the process-wide keyword-config, built once."""

    return load_keyword_config()


__all__ = ["ParserKeywordConfig", "get_keyword_config", "load_keyword_config"]
