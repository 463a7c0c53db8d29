"""Resolve Dutch deadline phrases into calendar dates.

Een deadline wordt in vaste volgorde gezocht: eerst relatieve woorden
(``vandaag``, ``morgen``, ``overmorgen``), dan weekdagen en tot slot absolute
datums. Alle berekeningen gebruiken één referentiedatum die de aanroeper
eenmalig vastlegt.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from functools import lru_cache
import logging
import re
from typing import Callable, Dict, Iterable, Optional, Pattern, Tuple, Union

from .config import ParserKeywordConfig, get_keyword_config

logger = logging.getLogger(__name__)

ReferenceLike = Union[date, datetime, None]

RE_ISO_DATE = re.compile(r"(?<!\d)(\d{4})-(\d{1,2})-(\d{1,2})(?!\d)")
RE_DATE_DMY = re.compile(r"(?<!\d)(\d{1,2})[\-/](\d{1,2})(?:[\-/](\d{4}|\d{2}))?(?!\d)")


def resolve_reference_date(reference: ReferenceLike = None) -> date:
    """Freeze the reference instant to a plain date."""

    if reference is None:
        return date.today()
    if isinstance(reference, datetime):
        return reference.date()
    return reference


def format_date(value: date) -> str:
    return value.isoformat()


def word_pattern(term: str) -> Pattern[str]:
    """Case-insensitive whole-word pattern; inner spaces match any whitespace."""

    body = r"\s+".join(re.escape(part) for part in term.split())
    return re.compile(rf"(?<!\w){body}(?!\w)", re.I)


def _sunday_based_weekday(value: date) -> int:
    return (value.weekday() + 1) % 7


def _explicit_year(raw: Optional[str]) -> Optional[int]:
    if not raw:
        return None
    year = int(raw)
    if year < 100:
        year += 2000
    return year


def _build_date(
    day: int, month: int, explicit_year: Optional[int], reference: date
) -> Optional[date]:
    if explicit_year is not None:
        try:
            return date(explicit_year, month, day)
        except ValueError:
            logger.debug("Ongeldige datum overgeslagen: %s-%s-%s", explicit_year, month, day)
            return None
    try:
        candidate = date(reference.year, month, day)
        # vergelijking op datum: vandaag telt nog als dit jaar
        if candidate < reference:
            candidate = date(reference.year + 1, month, day)
    except ValueError:
        logger.debug("Ongeldige datum overgeslagen: dag %s maand %s (referentie %s)", day, month, reference)
        return None
    return candidate


@dataclass(frozen=True)
class AbsoluteDatePattern:
    """One absolute-date notation; ``extract`` maps a match to (day, month, year)."""

    name: str
    regex: Pattern[str]
    extract: Callable[[re.Match], Optional[Tuple[int, int, Optional[int]]]]

    def find(self, text: str, reference: date) -> Optional[date]:
        for match in self.regex.finditer(text):
            parts = self.extract(match)
            if parts is None:
                continue
            day, month, year = parts
            resolved = _build_date(day, month, year, reference)
            if resolved is not None:
                return resolved
        return None


def _build_absolute_patterns(keywords: ParserKeywordConfig) -> Tuple[AbsoluteDatePattern, ...]:
    months: Dict[str, int] = keywords.month_lookup()
    names = sorted(months, key=len, reverse=True)
    re_textual = re.compile(
        r"(?<!\d)(\d{1,2})\s+(" + "|".join(re.escape(n) for n in names) + r")\b\.?(?:\s+((?:19|20)\d{2}))?",
        re.I,
    )

    def _iso(match: re.Match) -> Tuple[int, int, Optional[int]]:
        return int(match.group(3)), int(match.group(2)), int(match.group(1))

    def _textual(match: re.Match) -> Optional[Tuple[int, int, Optional[int]]]:
        month = months.get(match.group(2).lower())
        if month is None:
            return None
        return int(match.group(1)), month, _explicit_year(match.group(3))

    def _numeric(match: re.Match) -> Tuple[int, int, Optional[int]]:
        return int(match.group(1)), int(match.group(2)), _explicit_year(match.group(3))

    return (
        AbsoluteDatePattern("iso", RE_ISO_DATE, _iso),
        AbsoluteDatePattern("dag-maandnaam", re_textual, _textual),
        AbsoluteDatePattern("dag-maand", RE_DATE_DMY, _numeric),
    )


class DeadlineResolver:
    """Bundelt de drie datumstrategieën met hun gecompileerde patronen."""

    def __init__(self, keywords: ParserKeywordConfig | None = None) -> None:
        self.keywords = keywords or get_keyword_config()
        self._relative = tuple(
            (term.lower(), offset) for term, offset in self.keywords.relative_days
        )
        self._weekdays = tuple(
            (full.lower(), word_pattern(abbrev), number)
            for full, abbrev, number in self.keywords.weekdays
        )
        self._next_week = word_pattern(self.keywords.next_week_phrase)
        self.absolute_patterns = _build_absolute_patterns(self.keywords)

    def relative_date(self, text: str, reference: date) -> Optional[date]:
        lower = text.lower()
        for term, offset in self._relative:
            if term in lower:
                return reference + timedelta(days=offset)
        return None

    def weekday_date(self, text: str, reference: date) -> Optional[date]:
        lower = text.lower()
        for full, abbrev_pattern, number in self._weekdays:
            if full not in lower and not abbrev_pattern.search(text):
                continue
            days_until = number - _sunday_based_weekday(reference)
            if days_until <= 0:
                days_until += 7
            if self._next_week.search(text):
                days_until += 7
            return reference + timedelta(days=days_until)
        return None

    def absolute_date(self, text: str, reference: date) -> Optional[date]:
        for pattern in self.absolute_patterns:
            found = pattern.find(text, reference)
            if found is not None:
                logger.debug("Datum %s herkend via patroon %s", found, pattern.name)
                return found
        return None

    def strategies(self) -> Iterable[Callable[[str, date], Optional[date]]]:
        return (self.relative_date, self.weekday_date, self.absolute_date)

    def parse(self, text: Optional[str], reference: ReferenceLike = None) -> Optional[date]:
        if not text:
            return None
        ref = resolve_reference_date(reference)
        for strategy in self.strategies():
            found = strategy(text, ref)
            if found is not None:
                return found
        return None


@lru_cache()
def _default_resolver() -> DeadlineResolver:
    return DeadlineResolver()


def parse_deadline(
    text: Optional[str],
    reference: ReferenceLike = None,
    keywords: ParserKeywordConfig | None = None,
) -> Optional[date]:
    """Resolve ``text`` against ``reference`` or return ``None``."""

    resolver = DeadlineResolver(keywords) if keywords else _default_resolver()
    return resolver.parse(text, reference)


__all__ = [
    "AbsoluteDatePattern",
    "DeadlineResolver",
    "format_date",
    "parse_deadline",
    "resolve_reference_date",
    "word_pattern",
]
