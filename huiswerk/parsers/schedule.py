"""Parse a pasted weekly timetable into :class:`ParsedLessonItem` records.

De tekst bestaat uit dagkoppen (``Maandag``, ``di`` ...) met daaronder
lesregels. Een lesregel wordt vergeleken met een vaste, geordende lijst
patronen; het eerste patroon dat past levert de les op.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import re
from typing import Dict, List, Optional, Pattern, Tuple

from ..models import ParsedLessonItem
from .config import ParserKeywordConfig, get_keyword_config

logger = logging.getLogger(__name__)

DAY_NAMES = ("Zondag", "Maandag", "Dinsdag", "Woensdag", "Donderdag", "Vrijdag", "Zaterdag")

_TIME_RANGE = r"(?P<sh>\d{1,2}):(?P<sm>\d{2})\s*[-–]\s*(?P<eh>\d{1,2}):(?P<em>\d{2})"


@dataclass(frozen=True)
class LessonLinePattern:
    """A named lesson-line notation; optional groups: teacher, location, room."""

    name: str
    regex: Pattern[str]

    def parse(self, line: str, day: int) -> Optional[ParsedLessonItem]:
        match = self.regex.match(line)
        if not match:
            return None
        groups = match.groupdict()
        return ParsedLessonItem(
            day_of_week=day,
            time_start=f"{int(groups['sh']):02d}:{groups['sm']}",
            time_end=f"{int(groups['eh']):02d}:{groups['em']}",
            subject=groups["subject"].strip(),
            teacher_name=_optional(groups.get("teacher")),
            location=_optional(groups.get("location")) or _optional(groups.get("room")),
        )


def _optional(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip() or None


LESSON_PATTERNS: Tuple[LessonLinePattern, ...] = (
    # 08:00-08:50 Nederlands (Jansen) A102
    LessonLinePattern(
        "tijd-vak-docent-lokaal",
        re.compile(
            r"^" + _TIME_RANGE + r"\s+(?P<subject>[^(|\s][^(|]*?)"
            r"(?:\s*\((?P<teacher>[^)]*)\)\s*(?P<location>[^|]*?)|\s+(?P<room>\S*\d\S*))?\s*$"
        ),
    ),
    # 08:00 - 08:50 | Nederlands | Jansen | A102
    LessonLinePattern(
        "pipes",
        re.compile(
            r"^(?P<sh>\d{1,2}):(?P<sm>\d{2})\s*[-–|]\s*(?P<eh>\d{1,2}):(?P<em>\d{2})"
            r"\s*\|\s*(?P<subject>[^|]+?)\s*(?:\|\s*(?P<teacher>[^|]*?)\s*)?"
            r"(?:\|\s*(?P<location>[^|]*?))?\s*$"
        ),
    ),
    # 1. 08:00-08:50 Nederlands
    LessonLinePattern(
        "genummerd",
        re.compile(r"^\d+\.\s*" + _TIME_RANGE + r"\s+(?P<subject>.+?)\s*$"),
    ),
)


@lru_cache()
def _day_header_table(keywords: ParserKeywordConfig) -> Tuple[Pattern[str], Dict[str, int]]:
    lookup: Dict[str, int] = {}
    for full, abbrev, number in keywords.weekdays:
        lookup[full.lower()] = number
        lookup[abbrev.lower()] = number
    full_names = "|".join(re.escape(full) for full, _, _ in keywords.weekdays)
    abbrevs = "|".join(re.escape(abbrev) for _, abbrev, _ in keywords.weekdays)
    # "Dinsdagmiddag" is een kop, "Dit is ..." niet
    pattern = re.compile(rf"^(?:({full_names})|({abbrevs})(?!\w))", re.I)
    return pattern, lookup


def match_day_header(line: str, keywords: ParserKeywordConfig | None = None) -> Optional[int]:
    """Return the day number (0 = zondag) when ``line`` starts with a day name."""

    pattern, lookup = _day_header_table(keywords or get_keyword_config())
    match = pattern.match(line.strip())
    if not match:
        return None
    return lookup[(match.group(1) or match.group(2)).lower()]


def parse_lesson_line(line: str, day: int) -> Optional[ParsedLessonItem]:
    for pattern in LESSON_PATTERNS:
        item = pattern.parse(line, day)
        if item is not None:
            return item
    return None


def parse_schedule_text(
    text: Optional[str], keywords: ParserKeywordConfig | None = None
) -> List[ParsedLessonItem]:
    """Parse day headers and lesson lines; unrecognized lines are skipped."""

    lessons: List[ParsedLessonItem] = []
    current_day: Optional[int] = None
    for raw in (text or "").splitlines():
        line = raw.strip()
        if not line:
            continue
        header = match_day_header(line, keywords)
        if header is not None:
            current_day = header
            continue
        if current_day is None:
            logger.debug("Regel voor eerste dagkop overgeslagen: %r", line)
            continue
        item = parse_lesson_line(line, current_day)
        if item is None:
            logger.debug("Geen lespatroon herkend: %r", line)
            continue
        lessons.append(item)
    return lessons


def day_name(day: int) -> str:
    return DAY_NAMES[day]


__all__ = [
    "DAY_NAMES",
    "LESSON_PATTERNS",
    "LessonLinePattern",
    "day_name",
    "match_day_header",
    "parse_lesson_line",
    "parse_schedule_text",
]
