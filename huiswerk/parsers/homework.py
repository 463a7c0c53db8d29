"""Turn pasted homework text into :class:`ParsedHomeworkItem` records."""

from __future__ import annotations

from datetime import date, timedelta
from functools import lru_cache
import logging
import re
from typing import Iterator, List, Optional, Pattern, Tuple

from ..models import ParsedHomeworkItem
from .config import ParserKeywordConfig, get_keyword_config
from .dates import DeadlineResolver, ReferenceLike, format_date, resolve_reference_date, word_pattern
from .subjects import match_subject, normalize_subject

logger = logging.getLogger(__name__)

RE_LINE_SPLIT = re.compile(r"[\r\n]+")
RE_LIST_MARKER = re.compile(r"^(?:[\-\*•●]|\d+[.)])\s*")
RE_SUBJECT_PREFIX = re.compile(r"^([A-Za-zÀ-ÿ\s]+)[:\-]\s*(.+)$")
RE_TRAILING_SEPARATOR = re.compile(r"[\s\-:]+$")
RE_ISO_TOKEN = re.compile(r"(?<!\d)\d{4}-\d{1,2}-\d{1,2}(?!\d)")
RE_WHITESPACE = re.compile(r"\s+")


def segment(text: Optional[str]) -> Iterator[str]:
    """Yield trimmed, non-empty lines with one bullet or number marker removed."""

    for raw in RE_LINE_SPLIT.split(text or ""):
        line = raw.strip()
        if not line:
            continue
        line = RE_LIST_MARKER.sub("", line, count=1).strip()
        if line:
            yield line


class HomeworkLineParser:
    """Parses one homework line at a time against a fixed reference date."""

    def __init__(self, keywords: ParserKeywordConfig | None = None) -> None:
        self.keywords = keywords or get_keyword_config()
        self.resolver = DeadlineResolver(self.keywords)
        self._strip_patterns = self._build_strip_patterns()

    def _build_strip_patterns(self) -> Tuple[Pattern[str], ...]:
        terms: List[str] = [self.keywords.next_week_phrase]
        terms.extend(self.keywords.deadline_words)
        terms.extend(term for term, _ in self.keywords.relative_days)
        for full, abbrev, _ in self.keywords.weekdays:
            terms.extend((full, abbrev))
        # langste eerst zodat meerwoordige termen niet half verdwijnen
        ordered = sorted(dict.fromkeys(terms), key=len, reverse=True)
        return tuple(word_pattern(term) for term in ordered) + (RE_ISO_TOKEN,)

    def _split_subject(self, line: str) -> Tuple[str, str]:
        match = RE_SUBJECT_PREFIX.match(line)
        if match:
            prefix = match.group(1).strip()
            if prefix.lower() == self.keywords.unknown_subject.lower():
                subject = self.keywords.unknown_subject
            else:
                subject = normalize_subject(prefix, self.keywords)
            return subject or self.keywords.unknown_subject, match.group(2).strip()
        subject = match_subject(line, self.keywords)
        return subject or self.keywords.unknown_subject, line

    def clean_description(self, text: str) -> str:
        cleaned = text
        for pattern in self._strip_patterns:
            cleaned = pattern.sub(" ", cleaned)
        cleaned = RE_WHITESPACE.sub(" ", cleaned)
        cleaned = RE_TRAILING_SEPARATOR.sub("", cleaned).strip()
        return cleaned or text

    def parse_line(self, line: str, reference: date) -> ParsedHomeworkItem:
        subject, description = self._split_subject(line)
        deadline = self.resolver.parse(line, reference)
        if deadline is None:
            deadline = reference + timedelta(days=1)
        return ParsedHomeworkItem(
            subject=subject,
            description=self.clean_description(description),
            deadline=deadline,
        )

    def parse_text(self, text: Optional[str], reference: ReferenceLike = None) -> List[ParsedHomeworkItem]:
        if not text or not text.strip():
            return []
        ref = resolve_reference_date(reference)
        items = [self.parse_line(line, ref) for line in segment(text)]
        logger.debug("Huiswerktekst geparsed: %d item(s) (referentie %s)", len(items), ref)
        return items


@lru_cache()
def _default_parser() -> HomeworkLineParser:
    return HomeworkLineParser()


def parse_line(line: str, reference: ReferenceLike = None) -> ParsedHomeworkItem:
    return _default_parser().parse_line(line.strip(), resolve_reference_date(reference))


def parse_homework_text(text: Optional[str], reference: ReferenceLike = None) -> List[ParsedHomeworkItem]:
    """Parse every segmented line of ``text``; blank input gives ``[]``."""

    return _default_parser().parse_text(text, reference)


def render_homework_item(item: ParsedHomeworkItem) -> str:
    """Render the canonical ``"<vak>: <omschrijving> - <datum>"`` line."""

    return f"{item.subject}: {item.description} - {format_date(item.deadline)}"


__all__ = [
    "HomeworkLineParser",
    "parse_homework_text",
    "parse_line",
    "render_homework_item",
    "segment",
]
