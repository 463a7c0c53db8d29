# eenvoudige re-export, met relatieve imports intern
from .config import ParserKeywordConfig, get_keyword_config
from .dates import DeadlineResolver, format_date, parse_deadline, resolve_reference_date
from .homework import (
    HomeworkLineParser,
    parse_homework_text,
    parse_line,
    render_homework_item,
    segment,
)
from .schedule import match_day_header, parse_lesson_line, parse_schedule_text
from .subjects import match_subject, normalize_subject

__all__ = [
    "DeadlineResolver",
    "HomeworkLineParser",
    "ParserKeywordConfig",
    "format_date",
    "get_keyword_config",
    "match_day_header",
    "match_subject",
    "normalize_subject",
    "parse_deadline",
    "parse_homework_text",
    "parse_lesson_line",
    "parse_line",
    "parse_schedule_text",
    "render_homework_item",
    "resolve_reference_date",
    "segment",
]
