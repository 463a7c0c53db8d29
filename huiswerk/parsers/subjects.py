"""Map free-text subject tokens onto canonical school subjects."""

from __future__ import annotations

from typing import Optional

from .config import ParserKeywordConfig, get_keyword_config


def match_subject(raw: Optional[str], keywords: ParserKeywordConfig | None = None) -> Optional[str]:
    """Return the display label of the first subject whose synonym occurs in ``raw``.

    De tabelvolgorde is de tie-break: bevat de tekst synoniemen van meerdere
    vakken, dan wint het eerst gedeclareerde vak.
    """

    lower = (raw or "").strip().lower()
    if not lower:
        return None
    keywords = keywords or get_keyword_config()
    for canonical, synonyms in keywords.subjects:
        if any(synonym in lower for synonym in synonyms):
            return canonical.replace("_", " ")
    return None


def normalize_subject(raw: Optional[str], keywords: ParserKeywordConfig | None = None) -> str:
    """Normalize ``raw`` or pass the trimmed text through unchanged."""

    matched = match_subject(raw, keywords)
    if matched is not None:
        return matched
    return (raw or "").strip()


__all__ = ["match_subject", "normalize_subject"]
