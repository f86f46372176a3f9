"""
Splice a keyword into text at a finalized offset.
"""
from __future__ import annotations

from ..models import InsertionResult

TRAILING_PUNCTUATION = frozenset(",.!?")


def format_insertion(text: str, offset: int, keyword: str, strategy: str = "fuzzy_anchor") -> InsertionResult:
    """
    Insert ``keyword`` at ``offset`` with punctuation-aware spacing.

    A leading space is always added. A trailing space is added only when the
    keyword would otherwise run into the following word.
    """
    offset = max(0, min(offset, len(text)))
    next_char = text[offset] if offset < len(text) else ""

    if not next_char or next_char in TRAILING_PUNCTUATION or next_char.isspace():
        insertion = f" {keyword}"
    else:
        insertion = f" {keyword} "

    return InsertionResult(
        updated_text=text[:offset] + insertion + text[offset:],
        inserted_at=offset + 1,
        keyword_length=len(keyword),
        strategy=strategy,
    )


__all__ = ["format_insertion"]
