"""
Offset handling between the tokenized view and the original text.
"""
from __future__ import annotations

from typing import Optional, Sequence

from ..models import Token
from ..logger import get_logger

logger = get_logger(__name__)

QUOTE = '"'


def reconstruct_offset(text: str, tokens: Sequence[Token], anchor_index: int) -> Optional[int]:
    """
    Character offset in ``text`` immediately after the anchor token.

    Tokens carrying their original span resolve directly. Otherwise the
    tokens are replayed against the text with a running cursor, since the
    tokenized view may have normalized spacing around punctuation.

    Returns:
        The offset, or None if the anchor cannot be located from the
        expected cursor position onward.
    """
    if not 0 <= anchor_index < len(tokens):
        return None

    anchor = tokens[anchor_index]
    if anchor.has_span:
        return anchor.end

    text_lower = text.lower()
    anchor_lower = anchor.value.lower()
    cursor = 0

    for index, token in enumerate(tokens):
        if index == anchor_index:
            match = text_lower.find(anchor_lower, cursor)
            if match == -1:
                logger.debug("Anchor %r not found after offset %d", anchor.value, cursor)
                return None
            return match + len(anchor.value)

        cursor += len(token.value)
        if cursor < len(text) and text[cursor] == " ":
            cursor += 1

    return None


def guard_quotes(text: str, offset: int) -> int:
    """
    Move ``offset`` out of an open double-quoted span.

    Quote state is a parity toggle over every ``"`` before the offset (no
    escaping). Inside a span the offset moves one past the next ``"``; with
    no closing quote it is left unchanged.
    """
    in_quotes = text.count(QUOTE, 0, offset) % 2 == 1
    if not in_quotes:
        return offset

    closing = text.find(QUOTE, offset)
    if closing == -1:
        return offset

    logger.debug("Offset %d inside quoted span, moving past quote at %d", offset, closing)
    return closing + 1


__all__ = ["reconstruct_offset", "guard_quotes"]
