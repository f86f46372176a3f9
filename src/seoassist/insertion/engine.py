"""
Keyword insertion engine.

Tries an ordered list of insertion strategies and returns the first result:

1. fuzzy anchor - splice after the word most similar to the keyword
2. sentence boundary - splice after the first sentence's terminator
3. append - add the keyword to the end of the text (always applies)

A strategy returns ``None`` when it does not apply to the text.
"""
from __future__ import annotations

import re
import threading
from typing import Callable, Optional, Sequence

from ..config import Config
from ..models import InsertionResult, TaggedText
from ..nlp.similarity import SimilarityCache, similarity as jaro_winkler
from ..logger import get_logger
from .anchor import AnchorSelector, candidates_from
from .formatter import format_insertion
from .offsets import guard_quotes, reconstruct_offset

logger = get_logger(__name__)

Strategy = Callable[[str, str], Optional[InsertionResult]]
Tagger = Callable[[str], TaggedText]

SENTENCE_SPLIT = re.compile(r"[.!?]")


def run_chain(strategies: Sequence[Strategy], text: str, keyword: str) -> Optional[InsertionResult]:
    """
    Return the result of the first strategy that applies.

    An exception inside a strategy is logged and treated as "does not apply".
    """
    for strategy in strategies:
        name = getattr(strategy, "__name__", repr(strategy))
        try:
            result = strategy(text, keyword)
        except Exception as e:
            logger.warning("Insertion strategy %s failed, falling back: %s", name, e, exc_info=True)
            continue
        if result is not None:
            logger.debug("Insertion strategy %s applied at %d", name, result.inserted_at)
            return result
        logger.debug("Insertion strategy %s not applicable", name)
    return None


def insert_after_first_sentence(text: str, keyword: str) -> Optional[InsertionResult]:
    """Insert right after the terminator of the first non-empty sentence."""
    sentences = [s for s in SENTENCE_SPLIT.split(text) if s.strip()]
    if not sentences:
        return None

    first_sentence = sentences[0].strip()
    sentence_end = text.find(first_sentence) + len(first_sentence)

    terminator = SENTENCE_SPLIT.search(text, sentence_end)
    insert_point = terminator.end() if terminator else sentence_end

    return InsertionResult(
        updated_text=f"{text[:insert_point]} {keyword}{text[insert_point:]}",
        inserted_at=insert_point + 1,
        keyword_length=len(keyword),
        strategy="sentence_boundary",
    )


def append_keyword(text: str, keyword: str) -> InsertionResult:
    """Append to the trimmed text. Always applies."""
    trimmed = text.strip()
    separator = " " if trimmed else ""
    return InsertionResult(
        updated_text=f"{trimmed}{separator}{keyword}",
        inserted_at=len(trimmed) + len(separator),
        keyword_length=len(keyword),
        strategy="append",
    )


class KeywordInserter:
    """
    Splices keywords into text using fuzzy anchor matching with fallbacks.

    Attributes:
        tagger: Callable producing the tokenized and tagged view of a text
        selector: Anchor selector holding the scorer and similarity cache
    """

    def __init__(
        self,
        tagger: Optional[Tagger] = None,
        scorer: Callable[[str, str], float] = jaro_winkler,
        cache: Optional[SimilarityCache] = None,
    ) -> None:
        self._tagger = tagger
        self.cache = cache
        self.selector = AnchorSelector(scorer=scorer, cache=cache)

    @property
    def tagger(self) -> Tagger:
        if self._tagger is None:
            from ..nlp.tagger import SpacyTagger
            self._tagger = SpacyTagger()
        return self._tagger

    @property
    def strategies(self) -> list[Strategy]:
        return [self.insert_near_anchor, insert_after_first_sentence]

    def insert(self, text: str, keyword: str) -> InsertionResult:
        """
        Insert ``keyword`` into ``text``.

        Never fails for non-empty inputs; the append strategy is the terminal
        fallback.
        """
        result = run_chain(self.strategies, text, keyword) or append_keyword(text, keyword)
        logger.info(
            "Inserted %r via %s at %d",
            keyword, result.strategy, result.inserted_at
        )
        return result

    def insert_near_anchor(self, text: str, keyword: str) -> Optional[InsertionResult]:
        """Insert after the noun or verb most similar to the keyword."""
        tokens = self.tagger(text).tag()
        candidates = candidates_from(tokens)

        anchor, score = self.selector.select(candidates, keyword)
        if anchor is None:
            logger.debug("No anchor for %r among %d candidates", keyword, len(candidates))
            return None

        logger.debug("Best anchor %r (score %.4f)", anchor.value, score)

        offset = reconstruct_offset(text, tokens, anchor.index)
        if offset is None:
            logger.debug("Anchor %r could not be located in the text", anchor.value)
            return None

        return format_insertion(text, guard_quotes(text, offset), keyword)


_default_inserter: Optional[KeywordInserter] = None
_default_lock = threading.Lock()


def get_inserter() -> KeywordInserter:
    """Process-wide inserter with a similarity cache sized from config."""
    global _default_inserter
    if _default_inserter is None:
        with _default_lock:
            if _default_inserter is None:
                _default_inserter = KeywordInserter(
                    cache=SimilarityCache(max_size=Config.get_cache_size())
                )
    return _default_inserter


def insert_keyword(text: str, keyword: str) -> InsertionResult:
    """Insert ``keyword`` into ``text`` with the process-wide inserter."""
    return get_inserter().insert(text, keyword)


__all__ = [
    "KeywordInserter",
    "insert_keyword",
    "get_inserter",
    "run_chain",
    "insert_after_first_sentence",
    "append_keyword",
]
