"""
String similarity scoring and memoization.

Jaro-Winkler similarity comes from rapidfuzz. Scores are pure functions of
their arguments, so memoizing them never changes a result.
"""
from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Optional

from rapidfuzz.distance import JaroWinkler

from ..logger import get_logger

logger = get_logger(__name__)


def similarity(a: str, b: str) -> float:
    """
    Jaro-Winkler similarity of two strings in [0, 1].

    Case-sensitive; callers lower-case both sides when they want
    case-insensitive matching.
    """
    return JaroWinkler.normalized_similarity(a, b, prefix_weight=0.1)


class SimilarityCache:
    """
    Memoizes (candidate, keyword) similarity scores.

    Keys are built from the lower-cased candidate and keyword joined by a
    colon. Entries are evicted least-recently-used once ``max_size`` is
    reached; ``max_size=None`` keeps every entry.
    """

    SEPARATOR = ":"

    def __init__(self, max_size: Optional[int] = 10000) -> None:
        if max_size is not None and max_size <= 0:
            raise ValueError("max_size must be positive or None")
        self.max_size = max_size
        self._entries: OrderedDict[str, float] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @classmethod
    def make_key(cls, candidate: str, keyword: str) -> str:
        return f"{candidate.lower()}{cls.SEPARATOR}{keyword.lower()}"

    def get(self, candidate: str, keyword: str) -> Optional[float]:
        key = self.make_key(candidate, keyword)
        with self._lock:
            score = self._entries.get(key)
            if score is None:
                self.misses += 1
                return None
            self._entries.move_to_end(key)
            self.hits += 1
            return score

    def put(self, candidate: str, keyword: str, score: float) -> None:
        key = self.make_key(candidate, keyword)
        with self._lock:
            self._entries[key] = score
            self._entries.move_to_end(key)
            if self.max_size is not None:
                while len(self._entries) > self.max_size:
                    evicted, _ = self._entries.popitem(last=False)
                    logger.debug("Evicted similarity entry: %s", evicted)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def stats(self) -> dict:
        """Cache counters (safe for logging)."""
        return {
            "size": len(self._entries),
            "max_size": self.max_size,
            "hits": self.hits,
            "misses": self.misses,
        }


__all__ = ["similarity", "SimilarityCache"]
