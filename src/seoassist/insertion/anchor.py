"""
Anchor selection: pick the existing word most similar to the keyword.
"""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Tuple

from ..models import Token
from ..nlp.similarity import SimilarityCache, similarity as jaro_winkler
from ..logger import get_logger

logger = get_logger(__name__)

# Edit-distance similarity is noisier on short strings
SHORT_KEYWORD_LENGTH = 3
SHORT_KEYWORD_THRESHOLD = 0.6
DEFAULT_THRESHOLD = 0.45


def threshold_for(keyword: str) -> float:
    """Minimum score (exclusive) a candidate needs to anchor ``keyword``."""
    if len(keyword) <= SHORT_KEYWORD_LENGTH:
        return SHORT_KEYWORD_THRESHOLD
    return DEFAULT_THRESHOLD


def candidates_from(tokens: Iterable[Token]) -> List[Token]:
    """Nouns and verbs that are not punctuation, in text order."""
    return [token for token in tokens if token.is_candidate]


class AnchorSelector:
    """
    Scores candidates against a keyword and keeps the best one.

    A candidate replaces the current best only when its score is strictly
    greater than both the best so far and the keyword's threshold, so ties
    keep the earliest candidate.
    """

    def __init__(
        self,
        scorer: Callable[[str, str], float] = jaro_winkler,
        cache: Optional[SimilarityCache] = None,
    ) -> None:
        self.scorer = scorer
        self.cache = cache

    def score(self, candidate: str, keyword: str) -> float:
        word = candidate.lower()
        target = keyword.lower()

        if self.cache is not None:
            cached = self.cache.get(word, target)
            if cached is not None:
                return cached

        score = self.scorer(word, target)
        if self.cache is not None:
            self.cache.put(word, target, score)
        return score

    def select(self, candidates: Iterable[Token], keyword: str) -> Tuple[Optional[Token], float]:
        threshold = threshold_for(keyword)
        best: Optional[Token] = None
        best_score = 0.0

        for candidate in candidates:
            score = self.score(candidate.value, keyword)
            logger.debug(
                "Comparing %r with %r: score=%.4f tag=%s",
                candidate.value.lower(), keyword.lower(), score, candidate.tag
            )
            if score > best_score and score > threshold:
                best = candidate
                best_score = score

        if best is None:
            return None, 0.0
        return best, best_score


def select_anchor(
    candidates: Iterable[Token],
    keyword: str,
    cache: Optional[SimilarityCache] = None,
) -> Tuple[Optional[Token], float]:
    """Convenience wrapper around :class:`AnchorSelector`."""
    return AnchorSelector(cache=cache).select(candidates, keyword)


__all__ = ["AnchorSelector", "select_anchor", "candidates_from", "threshold_for"]
