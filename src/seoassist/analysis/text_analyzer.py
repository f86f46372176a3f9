"""
Main text analyzer that orchestrates the SEO metrics.

Combines keyword extraction, readability and sentiment into a single
analysis result for the web client.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from ..config import Config
from ..models import AnalysisResult, SentimentResult
from ..logger import get_logger
from .keyword_extractor import KeywordExtractor
from .readability import readability_score
from .sentiment import analyze_sentiment

logger = get_logger(__name__)


@dataclass
class TextAnalyzer:
    """
    Analyze text for SEO metrics.

    Attributes:
        keyword_extractor: Source of candidate keywords
        sentiment: Callable scoring the sentiment of a text
        max_keywords: Maximum number of keywords to report
    """
    keyword_extractor: Any = field(default_factory=KeywordExtractor)
    sentiment: Callable[[str], SentimentResult] = analyze_sentiment
    max_keywords: int = Config.MAX_KEYWORDS

    def analyze(self, text: str) -> AnalysisResult:
        """
        Run keyword extraction, readability and sentiment over ``text``.

        Args:
            text: Non-empty text submitted by the client

        Returns:
            AnalysisResult ready for JSON serialization
        """
        extraction = self.keyword_extractor.extract(text)
        logger.info(
            "Extracted %d keywords (source: %s)",
            len(extraction.keywords), extraction.source
        )

        readability = readability_score(text)
        sentiment = self.sentiment(text)
        logger.info("Readability %d, sentiment %s (%.3f)", readability, sentiment.tone, sentiment.score)

        return AnalysisResult(
            text=text,
            keywords=extraction.keywords[:self.max_keywords],
            readability=readability,
            sentiment=sentiment,
            keyword_source=extraction.source,
        )


_default_analyzer: Optional[TextAnalyzer] = None


def get_analyzer() -> TextAnalyzer:
    global _default_analyzer
    if _default_analyzer is None:
        _default_analyzer = TextAnalyzer()
    return _default_analyzer


__all__ = ['TextAnalyzer', 'get_analyzer']
