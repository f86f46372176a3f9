"""
Sentiment analysis using NLTK's VADER lexicon.
"""
from __future__ import annotations

import threading

import nltk
from nltk.sentiment.vader import SentimentIntensityAnalyzer

from ..models import SentimentResult
from ..logger import get_logger

logger = get_logger(__name__)

NEGATIVE_SUGGESTION = "Consider using more positive language to improve engagement."
POSITIVE_SUGGESTION = "Your tone is engaging!"

_analyzer = None
_analyzer_lock = threading.Lock()


def get_vader() -> SentimentIntensityAnalyzer:
    """Load the VADER analyzer once, downloading its lexicon if needed."""
    global _analyzer

    if _analyzer is not None:
        return _analyzer

    with _analyzer_lock:
        if _analyzer is None:
            try:
                _analyzer = SentimentIntensityAnalyzer()
            except LookupError:
                logger.warning("VADER lexicon not found, attempting to download...")
                nltk.download("vader_lexicon", quiet=True)
                _analyzer = SentimentIntensityAnalyzer()
    return _analyzer


def classify(score: float) -> SentimentResult:
    if score > 0:
        tone = "Positive"
    elif score < 0:
        tone = "Negative"
    else:
        tone = "Neutral"
    suggestion = NEGATIVE_SUGGESTION if score < 0 else POSITIVE_SUGGESTION
    return SentimentResult(score=score, tone=tone, suggestion=suggestion)


def analyze_sentiment(text: str, analyzer=None) -> SentimentResult:
    """Compound VADER score in [-1, 1] with a tone label and suggestion."""
    analyzer = analyzer or get_vader()
    score = analyzer.polarity_scores(text)["compound"]
    return classify(score)
