"""
SEO text analysis: keywords, readability and sentiment.
"""

from .keyword_extractor import KeywordExtractor, KeywordExtraction
from .readability import readability_score
from .sentiment import analyze_sentiment
from .text_analyzer import TextAnalyzer

__all__ = [
    'KeywordExtractor',
    'KeywordExtraction',
    'readability_score',
    'analyze_sentiment',
    'TextAnalyzer',
]
