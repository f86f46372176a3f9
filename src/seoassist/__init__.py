"""
SEO Assist - SEO text assistant.

Surfaces keywords, readability and sentiment for submitted prose and splices
chosen keywords back into it at plausible locations.
"""

__version__ = "1.0.0"
__author__ = "SEO Assist"

from .models import InsertionResult, AnalysisResult, Token, TaggedText
from .insertion.engine import KeywordInserter, insert_keyword

__all__ = [
    "InsertionResult",
    "AnalysisResult",
    "Token",
    "TaggedText",
    "KeywordInserter",
    "insert_keyword",
]
