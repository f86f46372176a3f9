"""
NLP capabilities consumed by keyword insertion: tagging and similarity.
"""

from .similarity import similarity, SimilarityCache
from .tagger import SpacyTagger

__all__ = [
    'similarity',
    'SimilarityCache',
    'SpacyTagger',
]
