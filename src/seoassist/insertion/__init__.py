"""
Keyword insertion.

Fuzzy anchor matching with sentence-boundary and append fallbacks, plus an
LLM rewrite alternative.
"""

from .anchor import AnchorSelector, select_anchor
from .offsets import reconstruct_offset, guard_quotes
from .formatter import format_insertion
from .engine import KeywordInserter, insert_keyword, get_inserter
from .generative import GenerativeInserter

__all__ = [
    'AnchorSelector',
    'select_anchor',
    'reconstruct_offset',
    'guard_quotes',
    'format_insertion',
    'KeywordInserter',
    'insert_keyword',
    'get_inserter',
    'GenerativeInserter',
]
