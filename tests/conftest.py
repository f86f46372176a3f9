"""
Pytest configuration and fixtures for SEO Assist tests.
"""
import re
import sys
from pathlib import Path

# Add src to path for imports
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

import pytest
from seoassist.models import RawToken, TaggedText
from seoassist.nlp.similarity import SimilarityCache
from seoassist.insertion.engine import KeywordInserter

TOKEN_PATTERN = re.compile(r"\w+|[.,!?]")


class FakeTagger:
    """
    Regex tokenizer with fixed noun/verb phrase sets.

    Without spans the engine has to locate anchors by re-scanning the text.
    """

    def __init__(self, nouns=(), verbs=(), with_spans=False):
        self.nouns = set(nouns)
        self.verbs = set(verbs)
        self.with_spans = with_spans
        self.calls = 0

    def __call__(self, text):
        self.calls += 1
        matches = list(TOKEN_PATTERN.finditer(text))
        if self.with_spans:
            tokens = [RawToken(m.group(), m.start(), m.end()) for m in matches]
        else:
            tokens = [m.group() for m in matches]
        return TaggedText(tokens=tokens, noun_phrases=set(self.nouns), verb_phrases=set(self.verbs))


class TableScorer:
    """Similarity scorer backed by a lookup table; counts its calls."""

    def __init__(self, scores=None, default=0.0):
        self.scores = dict(scores or {})
        self.default = default
        self.calls = []

    def __call__(self, a, b):
        self.calls.append((a, b))
        return self.scores.get((a, b), self.default)


@pytest.fixture
def fake_tagger():
    """Factory for fake taggers."""
    return FakeTagger


@pytest.fixture
def table_scorer():
    """Factory for table scorers."""
    return TableScorer


@pytest.fixture
def cache():
    """An empty bounded similarity cache."""
    return SimilarityCache(max_size=100)


@pytest.fixture
def make_inserter():
    """Build a KeywordInserter around a fake tagger."""
    def _make(nouns=(), verbs=(), with_spans=False, scorer=None, cache=None):
        tagger = FakeTagger(nouns=nouns, verbs=verbs, with_spans=with_spans)
        if scorer is None:
            return KeywordInserter(tagger=tagger, cache=cache)
        return KeywordInserter(tagger=tagger, scorer=scorer, cache=cache)
    return _make
