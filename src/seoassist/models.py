"""
Data models for SEO Assist.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, List, Set, Literal

TokenTag = Literal["noun", "verb", "unknown"]

# Punctuation the tokenizer emits as standalone tokens
PUNCTUATION_TOKENS = frozenset({".", ",", "!", "?"})


@dataclass(frozen=True, slots=True)
class Token:
    """
    A token of the tokenized view of a request's text.

    Attributes:
        value: Token text
        tag: Grammatical role used for anchor matching
        index: Position in the tokenized view
        start: Character offset of the token in the original text, if known
        end: Character offset one past the token in the original text, if known
    """

    value: str
    tag: TokenTag = "unknown"
    index: int = 0
    start: Optional[int] = None
    end: Optional[int] = None

    @property
    def has_span(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def is_candidate(self) -> bool:
        """Nouns and verbs that are not punctuation may anchor an insertion."""
        return self.tag in ("noun", "verb") and self.value not in PUNCTUATION_TOKENS


@dataclass(frozen=True, slots=True)
class RawToken:
    """A token as produced by a tokenizer, before tagging."""
    value: str
    start: Optional[int] = None
    end: Optional[int] = None


@dataclass(slots=True)
class TaggedText:
    """
    Output of a tokenizer/tagger.

    Attributes:
        tokens: Ordered token strings, or RawTokens carrying original spans
        noun_phrases: Noun phrases found in the text
        verb_phrases: Verb phrases found in the text
    """

    tokens: List[str | RawToken] = field(default_factory=list)
    noun_phrases: Set[str] = field(default_factory=set)
    verb_phrases: Set[str] = field(default_factory=set)

    def tag(self) -> List[Token]:
        """Classify every token. Noun membership wins over verb membership."""
        tagged = []
        for index, raw in enumerate(self.tokens):
            if isinstance(raw, str):
                raw = RawToken(value=raw)
            if raw.value in self.noun_phrases:
                tag: TokenTag = "noun"
            elif raw.value in self.verb_phrases:
                tag = "verb"
            else:
                tag = "unknown"
            tagged.append(Token(
                value=raw.value,
                tag=tag,
                index=index,
                start=raw.start,
                end=raw.end,
            ))
        return tagged


@dataclass(slots=True)
class InsertionResult:
    """
    Result of splicing a keyword into text.

    ``updated_text[inserted_at:inserted_at + keyword_length]`` is the
    inserted keyword.
    """

    updated_text: str
    inserted_at: int
    keyword_length: int
    strategy: str = "fuzzy_anchor"

    @property
    def inserted_span(self) -> str:
        return self.updated_text[self.inserted_at:self.inserted_at + self.keyword_length]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "updatedText": self.updated_text,
            "insertedAt": self.inserted_at,
            "keywordLength": self.keyword_length,
            "strategy": self.strategy,
        }


@dataclass(slots=True)
class SentimentResult:
    """Sentiment of a text."""
    score: float
    tone: Literal["Positive", "Negative", "Neutral"]
    suggestion: str

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "tone": self.tone,
            "suggestion": self.suggestion,
        }


@dataclass(slots=True)
class AnalysisResult:
    """SEO metrics for a submitted text."""
    text: str
    keywords: List[str]
    readability: int
    sentiment: SentimentResult
    keyword_source: str = "textrazor"

    @property
    def suggestions(self) -> str:
        if self.keywords:
            return f"Consider adding keywords: {', '.join(self.keywords)}"
        return "No suggestions available."

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "keywords": self.keywords,
            "readability": self.readability,
            "suggestions": self.suggestions,
            "sentiment": self.sentiment.to_dict(),
            "updatedText": self.text,
            "keywordSource": self.keyword_source,
        }
