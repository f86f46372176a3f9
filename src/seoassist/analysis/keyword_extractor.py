"""
TextRazor-based keyword extraction.

Uses the TextRazor API to extract topics from submitted text, with local
fallbacks when the service returns no topics or cannot be reached.
"""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from ..config import Config
from ..logger import get_logger

logger = get_logger(__name__)

STOPWORDS = frozenset({'this', 'is', 'a', 'an', 'the', 'about', 'in', 'on', 'at', 'to'})

NOUN_TAGS = frozenset({'NN', 'NNP'})


@dataclass(slots=True)
class KeywordExtraction:
    """Keywords found in a text and where they came from."""
    keywords: List[str] = field(default_factory=list)
    source: str = "textrazor"


def manual_keywords(text: str, limit: int = 5) -> List[str]:
    """Words longer than three characters that are not stopwords."""
    words = [
        word for word in text.split()
        if len(word) > 3 and word.lower() not in STOPWORDS
    ]
    return words[:limit]


def _unique(values: List[str]) -> List[str]:
    seen = set()
    unique = []
    for value in values:
        if value not in seen:
            seen.add(value)
            unique.append(value)
    return unique


class KeywordExtractor:
    """
    Extract candidate keywords from text using TextRazor.

    Topic labels are preferred. When TextRazor returns no topics, singular
    and proper nouns from its word analysis are used instead. When the
    request fails, keywords are picked from the raw text.
    """

    def __init__(
        self,
        *,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout_s: Optional[int] = None,
    ) -> None:
        """
        Initialize the extractor.

        Args:
            api_key: TextRazor API key (optional, can use env var TEXTRAZOR_API_KEY)
            api_url: TextRazor endpoint
            timeout_s: Request timeout in seconds
        """
        self.api_key = api_key or Config.TEXTRAZOR_API_KEY
        self.api_url = api_url or Config.TEXTRAZOR_API_URL
        self.timeout_s = timeout_s or Config.KEYWORD_SERVICE_TIMEOUT_S

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def extract(self, text: str) -> KeywordExtraction:
        """
        Extract keywords from text.

        Args:
            text: Text to analyze

        Returns:
            KeywordExtraction with keywords in relevance order
        """
        if not self.is_configured:
            logger.warning("TextRazor API key not configured; using manual keyword extraction")
            return KeywordExtraction(keywords=manual_keywords(text), source="manual")

        try:
            response_data = self._fetch(text)
        except (requests.RequestException, ValueError) as e:
            logger.error("TextRazor request failed: %s", e, exc_info=True)
            return KeywordExtraction(keywords=manual_keywords(text), source="manual")

        return self._parse_response(response_data)

    def _fetch(self, text: str) -> Dict[str, Any]:
        headers = {
            'x-textrazor-key': self.api_key,
            'Content-Type': 'application/x-www-form-urlencoded',
        }
        payload = {
            'text': text,
            'extractors': 'topics,words',
        }

        logger.info("TEXTRAZOR Requesting analysis for %d characters", len(text))
        response = requests.post(
            self.api_url,
            data=payload,
            headers=headers,
            timeout=self.timeout_s,
        )
        logger.info("TEXTRAZOR Response status: %d", response.status_code)
        response.raise_for_status()

        response_data = response.json()
        logger.debug("TEXTRAZOR Raw response: %s", json.dumps(response_data)[:2000])
        return response_data

    def _parse_response(self, data: Dict[str, Any]) -> KeywordExtraction:
        body = data.get('response') or {}

        topics = body.get('topics') or []
        keywords = [t['label'] for t in topics if t.get('label')]
        if keywords:
            return KeywordExtraction(keywords=keywords, source="textrazor_topics")

        words = [
            word
            for sentence in body.get('sentences') or []
            for word in sentence.get('words') or []
        ]
        nouns = [
            word['token'] for word in words
            if word.get('partOfSpeech') in NOUN_TAGS
            and word.get('token')
            and (word.get('lemma') or word['token']).lower() not in STOPWORDS
        ]
        return KeywordExtraction(keywords=_unique(nouns), source="textrazor_words")


__all__ = ['KeywordExtractor', 'KeywordExtraction', 'manual_keywords']
