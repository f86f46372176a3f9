"""
Keyword insertion by LLM rewrite using OpenAI ChatGPT.

The model is asked to weave the keyword into the text. When it cannot be
reached or its answer does not contain the keyword, the keyword is appended
to the original text instead, with SEO hashtags for SEO-related keywords.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from openai import OpenAI

from ..config import Config
from ..models import InsertionResult
from ..logger import get_logger

logger = get_logger(__name__)


PROMPT_TEMPLATE = """Insert the keyword "{keyword}" into the following text naturally, ensuring grammatical correctness and contextual relevance. The keyword must be inserted at least once. If you cannot find a natural insertion point, append the keyword at the end of the text. If the keyword is SEO-related (e.g., contains "SEO", "marketing", "keyword", "optimization"), append relevant hashtags (e.g., #SEO, #DigitalMarketing) after the keyword in parentheses. Preserve all whitespace, newlines, and formatting in the original text. Return only the modified text without any additional explanation.

Text: {text}"""

SEO_RELATED_TERMS = ("seo", "digital marketing", "keyword", "optimization", "search engine")

SEO_HASHTAGS = (
    "#SEO",
    "#DigitalMarketing",
    "#ContentMarketing",
    "#SearchEngineOptimization",
    "#KeywordResearch",
)
TRENDY_HASHTAGS = ("#MarketingTrends2025", "#GrowYourBusiness", "#SocialMediaMarketing")


def is_seo_related(keyword: str) -> bool:
    lowered = keyword.lower()
    return any(term in lowered for term in SEO_RELATED_TERMS)


def annotate_keyword(keyword: str) -> str:
    """Keyword followed by hashtags in parentheses when it is SEO-related."""
    if not is_seo_related(keyword):
        return keyword
    hashtags = " ".join(SEO_HASHTAGS + TRENDY_HASHTAGS[:2])
    return f"{keyword} ({hashtags})"


def append_annotated(text: str, keyword: str) -> InsertionResult:
    """Append the (possibly annotated) keyword to the untrimmed text."""
    separator = "" if text.endswith((" ", "\n")) else " "
    return InsertionResult(
        updated_text=f"{text}{separator}{annotate_keyword(keyword)}",
        inserted_at=len(text) + len(separator),
        keyword_length=len(keyword),
        strategy="generative_append",
    )


@dataclass
class GenerativeInserter:
    """
    Inserts keywords by asking an OpenAI model to rewrite the text.

    Attributes:
        model: OpenAI model to use
        temperature: Creativity level (0.0-1.0)
        max_tokens: Maximum tokens in response
        api_key: OpenAI API key (defaults to OPENAI_API_KEY)
    """
    model: str = field(default_factory=lambda: Config.OPENAI_MODEL)
    temperature: float = field(default_factory=lambda: Config.OPENAI_TEMPERATURE)
    max_tokens: int = field(default_factory=lambda: Config.OPENAI_MAX_TOKENS)
    api_key: Optional[str] = None
    client: Any = None

    def __post_init__(self):
        if self.client is not None:
            return

        key = self.api_key or Config.OPENAI_API_KEY
        if key:
            self.client = OpenAI(api_key=key)
            logger.info(f"OpenAI client initialized with model: {self.model}")
        else:
            logger.warning("OPENAI_API_KEY not set. Generative insertion will append keywords.")

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    def insert(self, text: str, keyword: str) -> InsertionResult:
        """
        Insert ``keyword`` into ``text`` via the model, appending on failure.
        """
        updated = self._rewrite(text, keyword)
        if updated:
            inserted_at = updated.lower().find(keyword.lower())
            if inserted_at != -1:
                return InsertionResult(
                    updated_text=updated,
                    inserted_at=inserted_at,
                    keyword_length=len(keyword),
                    strategy="generative",
                )

        logger.info("Model did not insert %r; appending instead", keyword)
        return append_annotated(text, keyword)

    def _rewrite(self, text: str, keyword: str) -> Optional[str]:
        if not self.is_configured:
            return None

        prompt = PROMPT_TEMPLATE.format(keyword=keyword, text=text)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[{"role": "user", "content": prompt}],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error("OpenAI insertion request failed: %s", e, exc_info=True)
            return None

        content = response.choices[0].message.content if response.choices else None
        return content.strip() if content else None


__all__ = ["GenerativeInserter", "annotate_keyword", "is_seo_related"]
