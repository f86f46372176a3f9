"""
Pydantic schemas for API request validation.
"""
from __future__ import annotations

from typing import Literal, Optional
from pydantic import BaseModel, Field, field_validator


class AnalyzeRequest(BaseModel):
    """Body of POST /api/analyze."""
    text: str = Field(..., min_length=1, description="Text to analyze")


class InsertKeywordRequest(BaseModel):
    """Body of POST /api/insert-keyword."""
    text: str = Field(..., min_length=1, description="Text to insert the keyword into")
    keyword: str = Field(..., min_length=1, description="Keyword to insert")
    mode: Optional[Literal["fuzzy", "generative"]] = Field(
        default=None,
        description="Insertion mode; defaults to INSERTION_MODE"
    )

    @field_validator('keyword')
    @classmethod
    def keyword_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError('Keyword must contain a non-space character')
        return v
