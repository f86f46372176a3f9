"""
Pydantic schemas for API validation.
"""

from .requests import AnalyzeRequest, InsertKeywordRequest

__all__ = [
    'AnalyzeRequest',
    'InsertKeywordRequest',
]
