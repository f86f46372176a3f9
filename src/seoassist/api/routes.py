"""
API routes for SEO Assist.
"""
from typing import Any, Dict, Optional

from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from ..analysis.text_analyzer import get_analyzer
from ..insertion.engine import get_inserter
from ..insertion.generative import GenerativeInserter
from ..schemas import AnalyzeRequest, InsertKeywordRequest
from ..config import Config
from ..logger import get_logger

logger = get_logger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api')

_generative_inserter: Optional[GenerativeInserter] = None


def get_generative_inserter() -> GenerativeInserter:
    """Shared OpenAI-backed inserter, created on first use."""
    global _generative_inserter
    if _generative_inserter is None:
        _generative_inserter = GenerativeInserter()
    return _generative_inserter


def _validation_message(error: ValidationError) -> str:
    fields = sorted({str(e['loc'][0]) for e in error.errors() if e.get('loc')})
    if fields:
        return f"Invalid or missing fields: {', '.join(fields)}"
    return "Invalid request"


@api_bp.route('/analyze', methods=['POST'])
def analyze_text() -> tuple[Dict[str, Any], int]:
    """
    Analyze text for SEO keywords, readability and sentiment.

    Expected JSON:
    {
        "text": "Some prose to analyze."
    }

    Returns:
    {
        "status": "success",
        "keywords": [...],
        "readability": 72,
        "suggestions": "Consider adding keywords: ...",
        "sentiment": {"score": 0.4, "tone": "Positive", "suggestion": "..."},
        "updatedText": "Some prose to analyze."
    }
    """
    try:
        data = request.get_json(silent=True) or {}
        try:
            body = AnalyzeRequest.model_validate(data)
        except ValidationError as e:
            logger.info(f"Rejected analyze request: {e.error_count()} validation errors")
            return jsonify({
                'status': 'error',
                'message': 'Text is required',
                'details': _validation_message(e)
            }), 400

        logger.info(f"Analyzing text ({len(body.text)} characters)")

        result = get_analyzer().analyze(body.text)

        return jsonify({
            'status': 'success',
            **result.to_dict()
        }), 200

    except Exception as e:
        logger.error(f"Error in analyze endpoint: {e}", exc_info=True)
        return jsonify({
            'status': 'error',
            'message': 'Failed to analyze text',
            'details': str(e)
        }), 500


@api_bp.route('/insert-keyword', methods=['POST'])
def insert_keyword() -> tuple[Dict[str, Any], int]:
    """
    Insert a keyword into text.

    Expected JSON:
    {
        "text": "The quick fox jumps. It runs fast.",
        "keyword": "dog",
        "mode": "fuzzy"  // Optional: "fuzzy" or "generative"
    }

    Returns:
    {
        "status": "success",
        "updatedText": "The quick fox jumps. dog It runs fast.",
        "insertedAt": 21,
        "keywordLength": 3,
        "strategy": "sentence_boundary"
    }
    """
    try:
        data = request.get_json(silent=True) or {}
        try:
            body = InsertKeywordRequest.model_validate(data)
        except ValidationError as e:
            logger.info(f"Rejected insert-keyword request: {e.error_count()} validation errors")
            return jsonify({
                'status': 'error',
                'message': 'Text and keyword are required',
                'details': _validation_message(e)
            }), 400

        mode = body.mode or Config.INSERTION_MODE
        logger.info(f"Inserting keyword {body.keyword!r} (mode: {mode})")

        if mode == "generative":
            result = get_generative_inserter().insert(body.text, body.keyword)
        else:
            result = get_inserter().insert(body.text, body.keyword)

        return jsonify({
            'status': 'success',
            **result.to_dict()
        }), 200

    except Exception as e:
        logger.error(f"Error in insert-keyword endpoint: {e}", exc_info=True)
        return jsonify({
            'status': 'error',
            'message': 'Failed to insert keyword',
            'details': str(e)
        }), 500
