"""
Readability scoring.
"""
import textstat


def readability_score(text: str) -> int:
    """Flesch reading ease, rounded. Higher is easier to read."""
    if not text.strip():
        return 0
    return round(textstat.flesch_reading_ease(text))
