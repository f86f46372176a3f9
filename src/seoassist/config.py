"""
Configuration management for SEO Assist.
"""
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    """Read an integer environment variable, falling back on bad values."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        return default


class Config:
    """Application configuration."""

    # API Keys
    TEXTRAZOR_API_KEY: Optional[str] = os.getenv("TEXTRAZOR_API_KEY")
    OPENAI_API_KEY: Optional[str] = os.getenv("OPENAI_API_KEY")

    # External services
    TEXTRAZOR_API_URL: str = os.getenv("TEXTRAZOR_API_URL", "https://api.textrazor.com")
    KEYWORD_SERVICE_TIMEOUT_S: int = _int_env("KEYWORD_SERVICE_TIMEOUT_S", 6)
    OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TEMPERATURE: float = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))
    OPENAI_MAX_TOKENS: int = _int_env("OPENAI_MAX_TOKENS", 500)

    # NLP
    SPACY_MODEL: str = os.getenv("SPACY_MODEL", "en_core_web_sm")

    # Keyword insertion
    # Options: "fuzzy" (anchor matching + fallbacks) or "generative" (OpenAI rewrite)
    INSERTION_MODE: str = os.getenv("INSERTION_MODE", "fuzzy")
    # 0 disables eviction
    SIMILARITY_CACHE_SIZE: int = _int_env("SIMILARITY_CACHE_SIZE", 10000)

    # Flask settings
    FLASK_ENV: str = os.getenv("FLASK_ENV", "development")
    FLASK_DEBUG: bool = os.getenv("FLASK_DEBUG", "True").lower() == "true"
    FLASK_HOST: str = os.getenv("FLASK_HOST", "0.0.0.0")
    FLASK_PORT: int = _int_env("FLASK_PORT", 3000)
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key")
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    # Analysis defaults
    MAX_KEYWORDS: int = 5

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @classmethod
    def get_cors_origins(cls) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        origins = [o.strip() for o in cls.CORS_ORIGINS.split(",") if o.strip()]
        return origins or ["*"]

    @classmethod
    def get_cache_size(cls) -> Optional[int]:
        """Similarity cache bound, None when unbounded."""
        return cls.SIMILARITY_CACHE_SIZE if cls.SIMILARITY_CACHE_SIZE > 0 else None

    @classmethod
    def validate(cls) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not cls.TEXTRAZOR_API_KEY:
            errors.append("TEXTRAZOR_API_KEY not set (keyword extraction will use the manual fallback)")

        if cls.INSERTION_MODE == "generative" and not cls.OPENAI_API_KEY:
            errors.append("OPENAI_API_KEY not set (required for generative insertion)")

        if cls.INSERTION_MODE not in ("fuzzy", "generative"):
            errors.append(f"Invalid INSERTION_MODE: {cls.INSERTION_MODE}. Must be 'fuzzy' or 'generative'")

        return errors

    @classmethod
    def is_valid(cls) -> bool:
        """Check if configuration is valid."""
        return len(cls.validate()) == 0

    @classmethod
    def get_summary(cls) -> dict:
        """Get configuration summary (safe for logging)."""
        return {
            "flask_env": cls.FLASK_ENV,
            "flask_debug": cls.FLASK_DEBUG,
            "insertion_mode": cls.INSERTION_MODE,
            "similarity_cache_size": cls.get_cache_size(),
            "spacy_model": cls.SPACY_MODEL,
            "textrazor_api_configured": cls.TEXTRAZOR_API_KEY is not None,
            "openai_api_configured": cls.OPENAI_API_KEY is not None,
            "log_level": cls.LOG_LEVEL,
        }
