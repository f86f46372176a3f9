"""
Flask application factory for SEO Assist.
"""
from flask import Flask
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .. import __version__
from ..config import Config
from ..logger import get_logger
from .routes import api_bp

logger = get_logger(__name__)


def create_app() -> Flask:
    """
    Create and configure Flask application.

    Returns:
        Configured Flask app instance
    """
    app = Flask(__name__)

    app.config['SECRET_KEY'] = Config.SECRET_KEY
    app.config['ENV'] = Config.FLASK_ENV

    # Enable CORS with configured origins
    cors_origins = Config.get_cors_origins()
    if cors_origins == ["*"]:
        CORS(app)
    else:
        CORS(app, origins=cors_origins)

    app.register_blueprint(api_bp)

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return {
            'status': 'healthy',
            'version': __version__,
            'keyword_service_configured': bool(Config.TEXTRAZOR_API_KEY),
            'generation_service_configured': bool(Config.OPENAI_API_KEY),
        }

    @app.errorhandler(Exception)
    def unhandled(error):
        if isinstance(error, HTTPException):
            return {'status': 'error', 'message': error.description}, error.code
        logger.error(f"Unhandled error: {error}", exc_info=True)
        return {
            'status': 'error',
            'message': 'Internal server error',
            'details': str(error)
        }, 500

    logger.info("Flask app created")
    logger.info(f"Configuration: {Config.get_summary()}")

    errors = Config.validate()
    if errors:
        logger.warning(f"Configuration warnings: {errors}")

    return app
