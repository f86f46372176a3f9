"""
Flask web API for SEO Assist.
"""

from .app import create_app

__all__ = ['create_app']
