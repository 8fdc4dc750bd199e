"""
LearnHub API package.

Provides the FastAPI application for the LearnHub learning platform.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
