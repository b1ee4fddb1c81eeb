# gwregistry/web/__init__.py
"""
HTTP front end for the registry (FastAPI).
"""

from .app import create_app, status_for

__all__ = ["create_app", "status_for"]
