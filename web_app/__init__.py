"""FastAPI web layer for the short link registry."""

from .app_factory import create_app

__all__ = ["create_app"]
