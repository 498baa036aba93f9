"""Routers module - FastAPI route handlers"""

from . import config, patch

__all__ = ["patch", "config"]
