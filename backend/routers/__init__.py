"""Routers module - FastAPI route handlers"""

from . import diff, config

__all__ = ["diff", "config"]
