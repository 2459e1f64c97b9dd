"""HTTP API for the advisor."""

from .routes import router

__all__ = ["router"]
