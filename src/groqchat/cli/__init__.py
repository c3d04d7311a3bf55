"""Command-line interface for groqchat."""

from .app import app, main

__all__ = ["app", "main"]
