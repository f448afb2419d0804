"""Command line interface for hashtag lookups.

Usage:
    python -m socials_hashtags.cli --help
    socials-hashtags info python
    socials-hashtags search pyth --pages 3
"""

from .app import app, main

__all__ = ["app", "main"]
