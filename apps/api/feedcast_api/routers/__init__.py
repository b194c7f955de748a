"""
API router modules.

This package contains the feed route handlers, one module per format.
"""

from . import jsonfeed, rss

__all__ = ["rss", "jsonfeed"]
