"""
Feedcast API.

FastAPI application serving RSS and JSON feeds from pluggable providers.
"""

from .main import create_app
from .providers import JsonFeedProvider, RssFeedProvider

__all__ = ["create_app", "JsonFeedProvider", "RssFeedProvider"]
