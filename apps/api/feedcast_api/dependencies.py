"""
FastAPI dependencies.

Provides dependency injection for the feed providers and renderers stored on
the application state by ``create_app``.
"""

from fastapi import Request

from feedcast_jsonfeed import JsonFeedRenderer
from feedcast_rss import RssFeedRenderer

from .providers import JsonFeedProvider, RssFeedProvider


def get_rss_provider(request: Request) -> RssFeedProvider:
    """
    Get the configured RSS provider.

    Raises:
        RuntimeError: If the application has no RSS provider.
    """
    provider = request.app.state.rss_provider
    if provider is None:
        raise RuntimeError("RSS provider not configured")
    return provider


def get_rss_renderer(request: Request) -> RssFeedRenderer:
    return request.app.state.rss_renderer


def get_jsonfeed_provider(request: Request) -> JsonFeedProvider:
    """
    Get the configured JSON Feed provider.

    Raises:
        RuntimeError: If the application has no JSON Feed provider.
    """
    provider = request.app.state.jsonfeed_provider
    if provider is None:
        raise RuntimeError("JSON Feed provider not configured")
    return provider


def get_jsonfeed_renderer(request: Request) -> JsonFeedRenderer:
    return request.app.state.jsonfeed_renderer
