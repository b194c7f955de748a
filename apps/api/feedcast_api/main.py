"""
Feedcast API - FastAPI application entry point.

This module builds the FastAPI application, wiring the configured feed
providers and renderers into the RSS and JSON Feed routers.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from feedcast_core import __version__, get_logger, init_logging
from feedcast_core.config import FeedcastSettings, settings
from feedcast_jsonfeed import JsonFeedRenderer
from feedcast_rss import ItunesPodcastRenderer, RssFeedRenderer

from .providers import JsonFeedProvider, RssFeedProvider
from .routers import jsonfeed, rss

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifecycle manager.

    Args:
        app: The FastAPI application instance.

    Yields:
        None during application runtime.
    """
    app_settings: FeedcastSettings = app.state.settings
    init_logging(app_settings.log_level, app_settings.log_json)
    logger.info("Starting Feedcast API", extra={"version": __version__})

    yield

    logger.info("Shutting down Feedcast API")


def create_app(
    rss_provider: RssFeedProvider | None = None,
    jsonfeed_provider: JsonFeedProvider | None = None,
    *,
    rss_renderer: RssFeedRenderer | None = None,
    jsonfeed_renderer: JsonFeedRenderer | None = None,
    app_settings: FeedcastSettings | None = None,
) -> FastAPI:
    """
    Build a FastAPI application serving the given providers.

    A format's routes are registered only when its provider is given and it
    is enabled in the settings.

    Args:
        rss_provider: Source of RSS channels.
        jsonfeed_provider: Source of JSON feeds.
        rss_renderer: Renderer for RSS channels, iTunes-aware by default.
        jsonfeed_renderer: Renderer for JSON feeds.
        app_settings: Settings to use instead of the environment-loaded ones.

    Returns:
        Configured FastAPI application.
    """
    app_settings = app_settings or settings

    app = FastAPI(
        title="Feedcast API",
        description="RSS 2.0, iTunes podcast and JSON Feed publishing",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = app_settings
    app.state.rss_provider = rss_provider
    app.state.rss_renderer = rss_renderer or ItunesPodcastRenderer(strict=app_settings.render_strict)
    app.state.jsonfeed_provider = jsonfeed_provider
    app.state.jsonfeed_renderer = jsonfeed_renderer or JsonFeedRenderer(
        strict=app_settings.render_strict
    )

    if rss_provider is not None and app_settings.rss_enabled:
        app.include_router(rss.router, prefix=app_settings.rss_path, tags=["RSS"])
    if jsonfeed_provider is not None and app_settings.jsonfeed_enabled:
        app.include_router(
            jsonfeed.router,
            prefix=f"{app_settings.jsonfeed_root_path}{app_settings.jsonfeed_path}",
            tags=["JSON Feed"],
        )

    @app.get("/health")
    async def health_check() -> dict[str, str]:
        """
        Health check endpoint.

        Returns:
            Dictionary containing service status and version.
        """
        return {"status": "healthy", "version": __version__}

    return app


app = create_app()
