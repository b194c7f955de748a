"""
RSS router.

Serves RSS 2.0 documents rendered from the configured ``RssFeedProvider``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status

from feedcast_core import get_logger
from feedcast_rss import RssChannel, RssFeedRenderer

from ..dependencies import get_rss_provider, get_rss_renderer
from ..providers import RssFeedProvider

logger = get_logger(__name__)

MEDIA_TYPE = "application/xml"

router = APIRouter()


def _render(channel: RssChannel | None, renderer: RssFeedRenderer) -> Response:
    if channel is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feed not found")
    return Response(content=renderer.render_to_bytes(channel), media_type=MEDIA_TYPE)


@router.get("")
async def get_feed(
    provider: Annotated[RssFeedProvider, Depends(get_rss_provider)],
    renderer: Annotated[RssFeedRenderer, Depends(get_rss_renderer)],
) -> Response:
    """
    Get the default RSS feed.

    Args:
        provider: RSS feed provider.
        renderer: RSS renderer.

    Returns:
        Rendered RSS document.

    Raises:
        HTTPException: If the provider has no feed.
    """
    return _render(await provider.fetch(), renderer)


@router.get("/{feed_id}")
async def get_feed_by_id(
    feed_id: str,
    provider: Annotated[RssFeedProvider, Depends(get_rss_provider)],
    renderer: Annotated[RssFeedRenderer, Depends(get_rss_renderer)],
) -> Response:
    """
    Get an RSS feed by identifier.

    Args:
        feed_id: Feed identifier, passed to the provider as is.
        provider: RSS feed provider.
        renderer: RSS renderer.

    Returns:
        Rendered RSS document.

    Raises:
        HTTPException: If the provider has no feed with this identifier.
    """
    channel = await provider.fetch_by_id(feed_id)
    if channel is None:
        logger.info("RSS feed not found", extra={"feed_id": feed_id})
    return _render(channel, renderer)
