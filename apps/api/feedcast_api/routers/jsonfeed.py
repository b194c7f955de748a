"""
JSON Feed router.

Serves JSON Feed documents rendered from the configured ``JsonFeedProvider``.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from feedcast_jsonfeed import MEDIA_TYPE, JsonFeedRenderer

from ..dependencies import get_jsonfeed_provider, get_jsonfeed_renderer
from ..providers import JsonFeedProvider

router = APIRouter()


@router.get("")
async def get_json_feed(
    provider: Annotated[JsonFeedProvider, Depends(get_jsonfeed_provider)],
    renderer: Annotated[JsonFeedRenderer, Depends(get_jsonfeed_renderer)],
    max_number_of_items: Annotated[int | None, Query(alias="maxNumberOfItems")] = None,
    page_number: Annotated[int | None, Query(alias="pageNumber")] = None,
) -> Response:
    """
    Get a page of the JSON feed.

    Args:
        provider: JSON Feed provider.
        renderer: JSON Feed renderer.
        max_number_of_items: Page size, passed to the provider as is.
        page_number: Page number, passed to the provider as is.

    Returns:
        Rendered JSON Feed document.

    Raises:
        HTTPException: If the provider has no feed.
    """
    feed = await provider.feed(max_number_of_items, page_number)
    if feed is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Feed not found")
    return Response(content=renderer.render_to_bytes(feed), media_type=MEDIA_TYPE)
