"""
JSON Feed renderer.

Writes a ``JsonFeed`` as a compact UTF-8 JSON object. Keys follow the order
JSON Feed 1.1 documents them, which is the models' field order; absent values
and empty lists are left out by the models' serializers.
"""

from io import BytesIO
from typing import IO

from feedcast_core import get_logger
from feedcast_core.config import settings
from feedcast_core.errors import FeedRenderError

from .models import JsonFeed

logger = get_logger(__name__)

MEDIA_TYPE = "application/json+feed"


class JsonFeedRenderer:
    """Render JSON feeds."""

    def __init__(self, strict: bool | None = None):
        self.strict = settings.render_strict if strict is None else strict

    def render(self, sink: IO[bytes], feed: JsonFeed) -> None:
        """
        Write ``feed`` to ``sink`` as UTF-8 JSON.

        Raises:
            FeedRenderError: Only in strict mode.
        """
        try:
            sink.write(feed.model_dump_json().encode("utf-8"))
        except (OSError, ValueError) as e:
            if self.strict:
                raise FeedRenderError(f"Failed to render JSON feed: {e}") from e
            logger.exception("Failed to render JSON feed", extra={"title": feed.title})

    def render_to_bytes(self, feed: JsonFeed) -> bytes:
        """Render into memory and return the document."""
        buffer = BytesIO()
        self.render(buffer, feed)
        return buffer.getvalue()
