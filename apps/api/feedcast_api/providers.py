"""
Feed providers.

Applications plug their content into the API by implementing these
interfaces. Returning ``None`` means there is no feed to serve, which the
routes turn into a 404.
"""

from abc import ABC, abstractmethod

from feedcast_jsonfeed import JsonFeed
from feedcast_rss import RssChannel


class RssFeedProvider(ABC):
    """Source of RSS channels."""

    @abstractmethod
    async def fetch(self) -> RssChannel | None:
        """Return the default channel."""

    @abstractmethod
    async def fetch_by_id(self, feed_id: str) -> RssChannel | None:
        """Return the channel identified by ``feed_id``."""


class JsonFeedProvider(ABC):
    """Source of JSON feeds."""

    @abstractmethod
    async def feed(
        self, max_number_of_items: int | None = None, page_number: int | None = None
    ) -> JsonFeed | None:
        """
        Return a page of the feed.

        Args:
            max_number_of_items: Page size requested by the client, if any.
            page_number: Page requested by the client, if any.

        Returns:
            The feed, or None when there is nothing to serve.
        """
