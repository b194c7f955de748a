"""
JSON Feed package.

Provides JSON Feed 1.1 models, builders and the JSON renderer.
"""

from .builders import (
    JsonFeedAttachmentBuilder,
    JsonFeedAuthorBuilder,
    JsonFeedBuilder,
    JsonFeedItemBuilder,
    JsonHubBuilder,
)
from .models import (
    VERSION_JSON_FEED_1,
    VERSION_JSON_FEED_1_1,
    JsonFeed,
    JsonFeedAttachment,
    JsonFeedAuthor,
    JsonFeedItem,
    JsonHub,
)
from .renderer import MEDIA_TYPE, JsonFeedRenderer

__all__ = [
    "JsonFeed",
    "JsonFeedAttachment",
    "JsonFeedAuthor",
    "JsonFeedItem",
    "JsonHub",
    "VERSION_JSON_FEED_1",
    "VERSION_JSON_FEED_1_1",
    "JsonFeedBuilder",
    "JsonFeedItemBuilder",
    "JsonFeedAuthorBuilder",
    "JsonFeedAttachmentBuilder",
    "JsonHubBuilder",
    "JsonFeedRenderer",
    "MEDIA_TYPE",
]
