"""
RSS 2.0 renderer.

Streams an ``RssChannel`` to a binary sink as an RSS 2.0 document using
lxml's incremental ``xmlfile`` writer.

Failures while writing a single element are logged and rendering moves on to
the next element, so a bad value costs one element rather than the whole
feed. Pass ``strict=True`` (or set ``FEEDCAST_RENDER_STRICT``) to raise
``FeedRenderError`` on the first failure instead.
"""

from collections.abc import Sequence
from datetime import datetime
from io import BytesIO
from typing import IO, Any

from lxml import etree

from feedcast_core import get_logger
from feedcast_core.config import settings
from feedcast_core.dates import format_rfc822
from feedcast_core.errors import FeedRenderError

from .models import RssChannel, RssChannelImage, RssItem, RssItemEnclosure, RssTextInput

logger = get_logger(__name__)

CONTENT_NAMESPACE = "http://purl.org/rss/1.0/modules/content/"
RSS_VERSION = "2.0"

RSS = "rss"
CHANNEL = "channel"
ITEM = "item"
TITLE = "title"
LINK = "link"
DESCRIPTION = "description"
LANGUAGE = "language"
COPYRIGHT = "copyright"
MANAGING_EDITOR = "managingEditor"
WEB_MASTER = "webMaster"
PUB_DATE = "pubDate"
LAST_BUILD_DATE = "lastBuildDate"
CATEGORY = "category"
GENERATOR = "generator"
DOCS = "docs"
CLOUD = "cloud"
TTL = "ttl"
RATING = "rating"
IMAGE = "image"
URL = "url"
WIDTH = "width"
HEIGHT = "height"
SKIP_HOURS = "skipHours"
HOUR = "hour"
SKIP_DAYS = "skipDays"
DAY = "day"
TEXT_INPUT = "textInput"
NAME = "name"
AUTHOR = "author"
COMMENTS = "comments"
ENCLOSURE = "enclosure"
GUID = "guid"
SOURCE = "source"

# Raised for XML-incompatible text, missing nested values and writer misuse
WRITE_ERRORS = (ValueError, TypeError, AttributeError, etree.LxmlError)

XmlWriter = Any  # lxml's incremental writer has no public type


def qualified(namespace: str, local_name: str) -> str:
    """Clark notation tag, resolved to a prefix by the writer's nsmap."""
    return f"{{{namespace}}}{local_name}"


def cdata_element(tag: str, text: str) -> etree._Element:
    """
    Build ``<tag>`` holding ``text`` as CDATA.

    A CDATA section cannot contain ``]]>``, so the text is split after
    ``]]`` into adjacent sections that parse back to the same string.
    """
    if "]]>" not in text:
        element = etree.Element(tag)
        element.text = etree.CDATA(text)
        return element

    sections = "]]]]><![CDATA[>".join(text.split("]]>"))
    parser = etree.XMLParser(strip_cdata=False)
    return etree.fromstring(f"<{tag}><![CDATA[{sections}]]></{tag}>", parser)


class RssFeedRenderer:
    """Render RSS 2.0 channels."""

    def __init__(self, strict: bool | None = None):
        self.strict = settings.render_strict if strict is None else strict

    def render(self, sink: IO[bytes], channel: RssChannel) -> None:
        """
        Write ``channel`` to ``sink`` as a UTF-8 RSS 2.0 document.

        Args:
            sink: Binary file-like object.
            channel: Channel to render.

        Raises:
            FeedRenderError: Only in strict mode.
        """
        try:
            with etree.xmlfile(sink, encoding="UTF-8") as xf:
                xf.write_declaration()
                with xf.element(
                    RSS, {"version": RSS_VERSION}, nsmap=self.rss_namespaces(channel)
                ):
                    with xf.element(CHANNEL):
                        self.write_channel(xf, channel)
        except FeedRenderError:
            raise
        except (OSError, *WRITE_ERRORS) as e:
            self.write_failed(RSS, e)

    def render_to_bytes(self, channel: RssChannel) -> bytes:
        """Render into memory and return the document."""
        buffer = BytesIO()
        self.render(buffer, channel)
        return buffer.getvalue()

    def rss_namespaces(self, channel: RssChannel) -> dict[str, str]:
        """Namespace prefixes declared on the root ``rss`` element."""
        return {"content": CONTENT_NAMESPACE}

    def write_failed(self, element: str, error: BaseException) -> None:
        """Log (or, in strict mode, raise) a failure to write ``element``."""
        if self.strict:
            raise FeedRenderError(f"Failed to write <{element}>: {error}", element) from error
        logger.error(
            "Failed to write feed element",
            extra={"element": element, "error": str(error)},
            exc_info=error,
        )

    def write_element(self, xf: XmlWriter, tag: str, value: Any) -> None:
        """Write ``<tag>value</tag>``; datetimes are formatted as RFC 822."""
        if isinstance(value, datetime):
            text = format_rfc822(value)
        else:
            text = str(value)

        try:
            with xf.element(tag):
                xf.write(text)
        except WRITE_ERRORS as e:
            self.write_failed(tag, e)

    def write_optional(self, xf: XmlWriter, tag: str, value: Any) -> None:
        if value is not None:
            self.write_element(xf, tag, value)

    def should_wrap_with_cdata(self, description: str) -> bool:
        """Descriptions carrying markup are written as CDATA."""
        return "<" in description

    def write_description(self, xf: XmlWriter, description: str) -> None:
        if not self.should_wrap_with_cdata(description):
            self.write_element(xf, DESCRIPTION, description)
            return

        try:
            xf.write(cdata_element(DESCRIPTION, description))
        except WRITE_ERRORS as e:
            self.write_failed(DESCRIPTION, e)

    def write_category(self, xf: XmlWriter, path: Sequence[str], tag: str = CATEGORY) -> None:
        """
        Write a category path as nested elements.

        ``["Arts", "Design"]`` becomes
        ``<category text="Arts"><category text="Design"/></category>``.
        """
        if not path:
            return

        try:
            with xf.element(tag, {"text": path[0]}):
                if len(path) > 1:
                    self.write_category(xf, path[1:], tag)
        except WRITE_ERRORS as e:
            self.write_failed(tag, e)

    def write_image(self, xf: XmlWriter, image: RssChannelImage) -> None:
        try:
            with xf.element(IMAGE):
                self.write_element(xf, TITLE, image.title)
                self.write_element(xf, LINK, image.link)
                self.write_element(xf, URL, image.url)
                self.write_optional(xf, WIDTH, image.width)
                self.write_optional(xf, HEIGHT, image.height)
                self.write_optional(xf, DESCRIPTION, image.description)
        except WRITE_ERRORS as e:
            self.write_failed(IMAGE, e)

    def write_text_input(self, xf: XmlWriter, text_input: RssTextInput) -> None:
        try:
            with xf.element(TEXT_INPUT):
                self.write_element(xf, TITLE, text_input.title)
                self.write_element(xf, NAME, text_input.name)
                self.write_element(xf, LINK, text_input.link)
                self.write_element(xf, DESCRIPTION, text_input.description)
        except WRITE_ERRORS as e:
            self.write_failed(TEXT_INPUT, e)

    def write_list(self, xf: XmlWriter, tag: str, child_tag: str, values: Sequence[str]) -> None:
        try:
            with xf.element(tag):
                for value in values:
                    self.write_element(xf, child_tag, value)
        except WRITE_ERRORS as e:
            self.write_failed(tag, e)

    def write_enclosure(self, xf: XmlWriter, enclosure: RssItemEnclosure) -> None:
        try:
            with xf.element(
                ENCLOSURE,
                {"length": str(enclosure.length), "type": enclosure.type, "url": enclosure.url},
            ):
                pass
        except WRITE_ERRORS as e:
            self.write_failed(ENCLOSURE, e)

    def write_channel(self, xf: XmlWriter, channel: RssChannel) -> None:
        """Write the children of ``<channel>``."""
        self.write_element(xf, TITLE, channel.title)
        self.write_element(xf, LINK, channel.link)
        if channel.image is not None:
            self.write_image(xf, channel.image)
        self.write_description(xf, channel.description)
        if channel.language is not None:
            self.write_element(xf, LANGUAGE, channel.language.language_code)
        self.write_optional(xf, COPYRIGHT, channel.copyright)
        self.write_optional(xf, MANAGING_EDITOR, channel.managing_editor)
        self.write_optional(xf, WEB_MASTER, channel.web_master)
        self.write_optional(xf, PUB_DATE, channel.pub_date)
        self.write_optional(xf, LAST_BUILD_DATE, channel.last_build_date)
        for path in channel.category or []:
            self.write_category(xf, path)
        self.write_optional(xf, GENERATOR, channel.generator)
        self.write_optional(xf, DOCS, channel.docs)
        self.write_optional(xf, CLOUD, channel.cloud)
        self.write_optional(xf, TTL, channel.ttl)
        self.write_optional(xf, RATING, channel.rating)

        if channel.skip_hours:
            self.write_list(xf, SKIP_HOURS, HOUR, [str(int(hour)) for hour in channel.skip_hours])
        if channel.skip_days:
            self.write_list(xf, SKIP_DAYS, DAY, [day.value for day in channel.skip_days])
        if channel.text_input is not None:
            self.write_text_input(xf, channel.text_input)

        for item in channel.items or []:
            try:
                with xf.element(ITEM):
                    self.write_item(xf, item)
            except WRITE_ERRORS as e:
                self.write_failed(ITEM, e)

    def write_item(self, xf: XmlWriter, item: RssItem) -> None:
        """Write the children of one ``<item>``."""
        self.write_optional(xf, TITLE, item.title)
        self.write_optional(xf, LINK, item.link)
        if item.description is not None:
            self.write_description(xf, item.description)
        self.write_optional(xf, AUTHOR, item.author)
        for category in item.category or []:
            self.write_element(xf, CATEGORY, category)
        self.write_optional(xf, COMMENTS, item.comments)
        if item.enclosure is not None:
            self.write_enclosure(xf, item.enclosure)
        self.write_optional(xf, GUID, item.guid)
        self.write_optional(xf, PUB_DATE, item.pub_date)
        self.write_optional(xf, SOURCE, item.source)
