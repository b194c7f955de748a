"""Tests for the RSS and JSON Feed routes."""

import pytest
from httpx import ASGITransport, AsyncClient
from lxml import etree

from conftest import FakeJsonFeedProvider, FakeRssFeedProvider
from feedcast_api import create_app
from feedcast_core.config import FeedcastSettings


def _client(app) -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestRssRoutes:
    """RSS 2.0 endpoints."""

    @pytest.mark.asyncio
    async def test_get_feed(self, client: AsyncClient):
        response = await client.get("/feed")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/xml")
        root = etree.fromstring(response.content)
        assert root.findtext("channel/title") == "Liftoff News"
        assert len(root.findall("channel/item")) == 4

    @pytest.mark.asyncio
    async def test_get_feed_by_id(self, client: AsyncClient):
        response = await client.get("/feed/1")

        assert response.status_code == 200
        assert etree.fromstring(response.content).findtext("channel/title") == "Liftoff News"

    @pytest.mark.asyncio
    async def test_get_unknown_feed_by_id(self, client: AsyncClient):
        response = await client.get("/feed/2")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_provider_without_feed(self, test_settings: FeedcastSettings):
        app = create_app(FakeRssFeedProvider(None), app_settings=test_settings)

        async with _client(app) as ac:
            response = await ac.get("/feed")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_podcast_feed(self, hiking_treks_podcast, test_settings: FeedcastSettings):
        app = create_app(FakeRssFeedProvider(hiking_treks_podcast), app_settings=test_settings)

        async with _client(app) as ac:
            response = await ac.get("/feed")

        assert response.status_code == 200
        assert b'xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd"' in response.content

    @pytest.mark.asyncio
    async def test_custom_path(self, rss_provider: FakeRssFeedProvider):
        app = create_app(rss_provider, app_settings=FeedcastSettings(_env_file=None, rss_path="/rss"))

        async with _client(app) as ac:
            moved = await ac.get("/rss")
            default = await ac.get("/feed")

        assert moved.status_code == 200
        assert default.status_code == 404

    @pytest.mark.asyncio
    async def test_disabled(self, rss_provider: FakeRssFeedProvider):
        app = create_app(rss_provider, app_settings=FeedcastSettings(_env_file=None, rss_enabled=False))

        async with _client(app) as ac:
            response = await ac.get("/feed")

        assert response.status_code == 404


class TestJsonFeedRoutes:
    """JSON Feed endpoints."""

    @pytest.mark.asyncio
    async def test_get_json_feed(self, client: AsyncClient):
        response = await client.get("/feeds/json")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json+feed"
        data = response.json()
        assert data["title"] == "The Record"
        assert data["hubs"] == [{"url": "http://test.com", "type": "rssCloud"}]

    @pytest.mark.asyncio
    async def test_paging_passed_to_provider(
        self, client: AsyncClient, jsonfeed_provider: FakeJsonFeedProvider
    ):
        await client.get("/feeds/json", params={"maxNumberOfItems": 5, "pageNumber": 2})
        await client.get("/feeds/json")

        assert jsonfeed_provider.calls == [(5, 2), (None, None)]

    @pytest.mark.asyncio
    async def test_invalid_paging_rejected(self, client: AsyncClient):
        response = await client.get("/feeds/json", params={"maxNumberOfItems": "many"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_provider_without_feed(self, test_settings: FeedcastSettings):
        app = create_app(jsonfeed_provider=FakeJsonFeedProvider(None), app_settings=test_settings)

        async with _client(app) as ac:
            response = await ac.get("/feeds/json")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_custom_paths(self, jsonfeed_provider: FakeJsonFeedProvider):
        app_settings = FeedcastSettings(
            _env_file=None, jsonfeed_root_path="/podcasts", jsonfeed_path="/feed.json"
        )
        app = create_app(jsonfeed_provider=jsonfeed_provider, app_settings=app_settings)

        async with _client(app) as ac:
            response = await ac.get("/podcasts/feed.json")

        assert response.status_code == 200
