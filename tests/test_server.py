"""Tests for server.py: composition root, lifespan and tool registration."""

from __future__ import annotations

from unittest.mock import MagicMock

import httpx

from mvn_search.repository.client import MavenCentralClient
from mvn_search.server import app_lifespan, mcp


class TestAppLifespan:
    """Tests for the app_lifespan context manager."""

    async def test_creates_http_client_with_timeout(self):
        """Should create httpx.AsyncClient with 30s read / 10s connect timeout."""
        async with app_lifespan(MagicMock()) as ctx:
            client = ctx.http_client
            assert isinstance(client, httpx.AsyncClient)
            assert client.timeout.read == 30.0
            assert client.timeout.connect == 10.0

    async def test_creates_maven_central_client(self, monkeypatch):
        monkeypatch.delenv("MVN_SEARCH_BASE_URL", raising=False)
        async with app_lifespan(MagicMock()) as ctx:
            assert isinstance(ctx.repository, MavenCentralClient)
            assert ctx.repository.http is ctx.http_client
            assert ctx.repository.base_url == "https://search.maven.org"

    async def test_base_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("MVN_SEARCH_BASE_URL", "https://mirror.example/")
        async with app_lifespan(MagicMock()) as ctx:
            assert ctx.repository.base_url == "https://mirror.example"

    async def test_client_closed_after_lifespan(self):
        """Should close httpx.AsyncClient when lifespan exits."""
        async with app_lifespan(MagicMock()) as ctx:
            client = ctx.http_client
            assert not client.is_closed

        assert client.is_closed


class TestToolRegistration:
    async def test_exposes_search_and_get_artifact_versions(self):
        tools = {tool.name: tool for tool in await mcp.list_tools()}

        assert set(tools) == {"search", "getArtifactVersions"}
        assert tools["search"].annotations.readOnlyHint is True
        assert tools["getArtifactVersions"].annotations.readOnlyHint is True

    async def test_tool_arguments(self):
        tools = {tool.name: tool for tool in await mcp.list_tools()}

        assert set(tools["search"].inputSchema["properties"]) == {"search_term"}
        assert set(tools["getArtifactVersions"].inputSchema["properties"]) == {
            "group_id",
            "artifact_id",
        }
