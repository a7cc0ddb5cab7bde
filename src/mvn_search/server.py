"""MCP server that searches Maven Central for artifacts and their versions."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from mvn_search.repository.base import MavenRepositoryPort
from mvn_search.repository.client import MavenCentralClient
from mvn_search.settings import Settings
from mvn_search.tools.search import get_artifact_versions, search


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    http_client: httpx.AsyncClient
    repository: MavenRepositoryPort


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Composition root: open the shared HTTP client and build adapters."""
    settings = Settings.from_env()
    async with settings.http_client() as http_client:
        yield AppContext(
            http_client=http_client,
            repository=MavenCentralClient(http_client, base_url=settings.base_url),
        )


mcp = FastMCP(
    "mvn-search",
    instructions=(
        "mvn-search looks up Java/JVM artifacts on Maven Central.\n\n"
        "- **search**: find artifacts by free text or a field query "
        "('g:org.slf4j' for a group, 'a:junit' for an artifact). Each result "
        "has groupId, artifactId, packaging and the latest version.\n"
        "- **getArtifactVersions**: list every published version of one "
        "groupId/artifactId pair.\n\n"
        "An empty list means nothing matched or Maven Central could not be "
        "reached; try a broader term before concluding an artifact does not exist. "
        "Build the dependency declaration yourself from groupId, artifactId "
        "and version in the user's build tool syntax."
    ),
    lifespan=app_lifespan,
)

# ─── Read-only tools ──────────────────────────────────────────
mcp.tool(name="search", annotations=ToolAnnotations(readOnlyHint=True))(search)
mcp.tool(name="getArtifactVersions", annotations=ToolAnnotations(readOnlyHint=True))(
    get_artifact_versions
)
