"""search and getArtifactVersions tools -- query Maven Central from an MCP host."""

from __future__ import annotations

import logging

from mcp.server.fastmcp import Context

from mvn_search.tools._helpers import get_context

logger = logging.getLogger(__name__)


async def search(search_term: str, ctx: Context) -> list[dict[str, object]]:
    """Search in Maven Central for a dependency.

    Accepts free text ("jackson databind") or Solr field queries such as
    "g:org.slf4j" (by group) or "a:junit" (by artifact).

    Args:
        search_term: The search term.

    Returns:
        Up to 100 artifacts, each with groupId, artifactId, packaging, and
        versions (a single-element list holding the latest version).
        An empty list means nothing matched or the index was unreachable.
    """
    app = get_context(ctx)
    results = await app.repository.search(search_term)
    logger.debug("search(%r) returned %d artifacts", search_term, len(results))
    return [dependency.to_dict() for dependency in results]


async def get_artifact_versions(group_id: str, artifact_id: str, ctx: Context) -> list[str]:
    """Get the versions of a Maven artifact.

    Args:
        group_id: The group id, e.g. "org.junit.jupiter".
        artifact_id: The artifact id, e.g. "junit-jupiter-api".

    Returns:
        Known versions in the order reported by Maven Central.
    """
    app = get_context(ctx)
    return await app.repository.get_versions(group_id, artifact_id)
