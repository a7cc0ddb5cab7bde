"""Port: Maven Central search index client."""

from __future__ import annotations

from typing import Protocol

from mvn_search.models import Dependency


class MavenRepositoryPort(Protocol):
    """Port for querying the Maven Central artifact index.

    Implementations never raise for expected failures (network, HTTP
    status, malformed JSON). An empty list is the only not-found signal.
    """

    async def search(self, term: str) -> list[Dependency]:
        """Search artifacts matching a free-text or field-scoped term."""
        ...

    async def get_versions(self, group_id: str, artifact_id: str) -> list[str]:
        """List every indexed version of one artifact, in index order."""
        ...
