"""HTTP client for the Maven Central search index (Solr).

Base URL: https://search.maven.org
Endpoints: /solrsearch/select, /solrsearch/suggest, /solrsearch/browse
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

import httpx

from mvn_search.errors import RepositoryError
from mvn_search.models import Dependency
from mvn_search.settings import DEFAULT_BASE_URL

logger = logging.getLogger(__name__)

_SEARCH_ROWS = 100
_VERSION_ROWS = 98


def _text(doc: dict, key: str) -> str:
    """String value of a document field; missing or null becomes ``""``."""
    value = doc.get(key)
    return "" if value is None else str(value)


@dataclass
class MavenCentralClient:
    """Async client for the Maven Central search index.

    Every public method returns an empty list on failure and logs the
    cause. The injected ``httpx.AsyncClient`` decides the transport.
    """

    http: httpx.AsyncClient
    base_url: str = DEFAULT_BASE_URL

    # ── Public API ────────────────────────────────────────────

    async def search(self, term: str) -> list[Dependency]:
        """Search the index for artifacts matching *term*.

        Args:
            term: Free text (``"junit"``) or a field query (``"g:org.slf4j"``).

        Returns:
            One ``Dependency`` per document, each carrying the latest
            version reported by the index.
        """
        params = {"q": term, "rows": _SEARCH_ROWS, "wt": "json"}
        try:
            data = await self._fetch_json("select", params)
            return [self._parse_doc(doc) for doc in self._docs(data)]
        except RepositoryError as exc:
            logger.warning("Search for %r failed: %s", term, exc)
            return []

    async def get_versions(self, group_id: str, artifact_id: str) -> list[str]:
        """List versions of ``group_id:artifact_id`` from the ``gav`` core."""
        params = {
            "q": f"g:{group_id} AND a:{artifact_id}",
            "core": "gav",
            "rows": _VERSION_ROWS,
            "wt": "json",
        }
        try:
            data = await self._fetch_json("select", params)
            return [_text(doc, "v") for doc in self._docs(data)]
        except RepositoryError as exc:
            logger.warning(
                "Version lookup for %r:%r failed: %s", group_id, artifact_id, exc
            )
            return []

    async def get_suggestions(self, partial_term: str) -> list[str]:
        """Return search-term completions for *partial_term*."""
        try:
            data = await self._fetch_json("suggest", {"q": partial_term, "wt": "json"})
        except RepositoryError as exc:
            logger.warning("Suggestions for %r failed: %s", partial_term, exc)
            return []

        suggestions = data.get("suggestions")
        if not isinstance(suggestions, list):
            return []
        return [item if isinstance(item, str) else json.dumps(item) for item in suggestions]

    async def browse(
        self,
        group_id: str | None = None,
        artifact_id: str | None = None,
    ) -> list[str]:
        """Browse the index by group and/or artifact.

        Returns ``group:artifact[:version]`` coordinates for each document.
        """
        params: dict[str, str] = {"wt": "json"}
        if group_id is not None:
            params["g"] = group_id
        if artifact_id is not None:
            params["a"] = artifact_id

        try:
            data = await self._fetch_json("browse", params)
            docs = self._docs(data)
        except RepositoryError as exc:
            logger.warning(
                "Browsing group=%r artifact=%r failed: %s", group_id, artifact_id, exc
            )
            return []

        coordinates = []
        for doc in docs:
            parts = [str(doc.get(key, "")) for key in ("g", "a", "v") if doc.get(key)]
            if parts:
                coordinates.append(":".join(parts))
        return coordinates

    # ── Transport and parsing helpers ─────────────────────────

    async def _fetch_json(self, endpoint: str, params: dict[str, object]) -> dict:
        """GET ``/solrsearch/<endpoint>`` and decode the JSON object body.

        Raises:
            RepositoryError: On a request httpx cannot build (URL too long,
                unencodable characters), network errors, non-2xx status, or a body
                that is not a JSON object.
        """
        url = f"{self.base_url}/solrsearch/{endpoint}"
        try:
            response = await self.http.get(url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RepositoryError(f"HTTP {exc.response.status_code} from {url}") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise RepositoryError(f"Request to {url} failed: {exc!r}") from exc
        except UnicodeError as exc:
            raise RepositoryError(f"Query for {url} is not encodable: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise RepositoryError(f"Invalid JSON from {url}: {exc}") from exc

        if not isinstance(data, dict):
            raise RepositoryError(f"Unexpected JSON payload from {url}: {type(data).__name__}")
        return data

    @staticmethod
    def _docs(data: dict) -> list[dict]:
        """Extract ``response.docs``, tolerating a missing or odd shape."""
        body = data.get("response")
        if not isinstance(body, dict):
            return []
        docs = body.get("docs")
        if not isinstance(docs, list):
            return []
        return [doc for doc in docs if isinstance(doc, dict)]

    @staticmethod
    def _parse_doc(doc: dict) -> Dependency:
        """Build a ``Dependency`` from a ``select`` document.

        The version is ``latestVersion`` when set, else ``v``.
        """
        return Dependency(
            group_id=_text(doc, "g"),
            artifact_id=_text(doc, "a"),
            packaging=_text(doc, "p"),
            versions=(_text(doc, "latestVersion") or _text(doc, "v"),),
        )
