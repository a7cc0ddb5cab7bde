"""mvn-search: search Maven Central and print dependency declarations."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

_LOCAL_VERSION_FALLBACK = "0.0.0+local"


def _resolve_version() -> str:
    """Resolve package version from installed metadata with deterministic fallback."""
    try:
        return _distribution_version("mvn-search")
    except PackageNotFoundError:
        return _LOCAL_VERSION_FALLBACK


__version__ = _resolve_version()


def main() -> None:
    """Entry point for `mvn-search` CLI."""
    from mvn_search.cli import run_cli

    raise SystemExit(run_cli())


def serve() -> None:
    """Entry point for `mvn-search-mcp`, the MCP server on stdio."""
    from mvn_search.server import mcp

    mcp.run(transport="stdio")
