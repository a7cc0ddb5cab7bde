"""Interactive command-line front end: search, pick a result, print the declaration."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import TextIO

from mvn_search import __version__
from mvn_search.errors import SelectionError
from mvn_search.models import Dependency, DependencyFormat
from mvn_search.repository.client import MavenCentralClient
from mvn_search.service import SearchService
from mvn_search.settings import Settings

logger = logging.getLogger(__name__)

NO_SEARCH_TERM = "No search term provided"
NO_RESULTS = "No results found"


@dataclass(frozen=True, slots=True)
class SearchSession:
    """Results of one search, handed from the search step to the selection step."""

    term: str
    results: tuple[Dependency, ...]
    choices: tuple[str, ...]

    def select(self, index: int) -> Dependency | None:
        """Return the result at 0-based *index*, or None when out of range."""
        if 0 <= index < len(self.results):
            return self.results[index]
        return None


def _parse_selection(raw: str) -> int:
    """Convert a 1-based answer typed by the user into a 0-based index."""
    try:
        return int(raw.strip()) - 1
    except ValueError:
        raise SelectionError(f"Invalid selection: {raw.strip()!r}") from None


def _format_arg(value: str) -> DependencyFormat:
    try:
        return DependencyFormat.parse(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="mvn-search",
        description="Search Maven Central for dependencies.",
    )
    parser.add_argument(
        "term",
        nargs="?",
        default="",
        help="Search term, e.g. 'junit' or 'g:org.slf4j'.",
    )
    parser.add_argument(
        "-f",
        "--format",
        type=_format_arg,
        default=DependencyFormat.MAVEN,
        metavar="FORMAT",
        help="Dependency format (maven, gradle, gradlekts, gradlegroovy, sbt). Default: maven.",
    )
    parser.add_argument(
        "-o",
        "--show-versions",
        action="store_true",
        help="List every known version after printing the selected dependency.",
    )
    parser.add_argument(
        "--non-interactive",
        action="store_true",
        help="Pick the first result instead of prompting.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level for diagnostics on stderr (default: MVN_SEARCH_LOG_LEVEL or WARNING).",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


async def start_search(service: SearchService, term: str) -> SearchSession:
    results = tuple(await service.search(term))
    return SearchSession(
        term=term,
        results=results,
        choices=tuple(service.format_search_results(results)),
    )


async def run_search(
    service: SearchService,
    term: str,
    *,
    fmt: DependencyFormat = DependencyFormat.MAVEN,
    show_versions: bool = False,
    interactive: bool = True,
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    """Drive one search from term to printed declaration.

    Nothing here raises for bad input or an unreachable index; the worst
    outcome is that no declaration is printed.
    """
    term = term.strip()
    if not term:
        print(NO_SEARCH_TERM, file=stdout)
        return

    session = await start_search(service, term)
    if not session.results:
        print(NO_RESULTS, file=stdout)
        return

    for choice in session.choices:
        print(choice, file=stdout)

    index = 0
    if interactive:
        print(f"Select dependency (1-{len(session.choices)}): ", end="", file=stdout, flush=True)
        try:
            index = _parse_selection(stdin.readline())
        except SelectionError as exc:
            logger.info("Rejected selection: %s", exc)
            print(str(exc), file=stdout)
            return

    selected = session.select(index)
    if selected is None:
        logger.info("Selection %d is out of range 1-%d", index + 1, len(session.results))
        return

    print(service.format_dependency(selected, fmt), file=stdout)

    if show_versions:
        versions = await service.get_versions(selected.group_id, selected.artifact_id)
        print("Available versions:", file=stdout)
        for version in versions:
            print(f"- {version}", file=stdout)


async def _main(
    args: argparse.Namespace,
    settings: Settings,
    service: SearchService | None,
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    if service is None:
        async with settings.http_client() as http:
            client = MavenCentralClient(http, base_url=settings.base_url)
            await _main(args, settings, SearchService(client), stdin, stdout)
        return

    await run_search(
        service,
        args.term,
        fmt=args.format,
        show_versions=args.show_versions,
        interactive=not args.non_interactive,
        stdin=stdin,
        stdout=stdout,
    )


def run_cli(
    argv: list[str] | None = None,
    *,
    service: SearchService | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """CLI runner for `mvn-search`. Returns the process exit code."""
    args = _parse_args(argv)
    settings = Settings.from_env()
    _configure_logging(args.log_level or settings.log_level)

    asyncio.run(_main(args, settings, service, stdin or sys.stdin, stdout or sys.stdout))
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
