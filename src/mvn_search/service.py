"""Search orchestration and dependency formatting."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mvn_search.models import Dependency, DependencyFormat
from mvn_search.repository.base import MavenRepositoryPort

_GRADLE_KOTLIN_TEMPLATE = 'implementation("{group}:{artifact}:{version}")'

_TEMPLATES: dict[DependencyFormat, str] = {
    DependencyFormat.MAVEN: (
        "<dependency>\n"
        "    <groupId>{group}</groupId>\n"
        "    <artifactId>{artifact}</artifactId>\n"
        "    <version>{version}</version>\n"
        "</dependency>"
    ),
    DependencyFormat.GRADLE: _GRADLE_KOTLIN_TEMPLATE,
    DependencyFormat.GRADLEKTS: _GRADLE_KOTLIN_TEMPLATE,
    DependencyFormat.GRADLEGROOVY: "implementation '{group}:{artifact}:{version}'",
    DependencyFormat.SBT: 'libraryDependencies += "{group}" % "{artifact}" % "{version}"',
}


def format_dependency(dependency: Dependency, fmt: DependencyFormat) -> str:
    """Render *dependency* as a declaration for the build tool *fmt*.

    Uses ``dependency.versions[0]``; raises IndexError if there is none.
    """
    return _TEMPLATES[fmt].format(
        group=dependency.group_id,
        artifact=dependency.artifact_id,
        version=dependency.version,
    )


def format_search_results(dependencies: Sequence[Dependency]) -> list[str]:
    """Number results from 1 as ``"<n>) group:artifact:version"``."""
    return [f"{n}) {dep.coordinates}" for n, dep in enumerate(dependencies, start=1)]


@dataclass
class SearchService:
    """Stateless front door used by the CLI: delegate lookups, format output."""

    repository: MavenRepositoryPort

    async def search(self, term: str) -> list[Dependency]:
        return await self.repository.search(term)

    async def get_versions(self, group_id: str, artifact_id: str) -> list[str]:
        return await self.repository.get_versions(group_id, artifact_id)

    def format_dependency(self, dependency: Dependency, fmt: DependencyFormat) -> str:
        return format_dependency(dependency, fmt)

    def format_search_results(self, dependencies: Sequence[Dependency]) -> list[str]:
        return format_search_results(dependencies)
