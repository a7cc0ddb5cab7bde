"""Shared test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from mvn_search.models import Dependency


@dataclass
class FakeRepository:
    """In-memory MavenRepositoryPort that records every call."""

    results: dict[str, list[Dependency]] = field(default_factory=dict)
    versions: dict[tuple[str, str], list[str]] = field(default_factory=dict)
    search_calls: list[str] = field(default_factory=list)
    version_calls: list[tuple[str, str]] = field(default_factory=list)

    async def search(self, term: str) -> list[Dependency]:
        self.search_calls.append(term)
        return list(self.results.get(term, []))

    async def get_versions(self, group_id: str, artifact_id: str) -> list[str]:
        self.version_calls.append((group_id, artifact_id))
        return list(self.versions.get((group_id, artifact_id), []))


SPRING_PARENT = Dependency(
    group_id="org.springframework.boot",
    artifact_id="spring-boot-starter-parent",
    packaging="pom",
    versions=("3.4.1",),
)
JUNIT = Dependency(group_id="junit", artifact_id="junit", packaging="jar", versions=("4.13.2",))
JUPITER = Dependency(
    group_id="org.junit.jupiter",
    artifact_id="junit-jupiter-api",
    packaging="jar",
    versions=("5.11.4",),
)
SLF4J_API = Dependency(
    group_id="org.slf4j", artifact_id="slf4j-api", packaging="jar", versions=("2.0.16",)
)
SLF4J_SIMPLE = Dependency(
    group_id="org.slf4j", artifact_id="slf4j-simple", packaging="jar", versions=("2.0.16",)
)


@pytest.fixture
def fake_repository() -> FakeRepository:
    return FakeRepository(
        results={
            "spring-boot-starter-parent": [SPRING_PARENT],
            "junit": [JUNIT, JUPITER],
            "g:org.slf4j": [SLF4J_API, SLF4J_SIMPLE],
        },
        versions={("junit", "junit"): ["4.13.2", "4.13.1", "4.12"]},
    )
