"""Domain models for mvn-search. All frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# ─── Enumerations ─────────────────────────────────────────────


class DependencyFormat(StrEnum):
    """Build-tool syntax a dependency declaration is rendered in."""

    MAVEN = "maven"
    GRADLE = "gradle"
    GRADLEKTS = "gradlekts"
    GRADLEGROOVY = "gradlegroovy"
    SBT = "sbt"

    @classmethod
    def parse(cls, value: str) -> DependencyFormat:
        """Case-insensitive lookup, e.g. ``"Gradle"`` -> ``GRADLE``."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            msg = f"Unknown dependency format '{value}'. Choose one of: {choices}."
            raise ValueError(msg) from None


# ─── Repository Models ────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Dependency:
    """A published artifact as returned by the Maven Central search index.

    ``versions[0]`` is the version used when formatting. Search results
    always carry exactly the latest version reported by the index.
    """

    group_id: str
    artifact_id: str
    packaging: str = ""
    versions: tuple[str, ...] = ()

    @property
    def version(self) -> str:
        # Raises IndexError when versions is empty.
        return self.versions[0]

    @property
    def coordinates(self) -> str:
        return f"{self.group_id}:{self.artifact_id}:{self.version}"

    def to_dict(self) -> dict[str, object]:
        return {
            "groupId": self.group_id,
            "artifactId": self.artifact_id,
            "packaging": self.packaging,
            "versions": list(self.versions),
        }
