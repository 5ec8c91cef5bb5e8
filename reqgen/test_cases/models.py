from dataclasses import dataclass, field
from typing import Any, Mapping

from reqgen.requirements.domain.models import Check, Link


@dataclass(frozen=True)
class TestCase:
    """A staged requirement instantiated for one combination of dimensions."""

    __test__ = False  # not a pytest test class

    name: str
    checks: tuple[Check, ...]
    generation: int
    dimensions: dict[str, str] = field(default_factory=dict)
    labels: tuple[str, ...] = field(default_factory=tuple)
    description: str | None = None
    links: tuple[Link, ...] = field(default_factory=tuple)

    @classmethod
    def from_requirement(
        cls,
        requirement: Mapping[str, Any],
        *,
        generation: int,
        dimensions: Mapping[str, str] | None = None,
    ) -> "TestCase":
        return cls(
            name=requirement["name"],
            checks=tuple(Check(name=check["name"]) for check in requirement["checks"]),
            generation=generation,
            dimensions=dict(dimensions or {}),
            labels=tuple(requirement.get("labels") or ()),
            description=requirement.get("description"),
            links=tuple(Link(name=link["name"], url=link["url"]) for link in requirement.get("links") or ()),
        )


@dataclass(frozen=True)
class GithubIssue:
    title: str
    body: str
    labels: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "body": self.body, "labels": list(self.labels)}
