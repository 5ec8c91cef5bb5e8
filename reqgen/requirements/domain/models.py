from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class Page:
    url: str
    name: str
    labels: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"url": self.url, "name": self.name, "labels": list(self.labels)}


@dataclass(frozen=True)
class Link:
    name: str
    url: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "url": self.url}


@dataclass(frozen=True)
class Check:
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class Requirement:
    name: str
    checks: tuple[Check, ...]
    labels: tuple[str, ...] = field(default_factory=tuple)
    description: str | None = None
    links: tuple[Link, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        # Key order mirrors the hand-written documents.
        payload: dict[str, Any] = {"name": self.name}
        if self.labels:
            payload["labels"] = list(self.labels)
        if self.description is not None:
            payload["description"] = self.description
        if self.links:
            payload["links"] = [link.to_dict() for link in self.links]
        payload["checks"] = [check.to_dict() for check in self.checks]
        return payload


@dataclass(frozen=True)
class RequirementDocument:
    requirements: tuple[Requirement, ...] = field(default_factory=tuple)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(requirement.name for requirement in self.requirements)

    def to_dict(self) -> dict[str, Any]:
        return {"requirements": [requirement.to_dict() for requirement in self.requirements]}


@dataclass(frozen=True)
class StagingSummary:
    generated_path: Path
    copied_paths: tuple[Path, ...]
    page_total: int
    requirement_total: int
