"""Fatal failure kinds of a staging run.

Every component raises one of these and lets it propagate. Only the CLI
catches :class:`RequirementsError`, reports it and terminates the process.
"""

from pathlib import Path

__all__ = [
    "RequirementsError",
    "SitemapUnavailable",
    "UnparseableUrl",
    "SchemaValidationFailed",
    "DuplicateRequirementName",
    "DestinationExists",
]


class RequirementsError(RuntimeError):
    """Base class for errors that abort a staging run."""


class SitemapUnavailable(RequirementsError):
    def __init__(self, sitemap_url: str, reason: str) -> None:
        super().__init__(f"Could not fetch distro sitemap {sitemap_url}: {reason}")
        self.sitemap_url = sitemap_url
        self.reason = reason


class UnparseableUrl(RequirementsError):
    def __init__(self, url: str) -> None:
        super().__init__(f"Could not parse url {url}")
        self.url = url


class SchemaValidationFailed(RequirementsError):
    def __init__(self, detail: str, source: str | Path | None = None) -> None:
        origin = f" ({source})" if source is not None else ""
        super().__init__(f"Couldn't validate requirements{origin}: {detail}")
        self.detail = detail
        self.source = source


class DuplicateRequirementName(RequirementsError):
    def __init__(self, name: str, source: str | Path) -> None:
        super().__init__(f"{name} is duplicated requirement name: {source}")
        self.name = name
        self.source = source


class DestinationExists(RequirementsError):
    def __init__(self, path: str | Path) -> None:
        super().__init__(f"file already exists: {path}")
        self.path = Path(path)
