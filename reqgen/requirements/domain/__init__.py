"""Domain models and deterministic rules for requirement staging."""

from reqgen.requirements.domain.models import (
    Check,
    Link,
    Page,
    Requirement,
    RequirementDocument,
    StagingSummary,
)
from reqgen.requirements.domain.rules import (
    DOCUMENTATION_CHECKS,
    build_document,
    build_sitemap_url,
    classify_pages,
    filter_pages,
    make_generated_filename,
    parse_page_url,
    synthesize_requirement,
)

__all__ = [
    "build_document",
    "build_sitemap_url",
    "Check",
    "classify_pages",
    "DOCUMENTATION_CHECKS",
    "filter_pages",
    "Link",
    "make_generated_filename",
    "Page",
    "parse_page_url",
    "Requirement",
    "RequirementDocument",
    "StagingSummary",
    "synthesize_requirement",
]
