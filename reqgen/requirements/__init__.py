"""Requirement acquisition and staging package."""

from reqgen.requirements.domain.models import StagingSummary
from reqgen.requirements.stage import run_staging, run_staging_async

__all__ = [
    "run_staging",
    "run_staging_async",
    "StagingSummary",
]
