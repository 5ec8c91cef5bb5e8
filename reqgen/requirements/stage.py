from __future__ import annotations
import asyncio
from pathlib import Path
from typing import Sequence

import aiohttp

from reqgen.config.settings import DEFAULT_BASE_URL, DEFAULT_DISTRO, DEFAULT_SECTIONS
from reqgen.requirements.application.workflows.stage_requirements import (
    StageRequirementsWorkflow,
    StagingWorkflowConfig,
)
from reqgen.requirements.domain.models import StagingSummary
from reqgen.requirements.infrastructure.sitemap_client import SitemapClient
from reqgen.requirements.infrastructure.yaml_sink import RequirementYamlSink


async def run_staging_async(
    input_dir: str | Path,
    output_dir: str | Path,
    *,
    distro: str = DEFAULT_DISTRO,
    base_url: str = DEFAULT_BASE_URL,
    sections: Sequence[str] = DEFAULT_SECTIONS,
) -> StagingSummary:
    """Stage generated documentation requirements, then copy ``input_dir``.

    Raises the first :class:`~reqgen.requirements.errors.RequirementsError`
    met; files written before it are left in place.
    """
    sink = RequirementYamlSink(output_dir)
    workflow = StageRequirementsWorkflow(
        sitemap_client=SitemapClient(),
        sink=sink,
        config=StagingWorkflowConfig(distro=distro, base_url=base_url, sections=tuple(sections)),
    )
    async with aiohttp.ClientSession() as session:
        return await workflow.run(session, input_dir)


def run_staging(
    input_dir: str | Path,
    output_dir: str | Path,
    *,
    distro: str = DEFAULT_DISTRO,
    base_url: str = DEFAULT_BASE_URL,
    sections: Sequence[str] = DEFAULT_SECTIONS,
) -> StagingSummary:
    return asyncio.run(
        run_staging_async(
            input_dir,
            output_dir,
            distro=distro,
            base_url=base_url,
            sections=sections,
        )
    )
