from dataclasses import dataclass, field
from pathlib import Path

import aiohttp

from reqgen.config.logger_config import logger
from reqgen.config.settings import DEFAULT_BASE_URL, DEFAULT_DISTRO, DEFAULT_SECTIONS
from reqgen.requirements.domain.models import StagingSummary
from reqgen.requirements.domain.rules import build_document, classify_pages
from reqgen.requirements.infrastructure.sitemap_client import SitemapClient
from reqgen.requirements.infrastructure.yaml_sink import RequirementYamlSink


@dataclass(frozen=True)
class StagingWorkflowConfig:
    distro: str = DEFAULT_DISTRO
    base_url: str = DEFAULT_BASE_URL
    sections: tuple[str, ...] = field(default_factory=lambda: tuple(DEFAULT_SECTIONS))


class StageRequirementsWorkflow:
    def __init__(
        self,
        sitemap_client: SitemapClient,
        sink: RequirementYamlSink,
        config: StagingWorkflowConfig | None = None,
    ) -> None:
        self.sitemap_client = sitemap_client
        self.sink = sink
        self.config = config or StagingWorkflowConfig()

    async def run(self, session: aiohttp.ClientSession, input_dir: str | Path) -> StagingSummary:
        config = self.config
        urls = await self.sitemap_client.fetch_page_urls(session, config.distro, config.base_url)

        # Everything below is synchronous filesystem work, in a fixed order.
        pages = classify_pages(urls, config.distro, config.base_url, config.sections)
        logger.info(
            "Classified {} of {} sitemap pages into sections {}",
            len(pages),
            len(urls),
            list(config.sections),
        )
        if not pages:
            logger.warning("No documentation pages matched; staging an empty requirements document.")

        document = build_document(pages)
        generated_path = self.sink.write_generated(
            document,
            base_url=config.base_url,
            distro=config.distro,
            sections=config.sections,
        )
        copied_paths = self.sink.copy_directory(input_dir)

        return StagingSummary(
            generated_path=generated_path,
            copied_paths=tuple(copied_paths),
            page_total=len(pages),
            requirement_total=len(self.sink.requirement_names),
        )
