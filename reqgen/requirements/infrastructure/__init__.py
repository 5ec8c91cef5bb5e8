"""Infrastructure adapters for requirement staging."""

from reqgen.requirements.infrastructure.sitemap_client import SitemapClient
from reqgen.requirements.infrastructure.yaml_sink import RequirementYamlSink

__all__ = ["RequirementYamlSink", "SitemapClient"]
