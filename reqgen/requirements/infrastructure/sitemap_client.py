import asyncio
import xml.etree.ElementTree as ET

import aiohttp
from aiohttp import ClientError

from reqgen.config.logger_config import logger
from reqgen.requirements.domain.rules import build_sitemap_url
from reqgen.requirements.errors import SitemapUnavailable


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def parse_sitemap(body: bytes | str, sitemap_url: str) -> list[str]:
    """Return the ``<loc>`` of every ``<url>`` entry, in document order.

    Raw bytes are decoded by the XML parser itself, following the document's
    encoding declaration.
    """
    try:
        root = ET.fromstring(body)
    except (ET.ParseError, UnicodeDecodeError) as exc:
        raise SitemapUnavailable(sitemap_url, f"invalid XML ({exc})") from exc

    if _local_name(root.tag) != "urlset":
        raise SitemapUnavailable(sitemap_url, f"unexpected root element <{_local_name(root.tag)}>")

    urls: list[str] = []
    for url_node in root:
        if _local_name(url_node.tag) != "url":
            continue
        for child in url_node:
            if _local_name(child.tag) == "loc" and (child.text or "").strip():
                urls.append(child.text.strip())
    return urls


class SitemapClient:
    def __init__(self, timeout: aiohttp.ClientTimeout | None = None) -> None:
        self.timeout = timeout

    async def fetch_page_urls(
        self,
        session: aiohttp.ClientSession,
        distro: str,
        base_url: str,
    ) -> list[str]:
        sitemap_url = build_sitemap_url(base_url, distro)
        logger.info("Fetching distro sitemap: {}", sitemap_url)
        request_kwargs = {"timeout": self.timeout} if self.timeout is not None else {}
        try:
            async with session.get(sitemap_url, **request_kwargs) as resp:
                if resp.status != 200:
                    raise SitemapUnavailable(sitemap_url, f"HTTP {resp.status}")
                body = await resp.read()
        except (ClientError, asyncio.TimeoutError) as exc:
            raise SitemapUnavailable(sitemap_url, f"{type(exc).__name__}: {exc}") from exc

        urls = parse_sitemap(body, sitemap_url)
        logger.info("Sitemap listed {} pages", len(urls))
        return urls
