import re
from typing import Iterable, Sequence
from urllib.parse import urlsplit

from pathvalidate import sanitize_filename as lib_sanitize

from reqgen.requirements.domain.models import Check, Link, Page, Requirement, RequirementDocument
from reqgen.requirements.errors import UnparseableUrl

SITEMAP_RESOURCE = "sitemap.xml"
LOCALE_SEGMENT = "en"

DOCUMENTATION_CHECKS: tuple[Check, ...] = (
    Check("I was able to follow the documentation."),
    Check("The documentation seemed clear to me."),
    Check("The documentation didn't have any obvious errors."),
)


def join_url(base: str, *parts: str) -> str:
    url = base.rstrip("/")
    for part in parts:
        part = part.strip("/")
        if part:
            url = f"{url}/{part}"
    return url


def build_distro_url(base_url: str, distro: str) -> str:
    return join_url(base_url, distro)


def build_sitemap_url(base_url: str, distro: str) -> str:
    return join_url(build_distro_url(base_url, distro), SITEMAP_RESOURCE)


def strip_locale(url: str, distro: str) -> str:
    """Drop the language marker glued to or following the distro segment.

    Sphinx sitemaps for a distro can list ``.../rollingen/Page.html`` or
    ``.../rolling/en/Page.html``; both normalize to ``.../rolling/Page.html``.
    """
    url = url.replace(f"{distro}{LOCALE_SEGMENT}", distro)
    return url.replace(f"/{distro}/{LOCALE_SEGMENT}/", f"/{distro}/")


def parse_page_url(url: str, distro: str, distro_url: str) -> Page:
    normalized = strip_locale(url, distro)
    match = re.fullmatch(re.escape(distro_url.rstrip("/")) + r"/(.+)\.html", normalized)
    if not match:
        raise UnparseableUrl(url)

    *sections, leaf = match.group(1).split("/")
    name = leaf.replace("-", " ")
    if not name.strip():
        raise UnparseableUrl(url)
    return Page(
        url=normalized,
        name=name,
        labels=tuple(section.lower() for section in sections),
    )


def filter_pages(pages: Iterable[Page], sections: Iterable[str]) -> list[Page]:
    wanted = {section.lower() for section in sections}
    return [page for page in pages if any(label in wanted for label in page.labels)]


def classify_pages(
    urls: Sequence[str],
    distro: str,
    base_url: str,
    sections: Iterable[str],
) -> list[Page]:
    distro_url = build_distro_url(base_url, distro)
    pages = [parse_page_url(url, distro, distro_url) for url in urls]
    return filter_pages(pages, sections)


def synthesize_requirement(page: Page) -> Requirement:
    return Requirement(
        name=page.name,
        labels=page.labels,
        description=f"Check the documentation for the '{page.name}' page",
        links=(Link(name=f"{page.name} page", url=page.url),),
        checks=DOCUMENTATION_CHECKS,
    )


def build_document(pages: Iterable[Page]) -> RequirementDocument:
    return RequirementDocument(requirements=tuple(synthesize_requirement(page) for page in pages))


def url_host(url: str) -> str:
    netloc = urlsplit(url).netloc
    return netloc.rsplit("@", 1)[-1]


def make_generated_filename(base_url: str) -> str:
    safe_host = lib_sanitize(url_host(base_url), replacement_text="_")
    if not safe_host:
        raise UnparseableUrl(base_url)
    return f"{safe_host}.yaml"
