from typing import Callable

from reqgen.config.logger_config import logger
from reqgen.test_cases.markup import render_html, render_markdown
from reqgen.test_cases.models import TestCase

MarkupPlugin = Callable[[TestCase], str]

MARKUP_PLUGINS: dict[str, MarkupPlugin] = {
    "md": render_markdown,
    "html": render_html,
}


def render_test_case(test_case: TestCase, markup: str = "md") -> str:
    try:
        plugin = MARKUP_PLUGINS[markup]
    except KeyError:
        raise ValueError(f"Unsupported markup: {markup}") from None
    logger.debug("Rendering test case {} as {}", test_case.name, markup)
    return plugin(test_case)
