"""Downstream renderers for staged requirements turned into test cases."""

from reqgen.test_cases.github_issue import build_github_issue
from reqgen.test_cases.markup import render_html, render_markdown
from reqgen.test_cases.models import GithubIssue, TestCase
from reqgen.test_cases.plugins import MARKUP_PLUGINS, render_test_case

__all__ = [
    "build_github_issue",
    "GithubIssue",
    "MARKUP_PLUGINS",
    "render_html",
    "render_markdown",
    "render_test_case",
    "TestCase",
]
