"""Command line entry point.

Usage:
    python -m reqgen stage INPUT_DIR OUTPUT_DIR [--distro rolling] [--section Install ...]
    python -m reqgen render STAGED_FILE [--markup md] [--generation 1]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from reqgen.config.logger_config import logger
from reqgen.config.settings import DEFAULT_BASE_URL, DEFAULT_DISTRO, DEFAULT_SECTIONS, DISTRO_LABEL
from reqgen.requirements.errors import RequirementsError
from reqgen.requirements.stage import run_staging
from reqgen.requirements.validation import validate_requirements
from reqgen.test_cases.github_issue import build_github_issue
from reqgen.test_cases.models import TestCase
from reqgen.test_cases.plugins import MARKUP_PLUGINS, render_test_case

app = typer.Typer(
    name="reqgen",
    help="Stage documentation and hand-written requirement documents.",
    no_args_is_help=True,
)


@app.command("stage")
def stage(
    input_dir: Path = typer.Argument(..., exists=True, file_okay=False, help="Directory of requirement YAML files."),
    output_dir: Path = typer.Argument(..., file_okay=False, help="Directory that receives the staged files."),
    distro: str = typer.Option(DEFAULT_DISTRO, help="Distribution whose docs are scraped."),
    base_url: str = typer.Option(DEFAULT_BASE_URL, help="Documentation root URL."),
    section: Optional[List[str]] = typer.Option(
        None,
        "--section",
        help="Documentation section to scrape; repeat for several. Defaults to the configured sections.",
    ),
) -> None:
    """Generate documentation requirements and copy hand-written ones into OUTPUT_DIR."""
    sections = list(section) if section else list(DEFAULT_SECTIONS)
    try:
        summary = run_staging(
            input_dir,
            output_dir,
            distro=distro,
            base_url=base_url,
            sections=sections,
        )
    except RequirementsError as exc:
        logger.error("ERROR: {}", exc)
        raise typer.Exit(code=1)

    typer.echo(f"[stage] generated {summary.generated_path} ({summary.page_total} pages)")
    for path in summary.copied_paths:
        typer.echo(f"[stage] copied {path}")
    typer.echo(f"[stage] {summary.requirement_total} requirements staged")


@app.command("render")
def render(
    staged_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Staged requirement YAML file."),
    markup: str = typer.Option("md", help=f"One of: {', '.join(MARKUP_PLUGINS)}, or 'issue'."),
    generation: int = typer.Option(1, help="Generation counter for the test cases."),
) -> None:
    """Render every requirement of STAGED_FILE as a test case."""
    try:
        payload = yaml.safe_load(staged_file.read_text(encoding="utf-8"))
        validate_requirements(payload, source=staged_file)
    except (yaml.YAMLError, UnicodeDecodeError, RequirementsError) as exc:
        logger.error("ERROR: {}", exc)
        raise typer.Exit(code=1)

    if markup != "issue" and markup not in MARKUP_PLUGINS:
        logger.error("ERROR: unsupported markup {}", markup)
        raise typer.Exit(code=1)

    for requirement in payload["requirements"]:
        test_case = TestCase.from_requirement(requirement, generation=generation)
        if markup == "issue":
            typer.echo(json.dumps(build_github_issue(test_case, DISTRO_LABEL).to_dict(), ensure_ascii=False))
        else:
            typer.echo(render_test_case(test_case, markup))
