import json
import unittest
from pathlib import Path
from unittest.mock import patch

from typer.testing import CliRunner

from reqgen.cli import app
from reqgen.requirements.domain.models import StagingSummary
from reqgen.requirements.errors import DuplicateRequirementName
from tests.utils.tempdir import managed_temp_dir, write_yaml

runner = CliRunner()

STAGED_YAML = """\
# This test case has been validated

requirements:
  - name: Talker listener
    labels: [demo]
    checks:
      - name: The listener prints messages.
"""


class StageCommandTests(unittest.TestCase):
    def test_stage_success(self):
        summary = StagingSummary(
            generated_path=Path("out/docs.ros.org.yaml"),
            copied_paths=(Path("out/manual.yaml"),),
            page_total=4,
            requirement_total=5,
        )
        with managed_temp_dir("cli_stage") as tmp:
            with patch("reqgen.cli.run_staging", return_value=summary) as run_mock:
                result = runner.invoke(
                    app,
                    ["stage", str(tmp), str(tmp / "out"), "--section", "Install", "--section", "Tutorials"],
                )

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("5 requirements staged", result.output)
        self.assertEqual(run_mock.call_args.kwargs["sections"], ["Install", "Tutorials"])
        self.assertEqual(run_mock.call_args.kwargs["distro"], "rolling")

    def test_stage_defaults_sections(self):
        summary = StagingSummary(Path("x.yaml"), (), 0, 0)
        with managed_temp_dir("cli_defaults") as tmp:
            with patch("reqgen.cli.run_staging", return_value=summary) as run_mock:
                result = runner.invoke(app, ["stage", str(tmp), str(tmp / "out")])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertEqual(run_mock.call_args.kwargs["sections"], ["Install", "Tutorials", "How-to-guide"])

    def test_stage_fatal_error_exits_non_zero(self):
        with managed_temp_dir("cli_fatal") as tmp:
            with patch(
                "reqgen.cli.run_staging",
                side_effect=DuplicateRequirementName("Ubuntu", tmp / "a.yaml"),
            ):
                result = runner.invoke(app, ["stage", str(tmp), str(tmp / "out")])

        self.assertEqual(result.exit_code, 1)


class RenderCommandTests(unittest.TestCase):
    def test_render_markdown(self):
        with managed_temp_dir("cli_render") as tmp:
            staged = write_yaml(tmp / "manual.yaml", STAGED_YAML)
            result = runner.invoke(app, ["render", str(staged)])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("- [ ] The listener prints messages.", result.output)

    def test_render_issue_json(self):
        with managed_temp_dir("cli_issue") as tmp:
            staged = write_yaml(tmp / "manual.yaml", STAGED_YAML)
            with patch("reqgen.cli.DISTRO_LABEL", "rolling"):
                result = runner.invoke(app, ["render", str(staged), "--markup", "issue", "--generation", "2"])

        self.assertEqual(result.exit_code, 0, result.output)
        issue = json.loads(result.output.strip().splitlines()[0])
        self.assertEqual(issue["title"], "Talker listener")
        self.assertEqual(issue["labels"], ["demo", "generation-2", "rolling"])

    def test_render_rejects_invalid_document(self):
        with managed_temp_dir("cli_render_invalid") as tmp:
            staged = write_yaml(tmp / "bad.yaml", "requirements:\n  - name: No checks\n")
            result = runner.invoke(app, ["render", str(staged)])

        self.assertEqual(result.exit_code, 1)

    def test_render_rejects_non_utf8_file(self):
        with managed_temp_dir("cli_render_bytes") as tmp:
            staged = tmp / "latin1.yaml"
            staged.write_bytes(b"requirements:\n  - name: Caf\xe9\n    checks: []\n")
            result = runner.invoke(app, ["render", str(staged)])

        self.assertEqual(result.exit_code, 1)
        self.assertNotIsInstance(result.exception, UnicodeDecodeError)

    def test_render_rejects_unknown_markup(self):
        with managed_temp_dir("cli_render_markup") as tmp:
            staged = write_yaml(tmp / "manual.yaml", STAGED_YAML)
            result = runner.invoke(app, ["render", str(staged), "--markup", "pdf"])

        self.assertEqual(result.exit_code, 1)
