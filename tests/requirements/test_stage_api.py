import unittest
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

from reqgen.requirements.domain.models import StagingSummary
from reqgen.requirements.stage import run_staging, run_staging_async


def _summary() -> StagingSummary:
    return StagingSummary(
        generated_path=Path("out/docs.ros.org.yaml"),
        copied_paths=(),
        page_total=0,
        requirement_total=0,
    )


class StageApiTests(unittest.TestCase):
    def test_run_staging_sync_wrapper(self):
        expected = _summary()
        with patch("reqgen.requirements.stage.run_staging_async", new=AsyncMock(return_value=expected)) as run_mock:
            result = run_staging("in", "out", distro="humble", sections=["Install"])

        self.assertEqual(result, expected)
        run_mock.assert_awaited_once_with(
            "in",
            "out",
            distro="humble",
            base_url="https://docs.ros.org/en/",
            sections=["Install"],
        )


class StageApiAsyncTests(unittest.IsolatedAsyncioTestCase):
    async def test_run_staging_async_wiring(self):
        expected = _summary()
        workflow = MagicMock()
        workflow.run = AsyncMock(return_value=expected)
        session = MagicMock()
        session_cm = MagicMock()
        session_cm.__aenter__ = AsyncMock(return_value=session)
        session_cm.__aexit__ = AsyncMock(return_value=False)
        sink = MagicMock()

        with (
            patch("reqgen.requirements.stage.RequirementYamlSink", return_value=sink) as sink_cls,
            patch("reqgen.requirements.stage.SitemapClient", return_value=MagicMock()),
            patch("reqgen.requirements.stage.StageRequirementsWorkflow", return_value=workflow) as workflow_cls,
            patch("reqgen.requirements.stage.aiohttp.ClientSession", return_value=session_cm),
        ):
            result = await run_staging_async("in", "out", base_url="https://docs.example.org/en/")

        self.assertEqual(result, expected)
        sink_cls.assert_called_once_with("out")
        config = workflow_cls.call_args.kwargs["config"]
        self.assertEqual(config.base_url, "https://docs.example.org/en/")
        self.assertEqual(config.distro, "rolling")
        self.assertEqual(config.sections, ("Install", "Tutorials", "How-to-guide"))
        workflow.run.assert_awaited_once_with(session, "in")
        session_cm.__aexit__.assert_awaited_once()
