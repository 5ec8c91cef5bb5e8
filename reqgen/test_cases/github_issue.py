from reqgen.config.settings import DISTRO_LABEL
from reqgen.test_cases.markup import render_markdown
from reqgen.test_cases.models import GithubIssue, TestCase


def build_github_issue(test_case: TestCase, distro_label: str = DISTRO_LABEL) -> GithubIssue:
    labels: list[str] = list(test_case.labels)
    labels.extend(test_case.dimensions.values())
    labels.append(f"generation-{test_case.generation}")
    if distro_label != "":
        labels.append(distro_label)
    return GithubIssue(
        title=test_case.name,
        body=render_markdown(test_case),
        labels=tuple(labels),
    )
