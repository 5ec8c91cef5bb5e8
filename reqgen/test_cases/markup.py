import html

from reqgen.test_cases.models import TestCase


def render_markdown(test_case: TestCase) -> str:
    sections: list[str] = []
    if test_case.description:
        sections.append(test_case.description)

    if test_case.links:
        lines = ["## Links", ""]
        lines.extend(f"- [{link.name}]({link.url})" for link in test_case.links)
        sections.append("\n".join(lines))

    lines = ["## Checks", ""]
    lines.extend(f"- [ ] {check.name}" for check in test_case.checks)
    sections.append("\n".join(lines))

    if test_case.dimensions:
        lines = ["## Dimensions", "", "| Dimension | Value |", "| --- | --- |"]
        lines.extend(f"| {key} | {value} |" for key, value in test_case.dimensions.items())
        sections.append("\n".join(lines))

    return "\n\n".join(sections) + "\n"


def render_html(test_case: TestCase) -> str:
    parts = [f"<h1>{html.escape(test_case.name)}</h1>"]
    if test_case.description:
        parts.append(f"<p>{html.escape(test_case.description)}</p>")
    if test_case.links:
        items = "".join(
            f'<li><a href="{html.escape(link.url, quote=True)}">{html.escape(link.name)}</a></li>'
            for link in test_case.links
        )
        parts.append(f"<h2>Links</h2><ul>{items}</ul>")
    items = "".join(
        f'<li><input type="checkbox" disabled> {html.escape(check.name)}</li>' for check in test_case.checks
    )
    parts.append(f"<h2>Checks</h2><ul>{items}</ul>")
    if test_case.dimensions:
        rows = "".join(
            f"<tr><td>{html.escape(key)}</td><td>{html.escape(value)}</td></tr>"
            for key, value in test_case.dimensions.items()
        )
        parts.append(f"<h2>Dimensions</h2><table>{rows}</table>")
    return "\n".join(parts) + "\n"
