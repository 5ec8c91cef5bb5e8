from pathlib import Path
from typing import Any, Iterable, Sequence

import yaml

from reqgen.config.logger_config import logger
from reqgen.requirements.domain.models import RequirementDocument
from reqgen.requirements.domain.rules import make_generated_filename
from reqgen.requirements.errors import (
    DestinationExists,
    DuplicateRequirementName,
    SchemaValidationFailed,
)
from reqgen.requirements.validation import validate_requirements

VALIDATED_ASSERTION = "# This test case has been validated"


def dump_document(payload: dict[str, Any]) -> str:
    return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)


def generated_header(base_url: str, distro: str, sections: Sequence[str]) -> str:
    lines = [f"# This test case was generated by scraping {base_url} on {distro} for the following sections:"]
    lines.extend(f"# - {section}" for section in sections)
    lines.extend(["#", VALIDATED_ASSERTION])
    return "\n".join(lines)


def copied_header(source_path: Path) -> str:
    return "\n".join(
        [
            f"# The original file was located here: {source_path.resolve()}",
            "#",
            VALIDATED_ASSERTION,
        ]
    )


class RequirementYamlSink:
    """Stages requirement documents into one output directory.

    A sink is scoped to one run: it owns the set of requirement names staged so
    far, refuses to reuse a name, and never writes over an existing file.
    """

    def __init__(self, output_dir: str | Path) -> None:
        self.output_dir = Path(output_dir)
        self.requirement_names: set[str] = set()
        self.written_paths: list[Path] = []

    def write_generated(
        self,
        document: RequirementDocument,
        *,
        base_url: str,
        distro: str,
        sections: Sequence[str],
    ) -> Path:
        payload = document.to_dict()
        file_path = self.output_dir / make_generated_filename(base_url)
        validate_requirements(payload, source=file_path)
        self._register_names(document.names, source=file_path)

        text = f"{generated_header(base_url, distro, sections)}\n\n{dump_document(payload)}"
        self._write(file_path, text)
        logger.info(
            "Staged generated requirements: path={}, requirements={}",
            file_path,
            len(document.requirements),
        )
        return file_path

    def copy_document(self, source_path: str | Path) -> Path:
        source_path = Path(source_path)
        payload = self._load(source_path)
        validate_requirements(payload, source=source_path)
        self._register_names(
            (requirement["name"] for requirement in payload["requirements"]),
            source=source_path,
        )

        file_path = self.output_dir / source_path.name
        text = f"{copied_header(source_path)}\n\n{dump_document(payload)}"
        self._write(file_path, text)
        logger.info("Staged requirements file: source={}, path={}", source_path, file_path)
        return file_path

    def copy_directory(self, input_dir: str | Path) -> list[Path]:
        input_path = Path(input_dir)
        sources = sorted(path for path in input_path.iterdir() if path.is_file())
        logger.info("Copying {} requirement files from {}", len(sources), input_path)
        return [self.copy_document(source) for source in sources]

    def _register_names(self, names: Iterable[str], source: Path) -> None:
        incoming: set[str] = set()
        for name in names:
            if name in self.requirement_names or name in incoming:
                raise DuplicateRequirementName(name, source)
            incoming.add(name)
        self.requirement_names.update(incoming)

    @staticmethod
    def _load(source_path: Path) -> Any:
        try:
            with source_path.open("r", encoding="utf-8") as fp:
                return yaml.safe_load(fp)
        except (yaml.YAMLError, UnicodeDecodeError) as exc:
            raise SchemaValidationFailed(f"not a YAML document ({exc})", source=source_path) from exc

    def _write(self, file_path: Path, text: str) -> None:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        # "x" mode keeps the existence check and the create atomic.
        try:
            with file_path.open("x", encoding="utf-8") as fp:
                fp.write(text)
        except FileExistsError as exc:
            raise DestinationExists(file_path) from exc
        self.written_paths.append(file_path)
