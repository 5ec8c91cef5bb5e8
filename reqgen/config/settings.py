# Run defaults, overridable through the environment or a .env file

from dotenv import load_dotenv
import os

load_dotenv()


def _split_sections(raw: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(",") if part.strip())


DEFAULT_DISTRO = os.getenv("REQGEN_DISTRO", "rolling")
DEFAULT_BASE_URL = os.getenv("REQGEN_BASE_URL", "https://docs.ros.org/en/")
DEFAULT_SECTIONS = _split_sections(os.getenv("REQGEN_SECTIONS", "Install,Tutorials,How-to-guide"))

# Appended to every GitHub issue built from a test case; empty disables it.
DISTRO_LABEL = os.getenv("REQGEN_DISTRO_LABEL", "")

LOG_DIR = os.getenv("REQGEN_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("REQGEN_LOG_LEVEL", "INFO")
