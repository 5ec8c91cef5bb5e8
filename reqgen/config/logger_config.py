import sys
from pathlib import Path

from loguru import logger

from reqgen.config.settings import LOG_DIR, LOG_LEVEL

log_dir = Path(LOG_DIR)
log_file = log_dir / "reqgen_{time}.log"

logger.remove()
logger.add(
    sys.stderr,
    level=LOG_LEVEL,
    format="<level>{level: <8}</level> | {message}",
)
logger.add(
    log_file,
    rotation="256 MB",
    retention="10 days",
    compression="zip",
    encoding="utf-8",
    level="DEBUG",
    delay=True,  # no file until the first record
)

if __name__ == "__main__":
    logger.info("info record")
    logger.debug("debug record")
    logger.warning("warning record")
    logger.error("error record")
