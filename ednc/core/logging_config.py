# ednc/core/logging_config.py
import logging
import sys

from ednc.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=(level or settings.LOG_LEVEL).upper(),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    # uvicorn already logs each access line, our middleware does it with timing
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
