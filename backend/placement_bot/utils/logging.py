import logging
import sys

from placement_bot.config import get_settings

NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def setup_logging(level: str | None = None) -> None:
    """Configure application-wide logging.

    Falls back to LOG_LEVEL from settings when no level is given.
    """
    level = level or get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # httpx logs every outbound request at INFO
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
