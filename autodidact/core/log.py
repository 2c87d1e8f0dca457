"""Process-wide logging setup."""
import logging
import sys

from autodidact.core.config import get_settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a stream handler on the root logger (idempotent)."""
    level = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    if any(getattr(h, "_autodidact", False) for h in root.handlers):
        root.setLevel(level)
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._autodidact = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(level)
