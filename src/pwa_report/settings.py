"""Environment-driven configuration for the report service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "rendering" / "templates"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(slots=True, frozen=True)
class Settings:
    log_level: str
    template_dir: Path


def load_settings() -> Settings:
    """Read settings from ``BADGING_*`` environment variables."""

    template_dir = os.environ.get("BADGING_TEMPLATE_DIR")
    return Settings(
        log_level=os.environ.get("BADGING_LOG_LEVEL", "WARNING").upper(),
        template_dir=Path(template_dir) if template_dir else DEFAULT_TEMPLATE_DIR,
    )


def configure_logging(level: str | int = "WARNING") -> None:
    """Attach a stream handler to the package logger once."""

    package_logger = logging.getLogger("src.pwa_report")
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        package_logger.addHandler(handler)
    package_logger.setLevel(level)


__all__ = ["DEFAULT_TEMPLATE_DIR", "Settings", "configure_logging", "load_settings"]
