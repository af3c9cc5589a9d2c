"""FastAPI application entrypoint for the report badging service."""

from __future__ import annotations

from src.pwa_report.api.main import app, health

__all__ = ["app", "health"]
