"""FastAPI application wiring for the report badging service."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from src.pwa_report.api.routes.categories import router as categories_router
from src.pwa_report.settings import configure_logging, load_settings

configure_logging(load_settings().log_level)

app = FastAPI(title="PWA report badging")


@app.get("/health")
def health() -> JSONResponse:
    """Simple liveness endpoint used by deployment probes."""

    return JSONResponse({"status": "ok"})


app.include_router(categories_router)


__all__ = ["app", "health"]
