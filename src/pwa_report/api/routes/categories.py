"""Endpoints computing badge view-models and markup for report categories."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse

from src.pwa_report.badges import ConfigurationError, compute_category_view, view_to_payload
from src.pwa_report.rendering import PwaCategoryRenderer
from src.pwa_report.reporting.prepare import prepare_report_result
from src.pwa_report.reporting.schemas import Category, ReportResult


router = APIRouter(prefix="/api/categories", tags=["categories"])
renderer = PwaCategoryRenderer()


def _resolve(category_id: str, report: dict[str, Any]) -> tuple[ReportResult, Category]:
    try:
        prepared = prepare_report_result(report)
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    category = prepared.category(category_id)
    if category is None:
        raise HTTPException(status_code=404, detail="Category not found")
    return prepared, category


@router.post("/{category_id}/view")
def category_view(category_id: str, report: dict[str, Any] = Body(...)) -> JSONResponse:
    """Return the badge view-model for ``category_id``."""

    prepared, category = _resolve(category_id, report)
    try:
        view = compute_category_view(category, prepared.categoryGroups)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return JSONResponse(view_to_payload(view))


@router.post("/{category_id}/html", response_class=HTMLResponse)
def category_html(category_id: str, report: dict[str, Any] = Body(...)) -> HTMLResponse:
    """Return the rendered category element for ``category_id``."""

    prepared, category = _resolve(category_id, report)
    try:
        markup = renderer.render(category, prepared.categoryGroups)
    except ConfigurationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return HTMLResponse(markup)


__all__ = ["router"]
