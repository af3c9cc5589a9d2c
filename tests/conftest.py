from __future__ import annotations

import json
from pathlib import Path

import pytest

from src.pwa_report.rendering import PwaCategoryRenderer
from src.pwa_report.reporting.prepare import prepare_report_result
from src.pwa_report.reporting.schemas import Category, Group, ReportResult

FIXTURES = Path(__file__).resolve().parent / "fixtures"


@pytest.fixture(scope="session")
def raw_report() -> dict:
    return json.loads((FIXTURES / "sample_report.json").read_text(encoding="utf-8"))


@pytest.fixture(scope="session")
def report(raw_report: dict) -> ReportResult:
    return prepare_report_result(raw_report)


@pytest.fixture()
def category(report: ReportResult) -> Category:
    """Deep copy of the PWA category so tests can mutate scores freely."""

    pwa = report.category("pwa")
    assert pwa is not None
    return pwa.model_copy(deep=True)


@pytest.fixture()
def groups(report: ReportResult) -> dict[str, Group]:
    return report.categoryGroups


@pytest.fixture(scope="session")
def renderer() -> PwaCategoryRenderer:
    return PwaCategoryRenderer()
