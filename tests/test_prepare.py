from __future__ import annotations

import copy

import pytest
from pydantic import ValidationError

from src.pwa_report.reporting.prepare import build_group_table, prepare_report_result
from src.pwa_report.reporting.schemas import ScoreDisplayMode


def test_prepare_joins_audit_results_onto_refs(raw_report: dict) -> None:
    report = prepare_report_result(raw_report)
    pwa = report.category("pwa")
    assert pwa is not None
    assert pwa.title == "Progressive Web App"
    assert len(pwa.auditRefs) == 13

    first = pwa.auditRefs[0]
    assert first.id == "load-fast-enough-for-pwa"
    assert first.group == "pwa-fast-reliable"
    assert first.result.score == 1
    assert first.result.scoreDisplayMode is ScoreDisplayMode.BINARY

    manual = [ref for ref in pwa.auditRefs if ref.result.scoreDisplayMode is ScoreDisplayMode.MANUAL]
    assert [ref.id for ref in manual] == [
        "pwa-cross-browser",
        "pwa-page-transitions",
        "pwa-each-page-has-url",
    ]
    assert all(ref.group is None for ref in manual)


def test_prepare_builds_group_table_with_ids(raw_report: dict) -> None:
    report = prepare_report_result(raw_report)
    assert report.categoryGroups["pwa-installable"].id == "pwa-installable"
    assert report.categoryGroups["pwa-installable"].title == "Installable"
    assert report.category("missing") is None


def test_prepare_does_not_mutate_input(raw_report: dict) -> None:
    snapshot = copy.deepcopy(raw_report)
    prepare_report_result(raw_report)
    assert raw_report == snapshot


def test_prepare_rejects_unknown_audit(raw_report: dict) -> None:
    broken = copy.deepcopy(raw_report)
    broken["categories"]["pwa"]["auditRefs"].append({"id": "does-not-exist"})
    with pytest.raises(ValueError, match="unknown audit 'does-not-exist'"):
        prepare_report_result(broken)


def test_prepare_requires_categories() -> None:
    with pytest.raises(ValueError, match="categories"):
        prepare_report_result({"audits": {}})


def test_build_group_table_rejects_non_mapping_entries() -> None:
    with pytest.raises(ValueError, match="Group 'broken'"):
        build_group_table({"broken": "nope"})


def test_prepare_requires_category_score(raw_report: dict) -> None:
    broken = copy.deepcopy(raw_report)
    del broken["categories"]["pwa"]["score"]
    with pytest.raises(ValidationError, match="score"):
        prepare_report_result(broken)


def test_prepare_keeps_null_score_as_error_state(raw_report: dict) -> None:
    report = copy.deepcopy(raw_report)
    report["categories"]["pwa"]["score"] = None
    pwa = prepare_report_result(report).category("pwa")
    assert pwa is not None
    assert pwa.score is None


def test_prepare_rejects_non_mapping_category(raw_report: dict) -> None:
    broken = copy.deepcopy(raw_report)
    broken["categories"]["seo"] = ["not", "a", "mapping"]
    with pytest.raises(ValueError, match="Category 'seo' is not a mapping"):
        prepare_report_result(broken)
