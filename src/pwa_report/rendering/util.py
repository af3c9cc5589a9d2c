"""Formatting helpers shared by the category templates."""

from __future__ import annotations

from src.pwa_report.reporting.schemas import AuditResult, ScoreDisplayMode

PASS_THRESHOLD = 0.9
AVERAGE_THRESHOLD = 0.5

_MODE_RATINGS = {
    ScoreDisplayMode.MANUAL: "manual",
    ScoreDisplayMode.NOT_APPLICABLE: "notapplicable",
    ScoreDisplayMode.INFORMATIVE: "informative",
    ScoreDisplayMode.ERROR: "error",
}


def calculate_rating(score: float | None, mode: ScoreDisplayMode = ScoreDisplayMode.NUMERIC) -> str:
    """Map a score to the rating used in ``lh-audit--*`` class names.

    Binary audits only pass with a score of exactly 1, so the rendered
    ``pass`` state always agrees with group badging.
    """

    if mode in _MODE_RATINGS:
        return _MODE_RATINGS[mode]
    if score is None:
        return "error"
    if mode == ScoreDisplayMode.BINARY:
        return "pass" if score == 1 else "fail"
    if score >= PASS_THRESHOLD:
        return "pass"
    if score >= AVERAGE_THRESHOLD:
        return "average"
    return "fail"


def audit_rating(result: AuditResult) -> str:
    return calculate_rating(result.score, result.scoreDisplayMode)


def format_percentage(score: float | None) -> str:
    """Render a 0-1 score as a whole percentage, ``?`` when there is none."""

    if score is None:
        return "?"
    return str(round(score * 100))


__all__ = ["audit_rating", "calculate_rating", "format_percentage"]
