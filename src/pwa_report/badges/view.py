"""Compose the badge view-model consumed by the category renderer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping

from src.pwa_report.reporting.schemas import Category, Group

from .classify import ClassifiedAudits, classify_audits
from .clumps import Clump, build_manual_clump
from .evaluation import GaugeState, GroupSummary, compose_gauge, summarize_groups

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class CategoryView:
    """Everything the renderer needs to draw a badged category."""

    group_summaries: tuple[GroupSummary, ...]
    gauge_state: GaugeState
    manual_clump: Clump | None
    classified: ClassifiedAudits

    def summary_for(self, group_id: str) -> GroupSummary | None:
        for summary in self.group_summaries:
            if summary.group_id == group_id:
                return summary
        return None


def compute_category_view(category: Category, groups: Mapping[str, Group]) -> CategoryView:
    """Recompute the badge view-model from the current category snapshot.

    Raises :class:`~.errors.ConfigurationError` when an audit of a scored
    category points at a group missing from ``groups``. Error categories
    never consult the group table.
    """

    classified = classify_audits(
        category.auditRefs, groups, validate_groups=category.score is not None
    )
    manual_clump = build_manual_clump(classified.manual)

    if category.score is None:
        logger.warning("Category '%s' has no score; rendering error gauge", category.id)
        summaries: list[GroupSummary] = []
    else:
        summaries = summarize_groups(classified, groups)

    return CategoryView(
        group_summaries=tuple(summaries),
        gauge_state=compose_gauge(category.score, summaries),
        manual_clump=manual_clump,
        classified=classified,
    )


def view_to_payload(view: CategoryView) -> dict:
    """Return a JSON-ready mapping of ``view``."""

    gauge = view.gauge_state
    clump = view.manual_clump
    return {
        "group_summaries": [
            {
                "group_id": summary.group_id,
                "title": summary.title,
                "passing_count": summary.passing_count,
                "total_count": summary.total_count,
                "badged": summary.badged,
                "tooltip": summary.tooltip_fragment,
            }
            for summary in view.group_summaries
        ],
        "gauge_state": {
            "mode": gauge.mode,
            "overall_badged": gauge.overall_badged,
            "tooltip": gauge.tooltip,
            "badged_group_ids": list(gauge.badged_group_ids),
        },
        "manual_clump": (
            {"kind": clump.kind, "audit_ids": [ref.id for ref in clump.audit_refs]}
            if clump is not None
            else None
        ),
    }


__all__ = ["CategoryView", "compute_category_view", "view_to_payload"]
