"""Per-group badge evaluation and the aggregate category gauge."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Literal, Mapping, Sequence

from src.pwa_report.reporting.schemas import AuditRef, AuditResult, Group

from .classify import ClassifiedAudits

logger = logging.getLogger(__name__)

TOOLTIP_SEPARATOR = ", "


@dataclass(slots=True, frozen=True)
class GroupSummary:
    """Pass ratio and badge decision for one audit group."""

    group_id: str
    title: str
    passing_count: int
    total_count: int
    badged: bool

    @property
    def tooltip_fragment(self) -> str:
        return f"{self.title} {self.passing_count}/{self.total_count}"


@dataclass(slots=True, frozen=True)
class GaugeState:
    """Aggregate state of the category score gauge."""

    mode: Literal["error", "scored"]
    overall_badged: bool
    tooltip: str
    badged_group_ids: tuple[str, ...] = ()


def is_passing(result: AuditResult) -> bool:
    """Only a score of exactly 1 counts as passing."""

    return result.score is not None and result.score == 1


def evaluate_group(group_id: str, audit_refs: Sequence[AuditRef], title: str) -> GroupSummary:
    """Count passing audits in a group bucket and decide its badge."""

    total_count = len(audit_refs)
    passing_count = sum(1 for ref in audit_refs if is_passing(ref.result))
    return GroupSummary(
        group_id=group_id,
        title=title,
        passing_count=passing_count,
        total_count=total_count,
        badged=total_count > 0 and passing_count == total_count,
    )


def summarize_groups(
    classified: ClassifiedAudits,
    groups: Mapping[str, Group],
) -> list[GroupSummary]:
    """Evaluate every non-empty group bucket in first-seen order."""

    return [
        evaluate_group(group_id, refs, groups[group_id].title)
        for group_id, refs in classified.groups.items()
        if refs
    ]


def compose_gauge(
    category_score: float | None,
    group_summaries: Iterable[GroupSummary],
) -> GaugeState:
    """Fold group summaries into the category gauge state.

    A ``None`` category score is the evaluation error state: the gauge is
    rendered as an error and group summaries are not consulted at all.
    """

    if category_score is None:
        return GaugeState(mode="error", overall_badged=False, tooltip="")

    summaries = list(group_summaries)
    tooltip = TOOLTIP_SEPARATOR.join(summary.tooltip_fragment for summary in summaries)
    badged_group_ids = tuple(summary.group_id for summary in summaries if summary.badged)
    overall_badged = bool(summaries) and len(badged_group_ids) == len(summaries)

    logger.debug(
        "Composed gauge: overall_badged=%s badged_groups=%s",
        overall_badged,
        badged_group_ids,
    )

    return GaugeState(
        mode="scored",
        overall_badged=overall_badged,
        tooltip=tooltip,
        badged_group_ids=badged_group_ids,
    )


__all__ = [
    "GaugeState",
    "GroupSummary",
    "TOOLTIP_SEPARATOR",
    "compose_gauge",
    "evaluate_group",
    "is_passing",
    "summarize_groups",
]
