"""Split a category's audit references into manual, grouped and ungrouped."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Mapping

from src.pwa_report.reporting.schemas import AuditRef, Group, ScoreDisplayMode

from .errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ClassifiedAudits:
    """Partition of a category's audit references.

    ``groups`` preserves the order in which group ids first appear in the
    category's audit references.
    """

    manual: tuple[AuditRef, ...] = ()
    groups: Mapping[str, tuple[AuditRef, ...]] = field(default_factory=dict)
    ungrouped: tuple[AuditRef, ...] = ()


def is_manual(audit_ref: AuditRef) -> bool:
    return audit_ref.result.scoreDisplayMode == ScoreDisplayMode.MANUAL


def classify_audits(
    audit_refs: Iterable[AuditRef],
    groups: Mapping[str, Group],
    *,
    validate_groups: bool = True,
) -> ClassifiedAudits:
    """Partition ``audit_refs`` for badging.

    Manual audits are set aside regardless of their ``group``. Every other
    audit with a ``group`` lands in that group's bucket in input order, and
    audits with no ``group`` are returned separately; they never take part
    in badging. With ``validate_groups`` off, unknown group ids are
    bucketed as-is instead of raising.
    """

    manual: list[AuditRef] = []
    ungrouped: list[AuditRef] = []
    buckets: dict[str, list[AuditRef]] = {}

    for audit_ref in audit_refs:
        if is_manual(audit_ref):
            manual.append(audit_ref)
            continue
        group_id = audit_ref.group
        if not group_id:
            ungrouped.append(audit_ref)
            continue
        if validate_groups and group_id not in groups:
            raise ConfigurationError(group_id, audit_ref.id)
        buckets.setdefault(group_id, []).append(audit_ref)

    logger.debug(
        "Classified audits: %d manual, %d ungrouped, groups=%s",
        len(manual),
        len(ungrouped),
        list(buckets),
    )

    return ClassifiedAudits(
        manual=tuple(manual),
        groups={group_id: tuple(refs) for group_id, refs in buckets.items()},
        ungrouped=tuple(ungrouped),
    )


__all__ = ["ClassifiedAudits", "classify_audits", "is_manual"]
