"""Clumps of audits shown outside their groups."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Sequence

from src.pwa_report.reporting.schemas import AuditRef


@dataclass(slots=True, frozen=True)
class Clump:
    """Collapsible bucket of audits.

    In PWA rendering the manual clump is the only clump; scored audits are
    always shown inside their owning group section.
    """

    kind: Literal["manual"]
    audit_refs: tuple[AuditRef, ...]


def build_manual_clump(manual_refs: Sequence[AuditRef]) -> Clump | None:
    if not manual_refs:
        return None
    return Clump(kind="manual", audit_refs=tuple(manual_refs))


__all__ = ["Clump", "build_manual_clump"]
