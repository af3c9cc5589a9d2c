"""Join raw audit results onto category references before rendering."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

from .schemas import Category, Group, ReportResult

logger = logging.getLogger(__name__)


def build_group_table(raw_groups: Mapping[str, Any] | None) -> dict[str, Group]:
    """Validate the report-wide group definitions, keyed by group id."""

    table: dict[str, Group] = {}
    for group_id, entry in (raw_groups or {}).items():
        if not isinstance(entry, Mapping):
            raise ValueError(f"Group '{group_id}' is not a mapping.")
        table[group_id] = Group.model_validate({**entry, "id": group_id})
    return table


def _prepare_category(
    category_id: str,
    payload: Mapping[str, Any],
    audits: Mapping[str, Any],
) -> Category:
    raw_refs = payload.get("auditRefs") or []
    if not isinstance(raw_refs, Sequence):
        raise ValueError(f"Category '{category_id}' auditRefs must be a list.")

    refs: list[dict[str, Any]] = []
    for index, entry in enumerate(raw_refs):
        if not isinstance(entry, Mapping):
            raise ValueError(
                f"Audit ref at index {index} of category '{category_id}' is not a mapping."
            )
        audit_id = str(entry.get("id") or "").strip()
        if not audit_id:
            raise ValueError(
                f"Audit ref at index {index} of category '{category_id}' is missing an 'id'."
            )
        audit = audits.get(audit_id)
        if not isinstance(audit, Mapping):
            raise ValueError(
                f"Category '{category_id}' references unknown audit '{audit_id}'."
            )
        refs.append({**entry, "id": audit_id, "result": {"id": audit_id, **audit}})

    return Category.model_validate({**payload, "id": category_id, "auditRefs": refs})


def prepare_report_result(raw: Mapping[str, Any]) -> ReportResult:
    """Return a validated :class:`ReportResult` built from a raw report mapping.

    ``raw`` follows the report document layout: a top-level ``audits`` table,
    a ``categories`` mapping whose ``auditRefs`` point into it by id, and an
    optional ``categoryGroups`` table. The input is never mutated.
    """

    categories = raw.get("categories")
    if not isinstance(categories, Mapping) or not categories:
        raise ValueError("Report must define a non-empty 'categories' mapping.")

    audits = raw.get("audits")
    if not isinstance(audits, Mapping):
        raise ValueError("Report must define an 'audits' mapping.")

    prepared: list[Category] = []
    for key, payload in categories.items():
        if not isinstance(payload, Mapping):
            raise ValueError(f"Category '{key}' is not a mapping.")
        prepared.append(_prepare_category(str(key), payload, audits))
    logger.debug("Prepared %d report categories", len(prepared))

    return ReportResult(
        reportCategories=prepared,
        categoryGroups=build_group_table(raw.get("categoryGroups")),
    )


__all__ = ["build_group_table", "prepare_report_result"]
