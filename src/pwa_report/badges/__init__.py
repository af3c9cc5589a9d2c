"""Badge and clump computation for badged report categories."""

from .classify import ClassifiedAudits, classify_audits
from .clumps import Clump, build_manual_clump
from .errors import ConfigurationError
from .evaluation import (
    GaugeState,
    GroupSummary,
    compose_gauge,
    evaluate_group,
    is_passing,
    summarize_groups,
)
from .view import CategoryView, compute_category_view, view_to_payload

__all__ = [
    "CategoryView",
    "ClassifiedAudits",
    "Clump",
    "ConfigurationError",
    "GaugeState",
    "GroupSummary",
    "build_manual_clump",
    "classify_audits",
    "compose_gauge",
    "compute_category_view",
    "evaluate_group",
    "is_passing",
    "summarize_groups",
    "view_to_payload",
]
