"""Typed models for prepared report categories, audits and groups."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ScoreDisplayMode(str, Enum):
    """How an audit's score is meant to be presented."""

    BINARY = "binary"
    MANUAL = "manual"
    NOT_APPLICABLE = "notApplicable"
    INFORMATIVE = "informative"
    NUMERIC = "numeric"
    ERROR = "error"


class AuditResult(BaseModel):
    """Outcome of a single audit as produced by the report generator."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="Stable audit identifier")
    title: str = Field(default="", description="Human readable audit title")
    description: str = Field(default="", description="Longer explanation of the audit")
    score: float | None = Field(default=None, description="Score in [0, 1] or null")
    scoreDisplayMode: ScoreDisplayMode = Field(default=ScoreDisplayMode.BINARY)


class AuditRef(BaseModel):
    """Reference from a category to one of the report's audits."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="Identifier of the referenced audit")
    weight: float = Field(default=0.0)
    group: str | None = Field(default=None, description="Group the audit is displayed under")
    result: AuditResult


class Category(BaseModel):
    """Top-level grouping of audits with an aggregate score."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str = ""
    description: str = ""
    manualDescription: str = ""
    score: float | None = Field(
        description="Aggregate score; null signals a category evaluation error",
    )
    auditRefs: list[AuditRef] = Field(default_factory=list)


class Group(BaseModel):
    """Named feature-area bucket that audits may be tagged with."""

    model_config = ConfigDict(extra="ignore")

    id: str
    title: str
    description: str = ""


class ReportResult(BaseModel):
    """Report payload with audit results joined onto category references."""

    model_config = ConfigDict(extra="ignore")

    reportCategories: list[Category] = Field(default_factory=list)
    categoryGroups: dict[str, Group] = Field(default_factory=dict)

    def category(self, category_id: str) -> Category | None:
        """Return the category called ``category_id`` if present."""

        for item in self.reportCategories:
            if item.id == category_id:
                return item
        return None


__all__ = [
    "ScoreDisplayMode",
    "AuditResult",
    "AuditRef",
    "Category",
    "Group",
    "ReportResult",
]
