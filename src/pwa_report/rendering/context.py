"""Explicit render context replacing render-time globals."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Callable, Mapping

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from src.pwa_report.settings import load_settings

from .util import audit_rating, format_percentage


@dataclass(slots=True, frozen=True)
class UIStrings:
    """English catalog of the strings the category renderer emits."""

    error_label: str = "Error!"
    manual_audits_group_title: str = "Additional items to manually check"


@dataclass(slots=True, frozen=True)
class RenderContext:
    strings: UIStrings
    env: Environment
    helpers: Mapping[str, Callable[..., Any]] = field(default_factory=dict)

    def render(self, template_name: str, **values: Any) -> str:
        template = self.env.get_template(template_name)
        return template.render(strings=self.strings, **self.helpers, **values)


def build_environment(template_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def default_context(template_dir: Path | None = None, **string_overrides: str) -> RenderContext:
    """Build a context from settings, optionally overriding UI strings."""

    directory = template_dir or load_settings().template_dir
    return RenderContext(
        strings=replace(UIStrings(), **string_overrides),
        env=build_environment(directory),
        helpers={
            "audit_rating": audit_rating,
            "format_percentage": format_percentage,
        },
    )


__all__ = ["RenderContext", "UIStrings", "build_environment", "default_context"]
