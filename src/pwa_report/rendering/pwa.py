"""Renderer for badged (PWA style) report categories."""

from __future__ import annotations

import logging
import re
from typing import Mapping

from markupsafe import Markup

from src.pwa_report.badges import CategoryView, compute_category_view
from src.pwa_report.reporting.schemas import Category, Group

from .context import RenderContext, default_context

logger = logging.getLogger(__name__)

_ID_UNSAFE = re.compile(r"[^A-Za-z0-9_-]+")


def _svg_suffix(category_id: str) -> str:
    return _ID_UNSAFE.sub("-", category_id)


class PwaCategoryRenderer:
    """Render a category whose groups earn badges.

    Scored audits are never folded into pass/fail/not-applicable clumps; each
    stays inside its group's section, and manual audits form the single
    collapsible clump.
    """

    def __init__(self, context: RenderContext | None = None) -> None:
        self.context = context or default_context()

    def view(self, category: Category, groups: Mapping[str, Group]) -> CategoryView:
        return compute_category_view(category, groups)

    def render(self, category: Category, groups: Mapping[str, Group]) -> str:
        """Return the full category element markup."""

        view = self.view(category, groups)
        gauge_html = self._render_gauge(category, view)
        logger.debug("Rendering category '%s' with %d groups", category.id, len(view.classified.groups))
        return self.context.render(
            "pwa_category.html",
            category=category,
            groups=groups,
            view=view,
            gauge_html=Markup(gauge_html),
        )

    def render_score_gauge(self, category: Category, groups: Mapping[str, Group]) -> str:
        """Return only the gauge markup for ``category``."""

        if category.score is None:
            return self.context.render("gauge_error.html", category=category)
        return self._render_gauge(category, self.view(category, groups))

    def _render_gauge(self, category: Category, view: CategoryView) -> str:
        if view.gauge_state.mode == "error":
            return self.context.render("gauge_error.html", category=category)
        return self.context.render(
            "gauge_pwa.html",
            category=category,
            gauge=view.gauge_state,
            svg_suffix=_svg_suffix(category.id),
        )


__all__ = ["PwaCategoryRenderer"]
