"""Markup rendering for badged report categories."""

from .context import RenderContext, UIStrings, default_context
from .pwa import PwaCategoryRenderer

__all__ = ["PwaCategoryRenderer", "RenderContext", "UIStrings", "default_context"]
