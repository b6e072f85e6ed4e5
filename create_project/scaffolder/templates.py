"""Jinja2 template rendering for project scaffolding.

Every file body the scaffolder emits is an inline Jinja2 template kept next
to the function that selects it.  ``TemplateRenderer`` compiles those
strings once and renders them with a plain context dictionary; rendering is
pure, so the same template and context always yield the same text.
"""

from __future__ import annotations

import re
from typing import Any

from jinja2 import Environment, StrictUndefined, Template


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _title_case_filter(value: str) -> str:
    """Convert ``@scope/my-app`` to ``My App`` for page titles."""
    base = value.rsplit("/", 1)[-1]
    return " ".join(word.capitalize() for word in re.split(r"[-_.\s]+", base) if word)


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders inline Jinja2 templates for project scaffolding.

    Generated sources are TypeScript, YAML and Markdown, so autoescaping is
    off and undefined variables raise instead of rendering as empty strings.
    """

    def __init__(self) -> None:
        self.env = Environment(
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["title_case"] = _title_case_filter
        self._compiled: dict[str, Template] = {}

    def render_string(self, template_string: str, context: dict[str, Any] | None = None) -> str:
        """Render an inline template string with the provided context."""
        template = self._compiled.get(template_string)
        if template is None:
            template = self.env.from_string(template_string)
            self._compiled[template_string] = template
        return template.render(**(context or {}))


_renderer = TemplateRenderer()


def render(template_string: str, **context: Any) -> str:
    """Render *template_string* with the shared module-level renderer."""
    return _renderer.render_string(template_string, context)
