"""Template markup helpers for token substitution and wrapper stripping.

Templates are SVG strings with ``{{token}}`` color placeholders. They are
handled with regexes rather than a DOM so that arbitrary inner markup
(gradients, defs, comments) passes through byte for byte.
"""

from __future__ import annotations

import re
from typing import Mapping

_TOKEN_RE = re.compile(r"\{\{(\w+)\}\}")
_SVG_INNER_RE = re.compile(r"<svg[^>]*>([\s\S]*)</svg>", re.IGNORECASE)


def substitute_tokens(template: str, values: Mapping[str, str]) -> str:
    """Replace every ``{{name}}`` found in ``values``; leave the rest untouched."""

    def _replace(m: re.Match[str]) -> str:
        return values.get(m.group(1), m.group(0))

    return _TOKEN_RE.sub(_replace, template)


def template_tokens(template: str) -> set[str]:
    """Names of all placeholders used in a template."""
    return set(_TOKEN_RE.findall(template))


def inner_markup(svg: str) -> str | None:
    """Content between the outer ``<svg>`` tags, stripped.

    Returns None when the string has no ``<svg>`` wrapper.
    """
    m = _SVG_INNER_RE.search(svg)
    return m.group(1).strip() if m else None
