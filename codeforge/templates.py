"""Template substitution for generated source code.

Templates use ``{{ name }}`` placeholders and two kinds of single-level
conditional blocks::

    {{#if is_async}}async {{/if}}function {{ name }}() {}
    {{#unless body}}// empty{{/unless}}

Rendering is pure: no I/O, no state kept between calls, and it never raises
on malformed input.  Unknown placeholders and unmatched block markers are
left in the output as literal text.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any


# ---------------------------------------------------------------------------
# Marker patterns
# ---------------------------------------------------------------------------

_PLACEHOLDER_RE = re.compile(r"\{\{\s*(\w+)\s*\}\}")

# Non-greedy: each opening marker pairs with the nearest closing marker.
_IF_BLOCK_RE = re.compile(
    r"\{\{\s*#if\s+(\w+)\s*\}\}(.*?)\{\{\s*/if\s*\}\}",
    re.DOTALL,
)
_UNLESS_BLOCK_RE = re.compile(
    r"\{\{\s*#unless\s+(\w+)\s*\}\}(.*?)\{\{\s*/unless\s*\}\}",
    re.DOTALL,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def stringify(value: Any) -> str:
    """Return the text inserted into a template for *value*.

    Booleans use their TypeScript spelling and ``None`` renders as nothing.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def substitute(template: str, variables: Mapping[str, Any]) -> str:
    """Replace every known ``{{ name }}`` placeholder in *template*.

    The template is scanned once; text inserted for a placeholder is not
    scanned again, so values containing ``{{ ... }}`` come out literally.

    Args:
        template: Template text.
        variables: Placeholder name to value.  Names missing from the
            mapping leave their placeholder untouched.

    Returns:
        The rendered text.
    """

    def _replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in variables:
            return match.group(0)
        return stringify(variables[name])

    return _PLACEHOLDER_RE.sub(_replace, template)


def substitute_with_conditionals(template: str, variables: Mapping[str, Any]) -> str:
    """Resolve ``if`` / ``unless`` blocks, then substitute placeholders.

    ``{{#if name}}...{{/if}}`` keeps its body when ``variables[name]`` is
    truthy and disappears entirely otherwise.  ``{{#unless name}}`` does the
    opposite.  A name missing from *variables* counts as false.  Nested blocks
    of the same kind are not supported.
    """

    def _keep_if(match: re.Match[str]) -> str:
        return match.group(2) if variables.get(match.group(1)) else ""

    def _keep_unless(match: re.Match[str]) -> str:
        return "" if variables.get(match.group(1)) else match.group(2)

    result = _IF_BLOCK_RE.sub(_keep_if, template)
    result = _UNLESS_BLOCK_RE.sub(_keep_unless, result)
    return substitute(result, variables)


# ---------------------------------------------------------------------------
# TemplateEngine
# ---------------------------------------------------------------------------


class TemplateEngine:
    """Namespace exposing the module functions under their short names."""

    process = staticmethod(substitute)
    process_conditional = staticmethod(substitute_with_conditionals)
