"""Placeholder substitution for ``{key}`` templates.

Usage:
    format_template("hello {name}", {"name": "world"})  # "hello world"
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_PLACEHOLDER = re.compile(r"\{([^{}]*)\}")


def format_template(template: str, substitutions: Mapping[Any, Any] | None = None) -> str:
    """Replace every ``{key}`` in template with ``str(substitutions[key])``.

    Tokens are resolved in a single left-to-right pass, so ``{id}`` and
    ``{idx}`` never interfere and substituted text is never scanned again.
    Placeholders without a matching key are kept verbatim. Keys are matched
    by their ``str()`` form, so ``{1}`` matches the integer key 1.

    Args:
        template: Text containing ``{key}`` placeholders.
        substitutions: Values to insert. None means no substitutions.

    Returns:
        The formatted string (template itself when nothing matches).
    """
    if not substitutions:
        return template

    values = {str(key): value for key, value in substitutions.items()}

    def _replace(match: re.Match[str]) -> str:
        key = match.group(1)
        if key in values:
            return str(values[key])
        return match.group(0)

    return _PLACEHOLDER.sub(_replace, template)
