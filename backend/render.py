"""Handlebars rendering for view fragments."""

from collections.abc import Callable
from typing import Any

import pybars


_compiler = pybars.Compiler()
_cache: dict[str, Callable] = {}


class RenderError(Exception):
    """Raised when a Handlebars template fails to compile or render."""


def _helper_capitalize(this, text):
    """{{capitalize word}}: upper-case the first letter."""
    text = str(text or "")
    return text[:1].upper() + text[1:]


_HELPERS: dict[str, Callable] = {
    "capitalize": _helper_capitalize,
}


def render_template(template_str: str, context: dict[str, Any]) -> str:
    """Compile and render a Handlebars template with the given context.

    Templates are cached by source string to avoid recompilation.
    """
    try:
        compiled = _cache.get(template_str)
        if compiled is None:
            compiled = _compiler.compile(template_str)
            _cache[template_str] = compiled
        return str(compiled(context, helpers=_HELPERS))
    except Exception as e:
        raise RenderError(f"Template error: {e}") from e
