"""Script-facing API."""

from hostkit.script.context import ScriptContext
from hostkit.script.models import AttachOptions, DetachOptions

__all__ = [
    "ScriptContext",
    "AttachOptions",
    "DetachOptions",
]
