"""
Helper functions to construct bar outputs.
"""

from .config import TemplateConfig
from .constructors import empty, error, pango_unsafe, text
from .templates import (
    TemplateCompileError,
    TemplateFunc,
    pango_template,
    text_template,
)

__all__ = [
    "TemplateCompileError",
    "TemplateConfig",
    "TemplateFunc",
    "empty",
    "error",
    "pango_template",
    "pango_unsafe",
    "text",
    "text_template",
]
