"""Configuration for template compilation."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TemplateConfig:
    """Whitespace controls applied to compiled templates."""

    # Remove the first newline after a block tag
    trim_blocks: bool = False
    # Strip whitespace before a block tag on the same line
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = False
