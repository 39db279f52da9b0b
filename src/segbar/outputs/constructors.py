"""
Constructors that build bar outputs directly from values.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from segbar.bar import Markup, Output
from segbar.logger import get_logger

logger = get_logger("outputs")


def empty() -> Output:
    """Return an empty output, which hides the segment from the bar."""
    return Output()


def error(exc: BaseException) -> Output:
    """Return an urgent output describing the given error."""
    logger.debug(f"Building error output: {exc!r}")
    return Output(text=str(exc), short_text="Error", urgent=True)


def text(fmt: str, *args: Any) -> Output:
    """
    Build a plain text output from a printf-style format string.

    Without arguments the format string is used as a literal, so a stray
    ``%`` is shown as is. A single mapping argument supplies ``%(key)s``
    lookups. Formatting errors are reported inline instead of raised.
    """
    if not args:
        return Output(text=fmt)

    values: Any = args[0] if len(args) == 1 and isinstance(args[0], Mapping) else args
    try:
        formatted = fmt % values
    except Exception as exc:
        # repr() of a bad argument can raise too, so args stay out of the log
        logger.warning(f"Bad format string {fmt!r} for {len(args)} argument(s): {exc}")
        formatted = f"{fmt} %!({type(exc).__name__}: {exc})"
    return Output(text=formatted)


def pango_unsafe(markup: str) -> Output:
    """
    Build an output from existing pango markup.

    No escaping is done: the markup must already be well formed.
    """
    return Output(text=markup, markup=Markup.PANGO)
