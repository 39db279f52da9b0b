"""Types shared with the bar that displays segment outputs."""

from segbar.bar.output import Markup, Output

__all__ = [
    "Markup",
    "Output",
]
