"""Output record produced for a single bar segment."""

from dataclasses import dataclass
from enum import Enum

__all__ = ["Markup", "Output"]


class Markup(Enum):
    """Markup dialect used to interpret an output's text.

    Values follow the ``markup`` key of the i3bar protocol.
    """

    NONE = "none"
    PANGO = "pango"


@dataclass(frozen=True)
class Output:
    """Displayable content for one segment of the bar.

    An output with every field at its default means there is nothing to show,
    and the bar hides the segment.
    """

    text: str = ""
    short_text: str = ""  # Used when the bar runs out of space
    markup: Markup = Markup.NONE
    urgent: bool = False

    def is_empty(self) -> bool:
        """Return True when the segment has nothing to display.

        Not used by segbar itself; bars call it to decide whether to hide a segment.
        """
        return not self.text and not self.short_text
