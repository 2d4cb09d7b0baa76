from typing import NamedTuple

from rich.color import ColorSystem
from rich.style import Style

DEFAULT_STYLE = "bold rgb(112,110,255)"


class Markers(NamedTuple):
    start: str
    end: str

    @classmethod
    def from_style(cls, style=DEFAULT_STYLE, color_system=ColorSystem.TRUECOLOR):
        """Builds the ANSI escape pair rich would emit around text in ``style``."""
        rendered = Style.parse(style).render("\x00", color_system=color_system)
        start, _, end = rendered.partition("\x00")
        return cls(start, end)


PLAIN_MARKERS = Markers("<<", ">>")


class Highlighter:
    """Wraps match spans of a line in start/end markers.

    Holds no state besides the markers, so one instance can be shared by
    every worker thread.
    """

    def __init__(self, markers=PLAIN_MARKERS):
        self.markers = markers

    def render(self, line, spans):
        if not spans:
            return line

        parts = []
        cursor = 0
        for span in spans:
            if span.is_empty:
                # Nothing to mark for a zero-length match
                continue
            start, end = span
            parts.append(line[cursor:start])
            parts.append(self.markers.start)
            parts.append(line[start:end])
            parts.append(self.markers.end)
            cursor = end
        parts.append(line[cursor:])
        return "".join(parts)
