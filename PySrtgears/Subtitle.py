from __future__ import annotations

from datetime import timedelta

from PySrtgears.Helpers.Text import IsHearingImpairedLine, RemoveHtmlTags, RemoveLeadingControl
from PySrtgears.SubtitlePosition import Pos

class Subtitle:
    """
    A single displayable subtitle, whose text may be broken into multiple lines.

    Attributes:
        time_in (timedelta): Timestamp when the subtitle appears
        time_out (timedelta): Timestamp when the subtitle disappears
        lines (list[str]): Lines of text to be displayed
        pos (Pos): Where to display the subtitle
        color (str): Color of the text, a color name or an RRGGBB hex value (empty for none)
    """
    def __init__(self, time_in : timedelta|None = None, time_out : timedelta|None = None, lines : list[str]|None = None, pos : Pos = Pos.PosNotSpecified, color : str = ""):
        self.time_in : timedelta = time_in or timedelta()
        self.time_out : timedelta = time_out or timedelta()
        self.lines : list[str] = lines if lines is not None else []
        self.pos : Pos = pos
        self.color : str = color

    def __repr__(self) -> str:
        return f"Subtitle({str(self.time_in)} --> {str(self.time_out)}, {self.lines!r}, pos={self.pos.name}, color={self.color!r})"

    def __eq__(self, other : object) -> bool:
        if not isinstance(other, Subtitle):
            return NotImplemented

        return (self.time_in, self.time_out, self.lines, self.pos, self.color) == (other.time_in, other.time_out, other.lines, other.pos, other.color)

    @property
    def display_duration(self) -> timedelta:
        """
        How long the subtitle is visible for
        """
        return self.time_out - self.time_in

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def Shift(self, delta : timedelta) -> None:
        self.time_in += delta
        self.time_out += delta

    def Scale(self, factor : float) -> None:
        """
        Scale the appearance timestamp, keeping the display duration unchanged
        """
        duration = self.display_duration
        self.time_in = self.time_in * factor
        self.time_out = self.time_in + duration

    def Lengthen(self, factor : float) -> None:
        """
        Scale the display duration around the midpoint of the subtitle
        """
        duration = self.display_duration * factor
        center = (self.time_in + self.time_out) / 2
        self.time_in = max(center - duration / 2, timedelta())
        # relative to the (possibly clamped) time_in, so the duration is preserved
        self.time_out = self.time_in + duration

    def RemoveHI(self) -> bool:
        """
        Remove hearing impaired lines, e.g. "[PHONE RINGING]" or "(phone ringing)".
        Returns True if any were removed.
        """
        removed = False
        for index in range(len(self.lines) - 1, -1, -1):
            if IsHearingImpairedLine(self.lines[index]):
                del self.lines[index]
                removed = True
        return removed

    def RemoveHTML(self) -> bool:
        """
        Remove HTML formatting from the lines, and the color (which comes from HTML).
        Returns True if there was any formatting.
        """
        removed = False
        for index, line in enumerate(self.lines):
            self.lines[index] = RemoveHtmlTags(line)
            removed = removed or self.lines[index] != line

        removed = removed or self.color != ""
        self.color = ""
        return removed

    def RemoveControl(self) -> bool:
        """
        Remove controls such as {\\anX}, {\\aX} or {\\pos(x,y)} from the start of the lines, and the position (which comes from controls).
        Returns True if there were any controls.
        """
        removed = False
        for index, line in enumerate(self.lines):
            self.lines[index] = RemoveLeadingControl(line)
            removed = removed or self.lines[index] != line

        removed = removed or self.pos != Pos.PosNotSpecified
        self.pos = Pos.PosNotSpecified
        return removed
