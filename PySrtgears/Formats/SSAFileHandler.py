"""
Writing the Sub Station Alpha v4 format (*.ssa).

Example of the generated output:

    [Script Info]
    ; This is a Sub Station Alpha v4 script.
    ; Generated by Srtgears 1.1.0, https://srt-gears.appspot.com/
    Title: Srtgears output
    ScriptType: v4.00
    Collisions: Normal
    PlayDepth: 0

    [V4 Styles]
    Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, TertiaryColour, BackColour, Bold, Italic, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, AlphaLevel, Encoding
    Style: 1,Arial,28,15724527,15724527,15724527,-2147483640,-1,0,1,1,2,2,30,30,30,0,0

    [Events]
    Format: Marked, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
    Dialogue: Marked=0,0:00:01.18,0:00:06.85,1,,0000,0000,0000,,Like an angel\\nwith pity on nobody
"""
from datetime import timedelta
from typing import TextIO, TypeAlias

import pysubs2.time

from PySrtgears.Helpers.Color import Color
from PySrtgears.Helpers.Localization import _
from PySrtgears.SubsPack import SubsPack
from PySrtgears.Subtitle import Subtitle
from PySrtgears.SubtitleError import UnsupportedFormatError
from PySrtgears.SubtitleFileHandler import SubtitleFileHandler
from PySrtgears.SubtitlePosition import Pos
from PySrtgears.SubtitleWriter import SubtitleWriter
from PySrtgears.version import __version__, home_page

# Mapping between our positions and SSA v4 alignment (1-3 bottom, 5-7 top, 9-11 middle)
pos_to_ssa_alignment : dict[Pos, int] = {
    Pos.TopLeft: 5, Pos.Top: 6, Pos.TopRight: 7,
    Pos.Left: 9, Pos.Center: 10, Pos.Right: 11,
    Pos.BottomLeft: 1, Pos.Bottom: 2, Pos.BottomRight: 3,
}

StyleKey : TypeAlias = tuple[int, int]

_STYLE_FORMAT = "Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, TertiaryColour, BackColour, Bold, Italic, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, AlphaLevel, Encoding"
_EVENT_FORMAT = "Marked, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text"


class SSAFileHandler(SubtitleFileHandler):
    """
    File handler for the Sub Station Alpha v4 format. Only writing is supported.

    Each distinct combination of position and color gets its own style, numbered from 1
    in order of first use.
    """

    SUPPORTED_EXTENSIONS = {'.ssa': 10}

    def __init__(self, title : str = "Srtgears output", debug : bool = False):
        super().__init__(debug)
        self.title : str = title

    def parse_file(self, file_obj: TextIO) -> SubsPack:
        raise UnsupportedFormatError(_("Parsing Sub Station Alpha is not supported"))

    def write_to(self, pack: SubsPack, file_obj: TextIO) -> None:
        """
        Write subtitles in Sub Station Alpha format.
        """
        writer = SubtitleWriter(file_obj)

        style_keys = [ GetStyleKey(sub) for sub in pack.subs ]
        styles : dict[StyleKey, int] = {}
        for key in style_keys:
            styles.setdefault(key, len(styles) + 1)

        writer.writeline("[Script Info]")
        writer.writeline("; This is a Sub Station Alpha v4 script.")
        writer.writeline("; Generated by Srtgears ", __version__, ", ", home_page)
        writer.writeline("Title: ", self.title)
        writer.writeline("ScriptType: v4.00")
        writer.writeline("Collisions: Normal")
        writer.writeline("PlayDepth: 0")
        writer.writeline()

        writer.writeline("[V4 Styles]")
        writer.writeline("Format: ", _STYLE_FORMAT)
        for (alignment, color), name in styles.items():
            writer.writeline(f"Style: {name},Arial,28,{color},{color},{color},-2147483640,-1,0,1,1,2,{alignment},30,30,30,0,0")
        writer.writeline()

        writer.writeline("[Events]")
        writer.writeline("Format: ", _EVENT_FORMAT)
        for sub, key in zip(pack.subs, style_keys):
            if writer.failed:
                break

            text = "\\n".join(sub.lines)
            writer.writeline(f"Dialogue: Marked=0,{FormatSSATime(sub.time_in)},{FormatSSATime(sub.time_out)},{styles[key]},,0000,0000,0000,,{text}")

        self._raise_if_failed(writer)


def GetStyleKey(sub : Subtitle) -> StyleKey:
    """
    The (alignment, color) pair identifying the style of a subtitle. Unspecified position is displayed at the bottom.
    """
    alignment = pos_to_ssa_alignment.get(sub.pos, pos_to_ssa_alignment[Pos.Bottom])
    return alignment, Color.resolve(sub.color).to_bgr()

def FormatSSATime(time : timedelta) -> str:
    """
    Format a time as H:MM:SS.cc, truncating to centiseconds
    """
    ms = max(time // timedelta(milliseconds=1), 0)
    h, m, s, ms = pysubs2.time.ms_to_times(ms)
    return f"{h:d}:{m:02d}:{s:02d}.{ms // 10:02d}"
