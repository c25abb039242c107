"""
Reading and writing the SubRip format (*.srt).

The parser is permissive: it tries to make sense of the input even if it does not
conform to the format, and reports problems as debug diagnostics rather than errors.

Unofficial extensions are supported in both directions: a {\\anX} position control at
the start of the first line, and a <font color="..."> tag around the whole text.

Example:

    1
    00:02:17,440 --> 00:02:20,375
    Senator, we're making
    our final approach into Coruscant.

    2
    00:02:20,476 --> 00:02:22,501
    Very good, Lieutenant.
"""
from datetime import timedelta
from typing import TextIO

import regex
import srt # type: ignore

from PySrtgears.Helpers.Localization import _
from PySrtgears.Helpers.Time import TimestampToTimedelta
from PySrtgears.SubsPack import SubsPack
from PySrtgears.Subtitle import Subtitle
from PySrtgears.SubtitleError import SubtitleParseError
from PySrtgears.SubtitleFileHandler import SubtitleFileHandler
from PySrtgears.SubtitlePosition import Pos
from PySrtgears.SubtitleWriter import SubtitleWriter

# Mapping between the digit of {\anX} and our positions (numpad layout)
srt_pos_to_pos : dict[str, Pos] = {
    '7': Pos.TopLeft, '8': Pos.Top, '9': Pos.TopRight,
    '4': Pos.Left, '5': Pos.Center, '6': Pos.Right,
    '1': Pos.BottomLeft, '2': Pos.Bottom, '3': Pos.BottomRight,
}

pos_to_srt_pos : dict[Pos, str] = { pos: digit for digit, pos in srt_pos_to_pos.items() }

_SEQUENCE_NUMBER_PATTERN = regex.compile(r'^\s*\d+\s*$')

# Very permissive, e.g. also accepts "dY 00:02:20.476--->   00:02:22,501X Y"
_TIMESTAMPS_PATTERN = regex.compile(r'(\d\d):(\d\d):(\d\d)[,\.](\d\d\d)\s*-+>\s*(\d\d):(\d\d):(\d\d)[,\.](\d\d\d)')

# Legacy single parameter alignment, e.g. {\a6}
_LEGACY_ALIGNMENT_PATTERN = regex.compile(r'^\{\\a(\d+)\}')

_FONT_COLOR_PATTERN = regex.compile(r'''^<\s*font\s+color\s*=\s*(?:"([^"]*)"|'([^']*)')\s*>''', regex.IGNORECASE)
_FONT_CLOSE_PATTERN = regex.compile(r'<\s*/\s*font\s*>', regex.IGNORECASE)

_BYTE_ORDER_MARK = '\ufeff'

# Parser phases
_EXPECT_SEQUENCE_NUMBER = 0
_EXPECT_TIMESTAMPS = 1
_EXPECT_TEXT = 2


class SrtFileHandler(SubtitleFileHandler):
    """
    File handler for the SubRip format.

    With debug enabled, malformed input (invalid sequence numbers and timestamps,
    subtitles that would never be visible) is reported as debug log messages.
    """

    SUPPORTED_EXTENSIONS = {'.srt': 10}

    def parse_file(self, file_obj: TextIO) -> SubsPack:
        """
        Parse SubRip content from a text stream and return the subtitles sorted by appearance time.
        """
        pack = SubsPack()
        phase = _EXPECT_SEQUENCE_NUMBER
        sub : Subtitle|None = None

        try:
            for index, raw_line in enumerate(file_obj):
                line = raw_line.rstrip('\r\n')
                if index == 0 and line.startswith(_BYTE_ORDER_MARK):
                    line = line[len(_BYTE_ORDER_MARK):]

                if phase == _EXPECT_SEQUENCE_NUMBER:
                    if not line:
                        continue    # Tolerate multiple empty lines between subtitles

                    # Sequence numbers are regenerated when writing
                    if self.debug and not _SEQUENCE_NUMBER_PATTERN.match(line):
                        self._diagnose(_("Invalid sequence number line: {}").format(line))

                    sub = Subtitle()
                    phase = _EXPECT_TIMESTAMPS

                elif phase == _EXPECT_TIMESTAMPS and sub is not None:
                    self._parse_timestamps(sub, line)
                    phase = _EXPECT_TEXT

                elif sub is not None:
                    if line:
                        sub.lines.append(line)
                    else:
                        pack.subs.append(self._complete_subtitle(sub))
                        sub = None
                        phase = _EXPECT_SEQUENCE_NUMBER

        except (OSError, UnicodeDecodeError) as e:
            raise SubtitleParseError(_("Failed to read SRT content"), e)

        # The last subtitle may not be followed by an empty line
        if sub is not None:
            pack.subs.append(self._complete_subtitle(sub))

        self._diagnose(_("Loaded {} subtitles.").format(len(pack.subs)))

        pack.Sort()
        return pack

    def write_to(self, pack: SubsPack, file_obj: TextIO) -> None:
        """
        Write subtitles in SubRip format, renumbering them from 1.
        """
        writer = SubtitleWriter(file_obj)

        for number, sub in enumerate(pack.subs, start=1):
            if writer.failed:
                break

            writer.writeline(number)
            writer.writeline(FormatSrtTime(sub.time_in), " --> ", FormatSrtTime(sub.time_out))

            for line_index, line in enumerate(sub.lines):
                if line_index == 0:
                    if sub.pos != Pos.PosNotSpecified:
                        writer.write("{\\an", pos_to_srt_pos[sub.pos], "}")
                    if sub.color:
                        writer.write('<font color="', sub.color, '">')

                if line_index == len(sub.lines) - 1 and sub.color:
                    writer.writeline(line, "</font>")
                else:
                    writer.writeline(line)

            # Separator
            writer.writeline()

        self._raise_if_failed(writer)

    def _parse_timestamps(self, sub : Subtitle, line : str) -> None:
        """
        Parse a timestamp line, e.g. 00:02:20,476 --> 00:02:22,501
        """
        match = _TIMESTAMPS_PATTERN.search(line)
        if not match:
            self._diagnose(_("Invalid timestamp line: {}").format(line))
            return

        groups = match.groups()
        sub.time_in = TimestampToTimedelta(*groups[0:4])
        sub.time_out = TimestampToTimedelta(*groups[4:8])

        if sub.time_out <= sub.time_in:
            self._diagnose(_("Appear is not earlier than disappear, text won't be visible: {}").format(line))

    def _complete_subtitle(self, sub : Subtitle) -> Subtitle:
        """
        Extract the position and color extensions from the text
        """
        if not sub.lines:
            return sub

        first_line = sub.lines[0]
        if first_line.startswith("{\\a"):
            # 2 variants: {\anX} and {\aX}
            if len(first_line) >= 6 and first_line[3] == 'n' and first_line[5] == '}':
                pos = srt_pos_to_pos.get(first_line[4])
                if pos is not None:
                    sub.pos = pos
                    sub.lines[0] = first_line[6:]
            else:
                legacy = _LEGACY_ALIGNMENT_PATTERN.match(first_line)
                if legacy:
                    # Not mapped to a position
                    self._diagnose(_("Unresolved position control: {}").format(legacy.group(0)))
                    sub.lines[0] = first_line[legacy.end():]

        font = _FONT_COLOR_PATTERN.match(sub.lines[0])
        if font:
            sub.color = font.group(1) if font.group(1) is not None else font.group(2)
            sub.lines[0] = sub.lines[0][font.end():]

            for index, line in enumerate(sub.lines):
                stripped = _FONT_CLOSE_PATTERN.sub('', line, count=1)
                if stripped != line:
                    sub.lines[index] = stripped
                    break

        return sub


def FormatSrtTime(time : timedelta) -> str:
    """
    Format a time as HH:MM:SS,mmm. Negative times (e.g. after shifting backwards) are written as zero.
    """
    return srt.timedelta_to_srt_timestamp(max(time, timedelta()))
