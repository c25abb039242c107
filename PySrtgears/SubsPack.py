from __future__ import annotations

import bisect
from datetime import timedelta

from PySrtgears.SubsStats import SubsStats
from PySrtgears.Subtitle import Subtitle
from PySrtgears.SubtitlePosition import Pos

def _safe_ratio(numerator : float, denominator : float) -> float:
    return numerator / denominator if denominator else 0.0

class SubsPack:
    """
    The subtitles of a movie, an ordered collection of Subtitle entries.

    Operations that combine packs (Concatenate, Merge) move the other pack's subtitles
    into this one by reference: the other pack is consumed by the call and should not
    be modified independently afterwards.

    Packs are not thread-safe.
    """
    def __init__(self, subs : list[Subtitle]|None = None):
        self.subs : list[Subtitle] = subs if subs is not None else []

    def __len__(self) -> int:
        return len(self.subs)

    def __iter__(self):
        return iter(self.subs)

    def __getitem__(self, index : int) -> Subtitle:
        return self.subs[index]

    def __repr__(self) -> str:
        return f"SubsPack({len(self.subs)} subtitles)"

    def Sort(self) -> None:
        """
        Sort the subtitles by appearance timestamp (stable)
        """
        self.subs.sort(key=lambda sub: sub.time_in)

    def Shift(self, delta : timedelta) -> None:
        """
        Shift all subtitles by a (positive or negative) delta
        """
        for sub in self.subs:
            sub.Shift(delta)

    def Scale(self, factor : float) -> None:
        """
        Scale the timestamps of the subtitles, e.g. to fix a frame rate mismatch.
        The duration for which each subtitle is visible is not changed.
        """
        for sub in self.subs:
            sub.Scale(factor)

    def Lengthen(self, factor : float) -> None:
        """
        Lengthen (or shorten) the display duration of all subtitles
        """
        for sub in self.subs:
            sub.Lengthen(factor)

    def SetPos(self, pos : Pos) -> None:
        for sub in self.subs:
            sub.pos = pos

    def SetColor(self, color : str) -> None:
        for sub in self.subs:
            sub.color = color

    def RemoveHI(self) -> None:
        """
        Remove hearing impaired lines, and subtitles that are left with no lines
        """
        for index in range(len(self.subs) - 1, -1, -1):
            sub = self.subs[index]
            sub.RemoveHI()
            if not sub.lines:
                del self.subs[index]

    def RemoveHTML(self) -> None:
        for sub in self.subs:
            sub.RemoveHTML()

    def RemoveControl(self) -> None:
        for sub in self.subs:
            sub.RemoveControl()

    def Concatenate(self, other : SubsPack, second_part_start : timedelta) -> None:
        """
        Append the subtitles of another pack, e.g. when the movie is in one part but the subtitles are in two.

        The other pack's subtitles are shifted by the start time of the second part
        (usually the length of the first part), then moved into this pack.
        """
        other.Shift(second_part_start)
        self.subs.extend(other.subs)

        # The two parts may overlap (e.g. the second part repeats the end of the first)
        self.Sort()

    def Merge(self, other : SubsPack) -> None:
        """
        Merge another pack into this one to create a dual subtitle,
        e.g. two languages displayed at the same time.

        This pack's subtitles are displayed at the bottom, the other pack's at the top.
        """
        self.SetPos(Pos.PosNotSpecified)
        other.SetPos(Pos.Top)

        self.subs.extend(other.subs)
        self.Sort()

    def Split(self, at : timedelta) -> SubsPack:
        """
        Split the pack in two at the specified time, e.g. when the movie is in two parts but the subtitles are in one.

        Subtitles appearing before the split time remain in this pack. The rest are moved
        to a new pack, shifted so that its timestamps are relative to the split time.

        Returns the new pack.
        """
        index = bisect.bisect_left(self.subs, at, key=lambda sub: sub.time_in)

        second = SubsPack(self.subs[index:])
        self.subs = self.subs[:index]

        second.Shift(-at)
        return second

    def Stats(self) -> SubsStats:
        """
        Analyse the subtitles and return statistics.

        Note that gathering statistics removes controls, HTML formatting and hearing impaired
        lines from the subtitles, so the pack is modified.
        """
        lines = chars = chars_no_space = words = htmls = controls = his = 0
        total_disp_dur = timedelta()

        for sub in self.subs:
            total_disp_dur += sub.display_duration
            lines += len(sub.lines)

            if sub.RemoveControl():
                controls += 1
            if sub.RemoveHTML():
                htmls += 1

            for line in sub.lines:
                chars += len(line)
                fields = line.split()
                words += len(fields)
                chars_no_space += sum(len(field) for field in fields)

            if sub.RemoveHI():
                his += 1

        sub_visib_ratio = 0.0
        if self.subs:
            last_time_out = self.subs[-1].time_out
            if last_time_out:
                sub_visib_ratio = total_disp_dur / last_time_out

        subs = len(self.subs)
        return SubsStats(
            subs=subs,
            lines=lines,
            avg_lines_per_sub=_safe_ratio(lines, subs),
            chars=chars,
            chars_no_space=chars_no_space,
            avg_chars_per_line=_safe_ratio(chars_no_space, lines),
            words=words,
            avg_words_per_line=_safe_ratio(words, lines),
            avg_chars_per_word=_safe_ratio(chars_no_space, words),
            total_disp_dur=total_disp_dur,
            sub_visib_ratio=sub_visib_ratio,
            avg_disp_dur_per_non_space_char=total_disp_dur / chars_no_space if chars_no_space else timedelta(),
            htmls=htmls,
            controls=controls,
            his=his
        )
