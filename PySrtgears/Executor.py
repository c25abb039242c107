from __future__ import annotations

from collections.abc import Callable, Mapping
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
import logging

from PySrtgears.ExecutorEvents import ExecutorEvents
from PySrtgears.Helpers.Localization import _
from PySrtgears.SettingsType import SettingsError, SettingType, SettingsType
from PySrtgears.SubsPack import SubsPack
from PySrtgears.SubsStats import SubsStats
from PySrtgears.SubtitleError import ExecutorError
from PySrtgears.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySrtgears.SubtitlePosition import ParsePos


class Operation(Enum):
    """
    Transformations the executor can perform, in the order they are applied
    """
    Concatenate = 1
    Merge = 2
    Lengthen = 3
    RemoveControl = 4
    RemoveHI = 5
    RemoveHTML = 6
    SetPos = 7
    SetColor = 8
    Scale = 9
    Shift = 10
    Split = 11
    Stats = 12


@dataclass
class ExecutorOutput:
    path: str
    pack: SubsPack


@dataclass
class ExecutorResult:
    """
    Outcome of GearIt: the packs to write (zero, one or two), and the statistics if they were requested
    """
    modified: bool = False
    operations: list[Operation] = field(default_factory=list)
    outputs: list[ExecutorOutput] = field(default_factory=list)
    stats: SubsStats|None = None


class Executor:
    """
    Performs the subtitle transformations described by a flat set of options.

    Options (an operation runs only if its option is present and not empty, zero or False):
        in, in2: input file names (the second when concatenating or merging)
        out, out2: output file names, *.srt or *.ssa (the second when splitting)
        concat: concatenate 'in2' to 'in', the second part starting at e.g. '00:59:00,123'
        merge: merge 'in' (bottom) and 'in2' (top) into a dual subtitle
        split_at: split into 'out' and 'out2' at e.g. '00:59:00,123'
        shift_by: shift timestamps by +/- milliseconds
        scale: scale timestamps by a factor, e.g. 1.001
        lengthen: lengthen/shorten display durations by a factor, e.g. 1.1 for +10%
        remove_html: strip formatting such as <i>, <b>, <u>, <font>
        remove_ctrl: remove controls such as {\\anX}, {\\aX}, {\\pos(x,y)}
        remove_hi: remove hearing impaired lines such as '[PHONE RINGING]' or '(phone ringing)'
        pos: change the position, one of BL, B, BR, L, C, R, TL, T, TR
        color: change the color, a name (e.g. 'red') or RGB hex '#rrggbb'
        stats: analyse the subtitles and report statistics
        debug: report problems found in the input files

    The packs to operate on can be assigned to sp1 and sp2 or loaded with LoadInputs.
    """

    def __init__(self, options : Mapping[str, SettingType]|None = None, events : ExecutorEvents|None = None):
        self.options : SettingsType = SettingsType(options)
        self.events : ExecutorEvents = events or ExecutorEvents()
        self.sp1 : SubsPack|None = None
        self.sp2 : SubsPack|None = None

    @property
    def input_path(self) -> str|None:
        return self.options.get_str('in') or None

    @property
    def input2_path(self) -> str|None:
        return self.options.get_str('in2') or None

    @property
    def output_path(self) -> str|None:
        return self.options.get_str('out') or None

    @property
    def output2_path(self) -> str|None:
        return self.options.get_str('out2') or None

    @property
    def debug(self) -> bool:
        try:
            return self.options.get_bool('debug')
        except SettingsError as e:
            raise ExecutorError(_("Invalid option value"), e)

    def LoadInputs(self) -> None:
        """
        Load the input files named in the options, unless the packs have already been assigned
        """
        if self.sp1 is None and self.input_path:
            self.sp1 = self._load(self.input_path)

        if self.sp2 is None and self.input2_path:
            self.sp2 = self._load(self.input2_path)

    def GearIt(self) -> ExecutorResult:
        """
        Validate the options and perform the requested transformations in a fixed order.

        Raises ExecutorError if the options cannot be executed, before any subtitles are modified.
        """
        sp1 = self.sp1
        if sp1 is None:
            raise ExecutorError(_("Input file must be specified ('in')!"))

        plan = self._plan(sp1)
        operations = [ operation for operation, _action in plan ]
        modified = any(operation != Operation.Stats for operation in operations)
        stats_requested = Operation.Stats in operations

        self._validate_outputs(modified, stats_requested, Operation.Split in operations)

        result = ExecutorResult(modified=modified, operations=operations)

        for operation, action in plan:
            if operation == Operation.Split:
                self.sp2 = action()
            elif operation == Operation.Stats:
                result.stats = action()
            else:
                action()

            self.events.operation_applied.send(self, operation=operation)

        if self.output_path:
            result.outputs.append(ExecutorOutput(self.output_path, sp1))

        if self.output2_path:
            if Operation.Split in operations and self.sp2 is not None:
                result.outputs.append(ExecutorOutput(self.output2_path, self.sp2))
            else:
                self.events.warning.send(self, message=_("2nd output file is only written when splitting ('split_at'), ignoring {}").format(self.output2_path))

        if not operations and not result.outputs:
            self.events.info.send(self, message=_("Nothing to do"))

        return result

    def WriteOutputs(self, result : ExecutorResult) -> None:
        """
        Save the result packs, using the file format matching each output's extension
        """
        for output in result.outputs:
            handler = SubtitleFormatRegistry.create_handler(filename=output.path, debug=self.debug)
            logging.info(_("Saving subtitles to {}").format(output.path))
            handler.save_file(output.pack, output.path)

    def _load(self, path : str) -> SubsPack:
        handler = SubtitleFormatRegistry.create_handler(filename=path, debug=self.debug)
        logging.info(_("Loading subtitles from {}").format(path))
        return handler.load_file(path)

    def _plan(self, sp1 : SubsPack) -> list[tuple[Operation, Callable]]:
        """
        Resolve the option values and build the list of operations to apply, in order
        """
        plan : list[tuple[Operation, Callable]] = []
        try:
            concat = self._get_time('concat')
            merge = self.options.get_bool('merge')
            sp2 = self.sp2
            if (concat is not None or merge) and sp2 is None:
                raise ExecutorError(_("2nd input file must be specified ('in2')!"))

            if concat is not None and sp2 is not None:
                plan.append((Operation.Concatenate, lambda: sp1.Concatenate(sp2, concat)))

            if merge and sp2 is not None:
                plan.append((Operation.Merge, lambda: sp1.Merge(sp2)))

            lengthen = self.options.get_float('lengthen')
            if lengthen:
                plan.append((Operation.Lengthen, lambda: sp1.Lengthen(lengthen)))

            if self.options.get_bool('remove_ctrl'):
                plan.append((Operation.RemoveControl, sp1.RemoveControl))

            if self.options.get_bool('remove_hi'):
                plan.append((Operation.RemoveHI, sp1.RemoveHI))

            if self.options.get_bool('remove_html'):
                plan.append((Operation.RemoveHTML, sp1.RemoveHTML))

            pos_token = self.options.get_str('pos')
            if pos_token:
                try:
                    pos = ParsePos(pos_token)
                except ValueError:
                    raise ExecutorError(_("Invalid pos value: {}").format(pos_token))
                plan.append((Operation.SetPos, lambda: sp1.SetPos(pos)))

            color = self.options.get_str('color')
            if color:
                plan.append((Operation.SetColor, lambda: sp1.SetColor(color)))

            scale = self.options.get_float('scale')
            if scale:
                plan.append((Operation.Scale, lambda: sp1.Scale(scale)))

            shift_by = self.options.get_int('shift_by')
            if shift_by:
                plan.append((Operation.Shift, lambda: sp1.Shift(timedelta(milliseconds=shift_by))))

            split_at = self._get_time('split_at')
            if split_at is not None:
                plan.append((Operation.Split, lambda: sp1.Split(split_at)))

            if self.options.get_bool('stats'):
                # Gathering statistics strips formatting, so it is done on a copy to keep the outputs intact
                plan.append((Operation.Stats, lambda: deepcopy(sp1).Stats()))

        except SettingsError as e:
            raise ExecutorError(_("Invalid option value"), e)

        return plan

    def _get_time(self, key : str) -> timedelta|None:
        value = self.options.get(key)
        if value is None or value == "":
            return None

        try:
            return self.options.get_timedelta(key)
        except SettingsError:
            raise ExecutorError(_("Invalid time for {key}: {value}").format(key=key, value=value))

    def _validate_outputs(self, modified : bool, stats_requested : bool, split_requested : bool) -> None:
        out, out2 = self.output_path, self.output2_path

        if modified and not out and not stats_requested:
            raise ExecutorError(_("Output file must be specified ('out')!"))

        if split_requested and not out2:
            raise ExecutorError(_("2nd output file must be specified ('out2') when splitting!"))

        for path in (out, out2):
            if path and not SubtitleFormatRegistry.is_supported(path):
                raise ExecutorError(_("Unsupported output file extension, only {formats} are supported: {path}").format(
                    formats=SubtitleFormatRegistry.list_available_formats(), path=path))

        if out and out2 and out == out2:
            raise ExecutorError(_("The 2 output file names cannot be the same!"))


def FormatStats(stats : SubsStats, name : str|None = None) -> str:
    """
    Render statistics as a plain text report
    """
    rows : list[tuple[str, object]] = [
        ("Total # of subtitles", stats.subs),
        ("Lines", stats.lines),
        ("Avg lines per sub", f"{stats.avg_lines_per_sub:.4f}"),
        ("Chars (with spaces)", stats.chars),
        ("Chars (without spaces)", stats.chars_no_space),
        ("Avg chars (no space) per line", f"{stats.avg_chars_per_line:.4f}"),
        ("Words", stats.words),
        ("Avg words per line", f"{stats.avg_words_per_line:.4f}"),
        ("Avg chars per word", f"{stats.avg_chars_per_word:.4f}"),
        ("Total subtitle display time", stats.total_disp_dur),
        ("Subtitle visible ratio", f"{stats.sub_visib_ratio * 100:.2f}% (compared to total length)"),
        ("Avg. display duration", f"{stats.avg_disp_dur_per_non_space_char} per 1 non-space char"),
        ("Subs with HTML formatting", stats.htmls),
        ("Subs with controls", stats.controls),
        ("Subs with hearing impaired", stats.his),
    ]

    lines = [ f"STATS of {name}:" if name else "STATS:" ]
    lines.extend(f"{label:<29}: {value}" for label, value in rows)
    return "\n".join(lines)
