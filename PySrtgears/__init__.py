"""
PySrtgears - Subtitle transformation engine

Reads SubRip subtitles, transforms them (shift, scale, lengthen, merge, concatenate,
split, remove formatting and hearing impaired lines, reposition, recolor, statistics)
and writes them as SubRip or Sub Station Alpha.

Basic Usage
-----------

# Merge two subtitles into a dual subtitle
eng = read_subtitles("eng.srt")
hun = read_subtitles("hun.srt")
eng.Merge(hun)
write_subtitles(eng, "eng+hun.srt")

# Or describe the transformations with options
executor = init_executor({'in': "movie.srt", 'out': "movie.ssa", 'shift_by': -1500, 'remove_hi': True})
result = executor.GearIt()
executor.WriteOutputs(result)
"""
from __future__ import annotations

from collections.abc import Mapping

from PySrtgears.Executor import Executor, ExecutorResult, FormatStats, Operation
from PySrtgears.ExecutorEvents import ExecutorEvents
from PySrtgears.SettingsType import SettingType, SettingsType
from PySrtgears.SubsPack import SubsPack
from PySrtgears.SubsStats import SubsStats
from PySrtgears.Subtitle import Subtitle
from PySrtgears.SubtitleError import SubtitleError
from PySrtgears.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySrtgears.SubtitlePosition import Pos
from PySrtgears.version import __version__


def read_subtitles(filepath : str, debug : bool = False) -> SubsPack:
    """
    Load subtitles from a file, using the format matching the file extension.

    Parameters
    ----------
    filepath : str
        Path to the subtitle file (only SubRip files can be read).

    debug : bool, optional
        Report problems found in the file as debug log messages.

    Returns
    -------
    SubsPack : The subtitles, sorted by appearance time.
    """
    handler = SubtitleFormatRegistry.create_handler(filename=filepath, debug=debug)
    return handler.load_file(filepath)

def parse_subtitles(content : str, format : str = '.srt', debug : bool = False) -> SubsPack:
    """
    Parse subtitles from a string in the given format (file extension).

    Examples
    --------

    pack = parse_subtitles("1\\n00:00:01,000 --> 00:00:02,000\\nHello\\n")
    """
    handler = SubtitleFormatRegistry.create_handler(extension=format, debug=debug)
    return handler.parse_string(content)

def write_subtitles(pack : SubsPack, filepath : str) -> None:
    """
    Save subtitles to a file, using the format matching the file extension (.srt or .ssa).
    """
    handler = SubtitleFormatRegistry.create_handler(filename=filepath)
    handler.save_file(pack, filepath)

def compose_subtitles(pack : SubsPack, format : str = '.srt') -> str:
    """
    Compose subtitles as a string in the given format (file extension).
    """
    handler = SubtitleFormatRegistry.create_handler(extension=format)
    return handler.compose(pack)

def init_executor(options : Mapping[str, SettingType]|None = None, *, load_inputs : bool = True) -> Executor:
    """
    Create an :class:`Executor` for a set of options, loading the input files they name.

    Parameters
    ----------
    options : Mapping
        Executor options, e.g. {'in': "movie.srt", 'out': "movie.srt", 'shift_by': 500}.
        See :class:`Executor` for available options.

    load_inputs : bool, optional
        If True (default), load the files named by 'in' and 'in2'.
    """
    executor = Executor(SettingsType(options))
    if load_inputs:
        executor.LoadInputs()
    return executor

__all__ = [
    '__version__',
    'Executor',
    'ExecutorEvents',
    'ExecutorResult',
    'FormatStats',
    'Operation',
    'Pos',
    'SettingsType',
    'SubsPack',
    'SubsStats',
    'Subtitle',
    'SubtitleError',
    'SubtitleFormatRegistry',
    'compose_subtitles',
    'init_executor',
    'parse_subtitles',
    'read_subtitles',
    'write_subtitles',
]
