import os
import logging

from argparse import ArgumentParser, Namespace
from dataclasses import dataclass

from PySrtgears.SettingsType import SettingsType
from PySrtgears.SubtitleFormatRegistry import SubtitleFormatRegistry
from PySrtgears.version import __version__, home_page

config_dir = os.getenv('SRTGEARS_CONFIG_DIR') or os.path.join(os.path.expanduser("~"), ".srtgears")

@dataclass
class LoggerOptions():
    file_handler: logging.FileHandler|None
    log_path: str

def InitLogger(logfilename: str, debug: bool = False) -> LoggerOptions:
    """ Initialise the logger with a file handler and return the path to the log file """
    log_path = os.path.join(config_dir, f"{logfilename}.log")
    file_handler = None

    if debug:
        logging_level = logging.DEBUG
    else:
        level_name = os.getenv('LOG_LEVEL', 'WARNING').upper()
        logging_level = getattr(logging, level_name, logging.WARNING)

    # Create console logger
    try:
        logging.basicConfig(format='%(levelname)s: %(message)s', encoding='utf-8', level=logging_level)
        logging.info("Initialising log")

    except Exception as e:
        logging.basicConfig(format='%(levelname)s: %(message)s', level=logging_level)
        logging.info("Unable to write to utf-8 log, falling back to default encoding")

    if debug:
        logging.debug("Debug logging enabled")

    # Create file handler with the same logging level
    try:
        os.makedirs(config_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding='utf-8', mode='w')
        file_handler.setLevel(logging_level)
        formatter = logging.Formatter('%(levelname)s: %(message)s')
        file_handler.setFormatter(formatter)
        logging.getLogger('').addHandler(file_handler)
    except OSError as e:
        logging.warning(f"Unable to create log file at {log_path}: {e}")

    return LoggerOptions(file_handler=file_handler, log_path=log_path)

def CreateArgParser(description : str) -> ArgumentParser:
    """
    Create the arg parser for the subtitle transformation options
    """
    parser = ArgumentParser(description=description, epilog=f"Srtgears {__version__}, home page: {home_page}")
    parser.add_argument('-in', '--in', dest='input', help="Input file name (*.srt)")
    parser.add_argument('-out', '--out', dest='output', help="Output file name (*.srt or *.ssa)")
    parser.add_argument('-in2', '--in2', dest='input2', help="Optional 2nd input file name (when merging or concatenating subtitles) (*.srt)")
    parser.add_argument('-out2', '--out2', dest='output2', help="Optional 2nd output file name (when splitting) (*.srt or *.ssa)")
    parser.add_argument('--debug', action='store_true', help="Print debug messages")
    parser.add_argument('--concat', type=str, default=None, help="Concatenate 2 subtitle files, 2nd part start at e.g. '00:59:00,123'")
    parser.add_argument('--merge', action='store_true', help="Merge 2 subtitle files ('-in' at bottom, '-in2' at top)")
    parser.add_argument('--splitAt', dest='split_at', type=str, default=None, help="Time where to split to 2 subtitle files ('-out' and '-out2'), e.g. '00:59:00,123'")
    parser.add_argument('--shiftBy', dest='shift_by', type=int, default=None, help="Shift subtitle timestamps (+/- ms)")
    parser.add_argument('--scale', type=float, default=None, help="Scale subtitle timestamps (faster/slower); multiplier e.g. 1.001")
    parser.add_argument('--lengthen', type=float, default=None, help="Lengthen / shorten display duration of subtitles, multiplier e.g. for +10%% use 1.1")
    parser.add_argument('--removehtml', dest='remove_html', action='store_true', help="Strip off formatting (e.g. <i>, <b>, <u>, <font> etc.)")
    parser.add_argument('--removectrl', dest='remove_ctrl', action='store_true', help="Remove controls such as {\\anX} (or {\\aY}), {\\pos(x,y)}")
    parser.add_argument('--removehi', dest='remove_hi', action='store_true', help="Remove hearing impaired subtitles (such as '[PHONE RINGING]' or '(phone ringing)')")
    parser.add_argument('--pos', type=str, default=None, help="Change subtitle position, one of: BL, B, BR, L, C, R, TL, T, TR  (B: bottom, T: Top, L: Left, R: Right, C: Center)")
    parser.add_argument('--color', type=str, default=None, help="Change subtitle color, name (e.g. 'red' or 'yellow') or RGB hexa '#rrggbb' (e.g.'#ff0000' for red)")
    parser.add_argument('--stats', action='store_true', help="Analyze file and print statistics")
    parser.add_argument('--list-formats', action='store_true', help="List supported subtitle formats and exit")
    return parser

def HandleFormatListing(args: Namespace) -> None:
    """Print supported subtitle formats and exit if requested."""
    if getattr(args, "list_formats", False):
        formats = SubtitleFormatRegistry.list_available_formats()
        print(f"Supported subtitle formats: {formats}")
        raise SystemExit(0)

def CreateOptions(args: Namespace) -> SettingsType:
    """ Map the command line arguments to executor options """
    return SettingsType({
        'in': args.input,
        'out': args.output,
        'in2': args.input2,
        'out2': args.output2,
        'concat': args.concat,
        'merge': args.merge,
        'split_at': args.split_at,
        'shift_by': args.shift_by,
        'scale': args.scale,
        'lengthen': args.lengthen,
        'remove_html': args.remove_html,
        'remove_ctrl': args.remove_ctrl,
        'remove_hi': args.remove_hi,
        'pos': args.pos,
        'color': args.color,
        'stats': args.stats,
        'debug': args.debug,
    })
