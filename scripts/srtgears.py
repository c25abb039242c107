import logging
import sys

from check_imports import check_required_imports
check_required_imports(['PySrtgears', 'srt', 'pysubs2', 'regex', 'blinker'])

from scripts.srtgears_common import (
    InitLogger,
    CreateArgParser,
    CreateOptions,
    HandleFormatListing,
)

from PySrtgears import init_executor
from PySrtgears.Executor import Executor, FormatStats
from PySrtgears.SubtitleError import SubtitleError

parser = CreateArgParser("Performs transformations on subtitle files")
args = parser.parse_args()

HandleFormatListing(args)

logger_options = InitLogger("srtgears", args.debug)

try:
    executor : Executor = init_executor(CreateOptions(args))
    executor.events.connect_default_loggers()

    result = executor.GearIt()

    if result.stats:
        print(FormatStats(result.stats, executor.input_path))

    executor.WriteOutputs(result)

except SubtitleError as e:
    logging.error(str(e))
    print("Error:", e)
    sys.exit(1)
