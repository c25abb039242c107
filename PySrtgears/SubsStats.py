from dataclasses import dataclass, field
from datetime import timedelta

@dataclass(frozen=True)
class SubsStats:
    """
    Statistics gathered from a SubsPack
    """
    subs: int = 0                                   # Total number of subtitles
    lines: int = 0                                  # Number of lines
    avg_lines_per_sub: float = 0.0
    chars: int = 0                                  # Characters, spaces included
    chars_no_space: int = 0                         # Characters, spaces excluded
    avg_chars_per_line: float = 0.0                 # Non-space characters per line
    words: int = 0
    avg_words_per_line: float = 0.0
    avg_chars_per_word: float = 0.0
    total_disp_dur: timedelta = field(default_factory=timedelta)   # Total subtitle display time
    sub_visib_ratio: float = 0.0                    # Display time compared to the end of the last subtitle
    avg_disp_dur_per_non_space_char: timedelta = field(default_factory=timedelta)
    htmls: int = 0                                  # Subtitles with HTML formatting
    controls: int = 0                               # Subtitles with controls
    his: int = 0                                    # Subtitles with hearing impaired lines
