from typing import TextIO

# Subtitle files are always written with Windows-style newlines
newline = "\r\n"

class SubtitleWriter:
    """
    Writes to a text stream, remembering the first error.

    Once a write has failed nothing more is written, so a codec can emit a whole
    record and check for an error afterwards.
    """
    def __init__(self, stream : TextIO):
        self.stream : TextIO = stream
        self.error : OSError|None = None

    @property
    def failed(self) -> bool:
        return self.error is not None

    def write(self, *parts : object) -> None:
        if self.error is None:
            try:
                self.stream.write("".join(str(part) for part in parts))
            except OSError as e:
                self.error = e

    def writeline(self, *parts : object) -> None:
        self.write(*parts, newline)
