from abc import ABC, abstractmethod
from io import StringIO
from typing import TextIO
import logging
import os

from PySrtgears.Helpers.Localization import _
from PySrtgears.SubsPack import SubsPack
from PySrtgears.SubtitleError import SubtitleParseError, SubtitleWriteError
from PySrtgears.SubtitleWriter import SubtitleWriter

# Subtitle files are assumed to be UTF-8
default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')


class SubtitleFileHandler(ABC):
    """
    Abstract interface for reading and writing subtitle files.

    Implementations handle format-specific operations while the transformations remain format-agnostic.
    """

    SUPPORTED_EXTENSIONS: dict[str, int] = {}

    def __init__(self, debug: bool = False):
        """
        Args:
            debug: report problems found in the input as debug log messages
        """
        self.debug : bool = debug

    @abstractmethod
    def parse_file(self, file_obj: TextIO) -> SubsPack:
        """
        Parse subtitle content from a text stream.

        Returns:
            SubsPack: Parsed subtitles, sorted by appearance time

        Raises:
            SubtitleParseError: If the stream cannot be read
            UnsupportedFormatError: If the format cannot be parsed
        """
        raise NotImplementedError

    @abstractmethod
    def write_to(self, pack: SubsPack, file_obj: TextIO) -> None:
        """
        Write subtitles to a text stream in the handler's format.

        Raises:
            SubtitleWriteError: On the first failed write, after which nothing more is written
        """
        raise NotImplementedError

    def parse_string(self, content: str) -> SubsPack:
        """
        Parse subtitle content from a string.
        """
        return self.parse_file(StringIO(content, newline=''))

    def compose(self, pack: SubsPack) -> str:
        """
        Compose subtitles into text in the handler's format.
        """
        buffer = StringIO(newline='')
        self.write_to(pack, buffer)
        return buffer.getvalue()

    def load_file(self, path: str) -> SubsPack:
        """
        Open a subtitle file and parse it.
        """
        try:
            with open(path, 'r', encoding=default_encoding, newline='') as f:
                return self.parse_file(f)
        except OSError as e:
            raise SubtitleParseError(_("Failed to read subtitle file {}").format(path), e)

    def save_file(self, pack: SubsPack, path: str) -> None:
        """
        Write subtitles to a file in the handler's format.
        """
        try:
            with open(path, 'w', encoding=default_encoding, newline='') as f:
                self.write_to(pack, f)
        except OSError as e:
            raise SubtitleWriteError(_("Failed to write subtitle file {}").format(path), e)

    def get_file_extensions(self) -> list[str]:
        """
        Get file extensions supported by this handler.
        """
        return list(self.__class__.SUPPORTED_EXTENSIONS.keys())

    def get_extension_priorities(self) -> dict[str, int]:
        """
        Get priority for each supported extension.

        Returns:
            dict: Mapping of file extensions to their priority (higher = more preferred)
        """
        return self.__class__.SUPPORTED_EXTENSIONS.copy()

    def _diagnose(self, message: str) -> None:
        if self.debug:
            logging.debug(message)

    def _raise_if_failed(self, writer: SubtitleWriter) -> None:
        if writer.error is not None:
            raise SubtitleWriteError(_("Failed to write subtitles"), writer.error)
