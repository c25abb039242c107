class SubtitleError(Exception):
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message = message
        self.error = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message} ({str(self.error)})" if self.message else str(self.error)
        return self.message or super().__str__()

class SubtitleParseError(SubtitleError):
    """Subtitle content could not be read"""
    pass

class SubtitleWriteError(SubtitleError):
    """Writing to the output stream failed"""
    pass

class UnsupportedFormatError(SubtitleError):
    """The requested format or operation is not supported"""
    pass

class ExecutorError(SubtitleError):
    """The requested set of operations cannot be executed"""
    pass
