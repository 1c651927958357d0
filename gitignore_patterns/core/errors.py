"""Errors raised by the gitignore pattern library."""


class FileAccessError(FileNotFoundError):
    """Raised when an ignore file path does not exist."""

    def __init__(self, filepath):
        self.filepath = filepath
        super().__init__(f'"{filepath}": invalid file path.')
