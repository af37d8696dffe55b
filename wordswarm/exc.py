from pathlib import Path


class InvalidLetter(Exception):  # noqa: N818
    """Exception raised when a keystroke is not a single character."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'"{value!s}" is not a single character')


class DictionaryLoadFailed(Exception):  # noqa: N818
    """Exception raised when a dictionary source cannot be read."""

    def __init__(self, error: Exception, path: Path):
        self.error = error
        self.path = path
        super().__init__(f"Dictionary load from {path} failed: {error}")
