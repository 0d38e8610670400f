"""Exception and warning types raised while reading AMC recordings."""
from __future__ import annotations


class FormatError(ValueError):
    """Raised when a key or AMC file does not follow the expected layout."""

    def __init__(self, message: str, path: str | None = None, line_number: int | None = None, line: str | None = None) -> None:
        self.path = path
        self.line_number = line_number
        self.line = line
        location = ""
        if path is not None:
            location = f"{path}"
            if line_number is not None:
                location += f":{line_number}"
            location += ": "
        detail = f" (line: {line!r})" if line is not None else ""
        super().__init__(f"{location}{message}{detail}")


class MissingChannelWarning(UserWarning):
    """Issued when a requested channel has no match among the decoded columns."""


__all__ = ["FormatError", "MissingChannelWarning"]
