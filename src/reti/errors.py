# SPDX-License-Identifier: MIT

from typing import Optional


class LineSkipped(Exception):
    """
    Raised for a comment-only line.

    This is not a parse failure, callers are expected to skip the line
    without reporting it.
    """

    def __init__(self, line: str) -> None:
        super().__init__(line)
        self.line = line


class ParseError(Exception):
    """Base class for everything that can go wrong with a legacy line."""

    reason = "malformed"

    def __init__(self, text: Optional[str] = None, message: Optional[str] = None):
        self.text = text
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        pieces = [f"Parse error ({self.reason})"]
        if self.message is not None:
            pieces.append(f": {self.message}")
        if self.text is not None:
            pieces.append(f": {self.text!r}")
        return "".join(pieces)


class EmptyLineError(ParseError):
    reason = "empty"


class MalformedLineError(ParseError):
    reason = "malformed"


class DateFormatError(ParseError):
    reason = "date"


class TimeFormatError(ParseError):
    reason = "time"


class FactorFormatError(ParseError):
    reason = "factor"


class PartOrderError(ParseError):
    """A part stops before it starts. Syntactically fine, logically wrong."""

    reason = "logic"


class StorageError(Exception):
    """The snapshot file could not be opened, read or written."""

    pass


class SnapshotDecodeError(StorageError):
    """The snapshot file was read but does not describe a valid store."""

    pass
