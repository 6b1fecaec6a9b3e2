"""Exceptions raised by timecode conversion, parsing and arithmetic."""

from __future__ import annotations


class TimecodeError(Exception):
    """Raised when an error occurred in timecode calculation."""


class InvalidFormatError(TimecodeError, ValueError):
    """Raised when a timecode string does not follow SMPTE notation."""


class InvalidDropFrameFormatError(TimecodeError, ValueError):
    """Raised when drop-frame notation is used with a non drop-frame rate."""


class InvalidTimecodeError(TimecodeError, ValueError):
    """Raised when timecode fields are not a point on the rate's timeline.

    Args:
        message (str): The error message.
        field (str | None): Name of the offending field, one of "hour",
            "minute", "second" or "frame", if a single field is to blame.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class DroppedFrameError(InvalidTimecodeError):
    """Raised for a frame label that drop-frame timecode skips."""


class FrameNumberOutOfRangeError(TimecodeError, ValueError):
    """Raised when a frame number is outside of the 24 hour range of a rate."""


class FrameRateMismatchError(TimecodeError, TypeError):
    """Raised when Timecodes of different frame rates are combined."""
