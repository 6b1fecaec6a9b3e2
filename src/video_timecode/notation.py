"""Parsing and formatting of SMPTE timecode strings."""

from __future__ import annotations

import re
from typing import NamedTuple

from .errors import InvalidFormatError

_smpte_time_pattern = re.compile(
    r"(?P<hour>[0-9]{2})(?P<notation>[:;.])(?P<minute>[0-9]{2})"
    r"(?P<second_separator>[:;.])(?P<second>[0-9]{2})"
    r"(?P<frame_separator>[:;.])(?P<frame>[0-9]{2})"
)


class ParsedTimecode(NamedTuple):
    """The fields of a timecode string, not yet validated against a rate."""

    hour: int
    minute: int
    second: int
    frame: int
    drop_frame: bool


def parse_timecode(timecode: str) -> ParsedTimecode:
    """Parse the given timecode string.

    The separator between hours and minutes sets the notation. The separator
    between minutes and seconds has to repeat it, and the frame separator
    decides if this is a NDF or DF timecode::

        '00:00:00:00' NDF
        '00:00:00;00' DF
        '00:00:00.00' DF
        '00;00;00;00' DF
        '00.00.00.00' DF

    Mixed notations like '00.00:00.00' are rejected.

    Args:
        timecode (str): A SMPTE timecode string.

    Raises:
        TypeError: If timecode is not a str.
        InvalidFormatError: If the string does not follow the notation above,
            or the hour, minute or second is larger than 59.

    Returns:
        ParsedTimecode: A tuple containing the hours, minutes, seconds and
            frames part of the timecode, and whether it used drop-frame
            notation.
    """
    if not isinstance(timecode, str):
        raise TypeError(
            f"A timecode should be a str, not a {timecode.__class__.__name__}"
        )

    match = _smpte_time_pattern.fullmatch(timecode)
    if not match:
        raise InvalidFormatError(f"Parsing error while reading timecode {timecode!r}.")

    notation = match.group("notation")
    if match.group("second_separator") != notation:
        raise InvalidFormatError(f"Mixed separators in timecode {timecode!r}.")

    frame_separator = match.group("frame_separator")
    if notation == ":":
        drop_frame = frame_separator != ":"
    elif frame_separator == notation:
        drop_frame = True
    else:
        raise InvalidFormatError(f"Mixed separators in timecode {timecode!r}.")

    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    second = int(match.group("second"))
    frame = int(match.group("frame"))

    for name, value in (("hour", hour), ("minute", minute), ("second", second)):
        if value > 59:
            raise InvalidFormatError(f"The {name} is out of range in timecode {timecode!r}.")

    return ParsedTimecode(hour, minute, second, frame, drop_frame)


def format_timecode(
    hour: int, minute: int, second: int, frame: int, drop_frame: bool = False
) -> str:
    """Return the canonical string representation of a timecode.

    Args:
        hour (int): The hours portion of the timecode.
        minute (int): The minutes portion of the timecode.
        second (int): The seconds portion of the timecode.
        frame (int): The frames portion of the timecode.
        drop_frame (bool): Use ";" as the frame separator.

    Returns:
        str: 'HH:MM:SS:FF', or 'HH:MM:SS;FF' for drop frame timecodes.
    """
    frame_delimiter = ";" if drop_frame else ":"
    return f"{hour:02d}:{minute:02d}:{second:02d}{frame_delimiter}{frame:02d}"
