"""SMPTE timecode calculations for broadcast frame rates."""

from .conversion import (
    frame_number_to_timecode,
    normalize_frame_number,
    timecode_to_frame_number,
)
from .errors import (
    DroppedFrameError,
    FrameNumberOutOfRangeError,
    FrameRateMismatchError,
    InvalidDropFrameFormatError,
    InvalidFormatError,
    InvalidTimecodeError,
    TimecodeError,
)
from .frame_rate import FrameRate, RateDescriptor
from .notation import ParsedTimecode, format_timecode, parse_timecode
from .timecode import Timecode, TimecodeBuilder

__all__ = [
    "DroppedFrameError",
    "FrameNumberOutOfRangeError",
    "FrameRate",
    "FrameRateMismatchError",
    "InvalidDropFrameFormatError",
    "InvalidFormatError",
    "InvalidTimecodeError",
    "ParsedTimecode",
    "RateDescriptor",
    "Timecode",
    "TimecodeBuilder",
    "TimecodeError",
    "format_timecode",
    "frame_number_to_timecode",
    "normalize_frame_number",
    "parse_timecode",
    "timecode_to_frame_number",
]
