"""Frame rates supported for timecode calculations."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from fractions import Fraction
from typing import NewType

if sys.version_info >= (3, 11):
    _frate_type = Fraction | str | float | tuple[int, int]
else:
    from typing import Union
    _frate_type = Union[Fraction, str, float, tuple[int, int]]

_Framerate = NewType("_Framerate", _frate_type)


@dataclass(frozen=True)
class RateDescriptor:
    """Constants of a single frame rate.

    Args:
        fps (int): The nominal (integer) frame rate, i.e. 30 for 29.97.
        drop_frame (bool): True if timecodes of this rate skip frame labels at
            the start of every minute not divisible by ten.
        rate (Fraction): The exact frame rate.
    """

    fps: int
    drop_frame: bool
    rate: Fraction

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError("Invalid framerate (zero or negative).")
        if self.drop_frame and self.fps % 30 != 0:
            raise ValueError(
                f"Drop frame is only defined for multiples of 30 fps, not {self.fps}."
            )

    @property
    def frames_per_minute(self) -> int:
        """Number of frames in a minute, ignoring dropped frames."""
        return self.fps * 60

    @property
    def frames_per_hour(self) -> int:
        """Number of frames in an hour, ignoring dropped frames."""
        return self.frames_per_minute * 60

    @property
    def drop_frame_count(self) -> int:
        """Number of frame labels dropped at the start of a dropping minute.

        Returns:
            int: 2 for 29.97, 4 for 59.94 and 0 for non drop-frame rates.
        """
        return self.fps // 15 if self.drop_frame else 0

    @property
    def max_frames(self) -> int:
        """Number of valid frame numbers in a 24 hour day.

        Frames are dropped on 1296 minutes a day (every minute except the
        144 multiples of ten).

        Returns:
            int: The frame count where the timecode rolls over to 00:00:00:00.
        """
        if self.drop_frame:
            return 86400 * self.fps - 144 * (18 * (self.fps // 30))
        return 86400 * self.fps

    @property
    def is_ntsc(self) -> bool:
        """True for the 1000/1001 NTSC rates."""
        return self.rate.denominator == 1001


class FrameRate(Enum):
    """The broadcast frame rates a Timecode can use.

    Members can be looked up by label or by value::

        >>> FrameRate("29.97")
        <FrameRate.FPS_29_97: ...>
        >>> FrameRate(Fraction(24000, 1001))
        <FrameRate.FPS_23_98: ...>
    """

    FPS_23_98 = ("23.98", RateDescriptor(24, False, Fraction(24000, 1001)))
    FPS_24 = ("24", RateDescriptor(24, False, Fraction(24)))
    FPS_25 = ("25", RateDescriptor(25, False, Fraction(25)))
    FPS_29_97 = ("29.97", RateDescriptor(30, True, Fraction(30000, 1001)))
    FPS_30 = ("30", RateDescriptor(30, False, Fraction(30)))
    FPS_50 = ("50", RateDescriptor(50, False, Fraction(50)))
    FPS_59_94 = ("59.94", RateDescriptor(60, True, Fraction(60000, 1001)))
    FPS_60 = ("60", RateDescriptor(60, False, Fraction(60)))

    def __init__(self, label: str, descriptor: RateDescriptor) -> None:
        self.label = label
        self.descriptor = descriptor

    @classmethod
    def _missing_(cls, value: object) -> FrameRate | None:
        if isinstance(value, (tuple, list)):
            try:
                value = Fraction(*map(int, value))
            except (TypeError, ValueError, ZeroDivisionError):
                return None
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Fraction)):
            return None
        try:
            fps = Fraction(value)
        except (TypeError, ValueError, OverflowError, ZeroDivisionError):
            return None
        if fps <= 0:
            return None

        is_ntsc, int_fps = _check_ntsc_rate(fps)
        if not is_ntsc and fps != int_fps:
            return None
        for member in cls:
            if member.fps == int_fps and member.descriptor.is_ntsc == is_ntsc:
                return member
        return None

    @property
    def fps(self) -> int:
        return self.descriptor.fps

    @property
    def drop_frame(self) -> bool:
        return self.descriptor.drop_frame

    @property
    def max_frames(self) -> int:
        return self.descriptor.max_frames

    @property
    def rate(self) -> Fraction:
        return self.descriptor.rate

    def __str__(self) -> str:
        return self.label


def _check_ntsc_rate(fps: Fraction) -> tuple[bool, int]:
    """Check if framerate is NTSC (multiple of 24000/1001 or 30000/1001).

    NTSC rates follow the pattern: nominal_rate * 1000/1001, so both "29.97"
    and 30000/1001 are recognized as the same rate.

    Args:
        fps (Fraction): The framerate to check.

    Returns:
        tuple: (is_ntsc, int_framerate) where is_ntsc is True if this is an
            NTSC rate, and int_framerate is the rounded integer framerate.
    """
    int_fps = round(fps * 1001 / 1000)
    expected_ntsc = Fraction(int_fps * 1000, 1001)
    is_ntsc = abs(fps - expected_ntsc) < Fraction(5, 1000)
    return is_ntsc, int_fps
