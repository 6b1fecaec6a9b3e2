"""Timecode class for handling timecode calculations."""

# Standard Library Imports
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from .conversion import (
    frame_number_to_timecode,
    normalize_frame_number,
    timecode_to_frame_number,
)
from .errors import FrameRateMismatchError, InvalidDropFrameFormatError, TimecodeError
from .frame_rate import FrameRate
from .notation import format_timecode, parse_timecode

if TYPE_CHECKING:
    from .frame_rate import _Framerate

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

logger = logging.getLogger(__name__)


#%%
class Timecode:
    """The main timecode class.

    Does all the calculation over frames, so the main data it holds is the
    frame number, and every time it changes the hour, minute, second and frame
    fields are derived from it by using the frame rate setting. The frame
    number always stays within 24 hours, values outside of it wrap around.

    Args:
        framerate (FrameRate | Fraction | str | int | float): The frame rate
            of the Timecode instance. If a str is given it should be one of
            ['23.976', '23.98', '24', '25', '29.97', '30', '50', '59.94',
            '60']. Can not be skipped, and can not be changed later. 29.97 and
            59.94 are always drop frame.
        start_timecode (None | str | tuple | Timecode): The start timecode.
            Either a timecode string like '01:00:00;00', a tuple of (hour,
            minute, second, frame) or a Timecode with the same frame rate. It
            can be skipped and then the frame_number attribute will define the
            timecode, and if it is also skipped the default value of
            '00:00:00:00' will be used.
        frame_number (int): Timecode objects can be initialized with an
            integer number showing the 0-based frame number. Negative values
            and values past 24 hours wrap around.
    """
    def __init__(
        self,
        framerate: FrameRate | _Framerate,
        start_timecode: str | tuple[int, int, int, int] | Self | None = None,
        frame_number: int | None = None,
    ) -> None:
        self._framerate = FrameRate(framerate)

        self._dispatch_set_frames(start_timecode=start_timecode,
                                  frame_number=frame_number)
        # set a default
        if getattr(self, "_frame_number", None) is None:
            self._set_frame_number(0)

    ####

    def _dispatch_set_frames(self, **kwargs) -> None:
        """Helper to dispatch the arguments to set the Timecode frame number.

        Args:
            kwargs (dict): dictionary of possible input values to set the frame
            number. The following order of priority applies:
                1. start_timecode: Timecode string, fields or Timecode object.
                2. frame_number: frame number of the Timecode.
        """
        if (start_timecode := kwargs.get("start_timecode")) is not None:
            self._set_frame_number(self.tc_to_frames(start_timecode))
        elif (frame_number := kwargs.get("frame_number")) is not None:
            self._set_frame_number(frame_number)

    ####

    @classmethod
    def from_fields(
        cls,
        framerate: FrameRate | _Framerate,
        hour: int,
        minute: int,
        second: int,
        frame: int,
    ) -> Self:
        """Create a Timecode from its hour, minute, second and frame fields.

        Raises:
            InvalidTimecodeError: If the fields are not a valid timecode for
                the frame rate, including frames dropped by drop frame rates.

        Returns:
            Timecode: The new Timecode instance.
        """
        return cls(framerate, start_timecode=(hour, minute, second, frame))

    @classmethod
    def from_frame_number(
        cls, framerate: FrameRate | _Framerate, frame_number: int
    ) -> Self:
        """Create a Timecode from any frame number, wrapping it into 24 hours.

        Returns:
            Timecode: The new Timecode instance.
        """
        return cls(framerate, frame_number=frame_number)

    @classmethod
    def from_string(cls, framerate: FrameRate | _Framerate, timecode: str) -> Self:
        """Create a Timecode by parsing a SMPTE timecode string.

        Raises:
            InvalidFormatError: If the string is malformed.
            InvalidDropFrameFormatError: If the string uses drop frame
                notation and the frame rate is not drop frame.
            InvalidTimecodeError: If the fields are not a valid timecode for
                the frame rate.

        Returns:
            Timecode: The new Timecode instance.
        """
        return cls(framerate, start_timecode=timecode)

    @property
    def framerate(self) -> FrameRate:
        """Framerate getter.

        Returns:
            FrameRate: The Timecode framerate.
        """
        return self._framerate

    @property
    def drop_frame(self) -> bool:
        """Return True if this Timecode uses drop frame calculation."""
        return self._framerate.drop_frame

    @property
    def frame_number(self) -> int:
        """Return the 0-based frame number of the current timecode instance.

        Returns:
            int: 0-based frame number.
        """
        return self._frame_number

    def _set_frame_number(self, frame_number: int) -> None:
        """Set the frame number and the fields derived from it.

        Args:
            frame_number (int): Any integer, it is wrapped into 24 hours.
        """
        if isinstance(frame_number, bool) or not isinstance(frame_number, int):
            raise TypeError(
                f"{self.__class__.__name__}.frame_number should be an integer, "
                f"not a {frame_number.__class__.__name__}"
            )

        descriptor = self._framerate.descriptor
        normalized = normalize_frame_number(descriptor, frame_number)
        if normalized != frame_number:
            logger.debug(
                "Frame number %d wrapped around to %d at %s fps",
                frame_number, normalized, self._framerate,
            )
        fields = frame_number_to_timecode(descriptor, normalized)

        self._frame_number = normalized
        self._fields = fields

    def tc_to_frames(self, timecode: str | tuple[int, int, int, int] | Timecode) -> int:
        """Convert the given timecode to a frame number using this frame rate.

        Args:
            timecode (str | tuple | Timecode): Either a str representing a
                timecode, a tuple of (hour, minute, second, frame) or a
                Timecode instance with the same frame rate.

        Raises:
            FrameRateMismatchError: If a Timecode with a different frame rate
                is given.
            InvalidDropFrameFormatError: If the string uses drop frame
                notation and this frame rate is not drop frame.

        Returns:
            int: The frame number of the given timecode.
        """
        # timecode could be a Timecode instance
        if isinstance(timecode, Timecode):
            self._check_framerate(timecode)
            return timecode.frame_number

        if isinstance(timecode, str):
            hour, minute, second, frame, drop_frame = parse_timecode(timecode)
            if drop_frame and not self.drop_frame:
                raise InvalidDropFrameFormatError(
                    f"Timecode {timecode!r} uses drop frame notation, which is not "
                    f"supported by {self._framerate} fps."
                )
        elif isinstance(timecode, (tuple, list)) and len(timecode) == 4:
            hour, minute, second, frame = timecode
        else:
            raise TypeError(
                "A timecode should be a str, a tuple of 4 ints or a Timecode, not "
                f"a {timecode.__class__.__name__}"
            )

        return timecode_to_frame_number(
            self._framerate.descriptor, hour, minute, second, frame
        )

    @property
    def frame_delimiter(self) -> str:
        """Return correct frame deliminator symbol based on the framerate.

        Returns:
            str: The frame deliminator, ";" if this is a drop frame timecode or
                ":" in any other case.
        """
        return ";" if self.drop_frame else ":"

    def _check_framerate(self, other: Timecode) -> None:
        if other.framerate is not self._framerate:
            raise FrameRateMismatchError(
                f"Can not combine a {self._framerate} fps Timecode with a "
                f"{other.framerate} fps Timecode, use int() to combine the frame "
                "numbers explicitly."
            )

    def _frames_from(self, other: int | Timecode) -> int:
        """Return the frames to use for arithmetic with the other operand.

        Raises:
            FrameRateMismatchError: If the other is a Timecode with another
                frame rate.
            TimecodeError: If the other is not an int or Timecode.
        """
        if isinstance(other, Timecode):
            self._check_framerate(other)
            return other.frame_number
        if isinstance(other, int) and not isinstance(other, bool):
            return other
        raise TimecodeError(
            f"Type {other.__class__.__name__} not supported for arithmetic."
        )

    def next(self) -> Self:
        """Add one frame to this Timecode to go the next frame.

        Returns:
            Timecode: Returns self. So, this is the same Timecode instance with this
                one.
        """
        self.add_frames(1)
        return self

    def back(self) -> Self:
        """Subtract one frame from this Timecode to go back one frame.

        Returns:
            Timecode: Returns self. So, this is the same Timecode instance with this
                one.
        """
        self.sub_frames(1)
        return self

    def add_frames(self, frames: int) -> None:
        """Add or subtract frames from the frame number of this Timecode.

        Args:
            frames (int): The number to subtract from or add to the frame number of
                this Timecode instance.
        """
        self._set_frame_number(self._frame_number + frames)

    def sub_frames(self, frames: int) -> None:
        """Subtract frames from the frame number of this Timecode.

        Args:
            frames (int): The number to subtract from the frame number of this
                Timecode instance.
        """
        self.add_frames(-frames)

    def _comparable(self, other: int | str | Timecode | object, op: str) -> int:
        """Return the frame number to compare this Timecode to.

        Args:
            other (int | str | Timecode): Either and int representing the
                frame number, a str representing a timecode with the same frame
                rate of this one, or a Timecode with the same frame rate.
            op (str): The operator, used in the error message.
        """
        if isinstance(other, Timecode):
            self._check_framerate(other)
            return other.frame_number
        if isinstance(other, str):
            return Timecode(self._framerate, other).frame_number
        if isinstance(other, int):
            return other
        raise TypeError(
            f"'{op}' not supported between instances of 'Timecode' and "
            f"'{other.__class__.__name__}'"
        )

    def __eq__(self, other: int | str | Timecode | object) -> bool:
        """Override the equality operator.

        Args:
            other (int | str | Timecode): Either and int representing the
                frame number, a str representing the timecode with the same
                frame rate of this one, or a Timecode to compare with.

        Returns:
            bool: True if the other is equal to this Timecode instance. Timecodes
                with different frame rates are never equal.
        """
        if isinstance(other, Timecode):
            return (
                self._framerate is other.framerate
                and self._frame_number == other.frame_number
            )
        if isinstance(other, (str, int)):
            return self._frame_number == self._comparable(other, "==")
        return False

    def __ge__(self, other: int | str | Timecode) -> bool:
        return self._frame_number >= self._comparable(other, ">=")

    def __gt__(self, other: int | str | Timecode) -> bool:
        return self._frame_number > self._comparable(other, ">")

    def __le__(self, other: int | str | Timecode) -> bool:
        return self._frame_number <= self._comparable(other, "<=")

    def __lt__(self, other: int | str | Timecode) -> bool:
        return self._frame_number < self._comparable(other, "<")

    def __add__(self, other: int | Timecode) -> Timecode:
        """Return a new Timecode with the given timecode or frames added to this one.

        Args:
            other (int | Timecode): Either and int value or a Timecode with the
                same frame rate in which the frame number is used for the
                calculation.

        Raises:
            FrameRateMismatchError: If the other Timecode has another frame rate.
            TimecodeError: If the other is not an int or Timecode.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return Timecode(
            self._framerate, frame_number=self._frame_number + self._frames_from(other)
        )

    def __sub__(self, other: int | Timecode) -> Timecode:
        """Return a new Timecode instance with subtracted value.

        Args:
            other (int | Timecode): The number to subtract, either an integer or
                another Timecode with the same frame rate in which the frame
                number is subtracted. The result wraps around 00:00:00:00.

        Raises:
            FrameRateMismatchError: If the other Timecode has another frame rate.
            TimecodeError: If the other is not an int or Timecode.

        Returns:
            Timecode: The resultant Timecode instance.
        """
        return Timecode(
            self._framerate, frame_number=self._frame_number - self._frames_from(other)
        )

    def __iadd__(self, other: int | Timecode) -> Self:
        self.add_frames(self._frames_from(other))
        return self

    def __isub__(self, other: int | Timecode) -> Self:
        self.sub_frames(self._frames_from(other))
        return self

    def __int__(self) -> int:
        """Return the frame number, to combine Timecodes of different rates."""
        return self._frame_number

    def __str__(self) -> str:
        """Return the actual Timecode as a string.

        Returns:
            str: The string of this Timecode.
        """
        return format_timecode(*self._fields, drop_frame=self.drop_frame)

    def __repr__(self) -> str:
        """Return the string representation of this Timecode instance.

        Returns:
            str: The string representation of this Timecode instance.
        """
        return (
            f"{__class__.__name__}('{self._framerate}', "
            f"frame_number={self._frame_number})"
        )

    @property
    def fields(self) -> tuple[int, int, int, int]:
        """Return the hours, minutes, seconds and frames of the timecode."""
        return self._fields

    @property
    def hour(self) -> int:
        """Return the hours part of the timecode.

        Returns:
            int: The hours part of the timecode.
        """
        return self._fields[0]

    @property
    def minute(self) -> int:
        """Return the minutes part of the timecode.

        Returns:
            int: The minutes part of the timecode.
        """
        return self._fields[1]

    @property
    def second(self) -> int:
        """Return the seconds part of the timecode.

        Returns:
            int: The seconds part of the timecode.
        """
        return self._fields[2]

    @property
    def frame(self) -> int:
        """Return the frames part of the timecode.

        Returns:
            int: The frames part of the timecode.
        """
        return self._fields[3]
####

#%%
class TimecodeBuilder:
    """Helper class to pre-configure instantiation of Timecodes.

    A list of kwargs of class Timecode can be provided to the builder, which
    will be used when the builder instance is called to create new Timecodes::

        ntsc = TimecodeBuilder(framerate="29.97")
        tc = ntsc("01:00:00;00")

    Args:
        kwargs (dict): list of pre-configured arguments for the Timecodes
        instantiated by calling this builder. Refer to Timecode docu.
    """

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs

    def __call__(self, *args, **kwargs) -> Timecode:
        """Create a Timecode combining the preconfigured and user arguments.

        Positional arguments after the frame rate are passed on, so a builder
        with a frame rate takes the start timecode as its first argument.

        Returns:
            Timecode: timecode instance given the arguments.
        """
        kwargs = self.kwargs | kwargs
        if "framerate" in kwargs and args:
            if "start_timecode" in kwargs:
                raise TypeError("Got multiple values for argument 'start_timecode'")
            kwargs["start_timecode"] = args[0]
            args = args[1:]
        return Timecode(*args, **kwargs)
####
