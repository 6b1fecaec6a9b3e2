"""Conversion between frame numbers and timecode fields."""

from __future__ import annotations

from .errors import DroppedFrameError, FrameNumberOutOfRangeError, InvalidTimecodeError
from .frame_rate import RateDescriptor


def timecode_to_frame_number(
    rate: RateDescriptor, hour: int, minute: int, second: int, frame: int
) -> int:
    """Convert timecode fields to the 0-based frame number.

    Args:
        rate (RateDescriptor): The frame rate of the timecode.
        hour (int): The hours part of the timecode, 0-23.
        minute (int): The minutes part of the timecode, 0-59.
        second (int): The seconds part of the timecode, 0-59.
        frame (int): The frames part of the timecode, smaller than the fps.

    Raises:
        TypeError: If any of the fields is not an int.
        InvalidTimecodeError: If a field is out of range.
        DroppedFrameError: If the fields name a frame that drop-frame timecode
            skips, e.g. 00:01:00;00 at 29.97.

    Returns:
        int: The number of frames elapsed since 00:00:00:00.
    """
    for name, value, limit in (
        ("hour", hour, 24),
        ("minute", minute, 60),
        ("second", second, 60),
        ("frame", frame, rate.fps),
    ):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(
                f"The {name} of a timecode should be an int, "
                f"not a {value.__class__.__name__}"
            )
        if not 0 <= value < limit:
            raise InvalidTimecodeError(
                f"Invalid {name}: {value} is not in the range 0-{limit - 1}.", field=name
            )

    drop_frames = rate.drop_frame_count
    if rate.drop_frame and second == 0 and minute % 10 != 0 and frame < drop_frames:
        raise DroppedFrameError(
            f"Frame {frame} does not exist at {hour:02d}:{minute:02d}:00, drop frame "
            f"timecode skips frames 0-{drop_frames - 1} at the start of this minute.",
            field="frame",
        )

    frame_number = (
        (rate.frames_per_hour * hour)
        + (rate.frames_per_minute * minute)
        + (rate.fps * second)
        + frame
    )

    if rate.drop_frame:
        # every minute drops frames, except the first one of each ten minutes
        tens = hour * 6 + minute // 10
        frame_number -= (tens * 9 * drop_frames) + (minute % 10) * drop_frames

    return frame_number


def frame_number_to_timecode(
    rate: RateDescriptor, frame_number: int
) -> tuple[int, int, int, int]:
    """Convert a 0-based frame number back to timecode fields.

    Args:
        rate (RateDescriptor): The frame rate of the timecode.
        frame_number (int): A frame number in the range [0, rate.max_frames).
            Use :func:`normalize_frame_number` first for arbitrary values.

    Raises:
        FrameNumberOutOfRangeError: If the frame number is out of range.

    Returns:
        tuple: A tuple containing the hours, minutes, seconds and frames.
    """
    if not 0 <= frame_number < rate.max_frames:
        raise FrameNumberOutOfRangeError(
            f"Frame number {frame_number} is out of range, {rate.fps} fps "
            f"{'drop frame ' if rate.drop_frame else ''}timecode only supports "
            f"frame numbers up to {rate.max_frames - 1}."
        )

    fps = rate.fps

    if not rate.drop_frame:
        total_seconds, frame = divmod(frame_number, fps)
        total_minutes, second = divmod(total_seconds, 60)
        hour, minute = divmod(total_minutes, 60)
        return hour, minute, second, frame

    drop_frames = rate.drop_frame_count
    frames_per_drop_minute = rate.frames_per_minute - drop_frames
    frames_per_ten_minutes = rate.frames_per_minute + frames_per_drop_minute * 9
    frames_per_hour = frames_per_ten_minutes * 6

    hour, remainder = divmod(frame_number, frames_per_hour)
    tens, remainder = divmod(remainder, frames_per_ten_minutes)

    if remainder < rate.frames_per_minute:
        minute = tens * 10
    else:
        dropped_minutes, remainder = divmod(
            remainder - rate.frames_per_minute, frames_per_drop_minute
        )
        minute = tens * 10 + 1 + dropped_minutes
        # labels restart after the skipped ones
        remainder += drop_frames

    second, frame = divmod(remainder, fps)
    return hour, minute, second, frame


def normalize_frame_number(rate: RateDescriptor, frame_number: int) -> int:
    """Wrap any frame number into the 24 hour range of the rate.

    Negative values count back from the end of the day, so -1 is the last
    frame of 23:59:59.

    Args:
        rate (RateDescriptor): The frame rate of the timecode.
        frame_number (int): Any frame number.

    Returns:
        int: A frame number in the range [0, rate.max_frames).
    """
    if isinstance(frame_number, bool) or not isinstance(frame_number, int):
        raise TypeError(
            f"A frame number should be an int, not a {frame_number.__class__.__name__}"
        )
    # floored modulo, so negative values wrap forward
    return frame_number % rate.max_frames
