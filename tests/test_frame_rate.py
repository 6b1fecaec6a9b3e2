from fractions import Fraction

import pytest

from video_timecode import FrameRate, RateDescriptor


@pytest.mark.parametrize(
    "framerate,fps,drop_frame,max_frames",
    [
        (FrameRate.FPS_23_98, 24, False, 2073600),
        (FrameRate.FPS_24, 24, False, 2073600),
        (FrameRate.FPS_25, 25, False, 2160000),
        (FrameRate.FPS_29_97, 30, True, 2589408),
        (FrameRate.FPS_30, 30, False, 2592000),
        (FrameRate.FPS_50, 50, False, 4320000),
        (FrameRate.FPS_59_94, 60, True, 5178816),
        (FrameRate.FPS_60, 60, False, 5184000),
    ],
    ids=str,
)
def test_rate_constants(framerate: FrameRate, fps: int, drop_frame: bool, max_frames: int):
    assert framerate.fps == fps
    assert framerate.drop_frame == drop_frame
    assert framerate.max_frames == max_frames


def test_there_are_eight_rates():
    assert len(FrameRate) == 8


@pytest.mark.parametrize(
    "framerate,drop_frame_count",
    [(FrameRate.FPS_29_97, 2), (FrameRate.FPS_59_94, 4), (FrameRate.FPS_30, 0)],
    ids=str,
)
def test_drop_frame_count(framerate: FrameRate, drop_frame_count: int):
    assert framerate.descriptor.drop_frame_count == drop_frame_count


@pytest.mark.parametrize("framerate", [FrameRate.FPS_29_97, FrameRate.FPS_59_94], ids=str)
def test_drop_frame_day_is_whole_hours_of_drop_frame_minutes(framerate: FrameRate):
    d = framerate.descriptor
    frames_per_ten_minutes = d.frames_per_minute + (d.frames_per_minute - d.drop_frame_count) * 9
    assert d.max_frames == frames_per_ten_minutes * 6 * 24


@pytest.mark.parametrize(
    "value,expected",
    [
        (FrameRate.FPS_25, FrameRate.FPS_25),
        ("23.98", FrameRate.FPS_23_98),
        ("23.976", FrameRate.FPS_23_98),
        ("24", FrameRate.FPS_24),
        ("29.97", FrameRate.FPS_29_97),
        ("59.94", FrameRate.FPS_59_94),
        ("30000/1001", FrameRate.FPS_29_97),
        (Fraction(24000, 1001), FrameRate.FPS_23_98),
        ((60000, 1001), FrameRate.FPS_59_94),
        (25, FrameRate.FPS_25),
        (50, FrameRate.FPS_50),
        (60.0, FrameRate.FPS_60),
        (29.97, FrameRate.FPS_29_97),
    ],
    ids=repr,
)
def test_lookup(value: object, expected: FrameRate):
    assert FrameRate(value) is expected


@pytest.mark.parametrize(
    "value",
    [
        "ms",
        "abc",
        "",
        0,
        -24,
        29,
        1000,
        "119.88",
        (1, 0),
        None,
        True,
        # close to a supported rate, but not one
        24.5,
        "25.4",
        23.5,
        "59.6",
        (49, 2),
        "24.024",
    ],
    ids=repr,
)
def test_lookup_unsupported(value: object):
    with pytest.raises(ValueError):
        FrameRate(value)


def test_str_is_label():
    assert str(FrameRate.FPS_29_97) == "29.97"
    assert str(FrameRate.FPS_24) == "24"


def test_exact_rates():
    assert FrameRate.FPS_29_97.rate == Fraction(30000, 1001)
    assert FrameRate.FPS_23_98.rate == Fraction(24000, 1001)
    assert FrameRate.FPS_50.rate == 50


def test_23_98_uses_24_fps_counting():
    assert FrameRate.FPS_23_98 is not FrameRate.FPS_24
    assert FrameRate.FPS_23_98.fps == FrameRate.FPS_24.fps
    assert FrameRate.FPS_23_98.max_frames == FrameRate.FPS_24.max_frames


@pytest.mark.parametrize("fps", [24, 25, 50])
def test_drop_frame_needs_multiple_of_30(fps: int):
    with pytest.raises(ValueError, match="multiples of 30"):
        RateDescriptor(fps, True, Fraction(fps))


def test_descriptor_rejects_zero_fps():
    with pytest.raises(ValueError):
        RateDescriptor(0, False, Fraction(1))
