import logging

import numpy as np
import pytest

from amc_preproc.smoothing import smooth_angle_channels, unwrap_channel


def test_unwrap_channel_shifts_all_following_samples() -> None:
    values = np.array([170.0, 178.0, -178.0, -170.0, -160.0])

    out, shifted = unwrap_channel(values)

    assert shifted
    np.testing.assert_allclose(out, [170.0, 178.0, 182.0, 190.0, 200.0])


def test_unwrap_channel_handles_downward_wrap() -> None:
    values = np.array([-175.0, -179.0, 179.0, 170.0])

    out, shifted = unwrap_channel(values)

    assert shifted
    np.testing.assert_allclose(out, [-175.0, -179.0, -181.0, -190.0])


def test_unwrap_channel_accumulates_multiple_wraps() -> None:
    values = np.array([0.0, 170.0, -20.0, 150.0, -40.0])

    out, _ = unwrap_channel(values)

    np.testing.assert_allclose(out, [0.0, 170.0, 340.0, 510.0, 680.0])


def test_unwrap_channel_leaves_smooth_signal_alone() -> None:
    values = np.array([10.0, 20.0, 30.0, 20.0])

    out, shifted = unwrap_channel(values)

    assert not shifted
    np.testing.assert_array_equal(out, values)


def test_smooth_angle_channels_is_per_channel(caplog) -> None:
    data = np.array(
        [
            [178.0, 1.0],
            [-178.0, 2.0],
            [-176.0, 3.0],
        ]
    )
    original = data.copy()

    with caplog.at_level(logging.WARNING, logger="amc_preproc.smoothing"):
        smoothed, names = smooth_angle_channels(data, ["lhumerus.rz", "root.ty"])

    assert names == ["lhumerus.rz"]
    np.testing.assert_allclose(smoothed[:, 0], [178.0, 182.0, 184.0])
    np.testing.assert_array_equal(smoothed[:, 1], [1.0, 2.0, 3.0])
    np.testing.assert_array_equal(data, original)
    assert "lhumerus.rz" in caplog.text


def test_smooth_angle_channels_is_idempotent() -> None:
    rng = np.random.default_rng(0)
    steps = rng.uniform(-20.0, 20.0, size=(200, 3))
    wrapped = (np.cumsum(steps, axis=0) + 180.0) % 360.0 - 180.0

    once, _ = smooth_angle_channels(wrapped, ["a", "b", "c"])
    twice, names = smooth_angle_channels(once, ["a", "b", "c"])

    assert names == []
    np.testing.assert_array_equal(once, twice)
    assert np.abs(np.diff(once, axis=0)).max() < 180.0


def test_smooth_angle_channels_rejects_mismatched_names() -> None:
    with pytest.raises(ValueError):
        smooth_angle_channels(np.zeros((3, 2)), ["only_one"])
