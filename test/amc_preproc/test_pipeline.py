import numpy as np
import pytest

from amc_preproc.errors import FormatError, MissingChannelWarning
from amc_preproc.pipeline import extract

from conftest import amc_text

TWO_JOINT_KEY = "root tx ty tz rx ry rz\nlhumerus rx ry rz\n"


def test_extract_root_ty_is_centered(write_recording) -> None:
    frames = [
        [("root", [0, 0, 0, 0, 0, 0])],
        [("root", [0, 10, 0, 0, 0, 0])],
        [("root", [0, 20, 0, 0, 0, 0])],
    ]
    amc_path = write_recording(amc_text(frames))

    data, names = extract(amc_path, ["root.ty"], output_rate=3, input_rate=3)

    assert names == ["root.ty"]
    np.testing.assert_allclose(data, [[-10.0], [0.0], [10.0]])


def test_extract_smooths_before_centering(write_recording) -> None:
    rz = [176.0, 179.0, -178.0, -175.0]
    frames = [
        [("root", [0, 0, 0, 0, 0, 0]), ("lhumerus", [0, 0, value])]
        for value in rz
    ]
    amc_path = write_recording(amc_text(frames), key=TWO_JOINT_KEY)

    data, names = extract(amc_path, ["lhumerus.rz"], output_rate=120, input_rate=120)

    unwrapped = np.array([176.0, 179.0, 182.0, 185.0])
    assert names == ["lhumerus.rz"]
    np.testing.assert_allclose(data[:, 0], unwrapped - unwrapped.mean())


def test_extract_downsamples_and_narrows_on_missing_channels(write_recording) -> None:
    frames = [
        [("root", [i, 2 * i, 0, 0, 0, 0]), ("lhumerus", [0, 0, 0])]
        for i in range(25)
    ]
    amc_path = write_recording(amc_text(frames), key=TWO_JOINT_KEY)

    with pytest.warns(MissingChannelWarning):
        data, names = extract(amc_path, ["root.ty", "rfoot.rx", "root.tx"])

    assert names == ["root.ty", "root.tx"]
    # 25 frames at window 12: two full windows plus one raw trailing row.
    assert data.shape == (3, 2)
    np.testing.assert_allclose(data[:, 1], [5.5 - 12.0, 17.5 - 12.0, 24.0 - 12.0])


def test_extract_all_channels_by_default(write_recording) -> None:
    frames = [[("root", [1, 2, 3, 4, 5, 6]), ("lhumerus", [7, 8, 9])]] * 4
    amc_path = write_recording(amc_text(frames), key=TWO_JOINT_KEY)

    data, names = extract(amc_path, output_rate=120, input_rate=120)

    assert len(names) == 9
    np.testing.assert_allclose(data, 0.0)


def test_extract_without_degrees_marker_raises(write_recording) -> None:
    amc_path = write_recording(
        amc_text([[("root", [0, 0, 0, 0, 0, 0])]], header=":FULLY-SPECIFIED\n")
    )

    with pytest.raises(FormatError):
        extract(amc_path, ["root.ty"])


def test_extract_rejects_bad_rates_before_reading(tmp_path) -> None:
    with pytest.raises(ValueError):
        extract(tmp_path / "missing.amc", output_rate=0.0)
