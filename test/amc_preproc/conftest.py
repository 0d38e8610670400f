from pathlib import Path
import sys
from typing import Sequence

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT_DIR.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


ROOT_ONLY_KEY = "# SkeletonJoints.key\n# one line per body part\nroot tx ty tz rx ry rz\n"

AMC_HEADER = "#!OML:ASF H:\\VICON\\USERDATA\\CMU\\13\\13.asf\n:FULLY-SPECIFIED\n:DEGREES\n"


def amc_text(frames: Sequence[Sequence[tuple[str, Sequence[float]]]], header: str = AMC_HEADER) -> str:
    """Render frames as AMC text; each frame is a list of (joint, values)."""
    lines = [header.rstrip("\n")]
    for frame_idx, joints in enumerate(frames, start=1):
        lines.append(str(frame_idx))
        for joint, values in joints:
            lines.append(" ".join([joint, *(f"{v:g}" for v in values)]))
    return "\n".join(lines) + "\n"


@pytest.fixture
def write_recording(tmp_path):
    """Write a key file and one AMC file into tmp_path, returning the AMC path."""

    def _write(amc: str, key: str = ROOT_ONLY_KEY, name: str = "13_29.amc") -> Path:
        (tmp_path / "SkeletonJoints.key").write_text(key, encoding="utf-8")
        amc_path = tmp_path / name
        amc_path.write_text(amc, encoding="utf-8")
        return amc_path

    return _write
