from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

import numpy as np

from .config import KEY_FILENAME
from .errors import FormatError
from .key_io import read_channel_names

logger = logging.getLogger(__name__)

HEADER_END_MARKER = ":DEGREES"


@dataclass
class AMCMotion:
    """Container for the channels decoded from one AMC recording."""

    frames: np.ndarray  # shape: (num_frames, num_channels)
    channel_names: List[str]
    joint_names: List[str]  # joint order seen in the first frame
    frame_numbers: List[str]
    metadata: Dict[str, str]

    @property
    def num_frames(self) -> int:
        return int(self.frames.shape[0])

    @property
    def num_channels(self) -> int:
        return int(self.frames.shape[1])

    def channel_index(self, channel_name: str) -> int:
        """Return the column index of the named channel."""
        if channel_name not in self.channel_names:
            raise KeyError(f"Unknown AMC channel: {channel_name}")
        return self.channel_names.index(channel_name)

    def channel(self, channel_name: str) -> np.ndarray:
        """Return the samples of one channel as an array of shape (num_frames,)."""
        return self.frames[:, self.channel_index(channel_name)]


def _is_frame_marker(line: str) -> bool:
    return len(line.split()) == 1


def _read_frame_rows(path: Path) -> tuple[List[List[float]], List[str], List[int], List[str]]:
    """
    Read every frame after the ":DEGREES" header marker.

    Returns:
        rows, frame_numbers, frame_line_numbers, first_frame_joint_names
    """
    rows: List[List[float]] = []
    frame_numbers: List[str] = []
    frame_lines: List[int] = []
    joint_names: List[str] = []

    with path.open("r", encoding="utf-8", errors="ignore") as fh:
        line_number = 0
        for line in fh:
            line_number += 1
            if line.strip() == HEADER_END_MARKER:
                break
        else:
            raise FormatError(f"Missing '{HEADER_END_MARKER}' header marker", path=str(path))

        for line in fh:
            line_number += 1
            stripped = line.strip()
            if not stripped:
                continue

            if _is_frame_marker(stripped):
                # New frame: values append from column 0 again.
                rows.append([])
                frame_numbers.append(stripped)
                frame_lines.append(line_number)
                continue

            if not rows:
                raise FormatError(
                    "Joint data found before the first frame marker",
                    path=str(path),
                    line_number=line_number,
                    line=stripped,
                )

            parts = stripped.split()
            try:
                values = [float(token) for token in parts[1:]]
            except ValueError as exc:
                raise FormatError(
                    "Could not parse joint values",
                    path=str(path),
                    line_number=line_number,
                    line=stripped,
                ) from exc

            if not np.isfinite(values).all():
                raise FormatError(
                    "Joint values must be finite numbers",
                    path=str(path),
                    line_number=line_number,
                    line=stripped,
                )

            if len(rows) == 1:
                joint_names.append(parts[0])
            rows[-1].extend(values)

    return rows, frame_numbers, frame_lines, joint_names


def _trim_trailing_empty_frames(
    rows: List[List[float]], frame_numbers: List[str], frame_lines: List[int], path: Path
) -> None:
    dropped = 0
    while rows and not rows[-1]:
        rows.pop()
        frame_numbers.pop()
        frame_lines.pop()
        dropped += 1
    if dropped:
        logger.warning("%s: dropped %d trailing frame marker(s) with no joint data", path.name, dropped)


def load_amc(path: str | Path, key_filename: str = KEY_FILENAME) -> AMCMotion:
    """
    Load an AMC file and return every channel as an AMCMotion.

    The AMC file only supplies numbers. Channel names come from the key file
    living next to it:
        /path/to/dataset/amc/<subjectID>_<trialID>.amc
        /path/to/dataset/amc/SkeletonJoints.key

    After the ":DEGREES" header marker, the file alternates frame markers
    (a single token such as "1") with joint lines
    ("<joint> <v1> ... <vk>"); k varies between joints, so values are simply
    appended to the current frame's row in file order.
    """
    path = Path(path)
    rows, frame_numbers, frame_lines, joint_names = _read_frame_rows(path)
    _trim_trailing_empty_frames(rows, frame_numbers, frame_lines, path)

    key_path = path.parent / key_filename
    channel_names = read_channel_names(key_path)

    num_channels = max((len(row) for row in rows), default=len(channel_names))
    for frame_idx, row in enumerate(rows):
        if len(row) != num_channels:
            raise FormatError(
                f"Frame {frame_numbers[frame_idx]} has {len(row)} values, expected {num_channels}",
                path=str(path),
                line_number=frame_lines[frame_idx],
                line=frame_numbers[frame_idx],
            )

    if num_channels != len(channel_names):
        raise FormatError(
            f"Decoded {num_channels} values per frame but {key_path.name} "
            f"defines {len(channel_names)} channels",
            path=str(path),
        )

    data = np.asarray(rows, dtype=float).reshape(len(rows), num_channels)

    logger.debug(
        "Decoded %s: %d frames x %d channels", path.name, data.shape[0], data.shape[1]
    )

    metadata = {
        "source_path": str(path),
        "key_path": str(key_path),
        "frames": str(data.shape[0]),
    }

    return AMCMotion(
        frames=data,
        channel_names=channel_names,
        joint_names=joint_names,
        frame_numbers=frame_numbers,
        metadata=metadata,
    )


def read_data_matrix(path: str | Path, key_filename: str = KEY_FILENAME) -> tuple[np.ndarray, List[str]]:
    """Return the decoded (frames, channel_names) pair for an AMC file."""
    motion = load_amc(path, key_filename=key_filename)
    return motion.frames, list(motion.channel_names)


__all__ = ["AMCMotion", "HEADER_END_MARKER", "load_amc", "read_data_matrix"]
