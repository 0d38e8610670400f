from __future__ import annotations

from pathlib import Path
from typing import List, Sequence, Tuple

import numpy as np

from .amc_io import load_amc
from .channels import select_channels
from .config import DEFAULT_INPUT_RATE, DEFAULT_OUTPUT_RATE, KEY_FILENAME
from .resample import center_and_downsample, window_size_for
from .smoothing import smooth_angle_channels


def extract(
    amc_path: str | Path,
    query_channel_names: Sequence[str] | None = None,
    output_rate: float = DEFAULT_OUTPUT_RATE,
    input_rate: float = DEFAULT_INPUT_RATE,
    key_filename: str = KEY_FILENAME,
) -> Tuple[np.ndarray, List[str]]:
    """
    Read an AMC recording into a smoothed, mean-centered, downsampled matrix.

    Example:
        Extract only foot-related channels from subject 13, trial 29:
            >>> feet = ["rtibia.rx", "rfoot.rx", "ltibia.rx", "lfoot.rx"]
            >>> data, names = extract("amc/13_29.amc", feet)

    Args:
        amc_path: path to <subjectID>_<trialID>.amc; SkeletonJoints.key must
            sit in the same directory.
        query_channel_names: channels to keep, in output column order. None keeps all.
        output_rate: desired frames per second; lower than ``input_rate``
            triggers block averaging.
        input_rate: frames per second of the AMC file (120 for mocap.cs.cmu.edu).

    Returns:
        data of shape (T, num_channels), channel_names
    """
    # Fail on bad rates before touching the file.
    window_size_for(output_rate, input_rate)

    motion = load_amc(amc_path, key_filename=key_filename)
    data, names = select_channels(motion.frames, motion.channel_names, query_channel_names)
    data, _ = smooth_angle_channels(data, names)
    data = center_and_downsample(data, output_rate, input_rate)
    return data, names


__all__ = ["extract"]
