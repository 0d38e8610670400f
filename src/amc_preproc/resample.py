from __future__ import annotations

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


def center_channels(data: np.ndarray) -> np.ndarray:
    """Subtract each column's mean so every channel is zero-mean over the recording."""
    data = np.asarray(data, dtype=float)
    if data.shape[0] == 0:
        return data.copy()
    return data - data.mean(axis=0, keepdims=True)


def window_size_for(output_rate: float, input_rate: float) -> int:
    """Return the number of input frames averaged into one output frame."""
    if output_rate <= 0 or input_rate <= 0:
        raise ValueError(
            f"Frame rates must be positive (output_rate={output_rate}, input_rate={input_rate})"
        )
    return max(1, int(math.ceil(input_rate / output_rate)))


def downsample(data: np.ndarray, output_rate: float, input_rate: float) -> np.ndarray:
    """
    Block-average a (frames, channels) matrix down to ``output_rate``.

    Consecutive, non-overlapping windows of ``ceil(input_rate / output_rate)``
    frames become one row each. Leftover frames at the end form one final row:
    averaged when there are several, passed through as-is when there is exactly
    one, and omitted when there are none.
    """
    data = np.asarray(data, dtype=float)
    window = window_size_for(output_rate, input_rate)
    if window == 1:
        return data.copy()

    logger.info(
        "Downsampling by factor of %d to get target frame rate %.2f",
        window,
        input_rate / window,
    )

    num_frames = data.shape[0]
    num_windows = num_frames // window
    remainder = num_frames - num_windows * window

    rows = [
        data[t * window : (t + 1) * window].mean(axis=0)
        for t in range(num_windows)
    ]
    if remainder > 1:
        rows.append(data[num_windows * window :].mean(axis=0))
    elif remainder == 1:
        rows.append(data[-1].copy())

    if not rows:
        return np.zeros((0, data.shape[1]), dtype=float)
    return np.vstack(rows)


def center_and_downsample(data: np.ndarray, output_rate: float, input_rate: float) -> np.ndarray:
    """Center at native resolution, then block-average to ``output_rate``."""
    return downsample(center_channels(data), output_rate, input_rate)


__all__ = ["center_channels", "window_size_for", "downsample", "center_and_downsample"]
