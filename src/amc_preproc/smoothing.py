"""Correction of +/-360 jumps in angle channels."""
from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

WRAP_PERIOD = 360.0


def unwrap_channel(values: np.ndarray, period: float = WRAP_PERIOD) -> Tuple[np.ndarray, bool]:
    """
    Remove wraparound jumps from one channel.

    Walks forward in time carrying a running offset. Whenever adding or
    subtracting ``period`` brings a sample closer to its (already corrected)
    predecessor, the offset changes by that amount and stays applied to every
    later sample, e.g. +178 -> -178 becomes +178 -> +182.

    Returns:
        corrected_values, was_shifted
    """
    values = np.asarray(values, dtype=float)
    out = values.copy()
    offset = 0.0
    shifted = False

    for t in range(1, out.shape[0]):
        current = values[t] + offset
        delta = current - out[t - 1]
        if abs(delta + period) < abs(delta):
            offset += period
            shifted = True
        elif abs(delta - period) < abs(delta):
            offset -= period
            shifted = True
        out[t] = values[t] + offset

    return out, shifted


def smooth_angle_channels(
    data: np.ndarray,
    channel_names: Sequence[str],
    period: float = WRAP_PERIOD,
) -> Tuple[np.ndarray, List[str]]:
    """
    Unwrap every channel of a (frames, channels) matrix independently.

    The input matrix is left untouched.

    Returns:
        smoothed_data, names of the channels that were shifted
    """
    data = np.asarray(data, dtype=float)
    if data.ndim != 2 or data.shape[1] != len(channel_names):
        raise ValueError(
            f"Matrix of shape {data.shape} does not match {len(channel_names)} channel names"
        )

    smoothed = np.empty_like(data)
    smoothed_names: List[str] = []
    for col, name in enumerate(channel_names):
        smoothed[:, col], was_shifted = unwrap_channel(data[:, col], period=period)
        if was_shifted:
            smoothed_names.append(name)

    if smoothed_names:
        logger.warning("Did some smoothing on channels %s", ", ".join(smoothed_names))

    return smoothed, smoothed_names


__all__ = ["WRAP_PERIOD", "unwrap_channel", "smooth_angle_channels"]
