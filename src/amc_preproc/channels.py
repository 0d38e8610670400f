from __future__ import annotations

import warnings
from typing import List, Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import MissingChannelWarning


def find_channel(channel_names: Sequence[str], query: str) -> int | None:
    """Return the index of the first channel whose name starts with ``query``."""
    for idx, name in enumerate(channel_names):
        if name.startswith(query):
            return idx
    return None


def select_channels(
    data: np.ndarray,
    channel_names: Sequence[str],
    query_names: Sequence[str] | None = None,
) -> Tuple[np.ndarray, List[str]]:
    """
    Keep only the requested channels, in the order they were requested.

    Each query is a literal prefix, so "root.t" picks the first of the root
    translations. Queries without a match issue a MissingChannelWarning and
    are left out, so the result may be narrower than ``query_names``.
    """
    if query_names is None:
        return np.array(data, dtype=float, copy=True), list(channel_names)

    keep_cols: List[int] = []
    for query in query_names:
        idx = find_channel(channel_names, query)
        if idx is None:
            warnings.warn(
                f"Did not find desired channel named {query}. Skipping...",
                MissingChannelWarning,
                stacklevel=2,
            )
            continue
        keep_cols.append(idx)

    selected = np.asarray(data, dtype=float)[:, keep_cols]
    return selected, [channel_names[idx] for idx in keep_cols]


def to_frame_table(
    data: np.ndarray,
    channel_names: Sequence[str],
    framerate: float | None = None,
) -> pd.DataFrame:
    """
    Convert a channel matrix into a wide table with one column per channel.

    Columns:
        frame, [time_s,] <channel_1>, ..., <channel_D>
    """
    data = np.asarray(data, dtype=float)
    if data.ndim != 2 or data.shape[1] != len(channel_names):
        raise ValueError(
            f"Matrix of shape {data.shape} does not match {len(channel_names)} channel names"
        )

    df = pd.DataFrame(data, columns=list(channel_names))
    frames = np.arange(data.shape[0], dtype=int)
    if framerate is not None:
        df.insert(0, "time_s", frames / float(framerate))
    df.insert(0, "frame", frames)
    return df


__all__ = ["find_channel", "select_channels", "to_frame_table"]
