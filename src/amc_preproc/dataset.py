"""
Assembly of per-recording channel matrices into a labeled sequence dataset.

Each recording becomes a MotionSequence whose rows line up with one integer
action label per downsampled timestep. The first timestep is set aside so that
autoregressive models always have a previous observation (Xprev).
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Sequence

import numpy as np
import pandas as pd

from .config import PreprocessConfig
from .errors import FormatError
from .pipeline import extract

logger = logging.getLogger(__name__)


@dataclass
class MotionSequence:
    """One recording ready for sequence models."""

    X: np.ndarray  # shape: (T, D), observation at timestep t
    Xprev: np.ndarray  # shape: (T, D), observation at timestep t - 1
    TrueZ: np.ndarray  # shape: (T,), human-annotated action label
    filename: str  # <subjectID>_<trialID>, e.g. 14_06
    framerate: float

    @property
    def num_timesteps(self) -> int:
        return int(self.X.shape[0])


def load_labels(path: str | Path) -> np.ndarray:
    """
    Read integer labels, one per downsampled timestep.

    Labels may be separated by any whitespace, so one per line, all on one
    line, or a mix of both are read the same way, in file order.
    """
    path = Path(path)
    tokens = pd.Series(path.read_text(encoding="utf-8").split(), dtype=str)
    try:
        values = pd.to_numeric(tokens, errors="raise").to_numpy(dtype=float)
    except ValueError as exc:
        raise FormatError(f"Non-numeric label: {exc}", path=str(path)) from exc

    if not np.all(np.isfinite(values)) or not np.all(values == np.round(values)):
        raise FormatError("Labels must be whole numbers", path=str(path))
    return values.astype(int)


def make_sequence(
    data: np.ndarray,
    labels: Sequence[int],
    filename: str,
    framerate: float,
) -> MotionSequence:
    """Pair a channel matrix with its labels, dropping the first timestep."""
    data = np.asarray(data, dtype=float)
    labels = np.asarray(labels, dtype=int).ravel()
    if data.shape[0] < 2:
        raise ValueError(f"{filename}: need at least 2 timesteps, got {data.shape[0]}")
    if labels.shape[0] != data.shape[0]:
        raise ValueError(
            f"{filename}: {labels.shape[0]} labels for {data.shape[0]} timesteps"
        )

    return MotionSequence(
        X=data[1:].copy(),
        Xprev=data[:-1].copy(),
        TrueZ=labels[1:].copy(),
        filename=filename,
        framerate=float(framerate),
    )


def build_dataset(
    amc_dir: str | Path,
    label_dir: str | Path,
    file_names: Sequence[str],
    config: PreprocessConfig | None = None,
) -> List[MotionSequence]:
    """
    Extract and label every recording in ``file_names``.

    Expects <amc_dir>/<name>.amc, <amc_dir>/SkeletonJoints.key and
    <label_dir>/<name>.txt. A recording that fails to load is logged and left
    out; the rest of the batch continues.
    """
    config = config or PreprocessConfig()
    amc_dir = Path(amc_dir)
    label_dir = Path(label_dir)

    sequences: List[MotionSequence] = []
    for name in file_names:
        amc_path = amc_dir / f"{name}.amc"
        label_path = label_dir / f"{name}.txt"
        try:
            data, _ = extract(
                amc_path,
                config.channel_names,
                output_rate=config.output_rate,
                input_rate=config.input_rate,
                key_filename=config.key_filename,
            )
            labels = load_labels(label_path)
            sequences.append(make_sequence(data, labels, name, config.output_rate))
        except (OSError, FormatError, ValueError) as exc:
            logger.error("Skipping recording %s: %s", name, exc)
            continue
        logger.info("Recording %s: %d timesteps", name, sequences[-1].num_timesteps)

    return sequences


def save_dataset(
    path: str | Path,
    sequences: Sequence[MotionSequence],
    channel_names: Sequence[str],
    action_names: Sequence[str],
) -> Path:
    """
    Write all sequences plus dataset-wide names to one compressed .npz file.

    Keys:
        filenames, ChannelNames, ActionNames,
        <filename>/X, <filename>/Xprev, <filename>/TrueZ, <filename>/framerate
    """
    path = Path(path)
    arrays: Dict[str, np.ndarray] = {
        "filenames": np.asarray([seq.filename for seq in sequences], dtype=str),
        "ChannelNames": np.asarray(list(channel_names), dtype=str),
        "ActionNames": np.asarray(list(action_names), dtype=str),
    }
    for seq in sequences:
        arrays[f"{seq.filename}/X"] = seq.X
        arrays[f"{seq.filename}/Xprev"] = seq.Xprev
        arrays[f"{seq.filename}/TrueZ"] = seq.TrueZ
        arrays[f"{seq.filename}/framerate"] = np.asarray(seq.framerate, dtype=float)

    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as fh:
        np.savez_compressed(fh, **arrays)
    logger.info("Saved %d sequences to %s", len(sequences), path)
    return path


def load_dataset(path: str | Path) -> tuple[List[MotionSequence], List[str], List[str]]:
    """Read a dataset written by save_dataset."""
    with np.load(Path(path), allow_pickle=False) as npz:
        filenames = [str(name) for name in npz["filenames"]]
        sequences = [
            MotionSequence(
                X=npz[f"{name}/X"],
                Xprev=npz[f"{name}/Xprev"],
                TrueZ=npz[f"{name}/TrueZ"],
                filename=name,
                framerate=float(npz[f"{name}/framerate"]),
            )
            for name in filenames
        ]
        channel_names = [str(name) for name in npz["ChannelNames"]]
        action_names = [str(name) for name in npz["ActionNames"]]
    return sequences, channel_names, action_names


__all__ = [
    "MotionSequence",
    "load_labels",
    "make_sequence",
    "build_dataset",
    "save_dataset",
    "load_dataset",
]
