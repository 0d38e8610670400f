"""
Preprocessing of CMU Acclaim (AMC) motion capture recordings.

This module focuses on:
    - Parsing AMC files plus their SkeletonJoints.key into a channel matrix.
    - Selecting named channels and removing 360-degree angle wraparound.
    - Mean-centering and block-averaging to a fixed frame rate.
    - Assembling labeled sequences for autoregressive sequence models.
"""

from .amc_io import AMCMotion, load_amc, read_data_matrix
from .channels import select_channels, to_frame_table
from .config import PreprocessConfig
from .dataset import (
    MotionSequence,
    build_dataset,
    load_dataset,
    load_labels,
    make_sequence,
    save_dataset,
)
from .errors import FormatError, MissingChannelWarning
from .key_io import read_channel_names
from .pipeline import extract
from .resample import center_and_downsample, center_channels, downsample
from .smoothing import smooth_angle_channels

__all__ = [
    "AMCMotion",
    "load_amc",
    "read_data_matrix",
    "read_channel_names",
    "select_channels",
    "to_frame_table",
    "smooth_angle_channels",
    "center_channels",
    "downsample",
    "center_and_downsample",
    "extract",
    "PreprocessConfig",
    "MotionSequence",
    "load_labels",
    "make_sequence",
    "build_dataset",
    "save_dataset",
    "load_dataset",
    "FormatError",
    "MissingChannelWarning",
]
