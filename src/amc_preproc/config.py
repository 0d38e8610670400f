"""Default channel, action and recording lists plus the preprocessing config."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

KEY_FILENAME = "SkeletonJoints.key"

# CMU mocap is stored at 120 fps; downstream models use 0.1 s timesteps.
DEFAULT_INPUT_RATE = 120.0
DEFAULT_OUTPUT_RATE = 10.0

# <subject id>_<trial id>, as listed on mocap.cs.cmu.edu
DEFAULT_FILE_NAMES = ["13_29", "13_30", "13_31", "14_06", "14_14", "14_20"]

# <body part>.<r/t><axis>; a subset of the raw channels that still covers
# every motion in the exercise routines.
DEFAULT_CHANNEL_NAMES = [
    "root.ty",
    "lowerback.rx",
    "lowerback.ry",
    "upperneck.ry",
    "rhumerus.rz",
    "rradius.rx",
    "lhumerus.rz",
    "lradius.rx",
    "rtibia.rx",
    "rfoot.rx",
    "ltibia.rx",
    "lfoot.rx",
]

# Label k in a label file refers to DEFAULT_ACTION_NAMES[k - 1].
DEFAULT_ACTION_NAMES = [
    "JumpJack",
    "Jog",
    "Squat",
    "KneeRaise",
    "ArmCircle",
    "Twist",
    "SideReach",
    "Box",
    "UpDown",
    "ToeTouchOneHand",
    "SideBend",
    "ToeTouchTwoHands",
]


@dataclass
class PreprocessConfig:
    """Settings steering extraction of a batch of recordings."""

    output_rate: float = DEFAULT_OUTPUT_RATE
    input_rate: float = DEFAULT_INPUT_RATE
    channel_names: List[str] = field(default_factory=lambda: list(DEFAULT_CHANNEL_NAMES))
    action_names: List[str] = field(default_factory=lambda: list(DEFAULT_ACTION_NAMES))
    key_filename: str = KEY_FILENAME


__all__ = [
    "KEY_FILENAME",
    "DEFAULT_INPUT_RATE",
    "DEFAULT_OUTPUT_RATE",
    "DEFAULT_FILE_NAMES",
    "DEFAULT_CHANNEL_NAMES",
    "DEFAULT_ACTION_NAMES",
    "PreprocessConfig",
]
