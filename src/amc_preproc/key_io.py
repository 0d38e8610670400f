from __future__ import annotations

from pathlib import Path
from typing import List


def read_channel_names(path: str | Path) -> List[str]:
    """
    Read fully-qualified channel names from a SkeletonJoints.key file.

    Each non-comment line summarizes one body part and its measurements:
        root tx ty tz rx ry rz
        lowerback rx ry rz

    and expands to one "<part>.<measurement>" name per measurement, e.g.
    "lowerback.rx". Line order and token order are preserved; duplicates are kept.
    """
    path = Path(path)
    names: List[str] = []

    with path.open("r", encoding="utf-8") as fh:
        for line in fh:
            if line.startswith("#"):
                continue
            parts = line.split()
            if not parts:
                continue
            part_name = parts[0]
            names.extend(f"{part_name}.{measurement}" for measurement in parts[1:])

    return names


__all__ = ["read_channel_names"]
