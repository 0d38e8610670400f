from __future__ import annotations

"""
Build the labeled mocap sequence dataset from CMU AMC recordings.

Usage (example):
    python -m scripts.make_mocap_dataset \\
        --amc_dir data/amc \\
        --label_dir data/truelabels \\
        --output data/mocap6.npz
"""

import argparse
import logging
from pathlib import Path

from amc_preproc import PreprocessConfig, build_dataset, save_dataset
from amc_preproc.config import (
    DEFAULT_ACTION_NAMES,
    DEFAULT_CHANNEL_NAMES,
    DEFAULT_FILE_NAMES,
    DEFAULT_INPUT_RATE,
    DEFAULT_OUTPUT_RATE,
    KEY_FILENAME,
)


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """Send log records (and Python warnings) to stderr and an optional file."""
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )
    logging.captureWarnings(True)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Extract, smooth, center and downsample AMC recordings into one dataset."
    )
    parser.add_argument(
        "--amc_dir",
        type=Path,
        required=True,
        help=f"Directory holding <subject>_<trial>.amc files and {KEY_FILENAME}.",
    )
    parser.add_argument(
        "--label_dir",
        type=Path,
        required=True,
        help="Directory holding <subject>_<trial>.txt label files.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=Path("mocap6.npz"),
        help="Output .npz path.",
    )
    parser.add_argument(
        "--file_names",
        nargs="+",
        default=DEFAULT_FILE_NAMES,
        help="Recording IDs in <subject>_<trial> form.",
    )
    parser.add_argument(
        "--channels",
        nargs="+",
        default=DEFAULT_CHANNEL_NAMES,
        help="Channel names (or prefixes) to keep, in output column order.",
    )
    parser.add_argument(
        "--output_rate",
        type=float,
        default=DEFAULT_OUTPUT_RATE,
        help="Target frames per second.",
    )
    parser.add_argument(
        "--input_rate",
        type=float,
        default=DEFAULT_INPUT_RATE,
        help="Frames per second of the AMC files.",
    )
    parser.add_argument("--log_file", type=Path, default=None, help="Optional log file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    config = PreprocessConfig(
        output_rate=args.output_rate,
        input_rate=args.input_rate,
        channel_names=list(args.channels),
        action_names=list(DEFAULT_ACTION_NAMES),
    )
    sequences = build_dataset(args.amc_dir, args.label_dir, args.file_names, config)
    if not sequences:
        raise SystemExit("No recordings could be processed")

    save_dataset(args.output, sequences, config.channel_names, config.action_names)
    print(f"Wrote {len(sequences)} of {len(args.file_names)} sequences to {args.output}")


if __name__ == "__main__":
    main()
