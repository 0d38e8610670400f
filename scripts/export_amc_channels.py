from __future__ import annotations

"""Export the preprocessed channels of one AMC recording as a CSV table."""

import argparse
import logging
from pathlib import Path

from amc_preproc import extract, to_frame_table
from amc_preproc.config import DEFAULT_INPUT_RATE, DEFAULT_OUTPUT_RATE
from amc_preproc.resample import window_size_for


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Export the preprocessed channels of one AMC recording as a CSV table."
    )
    parser.add_argument("--amc", type=Path, required=True, help="Path to an AMC file.")
    parser.add_argument(
        "--channels",
        nargs="+",
        default=None,
        help="Channel names (or prefixes) to keep. Defaults to every channel.",
    )
    parser.add_argument("--output_rate", type=float, default=DEFAULT_OUTPUT_RATE)
    parser.add_argument("--input_rate", type=float, default=DEFAULT_INPUT_RATE)
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output CSV path. Defaults to <amc stem>_channels.csv next to the AMC file.",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
    logging.captureWarnings(True)

    data, names = extract(args.amc, args.channels, args.output_rate, args.input_rate)
    effective_rate = args.input_rate / window_size_for(args.output_rate, args.input_rate)
    df = to_frame_table(data, names, framerate=effective_rate)

    output_path = args.output or args.amc.with_name(f"{args.amc.stem}_channels.csv")
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    print(f"Wrote {len(df)} rows x {len(names)} channels to {output_path}")


if __name__ == "__main__":
    main()
