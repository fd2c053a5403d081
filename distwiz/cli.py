#!/usr/bin/env python3
"""
Convert a sparse pairwise distance file to a dense square matrix.

Usage:
    distwiz --input <sparse_distances> --output <matrix.tsv.gz> [--compress-level 4] [--mode auto]
"""

import argparse
import logging
import sys

from .config import load_config, merge_config, validate_config
from .converter import convert
from .errors import ConfigError, FormatError
from .selector import Mode


def setup_logging(log_file=None, verbose=False):
    """Set up logging configuration."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )
    return logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Convert sparse 'label1 label2 distance' lines to a gzip-compressed square matrix"
    )
    parser.add_argument("-i", "--input", help="Sparse distance file (label1 label2 distance per line)")
    parser.add_argument("-o", "--output", help="Output gzip-compressed matrix file")
    parser.add_argument("-l", "--compress-level", type=int, default=None,
                        help="GZIP compression level 1-9 (default: 4)")
    parser.add_argument("--mode", choices=[m.value for m in Mode], default=None,
                        help="Distance store: auto, mem or disk (default: auto)")
    parser.add_argument("--threshold", type=int, default=None,
                        help="Largest label count converted in memory in auto mode (default: 10000)")
    parser.add_argument("--config", help="YAML file with default settings")
    parser.add_argument("--log-file", help="Also write the log to this file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logger = setup_logging(args.log_file, args.verbose)

    try:
        file_config = load_config(args.config) if args.config else {}
        config = validate_config(merge_config(file_config, {
            "input": args.input,
            "output": args.output,
            "compress_level": args.compress_level,
            "mode": args.mode,
            "threshold": args.threshold,
        }))

        summary = convert(
            config["input"],
            config["output"],
            compress_level=config["compress_level"],
            mode=config["mode"],
            threshold=config["threshold"],
            progress_every=config["progress_every"],
        )
    except ConfigError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except FormatError as e:
        logger.error(f"Malformed input: {e}")
        return 1
    except OSError as e:
        logger.error(f"I/O error: {e}")
        return 1

    logger.info("=== CONVERSION SUMMARY ===")
    logger.info(f"Input: {summary.input_path}")
    logger.info(f"Output: {summary.output_path}")
    logger.info(f"Labels: {summary.labels}")
    logger.info(f"Rows written: {summary.rows}")
    logger.info(f"Distance store: {summary.mode.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
