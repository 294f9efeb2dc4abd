#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: BigEarth Processor
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""
Command-line interface for the BigEarth Processor.

This script provides the main entry point for the `bigearth` command,
parsing user arguments and dispatching them to the appropriate tool.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional
from bigearth.utils.config_loader import config
from bigearth.utils.log_helpers import level_from_name, setup_logger, shutdown_logger
from bigearth.utils.script_arguments import MetricsArguments, SampleArguments, SplitArguments

def str2bool(v):
    if isinstance(v, bool):
        return v
    if v.lower() in ('yes', 'true', 't', 'y', '1'):
        return True
    elif v.lower() in ('no', 'false', 'f', 'n', '0'):
        return False
    else:
        raise argparse.ArgumentTypeError('Boolean value expected.')

def sample_rate(value: str) -> float:
    """Validate that the sample rate is a float between 0 and 1."""
    try:
        fvalue = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Sample must be a number between 0 and 1, got '{value}'")
    if fvalue < 0.0 or fvalue > 1.0:
        raise argparse.ArgumentTypeError(f"Sample must be between 0 and 1, got '{fvalue}'")
    return fvalue

def positive_int(value: str) -> int:
    try:
        ivalue = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got '{value}'")
    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got '{ivalue}'")
    return ivalue

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='bigearth',
        description='Restructure and profile multi-band satellite image tiles.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    subparsers = parser.add_subparsers(dest='tool', help='Available tools')
    subparsers.required = True

    def add_common_args(p):
        p.add_argument('-s', '--source', required=True, type=Path, dest='source', help='The folder containing all tiles.')
        p.add_argument('--seed', type=int, default=None, dest='seed', help='Seed for the sampling random generator.')
        p.add_argument('--log-file', type=Path, dest='log_file', help='Path to a log file for debugging.')
        p.add_argument('-v', '--verbose', action='store_true', dest='verbose', help='Enable verbose logging.')

    # --- Split Tool ---
    split_parser = subparsers.add_parser(
        'split',
        help='Split multiband remote sensing tiles into series of single band images.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_common_args(split_parser)
    split_parser.add_argument('-d', '--destination', required=True, type=Path, dest='destination', help='The output folder for the split tiles.')
    split_parser.add_argument('-l', '--label-data', type=Path, dest='label_data', help='CSV file containing the labels for the tiles (image and label columns).')
    split_parser.add_argument('--log-frequency', type=positive_int, default=config.get('split.log_frequency', 500), dest='log_frequency', help='Output log every X tiles.')
    split_parser.add_argument('--sample', type=sample_rate, default=config.get('split.sample', 0.0001), dest='sample', help='The sample value from 0 to 1.')
    split_parser.add_argument('--drop-bands', type=str, default='', dest='drop_bands', help='CSV list of bands to drop from the image when splitting.')
    split_parser.add_argument('--band-mapping', type=str, default='', dest='band_mapping', help='CSV list of bands to map in the format (old band):(new band).')
    split_parser.add_argument('--split', type=str2bool, nargs='?', const=True, default=False, dest='split', help='If true, multiband images are split. Otherwise they are copied.')

    # --- Metrics Tool ---
    metrics_parser = subparsers.add_parser(
        'metrics',
        help='Compute band, size, label and pixel value metrics over the tiles.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_common_args(metrics_parser)
    metrics_parser.add_argument('--first-only', action='store_true', dest='first_only', help='Only count the first label of each tile.')
    metrics_parser.add_argument('--metadata-only', action='store_true', dest='metadata_only', help='Only track metadata (label) metrics.')
    metrics_parser.add_argument('--output-frequency', type=positive_int, default=config.get('metrics.output_frequency', 10000), dest='output_frequency', help='Output metrics every X tiles.')
    metrics_parser.add_argument('--sample', type=sample_rate, default=config.get('metrics.sample', 1.0), dest='sample', help='The sample value from 0 to 1.')
    metrics_parser.add_argument('-l', '--label-data', type=Path, dest='label_data', help='CSV file with labels for multiband tiles.')

    # --- Sample Tool ---
    sample_parser = subparsers.add_parser(
        'sample',
        help='Copy a random sample of tiles into one folder per label.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    add_common_args(sample_parser)
    sample_parser.add_argument('-d', '--destination', required=True, type=Path, dest='destination', help='The folder to write the restructured data.')
    sample_parser.add_argument('--sample', type=sample_rate, default=config.get('sample.sample', 0.0001), dest='sample', help='The sample value from 0 to 1.')
    sample_parser.add_argument('--first-only', action='store_true', dest='first_only', help='Only use the first label of each tile.')
    sample_parser.add_argument('--single-only', action='store_true', dest='single_only', help='Only consider tiles with one label.')

    return parser

def main(argv: Optional[List[str]] = None):
    """
    Main function to parse arguments and call the appropriate tool.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    tool = args.tool
    args_dict = vars(args)
    args_dict.pop('tool', None)

    # --- Logger Setup ---
    log_level = logging.DEBUG if args.verbose else level_from_name(config.get('logging.level', 'INFO'))
    logger = setup_logger(log_file=str(args.log_file) if args.log_file else None, level=log_level)

    try:
        if tool == 'split':
            from bigearth.tools.split_tiles import split_tiles
            split_tiles(SplitArguments(**args_dict))
        elif tool == 'metrics':
            from bigearth.tools.compute_metrics import compute_metrics
            compute_metrics(MetricsArguments(**args_dict))
        elif tool == 'sample':
            from bigearth.tools.sample_tiles import sample_tiles
            sample_tiles(SampleArguments(**args_dict))
    except Exception as e:
        logger.error(f"An unexpected error occurred: {e}", exc_info=True)
        shutdown_logger(logger)
        sys.exit(1)

    shutdown_logger(logger)

if __name__ == "__main__":
    main()
