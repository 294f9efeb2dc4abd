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
Multiband Tile Splitting Tool.

This module powers the 'split' command. Every multiband raster in the source
folder is either split into one GeoTIFF per retained band, following the
band mapping, or copied unchanged. Outputs are grouped by the tile's label
from the label index when one is available.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from bigearth.utils.band_mapping import parse_band_mapping
from bigearth.utils.band_splitter import split_multiband
from bigearth.utils.label_index import load_label_index
from bigearth.utils.path_helpers import copy_file, list_tile_entries
from bigearth.utils.progress_tracker import ProgressTracker
from bigearth.utils.script_arguments import SplitArguments
from bigearth.utils.tile_loader import create_multiband_tile

logger = logging.getLogger('split_tiles')


@dataclass
class SplitSummary:
    entries_seen: int = 0
    tiles_processed: int = 0
    files_written: int = 0


def split_tiles(args: SplitArguments, rng: Optional[random.Random] = None) -> SplitSummary:
    """
    Split (or copy) the sampled multiband tiles of a corpus folder.

    Args:
        args: Validated split arguments.
        rng: Random source for the sampling gate; seeded from `args.seed` if omitted.

    Returns:
        SplitSummary: Counts of entries seen, tiles processed and files written.
    """
    rng = rng or random.Random(args.seed)

    # parse inputs before touching any tile
    labels = load_label_index(args.label_data)
    band_mapping = parse_band_mapping(args.band_mapping, args.drop_bands)

    logger.info(
        f"splitting tiles found in '{args.source}', outputting resulting split images to "
        f"'{args.destination}' (log frequency = {args.log_frequency}, sample = {args.sample:f}, split = {args.split})"
    )
    entries = list_tile_entries(args.source)
    logger.info(f"read {len(entries)} tile images")

    summary = SplitSummary()
    tracker = ProgressTracker(args.log_frequency)
    tracker.start()
    for entry in entries:
        summary.entries_seen += 1
        tracker.step()

        if rng.random() >= args.sample:
            continue

        label = labels.get(entry.name, "")
        if args.split:
            tile = create_multiband_tile(entry)
            written = split_multiband(tile, args.destination, label, band_mapping)
            summary.files_written += len(written)
        else:
            copy_file(entry, args.destination / label / entry.name)
            summary.files_written += 1
        summary.tiles_processed += 1

    logger.info(
        f"done splitting tiles: {summary.tiles_processed} of {summary.entries_seen} tiles processed, "
        f"{summary.files_written} files written in {tracker.format_time(tracker.elapsed())}"
    )
    return summary
