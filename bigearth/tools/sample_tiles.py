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
Corpus Restructuring Tool.

This module powers the 'sample' command. It draws a random sample of
directory tiles and copies their band files into one folder per label, so
the result can be consumed by tools that expect a class-per-folder layout.
"""

import logging
import random
from pathlib import Path
from typing import List, Optional

from bigearth.utils.data_models import Tile
from bigearth.utils.exceptions import MetadataError
from bigearth.utils.path_helpers import clean_label, copy_file, list_tile_entries
from bigearth.utils.progress_tracker import ProgressTracker
from bigearth.utils.script_arguments import SampleArguments
from bigearth.utils.config_loader import config
from bigearth.utils.tile_loader import create_tile, descriptor_extension, load_metadata

logger = logging.getLogger('sample_tiles')


def copy_tile(tile: Tile, destination_root: Path, labels: List[str]) -> int:
    """
    Copy every band file of a directory tile into each label's folder.

    Returns:
        int: The number of files written.
    """
    extension = descriptor_extension()
    folders = [destination_root / clean_label(label) for label in labels]
    written = 0
    for entry in list_tile_entries(tile.path):
        if not entry.is_file() or entry.suffix == extension:
            continue
        for folder in folders:
            copy_file(entry, folder / entry.name)
            written += 1
    return written


def sample_tiles(args: SampleArguments, rng: Optional[random.Random] = None) -> int:
    """
    Copy a random sample of tiles into per-label folders.

    Args:
        args: Validated sample arguments.
        rng: Random source for the sampling gate; seeded from `args.seed` if omitted.

    Returns:
        int: Number of tiles copied.

    Raises:
        MetadataError: If a sampled tile has no descriptor.
    """
    rng = rng or random.Random(args.seed)
    args.destination.mkdir(parents=True, exist_ok=True)

    logger.info(
        f"processing folder '{args.source}' with sample rate {args.sample:f} "
        f"(first only: {args.first_only}, single only: {args.single_only})"
    )
    entries = list_tile_entries(args.source)
    logger.info(f"read {len(entries)} captures")

    tracker = ProgressTracker(config.get("sample.log_frequency", 10000))
    tracker.start()
    for entry in entries:
        if rng.random() >= args.sample:
            continue

        tile = create_tile(args.source, entry.name)
        metadata = load_metadata(tile)
        if metadata is None:
            raise MetadataError(f"no metadata found in '{tile.path}'")

        labels = metadata.labels
        if args.single_only and not metadata.is_single_label:
            continue
        if args.first_only:
            labels = labels[:1]

        copy_tile(tile, args.destination, labels)
        tracker.step()

    logger.info(f"copied {tracker.count} tiles to '{args.destination}'")
    return tracker.count
