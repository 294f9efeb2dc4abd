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
Corpus Metrics Tool.

This module powers the 'metrics' command. It walks the corpus one tile at a
time, feeds each loaded tile to a `MetricsAggregator`, and logs the full
report every `output_frequency` tiles and once more at the end.
"""

import logging
import random
from typing import Optional

from bigearth.utils.label_index import load_label_index
from bigearth.utils.metrics_aggregator import MetricsAggregator
from bigearth.utils.path_helpers import list_tile_entries
from bigearth.utils.progress_tracker import ProgressTracker
from bigearth.utils.script_arguments import MetricsArguments
from bigearth.utils.tile_loader import create_tile, load_files, load_metadata

logger = logging.getLogger('compute_metrics')


def compute_metrics(args: MetricsArguments, rng: Optional[random.Random] = None,
                    aggregator: Optional[MetricsAggregator] = None) -> MetricsAggregator:
    """
    Compute corpus statistics.

    Args:
        args: Validated metrics arguments.
        rng: Random source for the sampling gate; seeded from `args.seed` if omitted.
        aggregator: Aggregator to fold tiles into; a new one is created if omitted.

    Returns:
        MetricsAggregator: The aggregator holding the final statistics.
    """
    rng = rng or random.Random(args.seed)
    aggregator = aggregator or MetricsAggregator(first_only=args.first_only)
    labels = load_label_index(args.label_data)

    logger.info(
        f"processing folder '{args.source}' (first only: {args.first_only}, metadata only: {args.metadata_only}, "
        f"sample: {args.sample:f}), outputting metrics every {args.output_frequency}"
    )
    entries = list_tile_entries(args.source)
    logger.info(f"read {len(entries)} captures")

    tracker = ProgressTracker(args.output_frequency)
    tracker.start()
    for entry in entries:
        # gate before any pixel is decoded
        if rng.random() >= args.sample:
            continue

        tile = create_tile(args.source, entry.name)
        if args.metadata_only:
            load_metadata(tile, labels)
        else:
            load_files(tile, labels)
        aggregator.add_tile(tile)

        if tracker.step():
            aggregator.log_report()

    aggregator.log_report()
    logger.info(f"done computing metrics over {aggregator.tiles_processed} tiles in {tracker.format_time(tracker.elapsed())}")
    return aggregator
