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
Metrics Aggregator.

Accumulates running statistics over a stream of tiles: band, size and label
frequencies, and one clipped pixel-value histogram per configured upper limit.
Only derived counts are kept, never pixel data, so memory stays bounded no
matter how many tiles are processed.

Clipping folds every value above the upper limit into the limit's bucket
before counting. The mean is computed over clipped values; min and max are
tracked on the raw values.

Median rule (applied to the clipped histogram in ascending value order):
    remaining = total_count / 2
    for each value v: remaining -= count[v]
        remaining <= 0      -> median is v
        0 < remaining < 1   -> median is v + 0.5
For values 0..19 seen once each, remaining reaches exactly 0 at 9, so the
median is 9.0. For an odd total the half-step branch fires one value early
(counts [1, 1, 1] give 0.5); the rule is kept as is for report continuity.

The mode is tracked incrementally while pixels arrive. A bucket becomes the
mode only when its count strictly exceeds the current best, so on ties the
bucket that reached the count first wins.
"""

import logging
from collections import Counter
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from bigearth.utils.config_loader import config
from bigearth.utils.data_models import Image, Tile

logger = logging.getLogger(__name__)

DEFAULT_UPPER_LIMITS = (10000, 40000)
DEFAULT_BUCKET_WIDTH = 20


def compute_median(counts: Sequence[int], total_count: int) -> float:
    """
    Median of a bucketed histogram using the half-step rule described above.

    Returns:
        The median value, or -1.0 when the histogram is empty.
    """
    remaining = total_count / 2.0
    if total_count <= 0:
        return -1.0
    for value, count in enumerate(counts):
        remaining -= int(count)
        if remaining <= 0:
            return float(value)
        if remaining < 1:
            return value + 0.5
    return -1.0


def rank_counts(counts: Counter) -> List[Tuple[str, int]]:
    """Entries by descending count, ties broken by ascending key."""
    return sorted(counts.items(), key=lambda item: (-item[1], item[0]))


class HistogramAccumulator:
    """
    Clipped pixel-value histogram with running totals.

    Attributes:
        upper_limit: Values above this are counted in this bucket.
        counts: Occurrences per clipped value, indices 0..upper_limit.
        total_count: Number of pixels seen.
        total_value: Sum of clipped pixel values.
        mode_value: Most frequent clipped value so far.
        mode_count: Its count.
        raw_min: Smallest unclipped value seen (None before any pixel).
        raw_max: Largest unclipped value seen (None before any pixel).
    """

    def __init__(self, upper_limit: int):
        if upper_limit < 0:
            raise ValueError(f"upper limit must be non-negative, got {upper_limit}")
        self.upper_limit = int(upper_limit)
        self.counts = np.zeros(self.upper_limit + 1, dtype=np.int64)
        self.total_count = 0
        self.total_value = 0
        self.mode_value = 0
        self.mode_count = 0
        self.raw_min: Optional[int] = None
        self.raw_max: Optional[int] = None

    def add(self, pixels: Iterable[int]):
        """Count a batch of pixels, in arrival order."""
        values = np.asarray(pixels).ravel()
        if values.size == 0:
            return
        values = values.astype(np.int64, copy=False)
        if values.min() < 0:
            raise ValueError("pixel values must be non-negative")

        batch_min = int(values.min())
        batch_max = int(values.max())
        self.raw_min = batch_min if self.raw_min is None else min(self.raw_min, batch_min)
        self.raw_max = batch_max if self.raw_max is None else max(self.raw_max, batch_max)

        clipped = np.minimum(values, self.upper_limit)
        batch_counts = np.bincount(clipped, minlength=self.upper_limit + 1)
        touched = np.flatnonzero(batch_counts)
        before = self.counts[touched].copy()
        self.counts[touched] += batch_counts[touched]

        self.total_count += int(values.size)
        self.total_value += int(clipped.sum(dtype=np.int64))
        self._update_mode(clipped, touched, before)

    def _update_mode(self, clipped: np.ndarray, touched: np.ndarray, before: np.ndarray):
        after = self.counts[touched]
        best = int(after.max())
        if best <= self.mode_count:
            return
        candidates = touched[after == best]
        if candidates.size == 1:
            self.mode_value = int(candidates[0])
        else:
            # earliest bucket to reach `best` in this batch wins
            before_by_value = dict(zip(touched.tolist(), before.tolist()))
            first_seen = None
            for value in candidates.tolist():
                needed = best - before_by_value[value]
                reached_at = int(np.flatnonzero(clipped == value)[needed - 1])
                if first_seen is None or reached_at < first_seen[0]:
                    first_seen = (reached_at, value)
            self.mode_value = first_seen[1]
        self.mode_count = best

    @property
    def histogram_max(self) -> int:
        """Largest bucket that can hold a count (clipped observed max)."""
        if self.raw_max is None:
            return 0
        return min(self.raw_max, self.upper_limit)

    def median(self) -> float:
        return compute_median(self.counts, self.total_count)

    def mean(self) -> float:
        if self.total_count == 0:
            return float('nan')
        return self.total_value / self.total_count

    def bucket_rows(self, width: int = DEFAULT_BUCKET_WIDTH) -> List[Tuple[int, int, List[int]]]:
        """
        Group the histogram into fixed runs of `width` consecutive values,
        covering 0 through the clipped observed maximum.
        """
        if self.total_count == 0:
            return []
        rows = []
        limit = self.histogram_max
        for start in range(0, limit + 1, width):
            end = start + width - 1
            run = self.counts[start:end + 1].tolist()
            run.extend([0] * (width - len(run)))
            rows.append((start, end, run))
        return rows

    def render(self, width: int = DEFAULT_BUCKET_WIDTH) -> List[str]:
        lines = [f"metrics (upper limit {self.upper_limit})"]
        for start, end, run in self.bucket_rows(width):
            lines.append(f"values {start}-{end}: [{' '.join(str(c) for c in run)}]")
        lines.extend([
            f"total pixel count: {self.total_count}",
            f"total pixel value: {self.total_value}",
            f"most common pixel value: {self.mode_value}",
            f"most common pixel count: {self.mode_count}",
            f"mean pixel value: {self.mean():f}",
            f"median pixel value: {self.median():f}",
            f"min pixel value: {self.raw_min if self.raw_min is not None else 0}",
            f"max pixel value: {self.raw_max if self.raw_max is not None else 0}",
        ])
        return lines


class MetricsAggregator:
    """
    Running statistics over the processed tiles.

    Args:
        upper_limits: One clipped histogram is kept per limit.
        bucket_width: Values per histogram row in the report.
        first_only: Count only each tile's first label in the label table.
    """

    def __init__(self, upper_limits: Optional[Sequence[int]] = None,
                 bucket_width: Optional[int] = None, first_only: bool = False):
        if upper_limits is None:
            upper_limits = config.get("metrics.upper_limits", DEFAULT_UPPER_LIMITS)
        self.bucket_width = int(bucket_width or config.get("metrics.bucket_width", DEFAULT_BUCKET_WIDTH))
        self.first_only = first_only
        self.accumulators = [HistogramAccumulator(limit) for limit in upper_limits]
        self.band_counts: Counter = Counter()
        self.size_counts: Counter = Counter()
        self.label_counts: Counter = Counter()
        self.single_label_counts: Counter = Counter()
        self.tiles_processed = 0

    def accumulator(self, upper_limit: int) -> HistogramAccumulator:
        for acc in self.accumulators:
            if acc.upper_limit == upper_limit:
                return acc
        raise KeyError(f"no histogram with upper limit {upper_limit}")

    def add_image(self, image: Image):
        self.band_counts[image.band] += 1
        self.size_counts[image.size_key] += 1
        if image.is_loaded:
            for acc in self.accumulators:
                acc.add(image.pixels)

    def add_labels(self, labels: Sequence[str]):
        counted = labels[:1] if self.first_only else labels
        for label in counted:
            self.label_counts[label] += 1
        if len(labels) == 1:
            self.single_label_counts[labels[0]] += 1

    def add_tile(self, tile: Tile):
        """Fold one loaded tile into the running statistics."""
        for image in tile.images:
            self.add_image(image)
        self.add_labels(tile.labels)
        self.tiles_processed += 1

    def render_report(self) -> str:
        """Full report: one histogram section per upper limit, each followed by the frequency tables."""
        lines: List[str] = []
        for acc in self.accumulators:
            lines.extend(acc.render(self.bucket_width))
            lines.extend(self._render_tables())
            lines.append("")
        return "\n".join(lines)

    def _render_tables(self) -> List[str]:
        lines = [f"band {band}: {count}" for band, count in sorted(self.band_counts.items())]
        lines.extend(f"size {size}: {count}" for size, count in sorted(self.size_counts.items()))
        lines.extend(f"label {label}: {count}" for label, count in rank_counts(self.label_counts))
        lines.extend(f"label single {label}: {count}" for label, count in rank_counts(self.single_label_counts))
        return lines

    def log_report(self):
        logger.info(f"metrics after {self.tiles_processed} tiles\n{self.render_report()}")
