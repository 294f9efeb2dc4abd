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
Progress Tracker for Batch Runs.

This module provides the `ProgressTracker` class, which counts processed
corpus entries, logs a progress line every N entries, and reports the elapsed
time of the run.

Classes:
    ProgressTracker: Counts entries and logs periodic progress.
"""
import logging
import time
from typing import Optional

logger = logging.getLogger(__name__)

class ProgressTracker:
    """Counts processed entries and logs every `frequency` of them."""

    def __init__(self, frequency: int, label: str = "tiles"):
        if frequency < 1:
            raise ValueError(f"frequency must be at least 1, got {frequency}")
        self.frequency = frequency
        self.label = label
        self.count = 0
        self._start_time: Optional[float] = None

    def start(self):
        """Starts the run timer."""
        self._start_time = time.perf_counter()

    def step(self) -> bool:
        """Counts one entry; returns True (and logs) when a frequency boundary is hit."""
        self.count += 1
        if self.count % self.frequency == 0:
            logger.info(f"processed {self.count} {self.label} ({self.format_time(self.elapsed())})")
            return True
        return False

    def elapsed(self) -> float:
        """Seconds since `start`, 0 if never started."""
        if self._start_time is None:
            return 0.0
        return time.perf_counter() - self._start_time

    @staticmethod
    def format_time(seconds: float) -> str:
        """Formats seconds into a human-readable string."""
        if seconds < 60:
            return f"{seconds:.2f}s"
        elif seconds < 3600:
            minutes = int(seconds // 60)
            remaining_seconds = seconds % 60
            return f"{minutes}m {remaining_seconds:.1f}s"
        else:
            hours = int(seconds // 3600)
            minutes = int((seconds % 3600) // 60)
            remaining_seconds = seconds % 60
            return f"{hours}h {minutes}m {remaining_seconds:.0f}s"
