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
Dataclass-based Argument Models for the BigEarth Processor Tools.

This module defines strongly-typed dataclasses for parsing and validating the
command-line arguments for each tool (`split`, `metrics`, `sample`). It uses
`__post_init__` for validation and for resolving defaults from `config.toml`,
ensuring that the core logic receives clean and validated inputs.

Classes:
    BaseArguments: A base dataclass for common script arguments.
    SplitArguments: Arguments for the split_tiles tool.
    MetricsArguments: Arguments for the compute_metrics tool.
    SampleArguments: Arguments for the sample_tiles tool.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from bigearth.utils.config_loader import config

logger = logging.getLogger(__name__)

@dataclass
class BaseArguments:
    """A base dataclass for common script arguments."""
    source: Optional[Path] = None
    destination: Optional[Path] = None
    sample: Optional[float] = None
    seed: Optional[int] = None
    log_file: Optional[Path] = None
    verbose: bool = False

    def __post_init__(self):
        """Coerce path-like arguments to Path objects and validate them."""
        if self.source and isinstance(self.source, str):
            self.source = Path(self.source)
        if self.destination and isinstance(self.destination, str):
            self.destination = Path(self.destination)
        try:
            self._validate_base()
            self._resolve_defaults()
            self._validate()
        except ValueError as e:
            self.handle_error(str(e))

    def handle_error(self, message: str):
        """Logs an error and raises ValueError."""
        logger.error(message)
        raise ValueError(message)

    def _validate_base(self):
        if self.source is None:
            raise ValueError("missing commandline flag `--source`")
        if not self.source.is_dir():
            raise ValueError(f"Source folder not found: {self.source}")

    def _require_destination(self):
        if self.destination is None:
            raise ValueError("missing commandline flag `--destination`")

    def _validate_sample(self):
        if self.sample is None or not 0.0 <= self.sample <= 1.0:
            raise ValueError(f"Sample rate must be between 0 and 1, got {self.sample}")

    def _resolve_defaults(self):
        """Fill unset values from the configuration."""
        pass

    def _validate(self):
        """Tool-specific validation."""
        pass

@dataclass
class SplitArguments(BaseArguments):
    """Arguments for the split_tiles tool."""
    label_data: Optional[Path] = None
    log_frequency: Optional[int] = None
    drop_bands: str = ''
    band_mapping: str = ''
    split: bool = False

    def _resolve_defaults(self):
        if self.sample is None:
            self.sample = config.get("split.sample", 0.0001)
        if self.log_frequency is None:
            self.log_frequency = config.get("split.log_frequency", 500)
        if self.label_data and isinstance(self.label_data, str):
            self.label_data = Path(self.label_data)

    def _validate(self):
        self._require_destination()
        self._validate_sample()
        if self.log_frequency < 1:
            raise ValueError(f"Log frequency must be a positive integer, got {self.log_frequency}")
        if self.label_data and not self.label_data.is_file():
            raise ValueError(f"Label data file not found: {self.label_data}")

@dataclass
class MetricsArguments(BaseArguments):
    """Arguments for the compute_metrics tool."""
    label_data: Optional[Path] = None
    first_only: bool = False
    metadata_only: bool = False
    output_frequency: Optional[int] = None

    def _resolve_defaults(self):
        if self.sample is None:
            self.sample = config.get("metrics.sample", 1.0)
        if self.output_frequency is None:
            self.output_frequency = config.get("metrics.output_frequency", 10000)
        if self.label_data and isinstance(self.label_data, str):
            self.label_data = Path(self.label_data)

    def _validate(self):
        self._validate_sample()
        if self.output_frequency < 1:
            raise ValueError(f"Output frequency must be a positive integer, got {self.output_frequency}")
        if self.label_data and not self.label_data.is_file():
            raise ValueError(f"Label data file not found: {self.label_data}")

@dataclass
class SampleArguments(BaseArguments):
    """Arguments for the sample_tiles tool."""
    first_only: bool = False
    single_only: bool = False

    def _resolve_defaults(self):
        if self.sample is None:
            self.sample = config.get("sample.sample", 0.0001)

    def _validate(self):
        self._require_destination()
        self._validate_sample()
