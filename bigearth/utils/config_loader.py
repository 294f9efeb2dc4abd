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
Configuration Management for the BigEarth Processor.

This module provides a singleton configuration manager (`Config`) that loads,
parses, and provides access to settings from a central `config.toml` file.
The values act as defaults for the command-line tools (histogram upper limits,
report and log frequencies, sample rates); explicit command-line flags always
take precedence.

Classes:
    Config: A singleton class for managing application-wide configuration.
"""
import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "tiles": {
        "descriptor_extension": ".json"
    },
    "split": {
        "log_frequency": 500,
        "sample": 0.0001
    },
    "metrics": {
        "upper_limits": [10000, 40000],
        "bucket_width": 20,
        "output_frequency": 10000,
        "sample": 1.0
    },
    "sample": {
        "sample": 0.0001,
        "log_frequency": 10000
    },
    "logging": {
        "level": "INFO"
    }
}

class Config:
    """Singleton configuration manager"""
    _instance = None
    _config: Dict[str, Any] = {}

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._load_config()
        return cls._instance

    def _load_config(self):
        """Load configuration from config.toml, layered over the defaults"""
        self._config = copy.deepcopy(DEFAULT_CONFIG)
        config_path = Path(__file__).parent.parent / "config.toml"
        if not config_path.exists():
            return
        try:
            with open(config_path, "rb") as f:
                loaded = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not load {config_path}: {e}")
            return
        for section, values in loaded.items():
            if isinstance(values, dict):
                self._config.setdefault(section, {}).update(values)
            else:
                self._config[section] = values

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation

        Args:
            key: Configuration key in dot notation (e.g., "metrics.upper_limits")
            default: Default value if key is not found

        Returns:
            Configuration value or default

        Example:
            >>> config.get("metrics.upper_limits")
            [10000, 40000]
        """
        keys = key.split(".")
        value = self._config
        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default
        return value


config = Config()
