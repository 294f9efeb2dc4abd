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
Unit tests for the configuration singleton.
"""

import pytest

from bigearth.utils.config_loader import DEFAULT_CONFIG, Config, config


@pytest.mark.unit
class TestConfig:

    def test_singleton(self):
        assert Config() is config

    def test_histogram_defaults(self):
        assert list(config.get("metrics.upper_limits")) == [10000, 40000]
        assert config.get("metrics.bucket_width") == 20

    def test_descriptor_extension(self):
        assert config.get("tiles.descriptor_extension") == ".json"

    def test_missing_key_returns_default(self):
        assert config.get("metrics.nope", 42) == 42
        assert config.get("nope.nested.key") is None

    def test_file_values_layer_over_defaults(self):
        assert config.get("split.sample") == DEFAULT_CONFIG["split"]["sample"]
        assert config.get("logging.level") == "INFO"
