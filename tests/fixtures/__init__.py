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
Test fixtures and mock data factories for BigEarth Processor tests.

This package contains:
- MockGeoTIFF: Factory for creating 16-bit test GeoTIFF files
- make_directory_tile / make_multiband_tile: corpus entry builders
- ScriptedRandom: fixed-draw random source for sampling tests
"""

from tests.fixtures.mock_geotiff_factory import MockGeoTIFF, make_directory_tile, make_multiband_tile, read_band
from tests.fixtures.random_sources import ScriptedRandom

__all__ = ['MockGeoTIFF', 'make_directory_tile', 'make_multiband_tile', 'read_band', 'ScriptedRandom']
