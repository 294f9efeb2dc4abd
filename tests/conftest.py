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
Pytest configuration and shared fixtures for the BigEarth Processor test suite.

This module provides:
- Shared fixtures for small synthetic corpora

Fixtures are organized by scope:
- module: Created once per test module
- function: Created for each test function (default)
"""

import random
import numpy as np
import pytest
from osgeo import gdal

# pythonpath is configured in pyproject.toml to include the project root
from tests.fixtures.mock_geotiff_factory import MockGeoTIFF, make_directory_tile, make_multiband_tile


# =============================================================================
# Module-scope Fixtures
# =============================================================================

@pytest.fixture(scope="module")
def ramp_pixels():
    """
    A 4x5 uint16 ramp holding the values 0..19 once each.

    Returns:
        np.ndarray: shape (4, 5)
    """
    return np.arange(20, dtype=np.uint16).reshape(4, 5)


# =============================================================================
# Function-scope Fixtures
# =============================================================================

@pytest.fixture
def seeded_rng():
    """A deterministic random source for sampling gates."""
    return random.Random(1234)


@pytest.fixture
def mock_geotiff_multiband():
    """
    A 3-band UInt16 mock GeoTIFF.

    Returns:
        MockGeoTIFF: 4x3 pixels, band b filled with b * 1000 + position
    """
    return MockGeoTIFF(width=4, height=3, bands=3, data_type=gdal.GDT_UInt16)


@pytest.fixture
def directory_corpus(tmp_path):
    """
    A corpus of three directory tiles.

    - S2_A: bands 02 and 8A, labels [forest, water]
    - S2_B: band 02, labels [forest]
    - S2_C: band 02, labels [pasture]

    Returns:
        Path: The corpus folder.
    """
    root = tmp_path / "corpus"
    make_directory_tile(root, "S2_A", {
        "02": np.full((2, 2), 5, dtype=np.uint16),
        "8A": np.array([[1, 2], [3, 50000]], dtype=np.uint16),
    }, labels=["forest", "water"])
    make_directory_tile(root, "S2_B", {"02": np.full((3, 2), 7, dtype=np.uint16)}, labels=["forest"])
    make_directory_tile(root, "S2_C", {"02": np.zeros((2, 2), dtype=np.uint16)}, labels=["pasture"])
    return root


@pytest.fixture
def multiband_corpus(tmp_path):
    """
    A corpus of two 3-band multiband tiles (T1.tiff, T2.tiff) with a label index.

    Returns:
        Tuple[Path, Path]: The corpus folder and the label CSV.
    """
    root = tmp_path / "multiband"
    make_multiband_tile(root, "T1.tiff")
    make_multiband_tile(root, "T2.tiff")
    label_csv = tmp_path / "labels.csv"
    label_csv.write_text("image,label\nT1.tiff,forest\nT2.tiff,water\n", encoding="utf-8")
    return root, label_csv
