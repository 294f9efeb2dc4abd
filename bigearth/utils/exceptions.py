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
Custom Exceptions Module.

A centralized module for custom exceptions used throughout the BigEarth Processor.
Every failure is fatal to the run; the original cause is chained onto the
raised exception so the full context survives up to the CLI.
"""

class TileReadError(IOError):
    """Raised when a tile folder or tile file cannot be read."""
    pass

class MetadataError(ValueError):
    """Raised when a tile's sidecar descriptor cannot be loaded."""
    pass

class DecodeError(ValueError):
    """Raised when a band image is not a readable single-band 16-bit raster."""
    pass

class RasterOpenError(RuntimeError):
    """Raised when GDAL cannot open a multiband raster."""
    pass

class BandExtractionError(RuntimeError):
    """Raised when a single band cannot be extracted into its own raster."""
    pass

class FileCopyError(IOError):
    """Raised when a tile file cannot be copied to its destination."""
    pass

class ParseError(ValueError):
    """Base exception for errors parsing user-supplied inputs."""
    pass

class BandMappingError(ParseError):
    """Error parsing the band mapping or drop-band lists."""
    pass

class LabelIndexError(ParseError):
    """Error loading the label index CSV."""
    pass
