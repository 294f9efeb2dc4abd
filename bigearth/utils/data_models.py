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
Data Models for the BigEarth Processor.

This module defines the data classes that flow between the tile loader, the
band splitter and the metrics aggregator.

Domain model classes:
    TileKind: The storage variant of a tile (folder of bands or multiband file)
    Image: One single-band raster belonging to a tile
    TileMetadata: Labels read from a tile's sidecar descriptor or label index
    Tile: One corpus entry with its images and metadata

Tiles are created per corpus entry and discarded once processed; an Image
only holds its pixels while its tile is being processed.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

import numpy as np

BAND_PATTERN = re.compile(r'_B[0-9][0-9a-zA-Z][.]')


def extract_band(filename: str) -> str:
    """
    Extract the lower-cased spectral band code from a band file name.

    Example:
        >>> extract_band('S2A_MSIL2A_20170613_54_88_B8A.tif')
        '8a'
    """
    match = BAND_PATTERN.search(filename)
    if match is None:
        return ""
    return match.group(0)[2:-1].lower()


class TileKind(Enum):
    """Storage variant of a tile."""
    DIRECTORY = "directory"
    MULTIBAND_FILE = "multiband_file"


@dataclass
class Image:
    """
    A single-band raster of a tile.

    Attributes:
        band: Lower-cased band code, empty when the file name carries none.
        path: Path to the band file.
        width: Raster width in pixels (0 until loaded).
        height: Raster height in pixels (0 until loaded).
        pixels: Flat uint16 array of width * height values (None until loaded).
    """
    band: str
    path: Path
    width: int = 0
    height: int = 0
    pixels: Optional[np.ndarray] = None

    @classmethod
    def from_path(cls, path: Path) -> 'Image':
        return cls(band=extract_band(Path(path).name), path=Path(path))

    @property
    def is_loaded(self) -> bool:
        return self.pixels is not None

    @property
    def size_key(self) -> str:
        return f"{self.width} X {self.height}"


@dataclass
class TileMetadata:
    """Labels attached to a tile."""
    labels: List[str] = field(default_factory=list)
    source: Optional[Path] = None

    @property
    def is_single_label(self) -> bool:
        return len(self.labels) == 1


@dataclass
class Tile:
    """
    One corpus entry.

    For a DIRECTORY tile `name` is the folder holding one file per band plus
    a JSON descriptor; for a MULTIBAND_FILE tile it is the file name of a
    raster holding every band.
    """
    base_folder: Path
    name: str
    kind: TileKind
    images: List[Image] = field(default_factory=list)
    metadata: Optional[TileMetadata] = None

    @property
    def path(self) -> Path:
        return Path(self.base_folder) / self.name

    @property
    def stem(self) -> str:
        return Path(self.name).stem

    @property
    def labels(self) -> List[str]:
        return self.metadata.labels if self.metadata is not None else []
