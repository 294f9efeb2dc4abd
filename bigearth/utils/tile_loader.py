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
Tile Loading.

Loads metadata and band images for the two tile variants. Behaviour is picked
by dispatching on `Tile.kind`:

- DIRECTORY tiles are a folder holding one 16-bit TIFF per band and a JSON
  descriptor `{"labels": [...]}`. Their bands are decoded for metrics.
- MULTIBAND_FILE tiles are a single raster with every band. They have no
  descriptor; labels come from the label index keyed by file name. Their
  bands are not decoded here, the band splitter consumes them directly.
"""

import json
import logging
from pathlib import Path
from typing import Callable, Dict, List, Mapping, Optional, Union

from bigearth.utils.config_loader import config
from bigearth.utils.data_models import Image, Tile, TileKind, TileMetadata
from bigearth.utils.exceptions import MetadataError, TileReadError
from bigearth.utils.path_helpers import list_tile_entries
from bigearth.utils.pixel_decoder import decode_gray16

logger = logging.getLogger(__name__)

LabelIndex = Mapping[str, str]


def descriptor_extension() -> str:
    return config.get("tiles.descriptor_extension", ".json")


def create_tile(base_folder: Union[str, Path], name: str) -> Tile:
    """Build a tile for a corpus entry, choosing the variant from what is on disk."""
    path = Path(base_folder) / name
    kind = TileKind.DIRECTORY if path.is_dir() else TileKind.MULTIBAND_FILE
    return Tile(base_folder=Path(base_folder), name=name, kind=kind)


def create_multiband_tile(image_path: Union[str, Path]) -> Tile:
    image_path = Path(image_path)
    return Tile(base_folder=image_path.parent, name=image_path.name, kind=TileKind.MULTIBAND_FILE)


def load_descriptor(descriptor_path: Path) -> TileMetadata:
    """
    Read a sidecar descriptor.

    Raises:
        MetadataError: If the file cannot be read or is not a descriptor.
    """
    try:
        with open(descriptor_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except OSError as e:
        raise MetadataError(f"unable to read metadata from '{descriptor_path}'") from e
    except json.JSONDecodeError as e:
        raise MetadataError(f"unable to unmarshal metadata from '{descriptor_path}'") from e

    labels = raw.get('labels') if isinstance(raw, dict) else None
    if labels is None:
        labels = []
    if not isinstance(labels, list) or not all(isinstance(label, str) for label in labels):
        raise MetadataError(f"'labels' in '{descriptor_path}' is not a list of strings")
    return TileMetadata(labels=list(labels), source=descriptor_path)


def _is_descriptor(path: Path) -> bool:
    return path.suffix == descriptor_extension()


def _load_directory_metadata(tile: Tile, label_index: Optional[LabelIndex]) -> Optional[TileMetadata]:
    for entry in list_tile_entries(tile.path):
        if entry.is_file() and _is_descriptor(entry):
            return load_descriptor(entry)
    logger.debug(f"no descriptor found in '{tile.path}'")
    return None


def _load_multiband_metadata(tile: Tile, label_index: Optional[LabelIndex]) -> Optional[TileMetadata]:
    if not tile.path.is_file():
        raise TileReadError(f"unable to read multiband tile '{tile.path}'")
    if not label_index or tile.name not in label_index:
        return None
    return TileMetadata(labels=[label_index[tile.name]])


def _load_directory_images(tile: Tile) -> List[Image]:
    images = []
    for entry in list_tile_entries(tile.path):
        if not entry.is_file() or _is_descriptor(entry):
            continue
        image = Image.from_path(entry)
        load_image(image)
        images.append(image)
    return images


def _load_multiband_images(tile: Tile) -> List[Image]:
    logger.debug(f"'{tile.name}' is a multiband tile, bands are not decoded")
    return []


_METADATA_LOADERS: Dict[TileKind, Callable[[Tile, Optional[LabelIndex]], Optional[TileMetadata]]] = {
    TileKind.DIRECTORY: _load_directory_metadata,
    TileKind.MULTIBAND_FILE: _load_multiband_metadata,
}

_IMAGE_LOADERS: Dict[TileKind, Callable[[Tile], List[Image]]] = {
    TileKind.DIRECTORY: _load_directory_images,
    TileKind.MULTIBAND_FILE: _load_multiband_images,
}


def load_image(image: Image) -> Image:
    """
    Decode an image's pixels in place.

    Raises:
        DecodeError: If the band file cannot be decoded.
    """
    decoded = decode_gray16(image.path)
    image.width = decoded.width
    image.height = decoded.height
    image.pixels = decoded.pixels
    return image


def load_metadata(tile: Tile, label_index: Optional[LabelIndex] = None) -> Optional[TileMetadata]:
    """
    Populate `tile.metadata`.

    A tile without a descriptor (or, for multiband tiles, without an index
    entry) keeps `metadata` as None; that is not an error.

    Raises:
        TileReadError: If the tile's storage cannot be read.
        MetadataError: If a descriptor exists but cannot be parsed.
    """
    tile.metadata = _METADATA_LOADERS[tile.kind](tile, label_index)
    return tile.metadata


def load_images(tile: Tile) -> List[Image]:
    """
    Populate `tile.images` with decoded band images.

    Raises:
        TileReadError: If the tile folder cannot be read.
        DecodeError: If any band file cannot be decoded.
    """
    tile.images = _IMAGE_LOADERS[tile.kind](tile)
    return tile.images


def load_files(tile: Tile, label_index: Optional[LabelIndex] = None) -> Tile:
    """Load both metadata and images of a tile."""
    load_metadata(tile, label_index)
    load_images(tile)
    return tile
