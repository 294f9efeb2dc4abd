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
Band Splitter.

Splits a multiband raster into one single-band GeoTIFF per retained band
using `gdal.Translate`. Output files are named `<tile>_B<tag>.tiff` and are
written to `destination/<label>` or, without a label, `destination/<tile>`.
Bands are processed in ascending native index order so the output set is
deterministic for a given band mapping.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from osgeo import gdal

from bigearth.utils.band_mapping import BandMapping, plan_bands
from bigearth.utils.data_models import Tile
from bigearth.utils.exceptions import BandExtractionError, RasterOpenError

gdal.UseExceptions()
logger = logging.getLogger(__name__)

OUTPUT_EXTENSION = '.tiff'


def output_folder_for(tile: Tile, destination: Union[str, Path], label: Optional[str] = None) -> Path:
    """Folder receiving the bands of `tile`: the label folder if any, else the tile's own."""
    return Path(destination) / (label if label else tile.stem)


def output_name_for(tile: Tile, tag: str) -> str:
    return f"{tile.stem}_B{tag}{OUTPUT_EXTENSION}"


def open_raster(path: Union[str, Path]) -> gdal.Dataset:
    """
    Open a raster read-only.

    Raises:
        RasterOpenError: If GDAL cannot open the file.
    """
    try:
        ds = gdal.Open(str(path), gdal.GA_ReadOnly)
    except RuntimeError as e:
        raise RasterOpenError(f"unable to load geotiff '{path}'") from e
    if ds is None:
        raise RasterOpenError(f"unable to load geotiff '{path}'")
    return ds


def extract_single_band(ds: gdal.Dataset, band_index: int, output_path: Path) -> Path:
    """
    Write native band `band_index` of `ds` to its own GeoTIFF.

    Raises:
        BandExtractionError: If GDAL fails to write the band.
    """
    options = gdal.TranslateOptions(format='GTiff', bandList=[band_index])
    out_ds = None
    try:
        out_ds = gdal.Translate(str(output_path), ds, options=options)
        if out_ds is None:
            raise BandExtractionError(f"gdal.Translate failed to extract band {band_index} to '{output_path}'")
        out_ds.FlushCache()
    except RuntimeError as e:
        raise BandExtractionError(f"unable to extract band {band_index} to '{output_path}'") from e
    finally:
        out_ds = None
    return output_path


def split_multiband(tile: Tile, destination: Union[str, Path], label: Optional[str],
                    band_mapping: BandMapping) -> List[Path]:
    """
    Split a multiband tile into single-band rasters.

    Args:
        tile: The multiband tile to split.
        destination: Root output folder, created if missing.
        label: Optional label; when set, bands go to `destination/label`.
        band_mapping: Rename/drop policy per native band index.

    Returns:
        List[Path]: The files written, in ascending native band order.

    Raises:
        RasterOpenError: If the source raster cannot be opened.
        BandMappingError: If two retained bands share an output tag.
        BandExtractionError: If any band cannot be written.
    """
    ds = open_raster(tile.path)
    written: List[Path] = []
    try:
        plan = plan_bands(band_mapping, ds.RasterCount)
        dropped = ds.RasterCount - len(plan)
        if dropped:
            logger.debug(f"{tile.name}: dropping {dropped} of {ds.RasterCount} bands")

        folder = output_folder_for(tile, destination, label)
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise BandExtractionError(f"unable to make output folder '{folder}'") from e

        for band_index, tag in plan:
            output_path = folder / output_name_for(tile, tag)
            written.append(extract_single_band(ds, band_index, output_path))
    finally:
        ds = None

    logger.debug(f"{tile.name}: wrote {len(written)} band files to '{folder}'")
    return written
