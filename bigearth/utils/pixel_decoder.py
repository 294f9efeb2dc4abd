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
Pixel Decoder.

Decodes a single-band 16-bit grayscale TIFF into a (width, height, pixels)
triple. The decoded samples are laid out in a big-endian backing buffer, two
bytes per pixel, and every pixel value is composed as `(byte0 << 8) | byte1`.
"""

import logging
from pathlib import Path
from typing import NamedTuple, Union

import numpy as np
import tifffile

from bigearth.utils.exceptions import DecodeError

logger = logging.getLogger(__name__)


class DecodedRaster(NamedTuple):
    width: int
    height: int
    pixels: np.ndarray


def compose_big_endian(buffer: bytes) -> np.ndarray:
    """
    Compose 16-bit pixel values from a raw byte buffer, two bytes per pixel,
    most significant byte first.

    Args:
        buffer: The raw sample bytes. A trailing odd byte is ignored.

    Returns:
        A flat uint16 array with one value per byte pair.
    """
    raw = np.frombuffer(buffer, dtype=np.uint8)
    count = raw.size // 2
    high = raw[0:count * 2:2].astype(np.uint16)
    low = raw[1:count * 2:2].astype(np.uint16)
    return (high << 8) | low


def decode_gray16(path: Union[str, Path]) -> DecodedRaster:
    """
    Decode a single-band 16-bit raster.

    Args:
        path: Path to the TIFF file.

    Returns:
        DecodedRaster with width, height and a flat uint16 pixel array of
        length width * height in row-major order.

    Raises:
        DecodeError: If the file cannot be opened or is not a single-band
            16-bit unsigned image.
    """
    try:
        with tifffile.TiffFile(str(path)) as tif:
            if len(tif.pages) != 1:
                raise DecodeError(f"'{path}' is not a single-band image ({len(tif.pages)} pages)")
            page = tif.pages[0]
            if page.dtype != np.uint16:
                raise DecodeError(f"'{path}' is not a 16-bit grayscale image (dtype {page.dtype})")
            if page.samplesperpixel != 1 or len(page.shape) != 2:
                raise DecodeError(f"'{path}' is not a single-band image (shape {page.shape})")
            samples = page.asarray()
    except DecodeError:
        raise
    except (OSError, ValueError, tifffile.TiffFileError) as e:
        raise DecodeError(f"unable to decode tiff image '{path}'") from e

    height, width = samples.shape
    buffer = np.ascontiguousarray(samples, dtype='>u2').tobytes()
    pixels = compose_big_endian(buffer)
    logger.debug(f"decoded {Path(path).name}: {width} X {height}")
    return DecodedRaster(width, height, pixels)
