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
File and Directory Path Utilities for the BigEarth Processor.

This module provides helper functions for file system operations: listing the
entries of a corpus folder in a deterministic order, turning labels into safe
folder names, and copying tile files into a restructured destination.
"""
import logging
import re
import shutil
from pathlib import Path
from typing import List, Union

from bigearth.utils.exceptions import FileCopyError, TileReadError

logger = logging.getLogger(__name__)

LABEL_CLEAN_PATTERN = re.compile(r'[^a-zA-Z0-9]')

def list_tile_entries(folder: Union[str, Path]) -> List[Path]:
    """
    List the entries (tile folders or multiband files) of a corpus folder.

    Args:
        folder: The corpus root folder.

    Returns:
        List[Path]: Entries sorted by name.

    Raises:
        TileReadError: If the folder cannot be read.
    """
    folder = Path(folder)
    try:
        entries = sorted(folder.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise TileReadError(f"unable to read contents of '{folder}'") from e
    return entries

def clean_label(label: str) -> str:
    """Replace every character outside [a-zA-Z0-9] with an underscore."""
    return LABEL_CLEAN_PATTERN.sub("_", label)

def copy_file(source_file: Union[str, Path], destination_file: Union[str, Path]) -> Path:
    """
    Copy a file, creating the destination folder if needed.

    Args:
        source_file: The file to copy.
        destination_file: The full destination path.

    Returns:
        Path: The destination path.

    Raises:
        FileCopyError: If the folder cannot be created or the copy fails.
    """
    source_file = Path(source_file)
    destination_file = Path(destination_file)
    try:
        destination_file.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileCopyError(f"unable to make destination folder '{destination_file.parent}'") from e
    try:
        shutil.copyfile(source_file, destination_file)
    except OSError as e:
        raise FileCopyError(f"unable to copy '{source_file}' to '{destination_file}'") from e
    logger.debug(f"copied {source_file} -> {destination_file}")
    return destination_file
