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
Label Index Loader.

Multiband tiles carry no sidecar descriptor, so their labels come from a CSV
index with (at least) an `image` and a `label` column:

    image,label
    T1.tiff,forest
    T2.tiff,water
"""

import csv
import logging
from pathlib import Path
from typing import Dict, Optional, Union

from bigearth.utils.exceptions import LabelIndexError

logger = logging.getLogger(__name__)

COL_IMAGE = 'image'
COL_LABEL = 'label'
MANDATORY_HEADERS = [COL_IMAGE, COL_LABEL]
PATH_SEPARATORS = ('/', '\\')


def is_folder_name(label: str) -> bool:
    """True when `label` names a single folder directly under the destination."""
    if label in ('.', '..') or Path(label).is_absolute():
        return False
    return not any(sep in label for sep in PATH_SEPARATORS)


def load_label_index(label_path: Optional[Union[str, Path]]) -> Dict[str, str]:
    """
    Load the image-name to label index.

    Args:
        label_path: Path to the CSV file. An empty path yields an empty index.

    Returns:
        Dict[str, str]: Label per image file name.

    Raises:
        LabelIndexError: If the file cannot be read, lacks a mandatory column,
            or holds a label that is not a plain folder name.
    """
    labels: Dict[str, str] = {}
    if not label_path:
        return labels

    label_path = Path(label_path)
    logger.info(f"reading labels from '{label_path}'")
    try:
        with open(label_path, 'r', newline='', encoding='utf-8') as infile:
            reader = csv.DictReader(infile)
            if not reader.fieldnames:
                raise LabelIndexError(f"Label index {label_path} has no header.")
            missing = [h for h in MANDATORY_HEADERS if h not in reader.fieldnames]
            if missing:
                raise LabelIndexError(f"Label index {label_path} has no {', '.join(missing)} field")
            for row in reader:
                image = row.get(COL_IMAGE)
                label = row.get(COL_LABEL)
                if image is None or label is None:
                    logger.warning(f"failed to read line {reader.line_num} of {label_path.name}: {row}")
                    continue
                if not is_folder_name(label):
                    raise LabelIndexError(
                        f"Label index {label_path} line {reader.line_num}: label '{label}' is not a valid folder name"
                    )
                labels[image] = label
    except FileNotFoundError as e:
        raise LabelIndexError(f"Label index not found: {label_path}") from e
    except (OSError, csv.Error, UnicodeDecodeError) as e:
        raise LabelIndexError(f"Error reading label index {label_path}: {e}") from e

    logger.info(f"read labels for {len(labels)} images")
    return labels
