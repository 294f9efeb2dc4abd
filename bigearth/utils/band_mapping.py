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
Band Mapping Policy.

Decides, for every native (1-based) band index of a multiband raster, whether
the band is kept under its zero-padded original index, kept under a
replacement name, or dropped. A mapping entry with an empty replacement means
"drop"; an index absent from the mapping means "keep as original".

The mapping is built from two comma-separated command-line lists:
    --band-mapping "1:02,2:03,8:8A"
    --drop-bands "10,13"
"""
import logging
from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

from bigearth.utils.exceptions import BandMappingError

logger = logging.getLogger(__name__)

BandMapping = Dict[int, str]

DROP = ""


class BandAction(Enum):
    """What the splitter does with a native band."""
    KEEP = "keep"
    RENAME = "rename"
    DROP = "drop"


class BandDecision(NamedTuple):
    """The action for one band and, unless dropped, its output tag."""
    action: BandAction
    tag: Optional[str]


def _parse_index(token: str, context: str) -> int:
    try:
        index = int(token)
    except ValueError as e:
        raise BandMappingError(f"unable to parse source band integer {context}: '{token}'") from e
    if index < 1:
        raise BandMappingError(f"band indices are 1-based, got {index} {context}")
    return index


def parse_band_mapping(band_mapping_raw: Optional[str] = None, bands_to_drop: Optional[str] = None) -> BandMapping:
    """
    Build a band mapping from its command-line text.

    Args:
        band_mapping_raw: Comma-separated list of `old:new` pairs.
        bands_to_drop: Comma-separated list of band indices to drop.

    Returns:
        Mapping from native band index to replacement tag ('' marks a drop).

    Raises:
        BandMappingError: If a token is malformed or an index is not a positive integer.
    """
    mapping: BandMapping = {}

    for token in (band_mapping_raw or "").split(","):
        token = token.strip()
        if not token:
            continue
        if ":" not in token:
            raise BandMappingError(f"band mapping '{token}' is not in the format (old band):(new band)")
        old, new = token.split(":", 1)
        mapping[_parse_index(old.strip(), "for mapping")] = new.strip()

    # drops are applied last so they win over a rename of the same band
    for token in (bands_to_drop or "").split(","):
        token = token.strip()
        if not token:
            continue
        mapping[_parse_index(token, "to drop")] = DROP

    for old in sorted(mapping):
        new = mapping[old]
        if new == DROP:
            logger.info(f"dropping band {old}")
        else:
            logger.info(f"mapping band {old} to {new}")

    return mapping


def resolve_band(mapping: BandMapping, index: int) -> BandDecision:
    """Decide what happens to native band `index` under `mapping`."""
    if index not in mapping:
        return BandDecision(BandAction.KEEP, f"{index:02d}")
    replacement = mapping[index]
    if replacement == DROP:
        return BandDecision(BandAction.DROP, None)
    return BandDecision(BandAction.RENAME, replacement)


def plan_bands(mapping: BandMapping, band_count: int) -> List[Tuple[int, str]]:
    """
    Output tag for every retained band of a raster with `band_count` bands.

    Returns:
        (native index, tag) pairs in ascending native index order.

    Raises:
        BandMappingError: If two retained bands would be written under the same tag.
    """
    plan: List[Tuple[int, str]] = []
    seen: Dict[str, int] = {}
    for index in range(1, band_count + 1):
        decision = resolve_band(mapping, index)
        if decision.action is BandAction.DROP:
            continue
        if decision.tag in seen:
            raise BandMappingError(
                f"bands {seen[decision.tag]} and {index} both map to band tag '{decision.tag}'"
            )
        seen[decision.tag] = index
        plan.append((index, decision.tag))
    return plan
