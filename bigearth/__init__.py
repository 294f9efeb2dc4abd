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
BigEarth Processor.

Restructures multi-band satellite image tiles and profiles the corpus:
- split: one GeoTIFF per retained band of each multiband tile
- metrics: band, size, label and pixel value statistics
- sample: a random per-label copy of the corpus
"""

__version__ = "0.1.0"
