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
Unit tests for BigEarth Processor components.

This package contains unit tests that verify individual functions and classes
in isolation. Unit tests should be fast, focused, and independent.

Coverage targets: 85-95% depending on module criticality
"""