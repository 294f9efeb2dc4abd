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
BigEarth Processor Test Suite.

This package contains tests for the processor components including:
- Unit tests for individual functions and classes
- Integration tests for component interactions
- End-to-end tests for CLI commands
"""
