#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# ******************************************************************************
# Project: BigEarth Processor
# Author: Eric Robeck <robeckgeo@gmail.com>
#
# Copyright (c) 2025, Eric Robeck
# Licensed under the MIT License
# ******************************************************************************

"""Entry point for `python -m bigearth`."""
from bigearth.main import main

main()
