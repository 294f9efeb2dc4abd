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
End-to-End tests for the `bigearth split` command.

These tests verify the complete workflow from CLI invocation to output files.
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def run_bigearth(*args):
    return subprocess.run([sys.executable, '-m', 'bigearth', *args],
                          capture_output=True, text=True, cwd=PROJECT_ROOT)


class TestSplitCommand:
    """Test the `bigearth split` command end-to-end."""

    def test_split_with_labels_and_drop(self, tmp_path, multiband_corpus):
        root, label_csv = multiband_corpus
        out = tmp_path / 'out'

        result = run_bigearth('split', '-s', str(root), '-d', str(out), '-l', str(label_csv),
                              '--sample', '1', '--drop-bands', '2', '--split', 'true')

        assert result.returncode == 0, f"Command failed: {result.stdout}{result.stderr}"
        assert sorted(p.name for p in (out / 'forest').iterdir()) == ['T1_B01.tiff', 'T1_B03.tiff']
        assert sorted(p.name for p in (out / 'water').iterdir()) == ['T2_B01.tiff', 'T2_B03.tiff']
        assert "dropping band 2" in result.stdout
        assert "done splitting tiles" in result.stdout

    def test_split_flag_without_value(self, tmp_path, multiband_corpus):
        root, _ = multiband_corpus
        out = tmp_path / 'out'

        result = run_bigearth('split', '-s', str(root), '-d', str(out), '--sample', '1',
                              '--band-mapping', '3:8A', '--split')

        assert result.returncode == 0, f"Command failed: {result.stdout}{result.stderr}"
        assert sorted(p.name for p in (out / 'T1').iterdir()) == ['T1_B01.tiff', 'T1_B02.tiff', 'T1_B8A.tiff']

    def test_copy_is_default(self, tmp_path, multiband_corpus):
        root, _ = multiband_corpus
        out = tmp_path / 'out'

        result = run_bigearth('split', '-s', str(root), '-d', str(out), '--sample', '1')

        assert result.returncode == 0, f"Command failed: {result.stdout}{result.stderr}"
        assert sorted(p.name for p in out.iterdir()) == ['T1.tiff', 'T2.tiff']

    def test_bad_band_mapping_exits_non_zero(self, tmp_path, multiband_corpus):
        root, _ = multiband_corpus
        out = tmp_path / 'out'

        result = run_bigearth('split', '-s', str(root), '-d', str(out), '--sample', '1',
                              '--band-mapping', 'one:02', '--split')

        assert result.returncode == 1
        assert "unable to parse source band integer" in result.stdout
        assert not out.exists()

    def test_missing_source_folder_exits_non_zero(self, tmp_path):
        result = run_bigearth('split', '-s', str(tmp_path / 'missing'), '-d', str(tmp_path / 'out'))

        assert result.returncode == 1
        assert "Source folder not found" in result.stdout

    def test_sample_out_of_range_rejected(self, tmp_path):
        result = run_bigearth('split', '-s', str(tmp_path), '-d', str(tmp_path / 'out'), '--sample', '2')

        assert result.returncode == 2
        assert "Sample must be between 0 and 1" in result.stderr
