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
End-to-End tests for the `bigearth sample` command.
"""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]


def run_bigearth(*args):
    return subprocess.run([sys.executable, '-m', 'bigearth', *args],
                          capture_output=True, text=True, cwd=PROJECT_ROOT)


class TestSampleCommand:
    """Test the `bigearth sample` command end-to-end."""

    def test_restructure_by_label(self, tmp_path, directory_corpus):
        out = tmp_path / 'out'

        result = run_bigearth('sample', '-s', str(directory_corpus), '-d', str(out), '--sample', '1')

        assert result.returncode == 0, f"Command failed: {result.stdout}{result.stderr}"
        assert sorted(p.name for p in out.iterdir()) == ['forest', 'pasture', 'water']
        assert "copied 3 tiles" in result.stdout

    def test_single_only(self, tmp_path, directory_corpus):
        out = tmp_path / 'out'

        result = run_bigearth('sample', '-s', str(directory_corpus), '-d', str(out), '--sample', '1',
                              '--single-only')

        assert result.returncode == 0, f"Command failed: {result.stdout}{result.stderr}"
        assert sorted(p.name for p in out.iterdir()) == ['forest', 'pasture']

    def test_seed_makes_sample_repeatable(self, tmp_path):
        root = tmp_path / 'src'
        for i in range(50):
            (root / f'S2_{i:02d}').mkdir(parents=True)
            (root / f'S2_{i:02d}' / f'S2_{i:02d}_labels_metadata.json').write_text('{"labels": ["a"]}')

        first = run_bigearth('sample', '-s', str(root), '-d', str(tmp_path / 'one'), '--sample', '0.5', '--seed', '3')
        second = run_bigearth('sample', '-s', str(root), '-d', str(tmp_path / 'two'), '--sample', '0.5', '--seed', '3')

        assert first.returncode == second.returncode == 0
        assert first.stdout.splitlines()[-1].split(' to ')[0] == second.stdout.splitlines()[-1].split(' to ')[0]

    def test_missing_descriptor_exits_non_zero(self, tmp_path, directory_corpus):
        (directory_corpus / 'S2_C' / 'S2_C_labels_metadata.json').unlink()

        result = run_bigearth('sample', '-s', str(directory_corpus), '-d', str(tmp_path / 'out'), '--sample', '1')

        assert result.returncode == 1
        assert "no metadata found" in result.stdout
