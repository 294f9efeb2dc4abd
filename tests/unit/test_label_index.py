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
Unit tests for the label index CSV loader.
"""

import pytest

from bigearth.utils.exceptions import LabelIndexError
from bigearth.utils.label_index import is_folder_name, load_label_index


@pytest.mark.unit
class TestLoadLabelIndex:
    """Test parsing of the image/label CSV."""

    def test_empty_path_gives_empty_index(self):
        assert load_label_index('') == {}
        assert load_label_index(None) == {}

    def test_columns_found_by_name(self, tmp_path):
        csv_path = tmp_path / 'labels.csv'
        csv_path.write_text('label,extra,image\nforest,x,T1.tiff\nwater,y,T2.tiff\n', encoding='utf-8')

        assert load_label_index(csv_path) == {'T1.tiff': 'forest', 'T2.tiff': 'water'}

    def test_later_rows_override(self, tmp_path):
        csv_path = tmp_path / 'labels.csv'
        csv_path.write_text('image,label\nT1.tiff,forest\nT1.tiff,water\n', encoding='utf-8')

        assert load_label_index(csv_path) == {'T1.tiff': 'water'}

    def test_short_rows_are_skipped(self, tmp_path):
        csv_path = tmp_path / 'labels.csv'
        csv_path.write_text('image,label\nT1.tiff\nT2.tiff,water\n', encoding='utf-8')

        assert load_label_index(csv_path) == {'T2.tiff': 'water'}

    @pytest.mark.parametrize('header', ['image,class', 'file,label', ''])
    def test_missing_column_fails(self, tmp_path, header):
        csv_path = tmp_path / 'labels.csv'
        csv_path.write_text(f'{header}\n', encoding='utf-8')

        with pytest.raises(LabelIndexError):
            load_label_index(csv_path)

    def test_missing_file_fails(self, tmp_path):
        with pytest.raises(LabelIndexError, match='not found'):
            load_label_index(tmp_path / 'nope.csv')

    @pytest.mark.parametrize('label', ['../escape', '..', '.', '/tmp/outside', 'a/b', 'a\\b'])
    def test_label_outside_destination_fails(self, tmp_path, label):
        csv_path = tmp_path / 'labels.csv'
        csv_path.write_text(f'image,label\nT1.tiff,forest\nT2.tiff,{label}\n', encoding='utf-8')

        with pytest.raises(LabelIndexError, match='line 3'):
            load_label_index(csv_path)

    def test_empty_label_is_kept(self, tmp_path):
        csv_path = tmp_path / 'labels.csv'
        csv_path.write_text('image,label\nT1.tiff,\n', encoding='utf-8')

        assert load_label_index(csv_path) == {'T1.tiff': ''}


@pytest.mark.unit
class TestIsFolderName:

    @pytest.mark.parametrize('label', ['forest', 'Sea and ocean', '...', 'a..b', ''])
    def test_plain_names(self, label):
        assert is_folder_name(label) is True

    @pytest.mark.parametrize('label', ['..', '.', '/abs', 'x/..', 'x\\y'])
    def test_path_like_names(self, label):
        assert is_folder_name(label) is False
