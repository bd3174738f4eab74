"""
Tests for group identifier normalization and path helpers.
"""
import pytest

from layergroups.models.group_id import (
    ancestor_chain,
    create_group_id,
    group_depth,
    group_name,
    is_group_id,
    normalize_group_id,
    parent_group_id,
    sort_group_ids,
)


class TestNormalizeGroupId:

    @pytest.mark.parametrize("raw, expected", [
        ('roads', '$roads'),
        ('$roads', '$roads'),
        ('a/b', '$a/b'),
        ('Roads', '$Roads'),
    ])
    def test_prefix_added_once(self, raw, expected):
        assert normalize_group_id(raw) == expected

    @pytest.mark.parametrize("raw", ['roads', '$roads', 'a/b/c', '$$x', ' spaced '])
    def test_idempotent(self, raw):
        once = normalize_group_id(raw)
        assert normalize_group_id(once) == once

    def test_empty_values_pass_through(self):
        assert normalize_group_id(None) is None
        assert normalize_group_id('') == ''

    def test_is_group_id(self):
        assert is_group_id('$roads')
        assert not is_group_id('roads')
        assert not is_group_id('')
        assert not is_group_id(None)


class TestCreateGroupId:

    def test_joins_segments(self):
        assert create_group_id('a', 'b', 'c') == '$a/b/c'

    def test_single_segment(self):
        assert create_group_id('roads') == '$roads'

    def test_prefixed_first_segment(self):
        assert create_group_id('$a', 'b') == '$a/b'

    def test_no_segments_rejected(self):
        with pytest.raises(ValueError):
            create_group_id()

    def test_empty_segment_rejected(self):
        with pytest.raises(ValueError):
            create_group_id('a', '', 'c')

    @pytest.mark.parametrize("segments", [
        ('a', '$b'),
        ('a/', 'b'),
        ('a', 'b/c'),
        ('$$a', 'b'),
    ])
    def test_reserved_characters_rejected(self, segments):
        with pytest.raises(ValueError):
            create_group_id(*segments)


class TestAncestorChain:

    def test_chain_is_outermost_first(self):
        assert ancestor_chain('$a/b/c') == ['$a', '$a/b', '$a/b/c']

    def test_raw_id_is_normalized(self):
        assert ancestor_chain('a/b') == ['$a', '$a/b']

    def test_top_level_chain(self):
        assert ancestor_chain('roads') == ['$roads']

    def test_empty(self):
        assert ancestor_chain(None) == []
        assert ancestor_chain('') == []

    def test_every_entry_is_a_group_id(self):
        assert all(is_group_id(g) for g in ancestor_chain('x/y/z'))


class TestPathHelpers:

    def test_depth(self):
        assert group_depth('$a') == 1
        assert group_depth('a/b/c') == 3

    def test_parent(self):
        assert parent_group_id('$a/b/c') == '$a/b'
        assert parent_group_id('$a') is None

    def test_name(self):
        assert group_name('$a/b') == 'b'
        assert group_name('roads') == 'roads'

    def test_sort_outermost_first(self):
        assert sort_group_ids({'$a/b', '$z', '$a'}) == ['$a', '$z', '$a/b']
