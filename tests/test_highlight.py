"""Tests for the {1,3-5} line highlight annotation parser."""

import sys

import pytest

from highlight import (
    HighlightSpec,
    InvalidHighlightAnnotation,
    LineRange,
    build_selector,
    parse_highlight_spec,
)


def selected(metastring, upto=11):
    should_highlight_line = build_selector(metastring)
    return [i for i in range(upto) if should_highlight_line(i)]


class TestParseHighlightSpec:
    """Tests for parse_highlight_spec()."""

    def test_single_and_bounded_ranges(self):
        """Bare numbers become one-line ranges, N-M become bounded ranges."""
        spec = parse_highlight_spec("{2,4-6,9}")
        assert spec.ranges == (LineRange(2, 2), LineRange(4, 6), LineRange(9, 9))

    def test_encounter_order_kept(self):
        """Ranges are neither sorted nor deduplicated."""
        spec = parse_highlight_spec("{9,1-3,2}")
        assert spec.ranges == (LineRange(9, 9), LineRange(1, 3), LineRange(2, 2))

    @pytest.mark.parametrize("metastring", [None, "", "jsx", "{}", "{a,b}", "{1 ,2}"])
    def test_no_annotation_is_empty(self, metastring):
        """Anything without a digits/commas/hyphens group yields an empty spec."""
        assert parse_highlight_spec(metastring) == HighlightSpec()

    def test_only_first_group_honored(self):
        """A second bracket group is ignored."""
        spec = parse_highlight_spec("{1} {5-7}")
        assert spec.ranges == (LineRange(1, 1),)

    def test_group_inside_surrounding_text(self):
        """The group may sit anywhere in the meta string."""
        spec = parse_highlight_spec('title="app.js" {3}')
        assert spec.ranges == (LineRange(3, 3),)

    @pytest.mark.parametrize("metastring,token", [
        ("{1,}", ""),
        ("{,2}", ""),
        ("{-3}", "-3"),
        ("{4-}", "4-"),
        ("{1-2-3}", "1-2-3"),
    ])
    def test_malformed_token_rejected(self, metastring, token):
        """Malformed tokens inside a matching group raise at construction."""
        with pytest.raises(InvalidHighlightAnnotation) as exc_info:
            parse_highlight_spec(metastring)
        assert exc_info.value.metastring == metastring
        assert exc_info.value.token == token

    def test_invalid_annotation_is_value_error(self):
        """Callers catching ValueError also see the annotation error."""
        with pytest.raises(ValueError, match="invalid highlight annotation"):
            parse_highlight_spec("{1,,2}")


class TestBuildSelector:
    """Tests for the per-line predicate returned by build_selector()."""

    def test_two_single_lines(self):
        should_highlight_line = build_selector("{1,4}")
        assert should_highlight_line(0) is True
        assert should_highlight_line(1) is False
        assert should_highlight_line(2) is False
        assert should_highlight_line(3) is True

    def test_mixed_ranges(self):
        assert selected("{2,4-6,9}") == [1, 3, 4, 5, 8]

    @pytest.mark.parametrize("metastring", [None, "", "jsx"])
    def test_absent_annotation_never_highlights(self, metastring):
        should_highlight_line = build_selector(metastring)
        assert not any(should_highlight_line(i) for i in range(100))

    def test_degenerate_range(self):
        assert selected("{3-3}") == [2]

    def test_range_boundaries(self):
        """Bounds are inclusive; the lines just outside are not selected."""
        should_highlight_line = build_selector("{4-6}")
        assert should_highlight_line(2) is False   # line 3
        assert should_highlight_line(3) is True    # line 4
        assert should_highlight_line(5) is True    # line 6
        assert should_highlight_line(6) is False   # line 7

    def test_tokens_combine_with_or(self):
        should_highlight_line = build_selector("{2,5}")
        assert should_highlight_line(1) is True
        assert should_highlight_line(4) is True
        assert should_highlight_line(2) is False

    def test_reversed_range_matches_nothing(self):
        assert selected("{5-2}") == []
        assert selected("{5-2,7}") == [6]

    def test_zero_end_is_reversed_range(self):
        assert selected("{3-0}") == []

    def test_line_zero_never_matches(self):
        """Line numbers start at 1, so index 0 is line 1."""
        assert selected("{0}") == []
        assert selected("{0-1}") == [0]

    def test_overlapping_ranges(self):
        assert selected("{1-3,2-4,3}") == [0, 1, 2, 3]

    def test_leading_zeros(self):
        assert selected("{02,010}") == [1, 9]

    def test_repeated_construction_is_stable(self):
        first = build_selector("{2,4-6,9}")
        second = build_selector("{2,4-6,9}")
        for i in range(12):
            assert first(i) == second(i) == first(i)

    @pytest.mark.parametrize("metastring", ["{１}", "{٣}", "{1,２}", "{१-३}"])
    def test_non_ascii_digits_not_an_annotation(self, metastring):
        """Only ASCII digits form a highlight group."""
        assert parse_highlight_spec(metastring) == HighlightSpec()
        should_highlight_line = build_selector(metastring)
        assert not any(should_highlight_line(i) for i in range(10))

    @pytest.mark.skipif(not hasattr(sys, 'get_int_max_str_digits'),
                        reason="no integer string conversion limit")
    def test_oversized_token_rejected(self):
        """Tokens too long for int() are reported as a bad annotation."""
        limit = sys.get_int_max_str_digits()
        if not limit:
            pytest.skip("integer string conversion limit disabled")
        token = "1" * (limit + 1)
        metastring = "{2," + token + "}"
        with pytest.raises(InvalidHighlightAnnotation) as exc_info:
            build_selector(metastring)
        assert exc_info.value.token == token

    def test_malformed_annotation_fails_fast(self):
        with pytest.raises(InvalidHighlightAnnotation):
            build_selector("{1,}")
