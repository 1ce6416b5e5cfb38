"""Tests for East Asian Width based display width measurement."""

from mdtable.display_width import WidthPolicy, compute_width

MIXED = "ℵAあＡｱ∀"


def _policy(normalize=False, wide_chars=(), narrow_chars=(), ambiguous_as_wide=False):
    return WidthPolicy(
        normalize=normalize,
        wide_chars=frozenset(wide_chars),
        narrow_chars=frozenset(narrow_chars),
        ambiguous_as_wide=ambiguous_as_wide,
    )


class TestComputeWidth:
    """Tests for compute_width()."""

    def test_mixed_scripts(self):
        """Wide and fullwidth count 2, halfwidth and narrow count 1."""
        assert compute_width(MIXED, _policy()) == 8

    def test_ambiguous_as_wide(self):
        assert compute_width(MIXED, _policy(ambiguous_as_wide=True)) == 9

    def test_wide_override(self):
        assert compute_width(MIXED, _policy(wide_chars={"∀"})) == 9

    def test_narrow_override_beats_ambiguous_as_wide(self):
        assert compute_width(MIXED, _policy(narrow_chars={"∀"}, ambiguous_as_wide=True)) == 8

    def test_wide_override_checked_before_narrow(self):
        policy = _policy(wide_chars={"A"}, narrow_chars={"A"})
        assert compute_width("A", policy) == 2

    def test_combining_mark_without_normalization(self):
        assert compute_width("e\u0301", _policy()) == 2

    def test_combining_mark_with_normalization(self):
        """NFC composes e + acute accent into a single code point."""
        assert compute_width("e\u0301", _policy(normalize=True)) == 1

    def test_normalization_without_precomposed_form(self):
        # q + acute has no precomposed form
        assert compute_width("q\u0301", _policy(normalize=True)) == 2

    def test_counts_code_points_not_utf16_units(self):
        # U+20BB7 is outside the BMP and is Wide
        assert compute_width("\U00020bb7", _policy()) == 2

    def test_empty_string(self):
        assert compute_width("", _policy()) == 0

    def test_ascii(self):
        assert compute_width("hello world", _policy()) == 11

    def test_lone_surrogate_does_not_raise(self):
        assert compute_width("a\ud800", _policy()) == 2

    def test_plain_sets_accepted(self):
        """Any object with the policy fields works, including plain sets."""
        policy = WidthPolicy(
            normalize=False,
            wide_chars={"x"},
            narrow_chars=set(),
            ambiguous_as_wide=False,
        )
        assert compute_width("xy", policy) == 3
