"""Tests for group key derivation and grouping."""

from __future__ import annotations

import re

import pytest

from partmerge.core.grouper import build_groups, derive_group_key, natural_sort_key
from partmerge.shared.constants import MatcherDefaults
from partmerge.shared.errors import PatternError


class TestDeriveGroupKey:
    """derive_group_key() behaviour."""

    def test_named_key_group(self) -> None:
        """The default matcher yields the prefix before the part counter."""
        pattern = re.compile(MatcherDefaults.GROUPING_MATCHER)

        assert derive_group_key("DJI_1234_001.mp4", pattern) == "DJI_1234"

    def test_named_group_among_unnamed_groups(self) -> None:
        """With several groups the ``key`` group is used."""
        pattern = re.compile(r"^(G[HX])(\d{2})(?P<key>\d{4})")

        assert derive_group_key("GH010042.MP4", pattern) == "0042"

    def test_unnamed_groups_keep_trim_rule(self) -> None:
        """Unnamed groups do not pick the key; the trimmed match does."""
        pattern = re.compile(r"^(DJI|GOPR)_\d{4}_")

        assert derive_group_key("DJI_1234_001.mp4", pattern) == "DJI_1234"
        assert derive_group_key("GOPR_0042_002.mp4", pattern) == "GOPR_0042"

    def test_whole_match_minus_separator(self) -> None:
        """A pattern without groups keeps the match minus its last character."""
        pattern = re.compile(r"^[^_]+_[^_]+_")

        assert derive_group_key("DJI_1234_001.mp4", pattern) == "DJI_1234"

    def test_first_match_is_used(self) -> None:
        """Only the first match counts."""
        pattern = re.compile(r"[A-Z]+_")

        assert derive_group_key("AB_CD_1.mp4", pattern) == "AB"

    def test_no_match_returns_none(self) -> None:
        """Files the matcher does not match have no key."""
        pattern = re.compile(MatcherDefaults.GROUPING_MATCHER)

        assert derive_group_key("holiday.mp4", pattern) is None

    def test_empty_key_returns_none(self) -> None:
        """A one-character match trims to nothing and is skipped."""
        pattern = re.compile(r"^_")

        assert derive_group_key("_intro.mp4", pattern) is None

    def test_grouping_is_case_sensitive(self) -> None:
        """Unlike discovery, grouping keeps the case of the pattern."""
        pattern = re.compile(r"^(dji)_")

        assert derive_group_key("DJI_1234_001.mp4", pattern) is None


class TestBuildGroups:
    """build_groups() behaviour."""

    def test_groups_by_key_and_drops_singletons(self) -> None:
        """Parts are grouped; a single-part recording is left out."""
        # Given
        candidates = [
            "DJI_1234_001.mp4",
            "DJI_1234_002.mp4",
            "DJI_5678_001.mp4",
            "DJI_9999_001.mp4",
            "DJI_5678_002.mp4",
        ]

        # When
        groups = build_groups(candidates, MatcherDefaults.GROUPING_MATCHER)

        # Then
        assert groups == {
            "DJI_1234": ["DJI_1234_001.mp4", "DJI_1234_002.mp4"],
            "DJI_5678": ["DJI_5678_001.mp4", "DJI_5678_002.mp4"],
        }

    def test_keys_keep_first_seen_order(self) -> None:
        """Groups come out in the order their first member was seen."""
        candidates = ["B_1_x", "A_1_x", "B_1_y", "A_1_y"]

        groups = build_groups(candidates, MatcherDefaults.GROUPING_MATCHER)

        assert list(groups) == ["B_1", "A_1"]

    def test_members_are_sorted(self) -> None:
        """Members are ordered regardless of input order."""
        candidates = ["DJI_1_003.mp4", "DJI_1_001.mp4", "DJI_1_002.mp4"]

        groups = build_groups(candidates, MatcherDefaults.GROUPING_MATCHER)

        assert groups["DJI_1"] == ["DJI_1_001.mp4", "DJI_1_002.mp4", "DJI_1_003.mp4"]

    def test_plain_order_puts_ten_before_nine(self) -> None:
        """Without natural sort, unpadded counters sort as text."""
        candidates = ["clip_a_9.mp4", "clip_a_10.mp4"]

        groups = build_groups(candidates, MatcherDefaults.GROUPING_MATCHER)

        assert groups["clip_a"] == ["clip_a_10.mp4", "clip_a_9.mp4"]

    def test_natural_sort_puts_nine_before_ten(self) -> None:
        """Natural sort orders embedded numbers by value."""
        candidates = ["clip_a_10.mp4", "clip_a_9.mp4", "clip_a_1.mp4"]

        groups = build_groups(
            candidates,
            MatcherDefaults.GROUPING_MATCHER,
            natural_sort=True,
        )

        assert groups["clip_a"] == ["clip_a_1.mp4", "clip_a_9.mp4", "clip_a_10.mp4"]

    def test_unmatched_files_are_ignored(self) -> None:
        """Files without a key do not form groups."""
        candidates = ["holiday.mp4", "party.mp4"]

        assert build_groups(candidates, MatcherDefaults.GROUPING_MATCHER) == {}

    def test_empty_candidates(self) -> None:
        """No candidates, no groups."""
        assert build_groups([], MatcherDefaults.GROUPING_MATCHER) == {}

    def test_alternation_group_keeps_recordings_apart(self) -> None:
        """A group used only for alternation must not merge different recordings."""
        # Given
        candidates = [
            "DJI_1234_001.mp4",
            "DJI_1234_002.mp4",
            "DJI_5678_001.mp4",
            "DJI_5678_002.mp4",
        ]

        # When
        groups = build_groups(candidates, r"^(DJI|GOPR)_\d{4}_")

        # Then
        assert groups == {
            "DJI_1234": ["DJI_1234_001.mp4", "DJI_1234_002.mp4"],
            "DJI_5678": ["DJI_5678_001.mp4", "DJI_5678_002.mp4"],
        }

    def test_invalid_pattern_raises(self) -> None:
        """A malformed grouping matcher is a PatternError."""
        with pytest.raises(PatternError) as exc_info:
            build_groups(["a_b_c"], "[unclosed")

        assert "grouping-matcher" in exc_info.value.message


def test_natural_sort_key() -> None:
    """Digits compare as numbers and text ignores case."""
    names = ["Part10", "part2", "PART1"]

    assert sorted(names, key=natural_sort_key) == ["PART1", "part2", "Part10"]
