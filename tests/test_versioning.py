"""Tests for next_version_tag.versioning."""

import pytest

from next_version_tag import get_next_version


class TestNextRevision:
    """Revision increments without release candidates."""

    def test_initial_version_without_tags(self) -> None:
        assert get_next_version([], "v1.4.5.${rev}") == "v1.4.5.1"

    def test_increments_highest_revision(self) -> None:
        tags = ["v1.4.5.1", "v1.4.5.2", "v1.4.5.4"]
        assert get_next_version(tags, "v1.4.5.${rev}") == "v1.4.5.5"

    def test_ignores_non_matching_tags(self) -> None:
        tags = ["v1.4.5.1", "release-2", "v1.4.5.2"]
        assert get_next_version(tags, "v1.4.5.${rev}") == "v1.4.5.3"

    def test_other_format(self) -> None:
        assert get_next_version(["product-1.2.1", "product-1.2.2"], "product-1.2.${rev}") == "product-1.2.3"

    def test_leading_zeroes(self) -> None:
        tags = ["v1.0.01", "v1.0.02", "v1.0.10"]
        assert get_next_version(tags, "v1.0.${rev}") == "v1.0.11"

    def test_unordered_and_duplicated_tags(self) -> None:
        tags = ["v9", "v10", "v2", "v10"]
        assert get_next_version(tags, "v${rev}") == "v11"

    def test_revision_zero_counts_as_no_match(self) -> None:
        assert get_next_version(["v0"], "v${rev}") == "v1"

    def test_dot_in_format_is_not_a_wildcard(self) -> None:
        assert get_next_version(["v1x0x7"], "v1.0.${rev}") == "v1.0.1"

    def test_rc_tags_do_not_bump_revision(self) -> None:
        tags = ["app-v1", "app-v2", "app-v3-rc1", "app-v3-rc2"]
        assert get_next_version(tags, "app-v${rev}") == "app-v3"

    def test_format_without_rev_is_returned_as_is(self) -> None:
        assert get_next_version(["app-v2", "app-v3"], "app-v2") == "app-v2"

    def test_only_first_rev_replaced(self) -> None:
        assert get_next_version([], "v${rev}.${rev}") == "v1.${rev}"

    def test_is_idempotent(self) -> None:
        tags = ["v1.4.5.1", "v1.4.5.2"]
        first = get_next_version(tags, "v1.4.5.${rev}", True)
        assert get_next_version(tags, "v1.4.5.${rev}", True) == first
        assert tags == ["v1.4.5.1", "v1.4.5.2"]


class TestReleaseCandidate:
    """Release candidate suffix numbering."""

    def test_first_rc_without_tags(self) -> None:
        assert get_next_version([], "v${rev}", True) == "v1-rc1"

    def test_increments_rc_without_rev(self) -> None:
        tags = ["app-v2-rc1", "app-v2-rc2", "app-v2-rc3"]
        assert get_next_version(tags, "app-v2", True) == "app-v2-rc4"

    def test_starts_at_rc1(self) -> None:
        assert get_next_version(["app-v2", "app-v3"], "app-v4", True) == "app-v4-rc1"

    def test_mixed_tags(self) -> None:
        tags = ["app-v1", "app-v2", "app-v3-rc1", "app-v3-rc2"]
        assert get_next_version(tags, "app-v${rev}", True) == "app-v3-rc3"

    @pytest.mark.parametrize(
        ("release_candidate", "expected"),
        [
            (False, "tk-config-default2.1.4.5.3"),
            (True, "tk-config-default2.1.4.5.3-rc3"),
        ],
    )
    def test_real_example(self, release_candidate, expected) -> None:
        tags = [
            "tk-config-default2.1.4.5.1",
            "tk-config-default2.1.4.5.2",
            "tk-config-default2.1.4.5.3-rc1",
            "tk-config-default2.1.4.5.3-rc2",
        ]
        assert get_next_version(tags, "tk-config-default2.1.4.5.${rev}", release_candidate) == expected

    def test_non_ascii_digits_ignored(self) -> None:
        assert get_next_version(["v\u0669\u0669"], "v${rev}") == "v1"
        assert get_next_version(["app-v2-rc\u0669"], "app-v2", True) == "app-v2-rc1"

    def test_trailing_newline_not_a_match(self) -> None:
        assert get_next_version(["v3\n"], "v${rev}") == "v1"

    def test_rc_pattern_dots_match_any_character(self) -> None:
        assert get_next_version(["2x0-rc5"], "2.0", True) == "2.0-rc6"
