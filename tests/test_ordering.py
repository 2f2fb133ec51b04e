"""Tests for date and semantic-version sort keys."""

from datetime import date

import pytest
from freshdocs.core.ordering import SemVer, date_slug, date_sort_key, semver_sort_key


class TestDateSortKey:
    """Tests for date_sort_key() and date_slug()."""

    def test__date_prefixed_stem__returns_date(self) -> None:
        """Parse the YYYY-MM-DD prefix."""
        assert date_sort_key("2024-01-02-launch") == date(2024, 1, 2)

    def test__date_only_stem__returns_date(self) -> None:
        """Accept a stem that is just the date."""
        assert date_sort_key("2024-01-02") == date(2024, 1, 2)

    def test__impossible_date__returns_none(self) -> None:
        """Reject dates that do not exist."""
        assert date_sort_key("2024-02-30-leap") is None

    def test__no_date_prefix__returns_none(self) -> None:
        """Reject stems without a date prefix."""
        assert date_sort_key("authors") is None
        assert date_sort_key("2024-1-2-short") is None

    def test__slug__returns_text_after_date(self) -> None:
        """Return the slug following the date prefix."""
        assert date_slug("2024-01-02-hello-world") == "hello-world"
        assert date_slug("2024-01-02") == ""


class TestSemVer:
    """Tests for SemVer parsing and precedence."""

    def test__parse__full_version(self) -> None:
        """Parse all version components."""
        version = SemVer.parse("v1.2.3-beta.1+build.5")

        assert version == SemVer(1, 2, 3, ("beta", "1"), ("build", "5"))
        assert str(version) == "1.2.3-beta.1+build.5"

    def test__parse__invalid__returns_none(self) -> None:
        """Return None for non-semver strings."""
        assert SemVer.parse("v1.2") is None
        assert SemVer.parse("v1.2.3.4") is None
        assert semver_sort_key("release-notes") is None

    def test__parse__leading_zero_prerelease__returns_none(self) -> None:
        """Reject numeric pre-release identifiers with leading zeros."""
        assert SemVer.parse("1.0.0-01") is None
        assert SemVer.parse("1.0.0-rc.007") is None
        assert SemVer.parse("1.0.0-0abc") == SemVer(1, 0, 0, ("0abc",))
        assert SemVer.parse("1.0.0-0") is not None

    def test__minor__compared_numerically(self) -> None:
        """Compare minor versions as numbers, not strings."""
        assert semver_sort_key("v1.10.0") > semver_sort_key("v1.2.0")

    def test__higher_major_prerelease__outranks_lower_major(self) -> None:
        """A pre-release of a newer major outranks older releases."""
        assert semver_sort_key("v2.0.0-beta") > semver_sort_key("v1.10.0")

    def test__prerelease__ranks_below_release(self) -> None:
        """A pre-release sorts before its release."""
        assert semver_sort_key("v1.0.0-rc.1") < semver_sort_key("v1.0.0")

    @pytest.mark.parametrize(
        ("lower", "higher"),
        [
            ("1.0.0-alpha", "1.0.0-alpha.1"),
            ("1.0.0-alpha.1", "1.0.0-alpha.beta"),
            ("1.0.0-alpha.beta", "1.0.0-beta"),
            ("1.0.0-beta", "1.0.0-beta.2"),
            ("1.0.0-beta.2", "1.0.0-beta.11"),
            ("1.0.0-beta.11", "1.0.0-rc.1"),
            ("1.0.0-rc.1", "1.0.0"),
        ],
    )
    def test__prerelease_precedence__follows_semver(self, lower: str, higher: str) -> None:
        """Order pre-release identifiers by SemVer 2.0.0 rules."""
        assert SemVer.parse(lower) < SemVer.parse(higher)

    def test__build_metadata__ignored_for_ordering(self) -> None:
        """Versions differing only in build metadata are equal."""
        first = SemVer.parse("1.0.0+a")
        second = SemVer.parse("1.0.0+b")

        assert first == second
        assert not first < second
        assert not second < first

    def test__sorted__orders_ascending(self) -> None:
        """Sort a mixed list into precedence order."""
        names = ["v1.10.0", "v2.0.0-beta", "v1.2.0", "v2.0.0"]

        ordered = sorted(names, key=semver_sort_key)

        assert ordered == ["v1.2.0", "v1.10.0", "v2.0.0-beta", "v2.0.0"]
