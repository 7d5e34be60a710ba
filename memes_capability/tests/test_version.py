"""Tests for backend version compatibility."""

import pytest

from memes_capability.version import (
    MIN_BACKEND_VERSION,
    format_version,
    parse_version,
    version_meets,
)


class TestParseVersion:
    def test_full_version(self):
        assert parse_version("1.2.3") == (1, 2, 3)

    def test_missing_components_are_zero(self):
        assert parse_version("1") == (1, 0, 0)
        assert parse_version("1.2") == (1, 2, 0)

    def test_extra_components_are_ignored(self):
        assert parse_version("1.2.3.4") == (1, 2, 3)

    def test_prerelease_suffix_uses_leading_digits(self):
        assert parse_version("0.2.2-beta.1") == (0, 2, 2)

    def test_v_prefix(self):
        assert parse_version("v0.3.0") == (0, 3, 0)

    @pytest.mark.parametrize("value", ["", "abc", "..", "x.y.z", None, 22, ["0", "2", "2"]])
    def test_malformed_is_lowest(self, value):
        assert parse_version(value) == (0, 0, 0)


class TestVersionMeets:
    @pytest.mark.parametrize("actual", ["0.2.2", "0.2.3", "1.0.0"])
    def test_meets_minimum(self, actual):
        assert version_meets(actual, [0, 2, 2]) is True

    def test_below_minimum(self):
        assert version_meets("0.2.1", [0, 2, 2]) is False
        assert version_meets("0.1.9", [0, 2, 2]) is False

    def test_lexicographic_order(self):
        assert version_meets("0.10.0", [0, 2, 2]) is True
        assert version_meets("1.0.0", [0, 99, 99]) is True

    @pytest.mark.parametrize("actual", ["", "garbage", "-", None, object(), "..."])
    @pytest.mark.parametrize("minimum", [[0, 0, 1], [0, 2, 2], [1, 0, 0]])
    def test_malformed_never_meets_positive_minimum(self, actual, minimum):
        assert version_meets(actual, minimum) is False

    def test_short_minimum_is_padded(self):
        assert version_meets("0.2.0", [0, 2]) is True

    def test_default_minimum(self):
        assert MIN_BACKEND_VERSION == (0, 2, 2)
        assert version_meets("0.2.2") is True
        assert version_meets("0.2.0") is False


def test_format_version():
    assert format_version((0, 2, 2)) == "0.2.2"
