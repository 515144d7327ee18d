"""Tests for destination folder naming rules."""

import pytest
from pathlib import Path

from vidgroup.filesystem.paths import DestinationRule, resolve_destination


class TestResolveDestination:
    """Tests for resolve_destination function."""

    def test_stem_rule_is_default(self):
        """Default rule drops the extension next to the file."""
        result = resolve_destination(Path("/videos/show/episode1.m4v"))
        assert result == Path("/videos/show/episode1")

    def test_stem_rule_keeps_inner_dots(self):
        """Only the last suffix is removed."""
        result = resolve_destination(Path("/videos/My.Show.S01E01.m4v"), DestinationRule.STEM)
        assert result == Path("/videos/My.Show.S01E01")

    def test_underscore_rule_replaces_every_dot(self):
        """Underscore rule replaces all dots of the path."""
        result = resolve_destination(Path("/videos/v1.0/a.b.m4v"), DestinationRule.UNDERSCORE)
        assert result == Path("/videos/v1_0/a_b_m4v")

    def test_grandparent_rule(self):
        """Grandparent rule places the folder two levels up."""
        result = resolve_destination(Path("/videos/show/season1/ep1.m4v"), DestinationRule.GRANDPARENT)
        assert result == Path("/videos/show/ep1")

    def test_accepts_rule_value(self):
        """Rules can be given by value."""
        result = resolve_destination(Path("/v/a.m4v"), "underscore")
        assert result == Path("/v/a_m4v")

    def test_unknown_rule_raises(self):
        """An unknown rule is rejected."""
        with pytest.raises(ValueError):
            resolve_destination(Path("/v/a.m4v"), "sideways")

    def test_path_without_name_raises(self):
        """A root path cannot name a folder."""
        with pytest.raises(ValueError):
            resolve_destination(Path("/"))

    def test_is_deterministic(self):
        """Same input, same folder."""
        first = Path("/videos/show/episode1.m4v")
        assert resolve_destination(first) == resolve_destination(first)

    @pytest.mark.parametrize("rule", list(DestinationRule))
    def test_never_returns_the_file_itself(self, rule):
        """The destination differs from the first file for every rule."""
        first = Path("/videos/show/episode1.m4v")
        assert resolve_destination(first, rule) != first
