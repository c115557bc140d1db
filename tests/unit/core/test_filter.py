from __future__ import annotations

"""
Unit tests for record admission.

Verifies:
1. Empty allow-lists are permissive.
2. Level and tag predicates must both pass.
3. LogFilters replaces its sets wholesale.
"""

import pytest

from logify.core.filter import LogFilters, is_loggable
from logify.domain.levels import Level


def test_empty_sets_allow_everything():
    for lvl in Level:
        assert is_loggable(None, lvl, frozenset(), frozenset()) is True
        assert is_loggable("Any", lvl, frozenset(), frozenset()) is True


@pytest.mark.parametrize("levels, tags, tag, level, expected", [
    ({Level.ERROR}, set(), "Net", Level.ERROR, True),
    ({Level.ERROR}, set(), "Net", Level.INFO, False),
    (set(), {"Net"}, "Net", Level.DEBUG, True),
    (set(), {"Net"}, "Db", Level.DEBUG, False),
    (set(), {"Net"}, None, Level.DEBUG, False),
    ({Level.WARNING}, {"Net"}, "Net", Level.WARNING, True),
    ({Level.WARNING}, {"Net"}, "Db", Level.WARNING, False),
    ({Level.WARNING}, {"Net"}, "Net", Level.ERROR, False),
])
def test_both_predicates_must_pass(levels, tags, tag, level, expected):
    assert is_loggable(tag, level, levels, tags) is expected


def test_log_filters_accept_level_codes():
    filters = LogFilters()
    filters.set_levels(["E", Level.WARNING, "info"])

    assert filters.levels == {Level.ERROR, Level.WARNING, Level.INFO}
    assert filters.allows("x", Level.DEBUG) is False
    assert filters.allows("x", Level.INFO) is True


def test_log_filters_replace_not_merge():
    filters = LogFilters()
    filters.set_tags(["A", "B"])
    filters.set_tags(["C"])
    assert filters.tags == {"C"}

    filters.set_levels([Level.DEBUG])
    filters.set_levels([])
    assert filters.allows("C", Level.ERROR) is True


def test_log_filters_clear():
    filters = LogFilters()
    filters.set_levels([Level.ERROR])
    filters.set_tags(["A"])
    filters.clear()

    assert filters.allows("B", Level.DEBUG) is True
