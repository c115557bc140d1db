from __future__ import annotations

"""
Record admission logic.

Decides whether a candidate record passes the configured level and tag
allow-lists. Empty allow-lists are permissive.
"""

from typing import AbstractSet, FrozenSet, Iterable, Optional, Union

from logify.domain.levels import Level, parse_level


def is_loggable(
        tag: Optional[str],
        level: Level,
        levels: AbstractSet[Level],
        tags: AbstractSet[str],
) -> bool:
    """
    Return True if the record passes both membership predicates.

    Args:
        tag: Resolved tag of the record (may be None).
        level: Semantic level of the record.
        levels: Allowed levels; empty means all.
        tags: Allowed tags; empty means all.
    """
    return (not levels or level in levels) and (not tags or tag in tags)


class LogFilters:
    """
    Mutable holder of the process-wide allow-lists.

    Both sets are replaced wholesale, never merged.
    """

    def __init__(self) -> None:
        self.levels: FrozenSet[Level] = frozenset()
        self.tags: FrozenSet[str] = frozenset()

    def set_levels(self, levels: Iterable[Union[Level, str]]) -> None:
        self.levels = frozenset(
            lvl if isinstance(lvl, Level) else parse_level(lvl) for lvl in levels
        )

    def set_tags(self, tags: Iterable[str]) -> None:
        self.tags = frozenset(tags)

    def clear(self) -> None:
        self.levels = frozenset()
        self.tags = frozenset()

    def allows(self, tag: Optional[str], level: Level) -> bool:
        return is_loggable(tag, level, self.levels, self.tags)
