"""Filter/sort pipeline that turns the baseline catalog into the displayed lists.

Everything here is a pure function of its inputs. The same baseline and
controls always produce the same lists in the same order, so the controllers
can simply re-run ``derive`` after any change instead of patching lists.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Sequence, TypeVar

from pyuca import Collator

from mhw_browser.models.location import Location
from mhw_browser.models.monster import Monster
from mhw_browser.ui.state import ALL_CATEGORIES, ControlState, DerivedState


_Named = TypeVar("_Named", Monster, Location)


@dataclass(frozen=True, slots=True)
class MonsterGroups:
    """Filtered monsters split by size class."""

    small: tuple[Monster, ...]
    large: tuple[Monster, ...]

    def group(self, name: str) -> tuple[Monster, ...]:
        if name == "small":
            return self.small
        if name == "large":
            return self.large
        raise ValueError(f"Unknown monster group: {name}")


def monster_in_category(monster: Monster, category: str) -> bool:
    return any(loc.name == category for loc in monster.locations)


def location_in_category(location: Location, category: str) -> bool:
    return location.name == category


def name_matches(name: str | None, search_term: str) -> bool:
    """Case-insensitive substring match on a record name."""
    if name is None:
        return False
    return search_term.lower() in name.lower()


@lru_cache(maxsize=1)
def _collator() -> Collator:
    return Collator()


def name_sort_key(record: Monster | Location) -> tuple[int, ...]:
    """Unicode collation key, so accented names sort beside their base letters."""
    return _collator().sort_key((record.name or "").lower())


def sort_by_name(records: Iterable[_Named]) -> list[_Named]:
    # sorted() is stable, so equal names keep their incoming order.
    return sorted(records, key=name_sort_key)


def filter_monsters(monsters: Iterable[Monster], controls: ControlState) -> list[Monster]:
    rows = list(monsters)
    if controls.applied_category != ALL_CATEGORIES:
        rows = [m for m in rows if monster_in_category(m, controls.applied_category)]
    if controls.search_term:
        rows = [m for m in rows if name_matches(m.name, controls.search_term)]
    if controls.sort_enabled:
        rows = sort_by_name(rows)
    return rows


def filter_locations(locations: Iterable[Location], controls: ControlState) -> list[Location]:
    rows = list(locations)
    if controls.applied_category != ALL_CATEGORIES:
        rows = [loc for loc in rows if location_in_category(loc, controls.applied_category)]
    if controls.search_term:
        rows = [loc for loc in rows if name_matches(loc.name, controls.search_term)]
    if controls.sort_enabled:
        rows = sort_by_name(rows)
    return rows


def derive(
    baseline_monsters: Sequence[Monster],
    baseline_locations: Sequence[Location],
    controls: ControlState,
) -> DerivedState:
    """Apply category filter, then search filter, then optional name sort."""
    return DerivedState(
        filtered_monsters=tuple(filter_monsters(baseline_monsters, controls)),
        filtered_locations=tuple(filter_locations(baseline_locations, controls)),
    )


def partition(monsters: Iterable[Monster]) -> MonsterGroups:
    """Split monsters into small/large groups, keeping relative order.

    Records whose ``type`` is anything other than exactly ``"small"`` or
    ``"large"`` land in neither group.
    """
    small: list[Monster] = []
    large: list[Monster] = []
    for monster in monsters:
        if monster.type == "small":
            small.append(monster)
        elif monster.type == "large":
            large.append(monster)
    return MonsterGroups(small=tuple(small), large=tuple(large))
