"""Shared UI state for the catalog browser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from mhw_browser.models.location import Location
from mhw_browser.models.monster import MONSTER_TYPES, Monster


ALL_CATEGORIES = "All"

LoadStatus = Literal["loading", "loaded", "failed"]


@dataclass(slots=True)
class CatalogState:
    """Baseline catalog exactly as fetched. Written once, read-only afterwards."""

    monsters: tuple[Monster, ...] = ()
    locations: tuple[Location, ...] = ()
    load_status: LoadStatus = "loading"
    load_error: str | None = None

    def publish(self, monsters: list[Monster], locations: list[Location]) -> None:
        if self.load_status == "loaded":
            raise RuntimeError("Catalog baseline has already been published")
        self.monsters = tuple(monsters)
        self.locations = tuple(locations)
        self.load_status = "loaded"
        self.load_error = None

    def mark_failed(self, message: str) -> None:
        self.load_status = "failed"
        self.load_error = message


@dataclass(slots=True)
class ControlState:
    """Search/category/sort controls.

    ``selected_category`` is the pending selector value; only
    ``applied_category`` takes part in filtering.
    """

    search_term: str = ""
    selected_category: str = ALL_CATEGORIES
    applied_category: str = ALL_CATEGORIES
    sort_enabled: bool = False


@dataclass(frozen=True, slots=True)
class DerivedState:
    filtered_monsters: tuple[Monster, ...] = ()
    filtered_locations: tuple[Location, ...] = ()


def _default_group_flags() -> dict[str, bool]:
    return {group: False for group in MONSTER_TYPES}


@dataclass(slots=True)
class ViewState:
    """Expand/collapse flags. Absent keys read as collapsed."""

    expanded_location_ids: dict[int | None, bool] = field(default_factory=dict)
    expanded_monster_groups: dict[str, bool] = field(default_factory=_default_group_flags)

    def is_location_expanded(self, location_id: int | None) -> bool:
        return self.expanded_location_ids.get(location_id, False)

    def is_monster_group_expanded(self, group: str) -> bool:
        return self.expanded_monster_groups.get(group, False)


@dataclass(slots=True)
class UiState:
    """Top-level app state used by controllers and views."""

    banner_title: str = "Monster Hunter World"
    api_base_url: str = "https://mhw-db.com"
    catalog: CatalogState = field(default_factory=CatalogState)
    controls: ControlState = field(default_factory=ControlState)
    derived: DerivedState = field(default_factory=DerivedState)
    view: ViewState = field(default_factory=ViewState)
