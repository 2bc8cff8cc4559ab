"""Controller for search, category and sort controls."""

from dataclasses import dataclass
from typing import Callable

from mhw_browser.engine.catalog_filter import MonsterGroups, derive, partition
from mhw_browser.ui.state import ALL_CATEGORIES, UiState


@dataclass(slots=True)
class ControlController:
    """Owns control-state mutations and re-derivation of the displayed lists."""

    state: UiState
    on_change: Callable[[], None] | None = None

    def refresh(self) -> None:
        """Recompute derived lists from the baseline and current controls."""
        self.state.derived = derive(
            self.state.catalog.monsters,
            self.state.catalog.locations,
            self.state.controls,
        )
        self._notify_changed()

    def set_search_term(self, search_term: str) -> None:
        self.state.controls.search_term = search_term
        self.refresh()

    def set_selected_category(self, name: str) -> None:
        # Pending only; apply_category_filter() commits it.
        self.state.controls.selected_category = name

    def apply_category_filter(self) -> None:
        self.state.controls.applied_category = self.state.controls.selected_category
        self.refresh()

    def toggle_sort(self) -> None:
        self.state.controls.sort_enabled = not self.state.controls.sort_enabled
        self.refresh()

    def category_options(self) -> list[str]:
        options = [ALL_CATEGORIES]
        for location in self.state.catalog.locations:
            if location.name is not None:
                options.append(location.name)
        return options

    def monster_groups(self) -> MonsterGroups:
        return partition(self.state.derived.filtered_monsters)

    def _notify_changed(self) -> None:
        if self.on_change is not None:
            self.on_change()
