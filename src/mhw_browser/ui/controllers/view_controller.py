"""Controller for expand/collapse panels."""

from dataclasses import dataclass

from mhw_browser.models.monster import MONSTER_TYPES
from mhw_browser.ui.state import UiState


@dataclass(slots=True)
class ViewController:
    """Owns view-state toggles. Never touches controls or derived lists."""

    state: UiState

    def toggle_location_panel(self, location_id: int | None) -> bool:
        view = self.state.view
        expanded = not view.is_location_expanded(location_id)
        view.expanded_location_ids = {**view.expanded_location_ids, location_id: expanded}
        return expanded

    def toggle_monster_group_panel(self, group: str) -> bool:
        if group not in MONSTER_TYPES:
            raise ValueError(f"Unknown monster group: {group}")
        view = self.state.view
        expanded = not view.is_monster_group_expanded(group)
        view.expanded_monster_groups = {**view.expanded_monster_groups, group: expanded}
        return expanded

    def is_location_expanded(self, location_id: int | None) -> bool:
        return self.state.view.is_location_expanded(location_id)

    def is_monster_group_expanded(self, group: str) -> bool:
        return self.state.view.is_monster_group_expanded(group)
