"""Export catalog browser state for the web UI runtime."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from mhw_browser.models.location import Location
from mhw_browser.models.monster import MONSTER_TYPES, Monster
from mhw_browser.ui.bootstrap import CatalogSession
from mhw_browser.ui.state import ALL_CATEGORIES


def _location_payload(location: Location, expanded: bool) -> dict[str, Any]:
    return {
        "id": location.id,
        "name": location.name,
        "zone_count": location.zone_count,
        "expanded": bool(expanded),
        "camps": [
            {"id": camp.id, "name": camp.name, "zone": camp.zone, "label": camp.label}
            for camp in location.camps
        ],
    }


def _monster_payload(monster: Monster) -> dict[str, Any]:
    return {
        "id": monster.id,
        "name": monster.name,
        "species": monster.species,
        "description": monster.description,
    }


def locations_empty_message(applied_category: str) -> str:
    if applied_category == ALL_CATEGORIES:
        return "No locations found."
    return f"No locations found for category {applied_category}."


def build_webui_state_from_session(session: CatalogSession) -> dict[str, Any]:
    """Build a render-ready snapshot from live controllers."""
    state = session.state
    controls = state.controls
    groups = session.controls.monster_groups()

    monster_sections: dict[str, Any] = {}
    for group in MONSTER_TYPES:
        members = groups.group(group)
        monster_sections[group] = {
            "label": f"{group.capitalize()} Monsters ({len(members)})",
            "count": len(members),
            "expanded": session.view.is_monster_group_expanded(group),
            "entries": [_monster_payload(m) for m in members],
            "empty_message": f"No {group} monsters found.",
        }

    return {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "app": {
            "banner_title": state.banner_title,
            "api_base_url": state.api_base_url,
            "load_status": state.catalog.load_status,
            "load_error": state.catalog.load_error,
        },
        "controls": {
            "search_term": controls.search_term,
            "selected_category": controls.selected_category,
            "applied_category": controls.applied_category,
            "sort_enabled": bool(controls.sort_enabled),
            "category_options": session.controls.category_options(),
        },
        "locations": {
            "heading": f"Location: {controls.applied_category}",
            "entries": [
                _location_payload(loc, session.view.is_location_expanded(loc.id))
                for loc in state.derived.filtered_locations
            ],
            "empty_message": locations_empty_message(controls.applied_category),
        },
        "monsters": {
            "heading": "Monsters by Location",
            "groups": monster_sections,
        },
    }
