"""Print the filtered monster/location catalog.

Usage:
    python -m scripts.dump_catalog [--search TEXT] [--category NAME] [--sort]
                                   [--api-base URL]
"""

from __future__ import annotations

import argparse
import logging

from mhw_browser.ui.bootstrap import CatalogSession, bootstrap_default_session
from mhw_browser.webui.export_state import locations_empty_message


def format_catalog(session: CatalogSession) -> list[str]:
    """Render the current derived view as text lines."""
    state = session.state
    lines: list[str] = [f"Location: {state.controls.applied_category}"]

    locations = state.derived.filtered_locations
    if not locations:
        lines.append(f"  {locations_empty_message(state.controls.applied_category)}")
    for loc in locations:
        lines.append(f"  {loc.name} (zones: {loc.zone_count})")
        for camp in loc.camps:
            lines.append(f"    - {camp.label}")

    groups = session.controls.monster_groups()
    for name, members in (("small", groups.small), ("large", groups.large)):
        lines.append(f"{name.capitalize()} Monsters ({len(members)})")
        if not members:
            lines.append(f"  No {name} monsters found.")
        for monster in members:
            lines.append(f"  {monster.name}")
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump the filtered catalog")
    parser.add_argument("--search", default="", help="Case-insensitive name substring")
    parser.add_argument("--category", default=None, help="Exact location name to filter by")
    parser.add_argument("--sort", action="store_true", help="Sort alphabetically by name")
    parser.add_argument("--api-base", default=None, help="Catalog API base URL")
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)
    session = bootstrap_default_session(args.api_base)
    if session.state.catalog.load_status == "failed":
        print(f"Catalog failed to load: {session.state.catalog.load_error}")

    if args.category:
        session.controls.set_selected_category(args.category)
        session.controls.apply_category_filter()
    if args.search:
        session.controls.set_search_term(args.search)
    if args.sort:
        session.controls.toggle_sort()

    for line in format_catalog(session):
        print(line)


if __name__ == "__main__":
    main()
