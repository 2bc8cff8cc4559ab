from mhw_browser.models.location import Location
from mhw_browser.models.monster import Monster


def monster(
    monster_id: int,
    name: str,
    monster_type: str = "large",
    locations: tuple[str, ...] = (),
) -> Monster:
    return Monster.from_api(
        {
            "id": monster_id,
            "name": name,
            "type": monster_type,
            "species": "flying wyvern",
            "description": f"{name} description",
            "locations": [{"id": i, "name": loc, "zoneCount": 10} for i, loc in enumerate(locations)],
        }
    )


def location(location_id: int, name: str, camps: list[dict] | None = None) -> Location:
    return Location.from_api(
        {"id": location_id, "name": name, "zoneCount": 15, "camps": camps or []}
    )


def monster_rows() -> list[dict]:
    return [
        {
            "id": 1,
            "name": "Great Jagras",
            "type": "small",
            "description": "Leader of the Jagras.",
            "locations": [{"id": 1, "name": "Ancient Forest", "zoneCount": 17}],
        },
        {
            "id": 2,
            "name": "Anjanath",
            "type": "large",
            "description": "A brutish wyvern.",
            "locations": [{"id": 1, "name": "Ancient Forest", "zoneCount": 17}],
        },
        {
            "id": 3,
            "name": "Barroth",
            "type": "large",
            "description": "Mud-covered brute.",
            "locations": [{"id": 2, "name": "Wildspire Waste", "zoneCount": 15}],
        },
    ]


def location_rows() -> list[dict]:
    return [
        {
            "id": 1,
            "name": "Ancient Forest",
            "zoneCount": 17,
            "camps": [{"id": 1, "name": "Southwest Camp", "zone": 1}],
        },
        {
            "id": 2,
            "name": "Wildspire Waste",
            "zoneCount": 15,
            "camps": [{"id": 5, "name": "Southwest Camp", "zone": 1}],
        },
    ]
