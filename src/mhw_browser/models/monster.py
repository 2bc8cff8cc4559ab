"""Monster records as returned by the ``/monsters`` endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from mhw_browser.models.record_fields import int_field, list_field, text_field


MonsterType = Literal["small", "large"]
MONSTER_TYPES: tuple[MonsterType, ...] = ("small", "large")


@dataclass(frozen=True, slots=True)
class MonsterLocation:
    """A location entry embedded in a monster record."""
    id: int | None
    name: str | None
    zone_count: int | None = None

    @classmethod
    def from_api(cls, payload: Any) -> "MonsterLocation":
        return cls(
            id=int_field(payload, "id"),
            name=text_field(payload, "name"),
            zone_count=int_field(payload, "zoneCount"),
        )


@dataclass(frozen=True, slots=True)
class Monster:
    """One catalog monster. Identity is ``id``."""
    id: int | None
    name: str | None
    type: str | None            # "small" / "large" upstream, kept verbatim
    description: str | None
    species: str | None = None
    locations: tuple[MonsterLocation, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False, hash=False)

    @classmethod
    def from_api(cls, payload: Any) -> "Monster":
        return cls(
            id=int_field(payload, "id"),
            name=text_field(payload, "name"),
            type=text_field(payload, "type"),
            description=text_field(payload, "description"),
            species=text_field(payload, "species"),
            locations=tuple(MonsterLocation.from_api(loc) for loc in list_field(payload, "locations")),
            raw=dict(payload) if isinstance(payload, dict) else {},
        )
