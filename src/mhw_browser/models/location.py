"""Location records as returned by the ``/locations`` endpoint."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from mhw_browser.models.record_fields import int_field, list_field, text_field


@dataclass(frozen=True, slots=True)
class Camp:
    """A camp inside a location."""
    id: int | None
    name: str | None
    zone: int | None

    @classmethod
    def from_api(cls, payload: Any) -> "Camp":
        return cls(
            id=int_field(payload, "id"),
            name=text_field(payload, "name"),
            zone=int_field(payload, "zone"),
        )

    @property
    def label(self) -> str:
        return f"{self.name} (Zone {self.zone})"


@dataclass(frozen=True, slots=True)
class Location:
    """One catalog location. Identity is ``id``."""
    id: int | None
    name: str | None
    zone_count: int | None
    camps: tuple[Camp, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False, hash=False)

    @classmethod
    def from_api(cls, payload: Any) -> "Location":
        return cls(
            id=int_field(payload, "id"),
            name=text_field(payload, "name"),
            zone_count=int_field(payload, "zoneCount"),
            camps=tuple(Camp.from_api(camp) for camp in list_field(payload, "camps")),
            raw=dict(payload) if isinstance(payload, dict) else {},
        )
