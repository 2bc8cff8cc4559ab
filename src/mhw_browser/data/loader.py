"""Startup loader for the monster and location catalogs.

Both endpoints are requested concurrently and the loader waits for both to
finish before deciding the outcome. There is no timeout and no retry: a
single failed request fails the whole load.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from mhw_browser.models.location import Location
from mhw_browser.models.monster import Monster


logger = logging.getLogger(__name__)

DEFAULT_API_BASE_URL = "https://mhw-db.com"
MONSTERS_PATH = "/monsters"
LOCATIONS_PATH = "/locations"


class FetchError(Exception):
    """A catalog request failed or returned an unusable body."""

    def __init__(self, endpoint: str, message: str) -> None:
        super().__init__(f"{endpoint}: {message}")
        self.endpoint = endpoint


@dataclass(frozen=True, slots=True)
class CatalogPayload:
    monsters: list[Monster]
    locations: list[Location]


def _endpoint_url(base_url: str, path: str) -> str:
    return base_url.rstrip("/") + path


async def fetch_json_array(client: httpx.AsyncClient, url: str) -> list[Any]:
    """GET ``url`` and return its body, which must be a JSON array."""
    logger.info("Fetching %s", url)
    try:
        response = await client.get(url)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise FetchError(url, f"HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise FetchError(url, f"request failed: {exc}") from exc

    try:
        body = response.json()
    except ValueError as exc:
        raise FetchError(url, "response body is not JSON") from exc

    if not isinstance(body, list):
        raise FetchError(url, f"expected a JSON array, got {type(body).__name__}")
    logger.info("Fetched %d records from %s", len(body), url)
    return body


async def fetch_catalog(
    client: httpx.AsyncClient,
    base_url: str = DEFAULT_API_BASE_URL,
) -> CatalogPayload:
    """Fetch monsters and locations concurrently and wait for both."""
    monsters_url = _endpoint_url(base_url, MONSTERS_PATH)
    locations_url = _endpoint_url(base_url, LOCATIONS_PATH)
    results = await asyncio.gather(
        fetch_json_array(client, monsters_url),
        fetch_json_array(client, locations_url),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result

    monster_rows, location_rows = results
    return CatalogPayload(
        monsters=[Monster.from_api(row) for row in monster_rows],
        locations=[Location.from_api(row) for row in location_rows],
    )


async def _load(base_url: str, transport: httpx.AsyncBaseTransport | None) -> CatalogPayload:
    async with httpx.AsyncClient(timeout=None, transport=transport) as client:
        return await fetch_catalog(client, base_url)


def load_catalog(
    base_url: str = DEFAULT_API_BASE_URL,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CatalogPayload:
    """Run the one-shot catalog load on a fresh event loop."""
    return asyncio.run(_load(base_url, transport))
