import asyncio
import logging

import httpx
import pytest
from catalog_helpers import location_rows, monster_rows

from mhw_browser.data.loader import FetchError, fetch_catalog, load_catalog


def _transport(routes: dict, seen: list[str] | None = None) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request.url.path)
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"error": "not found"})
        if isinstance(route, Exception):
            raise route
        return route

    return httpx.MockTransport(handler)


def _ok_routes() -> dict:
    return {
        "/monsters": httpx.Response(200, json=monster_rows()),
        "/locations": httpx.Response(200, json=location_rows()),
    }


def test_load_catalog_parses_both_endpoints():
    payload = load_catalog("http://api.test", transport=_transport(_ok_routes()))

    assert [m.name for m in payload.monsters] == ["Great Jagras", "Anjanath", "Barroth"]
    assert [loc.name for loc in payload.locations] == ["Ancient Forest", "Wildspire Waste"]
    assert payload.monsters[0].locations[0].name == "Ancient Forest"
    assert payload.locations[0].camps[0].label == "Southwest Camp (Zone 1)"


def test_trailing_slash_in_base_url_is_ignored():
    seen: list[str] = []
    load_catalog("http://api.test/", transport=_transport(_ok_routes(), seen))
    assert sorted(seen) == ["/locations", "/monsters"]


def test_fetch_catalog_accepts_an_existing_client():
    async def run():
        async with httpx.AsyncClient(transport=_transport(_ok_routes())) as client:
            return await fetch_catalog(client, "http://api.test")

    payload = asyncio.run(run())
    assert len(payload.monsters) == 3
    assert len(payload.locations) == 2


def test_failure_of_one_request_fails_whole_load_after_both_finish():
    seen: list[str] = []
    routes = _ok_routes()
    routes["/monsters"] = httpx.Response(500, text="boom")

    with pytest.raises(FetchError, match="HTTP 500") as excinfo:
        load_catalog("http://api.test", transport=_transport(routes, seen))

    assert excinfo.value.endpoint == "http://api.test/monsters"
    assert sorted(seen) == ["/locations", "/monsters"]


def test_network_error_becomes_fetch_error():
    routes = _ok_routes()
    routes["/locations"] = httpx.ConnectError("connection refused")

    with pytest.raises(FetchError, match="request failed"):
        load_catalog("http://api.test", transport=_transport(routes))


def test_non_json_body_becomes_fetch_error():
    routes = _ok_routes()
    routes["/locations"] = httpx.Response(200, text="<html>maintenance</html>")

    with pytest.raises(FetchError, match="not JSON"):
        load_catalog("http://api.test", transport=_transport(routes))


def test_non_array_body_becomes_fetch_error():
    routes = _ok_routes()
    routes["/monsters"] = httpx.Response(200, json={"monsters": []})

    with pytest.raises(FetchError, match="expected a JSON array"):
        load_catalog("http://api.test", transport=_transport(routes))


def test_fetches_are_logged(caplog):
    caplog.set_level(logging.INFO, logger="mhw_browser.data.loader")
    load_catalog("http://api.test", transport=_transport(_ok_routes()))

    messages = [record.getMessage() for record in caplog.records]
    assert "Fetched 3 records from http://api.test/monsters" in messages
    assert "Fetched 2 records from http://api.test/locations" in messages
