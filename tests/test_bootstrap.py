import logging

import httpx
import pytest
from catalog_helpers import location_rows, monster_rows

from mhw_browser.ui.bootstrap import bootstrap_default_session, resolve_api_base_url


def _transport(status: int = 200) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        if status != 200:
            return httpx.Response(status, text="unavailable")
        if request.url.path == "/monsters":
            return httpx.Response(200, json=monster_rows())
        return httpx.Response(200, json=location_rows())

    return httpx.MockTransport(handler)


def test_successful_load_publishes_baseline_and_unfiltered_view():
    session = bootstrap_default_session("http://api.test", transport=_transport())
    state = session.state

    assert state.catalog.load_status == "loaded"
    assert len(state.catalog.monsters) == 3
    assert state.derived.filtered_monsters == state.catalog.monsters
    assert state.derived.filtered_locations == state.catalog.locations
    assert state.controls.applied_category == "All"
    assert state.controls.sort_enabled is False


def test_baseline_cannot_be_published_twice():
    session = bootstrap_default_session("http://api.test", transport=_transport())
    with pytest.raises(RuntimeError, match="already been published"):
        session.state.catalog.publish([], [])


def test_failed_load_logs_and_leaves_empty_lists(caplog):
    caplog.set_level(logging.ERROR, logger="mhw_browser.ui.bootstrap")
    session = bootstrap_default_session("http://api.test", transport=_transport(503))
    state = session.state

    assert state.catalog.load_status == "failed"
    assert "HTTP 503" in (state.catalog.load_error or "")
    assert state.catalog.monsters == ()
    assert state.derived.filtered_monsters == ()
    assert state.derived.filtered_locations == ()
    assert any("Failed to load catalog data" in r.getMessage() for r in caplog.records)

    # Controls keep working against the empty baseline.
    session.controls.set_search_term("rath")
    assert session.controls.monster_groups().small == ()


def test_api_base_url_resolution(monkeypatch):
    monkeypatch.delenv("MHW_API_BASE_URL", raising=False)
    assert resolve_api_base_url() == "https://mhw-db.com"

    monkeypatch.setenv("MHW_API_BASE_URL", "http://mirror.test")
    assert resolve_api_base_url() == "http://mirror.test"
    assert resolve_api_base_url("http://cli.test") == "http://cli.test"
