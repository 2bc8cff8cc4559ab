"""Bootstrap helpers for loading the catalog into UI runtime state."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

import httpx

from mhw_browser.data.loader import DEFAULT_API_BASE_URL, FetchError, load_catalog
from mhw_browser.ui.controllers.control_controller import ControlController
from mhw_browser.ui.controllers.view_controller import ViewController
from mhw_browser.ui.state import UiState


logger = logging.getLogger(__name__)


def resolve_api_base_url(explicit: str | None = None) -> str:
    """CLI value first, then ``MHW_API_BASE_URL``, then the public API."""
    if explicit:
        return explicit
    env_value = os.environ.get("MHW_API_BASE_URL", "").strip()
    return env_value or DEFAULT_API_BASE_URL


@dataclass(slots=True)
class CatalogSession:
    """Runtime objects needed by UI pages/controllers."""

    state: UiState
    controls: ControlController
    view: ViewController


def bootstrap_default_session(
    api_base_url: str | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CatalogSession:
    """Load the catalog once and build controllers around it.

    A failed load is logged and leaves the baseline empty; the session is
    still usable and simply shows no records.
    """
    base_url = resolve_api_base_url(api_base_url)
    state = UiState(api_base_url=base_url)
    try:
        payload = load_catalog(base_url, transport=transport)
    except FetchError as exc:
        logger.error("Failed to load catalog data: %s", exc)
        state.catalog.mark_failed(str(exc))
    else:
        state.catalog.publish(payload.monsters, payload.locations)
        logger.info(
            "Loaded %d monsters and %d locations",
            len(payload.monsters),
            len(payload.locations),
        )

    controls = ControlController(state=state)
    controls.refresh()
    return CatalogSession(state=state, controls=controls, view=ViewController(state=state))
