"""Web UI serving utilities with a live catalog runtime."""

from __future__ import annotations

import json
import logging
import threading
import webbrowser
from dataclasses import dataclass
from functools import partial
from http import HTTPStatus
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from urllib.parse import urlparse

from mhw_browser.ui.bootstrap import CatalogSession, bootstrap_default_session
from mhw_browser.webui.export_state import build_webui_state_from_session


logger = logging.getLogger(__name__)

REPO_ROOT = Path(__file__).resolve().parents[3]
WEBUI_DIR = REPO_ROOT / "webui"


@dataclass(slots=True)
class ActionResult:
    ok: bool
    message: str | None = None


class WebUiRuntime:
    """Live, mutable catalog runtime backing web UI API requests."""

    def __init__(
        self,
        *,
        session: CatalogSession | None = None,
        api_base_url: str | None = None,
    ) -> None:
        self.session = session or bootstrap_default_session(api_base_url)
        self._lock = threading.RLock()

    def snapshot(self) -> dict:
        with self._lock:
            return build_webui_state_from_session(self.session)

    def apply(self, path: str, payload: dict) -> ActionResult:
        with self._lock:
            try:
                if path == "/api/controls/search":
                    return self._action_search(payload)
                if path == "/api/controls/category":
                    return self._action_select_category(payload)
                if path == "/api/controls/apply-category":
                    self.session.controls.apply_category_filter()
                    return ActionResult(ok=True)
                if path == "/api/controls/sort":
                    self.session.controls.toggle_sort()
                    return ActionResult(ok=True)
                if path == "/api/view/location":
                    return self._action_toggle_location(payload)
                if path == "/api/view/monster-group":
                    return self._action_toggle_monster_group(payload)
            except (TypeError, ValueError) as exc:
                return ActionResult(ok=False, message=str(exc))
            return ActionResult(ok=False, message=f"Unknown API endpoint: {path}")

    def _action_search(self, payload: dict) -> ActionResult:
        search_term = payload.get("search_term")
        if search_term is None:
            search_term = ""
        if not isinstance(search_term, str):
            return ActionResult(ok=False, message="search_term must be a string")
        self.session.controls.set_search_term(search_term)
        return ActionResult(ok=True)

    def _action_select_category(self, payload: dict) -> ActionResult:
        category = payload.get("category")
        if not isinstance(category, str):
            return ActionResult(ok=False, message="category is required")
        self.session.controls.set_selected_category(category)
        return ActionResult(ok=True)

    def _action_toggle_location(self, payload: dict) -> ActionResult:
        if "location_id" not in payload:
            return ActionResult(ok=False, message="location_id is required")
        location_id = payload["location_id"]
        # Records without an id still get a panel, keyed by None.
        if location_id is not None:
            location_id = int(location_id)
        self.session.view.toggle_location_panel(location_id)
        return ActionResult(ok=True)

    def _action_toggle_monster_group(self, payload: dict) -> ActionResult:
        self.session.view.toggle_monster_group_panel(str(payload.get("group", "")))
        return ActionResult(ok=True)


class WebUiRequestHandler(SimpleHTTPRequestHandler):
    """Static-file handler with JSON API routes."""

    def __init__(self, *args, runtime: WebUiRuntime, directory: str, **kwargs):
        self._runtime = runtime
        super().__init__(*args, directory=directory, **kwargs)

    def log_message(self, format: str, *args) -> None:  # noqa: A002
        logger.debug("%s - %s", self.address_string(), format % args)

    def _send_json(self, payload: dict, status: int = HTTPStatus.OK) -> None:
        body = json.dumps(payload).encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", "application/json; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.send_header("Cache-Control", "no-store")
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self) -> None:  # noqa: N802
        path = urlparse(self.path).path
        if path == "/api/state":
            self._send_json(self._runtime.snapshot())
            return
        if path.startswith("/api/"):
            self._send_json(
                {"ok": False, "message": f"Unknown API endpoint: {path}"},
                status=HTTPStatus.NOT_FOUND,
            )
            return
        super().do_GET()

    def do_POST(self) -> None:  # noqa: N802
        path = urlparse(self.path).path
        if not path.startswith("/api/"):
            self._send_json({"ok": False, "message": "Unknown endpoint"}, status=HTTPStatus.NOT_FOUND)
            return

        try:
            length = int(self.headers.get("Content-Length", "0"))
        except ValueError:
            length = 0

        raw = self.rfile.read(length) if length > 0 else b"{}"
        try:
            payload = json.loads(raw.decode("utf-8") if raw else "{}")
        except (json.JSONDecodeError, UnicodeDecodeError):
            self._send_json({"ok": False, "message": "Invalid JSON body"}, status=HTTPStatus.BAD_REQUEST)
            return

        if not isinstance(payload, dict):
            self._send_json({"ok": False, "message": "JSON body must be an object"}, status=HTTPStatus.BAD_REQUEST)
            return

        result = self._runtime.apply(path, payload)
        response = {
            "ok": bool(result.ok),
            "message": result.message,
            "state": self._runtime.snapshot(),
        }
        status = HTTPStatus.OK if result.ok else HTTPStatus.BAD_REQUEST
        self._send_json(response, status=status)


def make_server(
    host: str,
    port: int,
    directory: Path = WEBUI_DIR,
    *,
    runtime: WebUiRuntime | None = None,
) -> ThreadingHTTPServer:
    active_runtime = runtime or WebUiRuntime()
    handler = partial(
        WebUiRequestHandler,
        directory=str(directory),
        runtime=active_runtime,
    )
    server = ThreadingHTTPServer((host, port), handler)
    server.webui_runtime = active_runtime  # type: ignore[attr-defined]
    return server


def serve(
    *,
    host: str = "127.0.0.1",
    port: int = 4173,
    open_browser: bool = True,
    api_base_url: str | None = None,
) -> None:
    runtime = WebUiRuntime(api_base_url=api_base_url)
    server = make_server(host, port, WEBUI_DIR, runtime=runtime)
    url = f"http://{host}:{port}/index.html"
    status = runtime.session.state.catalog.load_status
    print(f"Catalog source: {runtime.session.state.api_base_url} ({status})")
    print(f"Serving {WEBUI_DIR} at {url}")

    if open_browser:
        webbrowser.open(url)

    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.server_close()
