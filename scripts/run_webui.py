"""Run the browser UI backed by a freshly loaded catalog."""

from __future__ import annotations

import argparse
import logging

from mhw_browser.webui.server import serve


def main() -> None:
    parser = argparse.ArgumentParser(description="Run web UI")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=4173)
    parser.add_argument("--no-open", action="store_true", help="Do not open a browser tab")
    parser.add_argument(
        "--api-base",
        default=None,
        help="Catalog API base URL (default: $MHW_API_BASE_URL or https://mhw-db.com).",
    )
    parser.add_argument("--log-level", default="INFO", help="Logging level (default: INFO)")
    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    serve(host=args.host, port=args.port, open_browser=not args.no_open, api_base_url=args.api_base)


if __name__ == "__main__":
    main()
