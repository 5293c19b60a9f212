"""Development entrypoint for the landbattle HTTP API."""

from __future__ import annotations

import argparse

import uvicorn

from landbattle.api.app import app


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the landbattle odds API server")
    parser.add_argument("--host", default="127.0.0.1", help="Host interface to bind")
    parser.add_argument("--port", type=int, default=8000, help="TCP port to listen on")
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable autoreload (dev mode)",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["critical", "error", "warning", "info", "debug"],
        help="Log level for the server and the landbattle loggers",
    )
    args = parser.parse_args()

    if args.reload:
        uvicorn.run(
            "landbattle.api.app:app",
            host=args.host,
            port=args.port,
            reload=True,
            log_level=args.log_level,
        )
    else:
        uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level)


if __name__ == "__main__":
    main()
