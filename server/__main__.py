from __future__ import annotations

import argparse
import os

import uvicorn

from checkers.config import load_settings


def parse_args() -> argparse.Namespace:
	parser = argparse.ArgumentParser(description="Run the Checkers FastAPI backend.")
	parser.add_argument("--config", default=None, help="JSON settings file.")
	parser.add_argument("--host", default=None, help="Bind host for the API server.")
	parser.add_argument("--port", type=int, default=None, help="Port for the API server.")
	parser.add_argument("--reload", action="store_true", help="Enable autoreload (development only).")
	parser.add_argument("--log-level", default=None, help="Logging level for the engine and uvicorn.")
	return parser.parse_args()


def main() -> None:
	args = parse_args()
	if args.config:
		os.environ["CHECKERS_CONFIG"] = args.config
	if args.log_level:
		os.environ["CHECKERS_LOG_LEVEL"] = args.log_level
	settings = load_settings(args.config)
	uvicorn.run(
		"server.app:build_app",
		factory=True,
		host=args.host or settings.server.host,
		port=args.port or settings.server.port,
		reload=args.reload or settings.server.reload,
		log_level=(args.log_level or settings.logging.level).lower(),
	)


if __name__ == "__main__":
	main()
