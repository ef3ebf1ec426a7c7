"""Command line runner for a static site."""

import argparse
import logging

import uvicorn

from vienna import __version__, create_app
from vienna.config import ServerConfig, Settings


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="vienna", description="Serve a static site")
    parser.add_argument("--root", default=settings.ROOT, help="Directory to serve")
    parser.add_argument(
        "--max-age",
        type=int,
        default=settings.MAX_AGE,
        help="Cache-Control max-age for served files, in seconds",
    )
    parser.add_argument("--host", default=settings.HOST)
    parser.add_argument("--port", type=int, default=settings.PORT)
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None):
    args = build_parser(Settings()).parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(ServerConfig(root=args.root, max_age=args.max_age))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


if __name__ == "__main__":
    main()
