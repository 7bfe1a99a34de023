"""Entry point: ``python -m geocoin``.

Supports two modes:
  - ``python -m geocoin``            → Launch the FastAPI server
  - ``python -m geocoin cli``        → Print the caches around a point and exit
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Geocoin cache world")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--radius", type=int, default=8)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Print the caches around a point")
    cli.add_argument("--lat", type=float, default=None)
    cli.add_argument("--lng", type=float, default=None)
    cli.add_argument("--radius", type=int, default=8)
    cli.add_argument("--probability", type=float, default=0.1)
    cli.add_argument("--max-coins", type=int, default=3)
    cli.add_argument("--random-counts", action="store_true", help="Roll 0..max coins per cache")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from geocoin.api.app import create_app
    from geocoin.config import GameConfig

    config = GameConfig(neighborhood_size=args.radius, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from geocoin.config import GameConfig
    from geocoin.core.models import LatLng
    from geocoin.session import GameSession
    from geocoin.utils.logging import setup_logging

    config = GameConfig(
        neighborhood_size=args.radius,
        cache_spawn_probability=args.probability,
        max_coins_per_cache=args.max_coins,
        randomize_coin_count=args.random_counts,
        log_level=args.log_level,
    )
    setup_logging(config.log_level)

    session = GameSession(config)
    point = config.start_point
    if args.lat is not None or args.lng is not None:
        point = LatLng(
            args.lat if args.lat is not None else point.lat,
            args.lng if args.lng is not None else point.lng,
        )

    caches = session.spawn_nearby(point)
    origin = session.board.cell_for_point(point)
    logger.info(
        "%d cache(s) within %d tiles of cell (%d, %d), %d coin(s) in total",
        len(caches), config.neighborhood_size, origin.i, origin.j, session.total_coins(),
    )
    for cache in caches:
        print(cache.describe())
        print()


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    if args.command == "serve":
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
