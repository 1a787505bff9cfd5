"""
Command-line entry point.

    duelchess                      local game on one terminal
    duelchess -m 9000              host a game on port 9000 (plays White)
    duelchess -m example.org:9000  join the game hosted there (plays Black)

Exit status: 0 after a clean quit or a finished game, 1 on any network or I/O failure,
2 on bad arguments, 130 on Ctrl-C.
"""
from __future__ import annotations
import argparse
import dataclasses
import logging
import sys
from typing import NamedTuple, Sequence

from . import peers
from .config import SETTINGS, Settings
from .console import Console
from .errors import DuelChessError
from .local import play_local


class Endpoint(NamedTuple):
    host: str | None  # None means "listen here"
    port: int


def parse_endpoint(value: str) -> Endpoint:
    """Parse PORT (host mode) or HOST:PORT (remote mode)."""
    host, sep, port_s = value.strip().rpartition(":")
    if sep and not host:
        raise argparse.ArgumentTypeError(f"missing host in {value!r}")
    try:
        port = int(port_s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port in {value!r}") from None
    if not 0 < port < 65536:
        raise argparse.ArgumentTypeError(f"port out of range in {value!r}")
    return Endpoint(host if sep else None, port)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="duelchess", description="Play chess in the terminal, locally or over TCP.")
    ap.add_argument("-m", "--multiplayer", type=parse_endpoint, default=None, metavar="[HOST:]PORT",
                    help="PORT to host a game, HOST:PORT to join one. Omit for a local game.")
    ap.add_argument("--no-color", action="store_true", help="Draw the board without ANSI colors")
    ap.add_argument("--no-clear", action="store_true", help="Do not clear the screen between turns")
    ap.add_argument("--log-level", default=None, help="Python logging level (e.g., INFO, DEBUG)")
    ap.add_argument("--log-file", default=None, help="Write log records to this file instead of stderr")
    return ap


def resolve_settings(args: argparse.Namespace, base: Settings = SETTINGS) -> Settings:
    """CLI flags take precedence over settings.yml / environment values."""
    overrides = {}
    if args.no_color:
        overrides["color"] = False
    if args.no_clear:
        overrides["clear_screen"] = False
    if args.log_level:
        overrides["log_level"] = args.log_level.upper()
    if args.log_file:
        overrides["log_file"] = args.log_file
    return dataclasses.replace(base, **overrides)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=getattr(logging, settings.log_level, logging.WARNING),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                        filename=settings.log_file)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = resolve_settings(args)
    configure_logging(settings)
    log = logging.getLogger("duelchess")
    console = Console(color=settings.color, clear_screen=settings.clear_screen)

    endpoint: Endpoint | None = args.multiplayer
    try:
        if endpoint is None:
            return play_local(console, settings)
        if endpoint.host is None:
            return peers.host(endpoint.port, console, settings)
        return peers.remote(endpoint.host, endpoint.port, console, settings)
    except (DuelChessError, OSError) as e:
        log.error("Game aborted: %s", e)
        print(f"duelchess: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        log.info("Interrupted")
        return 130
