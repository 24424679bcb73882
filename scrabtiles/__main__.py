"""Vstupný bod pre spustenie: `python -m scrabtiles`.

Založí novú partiu, doplní ruky a vykreslí dosku so stojanmi do konzoly.
"""

from __future__ import annotations

import argparse
import logging

from .core.game import GameSession
from .logging_setup import configure_logging
from .render import print_session


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="scrabtiles", description="ScrabTiles demo")
    parser.add_argument("--seed", type=int, default=None, help="seed pre miešanie tašky")
    parser.add_argument("--players", type=int, default=2, help="počet hráčov")
    parser.add_argument("--shuffle", action="store_true", help="premiešaj ruku aktuálneho hráča")
    args = parser.parse_args(argv)
    if args.players < 1:
        parser.error("--players musí byť aspoň 1")

    configure_logging()
    log = logging.getLogger("scrabtiles.main")

    session = GameSession(
        [f"Player {i + 1}" for i in range(args.players)],
        seed=args.seed,
    )
    if args.shuffle:
        session.shuffle_hand()
    log.info("session_ready id=%s", session.session_id)
    print_session(session.snapshot())


if __name__ == "__main__":
    main()
