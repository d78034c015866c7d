"""Entry point: ``python -m delve``.

Supports two modes:
  - ``python -m delve``          → Launch the FastAPI server a client can drive
  - ``python -m delve cli``      → Headless autoplay: random walk with simple item use
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Delve: turn-based dungeon crawler core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--width", type=int, default=80)
    srv.add_argument("--height", type=int, default=43)
    srv.add_argument("--max-rooms", type=int, default=30)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless autoplay session")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--turns", type=int, default=500)
    cli.add_argument("--width", type=int, default=80)
    cli.add_argument("--height", type=int, default=43)
    cli.add_argument("--max-rooms", type=int, default=30)
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _config_from_args(args: argparse.Namespace):
    from delve.config import DungeonConfig

    return DungeonConfig(
        seed=args.seed,
        map_width=args.width,
        map_height=args.height,
        max_rooms=args.max_rooms,
        log_level=args.log_level,
    )


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from delve.api.app import create_app

    app = create_app(_config_from_args(args))
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from delve.core.enums import Advance, Domain, ItemKind
    from delve.core.models import DIRECTION_OFFSETS
    from delve.engine.input import Action
    from delve.engine.session import GameSession
    from delve.systems.rng import DeterministicRNG
    from delve.utils.logging import setup_logging

    config = _config_from_args(args)
    setup_logging(config.log_level)

    session = GameSession(config)
    session.generate()
    # Own lane so autoplay choices never shift the monsters' draws.
    chooser = DeterministicRNG(config.seed).stream(Domain.AI_DECISION, key=1)
    directions = list(DIRECTION_OFFSETS.values())

    for _ in range(args.turns):
        level = session.level
        player = level.entities.player
        if not player.alive:
            break

        fighter = player.fighter
        heal_slot = next(
            (i for i, item in enumerate(player.inventory) if item.item == ItemKind.HEAL), None,
        )
        stairs = level.entities.get(level.stairs_id) if level.stairs_id is not None else None

        if fighter is not None and heal_slot is not None and fighter.hp * 2 < fighter.max_hp:
            session.advance(Action.use_item(heal_slot))
        elif (
            len(player.inventory) < config.inventory_size
            and level.entities.item_at(player.pos.x, player.pos.y) is not None
        ):
            session.advance(Action.pick_up())
        elif stairs is not None and stairs.pos == player.pos:
            session.advance(Action.descend())
        else:
            step = directions[chooser.randrange(0, len(directions))]
            if session.advance(Action.move(step.x, step.y)) == Advance.EXITED:
                break

    session.advance(Action.quit())

    player = session.level.entities.player
    logger.info(
        "Done after %d turns: depth %d, player %s, level %d, xp %d, %d items carried",
        session.controller.turn,
        session.depth,
        "alive" if player.alive else "dead",
        player.level,
        player.fighter.xp if player.fighter else 0,
        len(player.inventory),
    )
    for message in session.log.latest(10):
        logger.info("  [turn %d] %s", message.turn, message.text)


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
