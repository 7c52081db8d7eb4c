# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Self-play entry point: one AI-vs-AI game.

Usage:
    python -m quarto --seed 42
"""

import argparse

from quarto.core.config import get_settings
from quarto.domains.game import AIPlayer, Game
from quarto.utils.logging import bind_context, clear_context, get_logger, setup_logging


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="quarto",
        description="Play one Quarto game between two AI players.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed of the random opening (overrides QUARTO_AI_RANDOM_SEED)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = get_settings()
    if args.seed is not None:
        settings = settings.model_copy(
            update={"ai": settings.ai.model_copy(update={"random_seed": args.seed})}
        )
    setup_logging(settings)
    logger = get_logger(__name__)

    game = Game.start(
        AIPlayer(settings.game.player_one_name, settings),
        AIPlayer(settings.game.player_two_name, settings),
    )
    try:
        while game.state().is_in_progress:
            bind_context(turn=game.turn + 1, player=game.current_player.name)
            result = game.play_turn()
            logger.info(
                "Turn played",
                piece=str(result.move.piece),
                cell=result.move.cell.index,
                state=result.state.status.value,
            )
    finally:
        clear_context()

    state = game.state()
    winner = game.winner
    logger.info(
        "Game over",
        result=state.status.value,
        winner=winner.name if winner else None,
        turns=game.turn,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
