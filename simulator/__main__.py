import argparse
import asyncio
import logging

from holdem.events import EventChannel
from holdem.game import Game
from holdem.models import MAX_PLAYERS, MIN_PLAYERS, TableConfig

from .console import ConsoleInput, EventPrinter, prompt_player_count
from .server import run_with_spectators

logging.basicConfig(level=logging.INFO)


def _player_count(value: str) -> int:
    count = int(value)
    if not MIN_PLAYERS <= count <= MAX_PLAYERS:
        raise argparse.ArgumentTypeError(f"must be between {MIN_PLAYERS} and {MAX_PLAYERS}")
    return count


def main() -> None:
    parser = argparse.ArgumentParser(description="Texas Hold'em table simulator")
    parser.add_argument("--players", type=_player_count, help="Seats at the table (prompted when omitted)")
    parser.add_argument("--starting-stack", type=int, default=500)
    parser.add_argument("--seed", type=int, default=None, help="Seed for personalities and shuffles")
    parser.add_argument("--no-human", action="store_true", help="Fill every seat with scripted players")
    parser.add_argument("--max-hands", type=int, default=None, help="Stop after this many hands")
    parser.add_argument(
        "--action-delay-ms",
        type=int,
        default=1_000,
        help="Pause after each scripted decision (milliseconds, 0 disables)",
    )
    parser.add_argument(
        "--spectator-port",
        type=int,
        default=0,
        help="Serve table events to WebSocket spectators on this port (0 disables)",
    )
    parser.add_argument("--host", default="0.0.0.0")
    args = parser.parse_args()

    print("Welcome to our Texas Hold Em Simulator! Be the last man Standing!")
    players = args.players if args.players is not None else prompt_player_count()

    config = TableConfig(
        players=players,
        starting_stack=args.starting_stack,
        human_seat=None if args.no_human else 0,
        seed=args.seed,
        action_delay_ms=args.action_delay_ms,
    )

    channel = EventChannel()
    channel.subscribe(EventPrinter())
    human = None if args.no_human else ConsoleInput()
    game = Game.from_config(config, channel, human=human)

    if args.spectator_port:
        asyncio.run(
            run_with_spectators(game, channel, host=args.host, port=args.spectator_port, max_hands=args.max_hands)
        )
    else:
        game.play(args.max_hands)


if __name__ == "__main__":
    main()
