"""
Kalah CLI - Text-mode driver for the engine.

Usage:
    kalah play [--stones N]                 Interactive game on stdin/stdout
    kalah replay [--stones N] POS [POS ...] Play each position as select + commit

Interactive commands:
    select N    Sow pit N (0-5) of the player to move
    commit      Commit the pending selection
    undo        Undo the pending selection (once per turn)
    move N      select + commit
    show        Print the board
    quit        Leave the game
"""

import argparse
import sys

from .engine_core.action import Action
from .engine_core.errors import ConfigurationError
from .logging_utils import configure_logging
from .session import GameLoop, SessionManager


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Kalah - two-player sowing game",
        prog="kalah",
    )
    parser.add_argument("--log-level", help="Log level (default: KALAH_LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play an interactive game")
    play_parser.add_argument("--stones", type=int, help="Stones per pit (3 or 4)")

    # Replay command
    replay_parser = subparsers.add_parser("replay", help="Replay a sequence of moves")
    replay_parser.add_argument("--stones", type=int, help="Stones per pit (3 or 4)")
    replay_parser.add_argument("positions", type=int, nargs="+", help="Pit positions, in order")

    args = parser.parse_args(argv)
    configure_logging(level=args.log_level)

    if args.command == "play":
        return cmd_play(args)
    elif args.command == "replay":
        return cmd_replay(args)
    parser.print_help()
    return 1


def _start(args):
    manager = SessionManager()
    try:
        session = manager.create_session(initial_stones=args.stones)
    except ConfigurationError as e:
        print(f"Error: {e}")
        return manager, None
    return manager, session


def cmd_replay(args):
    """Replay moves and print the final board."""
    manager, session = _start(args)
    if session is None:
        return 1

    loop = GameLoop(session)
    status = 0
    for position in args.positions:
        result = loop.play(position)
        if not result.success:
            print(f"Error [{result.error_code}]: {result.error}")
            status = 1
            break

    print(loop.snapshot().render())
    manager.end_session(session.session_id)
    return status


def cmd_play(args, stdin=None):
    """Interactive game."""
    stdin = stdin or sys.stdin
    manager, session = _start(args)
    if session is None:
        return 1

    loop = GameLoop(session)
    print(loop.snapshot().render())

    for line in stdin:
        words = line.split()
        if not words:
            continue
        command, params = words[0].lower(), words[1:]

        if command == "quit":
            break
        if command == "show":
            print(loop.snapshot().render())
            continue

        if command in {"select", "move"}:
            if len(params) != 1 or not params[0].lstrip("-").isdigit():
                print(f"Usage: {command} N")
                continue
            position = int(params[0])
            if command == "move":
                result = loop.play(position)
            else:
                result = loop.apply(Action.select(position))
        elif command == "commit":
            result = loop.apply(Action.commit())
        elif command == "undo":
            result = loop.apply(Action.undo())
        else:
            print(f"Unknown command: {command}")
            continue

        if not result.success:
            print(f"Error [{result.error_code}]: {result.error}")
        for change in result.changes:
            print(change)
        print(loop.snapshot().render())

        if session.engine.is_game_over:
            break

    manager.end_session(session.session_id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
