"""
Console front end for TicTacToe.

Plays a session in the terminal:
- Type a cell number (0-8) to move
- r = restart (keep scores), R = full reset, m = toggle mode, q = quit

Run this script to play TicTacToe against a friend or the computer!
"""

import argparse
import sys
from typing import Optional, TextIO

from logic.game_state import Mark, format_board
from session.config import GameConfig
from session.controller import GameSession


def print_status(session: GameSession, out: Optional[TextIO] = None):
    """Print the board, status line and scores."""
    out = out or sys.stdout
    scores = session.scores
    print("", file=out)
    print(format_board(session.board), file=out)
    print(f"\n{session.status_message}   "
          f"[X {scores.wins_for(Mark.X)} | O {scores.wins_for(Mark.O)} | Draws {scores.draws}]", file=out)


def run_console(
    session: GameSession,
    stdin: Optional[TextIO] = None,
    out: Optional[TextIO] = None
) -> int:
    """
    Read commands until quit or end of input.

    Returns:
        Process exit code.
    """
    stdin = stdin or sys.stdin
    out = out or sys.stdout

    print(f"\nTicTacToe - {session.config.mode_label}", file=out)
    print_status(session, out)

    for line in stdin:
        command = line.strip()
        if not command:
            continue

        if command == "q":
            break
        elif command == "r":
            session.restart()
        elif command == "R":
            session.restart(full_reset=True)
        elif command == "m":
            session.set_vs_computer(not session.config.VS_COMPUTER)
            print(f"\nMode: {session.config.mode_label}", file=out)
        elif command.isdecimal() and command.isascii():
            if not session.play(int(command)):
                print("Can't play there.", file=out)
                continue
        else:
            print(f"Unknown command: {command!r}", file=out)
            continue

        print_status(session, out)

    print("Goodbye!", file=out)
    return 0


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe Neon")
    parser.add_argument(
        "--vs-computer",
        action="store_true",
        help="Play against the computer (it plays O)"
    )
    parser.add_argument(
        "--first",
        choices=["X", "O"],
        default="X",
        help="Who moves first (default: X)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print AI search and session debug output"
    )

    args = parser.parse_args(argv)

    config = GameConfig(
        VS_COMPUTER=args.vs_computer,
        STARTING_PLAYER=Mark(args.first),
        DEBUG_MODE=args.verbose,
    )
    session = GameSession(config)

    try:
        return run_console(session)
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
        return 0


if __name__ == "__main__":
    sys.exit(main())
