"""
Tilereport CLI - Command-line interface for game reports.

Usage:
    tilereport report <game_file> -o <output>   Write an HTML report
    tilereport report <game_file> -o <dir> --images --analysis
    tilereport validate <game_file>             Check a game record
"""

import argparse
import sys

from .log_config import setup_logging


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Tilereport - Crossword game analysis reports",
        prog="tilereport",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Report command
    report_parser = subparsers.add_parser("report", help="Write an HTML report for a game")
    report_parser.add_argument("game_file", help="Path to a JSON game record")
    report_parser.add_argument(
        "--output", "-o", required=True,
        help="Report file, or output directory with --images",
    )
    report_parser.add_argument(
        "--images", action="store_true",
        help="Draw board images and write index.html into the output directory",
    )
    report_parser.add_argument(
        "--analysis", action="store_true",
        help="List ranked candidate moves for each position",
    )

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a game record")
    validate_parser.add_argument("game_file", help="Path to a JSON game record")

    args = parser.parse_args(argv)

    setup_logging()

    if args.command == "report":
        return cmd_report(args)
    elif args.command == "validate":
        return cmd_validate(args)
    else:
        parser.print_help()
        return 1


def _load(path):
    """Load a game record, printing errors. Returns None on failure."""
    from .records import GameRecordError, load_game

    try:
        return load_game(path)
    except OSError as exc:
        print(f"Error: Cannot read {path}: {exc}")
    except GameRecordError as exc:
        print(f"Error: Invalid game record: {path}")
        for e in exc.errors:
            print(f"  - {e}")
    return None


def cmd_report(args):
    """Write a report for a game record."""
    from .bots import RankedCandidateEngine
    from .report import ReportSession

    loaded = _load(args.game_file)
    if loaded is None:
        return 1

    engine = RankedCandidateEngine(loaded.analysis) if args.analysis else None

    with ReportSession(args.output, generate_images=args.images) as session:
        session.report_game(loaded.game, engine)

    print(f"Report: {session.index_path}")
    print(f"Positions: {session.positions_reported}")

    if session.issues:
        print("\nIssues:")
        for issue in session.issues:
            print(f"  - {issue.message}")

    return 0


def cmd_validate(args):
    """Validate a game record."""
    loaded = _load(args.game_file)
    if loaded is None:
        return 1

    game = loaded.game
    print(f"Valid: {args.game_file}")
    print(f"Layout: {game.board_layout.name}")
    print(f"Players: {', '.join(p.name for p in game.players)}")
    print(f"Positions: {len(game.history)}")
    print(f"Analysed positions: {len(loaded.analysis)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
