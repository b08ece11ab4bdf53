"""
Unified CLI entry point for ShiftHub.

Usage:
    python -m shift_hub.cli <command> [options]

Available commands:
    top-workplaces  - Rank workplaces by shift count

Examples:
    python -m shift_hub.cli top-workplaces
    python -m shift_hub.cli top-workplaces --limit 5 --format table
"""

import argparse
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="shift_hub.cli",
        description="ShiftHub CLI - workplace shift leaderboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m shift_hub.cli top-workplaces
  python -m shift_hub.cli top-workplaces --limit 5 --format table
        """,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
        help="Command to execute",
    )

    subparsers.add_parser(
        "top-workplaces",
        help="Rank workplaces by shift count",
        description="Print the workplaces with the most shifts",
        add_help=False,  # Let the delegated module handle help
    )

    args, remaining_args = parser.parse_known_args(argv)

    if args.command == "top-workplaces":
        from shift_hub.cli.top_workplaces import main as top_workplaces_main

        return top_workplaces_main(remaining_args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
