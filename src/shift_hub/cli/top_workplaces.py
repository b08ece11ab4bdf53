"""
CLI for the top workplaces leaderboard.

Usage:
    # Print the top three workplaces as JSON
    python -m shift_hub.cli top-workplaces

    # Point at another API and show five entries as a table
    python -m shift_hub.cli top-workplaces --base-url http://api.internal:3000 --limit 5 --format table

    # Exit non-zero when the collections could not be fetched
    python -m shift_hub.cli top-workplaces --strict
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from shift_hub.config.settings import get_settings
from shift_hub.domain.workplace_ranking import RankedWorkplace, TopWorkplacesService
from shift_hub.io.connectors.shifts_api import ShiftsApiClient
from shift_hub.utils.logging import bind_context


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {parsed}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shift_hub.cli top-workplaces",
        description="Rank workplaces by number of shifts and print the top entries",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--base-url",
        help="Shifts API base URL (default: SHIFT_HUB_API_BASE_URL)",
    )
    parser.add_argument(
        "--limit",
        type=_positive_int,
        help="Number of workplaces to show (default: SHIFT_HUB_TOP_WORKPLACES_LIMIT)",
    )
    parser.add_argument(
        "--format",
        choices=("json", "table"),
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 when the collections could not be fetched",
    )
    return parser


def format_json(workplaces: List[RankedWorkplace]) -> str:
    return json.dumps(
        [entry.model_dump() for entry in workplaces], ensure_ascii=False, indent=2
    )


def format_table(workplaces: List[RankedWorkplace]) -> str:
    if not workplaces:
        return "(no workplaces)"

    name_width = max(len("Workplace"), *(len(entry.name) for entry in workplaces))
    lines = [f"{'#':>2}  {'Workplace':<{name_width}}  {'Shifts':>6}"]
    lines.append("-" * len(lines[0]))
    for rank, entry in enumerate(workplaces, start=1):
        lines.append(f"{rank:>2}  {entry.name:<{name_width}}  {entry.shifts:>6}")
    return "\n".join(lines)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except Exception as e:
        print(f"Failed to load settings: {e}", file=sys.stderr)
        return 1

    limit = args.limit if args.limit is not None else settings.top_workplaces_limit
    logger = bind_context(command="top-workplaces", limit=limit)

    client = ShiftsApiClient(base_url=args.base_url)
    service = TopWorkplacesService(
        client,
        workplaces_endpoint=settings.workplaces_endpoint,
        shifts_endpoint=settings.shifts_endpoint,
        limit=limit,
    )

    result = service.get_top_workplaces_result()
    formatter = format_table if args.format == "table" else format_json
    print(formatter(result.workplaces))

    if not result.ok:
        logger.warning("cli.top_workplaces_unavailable", error=result.error)
        if args.strict:
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
