"""Command-line front end for City Search.

Loads a city file, then repeatedly asks for a start and an end city and
prints the shortest path between them. Entering ``Q`` at either prompt
(or closing standard input) ends the session.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from .config import AppConfig, get_config
from .domain.errors import CitySearchError
from .domain.models import PathWeighting
from .observability import configure_logging
from .services import CitySearchService

QUIT_COMMAND = "Q"

logger = logging.getLogger(__name__)

ReadFn = Callable[[], str]
WriteFn = Callable[[str], None]


def _ask_for_city(prompt: str, read: ReadFn, write: WriteFn) -> Optional[str]:
    write(prompt)
    try:
        answer = read()
    except EOFError:
        return None
    answer = answer.strip()
    if answer == QUIT_COMMAND:
        return None
    return answer


def run_prompt_loop(
    service: CitySearchService,
    read: ReadFn = input,
    write: WriteFn = print,
) -> int:
    """Answer path queries until the user quits.

    Returns:
        Number of queries answered.
    """
    answered = 0
    while True:
        start = _ask_for_city(
            f'Enter start city ("{QUIT_COMMAND}" to quit):', read, write
        )
        if start is None:
            break
        if not service.contains(start):
            write(f"{start} is not part of data-base. Please try again.")
            continue

        end = _ask_for_city(f'Enter end city ("{QUIT_COMMAND}" to quit):', read, write)
        if end is None:
            break
        if not service.contains(end):
            write(f"{end} is not part of data-base. Please try again.")
            continue

        write(service.describe_path(start, end))
        answered += 1

    write("Terminated.  Goodbye.")
    logger.debug("Session ended", extra={"queries": answered, **service.cache_stats()})
    return answered


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="citysearch",
        description="Shortest paths between cities closer than a distance threshold.",
    )
    parser.add_argument(
        "cities_file",
        type=Path,
        help="Tab-separated file: name, longitude, latitude (one header line)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=None,
        help="Connect cities closer than this many miles (default: 2000)",
    )
    parser.add_argument(
        "--weighting",
        choices=[w.value for w in PathWeighting],
        default=None,
        help="How path length is reported",
    )
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Recompute every query instead of reusing earlier answers",
    )
    parser.add_argument("--log-level", default=None, help="Logging level")
    return parser


def _apply_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    graph_updates = {}
    if args.threshold is not None:
        graph_updates["edge_threshold_miles"] = args.threshold
    if args.weighting is not None:
        graph_updates["weighting"] = PathWeighting(args.weighting)

    updates = {}
    if graph_updates:
        updates["graph"] = config.graph.model_copy(update=graph_updates)
    if args.no_cache:
        updates["cache"] = config.cache.model_copy(update={"enabled": False})
    return config.model_copy(update=updates) if updates else config


def main(
    argv: Optional[List[str]] = None,
    read: ReadFn = input,
    write: WriteFn = print,
) -> int:
    """Entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = _apply_overrides(get_config(), args)
    configure_logging(config.observability, args.log_level)

    try:
        service = CitySearchService.from_file(args.cities_file, config)
    except CitySearchError as e:
        logger.error("Could not build graph", extra={"error": str(e)})
        write(f"Error: {e}")
        return 1

    write("Graph building complete.")
    run_prompt_loop(service, read=read, write=write)
    return 0


if __name__ == "__main__":
    sys.exit(main())
