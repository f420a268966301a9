"""Text rendering of path results for the console."""

from __future__ import annotations

from .domain.models import PathResult

NO_PATH_MESSAGE = "No such path"
PATH_SEPARATOR = " => "


def format_path(result: PathResult) -> str:
    """Render a path result as a single line.

    Example:
        Path from X To Z: X => Y => Z. Length = 8 miles.

    The length is truncated to whole miles.
    """
    if result.is_empty:
        return NO_PATH_MESSAGE

    stops = PATH_SEPARATOR.join(result.path)
    length = int(result.total_weight)
    return (
        f"Path from {result.source} To {result.destination}: {stops}."
        f" Length = {length} miles."
    )
