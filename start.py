"""Simple launcher for the interactive city search.

Runs the prompt loop on the city file given on the command line, or on
the configured default file when none is given.
"""

from __future__ import annotations

import sys

from citysearch.cli import main
from citysearch.config import get_config


if __name__ == "__main__":
    argv = sys.argv[1:] or [str(get_config().graph.cities_path)]
    sys.exit(main(argv))
