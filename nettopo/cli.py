"""Command that builds the sample topology and prints it."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .graph import build_first_topo


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the sample topology; return the exit status."""
    parser = argparse.ArgumentParser(prog="nettopo", description="Print the sample network topology.")
    parser.parse_args(argv)
    print(build_first_topo().dump(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())