#!/usr/bin/env python3
"""
Triangulate the polygon in a CSV file (one ``x,y`` record per line).

Triangles are written to stdout as they are clipped, three ``x,y`` lines each
followed by a blank line, then the arithmetic mode and both areas.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import earclip
from .config import use_fixed_point_arithmetic
from .earclipper import EarClipper
from .errors import EarClipError
from .fileio import read_polygon, write_report, write_triangle


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="earclip", description="Ear clipping polygon triangulation")
    parser.add_argument("polygon_csv", type=Path, help="Input polygon file")
    parser.add_argument("--float", dest="floating", action="store_true",
                        help="Use floating point instead of fixed point arithmetic")
    parser.add_argument("--plot", type=Path, metavar="PNG",
                        help="Also save a picture of the triangulation")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log progress to stderr")
    parser.add_argument("--debug", action="store_true",
                        help="Log every clipped ear to stderr")
    parser.add_argument("--log-file", type=Path, help="Append the log to a file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    if args.verbose or args.debug:
        earclip.addStreamHandler()
        earclip.enableLogging()
    if args.debug:
        earclip.enableDebugging()
    if args.log_file:
        earclip.addFileHandler(str(args.log_file))

    arithmetic = use_fixed_point_arithmetic(not args.floating)
    out = sys.stdout

    try:
        points = read_polygon(args.polygon_csv, arithmetic)
        clipper = EarClipper(points, arithmetic)
        clipper.run(lambda tri: write_triangle(out, tri, arithmetic))
    except EarClipError as e:
        print(f"earclip: {e}", file=sys.stderr)
        return 1

    write_report(out, clipper)

    if args.plot:
        # matplotlib only when asked for
        from .plot import save_triangulation
        save_triangulation(clipper, args.plot)
        earclip.log.info("Saved plot to %s", args.plot)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
