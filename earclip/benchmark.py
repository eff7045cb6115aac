#!/usr/bin/env python3
"""
Timing benchmark of the ear clipper over the generated polygon families,
in both arithmetic modes.

Outputs a raw CSV (one row per run) and prints the per-type summary.
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path
from typing import Iterable, List, Optional

import pandas as pd

from .config import FIXED_POINT, FLOATING_POINT
from .earclipper import EarClipper
from .generators import FAMILIES, generate

log = logging.getLogger(__name__)

MODES = {'fixed': FIXED_POINT, 'floating': FLOATING_POINT}


def run_benchmark(families: Iterable[str] = ('convex', 'random', 'star'),
                  sizes: Iterable[int] = (10, 50, 100, 200),
                  modes: Iterable[str] = ('fixed', 'floating'),
                  repeats: int = 3) -> pd.DataFrame:
    rows = []
    for family in families:
        for n in sizes:
            coords = generate(family, n)
            for mode in modes:
                arithmetic = MODES[mode]
                pts = arithmetic.to_points(coords)
                for run in range(repeats):
                    start = time.perf_counter()
                    clipper = EarClipper(pts, arithmetic)
                    reflex_count = len(clipper.reflex)
                    clipper.run()
                    time_ms = (time.perf_counter() - start) * 1000
                    rows.append({
                        'polygon_type': family,
                        'n': len(clipper.polygon.vertices),
                        'mode': mode,
                        'run': run,
                        'reflex_count': reflex_count,
                        'triangles': len(clipper.triangles),
                        'time_ms': time_ms,
                    })
                log.info("%s n=%d %s: %.3f ms", family, n, mode, rows[-1]['time_ms'])
    return pd.DataFrame(rows)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    summary = df.groupby(['polygon_type', 'n', 'mode']).agg({
        'time_ms': ['mean', 'std'],
        'reflex_count': 'first',
        'triangles': 'first',
    }).reset_index()
    summary.columns = ['polygon_type', 'n', 'mode', 'time_mean', 'time_std',
                       'reflex_count', 'triangles']
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Ear clipping benchmark")
    parser.add_argument("--families", nargs="+", default=['convex', 'random', 'star'],
                        choices=sorted(FAMILIES))
    parser.add_argument("--sizes", nargs="+", type=int, default=[10, 50, 100, 200])
    parser.add_argument("--modes", nargs="+", default=sorted(MODES), choices=sorted(MODES))
    parser.add_argument("--repeats", type=int, default=3)
    parser.add_argument("--output", type=Path, default=Path("results/benchmark.csv"))
    args = parser.parse_args(argv)

    df = run_benchmark(args.families, args.sizes, args.modes, args.repeats)
    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)

    summary = summarize(df)
    summary_path = args.output.with_name(args.output.stem + "_summary.csv")
    summary.to_csv(summary_path, index=False)

    print(summary.to_string(index=False))
    print(f"\nResults saved to {args.output}")
    print(f"Summary saved to {summary_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
