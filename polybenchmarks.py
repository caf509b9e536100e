"""
Polygon benchmarks.

Times each polygon operation on a 23-pointed star and prints a table,
then plots the overlap of two stars and a triangulation.

Usage:
    python polybenchmarks.py [--repeat N] [--png PATH]
"""

import argparse
import logging
import math
import time
from collections import defaultdict

import matplotlib
import matplotlib.pyplot as plt

from polykit import (
    O,
    Point,
    offsetpoly,
    polyarea,
    polycentroid,
    polydistances,
    polyfit,
    polyintersect,
    polyintersections,
    polymove,
    polyorientation,
    polyperimeter,
    polyportion,
    polyreflect,
    polyremainder,
    polyremovecollinearpoints,
    polyrotate,
    polysample,
    polyscale,
    polysmooth,
    polysortbyangle,
    polysortbydistance,
    polysplit,
    polytriangulate,
    star,
)
from polykit.log import setup_logging
from polykit.visualization import plot_polygons

logger = logging.getLogger("polykit.benchmarks")


class Timer:
    """Accumulates wall-clock time per named section."""

    def __init__(self):
        self.totals = defaultdict(float)
        self.calls = defaultdict(int)

    def section(self, name, func, *args, **kwargs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        self.totals[name] += time.perf_counter() - start
        self.calls[name] += 1
        return result

    def report(self) -> str:
        total = sum(self.totals.values()) or 1.0
        rows = [f"{'Section':<28}{'ncalls':>8}{'time':>12}{'%tot':>8}{'avg':>12}"]
        for name, t in sorted(self.totals.items(), key=lambda kv: kv[1], reverse=True):
            n = self.calls[name]
            rows.append(f"{name:<28}{n:>8}{t * 1e3:>10.2f}ms{100 * t / total:>7.1f}%"
                        f"{t / n * 1e6:>10.1f}us")
        return "\n".join(rows)


def testpoly(timer: Timer):
    pgon = star(O, 201.9, 23, 0.8, math.pi / 2)

    for i in range(1, 11):
        timer.section("polycentroid", polycentroid, pgon)
        timer.section("polyportion", polyportion, pgon, i / 10)
        timer.section("polyremainder", polyremainder, pgon, i / 10)
        timer.section("polyarea", polyarea, pgon)
        timer.section("polyperimeter", polyperimeter, pgon)
        timer.section("polydistances", polydistances, pgon)
        timer.section("polysample", polysample, pgon, 200)

    work = pgon.copy()
    for _ in range(10):
        timer.section("polyrotate", polyrotate, work, math.pi / 5,
                      center=O + (20, 20), out=work)
        timer.section("polyreflect", polyreflect, work, O, O + (49.9, 51.1), out=work)
        timer.section("polymove", polymove, work, O, O + (2000.1, 1999.9), out=work)
        timer.section("polyscale", polyscale, work, 2, 0.5,
                      center=O + (200.1, 199.9), out=work)

    for _ in range(10):
        timer.section("polysortbyangle", polysortbyangle, pgon)
        timer.section("polysortbydistance", polysortbydistance, pgon, Point(*pgon[0]))
        timer.section("polyorientation", polyorientation, pgon)
        timer.section("polysplit", polysplit, pgon, O - (0, 100), O + (100, 0))
        timer.section("polyfit", polyfit, pgon, 200)
        timer.section("polysmooth", polysmooth, pgon, 5)
        timer.section("offsetpoly", offsetpoly, pgon, 5)
        timer.section("polyremovecollinearpoints", polyremovecollinearpoints, pgon)

    pgon1 = star(O, 201.9, 23, 0.8, math.pi / 2)
    pgon2 = star(O, 201.9, 23, 0.8, math.pi / 5)
    overlap = []
    triangles = []
    for _ in range(10):
        overlap = timer.section("polyintersect", polyintersect, pgon1, pgon2)
        timer.section("polyintersections", polyintersections, pgon1, pgon2)
        triangles = timer.section("polytriangulate", polytriangulate, pgon)

    return pgon1, pgon2, overlap, triangles


def main():
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--repeat", type=int, default=10)
    parser.add_argument("--png", default=None, help="write a plot of the results")
    args = parser.parse_args()

    setup_logging()
    timer = Timer()
    results = None
    for _ in range(args.repeat):
        results = testpoly(timer)
    print(timer.report())

    pgon1, pgon2, overlap, triangles = results
    logger.info("overlap: %d regions, area %.2f; triangulation: %d triangles, area %.2f",
                len(overlap), sum(polyarea(p) for p in overlap),
                len(triangles), sum(polyarea(t) for t in triangles))

    if args.png:
        matplotlib.use("Agg")
        fig, axes = plt.subplots(1, 2, figsize=(12, 6))
        plot_polygons([pgon1, pgon2] + overlap, ax=axes[0], title="polyintersect")
        plot_polygons(triangles, ax=axes[1], title="polytriangulate")
        plt.tight_layout()
        fig.savefig(args.png, dpi=120)
        logger.info("plot saved to %s", args.png)


if __name__ == "__main__":
    main()
