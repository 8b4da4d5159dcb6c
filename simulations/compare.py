# simulations/compare.py

from __future__ import annotations

import argparse
import sys

import matplotlib.pyplot as plt

from .common import common_x_range, format_stats_line
from .run import run_pair


# Keep the tool intentionally small: seed and bin count are fixed
# unless you edit the file.
DEFAULT_SEED = 42
DEFAULT_SAMPLES = 10_000
DEFAULT_BINS = 60


def main(argv: list[str]) -> int:
    parser = argparse.ArgumentParser(
        description="Compare two distributions via Monte Carlo (same x-axis plots)."
    )
    parser.add_argument("--dist-a", required=True, help="e.g. poisson | exp | geometric | pareto | pareto_bounded | uniform | constant")
    parser.add_argument("--params-a", type=float, nargs="+", required=True, help="parameters for dist-a")
    parser.add_argument("--dist-b", required=True, help="same choices as --dist-a")
    parser.add_argument("--params-b", type=float, nargs="+", required=True, help="parameters for dist-b")
    parser.add_argument("--samples", type=int, default=DEFAULT_SAMPLES, help="values drawn per distribution")
    parser.add_argument("--no-plot", action="store_true", help="print stats only")

    args = parser.parse_args(argv)

    try:
        ra, rb = run_pair(
            distribution_a=args.dist_a,
            params_a=args.params_a,
            distribution_b=args.dist_b,
            params_b=args.params_b,
            samples=args.samples,
            seed=DEFAULT_SEED,
        )
    except ValueError as e:
        parser.error(str(e))

    print(format_stats_line(ra))
    print(format_stats_line(rb))

    if args.no_plot:
        return 0

    xmin, xmax = common_x_range([ra, rb])
    if xmin == xmax:
        # constant vs constant: give hist a non-empty range
        xmin, xmax = xmin - 0.5, xmax + 0.5

    plt.figure(figsize=(12, 4))

    plt.subplot(1, 2, 1)
    plt.hist(ra.values, bins=DEFAULT_BINS, range=(xmin, xmax))
    plt.title(ra.label)
    plt.xlabel("Sampled value")
    plt.ylabel("Count")
    plt.xlim(xmin, xmax)

    plt.subplot(1, 2, 2)
    plt.hist(rb.values, bins=DEFAULT_BINS, range=(xmin, xmax))
    plt.title(rb.label)
    plt.xlabel("Sampled value")
    plt.xlim(xmin, xmax)

    plt.suptitle(f"Compare: {ra.label} vs {rb.label}  (samples={args.samples})")
    plt.tight_layout(rect=[0, 0.02, 1, 0.92])
    plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
