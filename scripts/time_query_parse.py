#!/usr/bin/env python3
"""Quick perf benchmark for query conversion."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from booleanquery import Pipeline

SAMPLE_QUERIES: tuple[str, ...] = (
    "ict it",
    "ict OR it",
    "it NOT ict",
    '(title:"project assistant" OR title:"project supervisor") AND retail  -construction',
    '"john-paul caffery" john-paul caffery',
    '"Procurement" and "source to pay" and "Supplier relationship management" or "SRM"  and "vetting"',
    '("Nursing Home" and (Manager OR Supervisor)) OR (commercial AND sales AND (manager OR "team leader"))',
    "(“IT” AND security*) OR “security engineer*” OR (financial AND analyst* AND german)",
    "not (or not and fidlikant) not",
    '("Digital Transformation")) OR ("Innovation Lead"))',
)


def _load_queries(path: Path | None) -> list[str]:
    if path is None:
        return list(SAMPLE_QUERIES)
    lines = path.read_text(encoding="utf-8").splitlines()
    return [line for line in lines if line.strip()]


def _run_once(
    pipeline: Pipeline,
    queries: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    unparsable = 0
    iterator = tqdm(queries, desc=label, unit="query") if show_progress else queries
    for query in iterator:
        if pipeline.parse(query) is None:
            unparsable += 1
    duration = time.perf_counter() - start
    return duration, len(queries), unparsable


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark boolean query conversion throughput")
    parser.add_argument(
        "--queries",
        type=Path,
        default=None,
        help="File with one query per line (default: built-in sample queries)",
    )
    parser.add_argument("--repeat", type=int, default=1000, help="Repeat the query set N times per run")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    if args.queries is not None and not args.queries.is_file():
        raise SystemExit(f"Invalid --queries: {args.queries}")

    queries = _load_queries(args.queries) * max(args.repeat, 1)
    if not queries:
        raise SystemExit(f"No queries found in {args.queries}")

    pipeline = Pipeline()
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                pipeline,
                queries,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        queries_count = 0
        unparsable_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, queries_count, unparsable_count = _run_once(
                pipeline,
                queries,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, queries_count, unparsable_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, queries_count, unparsable_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, queries_count, unparsable_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {args.queries if args.queries is not None else 'built-in samples'}")
    print(f"Queries: {queries_count}")
    print(f"Unparsable: {unparsable_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Queries/s (mean): {queries_count / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
