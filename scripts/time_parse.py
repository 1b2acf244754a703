#!/usr/bin/env python3
"""Quick perf benchmark for bracket notation parsing."""

from __future__ import annotations

import argparse
import cProfile
import io
from pathlib import Path
import pstats
import statistics
import time

from tqdm import tqdm

from bracketmark import parse_result


def _generated_corpus(lines: int) -> list[str]:
    samples = (
        "plain text without any markup",
        "text[a|b[c]|[]d]",
        r"[some vertical bars: \|\|\|][some brackets: \]\[\[\]]",
        "first text node|second text node",
        "[[[[nested]]]]|tail",
        "a[b",
    )
    return [samples[index % len(samples)] for index in range(lines)]


def _read_corpus(path: Path) -> list[str]:
    return path.read_text(encoding="utf-8").splitlines()


def _run_once(
    lines: list[str],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int, int]:
    start = time.perf_counter()
    total_nodes = 0
    total_errors = 0
    iterator = tqdm(lines, desc=label, unit="line") if show_progress else lines
    for line in iterator:
        parsed = parse_result(line)
        if parsed.sequence is not None:
            total_nodes += len(parsed.sequence)
        total_errors += len(parsed.diagnostics)
    duration = time.perf_counter() - start
    return duration, total_nodes, total_errors


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark bracket notation parsing throughput")
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="File with one input per line (default: generated corpus)",
    )
    parser.add_argument("--lines", type=int, default=10_000, help="Generated corpus size")
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
    args = parser.parse_args()

    if args.input is not None:
        if not args.input.is_file():
            raise SystemExit(f"Invalid --input: {args.input}")
        lines = _read_corpus(args.input)
        dataset = str(args.input)
    else:
        lines = _generated_corpus(max(args.lines, 1))
        dataset = f"<generated {len(lines)} lines>"

    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int, int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(lines, label=f"warmup {warmup_idx + 1}/{args.warmups}", show_progress=show_progress)

        timings: list[float] = []
        nodes_count = 0
        errors_count = 0
        for run_idx in range(max(args.runs, 1)):
            duration, nodes_count, errors_count = _run_once(
                lines,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, nodes_count, errors_count

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, nodes_count, errors_count = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats("tottime").print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, nodes_count, errors_count = _benchmark()

    mean = statistics.mean(timings)

    print(f"Dataset: {dataset}")
    print(f"Lines: {len(lines)}")
    print(f"Top-level nodes: {nodes_count}")
    print(f"Errors: {errors_count}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Lines/s (mean): {len(lines) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
