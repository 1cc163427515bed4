#!/usr/bin/env python3
"""
Benchmarks comparing the AVL tree against an unbalanced binary search tree.

This script:
 1. Loads villagers from the dataset (first line is the header)
 2. Times insert and search on both trees for a shuffled input
 3. Times the same operations for the input sorted by name
 4. Prints the timings and appends them as one CSV line to the output file

Usage:
    python benchmarks.py INPUT NUM_LINES [--output PATH] [--trials T] [--seed S] [--log-dir DIR]
"""
import argparse
import logging
import os
from datetime import datetime

from avl_trees.comparison import append_results, run_trials
from avl_trees.profiling import PerformanceTracker
from avl_trees.records import load_villagers

# Rows in the full villagers.csv, header excluded
DATASET_SIZE = 392


def _num_lines(value: str) -> int:
    n = int(value)
    if n < 2:
        raise argparse.ArgumentTypeError("NUM_LINES must be at least 2 (header plus one record)")
    return n


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {n}")
    return n


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="AVL tree vs. BST benchmarks")
    parser.add_argument("input", help="Path to villagers.csv")
    parser.add_argument("num_lines", type=_num_lines,
                        help="Number of lines to read from the input, header included")
    parser.add_argument("--output", default="output.txt",
                        help="CSV file the timings are appended to")
    parser.add_argument("--trials", type=_positive_int, default=1,
                        help="Number of comparison runs; each run appends one line")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the shuffle")
    parser.add_argument("--log-dir", default=os.path.join(os.getcwd(), "logs"),
                        help="Directory for the run log")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    os.makedirs(args.log_dir, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(args.log_dir, f"run_{ts}.log")
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler()
        ]
    )

    villagers = load_villagers(args.input, args.num_lines)
    logging.info(f"Running {args.trials} comparison(s) on {len(villagers)} villagers")

    results = run_trials(villagers, args.num_lines, args.trials, args.seed)
    for result in results:
        print(result.report(DATASET_SIZE))
        append_results(args.output, result)

    if args.trials > 1:
        print(PerformanceTracker.get_instance().report())


if __name__ == "__main__":
    main()
