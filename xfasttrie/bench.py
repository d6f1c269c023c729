"""Timing comparison of the X-fast trie against an ordered map."""

from __future__ import annotations

import argparse
import csv
import random
import time
from collections.abc import Sequence
from pathlib import Path

from sortedcontainers import SortedDict

from xfasttrie.trie import XFastTrie

HEADER = ("Data Structure", "Universe Size", "Input Size", "Operation", "Time")
DEFAULT_INPUT_SIZE = 65536
DEFAULT_UNIVERSE_SIZE = 4294967295
DEFAULT_RESULTS_PATH = "results.csv"


def save_results(record: Sequence[str], path=DEFAULT_RESULTS_PATH) -> None:
    """Append one record to a CSV file, writing the header if the file is new."""
    path = Path(path)
    is_new = not path.exists()
    with path.open("a", newline="") as handle:
        writer = csv.writer(handle)
        if is_new:
            writer.writerow(HEADER)
        writer.writerow(record)


def create_data(amount: int, maximum: int, rng: random.Random | None = None) -> list[int]:
    """Return ``amount`` distinct random integers below ``maximum``, sorted."""
    rng = rng or random.Random()
    if amount > maximum:
        raise ValueError(f"cannot draw {amount} distinct values below {maximum}")
    return sorted(rng.sample(range(maximum), amount))


def _elapsed_ms(start: float) -> str:
    return str(int((time.perf_counter() - start) * 1000))


def run_benchmark(
    input_size: int = DEFAULT_INPUT_SIZE,
    universe_size: int = DEFAULT_UNIVERSE_SIZE,
    results_path=DEFAULT_RESULTS_PATH,
    rng: random.Random | None = None,
) -> list[tuple[str, str, str, str, str]]:
    """Time inserts and lookups on both structures and record the results."""
    data = create_data(input_size, universe_size, rng)
    records: list[tuple[str, str, str, str, str]] = []

    def record(structure: str, operation: str, start: float) -> None:
        row = (structure, str(universe_size), str(input_size), operation, _elapsed_ms(start))
        save_results(row, results_path)
        records.append(row)

    trie: XFastTrie[int] = XFastTrie()
    start = time.perf_counter()
    for value in data:
        trie.insert(value, value)
    record("X-Fast Trie", "Insert", start)

    start = time.perf_counter()
    for value in range(1, input_size):
        trie.predecessor(value)
    record("X-Fast Trie", "Predecessor", start)

    start = time.perf_counter()
    for value in range(1, input_size):
        trie.get(value)
    record("X-Fast Trie", "Get", start)

    tree: SortedDict = SortedDict()
    start = time.perf_counter()
    for value in data:
        tree[value] = value
    record("B Tree", "Insert", start)

    start = time.perf_counter()
    for value in range(1, input_size):
        tree.get(value)
    record("B Tree", "Get", start)

    return records


def main(argv=None) -> int:
    """Run the benchmark from the command line."""
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input-size", type=int, default=DEFAULT_INPUT_SIZE)
    parser.add_argument("--universe-size", type=int, default=DEFAULT_UNIVERSE_SIZE)
    parser.add_argument("--output", default=DEFAULT_RESULTS_PATH)
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    run_benchmark(args.input_size, args.universe_size, args.output, rng)
    print("END OF PROCESSING")
    return 0