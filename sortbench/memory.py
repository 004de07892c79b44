"""Peak auxiliary-memory estimates for the classic comparison sorts."""

from __future__ import annotations

import argparse
import csv
import random
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from sortbench.datagen import DEFAULT_DATA_FILE, generate_random_data, read_data

INT_SIZE = 4
"""Size in bytes assumed for one stored integer."""

DEFAULT_SIZES: tuple[int, ...] = (500, 1000, 2000, 3000, 4000, 5000)
DEFAULT_REPORT_FILE = "memory_usage.csv"
REPORT_HEADER = (
    "n",
    "InsertsortMemoryUsage",
    "QuicksortMemoryUsage",
    "MergesortMemoryUsage",
    "HeapsortMemoryUsage",
)


@dataclass
class MemoryTracker:
    """Records the largest memory figure reported to it."""

    peak: int = 0

    def update(self, amount: int) -> None:
        """Raise the recorded peak to ``amount`` if it is larger."""
        if amount > self.peak:
            self.peak = amount

    def reset(self) -> None:
        """Forget the recorded peak."""
        self.peak = 0


def insertion_sort(items: Iterable[int], tracker: MemoryTracker) -> list[int]:
    """Return a sorted copy of ``items``; one held value is charged to ``tracker``."""
    result = list(items)
    tracker.update(INT_SIZE)
    for i in range(1, len(result)):
        value = result[i]
        j = i - 1
        while j >= 0 and value < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = value
    return result


def _place_median_first(a: list[int], front: int, end: int) -> None:
    middle = (front + end) // 2
    if a[middle] < a[front]:
        a[front], a[middle] = a[middle], a[front]
    if a[end] < a[front]:
        a[front], a[end] = a[end], a[front]
    if a[middle] < a[end]:
        a[middle], a[end] = a[end], a[middle]
    a[front], a[end] = a[end], a[front]


def _partition(a: list[int], front: int, end: int) -> int:
    _place_median_first(a, front, end)
    pivot = a[front]
    i, j = front, end + 1
    while True:
        i += 1
        while i < end and a[i] < pivot:
            i += 1
        j -= 1
        while a[j] > pivot:
            j -= 1
        if i < j:
            a[i], a[j] = a[j], a[i]
        else:
            break
    a[front], a[j] = a[j], a[front]
    return j


def quick_sort(
    items: Iterable[int], tracker: MemoryTracker, worst: bool = False
) -> list[int]:
    """Return a sorted copy of ``items`` using median-of-three quicksort.

    Each active call level is charged two integers in the ``worst`` model and
    four otherwise, multiplied by the recursion depth.
    """
    result = list(items)
    per_level = (2 if worst else 4) * INT_SIZE
    pending = [(0, len(result) - 1, 1)]
    while pending:
        front, end, depth = pending.pop()
        if front < end:
            tracker.update(depth * per_level)
            split = _partition(result, front, end)
            pending.append((split + 1, end, depth + 1))
            pending.append((front, split - 1, depth + 1))
    return result


def _sift_down(a: list[int], root: int, length: int, tracker: MemoryTracker) -> None:
    while True:
        tracker.update(3 * INT_SIZE)
        left = 2 * root + 1
        right = left + 1
        largest = root
        if left < length and a[left] >= a[largest]:
            largest = left
        if right < length and a[right] >= a[largest]:
            largest = right
        if largest == root:
            return
        a[root], a[largest] = a[largest], a[root]
        root = largest


def heap_sort(items: Iterable[int], tracker: MemoryTracker) -> list[int]:
    """Return a sorted copy of ``items``; three indices are charged per sift step."""
    result = list(items)
    size = len(result)
    for root in range(size // 2, -1, -1):
        _sift_down(result, root, size, tracker)
    for last in range(size - 1, 0, -1):
        result[0], result[last] = result[last], result[0]
        _sift_down(result, 0, last, tracker)
    return result


def _merge(left: list[int], right: list[int], tracker: MemoryTracker) -> list[int]:
    result: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    tracker.update((len(left) + len(right)) * INT_SIZE)
    return result


def merge_sort(items: Iterable[int], tracker: MemoryTracker) -> list[int]:
    """Return a sorted copy of ``items``; the two halves being merged are charged."""
    data = list(items)

    def sort(part: list[int]) -> list[int]:
        if len(part) <= 1:
            return part
        middle = (len(part) - 1) // 2 + 1
        left = sort(part[:middle])
        right = sort(part[middle:])
        tracker.update((len(left) + len(right)) * INT_SIZE)
        return _merge(left, right, tracker)

    return sort(data)


def measure(data: Sequence[int]) -> dict[str, int]:
    """Return the peak memory estimate in bytes of each sort run on ``data``."""
    tracker = MemoryTracker()
    runs = (
        ("insertsort", lambda: insertion_sort(data, tracker)),
        ("quicksort", lambda: quick_sort(data, tracker, False)),
        ("mergesort", lambda: merge_sort(data, tracker)),
        ("heapsort", lambda: heap_sort(data, tracker)),
    )
    usage: dict[str, int] = {}
    for name, run in runs:
        tracker.reset()
        run()
        usage[name] = tracker.peak
    return usage


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: write a CSV of peak memory per sort and size."""
    parser = argparse.ArgumentParser(
        prog="sortbench-memory",
        description="Estimate peak memory of each sort for several data sizes.",
    )
    parser.add_argument(
        "sizes", nargs="*", type=int, help="data sizes to measure"
    )
    parser.add_argument(
        "-o", "--output", default=DEFAULT_REPORT_FILE, help="CSV file to write"
    )
    parser.add_argument(
        "--data-file", default=DEFAULT_DATA_FILE, help="scratch data file"
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    args = parser.parse_args(argv)

    sizes = args.sizes or list(DEFAULT_SIZES)
    if any(n < 0 for n in sizes):
        parser.error("data sizes must not be negative")
    rng = random.Random(args.seed)

    with open(Path(args.output), "w", newline="", encoding="utf-8") as report:
        writer = csv.writer(report)
        writer.writerow(REPORT_HEADER)
        for n in sizes:
            print(f"n = {n}")
            generate_random_data(n, args.data_file, rng)
            data = read_data(args.data_file)
            usage = measure(data)
            print(f"Insertsort memory usage: {usage['insertsort']} B")
            print(f"Quicksort memory usage: {usage['quicksort']} B")
            print(f"Mergesort memory usage: {usage['mergesort']} B")
            print(f"Heapsort memory usage: {usage['heapsort']} B")
            writer.writerow(
                [
                    n,
                    usage["insertsort"],
                    usage["quicksort"],
                    usage["mergesort"],
                    usage["heapsort"],
                ]
            )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())