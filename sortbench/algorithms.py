"""Classic comparison sorts and a timing benchmark over them."""

from __future__ import annotations

import argparse
import time
from collections.abc import Callable, Iterable, Sequence

from sortbench.datagen import DEFAULT_DATA_FILE, read_data


def insertion_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        value = result[i]
        j = i - 1
        while j >= 0 and value < result[j]:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = value
    return result


def _median_of_three_index(a: list[int], front: int, end: int) -> int:
    middle = (front + end) // 2
    mid_value = a[middle]
    pivot = front
    if a[front] >= mid_value >= a[end] or a[front] <= mid_value <= a[end]:
        pivot = middle
    if a[front] <= a[end] <= mid_value or a[front] >= a[end] >= mid_value:
        pivot = end
    return pivot


def _partition(a: list[int], front: int, end: int) -> int:
    pivot_index = _median_of_three_index(a, front, end)
    a[front], a[pivot_index] = a[pivot_index], a[front]
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


def quick_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using median-of-three quicksort."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        front, end = pending.pop()
        if front < end:
            split = _partition(result, front, end)
            pending.append((front, split - 1))
            pending.append((split + 1, end))
    return result


def _sift_down(a: list[int], root: int, length: int) -> None:
    while True:
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


def heap_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using heap sort on a max-heap."""
    result = list(items)
    size = len(result)
    for root in range(size // 2, -1, -1):
        _sift_down(result, root, size)
    for last in range(size - 1, 0, -1):
        result[0], result[last] = result[last], result[0]
        _sift_down(result, 0, last)
    return result


def merge(left: Sequence[int], right: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
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
    return result


def merge_sort(items: Iterable[int]) -> list[int]:
    """Return a sorted copy of ``items`` using top-down merge sort."""
    data = list(items)
    if len(data) <= 1:
        return data
    middle = (len(data) - 1) // 2 + 1
    return merge(merge_sort(data[:middle]), merge_sort(data[middle:]))


def is_sorted(items: Sequence[int]) -> bool:
    """Return True if ``items`` is in non-decreasing order."""
    return all(a <= b for a, b in zip(items, items[1:]))


ALGORITHMS: tuple[tuple[str, Callable[[Iterable[int]], list[int]]], ...] = (
    ("insertsort", insertion_sort),
    ("quicksort", quick_sort),
    ("mergesort", merge_sort),
    ("heapsort", heap_sort),
)


def benchmark(data: Sequence[int]) -> dict[str, float]:
    """Time each algorithm on ``data`` and return CPU seconds per algorithm.

    An algorithm whose output is not sorted is left out of the result.
    """
    timings: dict[str, float] = {}
    for name, sort in ALGORITHMS:
        start = time.process_time()
        result = sort(data)
        stop = time.process_time()
        if is_sorted(result):
            timings[name] = stop - start
    return timings


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: time every sort on a data file."""
    parser = argparse.ArgumentParser(
        prog="sortbench",
        description="Time insertion, quick, merge and heap sort on a data file.",
    )
    parser.add_argument(
        "data_file", nargs="?", default=DEFAULT_DATA_FILE, help="file to read"
    )
    args = parser.parse_args(argv)

    data = read_data(args.data_file)
    for name, seconds in benchmark(data).items():
        print(f"{name} time:{seconds}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())