"""Generate, store and load the integer data sets used by the benchmarks."""

from __future__ import annotations

import argparse
import random
from collections.abc import Iterable, Sequence
from pathlib import Path

DEFAULT_DATA_FILE = "data.txt"


class DataFormatError(ValueError):
    """Raised when a data file does not hold a count followed by that many integers."""


def _rng_or_default(rng: random.Random | None) -> random.Random:
    return rng if rng is not None else random.Random()


def generate_data(n: int, rng: random.Random | None = None) -> list[int]:
    """Return ``n`` random integers, each in the range ``[0, n)``."""
    if n < 0:
        raise ValueError(f"record count must not be negative, got {n}")
    rng = _rng_or_default(rng)
    return [rng.randrange(n) for _ in range(n)]


def write_data(data: Sequence[int], path: str | Path) -> None:
    """Write the record count on one line and the values, space separated, on the next."""
    with open(path, "w", encoding="utf-8") as out:
        out.write(f"{len(data)}\n")
        out.write(" ".join(str(value) for value in data))
        out.write("\n")


def read_data(path: str | Path) -> list[int]:
    """Read a data file written by :func:`write_data` and return its values.

    Raises ``OSError`` if the file cannot be opened and :class:`DataFormatError`
    if its contents are malformed.
    """
    path = Path(path)
    tokens = path.read_text(encoding="utf-8").split()
    if not tokens:
        raise DataFormatError(f"Invalid data format in file: {path}")
    try:
        count = int(tokens[0])
    except ValueError:
        raise DataFormatError(f"Invalid data format in file: {path}") from None
    if count < 0:
        raise DataFormatError(f"Invalid data format in file: {path}")
    raw_values = tokens[1 : count + 1]
    if len(raw_values) < count:
        raise DataFormatError(f"Invalid data format in file: {path}")
    try:
        return [int(token) for token in raw_values]
    except ValueError:
        raise DataFormatError(f"Invalid data format in file: {path}") from None


def permute(items: Iterable[int], rng: random.Random | None = None) -> list[int]:
    """Return a uniformly random permutation of ``items`` (Fisher-Yates)."""
    rng = _rng_or_default(rng)
    result = list(items)
    for i in range(len(result) - 1, 0, -1):
        j = rng.randrange(i + 1)
        result[i], result[j] = result[j], result[i]
    return result


def generate_random_data(
    n: int,
    path: str | Path = DEFAULT_DATA_FILE,
    rng: random.Random | None = None,
) -> list[int]:
    """Generate ``n`` random values, write them to ``path`` and return them."""
    data = generate_data(n, rng)
    write_data(data, path)
    return data


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point: write a random data file."""
    parser = argparse.ArgumentParser(
        prog="sortbench-datagen",
        description="Write a file of random integers for the sorting benchmarks.",
    )
    parser.add_argument("count", nargs="?", type=int, help="number of records")
    parser.add_argument(
        "-o", "--output", default=DEFAULT_DATA_FILE, help="file to write"
    )
    parser.add_argument("--seed", type=int, help="seed for the random generator")
    args = parser.parse_args(argv)

    count = args.count
    if count is None:
        count = int(input("Number of records: "))
    if count < 0:
        parser.error("record count must not be negative")

    generate_random_data(count, args.output, random.Random(args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())