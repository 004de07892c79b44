# sortbench

sortbench compares four classic sorting algorithms on random integer data:

- insertion sort
- quick sort (median-of-three pivot)
- merge sort
- heap sort

It measures two things:

- the CPU time each algorithm takes;
- an estimate of the peak extra memory each one needs while it sorts.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Data files

A data file is plain text. The first token is the number of values. That many integers follow, separated by whitespace. `sortbench.datagen.write_data` writes the count on the first line and the values, space separated, on the second.

## Command-line use

Three commands are installed.

### `sortbench-datagen`

```
sortbench-datagen [COUNT] [-o OUTPUT] [--seed SEED]
```

This command writes `COUNT` random integers to a data file. Each value is in the range `0` to `COUNT - 1`. The file is `data.txt` unless you give another with `-o`.

- If `COUNT` is left out, the command asks for it on standard input.
- A negative count is rejected.
- `--seed` makes the output reproducible.

### `sortbench`

```
sortbench [DATA_FILE]
```

This command reads a data file (`data.txt` by default) and sorts it with each algorithm. It prints the CPU time of every algorithm whose result came out in order:

```
insertsort time:0.41s
quicksort time:0.002s
mergesort time:0.01s
heapsort time:0.006s
```

### `sortbench-memory`

```
sortbench-memory [SIZES ...] [-o OUTPUT] [--data-file DATA_FILE] [--seed SEED]
```

For each size, this command does the following:

1. It generates a fresh random data set and writes it to the scratch data file (`data.txt` by default).
2. It reads the data set back.
3. It runs the instrumented algorithms on it.
4. It prints each algorithm's peak memory estimate in bytes.

It also writes all of these figures to a CSV file, `memory_usage.csv` by default. The CSV columns are `n`, `InsertsortMemoryUsage`, `QuicksortMemoryUsage`, `MergesortMemoryUsage` and `HeapsortMemoryUsage`.

When no sizes are given, it uses 500, 1000, 2000, 3000, 4000 and 5000. Negative sizes are rejected.

## Library use

The sorting functions in `sortbench.algorithms` take any iterable of integers and return a new sorted list. The input is left as it was.

```python
from sortbench.algorithms import (
    insertion_sort, quick_sort, merge_sort, heap_sort, merge, is_sorted, benchmark,
)

data = [5, 3, 8, 1, 9, 2]
assert quick_sort(data) == [1, 2, 3, 5, 8, 9]
assert is_sorted(heap_sort(data))
assert merge([1, 4], [2, 3]) == [1, 2, 3, 4]

timings = benchmark(data)  # {"insertsort": ..., "quicksort": ..., ...} in CPU seconds
```

`sortbench.datagen` generates, saves and loads data sets in the format the commands use:

```python
import random
from sortbench.datagen import generate_data, write_data, read_data, permute

rng = random.Random(42)
values = generate_data(1000, rng)
write_data(values, "data.txt")
assert read_data("data.txt") == values
shuffled = permute(values, rng)
```

Other behaviour to know about:

- `generate_random_data(n, path, rng)` generates the values, writes them to the file and returns them.
- `read_data` raises `DataFormatError`, a subclass of `ValueError`, when the file is malformed.
- `read_data` raises `OSError` when the file cannot be opened.

### Memory estimates

`sortbench.memory` holds instrumented versions of the same algorithms. Each one reports its memory figures to a `MemoryTracker`, which keeps the largest value it is given in `peak`.

The figures are a model, not a measurement of the Python process. They count 4 bytes per stored integer:

- **Insertion sort** is charged one held value.
- **Quick sort** is charged its recursion depth times four integers per level. With `worst=True` it is charged two integers per level.
- **Merge sort** is charged the size of the two halves being merged.
- **Heap sort** is charged three indices per sift step.

```python
from sortbench.memory import MemoryTracker, merge_sort, measure

tracker = MemoryTracker()
merge_sort([3, 1, 2], tracker)
print(tracker.peak)
tracker.reset()

usage = measure([3, 1, 2])  # peak bytes per algorithm
```