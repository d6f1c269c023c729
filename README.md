# xfasttrie

An x-fast trie keyed by 32-bit unsigned integers. It finds the longest stored
prefix of a key with a binary search over one hash table per prefix length,
and uses that to answer predecessor queries. Stored keys are also kept in a
doubly linked list in key order. A small benchmark command times the trie
against a sorted map.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Using the trie

```python
from xfasttrie.trie import XFastTrie

trie = XFastTrie()
trie.insert(10, "ten")      # True: the key was added
trie.insert(10, "again")    # False: the key was already there, nothing changes
trie.insert(42, "forty-two")

trie.get(10)                # "ten"
trie.get(7)                 # None
trie.contains(42)           # True
42 in trie                  # True

trie.predecessor(41)        # 10: the largest stored key not greater than 41
trie.predecessor(42)        # 42: a stored key is its own predecessor
trie.predecessor(5)         # None: no stored key is 5 or smaller

trie.longest_prefix_search(42)  # 32: every bit of a stored key is a stored prefix
```

`longest_prefix_search` returns the length in bits (0 to 32) of the longest
prefix of the key, taken from the most significant bit, that some stored key
shares.

Keys must be integers in the range `0` to `2**32 - 1`. Any method given a
non-integer key (including `bool`) raises `TypeError`. A key outside that
range raises `ValueError`. Values can be any object. Keys cannot be removed
once inserted, and inserting an existing key does not replace its value.

## Benchmark

The `xfasttrie-bench` command does the following:

1. It draws a set of distinct random keys below the universe size.
2. It inserts the keys into an `XFastTrie` and into a `SortedDict`.
3. It times these operations:
   - inserts into the trie;
   - trie predecessor queries and trie lookups for the keys `1` to `input size - 1`;
   - inserts into the sorted map;
   - lookups in the sorted map.
4. It appends one row per measurement to a CSV file. Times are in whole
   milliseconds, and sorted-map rows are labelled `B Tree`.
5. It prints `END OF PROCESSING`.

If the file is new, the command writes a header row first:

```
Data Structure,Universe Size,Input Size,Operation,Time
```

Run it with the defaults (65536 keys, universe 4294967295, `results.csv` in the
current directory):

```
xfasttrie-bench
```

These options are available:

- `--input-size N`: the number of keys.
- `--universe-size N`: the keys are drawn below this value.
- `--output PATH`: the CSV file to append to.
- `--seed N`: seed the random generator so that a run can be repeated.

From Python, the following functions are available in `xfasttrie.bench`:

- `create_data(amount, maximum, rng=None)` returns `amount` distinct sorted
  integers below `maximum`. It raises `ValueError` if `amount` exceeds
  `maximum`.
- `run_benchmark(input_size, universe_size, results_path, rng=None)` runs the
  measurements, appends them to the file and returns the rows as tuples of
  strings.
- `save_results(record, path)` appends a single row.

Both `create_data` and `run_benchmark` accept a `random.Random` instance.