# walcache

An in-memory least-recently-used cache with a time-to-live on every entry and
an optional write-ahead log (WAL) that lets the cache rebuild its state after a
restart.

## Features

- Fixed capacity. Once it is full, adding a new key evicts the least recently
  used entry. A capacity of 0 or less is treated as 1, with a warning logged.
- Per-entry TTL in whole seconds. An entry expires once more than
  `ttl_seconds` have passed since it was written or last read. Reading an
  entry resets its timer. A TTL of 0 or less turns expiry off. Expired
  entries are dropped when they are next looked up.
- Thread-safe. One lock guards every operation.
- Write-ahead log. Each `put`, and each `remove` of a key that is present, is
  appended to an attached text stream and flushed before the change is made in
  memory. If the write fails, the change is not made and `WalWriteError`
  (a subclass of `OSError`) is raised.
- Recovery. `load_from_wal` replays a log file into a cache without writing
  to the log.

## Installation

```
pip install .
```

## Usage

```python
from walcache.cache import LRUCache, WalWriteError

cache = LRUCache(capacity=10, ttl_seconds=60)

# Rebuild the state from an earlier run. A missing file counts as an empty log.
puts, dels = cache.load_from_wal("cache.wal")

with open("cache.wal", "a", encoding="utf-8") as wal:
    cache.set_wal_stream(wal)

    cache.put("apple", "red_fruit")
    cache.put("banana", "yellow_fruit")

    print(cache.get("apple"))   # "red_fruit"
    print(cache.get("grape"))   # None

    cache.remove("apple")
    print(len(cache))           # 1
    print(cache.items())        # [("banana", "yellow_fruit")], most recent first
    print(str(cache))           # Cache State (Head -> Tail): [ (banana: yellow_fruit) ]
    cache.print()               # writes the same line to standard output

cache.set_wal_stream(None)      # detach the log
```

`LRUCache` has these members:

- `get(key)` returns the value, or `None` if the key is absent or expired.
- `put(key, value)` stores a value, making it the most recently used.
- `remove(key)` deletes a key; an absent key is a no-op and is not logged.
- `load_from_wal(wal_filename)` returns the number of `PUT` and `DEL` entries
  applied. I/O errors other than a missing file propagate.
- `items()`, `len()`, `str()` and `print()` show the contents from most to
  least recently used.
- `capacity` and `ttl_seconds` hold the configuration.

### Log format

The log is plain text with one entry per line:

```
PUT,<key>,<value>
DEL,<key>
```

Keys and values are not escaped, so they must not contain commas or newlines.
During recovery, empty lines are skipped, and malformed or unrecognised lines
are reported through the `logging` module and skipped. Evictions are not
logged, because they happen again when the `PUT` entries are replayed.

## Demo

```
walcache-demo
```

creates a cache with capacity 3 and a TTL of 3 seconds and prints its
configuration.

## What this package does not do

The cache lives inside one Python process. There is no network server or
client for sharing it between processes; code that needs that must wrap
`LRUCache` itself. The package does not open or rotate the log file for you
either: you open the stream and attach it with `set_wal_stream`.

## Running the tests

```
pip install .[test]
pytest
```