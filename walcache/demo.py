"""Small demonstration entry point for the cache."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from walcache.cache import LRUCache

TTL_SECONDS = 3
CACHE_CAPACITY = 3


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Create a demo cache and report its configuration."""
    parser = argparse.ArgumentParser(description="LRU cache demonstration")
    parser.parse_args(argv)

    cache = LRUCache(CACHE_CAPACITY, TTL_SECONDS)

    print("--- Test Scenario ---")
    print(f"Cache Capacity: {cache.capacity}, TTL: {cache.ttl_seconds}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())