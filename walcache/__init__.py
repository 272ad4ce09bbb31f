"""Thread-safe LRU cache with per-entry TTL and write-ahead-log recovery, plus a small demo command."""

__version__ = "0.1.0"
__all__ = ["cache", "demo"]