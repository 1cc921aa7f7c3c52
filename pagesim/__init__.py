"""Page replacement simulators: FIFO, LRU and optimal page-fault counting."""

__version__ = "0.1.0"

__all__ = ["args", "fifo", "lru", "optimal"]