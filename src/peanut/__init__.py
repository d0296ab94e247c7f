"""peanut: a small terminal task tracker backed by SQLite."""

__version__ = "0.1.0"
