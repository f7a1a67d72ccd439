"""rcdash: replication controller reporting and cleanup helpers."""

__version__ = "0.1.0"
