"""Timestamps, request batching, logging setup, shell helpers and CSV column layouts for option chain data."""

__version__ = "0.1.0"
__all__ = ["apputils", "timestamps", "logsetup", "sequences", "csvcolumns"]