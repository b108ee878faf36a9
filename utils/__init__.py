"""Utility modules for the date helpers.

This package provides conversions between instant representations.

Modules:
    time_utils: UTC conversion, epoch milliseconds and elapsed-time helpers
"""
from utils.time_utils import elapsed_milliseconds, from_epoch_milliseconds, to_utc

__all__ = ["elapsed_milliseconds", "from_epoch_milliseconds", "to_utc"]
