"""Bounds for integer primary keys accepted from clients."""

# Primary keys are 32-bit INTEGER columns.
MAX_ID = 2**31 - 1
