"""Diagnostic logging subsystem for driftfield.

Provides immutable per-run records and a configurable logger that supports
none/summary/full verbosity and in-memory diagnostic mode.
"""

from driftfield.logging.logger import DriftLogger
from driftfield.logging.types import FieldRecord

__all__ = [
    "DriftLogger",
    "FieldRecord",
]
