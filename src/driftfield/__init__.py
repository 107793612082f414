"""driftfield: entropy anomaly scanning, cyclical field readings and
serendipity heuristics.

Samples random bytes, runs five randomness-deviation statistics over them,
reduces them to an anomaly score and a byte-derived direction, blends that
with lunar, time-of-day and biorhythm cycles, and emits directional probes.
A behavioral layer detects patterns in logged events and scores decisions
and daily check-ins.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("driftfield")
except PackageNotFoundError:
    __version__ = "0.0.0"

from driftfield.config import DriftfieldConfig, resolve_config, validate_overrides
from driftfield.exceptions import (
    ConfigValidationError,
    DriftfieldError,
    EntropyUnavailableError,
    InvalidInputError,
    SampleError,
)
from driftfield.field import FieldReading, compose_field
from driftfield.scanner import EntropyReading, EntropyScanner
from driftfield.session import DriftSession, ScanResult, build_byte_source

__all__ = [
    "ConfigValidationError",
    "DriftSession",
    "DriftfieldConfig",
    "DriftfieldError",
    "EntropyReading",
    "EntropyScanner",
    "EntropyUnavailableError",
    "FieldReading",
    "InvalidInputError",
    "SampleError",
    "ScanResult",
    "__version__",
    "build_byte_source",
    "compose_field",
    "resolve_config",
    "validate_overrides",
]
