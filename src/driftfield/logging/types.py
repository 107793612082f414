"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FieldRecord:
    """Immutable record of one scan or probe pipeline execution.

    Attributes:
        timestamp_ns: Wall-clock time of the run (nanoseconds since epoch).
        kind: ``"scan"`` or ``"probe"``.
        sample_size: Number of bytes analyzed.
        entropy_fetch_ms: Time to fetch the bytes (milliseconds).
        total_ms: Time for the full pipeline (milliseconds).
        entropy_source_used: Name of the source that provided bytes.
        entropy_is_fallback: True if a fallback source was used.
        shannon: Shannon entropy of the sample (bits).
        anomaly_score: Scaled, clamped anomaly score.
        polarity: Entropy polarity (``"positive"``/``"negative"``).
        bearing_degrees: Byte-derived bearing.
        field_composite: Composite field value.
        field_polarity: Composite field polarity.
        field_magnitude: Composite field magnitude.
    """

    # Timing
    timestamp_ns: int
    kind: str
    sample_size: int
    entropy_fetch_ms: float
    total_ms: float

    # Byte source
    entropy_source_used: str
    entropy_is_fallback: bool

    # Entropy analysis
    shannon: float
    anomaly_score: float
    polarity: str
    bearing_degrees: float

    # Field
    field_composite: float
    field_polarity: str
    field_magnitude: float
