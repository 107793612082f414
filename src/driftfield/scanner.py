"""Entropy scanner: fetch a sample, analyze it, reduce it.

The scanner is the only place bytes are drawn from a source. Every call
draws a fresh sample; nothing is cached between calls.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from driftfield.analysis.anomaly import reduce_anomaly
from driftfield.analysis.statistics import analyze_sample
from driftfield.entropy.fallback import FallbackByteSource

if TYPE_CHECKING:
    from driftfield.analysis.types import AnomalyResult, EntropyMetrics
    from driftfield.entropy.base import ByteSource


@dataclass(frozen=True, slots=True)
class EntropyReading:
    """Result of analyzing one sample.

    Only the first ``preview_size`` bytes of the sample are retained.
    """

    metrics: EntropyMetrics
    anomaly: AnomalyResult
    preview: bytes
    source_used: str
    is_fallback: bool
    entropy_fetch_ms: float
    created_at: datetime

    @property
    def sample_size(self) -> int:
        return self.metrics.sample_size


def read_sample(
    raw: bytes,
    preview_size: int = 64,
    source_used: str = "external",
    created_at: datetime | None = None,
) -> EntropyReading:
    """Analyze an already-fetched sample."""
    data = bytes(raw)
    metrics = analyze_sample(data)
    return EntropyReading(
        metrics=metrics,
        anomaly=reduce_anomaly(metrics, data),
        preview=data[:preview_size],
        source_used=source_used,
        is_fallback=False,
        entropy_fetch_ms=0.0,
        created_at=created_at or datetime.now(),
    )


class EntropyScanner:
    """Draws samples from a :class:`ByteSource` and analyzes them."""

    def __init__(self, source: ByteSource) -> None:
        self._source = source

    @property
    def source(self) -> ByteSource:
        return self._source

    def scan(
        self,
        sample_size: int,
        preview_size: int = 64,
        created_at: datetime | None = None,
    ) -> EntropyReading:
        """Fetch *sample_size* bytes and analyze them.

        Raises:
            EntropyUnavailableError: If the source cannot provide the bytes.
        """
        t0 = time.perf_counter()
        data = self._source.sample(sample_size)
        fetch_ms = (time.perf_counter() - t0) * 1000.0

        if isinstance(self._source, FallbackByteSource):
            source_used = self._source.last_source_used
            is_fallback = self._source.used_fallback
        else:
            source_used = self._source.name
            is_fallback = False

        metrics = analyze_sample(data)
        return EntropyReading(
            metrics=metrics,
            anomaly=reduce_anomaly(metrics, data),
            preview=data[:preview_size],
            source_used=source_used,
            is_fallback=is_fallback,
            entropy_fetch_ms=fetch_ms,
            created_at=created_at or datetime.now(),
        )
