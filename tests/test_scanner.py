"""Tests for the entropy scanner."""

from __future__ import annotations

from datetime import datetime

import pytest

from driftfield.entropy import MockByteSource, ReplayByteSource
from driftfield.exceptions import SampleError
from driftfield.scanner import EntropyScanner, read_sample


class TestEntropyScanner:
    def test_reading(self, uniform_source: MockByteSource, noon: datetime) -> None:
        reading = EntropyScanner(uniform_source).scan(2048, preview_size=16, created_at=noon)
        assert reading.sample_size == 2048
        assert len(reading.preview) == 16
        assert reading.source_used == "mock_uniform"
        assert reading.entropy_fetch_ms >= 0.0
        assert reading.created_at == noon
        assert 0.0 <= reading.anomaly.anomaly_score <= 1.0

    def test_replay_reproduces_reading(self, uniform_sample: bytes) -> None:
        a = EntropyScanner(ReplayByteSource(uniform_sample)).scan(2048)
        b = read_sample(uniform_sample)
        assert a.metrics == b.metrics
        assert a.anomaly == b.anomaly
        assert a.source_used == "replay"

    def test_biased_source_scores_higher(
        self, uniform_source: MockByteSource, biased_source: MockByteSource
    ) -> None:
        uniform = EntropyScanner(uniform_source).scan(4096)
        biased = EntropyScanner(biased_source).scan(4096)
        assert biased.anomaly.anomaly_score > uniform.anomaly.anomaly_score


class TestReadSample:
    def test_degenerate_sample(self, zero_sample: bytes) -> None:
        reading = read_sample(zero_sample, preview_size=4)
        assert reading.preview == b"\x00" * 4
        assert reading.source_used == "external"
        assert reading.is_fallback is False
        assert reading.anomaly.anomaly_score == 1.0

    def test_too_short(self) -> None:
        with pytest.raises(SampleError):
            read_sample(b"\x01\x02\x03")
