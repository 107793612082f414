"""Drift session: the explicit context that owns per-user runtime state.

A session is created at start-up and discarded at the end. It holds the
configuration, the byte source, the optional birth profile, the capped probe
history, the latest scan, and today's check-in. Nothing here is module-level
state, so independent sessions never share data.

Orchestrates the two entropy paths::

    scan:  bytes(scan_sample_size)  -> statistics -> anomaly -+-> field
                                           cycles(now, birth) -+
    probe: bytes(probe_sample_size) -> statistics -> anomaly -> field -> probe
"""

from __future__ import annotations

import inspect
import logging
import time
from collections import deque
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import TYPE_CHECKING, Any

from driftfield.behavior.patterns import detect_patterns
from driftfield.behavior.report import weekly_report
from driftfield.behavior.surface import score_surface
from driftfield.config import DriftfieldConfig, resolve_config
from driftfield.cycles.calculator import compute_cycle_state
from driftfield.entropy.fallback import FallbackByteSource
from driftfield.entropy.mock import MockByteSource
from driftfield.entropy.registry import ByteSourceRegistry
from driftfield.entropy.system import SystemByteSource
from driftfield.field import compose_field
from driftfield.logging.logger import DriftLogger
from driftfield.logging.types import FieldRecord
from driftfield.probe.generator import generate_probe
from driftfield.scanner import EntropyScanner

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator, Sequence

    from driftfield.behavior.types import (
        DailyCheckIn,
        DriftReport,
        LogEvent,
        PatternReport,
        SurfaceScore,
    )
    from driftfield.cycles.types import BirthProfile, CycleState
    from driftfield.entropy.base import ByteSource
    from driftfield.field import FieldReading
    from driftfield.probe.types import Probe
    from driftfield.scanner import EntropyReading

logger = logging.getLogger("driftfield")


@dataclass(frozen=True, slots=True)
class ScanResult:
    """One scan: the entropy reading, the cycle state and the blended field."""

    reading: EntropyReading
    cycles: CycleState
    field: FieldReading


def _accepts_config(cls: type) -> bool:
    """Check whether a source constructor takes a config as first argument."""
    try:
        sig = inspect.signature(cls)
    except (ValueError, TypeError):
        return False
    for param in sig.parameters.values():
        annotation = param.annotation
        if annotation is inspect.Parameter.empty:
            return param.name == "config"
        return annotation is DriftfieldConfig or (
            isinstance(annotation, str) and "DriftfieldConfig" in annotation
        )
    return False


def build_byte_source(config: DriftfieldConfig) -> ByteSource:
    """Build the byte source from config, wrapping with fallback if needed.

    Args:
        config: Configuration naming the source type and fallback mode.

    Returns:
        A ByteSource, potentially wrapped in FallbackByteSource.
    """
    if config.entropy_source_type == "mock_uniform":
        primary: ByteSource = MockByteSource(seed=config.mock_seed)
    else:
        source_cls = ByteSourceRegistry.get(config.entropy_source_type)
        primary = source_cls(config) if _accepts_config(source_cls) else source_cls()  # type: ignore[call-arg]

    if config.fallback_mode == "error":
        return primary
    if config.fallback_mode == "mock_uniform":
        fallback: ByteSource = MockByteSource(seed=config.mock_seed)
    else:
        fallback = SystemByteSource()
    return FallbackByteSource(primary, fallback)


class DriftSession:
    """Session-scoped state and the scan/probe pipeline.

    Args:
        config: Session configuration. Loaded from the environment if omitted.
        source: Byte source. Built from *config* if omitted.
        birth: Optional birth profile enabling biorhythm and zodiac.
        clock: Returns the current wall-clock time.
    """

    def __init__(
        self,
        config: DriftfieldConfig | None = None,
        source: ByteSource | None = None,
        birth: BirthProfile | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._config = config or DriftfieldConfig()
        self._source = source or build_byte_source(self._config)
        self._scanner = EntropyScanner(self._source)
        self._logger = DriftLogger(self._config)
        self._clock = clock
        self.birth = birth

        self._probes: deque[Probe] = deque(maxlen=self._config.probe_history_limit)
        self._latest: ScanResult | None = None
        self._check_in: DailyCheckIn | None = None

        logger.debug(
            "Drift session started: source=%s history_limit=%d",
            self._source.name,
            self._config.probe_history_limit,
        )

    # --- Accessors ---

    @property
    def config(self) -> DriftfieldConfig:
        return self._config

    @property
    def source(self) -> ByteSource:
        return self._source

    @property
    def diagnostics(self) -> DriftLogger:
        return self._logger

    @property
    def latest(self) -> ScanResult | None:
        """The most recent scan or probe reading, if any."""
        return self._latest

    @property
    def probe_history(self) -> tuple[Probe, ...]:
        """Retained probes, oldest first."""
        return tuple(self._probes)

    # --- Entropy path ---

    def _run(self, kind: str, sample_size: int, config: DriftfieldConfig, now: datetime) -> ScanResult:
        t0 = time.perf_counter()
        reading = self._scanner.scan(sample_size, config.preview_size, created_at=now)
        cycles = compute_cycle_state(now, self.birth)
        field = compose_field(reading.anomaly, cycles)
        result = ScanResult(reading=reading, cycles=cycles, field=field)
        self._latest = result

        self._logger.log_run(
            FieldRecord(
                timestamp_ns=time.time_ns(),
                kind=kind,
                sample_size=reading.sample_size,
                entropy_fetch_ms=reading.entropy_fetch_ms,
                total_ms=(time.perf_counter() - t0) * 1000.0,
                entropy_source_used=reading.source_used,
                entropy_is_fallback=reading.is_fallback,
                shannon=reading.metrics.shannon,
                anomaly_score=reading.anomaly.anomaly_score,
                polarity=reading.anomaly.polarity.value,
                bearing_degrees=reading.anomaly.angle_degrees,
                field_composite=field.composite_value,
                field_polarity=field.polarity.value,
                field_magnitude=field.magnitude,
            ),
            config,
        )
        return result

    def scan(self, now: datetime | None = None, overrides: dict[str, Any] | None = None) -> ScanResult:
        """Run one routine field scan on a fresh sample.

        Args:
            now: Time of the scan (defaults to the session clock).
            overrides: Per-call ``df_*`` config overrides.

        Raises:
            EntropyUnavailableError: If no source can provide bytes.
            ConfigValidationError: If *overrides* are invalid.
        """
        config = resolve_config(self._config, overrides)
        return self._run("scan", config.scan_sample_size, config, now or self._clock())

    def fire_probe(
        self,
        intention: str | None = "",
        now: datetime | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> Probe:
        """Draw a probe-sized sample and emit a probe.

        The probe is appended to the session history; the oldest entry drops
        off once ``probe_history_limit`` is reached.
        """
        config = resolve_config(self._config, overrides)
        moment = now or self._clock()
        result = self._run("probe", config.probe_sample_size, config, moment)
        probe = generate_probe(
            intention,
            result.reading.metrics,
            result.reading.anomaly,
            result.field,
            created_at=moment,
        )
        self._probes.append(probe)
        return probe

    def poll(
        self,
        count: int | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> Iterator[ScanResult]:
        """Continuous scanning: yield a fresh scan every ``scan_interval_s``.

        Each tick reruns the whole pipeline. Stops after *count* scans, or
        never if *count* is ``None``; the caller stops iteration to cancel.
        """
        produced = 0
        while count is None or produced < count:
            if produced:
                sleep(self._config.scan_interval_s)
            yield self.scan()
            produced += 1

    # --- Behavioral layer ---

    def record_check_in(self, entry: DailyCheckIn, today: date | None = None) -> SurfaceScore:
        """Store today's check-in (stamping its date if missing) and score it."""
        if entry.day is None:
            entry = replace(entry, day=today or self._clock().date())
        self._check_in = entry
        return score_surface(entry)

    def todays_check_in(self, today: date | None = None) -> tuple[DailyCheckIn, SurfaceScore] | None:
        """Return today's check-in and score; a check-in from another day is stale."""
        day = today or self._clock().date()
        if self._check_in is None or self._check_in.day != day:
            return None
        return self._check_in, score_surface(self._check_in)

    def detect_patterns(self, events: Sequence[LogEvent]) -> PatternReport:
        return detect_patterns(events)

    def weekly_report(self, events: Sequence[LogEvent], now: datetime | None = None) -> DriftReport:
        return weekly_report(self._probes, events, now or self._clock())

    # --- Lifecycle ---

    def close(self) -> None:
        """Release the byte source."""
        self._source.close()

    def __enter__(self) -> DriftSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
