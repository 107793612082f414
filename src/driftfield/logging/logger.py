"""Per-run diagnostics for scans and probes.

Output goes to the ``"driftfield"`` logger at INFO. ``log_level`` picks the
shape of each line; ``diagnostic_mode`` additionally retains every
:class:`~driftfield.logging.types.FieldRecord` in memory.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from statistics import fmean
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from driftfield.config import DriftfieldConfig
    from driftfield.logging.types import FieldRecord

logger = logging.getLogger("driftfield")

_SUMMARY_FORMAT = (
    "%s n=%d anomaly=%.4f polarity=%s bearing=%.1f field=%+.4f/%s/%.3f "
    "shannon=%.4f source=%s%s fetch=%.2fms total=%.2fms"
)


class DriftLogger:
    """Emit and optionally retain one record per pipeline run.

    Levels:
        ``"none"``: nothing is emitted (records are still kept in
        diagnostic mode).

        ``"summary"``: one line with anomaly, polarity, bearing, field
        reading, Shannon entropy, source and timings.

        ``"full"``: the whole record as JSON.
    """

    def __init__(self, config: DriftfieldConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[FieldRecord] = []

    def log_run(self, record: FieldRecord, config: DriftfieldConfig | None = None) -> None:
        """Emit and retain *record*.

        *config* carries per-call ``log_level`` and ``diagnostic_mode``
        overrides; without it the settings given at construction apply.
        """
        log_level = self._log_level if config is None else config.log_level
        diagnostic_mode = self._diagnostic_mode if config is None else config.diagnostic_mode
        if diagnostic_mode:
            self._records.append(record)

        if log_level == "summary":
            logger.info(
                _SUMMARY_FORMAT,
                record.kind,
                record.sample_size,
                record.anomaly_score,
                record.polarity,
                record.bearing_degrees,
                record.field_composite,
                record.field_polarity,
                record.field_magnitude,
                record.shannon,
                record.entropy_source_used,
                " [FALLBACK]" if record.entropy_is_fallback else "",
                record.entropy_fetch_ms,
                record.total_ms,
            )
        elif log_level == "full":
            logger.info("field_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[FieldRecord]:
        """Records from runs made in diagnostic mode, oldest first."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Aggregate the retained records; ``{}`` when nothing was retained."""
        records = self._records
        if not records:
            return {}

        total = len(records)
        scores = [r.anomaly_score for r in records]
        fallbacks = sum(r.entropy_is_fallback for r in records)
        return {
            "total_runs": total,
            "probe_count": sum(r.kind == "probe" for r in records),
            "mean_anomaly": fmean(scores),
            "min_anomaly": min(scores),
            "max_anomaly": max(scores),
            "positive_rate": sum(r.polarity == "positive" for r in records) / total,
            "mean_fetch_ms": fmean(r.entropy_fetch_ms for r in records),
            "fallback_count": fallbacks,
            "fallback_rate": fallbacks / total,
        }
