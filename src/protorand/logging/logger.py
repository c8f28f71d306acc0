"""Diagnostic logger for generation events.

Uses the standard ``logging`` module with the ``"protorand"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from protorand.config import ProtoRandConfig
    from protorand.logging.types import GenerationRecord

logger = logging.getLogger("protorand")


class GenerationLogger:
    """Per-generation diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per generation with type, seed and
        recursion counters.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: ProtoRandConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[GenerationRecord] = []

    def log_generation(self, record: GenerationRecord) -> None:
        """Log a single generation event.

        Args:
            record: Immutable record of the generation call.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "generated=%s output=%s source=%s seed=%s depth=%d/%d "
                "messages=%d fields=%d defaults=%d total=%.2fms",
                record.message_type,
                record.output_kind,
                record.source_name,
                record.seed,
                record.deepest_level,
                record.max_depth,
                record.messages_built,
                record.fields_populated,
                record.defaults_substituted,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("generation_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[GenerationRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        n = len(self._records)
        elapsed = [r.elapsed_ms for r in self._records]
        truncated = sum(1 for r in self._records if r.defaults_substituted > 0)
        return {
            "total_generations": n,
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
            "mean_messages_built": sum(r.messages_built for r in self._records) / n,
            "mean_fields_populated": sum(r.fields_populated for r in self._records) / n,
            "max_deepest_level": max(r.deepest_level for r in self._records),
            "depth_truncated_count": truncated,
            "depth_truncated_rate": truncated / n,
        }
