"""Metrics collected during a lint run."""
import time
from dataclasses import dataclass, field


@dataclass
class LintMetrics:
    """Counters for a single lint run."""

    # Timing
    start_time: float = field(default_factory=time.time)
    end_time: float | None = None

    # Files
    files_collected: int = 0
    files_linted: int = 0
    decode_failures: int = 0

    # Findings
    errors: int = 0
    warnings: int = 0

    def finish(self) -> None:
        """Mark the run as finished."""
        self.end_time = time.time()

    @property
    def elapsed_seconds(self) -> float:
        """Get elapsed time in seconds."""
        end = self.end_time or time.time()
        return end - self.start_time

    @property
    def total_violations(self) -> int:
        return self.errors + self.warnings

    def to_dict(self) -> dict:
        """Convert metrics to dictionary."""
        return {
            "elapsed_seconds": round(self.elapsed_seconds, 2),
            "files_collected": self.files_collected,
            "files_linted": self.files_linted,
            "decode_failures": self.decode_failures,
            "errors": self.errors,
            "warnings": self.warnings,
            "total_violations": self.total_violations,
        }
