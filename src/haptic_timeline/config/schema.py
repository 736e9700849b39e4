"""Configuration dataclasses."""

from dataclasses import dataclass, field

from ..timeline.core.types import MATCH_TOLERANCE_MS


@dataclass
class OutputConfig:
    """JSON output formatting."""
    json_indent: int = 2


@dataclass
class TimelineConfig:
    """Main engine configuration."""
    match_tolerance_ms: float = MATCH_TOLERANCE_MS  # Curve <-> event start slack
    drop_insignificant_curves: bool = False  # Drop 1-point curves after trimming
    transient_tail_ms: float = 100.0  # Playback tail after a transient
    log_level: str = "WARNING"
    output: OutputConfig = field(default_factory=OutputConfig)

    @property
    def transient_tail(self) -> float:
        """Transient tail in seconds, for the composer surface."""
        return self.transient_tail_ms / 1000

    @classmethod
    def with_defaults(cls) -> "TimelineConfig":
        """Create config with sensible defaults."""
        return cls()
