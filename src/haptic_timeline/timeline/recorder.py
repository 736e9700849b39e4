"""
Live sample recorder.

Accumulates the RawSample stream of a gesture-driven recording. The
gesture layer calls the record_* methods as touches happen; stop()
closes any open continuous session and reconstructs the Pattern.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Callable

from .capture import reconstruct
from .core.types import Pattern, RawSample, SampleKind

logger = logging.getLogger(__name__)


@dataclass
class Recording:
    """Result of a finished recording session."""
    samples: list[RawSample] = field(default_factory=list)
    pattern: Pattern = field(default_factory=Pattern)
    duration_ms: float = 0.0


class SampleRecorder:
    """
    Records capture samples with timestamps relative to start().

    Calls made while not recording are ignored, as are continuous updates
    and ends with no open session, so the produced stream always pairs
    every continuous_start with one continuous_end.

    Usage:
        recorder = SampleRecorder()
        recorder.start()
        recorder.record_continuous_start(0.5, 0.5)
        recorder.record_continuous_update(0.8, 0.6)
        recorder.record_continuous_end()
        recording = recorder.stop()
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        """
        Args:
            clock: Returns the current time in seconds
        """
        self._clock = clock
        self._start_time = 0.0
        self._samples: list[RawSample] = []
        self._recording = False
        self._continuous_active = False

    @property
    def is_recording(self) -> bool:
        return self._recording

    @property
    def continuous_active(self) -> bool:
        return self._continuous_active

    @property
    def samples(self) -> list[RawSample]:
        """Copy of the samples recorded so far."""
        return list(self._samples)

    def elapsed_ms(self) -> float:
        """Milliseconds since start()."""
        return (self._clock() - self._start_time) * 1000

    def _append(self, kind: SampleKind, intensity: float, sharpness: float) -> None:
        self._samples.append(RawSample(kind, self.elapsed_ms(), intensity, sharpness))

    def start(self) -> None:
        """Begin a new recording, discarding any previous samples."""
        self._start_time = self._clock()
        self._samples = []
        self._continuous_active = False
        self._recording = True

    def record_transient(self, intensity: float, sharpness: float) -> None:
        if not self._recording:
            return
        self._append(SampleKind.TRANSIENT, intensity, sharpness)

    def record_continuous_start(self, intensity: float, sharpness: float) -> None:
        if not self._recording:
            return
        self._continuous_active = True
        self._append(SampleKind.CONTINUOUS_START, intensity, sharpness)

    def record_continuous_update(self, intensity: float, sharpness: float) -> None:
        if not self._recording or not self._continuous_active:
            return
        self._append(SampleKind.CONTINUOUS_UPDATE, intensity, sharpness)

    def record_continuous_end(self) -> None:
        if not self._recording or not self._continuous_active:
            return
        self._append(SampleKind.CONTINUOUS_END, 0.0, 0.0)
        self._continuous_active = False

    def stop(self) -> Recording:
        """
        Finish the recording.

        An open continuous session is closed at the stop time.

        Returns:
            Recording with the samples, reconstructed pattern and length
        """
        if self._continuous_active:
            self._append(SampleKind.CONTINUOUS_END, 0.0, 0.0)
            self._continuous_active = False

        duration_ms = self.elapsed_ms()
        self._recording = False
        samples = list(self._samples)

        logger.debug("Recording stopped after %.1fms with %d samples", duration_ms, len(samples))
        return Recording(
            samples=samples,
            pattern=reconstruct(samples),
            duration_ms=duration_ms,
        )
