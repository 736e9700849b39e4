"""
Core data structures for the haptic timeline.

This module contains the value types every other part of the engine works on:
- Parameter: A named intensity/sharpness value attached to an event
- TransientEvent / ContinuousEvent: The two kinds of haptic event
- ControlPoint / Curve: Envelope points modulating a parameter over time
- Pattern: The exchanged unit, a set of events plus curves
- RawSample: One entry of a live capture stream

All times are in milliseconds. Every type is a frozen dataclass; sequences
are stored as tuples so transformations always build new objects.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union


# Curves are matched to continuous events by start time within this slack.
MATCH_TOLERANCE_MS = 1.0

DEFAULT_INTENSITY = 1.0
DEFAULT_SHARPNESS = 0.5


class ParameterKind(Enum):
    """Haptic parameters an event or curve can carry."""

    INTENSITY = "intensity"
    SHARPNESS = "sharpness"


class SampleKind(Enum):
    """Kinds of samples produced by a live capture session."""

    TRANSIENT = "transient"
    CONTINUOUS_START = "continuous_start"
    CONTINUOUS_UPDATE = "continuous_update"
    CONTINUOUS_END = "continuous_end"


@dataclass(frozen=True)
class Parameter:
    """A single haptic parameter value (0.0-1.0)."""
    kind: ParameterKind
    value: float


def parameter_value(
    parameters: Iterable[Parameter],
    kind: ParameterKind,
) -> float:
    """
    Look up a parameter by kind.

    The first matching parameter wins. Missing intensity reads as 1.0 and
    missing sharpness as 0.5.
    """
    for param in parameters:
        if param.kind is kind:
            return param.value
    if kind is ParameterKind.INTENSITY:
        return DEFAULT_INTENSITY
    return DEFAULT_SHARPNESS


def make_parameters(intensity: float, sharpness: float) -> tuple[Parameter, ...]:
    """Build the canonical [intensity, sharpness] parameter list."""
    return (
        Parameter(ParameterKind.INTENSITY, intensity),
        Parameter(ParameterKind.SHARPNESS, sharpness),
    )


@dataclass(frozen=True)
class TransientEvent:
    """
    An instantaneous haptic pulse.

    Attributes:
        relative_time: Start time in ms from pattern start
        parameters: Intensity/sharpness of the pulse
    """
    relative_time: float
    parameters: tuple[Parameter, ...] = ()

    kind = "transient"

    def __post_init__(self):
        object.__setattr__(self, 'parameters', tuple(self.parameters))

    @property
    def end_time(self) -> float:
        return self.relative_time

    @property
    def intensity(self) -> float:
        return parameter_value(self.parameters, ParameterKind.INTENSITY)

    @property
    def sharpness(self) -> float:
        return parameter_value(self.parameters, ParameterKind.SHARPNESS)

    def shift(self, offset: float) -> "TransientEvent":
        """Return a copy moved earlier by offset ms."""
        return TransientEvent(self.relative_time - offset, self.parameters)


@dataclass(frozen=True)
class ContinuousEvent:
    """
    A sustained haptic pulse.

    The base intensity/sharpness come from parameters; an associated Curve
    starting at the same time may modulate them over the event's lifetime.

    Attributes:
        relative_time: Start time in ms from pattern start
        duration: Length in ms
        parameters: Base intensity/sharpness
    """
    relative_time: float
    duration: float
    parameters: tuple[Parameter, ...] = ()

    kind = "continuous"

    def __post_init__(self):
        object.__setattr__(self, 'parameters', tuple(self.parameters))

    @property
    def end_time(self) -> float:
        return self.relative_time + self.duration

    @property
    def intensity(self) -> float:
        return parameter_value(self.parameters, ParameterKind.INTENSITY)

    @property
    def sharpness(self) -> float:
        return parameter_value(self.parameters, ParameterKind.SHARPNESS)

    def shift(self, offset: float) -> "ContinuousEvent":
        """Return a copy moved earlier by offset ms."""
        return ContinuousEvent(self.relative_time - offset, self.duration, self.parameters)


Event = Union[TransientEvent, ContinuousEvent]


@dataclass(frozen=True)
class ControlPoint:
    """A curve point; relative_time is local to the curve's own start."""
    relative_time: float
    value: float

    def shift(self, offset: float) -> "ControlPoint":
        return ControlPoint(self.relative_time - offset, self.value)


@dataclass(frozen=True)
class Curve:
    """
    Envelope modulating one parameter of a continuous event.

    Control points are ordered by relative_time ascending. A curve with
    fewer than two points carries no modulation.

    Attributes:
        kind: Which parameter the curve drives
        relative_time: Absolute start in ms from pattern start
        control_points: Points on the curve's local time axis
    """
    kind: ParameterKind
    relative_time: float
    control_points: tuple[ControlPoint, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'control_points', tuple(self.control_points))

    @property
    def end_time(self) -> float:
        """Absolute time of the last control point."""
        if not self.control_points:
            return self.relative_time
        return self.relative_time + self.control_points[-1].relative_time

    @property
    def is_significant(self) -> bool:
        return len(self.control_points) >= 2

    def shift(self, offset: float) -> "Curve":
        """Return a copy moved earlier by offset ms (points untouched)."""
        return Curve(self.kind, self.relative_time - offset, self.control_points)


def starts_together(
    curve: Curve,
    event: Event,
    tolerance_ms: float = MATCH_TOLERANCE_MS,
) -> bool:
    """Check whether a curve belongs to a continuous event by start time."""
    if not isinstance(event, ContinuousEvent):
        return False
    return abs(curve.relative_time - event.relative_time) < tolerance_ms


@dataclass(frozen=True)
class Pattern:
    """
    A haptic pattern: events plus the curves modulating them.

    Events are kept in the order they were produced; curves are associated
    with continuous events by near-equal start time (see starts_together).
    """
    events: tuple[Event, ...] = ()
    curves: tuple[Curve, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'events', tuple(self.events))
        object.__setattr__(self, 'curves', tuple(self.curves))

    @property
    def is_empty(self) -> bool:
        return not self.events and not self.curves

    @property
    def duration(self) -> float:
        """Latest end time among all events and curves (0 when empty)."""
        ends = [e.end_time for e in self.events] + [c.end_time for c in self.curves]
        return max(ends, default=0.0)

    def curve_for(
        self,
        event: Event,
        kind: ParameterKind,
        tolerance_ms: float = MATCH_TOLERANCE_MS,
    ) -> Curve | None:
        """
        Find the curve of the given kind owned by an event.

        Returns the first curve whose start lies within tolerance_ms of a
        continuous event's start, or None. Transients never own curves.
        """
        for curve in self.curves:
            if curve.kind is kind and starts_together(curve, event, tolerance_ms):
                return curve
        return None

    def owner_of(
        self,
        curve: Curve,
        tolerance_ms: float = MATCH_TOLERANCE_MS,
    ) -> ContinuousEvent | None:
        """Find the first continuous event a curve belongs to, if any."""
        for event in self.events:
            if isinstance(event, ContinuousEvent) and starts_together(curve, event, tolerance_ms):
                return event
        return None


@dataclass(frozen=True)
class RawSample:
    """
    One sample of a live capture stream.

    Attributes:
        kind: What happened at this instant
        timestamp: ms since recording start
        intensity: Intensity at this instant (0.0-1.0)
        sharpness: Sharpness at this instant (0.0-1.0)
    """
    kind: SampleKind
    timestamp: float
    intensity: float = 0.0
    sharpness: float = 0.0

