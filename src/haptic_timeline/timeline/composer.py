"""
Composer surface for hand-built patterns.

The pattern editor works in seconds with fade-described continuous events.
This module holds its event types and converts them into the millisecond
Pattern the rest of the engine uses.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Iterable, Union

from .core.envelope import FadedContinuousEvent, synthesize_envelope
from .core.types import (
    ContinuousEvent,
    Curve,
    Event,
    Pattern,
    TransientEvent,
    make_parameters,
)

# Playback tail after a transient, in seconds
TRANSIENT_TAIL = 0.1


def _new_id() -> str:
    return uuid.uuid4().hex


@dataclass
class ComposerTransient:
    """A transient placed on the composer timeline (times in seconds)."""
    start_time: float = 0.0
    intensity: float = 0.5
    sharpness: float = 0.5
    id: str = field(default_factory=_new_id)

    kind = "transient"


@dataclass
class ComposerContinuous:
    """
    A continuous event placed on the composer timeline (times in seconds).

    Attributes:
        fade_in_intensity: Starting level of the fade-in, relative to intensity
        fade_in_duration: Seconds to ramp up to full intensity (0 = no fade)
        fade_out_intensity: Final level of the fade-out, relative to intensity
        fade_out_duration: Seconds to ramp down at the end (0 = no fade)
    """
    start_time: float = 0.0
    duration: float = 0.5
    intensity: float = 0.5
    sharpness: float = 0.5
    fade_in_intensity: float = 0.0
    fade_in_duration: float = 0.0
    fade_out_intensity: float = 0.0
    fade_out_duration: float = 0.0
    id: str = field(default_factory=_new_id)

    kind = "continuous"


ComposerEvent = Union[ComposerTransient, ComposerContinuous]


def new_transient(start_time: float = 0.0) -> ComposerTransient:
    """Create a transient with editor defaults."""
    return ComposerTransient(start_time=start_time)


def new_continuous(start_time: float = 0.0) -> ComposerContinuous:
    """Create a half-second continuous event with editor defaults and no fades."""
    return ComposerContinuous(start_time=start_time)


def to_faded_event(event: ComposerContinuous) -> FadedContinuousEvent:
    """Convert a composer continuous event to milliseconds."""
    return FadedContinuousEvent(
        relative_time=event.start_time * 1000,
        duration=event.duration * 1000,
        intensity=event.intensity,
        sharpness=event.sharpness,
        fade_in_level=event.fade_in_intensity,
        fade_in_ms=event.fade_in_duration * 1000,
        fade_out_level=event.fade_out_intensity,
        fade_out_ms=event.fade_out_duration * 1000,
    )


def to_haptic_event(event: ComposerEvent) -> Event:
    """Convert a composer event to a haptic event (seconds -> ms)."""
    if isinstance(event, ComposerTransient):
        return TransientEvent(
            relative_time=event.start_time * 1000,
            parameters=make_parameters(event.intensity, event.sharpness),
        )
    return ContinuousEvent(
        relative_time=event.start_time * 1000,
        duration=event.duration * 1000,
        parameters=make_parameters(event.intensity, event.sharpness),
    )


def compose_curves(events: Iterable[ComposerEvent]) -> list[Curve]:
    """Build fade curves for every continuous event that has a fade."""
    curves = []
    for event in events:
        if not isinstance(event, ComposerContinuous):
            continue
        curve = synthesize_envelope(to_faded_event(event))
        if curve is not None:
            curves.append(curve)
    return curves


def compose(events: Iterable[ComposerEvent]) -> Pattern:
    """Build a playable Pattern from composer events."""
    events = list(events)
    return Pattern(
        events=[to_haptic_event(e) for e in events],
        curves=compose_curves(events),
    )


def composition_duration(
    events: Iterable[ComposerEvent],
    transient_tail: float = TRANSIENT_TAIL,
) -> float:
    """
    Playback length of a composition in seconds.

    Transients get a short tail so their pulse is not cut off.
    """
    duration = 0.0
    for event in events:
        if isinstance(event, ComposerContinuous):
            end = event.start_time + event.duration
        else:
            end = event.start_time + transient_tail
        duration = max(duration, end)
    return duration
