"""
Fade envelopes for continuous events.

The pattern editor describes a continuous event's envelope with a fade-in
and a fade-out rather than raw control points. This module turns that
description into an intensity Curve the actuator can play.
"""

from dataclasses import dataclass

from .types import (
    ContinuousEvent,
    ControlPoint,
    Curve,
    ParameterKind,
    make_parameters,
)


@dataclass(frozen=True)
class FadedContinuousEvent:
    """
    Continuous event with a fade-in/fade-out envelope.

    Fades are described relative to the event's own intensity:
    - Fade in: Ramp from fade_in_level * intensity up to intensity
    - Sustain: Hold at intensity
    - Fade out: Ramp from intensity down to fade_out_level * intensity

    A fade with a duration of 0 is disabled. All times are in ms.

    Example:
        # Swell in over 200ms, then cut off sharply
        FadedContinuousEvent(0, 1000, intensity=0.8, sharpness=0.5,
                             fade_in_level=0.0, fade_in_ms=200)
    """
    relative_time: float
    duration: float
    intensity: float = 1.0
    sharpness: float = 0.5
    fade_in_level: float = 0.0
    fade_in_ms: float = 0.0
    fade_out_level: float = 0.0
    fade_out_ms: float = 0.0

    @property
    def has_fade_in(self) -> bool:
        return self.fade_in_ms > 0

    @property
    def has_fade_out(self) -> bool:
        return self.fade_out_ms > 0

    def to_event(self) -> ContinuousEvent:
        """The plain continuous event carrying the base parameters."""
        return ContinuousEvent(
            relative_time=self.relative_time,
            duration=self.duration,
            parameters=make_parameters(self.intensity, self.sharpness),
        )


def synthesize_envelope(event: FadedContinuousEvent) -> Curve | None:
    """
    Build the intensity curve for a faded continuous event.

    Points are emitted in time order by construction:
    start, end of fade-in, start of fade-out (only when a flat sustain
    region exists), end of fade-out. Fade lengths are clamped to the
    event duration, so no point falls outside [0, duration].

    Args:
        event: The event and its fade parameters

    Returns:
        Intensity curve starting at the event's start, or None when
        neither fade is enabled.
    """
    if not event.has_fade_in and not event.has_fade_out:
        return None

    duration = max(event.duration, 0.0)
    intensity = event.intensity
    points: list[ControlPoint] = []

    # Fade in: start low, reach full intensity once the ramp completes
    fade_in_end = 0.0
    if event.has_fade_in:
        fade_in_end = min(event.fade_in_ms, duration)
        points.append(ControlPoint(0.0, event.fade_in_level * intensity))
        points.append(ControlPoint(fade_in_end, intensity))
    else:
        points.append(ControlPoint(0.0, intensity))

    fade_out_start = duration
    if event.has_fade_out:
        fade_out_start = max(duration - event.fade_out_ms, 0.0)

    # Sustain point only when fades leave a flat region between them
    if fade_in_end < fade_out_start:
        points.append(ControlPoint(fade_out_start, intensity))

    if event.has_fade_out:
        points.append(ControlPoint(duration, event.fade_out_level * intensity))

    return Curve(
        kind=ParameterKind.INTENSITY,
        relative_time=event.relative_time,
        control_points=points,
    )
