"""
Expand patterns back into capture samples.

The inverse of capture.reconstruct, used to feed scrubber views with the
same flat sample stream a live recording produces. Continuous events are
re-sampled at every control point of their intensity and sharpness curves.
"""

from .core.interpolation import value_at
from .core.types import (
    MATCH_TOLERANCE_MS,
    ContinuousEvent,
    ParameterKind,
    Pattern,
    RawSample,
    SampleKind,
    TransientEvent,
)


def _update_times(*curves) -> list[float]:
    """Sorted, de-duplicated local point times > 0 across curves."""
    times = set()
    for curve in curves:
        if curve is None:
            continue
        times.update(p.relative_time for p in curve.control_points if p.relative_time > 0)
    return sorted(times)


def _expand_continuous(
    pattern: Pattern,
    event: ContinuousEvent,
    tolerance_ms: float,
) -> list[RawSample]:
    base_intensity = event.intensity
    base_sharpness = event.sharpness
    samples = [RawSample(
        SampleKind.CONTINUOUS_START,
        event.relative_time,
        base_intensity,
        base_sharpness,
    )]

    intensity_curve = pattern.curve_for(event, ParameterKind.INTENSITY, tolerance_ms)
    sharpness_curve = pattern.curve_for(event, ParameterKind.SHARPNESS, tolerance_ms)
    intensity_points = intensity_curve.control_points if intensity_curve else ()
    sharpness_points = sharpness_curve.control_points if sharpness_curve else ()

    for local_time in _update_times(intensity_curve, sharpness_curve):
        samples.append(RawSample(
            SampleKind.CONTINUOUS_UPDATE,
            event.relative_time + local_time,
            value_at(intensity_points, local_time, base_intensity, tolerance_ms),
            value_at(sharpness_points, local_time, base_sharpness, tolerance_ms),
        ))

    samples.append(RawSample(SampleKind.CONTINUOUS_END, event.end_time, 0.0, 0.0))
    return samples


def expand(
    pattern: Pattern,
    *,
    tolerance_ms: float = MATCH_TOLERANCE_MS,
) -> list[RawSample]:
    """
    Convert a pattern to a capture sample stream.

    Samples are emitted event by event in pattern order. This is not a
    strict round trip: curves without an owning continuous event are not
    represented.

    Args:
        pattern: Pattern to expand
        tolerance_ms: Start-time slack for matching curves to events, also
            used for exact control point matches

    Returns:
        List of RawSamples
    """
    samples: list[RawSample] = []
    for event in pattern.events:
        if isinstance(event, TransientEvent):
            samples.append(RawSample(
                SampleKind.TRANSIENT,
                event.relative_time,
                event.intensity,
                event.sharpness,
            ))
        elif isinstance(event, ContinuousEvent):
            samples.extend(_expand_continuous(pattern, event, tolerance_ms))
        else:
            raise TypeError(f"Unknown event type: {type(event).__name__}")
    return samples
