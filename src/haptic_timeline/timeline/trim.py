"""
Seek trimming for resumed playback.

trim(pattern, seek_ms) answers "what does this pattern look like if it
starts playing at seek_ms right now": everything already finished is
dropped, everything still to come is shifted so the result starts at 0,
and events/curves cut by the seek point are re-sliced with interpolated
boundary values.

Trimming is lossy and one-directional. Successive trims compose:
trim(trim(p, a), b) == trim(p, a + b).
"""

import logging

from .core.interpolation import interpolate_between
from .core.types import (
    MATCH_TOLERANCE_MS,
    ContinuousEvent,
    ControlPoint,
    Curve,
    Event,
    Pattern,
    TransientEvent,
)

logger = logging.getLogger(__name__)


def trim_event(event: Event, seek_ms: float) -> Event | None:
    """
    Trim a single event to start at seek_ms.

    Returns None when the event is entirely in the past.
    """
    if isinstance(event, TransientEvent):
        if event.relative_time < seek_ms:
            return None
        return event.shift(seek_ms)

    if isinstance(event, ContinuousEvent):
        if event.end_time <= seek_ms:
            return None
        if event.relative_time >= seek_ms:
            return event.shift(seek_ms)
        # Spans the seek point: keep the remaining tail
        return ContinuousEvent(
            relative_time=0.0,
            duration=event.end_time - seek_ms,
            parameters=event.parameters,
        )

    raise TypeError(f"Unknown event type: {type(event).__name__}")


def trim_curve(
    curve: Curve,
    seek_ms: float,
    owner_end: float | None = None,
) -> Curve | None:
    """
    Trim a single curve to start at seek_ms.

    Args:
        curve: Curve to trim
        seek_ms: Seek position in absolute pattern time
        owner_end: End time of the continuous event the curve belongs to,
            if any. An owned curve lasts as long as its event; when every
            point is already past, its last value is held as a single point.

    Returns:
        The trimmed curve, or None when nothing of it remains.
    """
    end = curve.end_time
    if owner_end is not None:
        end = max(end, owner_end)

    if end <= seek_ms:
        return None

    if curve.relative_time >= seek_ms:
        return curve.shift(seek_ms)

    seek_offset = seek_ms - curve.relative_time
    kept: list[ControlPoint] = []
    prev: ControlPoint | None = None

    for point in curve.control_points:
        if point.relative_time < seek_offset:
            prev = point
            continue
        if not kept and point.relative_time != seek_offset:
            # First surviving point is late: synthesize the t=0 value
            if prev is not None:
                value = interpolate_between(prev, point, seek_offset)
            else:
                value = point.value
            kept.append(ControlPoint(0.0, value))
        kept.append(point.shift(seek_offset))

    if not kept:
        if owner_end is not None and curve.control_points:
            last = curve.control_points[-1]
            return Curve(curve.kind, 0.0, [ControlPoint(0.0, last.value)])
        logger.debug("Dropping %s curve at %s: no points after seek",
                     curve.kind.value, curve.relative_time)
        return None

    return Curve(curve.kind, 0.0, kept)


def trim(
    pattern: Pattern,
    seek_ms: float,
    *,
    tolerance_ms: float = MATCH_TOLERANCE_MS,
) -> Pattern:
    """
    Re-slice a pattern so playback can resume at seek_ms.

    Args:
        pattern: The full pattern
        seek_ms: Seek position in ms; values <= 0 return the pattern as-is
        tolerance_ms: Start-time slack used to find a curve's owning event

    Returns:
        New Pattern whose local time axis starts at the seek position
    """
    if seek_ms <= 0:
        return pattern

    events = []
    for event in pattern.events:
        trimmed = trim_event(event, seek_ms)
        if trimmed is not None:
            events.append(trimmed)

    curves = []
    for curve in pattern.curves:
        owner = pattern.owner_of(curve, tolerance_ms)
        trimmed_curve = trim_curve(
            curve,
            seek_ms,
            owner_end=owner.end_time if owner is not None else None,
        )
        if trimmed_curve is not None:
            curves.append(trimmed_curve)

    logger.debug("Trimmed at %sms: %d/%d events, %d/%d curves kept",
                 seek_ms, len(events), len(pattern.events), len(curves), len(pattern.curves))
    return Pattern(events=events, curves=curves)


def drop_insignificant_curves(pattern: Pattern) -> Pattern:
    """Return the pattern without curves of fewer than two points."""
    return Pattern(
        events=pattern.events,
        curves=[c for c in pattern.curves if c.is_significant],
    )
