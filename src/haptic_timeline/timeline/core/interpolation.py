"""Linear interpolation over curve control points."""

from typing import Sequence

from .types import MATCH_TOLERANCE_MS, ControlPoint


def interpolate_between(p1: ControlPoint, p2: ControlPoint, time: float) -> float:
    """
    Linearly interpolate the value at time between two points.

    Points sharing the same time have no slope; the later point's value is
    used instead of dividing by zero.
    """
    span = p2.relative_time - p1.relative_time
    if span == 0:
        return p2.value
    ratio = (time - p1.relative_time) / span
    return p1.value + ratio * (p2.value - p1.value)


def value_at(
    points: Sequence[ControlPoint],
    time: float,
    default: float,
    tolerance_ms: float = MATCH_TOLERANCE_MS,
) -> float:
    """
    Evaluate a control point list at a local time.

    Args:
        points: Control points ordered by time
        time: Query time on the curve's local axis
        default: Value used when there are no points
        tolerance_ms: A point this close to time is returned verbatim

    Returns:
        The exact point value on a match, the interpolated value inside the
        first bracketing pair, otherwise the nearest boundary point's value.
    """
    if not points:
        return default

    for point in points:
        if abs(point.relative_time - time) < tolerance_ms:
            return point.value

    for p1, p2 in zip(points, points[1:]):
        if p1.relative_time <= time <= p2.relative_time:
            return interpolate_between(p1, p2, time)

    if time < points[0].relative_time:
        return points[0].value
    return points[-1].value
