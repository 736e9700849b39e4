"""
Reconstruct haptic patterns from live capture samples.

A recording is a flat, time-ordered stream of RawSamples. Transients map
one-to-one onto TransientEvents; every continuous_start ... continuous_end
session becomes a ContinuousEvent plus intensity/sharpness curves built from
the start and update samples inside the session.

The pass is a two-state machine:

    Idle --continuous_start--> RecordingContinuous(start_index)
    RecordingContinuous --continuous_end--> Idle   (emits the session)

Updates and ends seen while Idle have nothing to attach to and are ignored.
"""

import logging
from dataclasses import dataclass
from typing import Sequence, Union

from .core.types import (
    ContinuousEvent,
    ControlPoint,
    Curve,
    Event,
    ParameterKind,
    Pattern,
    RawSample,
    SampleKind,
    TransientEvent,
    make_parameters,
)

logger = logging.getLogger(__name__)

_SESSION_KINDS = (SampleKind.CONTINUOUS_START, SampleKind.CONTINUOUS_UPDATE)


@dataclass(frozen=True)
class Idle:
    """No continuous session is open."""


@dataclass(frozen=True)
class RecordingContinuous:
    """A continuous session opened by the sample at start_index."""
    start_index: int


CaptureState = Union[Idle, RecordingContinuous]


def _close_session(
    samples: Sequence[RawSample],
    start_index: int,
    end_index: int,
) -> tuple[ContinuousEvent, list[Curve]]:
    """Build the event and curves for samples[start_index..end_index]."""
    start = samples[start_index]
    end = samples[end_index]

    event = ContinuousEvent(
        relative_time=start.timestamp,
        duration=end.timestamp - start.timestamp,
        parameters=make_parameters(start.intensity, start.sharpness),
    )

    # Re-walk the session so the start sample is always the first point
    intensity_points: list[ControlPoint] = []
    sharpness_points: list[ControlPoint] = []
    for sample in samples[start_index:end_index + 1]:
        if sample.kind not in _SESSION_KINDS:
            continue
        local_time = sample.timestamp - start.timestamp
        intensity_points.append(ControlPoint(local_time, sample.intensity))
        sharpness_points.append(ControlPoint(local_time, sample.sharpness))

    # A lone start point repeats the base parameters, so it is not a curve
    curves = []
    if len(intensity_points) > 1:
        curves.append(Curve(ParameterKind.INTENSITY, start.timestamp, intensity_points))
    if len(sharpness_points) > 1:
        curves.append(Curve(ParameterKind.SHARPNESS, start.timestamp, sharpness_points))

    return event, curves


def reconstruct(samples: Sequence[RawSample]) -> Pattern:
    """
    Rebuild a Pattern from a capture sample stream.

    Events appear in the order their defining sample was seen: transients
    at their own sample, continuous events at their closing sample. The
    stream is assumed to be time-ordered already and is never sorted.

    Args:
        samples: Time-ordered capture samples

    Returns:
        Pattern with the reconstructed events and curves
    """
    events: list[Event] = []
    curves: list[Curve] = []
    state: CaptureState = Idle()

    for index, sample in enumerate(samples):
        if sample.kind is SampleKind.TRANSIENT:
            events.append(TransientEvent(
                relative_time=sample.timestamp,
                parameters=make_parameters(sample.intensity, sample.sharpness),
            ))

        elif sample.kind is SampleKind.CONTINUOUS_START:
            if isinstance(state, RecordingContinuous):
                logger.debug(
                    "continuous_start at %s reopens session started at sample %d",
                    sample.timestamp, state.start_index,
                )
            state = RecordingContinuous(start_index=index)

        elif sample.kind is SampleKind.CONTINUOUS_UPDATE:
            if isinstance(state, Idle):
                logger.debug("Ignoring continuous_update at %s with no open session", sample.timestamp)

        elif sample.kind is SampleKind.CONTINUOUS_END:
            if isinstance(state, RecordingContinuous):
                event, session_curves = _close_session(samples, state.start_index, index)
                events.append(event)
                curves.extend(session_curves)
                state = Idle()
            else:
                logger.debug("Ignoring continuous_end at %s with no open session", sample.timestamp)

    if isinstance(state, RecordingContinuous):
        logger.debug("Capture ended with an unclosed session at sample %d", state.start_index)

    logger.debug("Reconstructed %d events and %d curves from %d samples",
                 len(events), len(curves), len(samples))
    return Pattern(events=events, curves=curves)
