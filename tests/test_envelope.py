"""
Fade envelope synthesis tests.

Run with: pytest tests/test_envelope.py -v
"""

import pytest

from haptic_timeline.timeline import (
    ContinuousEvent,
    ControlPoint,
    FadedContinuousEvent,
    ParameterKind,
    synthesize_envelope,
)


def _points(curve):
    return [(p.relative_time, p.value) for p in curve.control_points]


class TestEnvelopeShape:
    """Control point layout for the different fade combinations"""

    def test_no_fades_returns_none(self):
        """Without fades the base intensity governs the whole event"""
        event = FadedContinuousEvent(0, 1000, intensity=0.8)
        assert synthesize_envelope(event) is None

    def test_fade_in_only(self):
        """Fade-in ramps up then holds until the end"""
        event = FadedContinuousEvent(250, 1000, intensity=0.8, fade_in_level=0.5, fade_in_ms=200)
        curve = synthesize_envelope(event)

        assert curve.kind is ParameterKind.INTENSITY
        assert curve.relative_time == 250
        assert _points(curve) == [(0.0, 0.4), (200, 0.8), (1000, 0.8)]

    def test_fade_out_only(self):
        """Fade-out starts flat then ramps down to the scaled end level"""
        event = FadedContinuousEvent(0, 1000, intensity=0.5, fade_out_level=0.5, fade_out_ms=400)
        curve = synthesize_envelope(event)
        assert _points(curve) == [(0.0, 0.5), (600, 0.5), (1000, 0.25)]

    def test_both_fades_with_sustain(self):
        """Both fades leave a flat sustain region between them"""
        event = FadedContinuousEvent(
            0, 1000, intensity=1.0,
            fade_in_level=0.0, fade_in_ms=100,
            fade_out_level=0.0, fade_out_ms=300,
        )
        curve = synthesize_envelope(event)
        assert _points(curve) == [(0.0, 0.0), (100, 1.0), (700, 1.0), (1000, 0.0)]

    def test_overlapping_fades_skip_sustain(self):
        """Fades that overlap emit no sustain point"""
        event = FadedContinuousEvent(
            0, 500, intensity=1.0,
            fade_in_ms=300, fade_out_ms=300,
        )
        curve = synthesize_envelope(event)
        assert _points(curve) == [(0.0, 0.0), (300, 1.0), (500, 0.0)]

    def test_fades_meeting_exactly_skip_sustain(self):
        """Fade-in ending where fade-out starts gives no duplicate point"""
        event = FadedContinuousEvent(0, 400, fade_in_ms=200, fade_out_ms=200)
        curve = synthesize_envelope(event)
        times = [p.relative_time for p in curve.control_points]
        assert times == [0.0, 200, 400]

    def test_fade_in_clamped_to_duration(self):
        """A fade longer than the event ends at the event's end"""
        event = FadedContinuousEvent(0, 300, intensity=0.6, fade_in_level=0.5, fade_in_ms=1000)
        curve = synthesize_envelope(event)
        assert _points(curve) == [(0.0, 0.3), (300, 0.6)]

    def test_points_are_time_ordered(self):
        """Construction order is already ascending"""
        event = FadedContinuousEvent(0, 800, fade_in_ms=100, fade_out_ms=200)
        times = [p.relative_time for p in synthesize_envelope(event).control_points]
        assert times == sorted(times)


class TestEnvelopeBounds:
    """Every point stays inside the event"""

    @pytest.mark.parametrize("duration", [0, 1, 250, 1000])
    @pytest.mark.parametrize("fade_in_ms", [0, 50, 500, 5000])
    @pytest.mark.parametrize("fade_out_ms", [0, 50, 500, 5000])
    def test_points_within_duration(self, duration, fade_in_ms, fade_out_ms):
        """Local times lie in [0, duration] for any fade lengths"""
        event = FadedContinuousEvent(
            100, duration,
            fade_in_level=0.2, fade_in_ms=fade_in_ms,
            fade_out_level=0.3, fade_out_ms=fade_out_ms,
        )
        curve = synthesize_envelope(event)
        if curve is None:
            assert fade_in_ms == 0 and fade_out_ms == 0
            return
        assert len(curve.control_points) >= 2
        for point in curve.control_points:
            assert 0 <= point.relative_time <= duration


class TestFadedEvent:
    """Conversion to the plain continuous event"""

    def test_to_event(self):
        """Base parameters become [intensity, sharpness]"""
        event = FadedContinuousEvent(120, 400, intensity=0.7, sharpness=0.2, fade_in_ms=50)
        plain = event.to_event()
        assert isinstance(plain, ContinuousEvent)
        assert plain.relative_time == 120
        assert plain.duration == 400
        assert plain.intensity == 0.7
        assert plain.sharpness == 0.2

    def test_zero_start_point_value(self):
        """Start point uses the bare intensity without a fade-in"""
        event = FadedContinuousEvent(0, 100, intensity=0.9, fade_out_ms=50)
        assert synthesize_envelope(event).control_points[0] == ControlPoint(0.0, 0.9)
