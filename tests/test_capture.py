"""
Capture reconstruction tests.

Run with: pytest tests/test_capture.py -v
"""

from haptic_timeline.timeline import (
    ContinuousEvent,
    ControlPoint,
    Curve,
    ParameterKind,
    RawSample,
    SampleKind,
    TransientEvent,
    make_parameters,
    reconstruct,
)

START = SampleKind.CONTINUOUS_START
UPDATE = SampleKind.CONTINUOUS_UPDATE
END = SampleKind.CONTINUOUS_END
TRANSIENT = SampleKind.TRANSIENT


def scenario_samples():
    return [
        RawSample(START, 0, 0.5, 0.5),
        RawSample(UPDATE, 200, 0.8, 0.6),
        RawSample(END, 500, 0.0, 0.0),
    ]


class TestReconstructScenario:
    """The reference start/update/end recording"""

    def test_single_continuous_event(self):
        """One session becomes one continuous event with start parameters"""
        pattern = reconstruct(scenario_samples())
        assert pattern.events == (
            ContinuousEvent(0, 500, make_parameters(0.5, 0.5)),
        )

    def test_intensity_and_sharpness_curves(self):
        """Start and update samples become curve points"""
        pattern = reconstruct(scenario_samples())
        assert pattern.curves == (
            Curve(ParameterKind.INTENSITY, 0, [ControlPoint(0, 0.5), ControlPoint(200, 0.8)]),
            Curve(ParameterKind.SHARPNESS, 0, [ControlPoint(0, 0.5), ControlPoint(200, 0.6)]),
        )


class TestReconstructSessions:
    """Continuous session handling"""

    def test_three_updates_give_four_points(self):
        """Start plus three updates yields 4-point curves"""
        samples = [
            RawSample(START, 100, 0.2, 0.3),
            RawSample(UPDATE, 150, 0.4, 0.3),
            RawSample(UPDATE, 200, 0.6, 0.4),
            RawSample(UPDATE, 250, 0.8, 0.5),
            RawSample(END, 300),
        ]
        pattern = reconstruct(samples)

        assert len(pattern.events) == 1
        assert isinstance(pattern.events[0], ContinuousEvent)
        assert len(pattern.curves) <= 2
        for curve in pattern.curves:
            assert curve.relative_time == 100
            assert len(curve.control_points) == 4
        intensity = pattern.curves[0]
        assert [p.relative_time for p in intensity.control_points] == [0, 50, 100, 150]

    def test_session_without_updates_has_no_curves(self):
        """A lone start point carries no modulation"""
        samples = [RawSample(START, 10, 0.7, 0.2), RawSample(END, 60)]
        pattern = reconstruct(samples)
        assert pattern.events == (ContinuousEvent(10, 50, make_parameters(0.7, 0.2)),)
        assert pattern.curves == ()

    def test_transient_inside_session_not_a_curve_point(self):
        """Transients during a session are events, not control points"""
        samples = [
            RawSample(START, 0, 0.5, 0.5),
            RawSample(TRANSIENT, 50, 1.0, 0.9),
            RawSample(UPDATE, 100, 0.7, 0.5),
            RawSample(END, 200),
        ]
        pattern = reconstruct(samples)
        intensity = pattern.curves[0]
        assert [p.relative_time for p in intensity.control_points] == [0, 100]

    def test_events_ordered_by_close_time(self):
        """A continuous event is appended when its session closes"""
        samples = [
            RawSample(START, 0, 0.5, 0.5),
            RawSample(TRANSIENT, 50, 1.0, 0.9),
            RawSample(END, 200),
            RawSample(TRANSIENT, 300, 0.4, 0.1),
        ]
        pattern = reconstruct(samples)
        kinds = [(e.kind, e.relative_time) for e in pattern.events]
        assert kinds == [("transient", 50), ("continuous", 0), ("transient", 300)]

    def test_restart_reopens_session(self):
        """A second start while recording restarts the session"""
        samples = [
            RawSample(START, 0, 0.1, 0.1),
            RawSample(START, 100, 0.9, 0.8),
            RawSample(END, 300),
        ]
        pattern = reconstruct(samples)
        assert pattern.events == (ContinuousEvent(100, 200, make_parameters(0.9, 0.8)),)

    def test_multiple_sessions(self):
        """Sequential sessions each produce their own event and curves"""
        samples = [
            RawSample(START, 0, 0.5, 0.5),
            RawSample(UPDATE, 50, 0.6, 0.5),
            RawSample(END, 100),
            RawSample(START, 200, 0.3, 0.3),
            RawSample(UPDATE, 260, 0.1, 0.2),
            RawSample(END, 400),
        ]
        pattern = reconstruct(samples)
        assert [e.relative_time for e in pattern.events] == [0, 200]
        assert [c.relative_time for c in pattern.curves] == [0, 0, 200, 200]


class TestReconstructTransients:
    """Transient samples"""

    def test_transients_map_directly(self):
        """Each transient sample becomes a transient event"""
        samples = [RawSample(TRANSIENT, 10, 0.9, 0.1), RawSample(TRANSIENT, 40, 0.3, 0.7)]
        pattern = reconstruct(samples)
        assert pattern.events == (
            TransientEvent(10, make_parameters(0.9, 0.1)),
            TransientEvent(40, make_parameters(0.3, 0.7)),
        )
        assert pattern.curves == ()


class TestReconstructDegenerate:
    """Orphan samples and empty input"""

    def test_empty_stream(self):
        """No samples give an empty pattern"""
        pattern = reconstruct([])
        assert pattern.is_empty

    def test_orphan_update_ignored(self):
        """An update with no open session produces nothing"""
        samples = [RawSample(UPDATE, 0, 0.5, 0.5), RawSample(TRANSIENT, 10, 1.0, 0.5)]
        pattern = reconstruct(samples)
        assert pattern.events == (TransientEvent(10, make_parameters(1.0, 0.5)),)

    def test_orphan_end_ignored(self):
        """An end with no open session produces nothing"""
        samples = [RawSample(END, 100), RawSample(START, 200, 0.5, 0.5), RawSample(END, 300)]
        pattern = reconstruct(samples)
        assert pattern.events == (ContinuousEvent(200, 100, make_parameters(0.5, 0.5)),)

    def test_unclosed_session_dropped(self):
        """A session never closed produces no event"""
        samples = [RawSample(START, 0, 0.5, 0.5), RawSample(UPDATE, 100, 0.6, 0.5)]
        assert reconstruct(samples).is_empty

    def test_input_not_mutated(self):
        """The sample list is left as it was"""
        samples = scenario_samples()
        before = list(samples)
        reconstruct(samples)
        assert samples == before
