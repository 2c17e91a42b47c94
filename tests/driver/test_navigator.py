"""Tests for Navigator — the ChangingTarget / Moving decision machine."""

from __future__ import annotations

from pod_racer.driver.commands import Command
from pod_racer.driver.navigator import Navigator
from pod_racer.driver.state import ChangingTarget, Moving
from pod_racer.telemetry.models import TelemetryFrame
from pod_racer.track.checkpoint_map import CheckpointMap
from pod_racer.track.models import Point, Target

A = Point(0, 0)
B = Point(3000, 0)
C = Point(3000, 3000)


def _make_frame(x, y, cp, dist=5000.0, angle=0.0, **kwargs) -> TelemetryFrame:
    defaults = dict(
        x=float(x),
        y=float(y),
        checkpoint_x=float(cp.x),
        checkpoint_y=float(cp.y),
        checkpoint_dist=float(dist),
        checkpoint_angle=float(angle),
        opponent_x=0.0,
        opponent_y=0.0,
    )
    defaults.update(kwargs)
    return TelemetryFrame(**defaults)


def _mapped_map() -> CheckpointMap:
    m = CheckpointMap()
    for p in (A, B, C, A):
        m.add(p)
    return m


# ---------------------------------------------------------------------------
# ChangingTarget
# ---------------------------------------------------------------------------


def test_first_tick_commits_to_reported_checkpoint():
    nav = Navigator()
    assert isinstance(nav.state, ChangingTarget)

    cmd = nav.step(_make_frame(5000, 5000, A))

    assert cmd == Command(target=A, thrust="100")
    assert nav.state == Moving(Target(A))
    assert nav.checkpoints.checkpoints == [A]


def test_commit_after_mapping_uses_tuned_point_and_skips_learning():
    m = _mapped_map()
    m.current_checkpoint = 2
    nav = Navigator(checkpoints=m)

    cmd = nav.step(_make_frame(2900, 3000, Point(9999, 9999)))

    assert m.checkpoints == [A, B, C]
    assert m.current_checkpoint == 0
    assert cmd.target == Point(350, 350)
    assert nav.state == Moving(Target(A, tuned=Point(350, 350)))


def test_commit_never_repeats_boost_token():
    nav = Navigator()
    nav.pod.is_boosting = True
    cmd = nav.step(_make_frame(5000, 5000, A))
    assert cmd.thrust == "100"


# ---------------------------------------------------------------------------
# Moving
# ---------------------------------------------------------------------------


def test_moving_far_from_target_keeps_state():
    nav = Navigator()
    nav.step(_make_frame(5000, 5000, A))
    cmd = nav.step(_make_frame(4000, 4000, A, dist=5657))

    assert cmd.target == A
    assert cmd.thrust == "100"
    assert isinstance(nav.state, Moving)


def test_switch_radius_changes_state_for_next_tick_only():
    nav = Navigator()
    nav.step(_make_frame(5000, 5000, A))
    cmd = nav.step(_make_frame(300, 0, A, dist=300))

    assert cmd.target == A  # this tick still aims at the old target
    assert isinstance(nav.state, ChangingTarget)

    cmd = nav.step(_make_frame(350, 0, B, dist=2650))
    assert cmd.target == B
    assert nav.state == Moving(Target(B))


def test_looks_past_target_when_aligned_and_close():
    m = _mapped_map()
    nav = Navigator(checkpoints=m)
    nav.move_to(m.current_target())

    cmd = nav.step(_make_frame(1000, 1000, A, angle=2))

    assert cmd.target == B
    assert isinstance(nav.state, Moving)


def test_no_look_ahead_when_heading_is_off():
    m = _mapped_map()
    nav = Navigator(checkpoints=m)
    nav.move_to(m.current_target())

    cmd = nav.step(_make_frame(1000, 1000, A, angle=-10))

    assert cmd.target == Point(350, 350)


def test_no_look_ahead_before_lap_is_mapped():
    nav = Navigator()
    nav.step(_make_frame(5000, 5000, A))
    cmd = nav.step(_make_frame(1000, 1000, A, angle=0))
    assert cmd.target == A


def test_projected_overshoot_arms_coasting():
    nav = Navigator()
    nav.step(_make_frame(10000, 0, A, dist=1000))  # commit; pod remembers dist 1000
    cmd = nav.step(_make_frame(9600, 0, A, dist=600))  # velocity 400 -> 1000 <= 1200

    assert cmd.thrust == "100"  # coasting starts on the following tick
    assert nav.pod.ticks_to_skip == 3

    cmd = nav.step(_make_frame(9200, 0, A, dist=200))
    assert cmd.thrust == "0"


def test_boost_emitted_once_over_a_long_straight():
    nav = Navigator()
    target = Point(20000, 0)
    tokens = [
        nav.step(_make_frame(x, 0, target, dist=20000 - x, angle=0)).thrust
        for x in range(0, 3000, 100)
    ]
    assert tokens.count("BOOST") == 1
    assert tokens[1] == "BOOST"
    assert nav.pod.boosts_used == 1


def test_tick_values_are_stored_for_next_tick():
    nav = Navigator()
    nav.step(_make_frame(5000, 5000, A, dist=7071, angle=-33))
    assert nav.pod.angle == -33
    assert nav.pod.distance_to_next == 7071


def test_opponent_position_does_not_affect_decisions():
    frames_a = [_make_frame(5000, 5000, A), _make_frame(4000, 4000, A, dist=5657)]
    frames_b = [
        _make_frame(5000, 5000, A, opponent_x=1.0, opponent_y=2.0),
        _make_frame(4000, 4000, A, dist=5657, opponent_x=4000.0, opponent_y=4000.0),
    ]
    nav_a, nav_b = Navigator(), Navigator()
    assert [nav_a.step(f) for f in frames_a] == [nav_b.step(f) for f in frames_b]


# ---------------------------------------------------------------------------
# Full lap
# ---------------------------------------------------------------------------


def test_full_lap_learns_map_then_cuts_corners():
    nav = Navigator()
    ticks = [
        (_make_frame(5000, 5000, A), A),
        (_make_frame(100, 0, A, dist=100), A),
        (_make_frame(200, 0, B, dist=2800), B),
        (_make_frame(2900, 0, B, dist=100), B),
        (_make_frame(3000, 100, C, dist=2900), C),
        (_make_frame(3000, 2900, C, dist=100), C),
        (_make_frame(2900, 3000, A, dist=4100), Point(350, 350)),  # loop closes
        (_make_frame(1000, 1000, A, dist=1414, angle=0), B),        # look-ahead
    ]
    for frame, expected in ticks:
        assert nav.step(frame).target == expected

    assert nav.checkpoints.all_mapped is True
    assert nav.checkpoints.checkpoints == [A, B, C]
    assert len(nav.checkpoints.tuned_checkpoints) == 3


# ---------------------------------------------------------------------------
# Performance
# ---------------------------------------------------------------------------


def test_step_performance(benchmark):
    nav = Navigator(checkpoints=_mapped_map())
    frame = _make_frame(1000, 1000, A, dist=1414, angle=1)
    result = benchmark(nav.step, frame)
    assert isinstance(result, Command)
