import pytest

from cosmos_layout.constellation import (
    CONSTELLATION_PATTERNS,
    ConstellationKind,
    connections_for,
    kind_for,
    lit_segments,
    resolve_pattern,
    star_positions,
    vision_pattern,
)
from cosmos_layout.model import ConstellationPattern


def test_crux_all_completed():
    assert connections_for(4, [True, True, True, True]) == [(0, 3), (1, 2)]


def test_crux_filters_incomplete_phase():
    assert connections_for(4, [False, True, True, True]) == [(1, 2)]
    assert connections_for(4, [True, False, True, True]) == [(0, 3)]


def test_fallback_is_sequential_path():
    assert connections_for(6, [True] * 6) == [(0, 1), (1, 2), (2, 3), (3, 4), (4, 5)]
    assert connections_for(6, [True, True, False, True, True, True]) == [(0, 1), (3, 4), (4, 5)]


def test_big_dipper_lines():
    assert connections_for(7, [True] * 7) == [(0, 1), (1, 2), (2, 3), (3, 6), (6, 5), (5, 4), (4, 3)]


def test_missing_flags_degrade_silently():
    assert connections_for(4, [True]) == []
    assert connections_for(3, []) == []
    assert connections_for(0, []) == []
    assert connections_for(-2, [True]) == []
    assert connections_for(1, [True]) == []
    assert connections_for(4, None) == []
    assert connections_for(None, [True]) == []
    assert connections_for(4.5, [True] * 5) == []
    assert connections_for("4", [True] * 4) == []
    assert connections_for(True, [True]) == []


def test_invalid_phase_count_gives_empty_pattern():
    for count in (None, 4.5, "7", -3):
        pattern = resolve_pattern(count)
        assert pattern.points == ()
        assert pattern.connections == ()
        assert kind_for(count) is ConstellationKind.GENERIC
        assert star_positions(count, 50, 50) == []
        assert lit_segments(count, None, 50, 50) == []


def test_kind_dispatch():
    assert kind_for(3) is ConstellationKind.ORION_BELT
    assert kind_for(4) is ConstellationKind.CRUX
    assert kind_for(5) is ConstellationKind.CASSIOPEIA
    assert kind_for(7) is ConstellationKind.BIG_DIPPER
    assert kind_for(6) is ConstellationKind.GENERIC
    assert resolve_pattern(4) is CONSTELLATION_PATTERNS[4]


def test_table_points_within_range():
    for count, pattern in CONSTELLATION_PATTERNS.items():
        assert len(pattern.points) == count
        for x, y in pattern.points:
            assert -2.5 <= x <= 2.5
            assert -2.5 <= y <= 2.5
        for a, b in pattern.connections:
            assert a != b
            assert 0 <= a < count and 0 <= b < count


def test_generic_pattern_uses_unit_circle():
    pattern = resolve_pattern(6)
    assert pattern.name == "generic"
    assert pattern.points[0] == pytest.approx((0.0, -1.0))
    assert len(pattern.points) == 6


def test_star_positions_scale_around_planet():
    stars = star_positions(4, 40.0, 60.0)
    assert stars[0] == pytest.approx((40.0, 60.0 - 1.8 * 12))
    assert stars[3] == pytest.approx((40.0, 60.0 + 1.8 * 12))
    top, bottom = star_positions(2, 0, 0, scale=1)
    assert top == pytest.approx((0.0, -1.0))
    assert bottom == pytest.approx((0.0, 1.0))


def test_lit_segments_follow_completion():
    segments = lit_segments(3, [True, True, False], 0.0, 0.0, scale=1.0)
    assert len(segments) == 1
    assert segments[0].from_point == pytest.approx((-1.0, 1.0))
    assert segments[0].to_point == pytest.approx((0.0, 0.0))


def test_vision_patterns():
    assert vision_pattern(6).name == "hexagon"
    assert vision_pattern(3).connections == ((0, 1), (1, 2), (2, 0))
    circle = vision_pattern(9)
    assert circle.name == "circle"
    assert len(circle.connections) == 9
    assert circle.points[0] == pytest.approx((0.5, 0.1))
    assert vision_pattern(1).connections == ()
    assert vision_pattern(2).connections == ((0, 1),)
    assert vision_pattern(0).points == ()


def test_vision_override_wins():
    custom = ConstellationPattern(name="custom", points=((0.0, 0.0),), connections=())
    assert vision_pattern(5, override=custom) is custom
