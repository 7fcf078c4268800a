import logging
import math

import pytest

from ampkit.path import Path, unwrap_path, unwrap_waypoints

TWO_PI = 2 * math.pi


def test_length_of_single_segment():
    assert Path([(0.0, 0.0), (3.0, 4.0)]).length() == pytest.approx(5.0)


def test_length_of_short_paths_is_zero():
    assert Path().length() == 0.0
    assert Path([(1.0, 1.0)]).length() == 0.0


def test_length_is_additive():
    pts = [(0.0, 0.0), (1.0, 2.0), (-3.0, 5.0), (4.0, 4.0)]
    whole = Path(pts).length()
    parts = Path(pts[:2]).length() + Path(pts[1:3]).length() + Path(pts[2:]).length()
    assert whole == pytest.approx(parts)


def test_unwrap_crosses_boundary():
    out = unwrap_waypoints([(0.1, 1.0), (TWO_PI - 0.1, 1.0)], (0.0, 0.0), (TWO_PI, TWO_PI))
    assert out[0] == (0.1, 1.0)
    assert out[1][0] == pytest.approx(-0.1)
    assert out[1][1] == pytest.approx(1.0)


def test_unwrap_chains_from_unwrapped_predecessor():
    pts = [(6.0,), (1.0,), (3.0,), (5.5,)]
    out = unwrap_waypoints(pts, (0.0,), (TWO_PI,))
    for (a,), (b,) in zip(out, out[1:]):
        assert abs(a - b) <= math.pi
    for (orig,), (new,) in zip(pts, out):
        k = (new - orig) / TWO_PI
        assert k == pytest.approx(round(k))


def test_unwrap_leaves_close_points_alone():
    pts = [(1.0, 2.0), (1.5, 2.5), (2.0, 3.0)]
    assert unwrap_waypoints(pts, (0.0, 0.0), (TWO_PI, TWO_PI)) == pts


def test_unwrap_empty():
    assert unwrap_waypoints([], (0.0,), (1.0,)) == []


def test_unwrap_warns_outside_bounds(caplog):
    with caplog.at_level(logging.WARNING, logger="ampkit.path"):
        unwrap_waypoints([(0.5,), (2.0,)], (0.0,), (1.0,))
    assert any("outside the bounds" in r.getMessage() for r in caplog.records)


def test_unwrap_path_returns_new_path():
    path = Path([(0.1,), (TWO_PI - 0.1,)], valid=False)
    out = unwrap_path(path, (0.0,), (TWO_PI,))
    assert out.waypoints[1][0] == pytest.approx(-0.1)
    assert out.valid is False
    assert path.waypoints[1][0] == pytest.approx(TWO_PI - 0.1)