import math

import pytest

from src.beziermarks.bezier import evaluate_position
from src.beziermarks.config import SamplingConfig, SamplingConfigError
from src.beziermarks.sampler import Marker, place_markers, sample_curve, sample_features

LINE = ((0.0, 0.0), (33.0, 0.0), (66.0, 0.0), (100.0, 0.0))
CURVE = ((50.0, 50.0), (60.0, 250.0), (200.0, 200.0), (250.0, 50.0))
POINT = (5.0, 5.0)


def _xs(ts, curve=LINE):
    return [evaluate_position(t, *curve)[0] for t in ts]


def test_line_samples_are_evenly_spaced() -> None:
    ts = sample_curve(*LINE, 0.0, 10.0, 0.0001)
    assert len(ts) in (10, 11)
    assert all(0.0 <= t <= 1.0 for t in ts)
    for index, x in enumerate(_xs(ts)):
        assert x == pytest.approx(10.0 * index, abs=0.15)


def test_offset_shifts_every_sample() -> None:
    ts = sample_curve(*LINE, 5.0, 10.0, 0.0001)
    assert len(ts) == 10
    for index, x in enumerate(_xs(ts)):
        assert x == pytest.approx(5.0 + 10.0 * index, abs=0.15)


def test_zero_offset_seeds_curve_start() -> None:
    assert sample_curve(*CURVE, 0.0, 25.0, 0.001)[0] == 0.0
    assert sample_curve(*CURVE, 3.0, 25.0, 0.001)[0] > 0.0


def test_offset_equal_to_spacing_drops_only_the_seed() -> None:
    seeded = sample_curve(*CURVE, 0.0, 20.0, 0.001)
    shifted = sample_curve(*CURVE, 20.0, 20.0, 0.001)
    assert shifted == seeded[1:]


def test_samples_increase_in_t_and_arc_length() -> None:
    ts = sample_curve(*CURVE, 0.0, 10.0, 0.0001)
    assert len(ts) > 10
    assert all(a < b for a, b in zip(ts, ts[1:]))

    points = [evaluate_position(t, *CURVE) for t in ts]
    for start, end in zip(points, points[1:]):
        chord = math.dist(start, end)
        assert 9.5 < chord <= 10.1


def test_spacing_longer_than_curve_terminates() -> None:
    assert sample_curve(*CURVE, 0.0, 10_000.0, 0.001) == [0.0]
    assert sample_curve(*CURVE, 5_000.0, 10.0, 0.001) == []


def test_degenerate_curve_terminates() -> None:
    assert sample_curve(POINT, POINT, POINT, POINT, 0.0, 10.0, 0.001) == [0.0]
    assert sample_curve(POINT, POINT, POINT, POINT, 2.0, 10.0, 0.001) == []


def test_sample_features_report_position_and_heading() -> None:
    markers = sample_features(*LINE, 0.0, 25.0, 0.0001)
    assert all(isinstance(marker, Marker) for marker in markers)
    assert markers[0].t == 0.0
    assert markers[0].position == pytest.approx(LINE[0])
    assert markers[0].tangent == pytest.approx((99.0, 0.0))
    assert all(marker.angle == pytest.approx(0.0) for marker in markers)
    assert [marker.position[0] for marker in markers[:4]] == pytest.approx(
        [0.0, 25.0, 50.0, 75.0], abs=0.1
    )


def test_place_markers_uses_config() -> None:
    config = SamplingConfig(offset=5.0, spacing=10.0, step=0.0001)
    markers = place_markers(list(LINE), config)
    assert [marker.t for marker in markers] == sample_curve(*LINE, 5.0, 10.0, 0.0001)


def test_place_markers_default_config() -> None:
    markers = place_markers([list(point) for point in CURVE])
    assert markers[0].position == pytest.approx(CURVE[0])
    assert len(markers) > 1


def test_place_markers_rejects_wrong_point_count() -> None:
    with pytest.raises(ValueError):
        place_markers(CURVE[:3])


def test_place_markers_rejects_non_terminating_config() -> None:
    with pytest.raises(SamplingConfigError):
        place_markers(CURVE, SamplingConfig(step=0.0))
    with pytest.raises(SamplingConfigError):
        place_markers(CURVE, SamplingConfig(spacing=-1.0))
