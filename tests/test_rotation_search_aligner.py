import itertools

import numpy as np
import pytest

from strokescore.core.domain.implementations.rotation_search_aligner import (
    RotationCandidate,
    RotationSearchAligner,
    fold_candidates,
)
from strokescore.core.domain.models.point import Curve, Point

MODEL_START = Point(10.0, 50.0)
MODEL_END = Point(110.0, 50.0)


def angular_difference(a, b):
    """Smallest absolute difference between two angles in degrees."""
    return abs((a - b + 180.0) % 360.0 - 180.0)


@pytest.fixture
def aligner():
    return RotationSearchAligner()


@pytest.fixture
def reference_arc(generator):
    return generator.arc(MODEL_START, MODEL_END, 21, 20.0)


class TestRotationRecovery:
    """Tests for recovering a known rigid transform."""

    @pytest.mark.parametrize("theta", [15.0, 90.0, 137.5, 250.0])
    def test_rotated_line(self, aligner, generator, theta):
        """A rotated straight line is recovered within one angle step."""
        reference = generator.perfect_line(MODEL_START, MODEL_END, 20)
        query = generator.rotated_line(MODEL_START, MODEL_END, 20, theta)

        result = aligner.align(query, reference)

        # A straight line is symmetric, so the reversed branch undoes theta - 180
        expected = -theta if not result.reversed else 180.0 - theta
        assert angular_difference(result.normalized_angle, expected) <= 0.25
        assert result.frechet_distance == pytest.approx(0.0, abs=1e-6)
        assert -180.0 < result.normalized_angle <= 180.0
        assert result.rotation_magnitude == pytest.approx(abs(result.normalized_angle))

    def test_rotated_arc_uses_original_orientation(self, aligner, reference_arc):
        query = reference_arc.rotated(30.0, reference_arc.centroid())

        result = aligner.align(query, reference_arc)

        assert not result.reversed
        assert result.best_angle == pytest.approx(330.0)
        assert result.normalized_angle == pytest.approx(-30.0)
        assert result.frechet_distance == pytest.approx(0.0, abs=1e-6)

    def test_reversed_arc_uses_reversed_orientation(self, aligner, reference_arc):
        """A stroke traced backwards is matched by the reversed branch."""
        result = aligner.align(reference_arc.reversed(), reference_arc)

        assert result.reversed
        assert result.best_angle == 0.0
        assert result.frechet_distance == pytest.approx(0.0, abs=1e-9)

    def test_aligned_curve_sits_on_reference_centroid(self, aligner, generator, reference_arc):
        query = generator.noisy_line(Point(0.0, 0.0), Point(30.0, 40.0), 21, 2.0)

        result = aligner.align(query, reference_arc)

        aligned_center = result.aligned_curve.centroid()
        reference_center = reference_arc.centroid()
        assert aligned_center.x == pytest.approx(reference_center.x)
        assert aligned_center.y == pytest.approx(reference_center.y)
        assert len(result.aligned_curve) == len(query)


class TestScale:
    """Tests for the endpoint-span scale factor."""

    def test_half_size_query_is_doubled(self, aligner, generator):
        reference = generator.perfect_line(MODEL_START, MODEL_END, 15)
        query = generator.perfect_line(Point(0.0, 0.0), Point(50.0, 0.0), 15)

        result = aligner.align(query, reference)

        assert result.scale_factor == pytest.approx(2.0)
        assert result.frechet_distance == pytest.approx(0.0, abs=1e-6)

    def test_moved_and_resized_copy_aligns_like_the_original(self, aligner, generator, reference_arc):
        query = generator.noisy_line(MODEL_END, MODEL_START, 21, 3.0)
        moved = query.scaled(0.4).translated(-250.0, 730.0)

        expected = aligner.align(query, reference_arc)
        result = aligner.align(moved, reference_arc)

        assert result.scale_factor == pytest.approx(expected.scale_factor / 0.4)
        assert result.best_angle == expected.best_angle
        assert result.reversed == expected.reversed
        assert result.frechet_distance == pytest.approx(expected.frechet_distance, abs=1e-6)
        assert np.allclose(
            result.aligned_curve.to_array(), expected.aligned_curve.to_array(), atol=1e-6
        )

    def test_closed_query_keeps_unit_scale(self, aligner, generator):
        reference = generator.perfect_line(MODEL_START, MODEL_END, 5)
        loop = Curve.from_array([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])

        result = aligner.align(loop, reference)

        assert result.scale_factor == 1.0
        assert np.isfinite(result.frechet_distance)


def test_empty_input_returns_sentinel(aligner, reference_arc):
    result = aligner.align(Curve(), reference_arc)

    assert result.is_sentinel
    assert result.scale_factor == 1.0
    assert result.best_angle == 0.0
    assert aligner.align(reference_arc, Curve()).is_sentinel


def test_threaded_sweep_matches_sequential(generator, reference_arc):
    query = generator.noisy_line(MODEL_END, MODEL_START, 21, 4.0)

    sequential = RotationSearchAligner(chunk_size=90).align(query, reference_arc)
    threaded = RotationSearchAligner(chunk_size=90, max_workers=4).align(query, reference_arc)

    assert threaded == sequential


def test_fold_is_independent_of_arrival_order():
    candidates = [
        RotationCandidate(distance=2.0, orientation=0, angle_index=0),
        RotationCandidate(distance=1.0, orientation=1, angle_index=0),
        RotationCandidate(distance=1.0, orientation=0, angle_index=5),
        RotationCandidate(distance=1.0, orientation=0, angle_index=3),
    ]
    winners = {fold_candidates(order) for order in itertools.permutations(candidates)}

    assert winners == {RotationCandidate(distance=1.0, orientation=0, angle_index=3)}
    assert fold_candidates([]) is None


def test_angles_cover_full_turn(aligner):
    angles = aligner.angles

    assert len(angles) == 1440
    assert angles[0] == 0.0
    assert angles[-1] == pytest.approx(359.75)


@pytest.mark.parametrize("kwargs", [{"angle_step": 0}, {"angle_step": -1.0}, {"angle_step": 0.7}, {"chunk_size": 0}])
def test_invalid_configuration(kwargs):
    with pytest.raises(ValueError):
        RotationSearchAligner(**kwargs)
