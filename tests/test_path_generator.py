import numpy as np
import pytest

from strokescore.core.domain.models.point import Point
from strokescore.core.utils.path_generator import PathGenerator

START = Point(10.0, 50.0)
END = Point(110.0, 50.0)


def test_perfect_line():
    line = PathGenerator().perfect_line(START, END, 11)

    assert len(line) == 11
    assert line.first == START
    assert line.last == END
    assert np.allclose(line.to_array()[:, 1], 50.0)


def test_minimum_two_steps():
    assert len(PathGenerator().perfect_line(START, END, 1)) == 2


def test_seeded_noise_is_reproducible():
    first = PathGenerator(seed=3).noisy_line(START, END, 25, 5.0)
    second = PathGenerator(seed=3).noisy_line(START, END, 25, 5.0)
    other = PathGenerator(seed=4).noisy_line(START, END, 25, 5.0)

    assert first == second
    assert first != other


def test_noisy_line_pins_endpoints_and_bounds_noise(generator):
    line = generator.noisy_line(START, END, 50, 2.0)
    clean = generator.perfect_line(START, END, 50)

    assert line.first == START
    assert line.last == END
    assert np.all(np.abs(line.to_array() - clean.to_array()) <= 2.0)


def test_rotated_line_keeps_centroid(generator):
    line = generator.rotated_line(START, END, 21, 90.0)
    coords = line.to_array()

    assert line.centroid().x == pytest.approx(60.0)
    assert line.centroid().y == pytest.approx(50.0)
    assert np.allclose(coords[:, 0], 60.0)
    assert coords[-1, 1] == pytest.approx(100.0)


def test_arc_bulges_to_the_left(generator):
    arc = generator.arc(START, END, 21, 20.0)

    assert arc.first == START
    assert arc.last.x == pytest.approx(END.x)
    assert arc[10].x == pytest.approx(60.0)
    assert arc[10].y == pytest.approx(60.0)


def test_arc_needs_distinct_endpoints(generator):
    with pytest.raises(ValueError):
        generator.arc(START, START, 10, 5.0)


def test_sinusoid_offsets_are_bounded(generator):
    wave = generator.sinusoid(START, END, 61, 3.0, 5.0)
    offsets = wave.to_array()[:, 1] - 50.0

    assert offsets.max() == pytest.approx(5.0, abs=0.1)
    assert offsets.min() == pytest.approx(-5.0, abs=0.1)
    assert offsets[0] == pytest.approx(0.0)


def test_spiky_line(generator):
    spiky = generator.spiky_line(START, END, 101, 4, 8.0)
    offsets = spiky.to_array()[:, 1] - 50.0

    assert set(np.round(offsets, 9)) == {0.0, 8.0}
    assert offsets[0] == 0.0


def test_overlapping_line_doubles_back(generator):
    line = generator.overlapping_line(Point(0.0, 0.0), Point(100.0, 0.0), 101)
    xs = line.to_array()[:, 0]

    assert xs[0] == 0.0
    assert xs[-1] == pytest.approx(100.0)
    turnaround = int(np.argmax(xs[:76]))
    assert xs[turnaround] == pytest.approx(70.0, abs=1.0)
    assert np.all(np.diff(xs[: turnaround + 1]) > 0)

    # Runs back to the halfway mark, then on to the end
    assert xs[turnaround:76].min() == pytest.approx(50.0, abs=1.0)
    assert np.all(np.diff(xs[turnaround:76]) < 0)
    assert np.all(np.diff(xs[75:]) > 0)
