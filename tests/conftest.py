import pytest

from strokescore.core.domain.models.point import Point
from strokescore.core.domain.models.reference_line import ReferenceLine
from strokescore.core.utils.path_generator import PathGenerator


MODEL_START = Point(10.0, 50.0)
MODEL_END = Point(110.0, 50.0)


@pytest.fixture
def generator():
    return PathGenerator(seed=1234)


@pytest.fixture
def model_start():
    return MODEL_START


@pytest.fixture
def model_end():
    return MODEL_END


@pytest.fixture
def reference_line():
    return ReferenceLine(MODEL_START, MODEL_END, sample_count=20)
