import pandas as pd
import pytest

from strokescore.core.domain.models.point import Curve, Point
from strokescore.core.utils.path_generator import PathGenerator
from strokescore.infrastructure.repositories.stroke_repository import StrokeRepository
from strokescore.presentation.cli import score_strokes, stroke_demo

START = Point(10.0, 50.0)
END = Point(110.0, 50.0)


@pytest.fixture
def stroke_dir(tmp_path):
    generator = PathGenerator(seed=11)
    repository = StrokeRepository(str(tmp_path / "strokes"))
    repository.create("perfect", generator.perfect_line(START, END, 16))
    repository.create("noisy", generator.noisy_line(START, END, 16, 4.0))
    repository.create("dot", Curve((Point(5.0, 5.0),)))
    return tmp_path / "strokes"


def test_score_directory_with_summary(stroke_dir, tmp_path, capsys):
    summary = tmp_path / "out" / "summary.csv"

    code = score_strokes.main(
        [str(stroke_dir), "--start", "10", "50", "--end", "110", "50", "--noise", "--summary", str(summary)]
    )

    assert code == 0
    output = capsys.readouterr().out
    assert "dot: stroke too short (min. 2 points)" in output
    assert "perfect: 100.0/100" in output

    df = pd.read_csv(summary)
    assert df["stroke"].tolist() == ["dot", "noisy", "perfect"]
    assert df.set_index("stroke").loc["dot", "status"] == "too_short"
    assert df.set_index("stroke").loc["noisy", "noise_penalty"] > 0


def test_unreadable_file_is_skipped(stroke_dir, capsys):
    (stroke_dir / "broken.csv").write_text("1,2,3\n")

    code = score_strokes.main([str(stroke_dir), "--start", "10", "50", "--end", "110", "50"])

    assert code == 0
    output = capsys.readouterr().out
    assert "broken" not in output
    assert "perfect:" in output


def test_single_file_and_profile(stroke_dir, capsys):
    code = score_strokes.main(
        [str(stroke_dir / "perfect.csv"), "--start", "10", "50", "--end", "110", "50", "--profile"]
    )

    assert code == 0
    output = capsys.readouterr().out
    assert "perfect: 100.0/100" in output
    assert "align:" in output


def test_no_inputs_found(tmp_path):
    with pytest.raises(SystemExit):
        score_strokes.main([str(tmp_path / "missing.csv"), "--start", "0", "0", "--end", "1", "0"])


def test_collect_strokes(stroke_dir):
    strokes = score_strokes.collect_strokes([str(stroke_dir)])
    assert [stroke_id for stroke_id, _ in strokes] == ["dot", "noisy", "perfect"]


def test_demo_prints_every_scenario(capsys):
    code = stroke_demo.main(["--steps", "12", "--angle-penalty", "--noise"])

    assert code == 0
    output = capsys.readouterr().out
    for name in ["perfect", "rotated_90_short", "reversed_noisy", "arc", "sinusoid", "spiky", "overlapping"]:
        assert f"{name}:" in output
    assert "noise" in output


def test_reference_options():
    args = score_strokes.setup_parser().parse_args(["a.csv", "--start", "0", "0", "--end", "3", "4"])
    assert args.start == [0.0, 0.0]
    assert args.end == [3.0, 4.0]
    assert not hasattr(args, "samples")

    with pytest.raises(SystemExit):
        score_strokes.setup_parser().parse_args(
            ["a.csv", "--start", "0", "0", "--end", "3", "4", "--samples", "10"]
        )
