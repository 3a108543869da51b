"""Score a set of synthetic strokes to show how the engine reacts to each defect."""

import argparse
from typing import Callable, Dict, List, Optional

from ...core.domain.models.point import Curve, Point
from ...core.domain.models.reference_line import ReferenceLine
from ...core.domain.models.score_result import ScoringOptions
from ...core.services.scoring_service import ScoringService
from ...core.utils.path_generator import PathGenerator
from .score_strokes import setup_logging

MODEL_START = Point(10.0, 50.0)
MODEL_END = Point(110.0, 50.0)


def build_scenarios(generator: PathGenerator, steps: int) -> Dict[str, Callable[[], Curve]]:
    """Named stroke producers, all drawn around the model line."""
    return {
        "perfect": lambda: generator.perfect_line(MODEL_START, MODEL_END, steps),
        "rotated_90_short": lambda: generator.rotated_line(
            Point(5.0, 50.0), Point(55.0, 50.0), steps, 90.0
        ),
        "reversed_noisy": lambda: generator.noisy_line(MODEL_END, MODEL_START, steps, 5.0),
        "arc": lambda: generator.arc(MODEL_START, MODEL_END, steps, 20.0),
        "sinusoid": lambda: generator.sinusoid(MODEL_START, MODEL_END, steps, 3.0, 5.0),
        "spiky": lambda: generator.spiky_line(MODEL_START, MODEL_END, steps, 4, 8.0),
        "overlapping": lambda: generator.overlapping_line(MODEL_START, MODEL_END, steps),
    }


def setup_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score synthetic strokes against a horizontal model line",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--seed", type=int, default=0, help="Random seed for noisy strokes")
    parser.add_argument("--steps", type=int, default=20, help="Points per stroke")
    parser.add_argument("--angle-penalty", action="store_true", help="Penalize misrotation")
    parser.add_argument("--noise", action="store_true", help="Report noise penalty")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the demo CLI."""
    args = setup_parser().parse_args(argv)
    setup_logging(args.verbose)

    generator = PathGenerator(seed=args.seed)
    reference = ReferenceLine(MODEL_START, MODEL_END, args.steps)
    options = ScoringOptions(angle_penalty=args.angle_penalty, noise_diagnostic=args.noise)
    service = ScoringService()

    for name, produce in build_scenarios(generator, args.steps).items():
        result = service.score(produce(), reference, options)
        line = (
            f"{name:>18}: {result.final_score:6.1f}/100  "
            f"Fréchet {result.frechet_distance:7.3f}  angle {result.angle:7.2f}°  "
            f"scale {result.scale_factor:.3f}"
        )
        if result.noise_penalty is not None:
            line += f"  noise {result.noise_penalty:.2f}"
        print(line)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
