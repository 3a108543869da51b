"""Command-line interface for scoring captured strokes."""

import argparse
import logging
import os
from typing import Dict, List, Optional, Tuple

import pandas as pd
from tqdm.auto import tqdm

from ...core.domain.implementations.penalties import AnglePenalty, NoisePenalty
from ...core.domain.implementations.rotation_search_aligner import RotationSearchAligner
from ...core.domain.models.point import Curve, Point
from ...core.domain.models.reference_line import ReferenceLine
from ...core.domain.models.score_result import ScoringOptions
from ...core.services.scoring_service import ScoringService
from ...core.utils.benchmarking import PerformanceStats
from ...infrastructure.repositories.stroke_repository import StrokeRepository

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Set up logging configuration for the package."""
    root = logging.getLogger("strokescore")
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return root


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Score freehand strokes against a reference line",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument(
        "inputs",
        nargs="+",
        help="Stroke CSV files (x,y per row) or directories of them",
    )
    parser.add_argument(
        "--start",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        required=True,
        help="Reference start point",
    )
    parser.add_argument(
        "--end",
        type=float,
        nargs=2,
        metavar=("X", "Y"),
        required=True,
        help="Reference end point",
    )
    parser.add_argument("--decimate", action="store_true", help="Keep every 4th point")
    parser.add_argument(
        "--angle-penalty", action="store_true", help="Penalize misrotated strokes"
    )
    parser.add_argument(
        "--noise", action="store_true", help="Report the Douglas-Peucker noise penalty"
    )
    parser.add_argument(
        "--noise-weight",
        type=float,
        default=0.0,
        help="Points subtracted per unit of noise penalty",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Threads used for the rotation sweep",
    )
    parser.add_argument("--summary", help="Write a CSV summary to this path")
    parser.add_argument(
        "--profile", action="store_true", help="Print per-stage timings"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def collect_strokes(inputs: List[str]) -> List[Tuple[str, str]]:
    """
    Expand inputs into (stroke id, file path) pairs.

    Directories contribute every stroke their repository lists.
    """
    strokes = []
    for item in inputs:
        if os.path.isdir(item):
            repository = StrokeRepository(item)
            for stroke_id in repository.list():
                strokes.append((stroke_id, os.path.join(item, f"{stroke_id}.csv")))
        elif os.path.exists(item):
            strokes.append((os.path.splitext(os.path.basename(item))[0], item))
        else:
            logger.warning("Input not found: %s", item)
    return strokes


def score_strokes(
    strokes: List[Tuple[str, str]],
    reference: ReferenceLine,
    options: ScoringOptions,
    service: ScoringService,
) -> List[Dict[str, object]]:
    """Score every stroke, logging and skipping files that cannot be read."""
    rows = []
    for stroke_id, path in tqdm(strokes, desc="Scoring strokes"):
        try:
            curve: Curve = StrokeRepository.read_file(path)
        except (OSError, ValueError) as e:
            logger.error(f"Error reading {path}: {str(e)}")
            continue

        result = service.score(curve, reference, options)
        row = {"stroke": stroke_id, "path": path}
        row.update(result.summary())
        rows.append(row)
    return rows


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for stroke scoring CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    reference = ReferenceLine(Point(*args.start), Point(*args.end))
    options = ScoringOptions(
        decimate=args.decimate,
        angle_penalty=args.angle_penalty,
        noise_diagnostic=args.noise,
    )
    stats = PerformanceStats() if args.profile else None
    service = ScoringService(
        aligner=RotationSearchAligner(max_workers=args.workers),
        penalties=[AnglePenalty(), NoisePenalty(weight=args.noise_weight)],
        stats=stats,
    )

    strokes = collect_strokes(args.inputs)
    if not strokes:
        parser.error("no stroke files found")

    rows = score_strokes(strokes, reference, options, service)

    for row in rows:
        if row["status"] == "too_short":
            print(f"{row['stroke']}: stroke too short (min. 2 points)")
        else:
            print(
                f"{row['stroke']}: {row['final_score']:.1f}/100 "
                f"(Fréchet: {row['frechet_distance']:.2f}, angle: {row['angle']:.2f}°)"
            )

    if args.summary and rows:
        summary_dir = os.path.dirname(os.path.abspath(args.summary))
        os.makedirs(summary_dir, exist_ok=True)
        df = pd.DataFrame(rows).sort_values("stroke")
        df.to_csv(args.summary, index=False)
        print(f"\nWrote scoring summary to {args.summary}")

    if stats is not None:
        print(stats.report())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
