"""
Command line entry point: print a study sequence, one identifier per line.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from study_order.analysis.report import summarize_sequence
from study_order.errors import StudyOrderError
from study_order.graph.builders import from_tables
from study_order.graph.ir import WordGraph
from study_order.ingest.tables import load_tables
from study_order.ingest.wordlist import StudyList, load_study_list, merge_study_lists
from study_order.schedule.plan import StudyPlan, plan_study
from study_order.utils.config import ORIGIN_SOURCES, DatafileParams, SOConfig, config
from study_order.utils.logging import configure_logging, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="study-order",
        description="Order vocabulary so every word follows its components.",
    )
    parser.add_argument("--known", type=Path, default=None, help="list of already known words")
    parser.add_argument(
        "--vocab",
        type=Path,
        action="append",
        default=[],
        help="list of desired vocab words (repeatable)",
    )
    parser.add_argument("--data-dir", type=Path, default=Path("data"), help="directory of JSON tables")
    parser.add_argument(
        "--expansion",
        type=int,
        default=SOConfig.expansion,
        help="sibling words introduced with each new component (default: %(default)s)",
    )
    parser.add_argument("--origins", choices=ORIGIN_SOURCES, default=SOConfig.origin_source)
    parser.add_argument(
        "--repeat-targets",
        action="store_true",
        help="re-emit targets already scheduled by an earlier stage",
    )
    parser.add_argument("--check", action="store_true", help="validate prerequisite order")
    parser.add_argument("--report", action="store_true", help="print a summary to stderr")
    parser.add_argument("-v", "--verbose", action="count", default=0)
    return parser


def config_from_args(args: argparse.Namespace) -> SOConfig:
    return SOConfig(
        check=args.check,
        expansion=args.expansion,
        dedupe_across_stages=not args.repeat_targets,
        origin_source=args.origins,
    )


def run(
    known_path: Optional[Path],
    vocab_paths: Sequence[Path],
    *,
    data_dir: Path,
    cfg: Optional[SOConfig] = None,
    params: Optional[DatafileParams] = None,
) -> Tuple[StudyPlan, WordGraph]:
    cfg = cfg or config
    tables = load_tables(params, data_dir, origin_source=cfg.origin_source)
    graph = from_tables(tables)

    known_list = load_study_list(known_path) if known_path is not None else StudyList()
    targets = merge_study_lists(load_study_list(path) for path in vocab_paths)

    return plan_study(
        graph,
        known_list.words(),
        targets.stages,
        expansion=cfg.expansion,
        dedupe_across_stages=cfg.dedupe_across_stages,
        check=cfg.check,
    ), graph


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        cfg = config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        plan, graph = run(args.known, args.vocab, data_dir=args.data_dir, cfg=cfg)
    except StudyOrderError as exc:
        logger.error("%s", exc)
        return 1
    except ValueError as exc:
        # raised by --check when a sequence breaks prerequisite order
        logger.error("Invalid sequence: %s", exc)
        return 1

    sequence = plan.sequence()
    for card in sequence:
        print(card)

    if args.report:
        targets = [word for stage in plan.stages for word in stage.targets]
        for line in summarize_sequence(graph, sequence, targets).lines():
            print(line, file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
