from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence

import numpy as np

from study_order.graph.ir import WordGraph


@dataclass(frozen=True)
class SequenceReport:
    total: int
    targets: int
    prerequisites: int
    max_depth: int
    mean_depth: float
    depth_histogram: List[int]

    def lines(self) -> List[str]:
        histogram = ", ".join(
            f"{depth}:{count}" for depth, count in enumerate(self.depth_histogram) if count
        )
        return [
            f"cards: {self.total}",
            f"targets: {self.targets}",
            f"prerequisites and siblings: {self.prerequisites}",
            f"max depth: {self.max_depth}",
            f"mean depth: {self.mean_depth:.2f}",
            f"depth histogram: {histogram or '-'}",
        ]


def summarize_sequence(
    graph: WordGraph,
    sequence: Sequence[str],
    targets: Iterable[str] = (),
) -> SequenceReport:
    """Counts and depth statistics for an emitted sequence."""
    target_set = set(targets)
    depths = np.array(
        [graph.depth(word) if word in graph else 0 for word in sequence],
        dtype=np.int64,
    )
    if depths.size == 0:
        return SequenceReport(
            total=0,
            targets=0,
            prerequisites=0,
            max_depth=0,
            mean_depth=0.0,
            depth_histogram=[],
        )

    scheduled_targets = sum(1 for word in sequence if word in target_set)
    return SequenceReport(
        total=int(depths.size),
        targets=scheduled_targets,
        prerequisites=int(depths.size) - scheduled_targets,
        max_depth=int(depths.max()),
        mean_depth=float(depths.mean()),
        depth_histogram=[int(c) for c in np.bincount(depths)],
    )
