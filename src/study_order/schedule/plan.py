from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set

from study_order.graph.ir import WordGraph
from study_order.ingest.wordlist import Stage
from study_order.schedule.sequencer import compute_sequence
from study_order.schedule.validate import validate_sequence
from study_order.utils.logging import logger


@dataclass
class StagePlan:
    name: str
    targets: List[str] = field(default_factory=list)
    sequence: List[str] = field(default_factory=list)


@dataclass
class StudyPlan:
    """
    Per-stage sequences of a whole run, in stage order.
    """
    stages: List[StagePlan] = field(default_factory=list)
    known: Set[str] = field(default_factory=set)

    def sequence(self) -> List[str]:
        return [word for stage in self.stages for word in stage.sequence]

    def __iter__(self):
        return iter(self.sequence())


def plan_study(
    graph: WordGraph,
    known_words: Iterable[str],
    stages: Iterable[Stage],
    *,
    expansion: int = 3,
    dedupe_across_stages: bool = True,
    check: bool = False,
    known: Optional[Set[str]] = None,
) -> StudyPlan:
    """
    Sequence every stage in order, carrying scheduled words forward.

    Args:
        graph: Annotated word graph.
        known_words: Words the learner already knows.
        stages: Target stages, processed one after another.
        expansion: Reinforcement siblings per newly introduced parent.
        dedupe_across_stages: Drop identifiers an earlier stage already
            emitted. When False a re-targeted word is emitted again.
        check: Run `validate_sequence` on each stage's output.
        known: Optional set to use (and mutate) as the shared known set.
    """
    known = known if known is not None else set()
    known.update(known_words)
    plan = StudyPlan(known=known)
    emitted: Set[str] = set()

    for stage in stages:
        before = set(known) if check else set()
        sequence = compute_sequence(graph, known, stage.words, expansion=expansion)
        if check:
            validate_sequence(graph, sequence, known=before)
        if dedupe_across_stages:
            sequence = [word for word in sequence if word not in emitted]
        emitted.update(sequence)

        logger.info(
            "Stage %r: %d targets -> %d cards", stage.name, len(stage.entries), len(sequence)
        )
        plan.stages.append(StagePlan(name=stage.name, targets=stage.words, sequence=sequence))

    return plan
