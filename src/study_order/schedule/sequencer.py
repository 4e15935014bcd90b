"""
Turning target words into a study sequence that respects prerequisites.

The walk starts at a target and moves toward its roots. Every unknown
parent is scheduled (with its own unknown prerequisites first), and each
newly introduced parent brings along up to `expansion` of its other
derived words so the new component is seen in context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Set, Tuple

from study_order.graph.ir import WordGraph
from study_order.utils.logging import logger

_EMIT = "emit"
_DESCEND = "descend"

Step = Tuple[str, str]


@dataclass
class SequenceState:
    """
    Mutable bookkeeping shared by one walk.

    Attributes:
        known: identifiers already known or scheduled. Mutated in place.
        pending: identifiers whose walk has started but not yet emitted.
    """
    known: Set[str] = field(default_factory=set)
    pending: Set[str] = field(default_factory=set)


def frequency_sort(graph: WordGraph, words: Iterable[str]) -> List[str]:
    """Most frequent first; equal frequencies keep their incoming order."""
    return sorted(words, key=lambda word: -graph.frequency(word))


def reinforcement_siblings(
    graph: WordGraph,
    known: Set[str],
    parent: str,
    target: str,
    expansion: int,
) -> List[str]:
    """
    Pick the derived words of `parent` to study next to it.

    Already known siblings take the first slots, then unknown siblings by
    descending frequency. At most `expansion` are returned.
    """
    filler: List[str] = []
    unused: List[str] = []
    for sibling in graph.children(parent):
        if sibling == target:
            continue
        if sibling in known:
            filler.append(sibling)
        else:
            unused.append(sibling)
    chosen = (filler + frequency_sort(graph, unused))[:expansion]
    logger.debug(
        "Siblings for %s via %s: %d known, %d unknown, chose %s",
        parent,
        target,
        len(filler),
        len(unused),
        chosen,
    )
    return chosen


class Sequencer:
    """
    Schedules targets against a shared `SequenceState`.

    The walk runs on an explicit stack of generator frames. A frame marks
    its target known as soon as it starts, so converging paths never
    schedule a unit twice. A reinforcement sibling that turns out to need
    a unit still being walked higher up is released (unmarked, not
    emitted) rather than emitted ahead of its prerequisite.
    """

    def __init__(
        self,
        graph: WordGraph,
        state: SequenceState | None = None,
        *,
        expansion: int = 3,
    ) -> None:
        if expansion < 0:
            raise ValueError("expansion must be non-negative.")
        self.graph = graph
        self.state = state if state is not None else SequenceState()
        self.expansion = expansion

    @property
    def known(self) -> Set[str]:
        return self.state.known

    def schedule_one(self, target: str) -> List[str]:
        """Sequence for a single target, ending with the target itself."""
        sequence: List[str] = []
        stack: List[Iterator[Step]] = [self._walk(target)]
        while stack:
            try:
                action, word = next(stack[-1])
            except StopIteration:
                stack.pop()
                continue
            if action == _EMIT:
                sequence.append(word)
            else:
                stack.append(self._walk(word))
        return sequence

    def _parents(self, word: str) -> Sequence[str]:
        if word not in self.graph:
            return ()
        return self.graph.parents(word)

    def _release(self, word: str) -> None:
        self.state.known.discard(word)
        self.state.pending.discard(word)

    def _walk(self, target: str) -> Iterator[Step]:
        known = self.state.known
        pending = self.state.pending
        known.add(target)
        pending.add(target)

        for parent in self._parents(target):
            if parent in pending:
                self._release(target)
                return
            if parent in known:
                continue

            siblings = reinforcement_siblings(
                self.graph, known, parent, target, self.expansion
            )
            yield _DESCEND, parent
            if parent not in known:
                self._release(target)
                return

            for sibling in siblings:
                if sibling not in known:
                    yield _DESCEND, sibling

        pending.discard(target)
        yield _EMIT, target


def schedule_one(
    graph: WordGraph,
    known: Set[str],
    target: str,
    expansion: int = 3,
) -> List[str]:
    return Sequencer(graph, SequenceState(known=known), expansion=expansion).schedule_one(target)


def compute_sequence(
    graph: WordGraph,
    known: Set[str],
    targets: Sequence[str],
    expansion: int = 3,
) -> List[str]:
    """
    Study sequence for `targets`, most frequent target first.

    `known` is updated in place with everything scheduled. No identifier
    is emitted twice within one call; a target that was already known is
    still emitted once, after any prerequisites it was missing.
    """
    sequencer = Sequencer(graph, SequenceState(known=known), expansion=expansion)
    sequence: List[str] = []
    emitted: Set[str] = set()

    for target in frequency_sort(graph, targets):
        if target not in graph:
            logger.warning("Target `%s` is not in the word graph; scheduling it alone", target)
        for word in sequencer.schedule_one(target):
            if word not in emitted:
                emitted.add(word)
                sequence.append(word)
    return sequence
