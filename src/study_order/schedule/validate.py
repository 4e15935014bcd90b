"""
Validation of study sequences.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Set

from study_order.graph.ir import WordGraph


def validate_sequence(
    graph: WordGraph,
    sequence: Sequence[str],
    known: Iterable[str] = (),
) -> None:
    """
    Check that a sequence can be studied front to back:
    - no identifier appears twice
    - every direct parent is known beforehand or appears earlier

    Raises:
        ValueError: describing the first violation found.
    """
    _ensure_no_duplicates(sequence)
    _ensure_prerequisites_first(graph, sequence, set(known))


def _ensure_no_duplicates(sequence: Sequence[str]) -> None:
    seen: Set[str] = set()
    for position, word in enumerate(sequence):
        if word in seen:
            raise ValueError(f"`{word}` is scheduled twice (again at position {position}).")
        seen.add(word)


def _ensure_prerequisites_first(graph: WordGraph, sequence: Sequence[str], known: Set[str]) -> None:
    available = set(known)
    for position, word in enumerate(sequence):
        if word in graph:
            missing = [p for p in graph.parents(word) if p not in available]
            if missing:
                raise ValueError(
                    f"`{word}` at position {position} comes before its prerequisites: "
                    + ", ".join(missing)
                )
        available.add(word)
