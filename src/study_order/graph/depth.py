"""
Dependency depth: the length of the longest prerequisite chain below a unit.
"""

from __future__ import annotations

from typing import Dict, Iterator, List, Set, Tuple

from study_order.errors import CycleError

from .ir import WordGraph


class DepthCalculator:
    """
    Memoised depth lookups over one graph.

    Depths are computed with an explicit stack, so long chains do not
    touch the interpreter recursion limit, and a unit met again while it
    is still on the stack raises `CycleError`.
    """

    def __init__(self, graph: WordGraph) -> None:
        self.graph = graph
        self._cache: Dict[str, int] = {}

    def __contains__(self, word: str) -> bool:
        return word in self._cache

    def depth(self, word: str) -> int:
        if word in self._cache:
            return self._cache[word]

        stack: List[Tuple[str, Iterator[str]]] = [(word, iter(self.graph.parents(word)))]
        on_stack: Set[str] = {word}

        while stack:
            current, pending = stack[-1]
            for parent in pending:
                if parent in self._cache:
                    continue
                if parent in on_stack:
                    path = [name for name, _ in stack]
                    raise CycleError(parent, path[path.index(parent):] + [parent])
                stack.append((parent, iter(self.graph.parents(parent))))
                on_stack.add(parent)
                break
            else:
                stack.pop()
                on_stack.discard(current)
                parents = self.graph.parents(current)
                self._cache[current] = (
                    1 + max(self._cache[p] for p in parents) if parents else 0
                )

        return self._cache[word]


def compute_dependency_depth(graph: WordGraph, word: str) -> int:
    """One-off depth query; use `DepthCalculator` for repeated lookups."""
    return DepthCalculator(graph).depth(word)


def annotate_depths(graph: WordGraph) -> int:
    """
    Store the depth of every unit on the unit itself.

    Returns the largest depth found (0 for an empty graph).
    """
    calc = DepthCalculator(graph)
    deepest = 0
    for word in sorted(graph.units):
        value = calc.depth(word)
        graph.units[word].depth = value
        deepest = max(deepest, value)
    return deepest
