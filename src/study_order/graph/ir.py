from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterator, List

from study_order.errors import CycleError


@dataclass
class LexicalUnit:
    """A character or word tracked in the prerequisite graph."""

    word: str
    frequency: int = 0
    strokes: int = 0
    depth: int = 0
    definition: str = ""
    placeholder: bool = False
    parents: List[str] = field(default_factory=list)
    children: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.frequency < 0:
            raise ValueError(f"Unit `{self.word}` has negative frequency.")
        if self.strokes < 0:
            raise ValueError(f"Unit `{self.word}` has negative stroke count.")
        if self.word in self.parents:
            raise ValueError(f"Unit `{self.word}` lists itself as a parent.")


@dataclass
class WordGraph:
    """
    Prerequisite graph over lexical units.

    Edges run from a unit to its direct parents (the components it is
    built from); every parent keeps the matching back-reference in its
    ordered child list.
    """
    units: Dict[str, LexicalUnit] = field(default_factory=dict)

    def __contains__(self, word: object) -> bool:
        return word in self.units

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[str]:
        return iter(self.units)

    def add_unit(self, unit: LexicalUnit, *, allow_overwrite: bool = False) -> None:
        if not allow_overwrite and unit.word in self.units:
            raise ValueError(f"Duplicate unit: {unit.word}")
        self.units[unit.word] = unit

    def get_unit(self, word: str) -> LexicalUnit:
        return self.units[word]

    def parents(self, word: str) -> List[str]:
        return self.units[word].parents

    def children(self, word: str) -> List[str]:
        return self.units[word].children

    def frequency(self, word: str) -> int:
        """Usage count of `word`; units outside the graph count as 0."""
        unit = self.units.get(word)
        return unit.frequency if unit is not None else 0

    def depth(self, word: str) -> int:
        return self.units[word].depth

    def link(self, child: str, parent: str) -> None:
        """Record `child` under `parent` (the parent must already be a unit)."""
        if child == parent:
            raise ValueError(f"Unit `{child}` cannot be its own parent.")
        if parent not in self.units:
            raise KeyError(f"Unit `{child}` depends on unknown parent `{parent}`.")
        child_unit = self.units[child]
        if parent not in child_unit.parents:
            child_unit.parents.append(parent)
        siblings = self.units[parent].children
        if child not in siblings:
            siblings.append(child)

    def validate(self) -> None:
        """
        Validate structural soundness:
        - every parent exists in the graph
        - parent and child lists mirror each other
        - no unit is its own parent
        - graph is acyclic
        """
        problems: List[str] = []
        for unit in self.units.values():
            if unit.word in unit.parents:
                problems.append(f"{unit.word} -> {unit.word} (self reference)")
            for parent in unit.parents:
                if parent not in self.units:
                    problems.append(f"{unit.word} -> {parent} (missing parent)")
                elif unit.word not in self.units[parent].children:
                    problems.append(f"{unit.word} -> {parent} (missing child link)")
            for child in unit.children:
                if child not in self.units or unit.word not in self.units[child].parents:
                    problems.append(f"{child} <- {unit.word} (dangling child link)")
        if problems:
            raise ValueError("Graph links are inconsistent:\n" + "\n".join(problems))

        # Will raise if a cycle exists.
        self.topological_sort()

    def topological_sort(self) -> List[LexicalUnit]:
        """
        Kahn topo-sort, prerequisites first; ties broken by identifier.

        Raises:
            CycleError: if some units depend on themselves transitively.
        """
        indeg: Dict[str, int] = {word: 0 for word in self.units}
        succ: Dict[str, List[str]] = {word: [] for word in self.units}

        for unit in self.units.values():
            for parent in unit.parents:
                if parent not in self.units:
                    raise KeyError(
                        f"Unit `{unit.word}` depends on unknown parent `{parent}`."
                    )
                indeg[unit.word] += 1
                succ[parent].append(unit.word)

        ready = deque(sorted(word for word, deg in indeg.items() if deg == 0))
        order: List[str] = []

        while ready:
            current = ready.popleft()
            order.append(current)
            for child in sorted(succ[current]):
                indeg[child] -= 1
                if indeg[child] == 0:
                    ready.append(child)

        if len(order) != len(self.units):
            stuck = sorted(word for word, deg in indeg.items() if deg > 0)
            raise self._cycle_through(stuck[0], indeg)

        return [self.units[w] for w in order]

    def _cycle_through(self, start: str, indeg: Dict[str, int]) -> CycleError:
        # Every unsorted unit still has an unsorted parent, so walking those
        # parents must revisit a unit.
        walk: List[str] = [start]
        seen: Dict[str, int] = {start: 0}
        current = start
        while True:
            current = next(p for p in self.units[current].parents if indeg[p] > 0)
            if current in seen:
                return CycleError(current, walk[seen[current]:] + [current])
            seen[current] = len(walk)
            walk.append(current)
