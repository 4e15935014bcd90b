"""
Builders from raw lexical tables into WordGraph.
"""

from __future__ import annotations

from typing import List, Mapping, Optional, Sequence

from study_order.ingest.tables import DictionaryEntry, LexicalTables
from study_order.utils.logging import logger

from .decompose import Decomposer
from .depth import annotate_depths
from .ir import LexicalUnit, WordGraph


def stroke_cost(word: str, strokes: Mapping[str, int]) -> int:
    """Sum of per-unit stroke counts; unknown units cost 0."""
    return sum(strokes.get(unit, 0) for unit in word)


def build_word_graph(
    dictionary: Mapping[str, DictionaryEntry],
    frequencies: Mapping[str, int],
    strokes: Mapping[str, int],
    origins: Mapping[str, Sequence[str]],
    *,
    decomposer: Optional[Decomposer] = None,
) -> WordGraph:
    """
    Build the closed prerequisite graph for a dictionary.

    Every dictionary word becomes a unit; every component a word
    decomposes into that is not itself defined becomes a placeholder unit
    with no parents and no definition. Child links are attached once all
    units exist; the linked graph is validated before depths are computed.

    Raises:
        CycleError: if the origin table makes a unit depend on itself.
    """
    decomposer = decomposer or Decomposer(dictionary, origins)
    graph = WordGraph()
    placeholders: List[str] = []

    for word in sorted(dictionary):
        graph.add_unit(
            LexicalUnit(
                word=word,
                frequency=frequencies.get(word, 0),
                strokes=stroke_cost(word, strokes),
                definition=dictionary[word].definition,
                parents=decomposer.decompose(word),
            )
        )

    for word in sorted(dictionary):
        for parent in graph.parents(word):
            if parent in dictionary or parent in graph:
                continue
            graph.add_unit(
                LexicalUnit(
                    word=parent,
                    frequency=frequencies.get(parent, 0),
                    strokes=stroke_cost(parent, strokes),
                    placeholder=True,
                )
            )
            placeholders.append(parent)

    for word in sorted(graph.units):
        for parent in graph.parents(word):
            graph.link(word, parent)
    graph.validate()

    deepest = annotate_depths(graph)
    logger.info(
        "Built word graph: %d units (%d placeholders), max depth %d",
        len(graph),
        len(placeholders),
        deepest,
    )
    return graph


def from_tables(tables: LexicalTables, *, decomposer: Optional[Decomposer] = None) -> WordGraph:
    return build_word_graph(
        tables.dictionary,
        tables.frequencies,
        tables.strokes,
        tables.origins,
        decomposer=decomposer,
    )
