from __future__ import annotations

from typing import Dict, List

import numpy as np
import pytest

from study_order.graph.builders import build_word_graph
from study_order.graph.ir import WordGraph
from study_order.ingest.tables import DictionaryEntry
from study_order.ingest.wordlist import Stage, StudyEntry
from study_order.schedule.plan import plan_study
from study_order.schedule.sequencer import compute_sequence
from study_order.schedule.validate import validate_sequence

ALPHABET = [chr(code) for code in range(0x4E00, 0x4E00 + 40)]


def build_random_dictionary(seed: int, num_words: int = 150) -> WordGraph:
    rng = np.random.default_rng(seed)

    # origins only point at earlier characters, so the table has no loops
    origins: Dict[str, List[str]] = {}
    for idx, char in enumerate(ALPHABET[1:], start=1):
        if rng.random() < 0.6:
            count = int(rng.integers(1, min(3, idx) + 1))
            picks = rng.choice(idx, size=count, replace=False)
            origins[char] = [ALPHABET[int(p)] for p in picks]

    words = set(rng.choice(ALPHABET, size=20, replace=False).tolist())
    while len(words) < num_words:
        length = int(rng.integers(2, 5))
        words.add("".join(rng.choice(ALPHABET, size=length).tolist()))

    dictionary = {word: DictionaryEntry(definition=f"def {word}") for word in sorted(words)}
    frequencies = {
        word: int(rng.integers(0, 1000))
        for word in list(dictionary) + ALPHABET
        if rng.random() < 0.8
    }
    strokes = {char: int(rng.integers(1, 20)) for char in ALPHABET}
    return build_word_graph(dictionary, frequencies, strokes, origins)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_graph_invariants(seed: int) -> None:
    graph = build_random_dictionary(seed)
    graph.validate()

    for word, unit in graph.units.items():
        assert word not in unit.parents
        for parent in unit.parents:
            assert word in graph.children(parent)
        if unit.parents:
            assert unit.depth == 1 + max(graph.depth(p) for p in unit.parents)
        else:
            assert unit.depth == 0


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
@pytest.mark.parametrize("expansion", [0, 1, 3])
def test_random_sequences_respect_prerequisites(seed: int, expansion: int) -> None:
    graph = build_random_dictionary(seed)
    rng = np.random.default_rng(seed + 100)
    candidates = sorted(graph.units)
    known = set(rng.choice(candidates, size=15, replace=False).tolist())
    targets = rng.choice(candidates, size=25, replace=False).tolist()

    before = set(known)
    sequence = compute_sequence(graph, known, targets, expansion=expansion)

    validate_sequence(graph, sequence, known=before)
    assert set(targets) <= set(sequence)
    assert set(sequence) <= known


@pytest.mark.parametrize("seed", [4, 5])
def test_random_stages_never_repeat_output(seed: int) -> None:
    graph = build_random_dictionary(seed)
    rng = np.random.default_rng(seed)
    candidates = sorted(graph.units)
    stages = [
        Stage(
            name=f"stage {idx}",
            entries=[StudyEntry(w) for w in rng.choice(candidates, size=10).tolist()],
        )
        for idx in range(3)
    ]

    plan = plan_study(graph, [], stages, expansion=2, check=True)
    sequence = plan.sequence()

    assert len(sequence) == len(set(sequence))
    validate_sequence(graph, sequence)
