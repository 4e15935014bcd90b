"""
Prerequisite graph over lexical units.

- `WordGraph` and `LexicalUnit` (see `ir.py`)
- `Decomposer`, which splits words into their components
- Builders from raw lexical tables
- Dependency depth computation
"""

from .ir import LexicalUnit, WordGraph
from .decompose import Decomposer
from .depth import DepthCalculator, annotate_depths, compute_dependency_depth
from .builders import build_word_graph, from_tables

__all__ = [
    "LexicalUnit",
    "WordGraph",
    "Decomposer",
    "DepthCalculator",
    "annotate_depths",
    "compute_dependency_depth",
    "build_word_graph",
    "from_tables",
]
