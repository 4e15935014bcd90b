"""
study-order

Prerequisite-aware study sequencing for vocabulary lists.
"""

from .errors import ConfigurationError, CycleError, StudyOrderError
from .graph.ir import LexicalUnit, WordGraph
from .graph.builders import build_word_graph
from .schedule.sequencer import compute_sequence
from .schedule.plan import StudyPlan, plan_study

__all__ = [
    "ConfigurationError",
    "CycleError",
    "StudyOrderError",
    "LexicalUnit",
    "WordGraph",
    "build_word_graph",
    "compute_sequence",
    "StudyPlan",
    "plan_study",
]
