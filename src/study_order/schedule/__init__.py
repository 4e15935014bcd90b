"""
Study order construction.

This package turns an annotated word graph into:
- A sequence for one batch of targets (prerequisites first, with
  reinforcement siblings around every new component).
- A multi-stage plan that carries scheduled words forward.
- Validation that a sequence can be studied front to back.
"""

from .sequencer import (
    SequenceState,
    Sequencer,
    compute_sequence,
    frequency_sort,
    reinforcement_siblings,
    schedule_one,
)
from .validate import validate_sequence
from .plan import StagePlan, StudyPlan, plan_study

__all__ = [
    "SequenceState",
    "Sequencer",
    "compute_sequence",
    "frequency_sort",
    "reinforcement_siblings",
    "schedule_one",
    "validate_sequence",
    "StagePlan",
    "StudyPlan",
    "plan_study",
]
