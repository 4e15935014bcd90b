"""
Summaries of emitted study sequences.
"""

from .report import SequenceReport, summarize_sequence

__all__ = [
    "SequenceReport",
    "summarize_sequence",
]
