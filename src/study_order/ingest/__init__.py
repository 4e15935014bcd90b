"""
Reading the external inputs: lexical tables and staged word lists.
"""

from .tables import (
    DictionaryEntry,
    LexicalTables,
    load_counts,
    load_dictionary,
    load_origins,
    load_tables,
)
from .wordlist import (
    Stage,
    StudyEntry,
    StudyList,
    load_study_list,
    merge_study_lists,
    parse_study_list,
)

__all__ = [
    "DictionaryEntry",
    "LexicalTables",
    "load_counts",
    "load_dictionary",
    "load_origins",
    "load_tables",
    "Stage",
    "StudyEntry",
    "StudyList",
    "load_study_list",
    "merge_study_lists",
    "parse_study_list",
]
