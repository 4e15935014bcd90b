"""
Word lists grouped into stages.

Format, one entry per line::

    // stage name
    word<TAB>free-text note
    word

A line starting with ``//`` opens a new stage. Lines before the first
marker form an unnamed leading stage.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Union

from study_order.errors import ConfigurationError

STAGE_MARKER = "//"


@dataclass(frozen=True)
class StudyEntry:
    word: str
    note: str = ""


@dataclass
class Stage:
    name: str
    entries: List[StudyEntry] = field(default_factory=list)

    @property
    def words(self) -> List[str]:
        return [entry.word for entry in self.entries]

    def add_line(self, line: str) -> None:
        word, sep, note = line.partition("\t")
        word = word.strip()
        if not word:
            return
        self.entries.append(StudyEntry(word=word, note=note.strip() if sep else ""))


@dataclass
class StudyList:
    stages: List[Stage] = field(default_factory=list)

    def words(self) -> List[str]:
        return [word for stage in self.stages for word in stage.words]

    def extend(self, other: "StudyList") -> None:
        self.stages.extend(other.stages)

    def __len__(self) -> int:
        return sum(len(stage.entries) for stage in self.stages)


def parse_study_list(text: str) -> StudyList:
    stages: List[Stage] = []
    current = Stage(name="")
    leading = True

    for raw in text.splitlines():
        if raw.startswith(STAGE_MARKER):
            if not leading or current.entries:
                stages.append(current)
            current = Stage(name=raw[len(STAGE_MARKER):].strip())
            leading = False
        else:
            current.add_line(raw)

    if not leading or current.entries:
        stages.append(current)
    return StudyList(stages=stages)


def load_study_list(path: Union[str, Path]) -> StudyList:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Missing word list: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read word list {path}: {exc}") from exc
    return parse_study_list(text)


def merge_study_lists(lists: Iterable[StudyList]) -> StudyList:
    merged = StudyList()
    for study_list in lists:
        merged.extend(study_list)
    return merged
