"""
Loaders for the JSON lexical tables.

Every loader validates the shape of what it reads and raises
`ConfigurationError` naming the file on any problem; a run never
continues with a partially loaded table.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from study_order.errors import ConfigurationError
from study_order.utils.config import ORIGIN_SOURCES, DatafileParams
from study_order.utils.logging import logger

PathLike = Union[str, Path]


@dataclass(frozen=True)
class DictionaryEntry:
    definition: str
    traditional: str = ""
    pronunciation: str = ""


@dataclass(frozen=True)
class LexicalTables:
    """Read-only bundle of everything the graph builder consumes."""

    dictionary: Mapping[str, DictionaryEntry] = field(default_factory=dict)
    frequencies: Mapping[str, int] = field(default_factory=dict)
    strokes: Mapping[str, int] = field(default_factory=dict)
    origins: Mapping[str, List[str]] = field(default_factory=dict)


def read_json(path: PathLike) -> Dict[str, Any]:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Missing data file: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read data file {path}: {exc}") from exc

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigurationError(
            f"Invalid JSON in {path} at line {exc.lineno}, column {exc.colno}: {exc.msg}"
        ) from exc

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"{path} must contain a JSON object, got {type(data).__name__}."
        )
    return data


def parse_counts(data: Mapping[str, Any], source: str = "<counts>") -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for key, value in data.items():
        # bool is an int subclass but never a valid count
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigurationError(
                f"{source}: count for `{key}` must be an integer, got {value!r}."
            )
        if value < 0:
            raise ConfigurationError(f"{source}: count for `{key}` is negative.")
        counts[key] = value
    return counts


def parse_origins(data: Mapping[str, Any], source: str = "<origins>") -> Dict[str, List[str]]:
    origins: Dict[str, List[str]] = {}
    for key, value in data.items():
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ConfigurationError(
                f"{source}: roots of `{key}` must be a list of strings."
            )
        origins[key] = list(value)
    return origins


def parse_dictionary(data: Mapping[str, Any], source: str = "<dictionary>") -> Dict[str, DictionaryEntry]:
    """Entries look like ``{"t": traditional, "p": pronunciation, "d": definition}``."""
    entries: Dict[str, DictionaryEntry] = {}
    for word, raw in data.items():
        if not isinstance(raw, dict) or not isinstance(raw.get("d"), str):
            raise ConfigurationError(
                f"{source}: entry `{word}` needs a string definition under `d`."
            )
        entries[word] = DictionaryEntry(
            definition=raw["d"],
            traditional=str(raw.get("t", "")),
            pronunciation=str(raw.get("p", "")),
        )
    return entries


def load_counts(path: PathLike) -> Dict[str, int]:
    return parse_counts(read_json(path), source=str(path))


def load_origins(path: PathLike) -> Dict[str, List[str]]:
    return parse_origins(read_json(path), source=str(path))


def load_dictionary(path: PathLike) -> Dict[str, DictionaryEntry]:
    return parse_dictionary(read_json(path), source=str(path))


def load_tables(
    params: DatafileParams | None = None,
    data_dir: PathLike = "data",
    *,
    origin_source: str = "outlier",
) -> LexicalTables:
    """
    Load the dictionary, frequency, stroke and origin tables.

    Only the origin table named by `origin_source` is read; the two tables
    are never merged because together they contain loops.
    """
    if origin_source not in ORIGIN_SOURCES:
        raise ConfigurationError(
            f"Unknown origin source `{origin_source}`; expected one of {ORIGIN_SOURCES}."
        )
    paths = (params or DatafileParams()).resolve(data_dir)

    dictionary = load_dictionary(paths["dictionary"])
    frequencies = load_counts(paths["frequency"])
    strokes = load_counts(paths["strokes"])
    origins = load_origins(paths[origin_source])

    logger.info(
        "Loaded %d dictionary entries, %d frequencies, %d stroke counts, %d %s origins",
        len(dictionary),
        len(frequencies),
        len(strokes),
        len(origins),
        origin_source,
    )
    return LexicalTables(
        dictionary=dictionary,
        frequencies=frequencies,
        strokes=strokes,
        origins=origins,
    )
