"""
Run-wide configuration and data file locations.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Union

ORIGIN_SOURCES = ("outlier", "heisig")


@dataclass
class SOConfig:
    check: bool = False
    expansion: int = 3
    dedupe_across_stages: bool = True
    origin_source: str = "outlier"

    def __post_init__(self) -> None:
        if self.expansion < 0:
            raise ValueError("expansion must be non-negative.")
        if self.origin_source not in ORIGIN_SOURCES:
            raise ValueError(
                f"origin_source must be one of {ORIGIN_SOURCES}, got `{self.origin_source}`."
            )


@dataclass(frozen=True)
class DatafileParams:
    """File names of the lexical tables, relative to a data directory."""

    heisig_data: str = "heisig_decomp.json"
    outlier_data: str = "outlier_decomp.json"
    stroke_count_data: str = "char_strokes.json"
    frequency_data: str = "blcu.json"
    dictionary: str = "cccedict.json"

    def resolve(self, data_dir: Union[str, Path]) -> Dict[str, Path]:
        root = Path(data_dir)
        return {
            "heisig": root / self.heisig_data,
            "outlier": root / self.outlier_data,
            "strokes": root / self.stroke_count_data,
            "frequency": root / self.frequency_data,
            "dictionary": root / self.dictionary,
        }


config = SOConfig()
