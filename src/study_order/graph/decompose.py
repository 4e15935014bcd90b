"""
Splitting words into the smaller units they are written with.
"""

from __future__ import annotations

from typing import Collection, List, Mapping, Sequence


def _unique(items: Sequence[str], exclude: str) -> List[str]:
    seen = set()
    result: List[str] = []
    for item in items:
        if item == exclude or item in seen:
            continue
        seen.add(item)
        result.append(item)
    return result


class Decomposer:
    """
    Resolve a word into its direct components ("parents").

    Single units are looked up in the origin table; longer words are split
    against dictionary membership. The result depends only on the word and
    the two tables.

    Args:
        dictionary: Collection of defined words (only membership is used).
        origins: Mapping of single unit -> ordered roots.
    """

    def __init__(
        self,
        dictionary: Collection[str],
        origins: Mapping[str, Sequence[str]],
    ) -> None:
        self.dictionary = dictionary
        self.origins = origins

    def roots(self, unit: str) -> List[str]:
        return list(self.origins.get(unit, ()))

    def split(self, word: str) -> List[str]:
        """
        Segment `word` left to right.

        At each step the longest proper prefix that is a dictionary entry
        becomes the next component; with no such prefix the first unit
        stands alone. Single units are returned unchanged.
        """
        parts: List[str] = []
        rest = word
        while len(rest) > 1:
            cut = 1
            for end in range(len(rest) - 1, 1, -1):
                if rest[:end] in self.dictionary:
                    cut = end
                    break
            parts.append(rest[:cut])
            rest = rest[cut:]
        if rest:
            parts.append(rest)
        return parts

    def decompose(self, word: str) -> List[str]:
        if len(word) == 1:
            # both origin tables may claim a unit is built from itself
            return _unique(self.roots(word), exclude=word)
        return _unique(self.split(word), exclude=word)

    __call__ = decompose
