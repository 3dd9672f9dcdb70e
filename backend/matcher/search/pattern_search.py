import logging
from typing import List, Set, Tuple

from ..index.build_index import PatternIndex
from ..models.errors import InputError

logger = logging.getLogger(__name__)

EMPTY_RANGE = (1, 0)


class PatternSearcher:
    """
    Exact pattern search on top of a PatternIndex.
    search(pattern) -> set of 0-based offsets in the original text
    """
    def __init__(self, index: PatternIndex):
        self.index = index
        self.fm = index.fm

    def backward_search(self, pattern: str) -> Tuple[int, int]:
        """
        Narrow the sorted-row range one symbol at a time, last symbol first.
        Returns an inclusive (top, bottom) range, empty when top > bottom.
        """
        if not pattern:
            raise InputError("Empty pattern")
        codes = self.index.alphabet.encode_pattern(pattern)
        if codes is None:
            return EMPTY_RANGE
        top, bottom = 0, self.fm.n - 1
        for i in range(len(codes) - 1, -1, -1):
            c = codes[i]
            top_count = self.fm.count_symbol(c, top)
            bottom_count = self.fm.count_symbol(c, bottom + 1)
            if top_count >= bottom_count:
                return EMPTY_RANGE
            first = int(self.fm.first_occurrence[c])
            top = first + top_count
            bottom = first + bottom_count - 1
        return (top, bottom)

    def count(self, pattern: str) -> int:
        top, bottom = self.backward_search(pattern)
        return max(0, bottom - top + 1)

    def resolve(self, row: int) -> int:
        """Text offset of the suffix at `row`, chasing LF until a sampled row."""
        sample = self.index.sample
        limit = self.index.sample_interval
        pointer = row
        steps = 0
        while pointer not in sample:
            if steps >= limit:
                raise IndexError(
                    f"Row {row} reached no sampled suffix within {limit} LF steps"
                )
            pointer = self.fm.lf(pointer)
            steps += 1
        return sample[pointer] + steps

    def locate(self, top: int, bottom: int) -> List[int]:
        if top > bottom:
            return []
        return [self.resolve(row) for row in range(top, bottom + 1)]

    def search(self, pattern: str) -> Set[int]:
        top, bottom = self.backward_search(pattern)
        positions = set(self.locate(top, bottom))
        logger.debug("Pattern %r: rows [%d, %d], %d hits", pattern, top, bottom, len(positions))
        return positions
