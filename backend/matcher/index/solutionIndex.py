from collections import Counter
from dataclasses import dataclass
from typing import IO, Iterable, List

from ..models.errors import InputError


@dataclass 
class Metrics:
    TP:         int 
    FP:         int 
    FN:         int 

    Precision:  float
    Recall:     float
    Exact:      bool


class SolutionIndexBuilder:
    """Expected positions, e.g. a sample output file, to check a run against."""

    def getSolutionPositions(self, solutionFile: IO) -> List[int]:
        positions = []
        for token in solutionFile.read().split():
            try:
                positions.append(int(token))
            except ValueError:
                raise InputError(f"Expected output holds a non-integer position: {token!r}") from None
        return positions

    def computeMetrics(self, found: Iterable[int], expected: Iterable[int]) -> Metrics:
        # compared as multisets, an offset matched by two patterns counts twice
        foundCounts = Counter(found)
        expectedCounts = Counter(expected)

        tp = sum((foundCounts & expectedCounts).values())
        fp = sum((foundCounts - expectedCounts).values())
        fn = sum((expectedCounts - foundCounts).values())

        precision = tp / (tp + fp) if (tp + fp) > 0 else 0.0
        recall    = tp / (tp + fn) if (tp + fn) > 0 else 0.0

        return Metrics(
            TP=tp,
            FP=fp,
            FN=fn,
            Precision=precision,
            Recall=recall,
            Exact=(fp == 0 and fn == 0),
        )
