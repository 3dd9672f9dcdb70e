import logging
from abc import ABC, abstractmethod
from multiprocessing import Pool
from typing import Dict, Iterable, List

from ..index.build_index import PatternIndex, PatternIndexBuilder
from ..models.errors import InputError
from ..models.patternMatcher import PatternMatcherInput, PatternMatcherOutput
from ..parallelization.batch_patterns import _init_worker, make_batches, process_pattern_batch
from ..search.pattern_search import PatternSearcher

logger = logging.getLogger(__name__)


def format_positions(positions: Iterable[int]) -> str:
    return " ".join(str(p) for p in sorted(positions))


class APatternMatcher(ABC):
    @abstractmethod
    def matchPatterns(self, inputData: PatternMatcherInput) -> PatternMatcherOutput:
        pass

class PatternMatcher(APatternMatcher):
    def __init__(self):
        pass

    def matchPatterns(self, inputData: PatternMatcherInput) -> PatternMatcherOutput:
        for pattern in inputData.patterns:
            if not pattern:
                raise InputError("Empty pattern")
        if inputData.processes < 1:
            raise InputError(f"Number of processes must be >= 1, got {inputData.processes}")

        # Build FM index and suffix sample from the text
        builder : PatternIndexBuilder = PatternIndexBuilder(
            inputData.text,
            checkpoint_interval=inputData.checkpointInterval,
            sample_interval=inputData.sampleInterval,
        )
        patternIndex : PatternIndex = builder.build_index()

        perPattern : List[List[int]] = self.searchAll(patternIndex, inputData.patterns, inputData.processes)

        # a position matched by two different patterns is reported twice
        positions : List[int] = []
        matchesPerPattern : Dict[str, List[int]] = {}
        for pattern, hits in zip(inputData.patterns, perPattern):
            positions.extend(hits)
            matchesPerPattern[pattern] = hits
        positions.sort()

        logger.info("Matched %d patterns, %d positions", len(inputData.patterns), len(positions))
        return PatternMatcherOutput(
            positions=positions,
            matchesPerPattern=matchesPerPattern,
            numberOfPatterns=len(inputData.patterns),
        )

    def searchAll(self, patternIndex: PatternIndex, patterns: List[str], processes: int) -> List[List[int]]:
        if processes <= 1 or len(patterns) <= 1:
            searcher = PatternSearcher(patternIndex)
            return [sorted(searcher.search(p)) for p in patterns]

        # Prepare patterns with their indices for batch processing
        indexedPatterns = list(enumerate(patterns))
        batches = make_batches(indexedPatterns, processes)
        logger.debug("Searching %d patterns in %d batches on %d processes", len(patterns), len(batches), processes)

        results : List[List[int]] = [[] for _ in patterns]
        with Pool(
            processes=processes,
            initializer=_init_worker,
            initargs=(patternIndex,),
            ) as pool:
            batch_results = pool.map(process_pattern_batch, batches)
            for batch in batch_results:
                for i, hits in batch:
                    results[i] = hits
        return results
