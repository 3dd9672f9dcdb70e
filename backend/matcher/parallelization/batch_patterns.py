from typing import List, Tuple

from ..index.build_index import PatternIndex
from ..search.pattern_search import PatternSearcher

_PATTERN_INDEX : PatternIndex

def _init_worker(patternIndex : PatternIndex):
    global _PATTERN_INDEX

    _PATTERN_INDEX = patternIndex

def make_batches(indexedPatterns: List[Tuple[int, str]], numProcesses: int) -> List[List[Tuple[int, str]]]:
    batch_size = max(1, len(indexedPatterns) // (numProcesses * 3))
    batches = []
    for i in range(0, len(indexedPatterns), batch_size):
        batches.append(indexedPatterns[i:i + batch_size])
    return batches

def process_pattern_batch(args) -> List[Tuple[int, List[int]]]:
    """Search a batch of (pattern number, pattern) pairs in a worker process"""
    global _PATTERN_INDEX
    batch = args

    # the index is shared read-only, only the searcher is per process
    searcher = PatternSearcher(_PATTERN_INDEX)
    results = []

    for i, pattern in batch:
        results.append((i, sorted(searcher.search(pattern))))

    return results
