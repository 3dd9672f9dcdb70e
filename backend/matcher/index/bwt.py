# index/bwt.py
import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from ..models.text import Alphabet, PreparedText

logger = logging.getLogger(__name__)


def suffix_array(codes: Sequence[int]) -> List[int]:
    """
    Prefix-doubling suffix array over integer symbol codes.
    Code 0 (the sentinel) sorts first; it is unique, so ranks always
    become distinct and the loop terminates.
    """
    n = len(codes)
    if n == 0:
        return []
    k = 1
    sa = list(range(n))
    rank = [int(c) for c in codes]
    tmp = [0] * n
    while True:
        sa.sort(key=lambda i: (rank[i], rank[i + k] if i + k < n else -1))
        tmp[sa[0]] = 0
        for i in range(1, n):
            a, b = sa[i - 1], sa[i]
            tmp[b] = tmp[a] + (
                rank[b] != rank[a] or
                (rank[b + k] if b + k < n else -1) != (rank[a + k] if a + k < n else -1)
            )
        rank, tmp = tmp, rank
        if rank[sa[-1]] == n - 1:
            break
        k <<= 1
    return sa


def naive_bwt(prepared: PreparedText) -> str:
    """Sort every rotation of the prepared text by symbol code and keep the last column."""
    codes = [int(c) for c in prepared.codes]
    n = len(codes)
    rotations = sorted(codes[i:] + codes[:i] for i in range(n))
    return prepared.alphabet.decode(r[-1] for r in rotations)


@dataclass(frozen=True)
class BwtResult:
    sa: List[int]       # sorted rank -> text offset
    bwt: np.ndarray     # symbol codes of the last column


class BwtBuilder:
    """
    Burrows-Wheeler Transform of a sentinel-terminated text.
    Rotation order equals suffix order because the sentinel is unique,
    so the BWT is read off the suffix array.
    """
    def build(self, prepared: PreparedText) -> BwtResult:
        codes = prepared.codes
        sa = suffix_array(codes)
        bwt = self._bwt_from_sa(codes, sa)
        logger.debug("Built BWT of length %d over %d symbols", len(bwt), prepared.alphabet.size)
        return BwtResult(sa=sa, bwt=bwt)

    @staticmethod
    def _bwt_from_sa(codes: np.ndarray, sa: List[int]) -> np.ndarray:
        # codes[p - 1] wraps to the sentinel when p == 0
        return np.asarray(codes)[np.asarray(sa, dtype=np.int64) - 1].astype(np.int32)


def bwt_string(bwt: np.ndarray, alphabet: Alphabet) -> str:
    return alphabet.decode(bwt)


def inverse_bwt(bwt: np.ndarray, alphabet: Alphabet) -> str:
    """
    Rebuild the sentinel-terminated text from its BWT by walking the
    LF-mapping backwards from row 0, the row of the sentinel suffix.
    """
    n = len(bwt)
    if n == 0:
        return ""
    counts = np.bincount(bwt, minlength=alphabet.size)
    first = np.concatenate(([0], np.cumsum(counts)[:-1]))
    # rank of each BWT symbol among equal symbols above it
    seen = np.zeros(alphabet.size, dtype=np.int64)
    ranks = np.empty(n, dtype=np.int64)
    for i, c in enumerate(bwt):
        ranks[i] = seen[c]
        seen[c] += 1

    out = [alphabet.sentinel]
    row = 0
    for _ in range(n - 1):
        c = bwt[row]
        out.append(alphabet.symbol(c))
        row = first[c] + ranks[row]
    return "".join(reversed(out))
