# index/fm_index.py
import logging
from dataclasses import dataclass

import numpy as np

from ..models.errors import InputError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FMIndex:
    """
    BWT + first-occurrence table + checkpointed rank table.

    checkpoints[c][j] is the number of code c in bwt[0 : j * interval];
    there is one column for every multiple of `interval` in [0, n].
    """
    bwt: np.ndarray                 # (n,) symbol codes
    first_occurrence: np.ndarray    # (sigma,) first sorted row of each code
    checkpoints: np.ndarray         # (sigma, n // interval + 1)
    interval: int

    @property
    def n(self) -> int:
        return len(self.bwt)

    @property
    def alphabet_size(self) -> int:
        return len(self.first_occurrence)

    def checkpoint_at(self, code: int, index: int) -> int:
        if index < 0 or index > self.n or index % self.interval:
            raise IndexError(f"No checkpoint at index {index} (n={self.n}, C={self.interval})")
        return int(self.checkpoints[code, index // self.interval])

    def count_symbol(self, code: int, limit: int) -> int:
        """Occurrences of `code` in bwt[0:limit]."""
        if limit < 0 or limit > self.n:
            raise IndexError(f"Count limit {limit} outside [0, {self.n}]")
        block = limit // self.interval
        base = block * self.interval
        rem = int(np.count_nonzero(self.bwt[base:limit] == code))
        return int(self.checkpoints[code, block]) + rem

    def lf(self, row: int) -> int:
        """Row of the suffix obtained by prepending bwt[row] to the suffix at `row`."""
        code = int(self.bwt[row])
        return int(self.first_occurrence[code]) + self.count_symbol(code, row)


class FmIndexBuilder:
    def __init__(self, checkpoint_interval: int):
        if checkpoint_interval < 1:
            raise InputError(f"Checkpoint interval must be >= 1, got {checkpoint_interval}")
        self.interval = checkpoint_interval

    def build(self, bwt: np.ndarray, alphabet_size: int) -> FMIndex:
        bwt = np.asarray(bwt, dtype=np.int32)
        first = self._build_first_occurrence(bwt, alphabet_size)
        chk = self._build_checkpoints(bwt, alphabet_size, self.interval)
        logger.debug(
            "Built FM index: n=%d, sigma=%d, %d checkpoints per symbol",
            len(bwt), alphabet_size, chk.shape[1],
        )
        return FMIndex(bwt=bwt, first_occurrence=first, checkpoints=chk, interval=self.interval)

    @staticmethod
    def _build_first_occurrence(bwt: np.ndarray, alphabet_size: int) -> np.ndarray:
        # first row of c in the sorted column == number of symbols smaller than c
        counts = np.bincount(bwt, minlength=alphabet_size)
        return np.concatenate(([0], np.cumsum(counts)[:-1])).astype(np.int64)

    @staticmethod
    def _build_checkpoints(bwt: np.ndarray, alphabet_size: int, step: int) -> np.ndarray:
        n = len(bwt)
        chk = np.zeros((alphabet_size, n // step + 1), dtype=np.int64)
        for code in range(alphabet_size):
            running = np.concatenate(([0], np.cumsum(bwt == code)))
            chk[code] = running[::step]
        return chk
