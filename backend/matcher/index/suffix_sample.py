# index/suffix_sample.py
import logging
from typing import Dict, List, Optional, Sequence

from ..models.errors import InputError
from .bwt import suffix_array

logger = logging.getLogger(__name__)


class SuffixSampler:
    """
    Partial suffix array: sorted rank -> text offset, kept only for
    offsets divisible by the sample interval K.
    """
    def __init__(self, sample_interval: int):
        if sample_interval < 1:
            raise InputError(f"Suffix sample interval must be >= 1, got {sample_interval}")
        self.k = sample_interval

    def build(self, codes: Sequence[int], sa: Optional[List[int]] = None) -> Dict[int, int]:
        if sa is None:
            sa = suffix_array(codes)
        sample = {rank: pos for rank, pos in enumerate(sa) if pos % self.k == 0}
        logger.debug("Sampled %d of %d suffix positions (K=%d)", len(sample), len(sa), self.k)
        return sample
