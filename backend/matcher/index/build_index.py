import logging
from dataclasses import dataclass
from typing import Dict

from ..constants.constants import CHECKPOINT_INTERVAL, SENTINEL, SUFFIX_SAMPLE_INTERVAL
from ..models.text import Alphabet, prepare_text
from .bwt import BwtBuilder
from .fm_index import FMIndex, FmIndexBuilder
from .suffix_sample import SuffixSampler

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternIndex:
    """Everything a search needs. Read-only once built, safe to share with workers."""
    alphabet: Alphabet
    fm: FMIndex
    sample: Dict[int, int]      # sorted rank -> text offset, offsets divisible by K
    sample_interval: int

    @property
    def n(self) -> int:
        return self.fm.n


class PatternIndexBuilder:
    """
    Builds the FM index and suffix sample of a text for multiple pattern matching
    """

    def __init__(self, text: str,
                 checkpoint_interval: int = CHECKPOINT_INTERVAL,
                 sample_interval: int = SUFFIX_SAMPLE_INTERVAL,
                 sentinel: str = SENTINEL):
        """
        Initialize index builder

        Args:
        text: raw text, without sentinel
        checkpoint_interval: C, spacing of rank checkpoints (default 5)
        sample_interval: K, suffix offsets divisible by K are kept (default 5)
        """
        self.text = text
        self.fm_builder = FmIndexBuilder(checkpoint_interval)
        self.sampler = SuffixSampler(sample_interval)
        self.sentinel = sentinel

    def build_index(self) -> PatternIndex:
        prepared = prepare_text(self.text, self.sentinel)
        result = BwtBuilder().build(prepared)
        fm = self.fm_builder.build(result.bwt, prepared.alphabet.size)
        # the suffix order is already known from the BWT, no need to sort twice
        sample = self.sampler.build(prepared.codes, sa=result.sa)
        logger.debug("Indexed text of %d symbols", len(prepared))
        return PatternIndex(
            alphabet=prepared.alphabet,
            fm=fm,
            sample=sample,
            sample_interval=self.sampler.k,
        )
