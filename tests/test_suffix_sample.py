"""Tests for matcher.index.suffix_sample."""
import pytest

from matcher.index.bwt import suffix_array
from matcher.index.suffix_sample import SuffixSampler
from matcher.models.errors import InputError
from matcher.models.text import prepare_text


class TestSuffixSampler:
    def test_panamabananas_k5(self, banana_prepared) -> None:
        sample = SuffixSampler(5).build(banana_prepared.codes)
        # offsets 0, 5, 10 of panamabananas$
        assert sorted(sample.values()) == [0, 5, 10]
        sa = suffix_array(banana_prepared.codes)
        for rank, pos in sample.items():
            assert sa[rank] == pos

    def test_every_divisible_offset_is_sampled(self, random_texts) -> None:
        for raw in random_texts:
            prepared = prepare_text(raw)
            for k in (1, 2, 3, 7):
                sample = SuffixSampler(k).build(prepared.codes)
                assert sorted(sample.values()) == list(range(0, len(prepared), k))

    def test_sentinel_rank_sampled_only_when_divisible(self) -> None:
        prepared = prepare_text("abcd")   # sentinel at offset 4
        assert SuffixSampler(2).build(prepared.codes)[0] == 4
        assert 0 not in SuffixSampler(3).build(prepared.codes)

    def test_uses_supplied_suffix_array(self, banana_prepared) -> None:
        sa = suffix_array(banana_prepared.codes)
        sampler = SuffixSampler(3)
        assert sampler.build(banana_prepared.codes, sa=sa) == sampler.build(banana_prepared.codes)

    def test_rejects_non_positive_interval(self) -> None:
        with pytest.raises(InputError):
            SuffixSampler(0)
