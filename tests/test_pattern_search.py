"""Tests for matcher.search.pattern_search."""
import random

import pytest

from matcher.index.build_index import PatternIndex, PatternIndexBuilder
from matcher.models.errors import InputError
from matcher.search.pattern_search import EMPTY_RANGE, PatternSearcher

from conftest import brute_force


class TestBananaScenarios:
    def test_ana(self, banana_index) -> None:
        assert PatternSearcher(banana_index).search("ana") == {1, 7, 9}

    def test_naa_not_found(self, banana_index) -> None:
        assert PatternSearcher(banana_index).search("naa") == set()

    def test_ban(self, banana_index) -> None:
        assert PatternSearcher(banana_index).search("ban") == {6}

    def test_whole_text(self, banana_index, banana_text) -> None:
        assert PatternSearcher(banana_index).search(banana_text) == {0}

    def test_single_symbol(self, banana_index) -> None:
        assert PatternSearcher(banana_index).search("a") == {1, 3, 5, 7, 9, 11}


class TestBackwardSearch:
    def test_range_size_is_occurrence_count(self, banana_index) -> None:
        searcher = PatternSearcher(banana_index)
        top, bottom = searcher.backward_search("ana")
        assert bottom - top + 1 == 3
        assert searcher.count("ana") == 3

    def test_unknown_symbol_is_empty_range(self, banana_index) -> None:
        searcher = PatternSearcher(banana_index)
        assert searcher.backward_search("anx") == EMPTY_RANGE
        assert searcher.count("xyz") == 0
        assert searcher.search("xyz") == set()

    def test_sentinel_in_pattern_never_matches(self, banana_index) -> None:
        assert PatternSearcher(banana_index).search("s$") == set()

    def test_empty_pattern_rejected(self, banana_index) -> None:
        with pytest.raises(InputError, match="Empty"):
            PatternSearcher(banana_index).search("")

    def test_does_not_mutate_pattern(self, banana_index) -> None:
        pattern = "ana"
        PatternSearcher(banana_index).search(pattern)
        assert pattern == "ana"

    def test_locate_empty_range(self, banana_index) -> None:
        assert PatternSearcher(banana_index).locate(*EMPTY_RANGE) == []


class TestAgainstBruteForce:
    @pytest.mark.parametrize("checkpoint,sample", [(1, 1), (2, 3), (5, 5), (7, 2), (50, 50)])
    def test_random_texts_and_patterns(self, random_texts, checkpoint, sample) -> None:
        rng = random.Random(checkpoint * 100 + sample)
        for text in random_texts:
            if not text:
                continue
            index = PatternIndexBuilder(text, checkpoint, sample).build_index()
            searcher = PatternSearcher(index)
            patterns = {text[i:j] for i in range(len(text)) for j in range(i + 1, min(len(text), i + 4) + 1)}
            patterns.update("".join(rng.choice("ACGT") for _ in range(rng.randint(1, 5))) for _ in range(10))
            for pattern in patterns:
                assert searcher.search(pattern) == brute_force(text, pattern), (text, pattern)

    def test_overlapping_occurrences(self) -> None:
        index = PatternIndexBuilder("aaaaaa", 2, 3).build_index()
        assert PatternSearcher(index).search("aa") == {0, 1, 2, 3, 4}

    def test_empty_text(self) -> None:
        index = PatternIndexBuilder("", 5, 5).build_index()
        assert PatternSearcher(index).search("a") == set()


class TestResolve:
    def test_every_row_resolves_to_its_suffix(self, banana_text) -> None:
        index = PatternIndexBuilder(banana_text, 3, 4).build_index()
        searcher = PatternSearcher(index)
        offsets = sorted(searcher.resolve(row) for row in range(index.n))
        assert offsets == list(range(index.n))

    def test_corrupted_sample_raises(self, banana_index) -> None:
        broken = PatternIndex(
            alphabet=banana_index.alphabet,
            fm=banana_index.fm,
            sample={},
            sample_interval=banana_index.sample_interval,
        )
        with pytest.raises(IndexError, match="LF steps"):
            PatternSearcher(broken).search("ana")
