import random
from typing import List, Set

import pytest

from matcher.index.build_index import PatternIndex, PatternIndexBuilder
from matcher.models.text import PreparedText, prepare_text


def brute_force(text: str, pattern: str) -> Set[int]:
    """Offsets i with text[i:i+len(pattern)] == pattern, by direct scanning."""
    return {i for i in range(len(text) - len(pattern) + 1) if text[i:i + len(pattern)] == pattern}


@pytest.fixture
def banana_text() -> str:
    return "panamabananas"


@pytest.fixture
def banana_prepared(banana_text) -> PreparedText:
    return prepare_text(banana_text)


@pytest.fixture
def banana_index(banana_text) -> PatternIndex:
    return PatternIndexBuilder(banana_text, checkpoint_interval=5, sample_interval=5).build_index()


@pytest.fixture
def random_texts() -> List[str]:
    """Small random texts over a DNA alphabet, plus a few degenerate ones."""
    rng = random.Random(1234)
    texts = ["", "a", "aaaa", "abab", "mississippi"]
    for length in (7, 16, 31, 64):
        for _ in range(3):
            texts.append("".join(rng.choice("ACGT") for _ in range(length)))
    return texts


@pytest.fixture
def sample_input_file(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("AATCGGGTTCAATCGGGGT\nATCG\nGGGT\n")
    return path
