from dataclasses import dataclass
from functools import cached_property
from typing import Dict, List, Optional, Tuple

import numpy as np

from ..constants.constants import SENTINEL
from .errors import InputError


@dataclass(frozen=True)
class Alphabet:
    """
    Symbol <-> small integer code table for one text.
    The sentinel is always code 0, the remaining symbols follow in
    ascending character order, so comparing codes orders suffixes with
    the sentinel first whatever character was chosen for it.
    """
    symbols: Tuple[str, ...]
    sentinel: str = SENTINEL

    @classmethod
    def from_text(cls, raw: str, sentinel: str = SENTINEL) -> "Alphabet":
        return cls(symbols=(sentinel,) + tuple(sorted(set(raw))), sentinel=sentinel)

    @property
    def size(self) -> int:
        return len(self.symbols)

    @cached_property
    def codes(self) -> Dict[str, int]:
        return {s: i for i, s in enumerate(self.symbols)}

    def code(self, symbol: str) -> Optional[int]:
        return self.codes.get(symbol)

    def symbol(self, code: int) -> str:
        return self.symbols[code]

    def encode(self, text: str) -> np.ndarray:
        table = self.codes
        return np.fromiter((table[ch] for ch in text), dtype=np.int32, count=len(text))

    def encode_pattern(self, pattern: str) -> Optional[List[int]]:
        # None means the pattern cannot occur: unknown symbol or the sentinel itself
        table = self.codes
        out = []
        for ch in pattern:
            c = table.get(ch)
            if c is None or c == 0:
                return None
            out.append(c)
        return out

    def decode(self, codes) -> str:
        return "".join(self.symbols[c] for c in codes)


@dataclass(frozen=True)
class PreparedText:
    text: str               # sentinel-terminated
    alphabet: Alphabet
    codes: np.ndarray       # text encoded through the alphabet, codes[-1] == 0

    def __len__(self) -> int:
        return len(self.text)


def prepare_text(raw: str, sentinel: str = SENTINEL) -> PreparedText:
    """
    Append the sentinel to `raw`.

    Raises InputError if the sentinel already occurs in the text: it has
    to appear exactly once.
    """
    if len(sentinel) != 1:
        raise InputError(f"Sentinel must be a single symbol, got {sentinel!r}")
    if sentinel in raw:
        raise InputError(
            f"Text contains the sentinel symbol {sentinel!r} at offset {raw.index(sentinel)}"
        )
    alphabet = Alphabet.from_text(raw, sentinel)
    text = raw + sentinel
    return PreparedText(text=text, alphabet=alphabet, codes=alphabet.encode(text))
