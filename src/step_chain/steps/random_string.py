"""Producer step returning a random string."""

from __future__ import annotations

import random
import string

from step_chain.models.step_kind import StepKind

DEFAULT_ALPHABET = string.ascii_letters + string.digits


class RandomString:
    kind = StepKind.PRODUCER

    def __init__(self, length: int = 10, alphabet: str = DEFAULT_ALPHABET, seed: int | None = None) -> None:
        if length < 0:
            raise ValueError(f"length must be >= 0, got {length}.")
        if not alphabet:
            raise ValueError("alphabet must not be empty.")
        self.length = length
        self.alphabet = alphabet
        self._random = random.Random(seed)

    def __call__(self) -> str:
        return "".join(self._random.choice(self.alphabet) for _ in range(self.length))
