"""Consumer step that checks the context against an expected value."""

from __future__ import annotations

from typing import Any

from step_chain.models.step_kind import StepKind


class AssertEquals:
    kind = StepKind.CONSUMER

    def __init__(self, expected: Any) -> None:
        self.expected = expected

    def __call__(self, actual: Any) -> None:
        if actual != self.expected:
            raise AssertionError(f"Expected {self.expected!r}, got {actual!r}.")
