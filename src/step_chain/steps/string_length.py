"""Transform step measuring a string."""

from __future__ import annotations

from typing import Any, Sized

from step_chain.models.step_kind import StepKind


class StringLength:
    kind = StepKind.TRANSFORM

    def __init__(self, text: str | None = None) -> None:
        self.text = text

    def __call__(self, value: Any = None) -> int:
        # A bound text takes precedence over the context.
        target: Sized = self.text if self.text is not None else value
        return len(target)
