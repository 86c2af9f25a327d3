"""Producer step returning a bound value."""

from __future__ import annotations

from typing import Any

from step_chain.models.step_kind import StepKind


class Constant:
    kind = StepKind.PRODUCER

    def __init__(self, value: Any) -> None:
        self.value = value

    def __call__(self) -> Any:
        return self.value
