"""Shape shared by step objects."""

from __future__ import annotations

from typing import Any, Protocol


class Step(Protocol):
    """
    A callable of one of the four StepKind shapes.
    Step classes also carry a class attribute ``kind`` which build_step
    checks against the configured kind; plain functions have none.
    """

    def __call__(self, *args: Any) -> Any: ...
