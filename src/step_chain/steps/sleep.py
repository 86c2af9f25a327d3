"""Action step that blocks the calling thread."""

from __future__ import annotations

import time

from step_chain.models.step_kind import StepKind


class Sleep:
    kind = StepKind.ACTION

    def __init__(self, seconds: float) -> None:
        if seconds < 0:
            raise ValueError(f"seconds must be >= 0, got {seconds}.")
        self.seconds = seconds

    def __call__(self) -> None:
        time.sleep(self.seconds)
