"""Helper for running configured chains."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from step_chain.chain import StepChain
from step_chain.chain_registry import ChainRegistry
from step_chain.models.step_spec import StepSpec
from step_chain.steps_loader import build_step


logger = logging.getLogger(__name__)

_UNSET: Any = object()


class ChainRunner:
    def __init__(self, chain_roots: list[Path] | None = None) -> None:
        self.registry: ChainRegistry = ChainRegistry(chain_roots or [])

    def run(self, chain_id: str, initial: Any = _UNSET) -> Any:
        loaded = self.registry.get(chain_id)
        if initial is _UNSET:
            initial = loaded.spec.initial
        logger.debug("Running chain %s from %s (%d steps)", chain_id, loaded.source, len(loaded.spec.steps))
        return self.run_steps(loaded.spec.steps, initial, notes=loaded.step_notes)

    def run_steps(self, steps: list[StepSpec], initial: Any = None, *, notes: dict[str, str] | None = None) -> Any:
        notes = notes or {}
        # Build all steps first; a bad spec fails before any step runs.
        built = [(spec, build_step(spec)) for spec in steps]
        chain: StepChain[Any] = StepChain(initial)
        for spec, op in built:
            note = notes.get(spec.id, "").splitlines()
            logger.debug("Running step %s (%s)%s", spec.id, spec.kind.value, f": {note[0]}" if note else "")
            chain = chain.apply(spec.kind, op)
        return chain.context
