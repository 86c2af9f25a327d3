"""Public package exports."""

from step_chain.chain import StepChain
from step_chain.models.step_kind import StepKind
from step_chain.runner import ChainRunner

__all__ = ["ChainRunner", "StepChain", "StepKind"]
