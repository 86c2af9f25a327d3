"""Model types for chain configuration."""

from step_chain.models.chain_spec import ChainSpec
from step_chain.models.loaded_chain_file import LoadedChainFile
from step_chain.models.step_kind import StepKind
from step_chain.models.step_spec import StepSpec

__all__ = [
    "ChainSpec",
    "LoadedChainFile",
    "StepKind",
    "StepSpec",
]
