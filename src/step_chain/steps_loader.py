"""Step resolution and construction."""

from __future__ import annotations

import importlib
from functools import reduce
from typing import Any

from step_chain.models.step_kind import StepKind
from step_chain.models.step_spec import StepSpec
from step_chain.steps.base import Step


def import_symbol(path: str) -> Any:
    """
    Resolves "package.module:Name" or "package.module:Outer.attr".
    Import and attribute errors propagate unchanged.
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise ValueError(f"Expected import path 'module:Symbol', got {path!r}")
    module = importlib.import_module(module_name)
    return reduce(getattr, attr_path.split("."), module)


def build_step(spec: StepSpec) -> Step:
    """
    Resolves spec.uses and binds spec.params to it.
    Classes and factory functions are called with params; a plain callable
    with no params is used as is.
    """
    target = import_symbol(spec.uses)
    step = target(**spec.params) if isinstance(target, type) or spec.params else target
    if not callable(step):
        raise TypeError(f"Step {spec.id!r} resolved to non-callable {step!r}.")

    declared = getattr(step, "kind", None)
    if declared is not None and StepKind(declared) is not spec.kind:
        raise ValueError(
            f"Step {spec.id!r} is configured as {spec.kind.value} but {spec.uses} is a {StepKind(declared).value}."
        )
    return step
