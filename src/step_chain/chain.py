"""Sequential executor threading a context value through steps."""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar

from step_chain.models.step_kind import StepKind

T = TypeVar("T")
R = TypeVar("R")


class StepChain(Generic[T]):
    """
    Holds one context value and applies operations to it in call order.
    Actions and consumers return the same chain; producers and transforms
    return a new chain holding the produced value.
    Exceptions raised by an operation are not caught.
    """

    def __init__(self, initial: T | None = None) -> None:
        self._context: T | None = initial

    @property
    def context(self) -> T | None:
        return self._context

    def apply_action(self, op: Callable[[], object]) -> StepChain[T]:
        op()
        return self

    def apply_consumer(self, op: Callable[[T], object]) -> StepChain[T]:
        op(self._context)  # type: ignore[arg-type]
        return self

    def apply_producer(self, op: Callable[[], R]) -> StepChain[R]:
        return StepChain(op())

    def apply_transform(self, op: Callable[[T], R]) -> StepChain[R]:
        return StepChain(op(self._context))  # type: ignore[arg-type]

    def apply(self, kind: StepKind | str, op: Callable[..., Any]) -> StepChain[Any]:
        kind = StepKind(kind)
        if kind is StepKind.ACTION:
            return self.apply_action(op)
        if kind is StepKind.CONSUMER:
            return self.apply_consumer(op)
        if kind is StepKind.PRODUCER:
            return self.apply_producer(op)
        return self.apply_transform(op)

    def __repr__(self) -> str:
        return f"StepChain({self._context!r})"
