from typing import Any

import pytest

from step_chain.chain import StepChain
from step_chain.models.step_kind import StepKind
from step_chain.steps import AssertEquals, Constant, Sleep, StringLength


class CallRecorder:
    def __init__(self, return_value: Any = None) -> None:
        self.return_value = return_value
        self.calls: list[tuple[Any, ...]] = []

    def __call__(self, *args: Any) -> Any:
        self.calls.append(args)
        return self.return_value


class Boom(Exception):
    pass


class Raiser:
    def __init__(self) -> None:
        self.calls = 0

    def __call__(self, *args: Any) -> Any:
        self.calls += 1
        raise Boom("step failed")


def test_empty_chain_keeps_initial_value() -> None:
    value = {"a": 1}

    assert StepChain(value).context is value
    assert StepChain().context is None


def test_apply_action_runs_once_and_keeps_context() -> None:
    action = CallRecorder(return_value="ignored")
    chain = StepChain("ctx")

    result = chain.apply_action(action)

    assert result is chain
    assert result.context == "ctx"
    assert action.calls == [()]


def test_apply_consumer_receives_context_and_keeps_it() -> None:
    consumer = CallRecorder(return_value="ignored")
    chain = StepChain(42)

    result = chain.apply_consumer(consumer)

    assert result is chain
    assert result.context == 42
    assert consumer.calls == [(42,)]


def test_apply_producer_replaces_context() -> None:
    producer = CallRecorder(return_value=[1, 2])
    chain = StepChain("old")

    result = chain.apply_producer(producer)

    assert result.context == [1, 2]
    assert producer.calls == [()]
    assert chain.context == "old"


def test_apply_transform_receives_context_and_replaces_it() -> None:
    transform = CallRecorder(return_value=3.5)

    result = StepChain("abc").apply_transform(transform)

    assert result.context == 3.5
    assert transform.calls == [("abc",)]


def test_each_step_sees_previous_output() -> None:
    seen: list[tuple[str, Any]] = []

    def produce() -> int:
        seen.append(("produce", None))
        return 5

    def double(value: int) -> int:
        seen.append(("double", value))
        return value * 2

    def check(value: int) -> None:
        seen.append(("check", value))

    def stringify(value: int) -> str:
        seen.append(("stringify", value))
        return f"n={value}"

    result = (
        StepChain("start")
        .apply_producer(produce)
        .apply_transform(double)
        .apply_consumer(check)
        .apply_transform(stringify)
    )

    assert seen == [("produce", None), ("double", 5), ("check", 10), ("stringify", 10)]
    assert result.context == "n=10"


def test_failure_propagates_and_stops_remaining_steps() -> None:
    before = CallRecorder(return_value=1)
    failing = Raiser()
    after_transform = CallRecorder(return_value=2)
    after_action = CallRecorder()

    with pytest.raises(Boom, match="step failed"):
        (
            StepChain()
            .apply_producer(before)
            .apply_transform(failing)
            .apply_transform(after_transform)
            .apply_action(after_action)
        )

    assert len(before.calls) == 1
    assert failing.calls == 1
    assert after_transform.calls == []
    assert after_action.calls == []


def test_apply_dispatches_by_kind() -> None:
    action = CallRecorder()
    consumer = CallRecorder()

    chain = StepChain(1)
    chain = chain.apply(StepKind.ACTION, action)
    chain = chain.apply("consumer", consumer)
    chain = chain.apply(StepKind.TRANSFORM, lambda value: value + 1)
    chain = chain.apply("producer", lambda: "fresh")

    assert action.calls == [()]
    assert consumer.calls == [(1,)]
    assert chain.context == "fresh"


def test_apply_rejects_unknown_kind() -> None:
    op = CallRecorder()

    with pytest.raises(ValueError):
        StepChain().apply("parallel", op)

    assert op.calls == []


def test_length_scenario_passes() -> None:
    result = (
        StepChain()
        .apply_producer(Constant(10))
        .apply_action(Sleep(0))
        .apply_transform(StringLength("0123456789"))
        .apply_consumer(AssertEquals(10))
    )

    assert result.context == 10


def test_length_scenario_fails_on_short_string() -> None:
    with pytest.raises(AssertionError):
        (
            StepChain()
            .apply_producer(lambda: 10)
            .apply_action(Sleep(0))
            .apply_transform(StringLength("012345678"))
            .apply_consumer(AssertEquals(10))
        )
