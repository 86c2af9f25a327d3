"""Enum of the four step shapes."""

from __future__ import annotations

from enum import Enum


class StepKind(str, Enum):
    ACTION = "action"  # () -> None
    CONSUMER = "consumer"  # (T) -> None
    PRODUCER = "producer"  # () -> R
    TRANSFORM = "transform"  # (T) -> R
