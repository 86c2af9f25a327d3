"""Bundled step objects."""

from step_chain.steps.assert_equals import AssertEquals
from step_chain.steps.base import Step
from step_chain.steps.constant import Constant
from step_chain.steps.random_string import RandomString
from step_chain.steps.sleep import Sleep
from step_chain.steps.string_length import StringLength

__all__ = ["AssertEquals", "Constant", "RandomString", "Sleep", "Step", "StringLength"]
