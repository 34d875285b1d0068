"""Strict boolean test groups with colored failure reporting."""

from strictcheck.approx import EPSILON, approx_equal
from strictcheck.config import RunnerSettings, load_config
from strictcheck.expression import TestExpression, as_expression
from strictcheck.runner import TestRunner, get_runner, run_group, use_runner
from strictcheck.style import ColorMode

__all__ = [
    "EPSILON",
    "ColorMode",
    "RunnerSettings",
    "TestExpression",
    "TestRunner",
    "approx_equal",
    "as_expression",
    "get_runner",
    "load_config",
    "run_group",
    "use_runner",
]
