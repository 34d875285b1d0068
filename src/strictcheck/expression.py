"""Deferred test expressions and call-site source capture."""

from __future__ import annotations

import ast
import linecache
from collections import defaultdict
from dataclasses import dataclass
from functools import lru_cache
from types import CodeType, LambdaType
from typing import Any, Callable

Thunk = Callable[[], Any]


@dataclass(frozen=True)
class TestExpression:
    """A zero-argument computation plus the text it was written as.

    Attributes:
        source_text: Literal text of the expression, used only when reporting
            a failure. Captured before the expression is evaluated.
        thunk: The deferred computation. Called exactly once per evaluation.
    """

    __test__ = False

    source_text: str
    thunk: Thunk

    def evaluate(self) -> bool:
        return bool(self.thunk())


def as_expression(value: Any) -> TestExpression:
    """Normalize one user-supplied test form into a ``TestExpression``.

    Accepts an existing ``TestExpression``, a ``(callable, source_text)``
    pair, or a bare zero-argument callable whose text is recovered from its
    definition site.
    """
    if isinstance(value, TestExpression):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        thunk, text = value
        if callable(thunk) and isinstance(text, str):
            return TestExpression(source_text=text, thunk=thunk)
    if callable(value):
        return TestExpression(source_text=source_text_of(value), thunk=value)
    raise TypeError(
        f"Test expressions must be deferred (a callable or a (callable, text) "
        f"pair), got {type(value).__name__}: {value!r}"
    )


def source_text_of(fn: Callable[..., Any]) -> str:
    """Best-effort literal text for a callable.

    Lambdas yield the source of their body expression. Anything else, or a
    lambda whose source file cannot be read, falls back to its name.
    """
    if isinstance(fn, LambdaType) and fn.__name__ == "<lambda>":
        text = _lambda_body_source(fn)
        if text is not None:
            return text
    name = getattr(fn, "__qualname__", None)
    if name is None:
        return repr(fn)
    return f"{name}()"


def _lambda_body_source(fn: LambdaType) -> str | None:
    code = fn.__code__
    lines = linecache.getlines(code.co_filename, fn.__globals__)
    if not lines:
        return None
    source = "".join(lines)
    lambdas_by_line = _lambdas_by_line(source)
    if lambdas_by_line is None:
        return None

    candidates = list(lambdas_by_line.get(code.co_firstlineno, ()))
    if len(candidates) > 1:
        candidates = _narrow_by_position(candidates, code)
    if len(candidates) != 1:
        return None
    return ast.get_source_segment(source, candidates[0].body)


def _narrow_by_position(candidates: list[ast.Lambda], code: CodeType) -> list[ast.Lambda]:
    # Several lambdas start on the same line: pick the one whose body contains
    # the compiled instructions, preferring the innermost on a tie.
    positions = [
        (line, end_line, col, end_col)
        for line, end_line, col, end_col in code.co_positions()
        if None not in (line, end_line, col, end_col)
    ]

    def hits(node: ast.Lambda) -> int:
        body = node.body
        start = (body.lineno, body.col_offset)
        end = (body.end_lineno, body.end_col_offset)
        return sum(
            1
            for line, end_line, col, end_col in positions
            if start <= (line, col) and (end_line, end_col) <= end
        )

    def span(node: ast.Lambda) -> tuple[int, int]:
        body = node.body
        return (body.end_lineno - body.lineno, body.end_col_offset - body.col_offset)

    scored = [(hits(node), node) for node in candidates]
    best = max(score for score, _ in scored)
    if best == 0:
        return []
    winners = [node for score, node in scored if score == best]
    return [min(winners, key=span)]


@lru_cache(maxsize=32)
def _lambdas_by_line(source: str) -> dict[int, tuple[ast.Lambda, ...]] | None:
    # Keyed on the full text so an edited file is parsed again.
    try:
        tree = ast.parse(source)
    except SyntaxError:
        return None
    found: dict[int, list[ast.Lambda]] = defaultdict(list)
    for node in ast.walk(tree):
        if isinstance(node, ast.Lambda):
            found[node.lineno].append(node)
    return {line: tuple(nodes) for line, nodes in found.items()}
