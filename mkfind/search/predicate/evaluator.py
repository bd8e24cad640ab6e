"""Interpreter for advanced search expressions."""

from collections.abc import Callable
from dataclasses import dataclass

from ...common.clock import Clock, SystemClock
from ..matcher import Matcher
from ..text.timestamps import extract_timestamp, future, past, today
from .ast import And, Call, Const, Node, Not, Or, TimestampRef
from .parser import parse


@dataclass(frozen=True, slots=True)
class UnitContext:
    """Values an expression is evaluated against."""

    text: str
    ts: int
    now: int


def _contains(ctx: UnitContext, needle: str) -> bool:
    return needle.lower() in ctx.text


BUILTINS: dict[str, Callable[..., bool]] = {
    "$": _contains,
    "past": lambda ctx, ts, days=None: past(ts, days, now=ctx.now),
    "future": lambda ctx, ts, days=None: future(ts, days, now=ctx.now),
    "today": lambda ctx, ts: today(ts, now=ctx.now),
}


def _resolve(arg: str | int | TimestampRef, ctx: UnitContext) -> str | int:
    if isinstance(arg, TimestampRef):
        return ctx.ts
    return arg


def _evaluate(node: Node, ctx: UnitContext) -> bool:
    if isinstance(node, Const):
        return node.value
    if isinstance(node, Not):
        return not _evaluate(node.operand, ctx)
    if isinstance(node, And):
        return _evaluate(node.left, ctx) and _evaluate(node.right, ctx)
    if isinstance(node, Or):
        return _evaluate(node.left, ctx) or _evaluate(node.right, ctx)
    if isinstance(node, Call):
        return BUILTINS[node.name](ctx, *(_resolve(arg, ctx) for arg in node.args))
    raise TypeError(f"Unsupported node: {node!r}")


def evaluate(node: Node, unit: str, now: int) -> bool:
    """Evaluate an expression against a unit; ``ts`` is the unit's first timestamp."""
    ctx = UnitContext(text=unit.lower(), ts=extract_timestamp(unit), now=now)
    return _evaluate(node, ctx)


class PredicateMatcher(Matcher):
    """Matches units for which an advanced expression holds.

    The current time is read once, when the matcher is built, so every unit
    of a search is judged against the same instant.
    """

    def __init__(self, expression: str, clock: Clock | None = None):
        """Parse the expression; raises QueryError when it is malformed."""
        self.node = parse(expression)
        self.now = (clock or SystemClock()).now_ms()

    def match(self, unit: str) -> int:
        """Return 1 if the expression holds for the unit, else 0."""
        return 1 if evaluate(self.node, unit, self.now) else 0
