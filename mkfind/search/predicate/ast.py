"""Syntax tree of advanced search expressions."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TimestampRef:
    """The ``ts`` identifier: the timestamp found in the current unit."""


@dataclass(frozen=True, slots=True)
class Const:
    """``true`` or ``false``."""

    value: bool


@dataclass(frozen=True, slots=True)
class Call:
    """Call of a built-in function."""

    name: str
    args: tuple[str | int | TimestampRef, ...]


@dataclass(frozen=True, slots=True)
class Not:
    """Logical negation."""

    operand: "Node"


@dataclass(frozen=True, slots=True)
class And:
    """Logical conjunction."""

    left: "Node"
    right: "Node"


@dataclass(frozen=True, slots=True)
class Or:
    """Logical disjunction."""

    left: "Node"
    right: "Node"


Node = Const | Call | Not | And | Or
