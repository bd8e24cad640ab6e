"""Recursive-descent parser for advanced search expressions.

Grammar::

    expr    := and ('||' and)*
    and     := unary ('&&' unary)*
    unary   := '!' unary | term
    term    := '(' expr ')' | call | 'true' | 'false'
    call    := name '(' [arg (',' arg)*] ')'
    name    := '$' | 'past' | 'future' | 'today'
    arg     := string | integer | 'ts'

Strings are single- or double-quoted and support backslash escapes.
"""

import re
from dataclasses import dataclass
from enum import StrEnum

from ...errors import QueryError
from .ast import And, Call, Const, Node, Not, Or, TimestampRef


class TokenKind(StrEnum):
    """Token kind."""

    AND = "&&"
    OR = "||"
    NOT = "!"
    LPAREN = "("
    RPAREN = ")"
    COMMA = ","
    DOLLAR = "$"
    STRING = "string"
    INTEGER = "integer"
    IDENT = "identifier"
    END = "end of expression"


@dataclass(frozen=True, slots=True)
class Token:
    """Lexical token."""

    kind: TokenKind
    value: str
    pos: int


@dataclass(frozen=True, slots=True)
class Signature:
    """Parameter types of a built-in function; trailing parameters past ``required`` are optional."""

    params: tuple[type, ...]
    required: int


BUILTIN_SIGNATURES: dict[str, Signature] = {
    "$": Signature(params=(str,), required=1),
    "past": Signature(params=(TimestampRef, int), required=1),
    "future": Signature(params=(TimestampRef, int), required=1),
    "today": Signature(params=(TimestampRef,), required=1),
}

_TYPE_NAMES = {str: "a string", int: "an integer", TimestampRef: "ts"}

_TOKEN_RE = re.compile(
    r"""
    (?P<ws>\s+)
    |(?P<and>&&)
    |(?P<or>\|\|)
    |(?P<not>!)
    |(?P<lparen>\()
    |(?P<rparen>\))
    |(?P<comma>,)
    |(?P<dollar>\$)
    |(?P<integer>\d+)
    |(?P<ident>[A-Za-z_]\w*)
    |(?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")
    """,
    re.VERBOSE | re.DOTALL | re.ASCII,
)

_GROUP_KINDS = {
    "and": TokenKind.AND,
    "or": TokenKind.OR,
    "not": TokenKind.NOT,
    "lparen": TokenKind.LPAREN,
    "rparen": TokenKind.RPAREN,
    "comma": TokenKind.COMMA,
    "dollar": TokenKind.DOLLAR,
    "integer": TokenKind.INTEGER,
    "ident": TokenKind.IDENT,
    "string": TokenKind.STRING,
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


def _unquote(literal: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES.get(m[1], m[1]), literal[1:-1])


def tokenize(expression: str) -> list[Token]:
    """Split an expression into tokens, ending with an END token."""
    tokens: list[Token] = []
    pos = 0
    while pos < len(expression):
        match = _TOKEN_RE.match(expression, pos)
        if match is None:
            char = expression[pos]
            if char in "'\"":
                raise QueryError(f"Unterminated string starting at position {pos}")
            raise QueryError(f"Unexpected character {char!r} at position {pos}")
        group = match.lastgroup
        if group != "ws":
            value = _unquote(match[0]) if group == "string" else match[0]
            tokens.append(Token(kind=_GROUP_KINDS[group], value=value, pos=pos))
        pos = match.end()
    tokens.append(Token(kind=TokenKind.END, value="", pos=pos))
    return tokens


class Parser:
    """Parses one expression into a syntax tree."""

    def __init__(self, expression: str):
        """Initialize the parser."""
        self.tokens = tokenize(expression)
        self.index = 0

    def parse(self) -> Node:
        """Parse the whole expression."""
        node = self._parse_or()
        self._expect(TokenKind.END)
        return node

    def _peek(self) -> Token:
        return self.tokens[self.index]

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        if token.kind != TokenKind.END:
            self.index += 1
        return token

    def _accept(self, kind: TokenKind) -> bool:
        if self._peek().kind == kind:
            self._advance()
            return True
        return False

    def _expect(self, kind: TokenKind) -> Token:
        token = self._peek()
        if token.kind != kind:
            raise QueryError(f"Expected {kind.value!r} but found {_describe(token)} at position {token.pos}")
        return self._advance()

    def _parse_or(self) -> Node:
        node = self._parse_and()
        while self._accept(TokenKind.OR):
            node = Or(left=node, right=self._parse_and())
        return node

    def _parse_and(self) -> Node:
        node = self._parse_unary()
        while self._accept(TokenKind.AND):
            node = And(left=node, right=self._parse_unary())
        return node

    def _parse_unary(self) -> Node:
        if self._accept(TokenKind.NOT):
            return Not(operand=self._parse_unary())
        return self._parse_term()

    def _parse_term(self) -> Node:
        token = self._peek()
        if self._accept(TokenKind.LPAREN):
            node = self._parse_or()
            self._expect(TokenKind.RPAREN)
            return node
        if token.kind == TokenKind.DOLLAR:
            self._advance()
            return self._parse_call("$", token)
        if token.kind == TokenKind.IDENT:
            if token.value in ("true", "false"):
                self._advance()
                return Const(value=token.value == "true")
            if token.value in BUILTIN_SIGNATURES:
                self._advance()
                return self._parse_call(token.value, token)
            if token.value == "ts":
                raise QueryError(f"'ts' can only be used as a function argument (position {token.pos})")
            raise QueryError(f"Unknown identifier {token.value!r} at position {token.pos}")
        raise QueryError(f"Unexpected {_describe(token)} at position {token.pos}")

    def _parse_call(self, name: str, name_token: Token) -> Call:
        self._expect(TokenKind.LPAREN)
        args: list[str | int | TimestampRef] = []
        if not self._accept(TokenKind.RPAREN):
            args.append(self._parse_argument())
            while self._accept(TokenKind.COMMA):
                args.append(self._parse_argument())
            self._expect(TokenKind.RPAREN)
        _check_signature(name, args, name_token.pos)
        return Call(name=name, args=tuple(args))

    def _parse_argument(self) -> str | int | TimestampRef:
        token = self._advance()
        if token.kind == TokenKind.STRING:
            return token.value
        if token.kind == TokenKind.INTEGER:
            return int(token.value)
        if token.kind == TokenKind.IDENT and token.value == "ts":
            return TimestampRef()
        raise QueryError(f"Unexpected {_describe(token)} in argument list at position {token.pos}")


def _describe(token: Token) -> str:
    if token.kind == TokenKind.END:
        return "end of expression"
    return f"{token.kind.value} {token.value!r}"


def _check_signature(name: str, args: list[str | int | TimestampRef], pos: int) -> None:
    signature = BUILTIN_SIGNATURES[name]
    if not signature.required <= len(args) <= len(signature.params):
        if signature.required == len(signature.params):
            expected = str(signature.required)
        else:
            expected = f"{signature.required} to {len(signature.params)}"
        raise QueryError(f"{name}() takes {expected} argument(s) but got {len(args)} (position {pos})")
    for i, (arg, param) in enumerate(zip(args, signature.params), start=1):
        if not isinstance(arg, param):
            raise QueryError(f"Argument {i} of {name}() must be {_TYPE_NAMES[param]} (position {pos})")


def parse(expression: str) -> Node:
    """Parse an advanced search expression."""
    return Parser(expression).parse()
