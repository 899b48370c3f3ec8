"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

import enum
from typing import Iterable, Iterator

from wheelrt.kind import Token
from wheelrt.logging_utils import not_null

SymbolID = int


class NodeKind(enum.Enum):
    FunctionDeclaration = enum.auto()
    BlockStatement = enum.auto()
    ExpressionStatement = enum.auto()
    LiteralExpression = enum.auto()
    IdentifierExpression = enum.auto()
    CallExpression = enum.auto()
    VariableDeclaration = enum.auto()
    ErrorStatement = enum.auto()


class Node:
    """Base of every tree node: its kind and the token it starts at."""

    __slots__ = ("node_kind", "token")

    def __init__(self, node_kind: NodeKind, token: Token) -> None:
        not_null(token)
        self.node_kind = node_kind
        self.token = token

    def _fields(self) -> Iterator[tuple[str, object]]:
        seen: set[str] = set()
        for cls in reversed(type(self).__mro__):
            for name in getattr(cls, "__slots__", ()):
                if name not in seen:
                    seen.add(name)
                    yield name, getattr(self, name)

    def __repr__(self) -> str:
        body = ", ".join(f"{name}={value!r}" for name, value in self._fields())
        return f"{type(self).__name__}({body})"


class StatementNode(Node):
    """A node that stands as a statement."""

    __slots__ = ()


class ExpressionNode(Node):
    """A node that yields a value."""

    __slots__ = ()


class FunctionDeclaration(StatementNode):
    __slots__ = ("func_name", "func_params", "func_body")

    def __init__(
        self,
        token: Token,
        func_name: SymbolID,
        func_params: Iterable[SymbolID],
        func_body: StatementNode | None,
    ) -> None:
        super().__init__(NodeKind.FunctionDeclaration, token)
        self.func_name = func_name
        self.func_params = list(func_params)
        self.func_body = func_body


class BlockStatement(StatementNode):
    __slots__ = ("statements",)

    def __init__(self, token: Token, statements: Iterable[StatementNode]) -> None:
        super().__init__(NodeKind.BlockStatement, token)
        self.statements = list(statements)


class ExpressionStatement(StatementNode):
    __slots__ = ("expression",)

    def __init__(self, token: Token, expression: ExpressionNode | None) -> None:
        super().__init__(NodeKind.ExpressionStatement, token)
        self.expression = expression


class LiteralExpression(ExpressionNode):
    __slots__ = ()

    def __init__(self, token: Token) -> None:
        super().__init__(NodeKind.LiteralExpression, token)


class IdentifierExpression(ExpressionNode):
    __slots__ = ("identifier_id",)

    def __init__(self, token: Token, identifier_id: SymbolID) -> None:
        super().__init__(NodeKind.IdentifierExpression, token)
        self.identifier_id = identifier_id


class CallExpression(ExpressionNode):
    __slots__ = ("callee", "arguments")

    def __init__(
        self,
        token: Token,
        callee: SymbolID,
        arguments: Iterable[ExpressionNode],
    ) -> None:
        super().__init__(NodeKind.CallExpression, token)
        self.callee = callee
        self.arguments = list(arguments)


class VariableDeclaration(StatementNode):
    __slots__ = ("var_type", "var_name", "initializer")

    def __init__(
        self,
        token: Token,
        var_type: SymbolID,
        var_name: SymbolID,
        initializer: ExpressionNode | None,
    ) -> None:
        super().__init__(NodeKind.VariableDeclaration, token)
        self.var_type = var_type
        self.var_name = var_name
        self.initializer = initializer


class ErrorStatement(StatementNode):
    """Placeholder left in the tree where a statement failed to parse."""

    __slots__ = ()

    def __init__(self, token: Token) -> None:
        super().__init__(NodeKind.ErrorStatement, token)