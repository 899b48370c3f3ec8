"""Executes a checked program of global definitions and println calls."""

from __future__ import annotations

import enum
import sys
from dataclasses import dataclass, field
from typing import Iterable, TextIO

from wheelrt.kind import Token

SymbolID = int


class ValueKind(enum.Enum):
    Int = enum.auto()
    String = enum.auto()


@dataclass(frozen=True)
class Value:
    """A runtime value: an integer or a string."""

    kind: ValueKind
    int_value: int = 0
    string_value: str = ""

    @staticmethod
    def from_int(value: int) -> Value:
        return Value(ValueKind.Int, int_value=value)

    @staticmethod
    def from_string(value: str) -> Value:
        return Value(ValueKind.String, string_value=value)

    def __str__(self) -> str:
        if self.kind is ValueKind.Int:
            return str(self.int_value)
        return self.string_value


class OperandKind(enum.Enum):
    Constant = enum.auto()
    Binding = enum.auto()


@dataclass(frozen=True)
class Operand:
    """Either a constant value or a reference to a named binding."""

    kind: OperandKind
    constant: Value | None = None
    binding: SymbolID | None = None
    token: Token | None = None


@dataclass(frozen=True)
class DefineGlobalStatement:
    token: Token | None
    name: SymbolID
    initializer: Operand


@dataclass(frozen=True)
class PrintlnStatement:
    token: Token | None
    format_string: str
    arguments: tuple[Operand, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RuntimeBinding:
    name: SymbolID
    value: Value


class RuntimeErrorCode(enum.IntEnum):
    DuplicateBinding = 4001
    UnsupportedStatement = 4002
    UnknownBinding = 4003


_MESSAGES = {
    RuntimeErrorCode.DuplicateBinding: "duplicate runtime binding",
    RuntimeErrorCode.UnsupportedStatement: "unsupported executable statement",
    RuntimeErrorCode.UnknownBinding: "unknown runtime binding",
}


def runtime_error_message(code: RuntimeErrorCode | int) -> str:
    """Fixed message text for a runtime error code."""
    try:
        return _MESSAGES[RuntimeErrorCode(code)]
    except ValueError:
        return "unknown runtime error"


@dataclass(frozen=True)
class RuntimeError:
    """A problem found while executing, with the token it points at."""

    code: RuntimeErrorCode
    token: Token | None
    message: str


class _StatementFailed(Exception):
    """Stops the statement being executed once its error is recorded."""


class WheelInterpreter:
    """Runs statements in order, collecting every runtime error.

    A failing statement is abandoned but execution carries on with the next,
    so one run can report several errors.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output
        self._bindings: list[RuntimeBinding] = []
        self._errors: list[RuntimeError] = []

    @property
    def bindings(self) -> tuple[RuntimeBinding, ...]:
        return tuple(self._bindings)

    @property
    def errors(self) -> tuple[RuntimeError, ...]:
        return tuple(self._errors)

    def execute(self, statements: Iterable[object] | None) -> bool:
        """Run a fresh program; True when no runtime error occurred."""
        self.reset()
        for statement in statements or ():
            try:
                self._execute_statement(statement)
            except _StatementFailed:
                continue
        return not self._errors

    def reset(self) -> None:
        self._bindings.clear()
        self._errors.clear()

    def find_value(self, name: SymbolID) -> Value | None:
        binding = self._find_binding(name)
        return binding.value if binding is not None else None

    def _find_binding(self, name: SymbolID) -> RuntimeBinding | None:
        return next((b for b in self._bindings if b.name == name), None)

    def _fail(self, code: RuntimeErrorCode, token: Token | None) -> _StatementFailed:
        self._errors.append(RuntimeError(code, token, runtime_error_message(code)))
        return _StatementFailed()

    def _execute_statement(self, statement: object) -> None:
        if isinstance(statement, DefineGlobalStatement):
            self._execute_define_global(statement)
        elif isinstance(statement, PrintlnStatement):
            self._execute_println(statement)
        else:
            raise self._fail(
                RuntimeErrorCode.UnsupportedStatement,
                getattr(statement, "token", None),
            )

    def _resolve_operand(self, operand: Operand) -> Value:
        if operand.kind is OperandKind.Constant and operand.constant is not None:
            return operand.constant
        if operand.kind is OperandKind.Binding:
            value = self.find_value(operand.binding)
            if value is None:
                raise self._fail(RuntimeErrorCode.UnknownBinding, operand.token)
            return value
        raise self._fail(RuntimeErrorCode.UnsupportedStatement, operand.token)

    def _execute_define_global(self, statement: DefineGlobalStatement) -> None:
        if self._find_binding(statement.name) is not None:
            raise self._fail(RuntimeErrorCode.DuplicateBinding, statement.token)
        value = self._resolve_operand(statement.initializer)
        self._bindings.append(RuntimeBinding(statement.name, value))

    def _execute_println(self, statement: PrintlnStatement) -> None:
        fmt = statement.format_string
        pieces: list[str] = []
        offset = 0
        for argument in statement.arguments:
            placeholder = fmt.find("{}", offset)
            if placeholder == -1:
                raise self._fail(RuntimeErrorCode.UnsupportedStatement, statement.token)
            pieces.append(fmt[offset:placeholder])
            pieces.append(str(self._resolve_operand(argument)))
            offset = placeholder + 2
        pieces.append(fmt[offset:])
        out = self._output if self._output is not None else sys.stdout
        print("".join(pieces), file=out)