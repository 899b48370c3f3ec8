import io

import pytest

from wheelrt.interpreter import (
    DefineGlobalStatement,
    Operand,
    OperandKind,
    PrintlnStatement,
    RuntimeErrorCode,
    Value,
    ValueKind,
    WheelInterpreter,
    runtime_error_message,
)
from wheelrt.kind import Token, TokenKind


def const(value):
    return Operand(OperandKind.Constant, constant=value)


def ref(name, token=None):
    return Operand(OperandKind.Binding, binding=name, token=token)


@pytest.fixture
def out():
    return io.StringIO()


@pytest.fixture
def interp(out):
    return WheelInterpreter(output=out)


@pytest.mark.parametrize(
    "code, message",
    [
        (RuntimeErrorCode.DuplicateBinding, "duplicate runtime binding"),
        (RuntimeErrorCode.UnsupportedStatement, "unsupported executable statement"),
        (RuntimeErrorCode.UnknownBinding, "unknown runtime binding"),
        (9999, "unknown runtime error"),
    ],
)
def test_runtime_error_message(code, message):
    assert runtime_error_message(code) == message


def test_error_codes(interp):
    interp.execute([
        DefineGlobalStatement(None, 1, const(Value.from_int(1))),
        DefineGlobalStatement(None, 1, const(Value.from_int(2))),
        None,
        DefineGlobalStatement(None, 2, ref(77)),
    ])
    assert [int(e.code) for e in interp.errors] == [4001, 4002, 4003]


def test_value_constructors():
    assert Value.from_int(10).kind is ValueKind.Int
    assert Value.from_int(10).int_value == 10
    assert Value.from_string("hi").kind is ValueKind.String
    assert Value.from_string("hi").string_value == "hi"


def test_define_global_binds_value(interp):
    ok = interp.execute([DefineGlobalStatement(None, 1, const(Value.from_int(10)))])
    assert ok is True
    assert interp.find_value(1) == Value.from_int(10)
    assert len(interp.bindings) == 1
    assert interp.errors == ()


def test_define_global_from_binding(interp):
    ok = interp.execute([
        DefineGlobalStatement(None, 1, const(Value.from_string("a"))),
        DefineGlobalStatement(None, 2, ref(1)),
    ])
    assert ok
    assert interp.find_value(2) == Value.from_string("a")


def test_duplicate_binding(interp):
    token = Token(TokenKind.IDENT, "x", 4, 5)
    ok = interp.execute([
        DefineGlobalStatement(None, 1, const(Value.from_int(1))),
        DefineGlobalStatement(token, 1, const(Value.from_int(2))),
    ])
    assert ok is False
    assert [e.code for e in interp.errors] == [RuntimeErrorCode.DuplicateBinding]
    assert interp.errors[0].token is token
    assert interp.errors[0].message == "duplicate runtime binding"
    assert interp.find_value(1) == Value.from_int(1)


def test_unknown_binding_uses_operand_token(interp):
    token = Token(TokenKind.IDENT, "y", 8, 9)
    ok = interp.execute([DefineGlobalStatement(None, 1, ref(42, token))])
    assert not ok
    assert interp.errors[0].code is RuntimeErrorCode.UnknownBinding
    assert interp.errors[0].token is token
    assert interp.find_value(1) is None


def test_execution_continues_after_error(interp):
    ok = interp.execute([
        DefineGlobalStatement(None, 1, ref(99)),
        DefineGlobalStatement(None, 2, const(Value.from_int(5))),
        DefineGlobalStatement(None, 3, ref(98)),
    ])
    assert not ok
    assert len(interp.errors) == 2
    assert interp.find_value(2) == Value.from_int(5)


def test_println_without_arguments(interp, out):
    assert interp.execute([PrintlnStatement(None, "hello world")])
    assert out.getvalue() == "hello world\n"


def test_println_substitutes_placeholder(interp, out):
    assert interp.execute([PrintlnStatement(None, "value: {}", (const(Value.from_int(42)),))])
    assert out.getvalue() == "value: 42\n"


def test_println_with_string_binding(interp, out):
    ok = interp.execute([
        DefineGlobalStatement(None, 1, const(Value.from_string("wheel"))),
        PrintlnStatement(None, "{}", (ref(1),)),
    ])
    assert ok
    assert out.getvalue() == "wheel\n"


def test_println_leaves_extra_placeholders(interp, out):
    assert interp.execute([PrintlnStatement(None, "{} {}", (const(Value.from_string("a")),))])
    assert out.getvalue() == "a {}\n"


def test_println_too_many_arguments(interp, out):
    token = Token(TokenKind.IDENT, "println", 0, 7)
    statement = PrintlnStatement(token, "no slot", (const(Value.from_int(1)),))
    assert interp.execute([statement]) is False
    assert interp.errors[0].code is RuntimeErrorCode.UnsupportedStatement
    assert interp.errors[0].token is token
    assert out.getvalue() == ""


def test_println_unknown_binding_prints_nothing(interp, out):
    assert not interp.execute([PrintlnStatement(None, "x={}", (ref(7),))])
    assert interp.errors[0].code is RuntimeErrorCode.UnknownBinding
    assert out.getvalue() == ""


def test_println_defaults_to_stdout(capsys):
    interp = WheelInterpreter()
    assert interp.execute([PrintlnStatement(None, "to stdout")])
    assert capsys.readouterr().out == "to stdout\n"


def test_none_statement_is_unsupported(interp):
    assert interp.execute([None]) is False
    assert interp.errors[0].code is RuntimeErrorCode.UnsupportedStatement
    assert interp.errors[0].token is None


def test_unknown_statement_type_is_unsupported(interp):
    assert not interp.execute(["not a statement"])
    assert interp.errors[0].code is RuntimeErrorCode.UnsupportedStatement


def test_execute_resets_previous_state(interp):
    interp.execute([DefineGlobalStatement(None, 1, ref(5))])
    assert interp.errors
    assert interp.execute([DefineGlobalStatement(None, 2, const(Value.from_int(3)))])
    assert interp.errors == ()
    assert interp.find_value(1) is None
    assert interp.find_value(2) == Value.from_int(3)


def test_reset_clears_everything(interp):
    interp.execute([
        DefineGlobalStatement(None, 1, const(Value.from_int(1))),
        DefineGlobalStatement(None, 2, ref(9)),
    ])
    interp.reset()
    assert interp.bindings == ()
    assert interp.errors == ()


def test_empty_program_succeeds(interp):
    assert interp.execute([]) is True
    assert interp.execute(None) is True
    assert interp.bindings == ()