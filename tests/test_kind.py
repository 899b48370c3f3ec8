import pytest

from wheelrt.kind import Token, TokenKind, to_string


def test_eof_has_special_name():
    assert to_string(TokenKind.EOF_) == "EOF"


def test_right_parent_name():
    assert to_string(TokenKind.RIGHT_PARENT) == "RIGHT_PARENT"


@pytest.mark.parametrize("kind", [k for k in TokenKind if k is not TokenKind.EOF_])
def test_names_match_members(kind):
    assert to_string(kind) == kind.name


def test_unknown_value_falls_back():
    assert to_string(999) == "IDENTIFIER"


def test_int_values_accepted():
    assert to_string(int(TokenKind.ARROW)) == "ARROW"


def test_kinds_are_ordered_from_zero():
    assert to_string(0) == "EOF"
    assert to_string(1) == "TAB"
    assert to_string(2) == "NEWLINE"
    assert to_string(3) == "SPACE"
    assert to_string(len(TokenKind) - 1) == "RIGHT_PARENT"
    assert to_string(len(TokenKind)) == "IDENTIFIER"


def test_token_fields_and_length():
    token = Token(TokenKind.IDENT, "dummy_token", 1, 12)
    assert token.kind is TokenKind.IDENT
    assert token.text == "dummy_token"
    assert (token.start, token.end) == (1, 12)
    assert len(token) == len("dummy_token")


def test_token_is_immutable():
    token = Token(TokenKind.IDENT, "x", 0, 1)
    with pytest.raises(AttributeError):
        token.text = "y"
    assert token.text == "x"
    assert len(token) == 1