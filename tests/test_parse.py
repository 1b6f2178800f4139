"""Tests for parsing assignment snippets."""

import pytest

import lrvalues
from lrvalues import (
    Address, ArrayLit, Assign, Binary, Bool, Call, Declare, Deref, ExprStmt,
    Field, Index, Name, Number, RecordLit,
)


def test_parse_declarations():
    script = lrvalues.parse("var x = 1\nconst y = 2")
    first, second = script.statements

    assert first.matches(Declare("x", False, Number(1)))
    assert second.matches(Declare("y", True, Number(2)))


def test_parse_assignment():
    script = lrvalues.parse("x = x + y")
    (statement,) = script.statements

    expected = Assign(Name("x"), Binary("+", Name("x"), Name("y")))
    assert statement.matches(expected)
    assert statement.target.name == "x"
    assert statement.value.op == "+"


def test_parse_separators_and_comments():
    source = """
    // leading comment
    var x = 1; const y = 2

    x = x + y  // trailing comment
    """
    script = lrvalues.parse(source)
    assert [type(s) for s in script.statements] == [Declare, Declare, Assign]


def test_parse_empty():
    assert lrvalues.parse("").statements == []
    assert lrvalues.parse("\n\n;\n").statements == []


def test_parse_positions():
    script = lrvalues.parse("var x = 1\n  x = 2")
    assert script.statements[0].position == (1, 1)
    assert script.statements[1].position == (2, 3)
    assert script.statements[1].value.position == (2, 7)


def test_parse_literal_targets():
    script = lrvalues.parse("[1, 1][0] = 3\nS{i: 1, b: true}.i = 3")
    array_assign, record_assign = script.statements

    assert array_assign.matches(
        Assign(Index(ArrayLit([Number(1), Number(1)]), Number(0)), Number(3))
    )
    expected = Assign(
        Field(RecordLit("S", ["i", "b"], [Number(1), Bool(True)]), "i"),
        Number(3),
    )
    assert record_assign.matches(expected)


def test_parse_expression_statement():
    (statement,) = lrvalues.parse("f(a, a[0] + 2)").statements
    assert isinstance(statement, ExprStmt)
    call = statement.expr
    assert isinstance(call, Call)
    assert call.func.matches(Name("f"))
    assert len(call.args) == 2


def test_parse_empty_literals():
    assert lrvalues.parse_expr("[]").matches(ArrayLit([]))
    assert lrvalues.parse_expr("S{}").matches(RecordLit("S", [], []))
    assert lrvalues.parse_expr("f()").matches(Call(Name("f"), []))


def test_parse_pointer_operators():
    expr = lrvalues.parse_expr("*r")
    assert expr.matches(Deref(Name("r")))
    expr = lrvalues.parse_expr("&x.i")
    assert expr.matches(Address(Field(Name("x"), "i")))


def test_binary_is_left_associative():
    expr = lrvalues.parse_expr("a - b - c")
    assert expr.matches(Binary("-", Binary("-", Name("a"), Name("b")), Name("c")))


def test_parentheses_group():
    expr = lrvalues.parse_expr("a - (b - c)")
    assert expr.matches(Binary("-", Name("a"), Binary("-", Name("b"), Name("c"))))


@pytest.mark.parametrize("text", [
    "x + y",
    "a - (b - c)",
    "[1, 1][0]",
    "S{i: 1, b: true}.i",
    "f(x, y).i",
    "*(p + 1)",
    "&x",
    "false",
])
def test_unparse_expression(text):
    assert lrvalues.parse_expr(text).unparse() == text


def test_unparse_script():
    source = "var x = 1\nconst y = 2\nx = x + y"
    assert lrvalues.parse(source).unparse() == source


def test_find_all():
    script = lrvalues.parse("var x = 1\nx = x + y")
    names = [node.name for node in script.find_all(Name)]
    assert names == ["x", "x", "y"]


def test_parse_error_position():
    with pytest.raises(lrvalues.ParseError) as info:
        lrvalues.parse("var x = 1\nx = = 2")
    assert info.value.position[0] == 2
    assert info.value.message


def test_parse_error_bad_character():
    with pytest.raises(lrvalues.ParseError) as info:
        lrvalues.parse("x = 1 ? 2")
    assert info.value.position == (1, 7)


def test_parse_error_statements_need_separator():
    with pytest.raises(lrvalues.ParseError):
        lrvalues.parse("x = 1 y = 2")


def test_parse_expr_rejects_statement():
    with pytest.raises(lrvalues.ParseError):
        lrvalues.parse_expr("x = 1")


def test_lark_tree():
    tree = lrvalues.lark_tree("x = 1")
    assert tree.data == "start"
    assert tree.children[0].data == "assign"
