import io

import pytest

from graphplot.parse import ExpressionError, to_postfix, validate_expression
from graphplot.plot import main, render, render_postfix


def _grid(text):
    assert text.endswith("\n")
    return text.rstrip("\n").split("\n")


def test_constant_minus_one_fills_first_row():
    rows = _grid(render("-1"))
    assert rows[0] == "*" * len(rows[0])
    assert all("*" not in row for row in rows[1:])


def test_undefined_everywhere_has_no_stars():
    assert "*" not in render("ln(-1)")


def test_rows_have_equal_width():
    rows = _grid(render("x"))
    assert len({len(row) for row in rows}) == 1
    assert set("".join(rows)) <= {"*", "."}


def test_render_matches_render_postfix():
    expression = "sin(x)*cos(x)"
    assert render(expression) == render_postfix(to_postfix(validate_expression(expression)))


def test_sine_has_a_star_in_every_column():
    rows = _grid(render("sin(x)"))
    for column in zip(*rows):
        assert "*" in column


def test_invalid_expression_raises():
    with pytest.raises(ExpressionError):
        render("foo")


def test_main_prints_plot(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("-1\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == render("-1")


def test_main_prints_null_on_invalid(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "NULL"