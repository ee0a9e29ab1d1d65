"""Text plot of an expression in x over [0, 4*pi] and [-1, 1]."""

import argparse
import math
import sys

from graphplot.evaluate import EvaluationError, evaluate
from graphplot.parse import ExpressionError, to_postfix, validate_expression

HEIGHT = 25
WIDTH = 80
STEP_Y = 2.0 / HEIGHT
STEP_X = 4.0 * math.pi / (WIDTH - 1)


def _frange(start, stop, step):
    value = start
    while value <= stop:
        yield value
        value += step


def _value_at(postfix, x):
    try:
        return evaluate(postfix, x)
    except EvaluationError:
        return None


def render_postfix(postfix):
    """Render a postfix expression as rows of '*' and '.' ending in newlines."""
    values = [_value_at(postfix, x) for x in _frange(0.0, 4.0 * math.pi, STEP_X)]
    half = STEP_Y / 2.0
    rows = (
        "".join(
            "*" if value is not None and y - half <= value <= y + half else "."
            for value in values
        )
        for y in _frange(-1.0, 1.0, STEP_Y)
    )
    return "".join(row + "\n" for row in rows)


def render(expression):
    """Validate and render an infix expression; raises ExpressionError if invalid."""
    return render_postfix(to_postfix(validate_expression(expression)))


def main(argv=None):
    """Read one expression line from standard input and print its plot."""
    parser = argparse.ArgumentParser(
        description="Plot an expression in x read from standard input."
    )
    parser.parse_args(argv)
    line = sys.stdin.readline().rstrip("\n")
    try:
        output = render(line)
    except ExpressionError:
        output = "NULL"
    sys.stdout.write(output)
    return 0