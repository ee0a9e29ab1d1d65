"""Evaluation of postfix expressions."""

import math
import re
from functools import reduce

from graphplot.parse import (
    COS,
    CTG,
    DIV,
    LN,
    MINUS,
    MUL,
    PLUS,
    SIN,
    SPACE,
    SQRT,
    TG,
    VARIABLE,
    FUNCTIONS,
    is_operation,
)

_LEXEME_PATTERN = re.compile(r"[0-9x]+|.", re.DOTALL)


class EvaluationError(ArithmeticError):
    """Raised when an expression has no value at the given point."""


def apply_binary(right, left, operation):
    """Apply a binary operator: ``left <operation> right``."""
    if operation == PLUS:
        return left + right
    if operation == MINUS:
        return left - right
    if operation == MUL:
        return left * right
    if operation == DIV:
        if right == 0:
            raise EvaluationError("division by zero")
        return left / right
    raise ValueError(f"unknown operation {operation!r}")


def _is_tangent_pole(number):
    return number == 0.0 or number / math.pi in (1.0, 2.0, 3.0, 4.0)


def apply_function(number, operation):
    """Apply the function identified by a one-letter code to ``number``."""
    try:
        if operation == COS:
            return math.cos(number)
        if operation == SIN:
            return math.sin(number)
        if operation == TG:
            if _is_tangent_pole(number):
                raise EvaluationError("tangent undefined")
            return math.tan(number)
        if operation == CTG:
            if _is_tangent_pole(number):
                raise EvaluationError("cotangent undefined")
            return 1.0 / math.tan(number)
        if operation == SQRT:
            if number < 0.0:
                raise EvaluationError("square root of a negative number")
            return math.sqrt(number)
        if operation == LN:
            if number <= 0.0:
                raise EvaluationError("logarithm of a non-positive number")
            return math.log(number)
    except (ValueError, OverflowError, ZeroDivisionError) as exc:
        raise EvaluationError(str(exc)) from exc
    raise ValueError(f"unknown function {operation!r}")


def _operand_value(lexeme, x):
    return reduce(
        lambda acc, ch: acc * 10.0 + (x if ch == VARIABLE else int(ch)),
        lexeme,
        0.0,
    )


def evaluate(postfix, x):
    """Evaluate a postfix expression with the variable set to ``x``."""
    stack = []
    for match in _LEXEME_PATTERN.finditer(postfix):
        lexeme = match.group()
        if lexeme[0] == VARIABLE or lexeme[0].isdigit():
            stack.append(_operand_value(lexeme, x))
        elif is_operation(lexeme):
            if len(stack) < 2:
                raise EvaluationError(f"not enough operands for {lexeme!r}")
            right = stack.pop()
            left = stack.pop()
            stack.append(apply_binary(right, left, lexeme))
        elif lexeme in FUNCTIONS:
            if not stack:
                raise EvaluationError(f"no argument for function {lexeme!r}")
            stack.append(apply_function(stack.pop(), lexeme))
        elif lexeme != SPACE:
            raise EvaluationError(f"unexpected character {lexeme!r}")
    if not stack:
        raise EvaluationError("empty expression")
    return stack[-1]