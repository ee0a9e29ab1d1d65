"""Validation of plot expressions and conversion to postfix notation."""

PLUS = "+"
MINUS = "-"
MUL = "*"
DIV = "/"
SIN = "s"
COS = "c"
TG = "t"
CTG = "g"
SQRT = "q"
LN = "l"
SPACE = " "
VARIABLE = "x"
DIGITS = "0123456789"

OPERATIONS = frozenset((PLUS, MINUS, MUL, DIV))
FUNCTIONS = frozenset((SIN, COS, TG, CTG, SQRT, LN))

_FUNCTION_NAMES = (
    ("sin", SIN),
    ("cos", COS),
    ("tan", TG),
    ("ctg", CTG),
    ("sqrt", SQRT),
    ("ln", LN),
)


class ExpressionError(ValueError):
    """Raised when an expression cannot be parsed."""


def is_operation(ch):
    """Return True if ``ch`` is one of the four binary operators."""
    return ch in OPERATIONS


def priority_operation(ch):
    """Return the precedence of an operator or function code (0 for anything else)."""
    if ch in (PLUS, MINUS):
        return 1
    if ch in (MUL, DIV):
        return 2
    if ch in FUNCTIONS:
        return 3
    return 0


def _is_operand(ch):
    return ch == VARIABLE or ch in DIGITS


def validate_expression(text):
    """Check ``text`` and return it with function names replaced by one-letter codes.

    A minus sign where an operand is expected becomes ``0-``.
    """
    if all(ch in "\n " for ch in text):
        raise ExpressionError("empty expression")

    out = []
    expect_operand = True
    depth = 0
    i = 0
    while i < len(text):
        ch = text[i]
        if is_operation(ch):
            if expect_operand and ch == MINUS:
                out.append("0")
            out.append(ch)
            expect_operand = True
            i += 1
        elif _is_operand(ch):
            out.append(ch)
            expect_operand = False
            i += 1
        elif ch == "(":
            depth += 1
            out.append(ch)
            expect_operand = True
            i += 1
        elif ch == ")":
            depth -= 1
            out.append(ch)
            expect_operand = False
            i += 1
        else:
            for name, code in _FUNCTION_NAMES:
                if text.startswith(name, i):
                    out.append(code)
                    expect_operand = True
                    i += len(name)
                    break
            else:
                if ch != SPACE:
                    raise ExpressionError(f"unexpected character {ch!r} at position {i}")
                out.append(SPACE)
                i += 1

    if depth != 0:
        raise ExpressionError("unbalanced parentheses")
    return "".join(out)


def to_postfix(expression):
    """Convert a validated expression into postfix notation.

    Operands are separated by spaces; operators and function codes follow
    their arguments.
    """
    out = []
    stack = []
    for ch in expression:
        if _is_operand(ch):
            out.append(ch)
        elif is_operation(ch) or ch in FUNCTIONS:
            priority = priority_operation(ch)
            out.append(SPACE)
            while stack and stack[-1] != "(" and priority <= priority_operation(stack[-1]):
                out.append(stack.pop())
            stack.append(ch)
        elif ch == "(":
            stack.append(ch)
        elif ch == ")":
            while stack and stack[-1] != "(":
                out.append(stack.pop())
            if not stack:
                raise ExpressionError("unmatched ')'")
            stack.pop()
    out.extend(reversed(stack))
    return "".join(out)