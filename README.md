# graphplot

Draw a function of `x` as an ASCII chart in the terminal. The chart is about
80 columns wide and 25 rows high.

The columns step `x` from 0 to 4π. The rows step `y` from -1 to 1, and the
first printed row is `y = -1`, so larger values appear lower down. A cell is
marked `*` when the function value is within half a row of that row's `y`.
Every other cell is marked `.`.

## Installation

```
pip install .
```

## Command line

The `graphplot` command reads one line from standard input. That line is the
expression to plot. The command takes no options apart from `-h`/`--help`.

```
echo "sin(cos(2*x))" | graphplot
```

If the expression is rejected, the command prints `NULL` in place of a chart.

### Expression syntax

- the variable `x` and non-negative integer literals
- binary operators `+`, `-`, `*`, `/`, with the usual precedence
- a minus sign where an operand is expected, meaning at the start or after `(`
  or an operator. It is read as `0-`.
- the functions `sin`, `cos`, `tan`, `ctg`, `sqrt` and `ln`
- parentheses, which must be balanced
- spaces, which are ignored

The command rejects an expression that is empty, that is only whitespace,
that contains any other character, or that has unbalanced parentheses.

A point with no defined value is left blank on the chart. That covers these
cases:

- division by zero
- `sqrt` of a negative number
- `ln` of a non-positive number
- `tan` or `ctg` at exactly 0, π, 2π, 3π or 4π

## Library use

```python
from graphplot.parse import validate_expression, to_postfix
from graphplot.evaluate import evaluate
from graphplot.plot import render

expr = validate_expression("2*x+1")
postfix = to_postfix(expr)
print(evaluate(postfix, 3.0))   # 7.0

print(render("sin(x)"))
```

- `graphplot.parse` provides these:
  - `validate_expression` checks the input and replaces function names with
    one-letter codes.
  - `to_postfix` converts the result to postfix notation.
  - `is_operation` and `priority_operation` classify operator characters.
  - Both functions raise `ExpressionError` when the input is rejected.
- `graphplot.evaluate` provides these:
  - `evaluate` computes a postfix expression at a given `x`.
  - `apply_binary` and `apply_function` apply a single operator or function.
  - They raise `EvaluationError` where the expression has no defined value.
- `graphplot.plot` provides these:
  - `render` returns the chart for an infix expression as a string.
  - `render_postfix` returns the chart for an expression that is already in
    postfix form.
  - `main` is the entry point of the command.

## Running the tests

```
pip install .[test]
pytest
```