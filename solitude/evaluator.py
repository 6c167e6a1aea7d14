"""Expression evaluator for the Solitude language.

Expressions are not parsed into trees. A lark lexer splits the text
into numbers, operators and relational tokens, and a single
accumulator folds them left to right:

* the accumulator starts at 0.0 with a pending `+`;
* a number is combined into the accumulator using the most recently
  seen operator, so `2 + 3 * 4` is `(2 + 3) * 4 == 20`;
* `>=`, `<=` and `==` compare the accumulator with the number right
  after them and replace it with 1.0 or 0.0.

Anything else (stray letters, punctuation) is skipped.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Optional

from lark import Lark
from lark.exceptions import LexError

from .errors import MalformedExpression

EXPRESSION_GRAMMAR = r"""
    start: (NUMBER | RELATION | OPERATOR | OTHER)*

    // A leading minus belongs to the number only when a digit follows it
    NUMBER.4: /-?(\d+(\.\d*)?|\.\d+)/
    RELATION.3: ">=" | "<=" | "=="
    OPERATOR.2: "+" | "-" | "*" | "/"
    OTHER: /\S/

    // Unicode whitespace too, so every character is covered by a terminal
    %ignore /\s+/
"""


EXPRESSION_LEXER = Lark(
    EXPRESSION_GRAMMAR,
    parser='lalr',
    lexer='basic',
)

ARITHMETIC_OPERATORS = '+-*/'
RELATIONS = ('>=', '<=', '==')


def needs_evaluation(text: str) -> bool:
    """True if a declared value should go through `evaluate`."""
    return any(c in text for c in ARITHMETIC_OPERATORS) or any(r in text for r in RELATIONS)


def apply_operator(op: str, a: float, b: float) -> float:
    if op == '+':
        return a + b
    if op == '-':
        return a - b
    if op == '*':
        return a * b
    if op == '/':
        if b == 0:
            # IEEE-754 semantics instead of ZeroDivisionError
            if a == 0 or math.isnan(a):
                return math.nan
            return math.copysign(math.inf, a) * math.copysign(1.0, b)
        return a / b
    raise ValueError(f'unknown operator {op!r}')


def compare(relation: str, a: float, b: float) -> float:
    if relation == '>=':
        return 1.0 if a >= b else 0.0
    if relation == '<=':
        return 1.0 if a <= b else 0.0
    if relation == '==':
        return 1.0 if a == b else 0.0
    raise ValueError(f'unknown relation {relation!r}')


def evaluate(text: str) -> float:
    """Fold `text` into a float, left to right, without precedence."""
    result = 0.0
    operator = '+'
    relation: Optional[str] = None
    try:
        tokens = list(EXPRESSION_LEXER.lex(text))
    except LexError as e:
        raise MalformedExpression(f"cannot evaluate {text!r}: {e}") from e
    for token in tokens:
        if relation is not None:
            # the comparand is the token right after the relation
            comparand = float(token.value) if token.type == 'NUMBER' else 0.0
            result = compare(relation, result, comparand)
            relation = None
            if token.type == 'NUMBER':
                continue
        if token.type == 'NUMBER':
            result = apply_operator(operator, result, float(token.value))
        elif token.type == 'OPERATOR':
            operator = token.value
        elif token.type == 'RELATION':
            relation = token.value
    if relation is not None:
        result = compare(relation, result, 0.0)
    return result


def format_number(value: float) -> str:
    """Render an evaluation result the way it is stored in variables."""
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'inf' if value > 0 else '-inf'
    if value.is_integer():
        return str(int(value))
    # never exponent notation: the lexer reads back plain decimals only
    return format(Decimal(repr(value)), 'f')
