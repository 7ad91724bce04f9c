"""Core evaluator for the malpy interpreter.

Evaluation is plain recursion over the expression tree: special forms are
dispatched by head symbol, every other non-empty list is evaluated element by
element and applied. Recursion depth follows expression and call nesting;
RecursionError from the host propagates uncaught.
"""

from __future__ import annotations

from malpy import SExpression, LispValue
from malpy.errors import UnsupportedExpression
from malpy.evaluation.apply import apply
from malpy.evaluation.special_forms import SPECIAL_FORMS
from malpy.types.environment import Environment
from malpy.types.sequences import HashMap, Vector
from malpy.types.symbol import Symbol


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env` and return its value."""
    match expr:
        case list() if not expr:
            return expr

        case [Symbol() as head, *tail] if head in SPECIAL_FORMS:
            return SPECIAL_FORMS[head](tail, env, evaluate)

        case list():
            # head included, strictly left to right
            values = [evaluate(e, env) for e in expr]
            return apply(values[0], values[1:], env, evaluate)

        case Symbol():
            return env.lookup(expr)

        case Vector():
            raise UnsupportedExpression("vector literals cannot be evaluated")

        case HashMap():
            raise UnsupportedExpression("map literals cannot be evaluated")

    # --- Atoms return as-is ---
    return expr
