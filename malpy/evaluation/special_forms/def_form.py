import logging

from malpy import EvaluatorFn
from malpy import SExpression, LispValue
from malpy.errors import InvalidArgs, NotASymbol
from malpy.types.environment import Environment
from malpy.types.symbol import Symbol

logger = logging.getLogger(__name__)


def def_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def! name value)
    Binds in `env` itself, never in an enclosing frame, and returns the value.
    """
    if len(tail) != 2:
        raise InvalidArgs("def! requires exactly 2 arguments")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise NotASymbol("def! requires a symbol as its first argument")
    value = evaluate_fn(val_expr, env)
    env.define(name, value)
    logger.debug("def! %s at depth %d", name, env.depth())
    return value
