from malpy import EvaluatorFn
from malpy import SExpression, LispValue
from malpy.errors import InvalidArgs, NotAList, NotASymbol
from malpy.types.closure import Closure
from malpy.types.environment import Environment
from malpy.types.symbol import Symbol


def fn_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    # (fn* (params...) body): exactly one body form, positional params only.
    # The body stays unevaluated until the closure is applied.
    if len(tail) != 2:
        raise InvalidArgs("fn* requires a parameter list and a body")

    params, body = tail
    if not isinstance(params, list):
        raise NotAList("fn* parameters must be a list")
    for p in params:
        if not isinstance(p, Symbol):
            raise NotASymbol("fn* parameters must be symbols")

    return Closure(params, body, env)
