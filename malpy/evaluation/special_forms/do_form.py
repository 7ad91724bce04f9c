from malpy import EvaluatorFn
from malpy import SExpression, LispValue
from malpy.types.environment import Environment
from malpy.types.nil import Nil


def do_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    result: LispValue = Nil
    for e in tail:
        result = evaluate_fn(e, env)
    return result
