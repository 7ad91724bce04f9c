from malpy import EvaluatorFn
from malpy import SExpression, LispValue
from malpy.errors import InvalidArgs, NotAList, NotASymbol
from malpy.types.environment import Environment
from malpy.types.symbol import Symbol


def let_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (let* (name1 expr1 name2 expr2 ...) body)

    Bindings are sequential: every expr is evaluated in the new frame, so it
    sees the names bound before it.
    """
    if len(tail) != 2:
        raise InvalidArgs("let* requires a binding list and a body")

    bindings, body = tail
    if not isinstance(bindings, list):
        raise NotAList("let* bindings must be a list")

    if len(bindings) % 2 != 0:
        raise InvalidArgs("let* bindings must come in name/value pairs")

    frame = env.create_child()
    for name, val_expr in zip(bindings[::2], bindings[1::2]):
        if not isinstance(name, Symbol):
            raise NotASymbol("let* binding names must be symbols")
        frame.define(name, evaluate_fn(val_expr, frame))
    return evaluate_fn(body, frame)
