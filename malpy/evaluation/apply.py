"""Application engine for malpy.

Generic application receives an already-evaluated head and arguments:
- NativeFunction references are invoked with (env, args).
- A Symbol in head position is resolved through the native registry only;
  a miss is FunctionUndefined.
- Closures bind their parameters in one new child frame of the captured
  environment and evaluate the body there. This is the only path through
  which user-defined functions recurse.
- Anything else is a BadFunctionDesignator.
"""

from malpy import LispValue, EvaluatorFn
from malpy.errors import BadFunctionDesignator, FunctionUndefined
from malpy.printer import pr_str
from malpy.types.closure import Closure
from malpy.types.environment import Environment
from malpy.types.native_fn import NativeFunction
from malpy.types.symbol import Symbol


def apply_closure(
    fn: Closure,
    args: list[LispValue],
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply a Closure to already-evaluated arguments.

    Raises InvalidArgs unless the argument count equals the parameter count.
    """
    frame = fn.bind(args)
    return evaluate_fn(fn.body, frame)


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if isinstance(head, NativeFunction):
        return head(env, args)
    if isinstance(head, Closure):
        return apply_closure(head, args, evaluate_fn)
    if isinstance(head, Symbol):
        native = env.natives.get(head.id)
        if native is None:
            raise FunctionUndefined(head.id)
        return native(env, args)
    raise BadFunctionDesignator(pr_str(head))
