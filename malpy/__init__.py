# Core type aliases for the malpy data model.
# Forms and runtime values share one representation: Nil, bool, int, str,
# Symbol, list, Vector, HashMap, Closure and NativeFunction.
#
# Naming guidance:
# - SExpression: use in reader/parser code to denote syntactic forms.
# - LispValue:  use in evaluator/runtime code to denote evaluated values.
# Both aliases resolve to `Any` and are interchangeable.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type: evaluator handed to special forms
EvaluatorFn = Callable[..., LispValue]
