from __future__ import annotations

import logging
from typing import Optional

from malpy import SExpression, LispValue
from malpy.builtin.env_builtin import default_registry
from malpy.errors import ParseError, UnterminatedInput
from malpy.evaluation.evaluator import evaluate
from malpy.printer import pr_str
from malpy.reader.parser import read
from malpy.types.environment import Environment, NativeRegistry
from malpy.types.nil import Nil

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating malpy code.
    Maintains a single root Environment across calls, so definitions persist
    between evaluations; nothing else is carried over.
    """

    def __init__(
        self,
        registry: Optional[NativeRegistry] = None,
    ):
        self.env: Environment = Environment.create_root(
            registry if registry is not None else default_registry()
        )
        logger.debug("interpreter started with %d native functions", len(self.env.natives))

    def read(self, code: str) -> list[SExpression]:
        return read(code)

    def eval(self, code: str) -> LispValue:
        """Evaluate every form in `code` in order and return the last value.

        Errors propagate. Definitions made before a failing form are kept.
        """
        result: LispValue = Nil
        forms = read(code)
        logger.debug("read %d form(s)", len(forms))
        for expr in forms:
            result = evaluate(expr, self.env)
        return result

    def rep(self, code: str) -> str:
        """Read `code`, evaluate its first form only, and return the printed result."""
        forms = read(code)
        if not forms:
            return pr_str(Nil)
        if len(forms) > 1:
            logger.debug("ignoring %d form(s) after the first", len(forms) - 1)
        return pr_str(evaluate(forms[0], self.env))

    @staticmethod
    def is_complete(code: str) -> bool:
        """False only when more input could finish `code`.

        Other parse errors count as complete so they get reported instead of
        waiting for input that can never fix them.
        """
        try:
            read(code)
        except UnterminatedInput:
            return False
        except ParseError:
            return True
        return True
