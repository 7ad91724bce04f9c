import pytest

from malpy.builtin.env_builtin import create_global_env
from malpy.evaluation.evaluator import evaluate
from malpy.interpreter import Interpreter
from malpy.reader.parser import read


@pytest.fixture
def env():
    """Fresh root environment with the default natives."""
    return create_global_env()


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def run(env):
    """Evaluate every form of a source string in `env`, returning the last value."""
    def _run(source):
        result = None
        for expr in read(source):
            result = evaluate(expr, env)
        return result
    return _run
