import pytest

from mallet.builtin.env_builtin import register
from mallet.evaluation.evaluator import evaluate
from mallet.interpreter import Interpreter
from mallet.reader.parser import read_str
from mallet.types.environment import Environment


@pytest.fixture
def env():
    """Return a fresh root environment with the builtins registered."""
    e = Environment()
    register(e)
    return e


@pytest.fixture
def run(env):
    """Read and evaluate one line of source against the shared `env`."""
    def _run(source):
        return evaluate(read_str(source), env)
    return _run


@pytest.fixture
def interp():
    return Interpreter()
