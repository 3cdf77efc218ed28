import pytest

from mal.builtin import atom_builtin, core_builtin
from mal.evaluation.evaluator import evaluate
from mal.interpreter import Interpreter
from mal.reader.parser import parse
from mal.types.environment import Environment


@pytest.fixture
def env():
    """Fresh root environment with the host built-ins installed."""
    e = Environment()
    core_builtin.register(e)
    atom_builtin.register(e)
    return e


@pytest.fixture
def run(env):
    """Parse and evaluate one form against the `env` fixture."""
    def _run(source):
        return evaluate(parse(source), env)
    return _run


@pytest.fixture
def interp():
    """Interpreter with bootstrap definitions but without prelude files."""
    return Interpreter(prelude=None)


@pytest.fixture
def interp_prelude():
    return Interpreter()
