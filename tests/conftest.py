import pytest

from protolisp.builtin.env_builtin import register
from protolisp.interpreter import Interpreter
from protolisp.types.environment import Environment


@pytest.fixture
def interp():
    """Fresh interpreter with the builtin root environment."""
    return Interpreter()


@pytest.fixture
def env():
    """Fresh root environment with builtins loaded."""
    e = Environment()
    register(e)
    return e
