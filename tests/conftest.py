import pytest

from sublisp.interpreter import Interpreter
from sublisp.types.context import Context
from sublisp.builtin.env_builtin import register


@pytest.fixture
def interp():
    return Interpreter()


@pytest.fixture
def ctx():
    c = Context()
    register(c)
    return c
