"""Fixtures compartidas por las pruebas de las calculadoras."""

import pytest

from infix_calculator import InfixCalculator
from postfix_calculator import PostfixCalculator
from prefix_calculator import PrefixCalculator


@pytest.fixture
def postfix():
    return PostfixCalculator()


@pytest.fixture
def prefix():
    return PrefixCalculator()


@pytest.fixture
def infix():
    return InfixCalculator()


@pytest.fixture(params=["prefix", "infix", "postfix"])
def any_calc(request):
    """Cada calculadora junto con su forma de escribir ``op x``."""
    calc = {
        "prefix": PrefixCalculator,
        "infix": InfixCalculator,
        "postfix": PostfixCalculator,
    }[request.param]()

    if request.param == "postfix":
        return calc, lambda op, x: f"{x} {op}"
    return calc, lambda op, x: f"{op} {x}"
