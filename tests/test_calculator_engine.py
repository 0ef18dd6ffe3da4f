"""Pruebas del estado compartido y la aplicación de operadores."""

import math

import pytest
from mpmath import mp

from calculator_engine import NAN, DEFAULT_PRECISION, CalculatorEngine
from infix_calculator import InfixCalculator
from operator_tables import AngleUnits


class _Engine(CalculatorEngine):
    """Motor mínimo para probar el estado compartido."""

    def evaluate(self, expression: str) -> float:
        return NAN


@pytest.fixture
def engine():
    return _Engine()


def test_base_is_abstract():
    with pytest.raises(TypeError):
        CalculatorEngine()


def test_infix_keeps_no_state_of_its_own():
    calc = InfixCalculator()
    for name in ("_unary_ops", "_binary_ops", "_angle_units", "_precision"):
        assert name not in vars(calc)


def test_defaults(engine):
    assert engine.angle_units is AngleUnits.RADIANS
    assert engine.precision == DEFAULT_PRECISION == 2
    assert engine.settings() == "angles: radians, precision: 2"


def test_settings_reflect_changes(engine):
    engine.angle_units = "deg"
    engine.precision = 5
    assert engine.settings() == "angles: degrees, precision: 5"


def test_negative_precision_rejected(engine):
    with pytest.raises(ValueError):
        engine.precision = -1


def test_unknown_operator_is_nan(engine):
    assert math.isnan(engine.eval_unary("#", 1.0))
    assert math.isnan(engine.eval_binary("#", 1.0, 2.0))


def test_binary_operand_order(engine):
    assert engine.eval_binary("-", 10, 4) == 6.0
    assert engine.eval_binary("/", 1, 4) == 0.25
    assert engine.eval_binary("^", 2, 10) == 1024.0
    assert engine.eval_binary("%", -7, 3) == -1.0


def test_ieee_results_instead_of_exceptions(engine):
    assert engine.eval_binary("/", 1, 0) == math.inf
    assert engine.eval_binary("/", -1, 0) == -math.inf
    assert math.isnan(engine.eval_binary("/", 0, 0))
    assert math.isnan(engine.eval_binary("%", 5, 0))
    assert math.isnan(engine.eval_unary("sqrt", -1))
    assert engine.eval_unary("ln", 0) == -math.inf
    assert engine.eval_unary("exp", 1000) == math.inf
    assert engine.eval_unary("csc", 0) == math.inf
    assert math.isnan(engine.eval_unary("asec", 0.5))


def test_trig_in_degrees(engine):
    engine.angle_units = AngleUnits.DEGREES
    assert engine.eval_unary("sin", 90) == pytest.approx(1.0)
    assert engine.eval_unary("cos", 60) == pytest.approx(0.5)
    assert engine.eval_unary("sec", 60) == pytest.approx(2.0)
    assert engine.eval_unary("asin", 1) == pytest.approx(90.0)
    assert engine.eval_unary("acot", 1) == pytest.approx(45.0)


def test_trig_in_radians(engine):
    assert engine.eval_unary("sin", 90) == pytest.approx(float(mp.sin(90)))
    assert engine.eval_unary("acos", -1) == pytest.approx(float(mp.pi))


def test_non_trig_ignores_angle_units(engine):
    engine.angle_units = AngleUnits.DEGREES
    assert engine.eval_unary("sinh", 1) == pytest.approx(float(mp.sinh(1)))
    assert engine.eval_unary("sqrt", 16) == 4.0


def test_replacing_tables_copies_them(engine):
    table = {"neg": lambda a: -a}
    engine.unary_ops = table
    table["twice"] = lambda a: 2 * a

    assert set(engine.unary_ops) == {"neg"}
    assert engine.eval_unary("neg", 3) == -3.0
    assert math.isnan(engine.eval_unary("sqrt", 4))
    with pytest.raises(TypeError):
        engine.unary_ops["twice"] = lambda a: 2 * a


def test_raising_user_function_is_nan(engine):
    engine.binary_ops = {"/": lambda a, b: float(a) / float(b)}
    engine.unary_ops = {"sqrt": lambda a: math.sqrt(a)}
    assert math.isnan(engine.eval_binary("/", 1, 0))
    assert math.isnan(engine.eval_unary("sqrt", -4))


@pytest.mark.parametrize("token, expected", [
    ("1", 1.0),
    ("-1", -1.0),
    ("+2.5", 2.5),
    (".5", 0.5),
    ("3.", 3.0),
    ("1e3", 1000.0),
    ("2.5E-1", 0.25),
])
def test_parse_number(token, expected):
    assert CalculatorEngine.parse_number(token) == expected


@pytest.mark.parametrize("token", ["ans", "+", "1,5", "nan", "inf", "1_000", "e5", "."])
def test_parse_number_rejects(token):
    assert CalculatorEngine.parse_number(token) is None


def test_format_result(engine):
    assert engine.format_result(2.0) == "2.00"
    engine.precision = 0
    assert engine.format_result(14.4) == "14"
    assert engine.format_result(float("nan")) == "ERROR"
