"""Tablas de operadores y conversión angular para las calculadoras.

Las funciones trabajan sobre ``numpy.float64`` para conservar la aritmética
IEEE-754 completa (infinitos y NaN en lugar de excepciones). Las tablas por
defecto son de solo lectura y se comparten entre todas las instancias.
"""

from enum import Enum
from types import MappingProxyType

import numpy as np


class AngleUnits(Enum):
    """Unidad angular en la que trabajan las funciones trigonométricas."""

    RADIANS = "rad"
    DEGREES = "deg"

    @classmethod
    def parse(cls, value) -> "AngleUnits":
        """Acepta un miembro, 'rad'/'deg' o 'radians'/'degrees'."""
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for unit in cls:
            if text in (unit.value, unit.name.lower()):
                return unit
        raise ValueError("La unidad angular debe ser 'rad' o 'deg'")

    @property
    def label(self) -> str:
        return self.name.lower()


TRIG_OPS = frozenset({"sin", "cos", "tan", "sec", "csc", "cot"})
INV_TRIG_OPS = frozenset({"asin", "acos", "atan", "asec", "acsc", "acot"})

_INT32_MAX = np.iinfo(np.int32).max
_INT64_MIN = float(np.iinfo(np.int64).min)
_INT64_MAX = float(np.iinfo(np.int64).max)


def to_radians(angle, units: AngleUnits):
    return np.deg2rad(angle) if units is AngleUnits.DEGREES else angle


def from_radians(angle, units: AngleUnits):
    return np.rad2deg(angle) if units is AngleUnits.DEGREES else angle


def factorial(n) -> float:
    """Factorial con acumulador entero de 64 bits con signo.

    Devuelve NaN si ``n`` no es entero, es negativo o no cabe en un entero de
    32 bits. El desbordamiento no se comprueba: el producto da la vuelta como
    cualquier ``int64``.
    """
    n = float(n)
    if not n.is_integer() or n < 0 or n > _INT32_MAX:
        return float("nan")

    product = np.int64(1)
    with np.errstate(over="ignore"):
        for i in range(int(n), 1, -1):
            product = product * np.int64(i)
            if product == 0:  # múltiplo de 2**64: ya no cambia
                break
    return float(product)


def _round_half_up(x):
    """Redondeo al entero más cercano (mitades hacia arriba) como ``int64``.

    NaN da 0 y los valores fuera de rango se saturan en los límites de 64 bits.
    """
    if np.isnan(x):
        return np.float64(0.0)
    rounded = np.floor(x)
    # x - floor(x) es exacto; x + 0.5 no lo es para 0.49999999999999994
    if x - rounded >= 0.5:
        rounded += 1
    return np.clip(rounded, _INT64_MIN, _INT64_MAX)


def _power(base, exponent):
    # pow(±1, ±inf) y pow(x, NaN) son NaN, no 1 como en C99
    if np.isnan(exponent) or (np.abs(base) == 1 and np.isinf(exponent)):
        return np.float64("nan")
    return np.power(base, exponent)


DEFAULT_UNARY_OPS = MappingProxyType({
    "!": factorial,
    "sqrt": np.sqrt,
    "~": _round_half_up,
    "abs": np.abs,
    "sin": np.sin,
    "cos": np.cos,
    "tan": np.tan,
    "asin": np.arcsin,
    "acos": np.arccos,
    "atan": np.arctan,
    "sec": lambda a: 1 / np.cos(a),
    "csc": lambda a: 1 / np.sin(a),
    "cot": lambda a: 1 / np.tan(a),
    "asec": lambda a: np.arccos(1 / a),
    "acsc": lambda a: np.arcsin(1 / a),
    "acot": lambda a: np.arctan(1 / a),
    "sinh": np.sinh,
    "cosh": np.cosh,
    "tanh": np.tanh,
    "exp": np.exp,
    "ln": np.log,
    "log10": np.log10,
})

DEFAULT_BINARY_OPS = MappingProxyType({
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
    "%": np.fmod,
    "^": _power,
})
