"""
Motor base compartido por las calculadoras de notación.

Este módulo provee la clase CalculatorEngine con el estado común a las
tres notaciones: tablas de operadores, unidad angular, precisión de
presentación y la aplicación de operadores unarios y binarios. Cada
notación hereda de aquí e implementa su propio ``evaluate``.

Contrato de interfaz:
    - evaluate(expression: str) -> float   (NaN indica error)
    - settings() -> str
    - angle_units, precision, unary_ops, binary_ops: propiedades
"""

import logging
import math
import re
from abc import ABC, abstractmethod
from types import MappingProxyType

import numpy as np

from operator_tables import (
    DEFAULT_BINARY_OPS,
    DEFAULT_UNARY_OPS,
    INV_TRIG_OPS,
    TRIG_OPS,
    AngleUnits,
    from_radians,
    to_radians,
)

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 2

NAN = float("nan")


class UnsupportedOperationError(Exception):
    """La calculadora no admite la operación de configuración pedida."""


class ExpressionError(ValueError):
    """Expresión mal formada; se traduce a NaN en ``evaluate``."""


class CalculatorEngine(ABC):
    """Clase base abstracta con el estado y las operaciones comunes.

    Cada notación implementa ``evaluate``.
    """

    _NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

    def __init__(self):
        self._unary_ops = DEFAULT_UNARY_OPS
        self._binary_ops = DEFAULT_BINARY_OPS
        self._angle_units = AngleUnits.RADIANS
        self._precision = DEFAULT_PRECISION

    @abstractmethod
    def evaluate(self, expression: str) -> float:
        """Evalúa la expresión; NaN indica cualquier error."""

    # ── Tablas de operadores ─────────────────────────────────────

    @property
    def unary_ops(self):
        return self._unary_ops

    @unary_ops.setter
    def unary_ops(self, table):
        self._unary_ops = MappingProxyType(dict(table))

    @property
    def binary_ops(self):
        return self._binary_ops

    @binary_ops.setter
    def binary_ops(self, table):
        self._binary_ops = MappingProxyType(dict(table))

    # ── Configuración ────────────────────────────────────────────

    @property
    def angle_units(self) -> AngleUnits:
        return self._angle_units

    @angle_units.setter
    def angle_units(self, units):
        self._angle_units = AngleUnits.parse(units)
        logger.info("Unidad angular: %s", self._angle_units.label)

    @property
    def precision(self) -> int:
        return self._precision

    @precision.setter
    def precision(self, digits: int):
        if digits < 0:
            raise ValueError("La precisión no puede ser negativa")
        self._precision = int(digits)
        logger.info("Precisión: %d", self._precision)

    def settings(self) -> str:
        return (
            f"angles: {self.angle_units.label}, "
            f"precision: {self.precision}"
        )

    # ── Aplicación de operadores ─────────────────────────────────

    def eval_unary(self, operator: str, operand: float) -> float:
        """Aplica un operador unario; NaN si el nombre no está en la tabla.

        Los operadores trigonométricos reciben el argumento en radianes y
        los inversos devuelven el resultado en la unidad configurada.
        """
        if operator not in self.unary_ops:
            logger.debug("Operador unario desconocido: %s", operator)
            return NAN

        units = self.angle_units
        with np.errstate(all="ignore"):
            try:
                value = np.float64(operand)
                if operator in TRIG_OPS:
                    value = to_radians(value, units)
                result = self.unary_ops[operator](value)
                if operator in INV_TRIG_OPS:
                    result = from_radians(result, units)
            except (ArithmeticError, ValueError) as exc:
                logger.debug("Fallo al aplicar %s: %s", operator, exc)
                return NAN
        return float(result)

    def eval_binary(self, operator: str, operand1: float, operand2: float) -> float:
        """Aplica ``operator`` a (operand1, operand2) en ese orden."""
        if operator not in self.binary_ops:
            logger.debug("Operador binario desconocido: %s", operator)
            return NAN

        with np.errstate(all="ignore"):
            try:
                result = self.binary_ops[operator](
                    np.float64(operand1), np.float64(operand2)
                )
            except (ArithmeticError, ValueError) as exc:
                logger.debug("Fallo al aplicar %s: %s", operator, exc)
                return NAN
        return float(result)

    # ── Tokens ───────────────────────────────────────────────────

    @classmethod
    def parse_number(cls, token: str):
        """Devuelve el valor del numeral o None si el token no lo es."""
        if cls._NUMBER_RE.fullmatch(token):
            return float(token)
        return None

    @staticmethod
    def tokenize(expression: str) -> list:
        return expression.split()

    # ── Formato del resultado ────────────────────────────────────

    def format_result(self, value: float) -> str:
        if math.isnan(value):
            return "ERROR"
        return f"{value:.{self.precision}f}"
