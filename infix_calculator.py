"""Calculadora en notación infija.

La expresión se traduce a notación postfija con el algoritmo shunting-yard
y se ejecuta en una PostfixCalculator privada. Las tablas de operadores son
fijas: intentar reemplazarlas lanza UnsupportedOperationError.
"""

import logging
import re
from types import MappingProxyType

from calculator_engine import (
    CalculatorEngine,
    ExpressionError,
    UnsupportedOperationError,
)
from operator_tables import DEFAULT_UNARY_OPS
from postfix_calculator import PostfixCalculator

logger = logging.getLogger(__name__)

# Mayor valor, mayor prioridad.
DEFAULT_OP_PRECEDENCES = MappingProxyType({
    **{name: 4 for name in DEFAULT_UNARY_OPS},
    "^": 3,
    "*": 2,
    "/": 2,
    "%": 2,
    "+": 1,
    "-": 1,
})

LEFT_ASSOCIATIVE_OPS = frozenset({"*", "/", "%", "+", "-"})

_PARENTHESIS_RE = re.compile(r"([()])")


class InfixCalculator(CalculatorEngine):
    """Evalúa expresiones infijas delegando en una calculadora postfija.

    Ejemplo: ``"(3 + 4) * 2"`` -> 14.0
    """

    def __init__(self):
        # sin super().__init__(): todo el estado vive en la calculadora postfija
        self._postfix_calc = PostfixCalculator()

    # ── Estado delegado ──────────────────────────────────────────

    @property
    def last_answer(self) -> float:
        return self._postfix_calc.last_answer

    @property
    def unary_ops(self):
        return self._postfix_calc.unary_ops

    @unary_ops.setter
    def unary_ops(self, table):
        raise UnsupportedOperationError(
            "La calculadora infija no admite cambiar los operadores unarios"
        )

    @property
    def binary_ops(self):
        return self._postfix_calc.binary_ops

    @binary_ops.setter
    def binary_ops(self, table):
        raise UnsupportedOperationError(
            "La calculadora infija no admite cambiar los operadores binarios"
        )

    @property
    def angle_units(self):
        return self._postfix_calc.angle_units

    @angle_units.setter
    def angle_units(self, units):
        self._postfix_calc.angle_units = units

    @property
    def precision(self) -> int:
        return self._postfix_calc.precision

    @precision.setter
    def precision(self, digits: int):
        self._postfix_calc.precision = digits

    # ── Evaluación ───────────────────────────────────────────────

    def evaluate(self, expression: str) -> float:
        postfix = self.translate(expression)
        # "" deja NaN como última respuesta
        return self._postfix_calc.evaluate(postfix if postfix is not None else "")

    def translate(self, expression: str):
        """Devuelve la expresión en notación postfija, o None si es inválida."""
        expression = _PARENTHESIS_RE.sub(r" \1 ", expression)
        try:
            output = self._parse_expression(self.tokenize(expression))
        except ExpressionError as exc:
            logger.debug("Expresión infija inválida: %s", exc)
            return None
        return " ".join(output)

    def _parse_expression(self, tokens) -> list:
        output = []
        operators = []
        num_okay = True  # se admite un número en esta posición
        for token in tokens:
            if num_okay and (
                self.parse_number(token) is not None or token.lower() == "ans"
            ):
                output.append(token)
                num_okay = False
            elif token in DEFAULT_OP_PRECEDENCES:
                while operators and not self._can_push(token, operators[-1]):
                    output.append(operators.pop())
                operators.append(token)
                num_okay = num_okay or token in self.binary_ops
            elif token == "(":
                if not num_okay:
                    raise ExpressionError("'(' en posición de operador")
                operators.append(token)
            elif token == ")":
                self._close_parenthesis(operators, output)
            else:
                raise ExpressionError(f"Token inválido: {token!r}")

        while operators:
            output.append(operators.pop())
        if "(" in output:
            raise ExpressionError("Paréntesis sin cerrar")
        return output

    @staticmethod
    def _can_push(operator: str, top: str) -> bool:
        if top == "(":
            return True
        precedence = DEFAULT_OP_PRECEDENCES[operator]
        other = DEFAULT_OP_PRECEDENCES[top]
        return precedence > other or (
            precedence == other and operator not in LEFT_ASSOCIATIVE_OPS
        )

    @staticmethod
    def _close_parenthesis(operators: list, output: list):
        while operators and operators[-1] != "(":
            output.append(operators.pop())
        if not operators:
            raise ExpressionError("')' sin '(' correspondiente")
        operators.pop()
