"""Calculadora en notación postfija (polaca inversa)."""

import logging

from calculator_engine import NAN, CalculatorEngine

logger = logging.getLogger(__name__)


class PostfixCalculator(CalculatorEngine):
    """Evalúa expresiones postfijas con una pila de operandos.

    Ejemplo: ``"3 4 + 2 *"`` -> 14.0
    """

    def __init__(self, unary_ops=None, binary_ops=None):
        super().__init__()
        if unary_ops is not None:
            self.unary_ops = unary_ops
        if binary_ops is not None:
            self.binary_ops = binary_ops
        self._last_answer = NAN

    @property
    def last_answer(self) -> float:
        return self._last_answer

    def evaluate(self, expression: str) -> float:
        operands = []
        if self._parse_expression(expression, operands):
            self._last_answer = operands[0]
        else:
            self._last_answer = NAN
        return self._last_answer

    def _parse_expression(self, expression: str, operands: list) -> bool:
        for token in self.tokenize(expression):
            number = self.parse_number(token)
            if number is not None:
                operands.append(number)
            elif token.lower() == "ans":
                operands.append(self._last_answer)
            elif token in self.unary_ops and operands:
                operands.append(self.eval_unary(token, operands.pop()))
            elif token in self.binary_ops and len(operands) > 1:
                operand2 = operands.pop()
                operand1 = operands.pop()
                operands.append(self.eval_binary(token, operand1, operand2))
            else:
                # operador inválido o faltan operandos
                logger.debug("Token rechazado: %r (pila: %d)", token, len(operands))
                return False
        if len(operands) != 1:
            logger.debug("Quedan %d valores en la pila", len(operands))
            return False
        return True
