"""Calculadora en notación prefija (polaca)."""

import logging

from calculator_engine import NAN, CalculatorEngine, ExpressionError

logger = logging.getLogger(__name__)


class PrefixCalculator(CalculatorEngine):
    """Evalúa expresiones prefijas por descenso recursivo.

    Ejemplo: ``"* + 3 4 2"`` -> 14.0
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
        tokens = iter(self.tokenize(expression))
        try:
            result = self._evaluate_tokens(tokens)
            leftover = next(tokens, None)
            if leftover is not None:  # entrada sin consumir
                raise ExpressionError(f"Sobra entrada a partir de {leftover!r}")
        except ExpressionError as exc:
            logger.debug("Expresión prefija inválida: %s", exc)
            result = NAN
        except RecursionError:
            logger.debug("Anidamiento demasiado profundo: %.40s...", expression)
            result = NAN
        self._last_answer = result
        return result

    def _evaluate_tokens(self, tokens) -> float:
        token = next(tokens, None)
        if token is None:
            raise ExpressionError("Fin de entrada prematuro")

        number = self.parse_number(token)
        if number is not None:
            return number
        if token == "ans":
            return self._last_answer
        if token in self.unary_ops:
            return self.eval_unary(token, self._evaluate_tokens(tokens))
        if token in self.binary_ops:
            operand1 = self._evaluate_tokens(tokens)
            operand2 = self._evaluate_tokens(tokens)
            return self.eval_binary(token, operand1, operand2)
        raise ExpressionError(f"Operador desconocido: {token!r}")
