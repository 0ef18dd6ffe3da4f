"""Punto de entrada de la calculadora de notaciones en consola."""

import logging
import re

from infix_calculator import InfixCalculator
from postfix_calculator import PostfixCalculator
from prefix_calculator import PrefixCalculator


DEFAULT_NOTATION = "postfix"
LOG_LEVEL = logging.WARNING

CALCULATORS = {
    "prefix": PrefixCalculator,
    "infix": InfixCalculator,
    "postfix": PostfixCalculator,
}

HELP_TEXT = """\
Comandos:
  help                  muestra esta ayuda
  settings              muestra unidad angular y precisión
  prefix|infix|postfix  cambia la notación
  radians|degrees       cambia la unidad angular
  precision <n>         dígitos decimales al mostrar resultados
  quit                  salir
Operadores unarios: {unary}
Operadores binarios: {binary}
Use "ans" para la última respuesta."""

_WHITESPACE_RE = re.compile(r"[ \t]+")
_PRECISION_RE = re.compile(r"^precision\s+(\d+)$", re.IGNORECASE)

logger = logging.getLogger(__name__)


def switch_notation(calc, notation: str):
    """Crea la calculadora pedida conservando unidad angular y precisión."""
    new_calc = CALCULATORS[notation]()
    new_calc.angle_units = calc.angle_units
    new_calc.precision = calc.precision
    logger.info("Notación: %s", notation)
    return new_calc


def handle_line(calc, line: str):
    """Procesa una línea de entrada.

    Devuelve la calculadora activa (puede cambiar) y el texto a mostrar.
    """
    command = line.lower()

    if command == "help":
        return calc, HELP_TEXT.format(
            unary=" ".join(sorted(calc.unary_ops)),
            binary=" ".join(sorted(calc.binary_ops)),
        )
    if command == "settings":
        return calc, calc.settings()
    if command in CALCULATORS:
        calc = switch_notation(calc, command)
        return calc, f"notación: {command}"
    if command in ("radians", "degrees"):
        calc.angle_units = command
        return calc, calc.settings()

    match = _PRECISION_RE.fullmatch(line)
    if match:
        calc.precision = int(match.group(1))
        return calc, calc.settings()

    value = calc.evaluate(line)
    text = calc.format_result(value)
    if text == "ERROR":
        return calc, text
    return calc, f"{line} = {text}"


def main():
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    calc = CALCULATORS[DEFAULT_NOTATION]()
    print('Calculadora de notaciones. Escriba "help" para ver los comandos.\n')

    while True:
        try:
            raw = input(">> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break
        line = _WHITESPACE_RE.sub(" ", raw.strip())
        if line.lower() == "quit":
            break
        if not line:
            continue
        calc, text = handle_line(calc, line)
        print(f"{text}\n")


if __name__ == "__main__":
    main()
