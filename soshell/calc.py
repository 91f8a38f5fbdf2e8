"""Floating-point and 16-bit integer calculators."""

import math
import re

EPSILON = 1.0e-16
_USHORT = 0xFFFF

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:inf(?:inity)?|nan|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class CalcError(ValueError):
    """Raised when a calculation cannot be carried out."""


def _to_float(text):
    """Read the longest numeric prefix of ``text``; 0.0 when there is none."""
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else 0.0


def _to_int(text):
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _INT_PREFIX.match(text)
    return int(match.group(1)) if match else 0


def _power(base, exponent):
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.inf if base == 0 else math.nan
    except OverflowError:
        if base < 0 and exponent % 2 == 1:
            return -math.inf
        return math.inf


def calc(value1, op, value2):
    """Apply ``op`` (+, -, *, / or ^) to two numbers and describe the result."""
    if value1 is None or op is None or value2 is None:
        raise CalcError("Erro: argumentos inválidos.")

    num1 = _to_float(value1)
    num2 = _to_float(value2)
    symbol = op[:1]

    if symbol == "+":
        result = num1 + num2
    elif symbol == "-":
        result = num1 - num2
    elif symbol == "*":
        result = num1 * num2
    elif symbol == "/":
        if abs(num2) < EPSILON:
            raise CalcError("Erro: divisão por zero.")
        result = num1 / num2
    elif symbol == "^":
        result = _power(num1, num2)
    else:
        raise CalcError(f"Erro: operador desconhecido '{op}'")

    return "Resultado calc %.3f %s %.3f = %.3f" % (num1, symbol, num2, result)


def bits(op1, op, op2=None):
    """Apply a bitwise operator to 16-bit unsigned operands and describe it."""
    if op1 is None or op is None:
        raise CalcError("Erro: argumentos inválidos.")

    num1 = _to_int(op1) & _USHORT
    num2 = _to_int(op2) & _USHORT if op2 is not None else 0

    if op == "~":
        return f"Resultado bits ~{num1} = {~num1 & _USHORT}"

    operations = {
        "&": lambda a, b: a & b,
        "|": lambda a, b: a | b,
        "^": lambda a, b: a ^ b,
        "<<": lambda a, b: a << b,
        ">>": lambda a, b: a >> b,
    }
    try:
        operation = operations[op]
    except KeyError:
        raise CalcError(f"Operador inválido: {op}") from None

    result = operation(num1, num2) & _USHORT
    return f"Resultado bits {num1} {op} {num2} = {result}"