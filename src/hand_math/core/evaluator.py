"""
Evaluador aritmético de dos operandos.

La división entre cero no lanza excepción: devuelve NaN para que la UI y la
voz lo presenten como "no se puede dividir entre cero".
"""

import math

from .symbols import ADD, SUBTRACT, MULTIPLY, DIVIDE


def evaluate(a, op, b):
    """
    Evalúa a <op> b.

    Args:
        a (int): Primer operando
        op (str): Operador imprimible ("+", "−", "×", "÷")
        b (int): Segundo operando

    Returns:
        int | float: Resultado; división real (7 ÷ 2 = 3.5) y NaN si b == 0

    Raises:
        AssertionError: Operador fuera del conjunto cerrado. Indica una
            violación del contrato entre clasificador y máquina de estados.
    """
    if op == ADD:
        return a + b
    if op == SUBTRACT:
        return a - b
    if op == MULTIPLY:
        return a * b
    if op == DIVIDE:
        if b == 0:
            return math.nan
        return a / b
    raise AssertionError(f"Operador desconocido: {op!r}")


def is_division_by_zero(value):
    return isinstance(value, float) and math.isnan(value)


def format_result(value):
    """
    Formatea un resultado para mostrarlo.

    Formateo:
        - 42 / 42.0 -> "42" (enteros sin decimales)
        - 3.14159265 -> "3.141593" (máximo 6 decimales, sin ceros finales)
        - NaN -> "Error: ÷0"
        - None -> ""
    """
    if value is None:
        return ""
    if is_division_by_zero(value):
        return "Error: ÷0"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return f"{value:.6f}".rstrip('0').rstrip('.')
    return str(value)
