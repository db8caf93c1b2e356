"""
Vocabulario de símbolos producidos por el clasificador de gestos.

Un símbolo es una cadena:
    - "0" a "5": número de dedos extendidos
    - "circle", "rock", "victory", "thumbsup": gestos de operador
    - "none": no hay mano en el frame
"""

NONE = "none"

CIRCLE = "circle"       # Pulgar e índice tocándose -> suma
ROCK = "rock"           # Puño con pulgar lateral -> resta
VICTORY = "victory"     # Índice + medio en V -> multiplicación
THUMBSUP = "thumbsup"   # Pulgar arriba -> división

ADD = "+"
SUBTRACT = "−"     # Signo menos tipográfico
MULTIPLY = "×"
DIVIDE = "÷"

# Mapeo cerrado gesto -> operador imprimible
OPERATOR_SYMBOLS = {
    CIRCLE: ADD,
    ROCK: SUBTRACT,
    VICTORY: MULTIPLY,
    THUMBSUP: DIVIDE,
}

OPERATORS = (ADD, SUBTRACT, MULTIPLY, DIVIDE)

DIGITS = tuple(str(n) for n in range(6))


def is_operator(symbol):
    """True si el símbolo es uno de los cuatro gestos de operador."""
    return symbol in OPERATOR_SYMBOLS


def is_digit(symbol):
    """True si el símbolo es un conteo de dedos 0-5."""
    return symbol in DIGITS


def digit_value(symbol):
    """
    Valor entero de un símbolo numérico.

    Raises:
        ValueError: Si el símbolo no es un dígito
    """
    if not is_digit(symbol):
        raise ValueError(f"Símbolo no numérico: {symbol!r}")
    return int(symbol)


def is_operand(symbol):
    """Operando válido: dígito estrictamente positivo (el 0 nunca es operando)."""
    return is_digit(symbol) and digit_value(symbol) > 0


def operator_for(symbol):
    """Operador imprimible para un gesto de operador, o None."""
    return OPERATOR_SYMBOLS.get(symbol)
