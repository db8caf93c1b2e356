"""
Calculadora gestual con una mano.

Convierte un flujo de landmarks de mano (MediaPipe) en una operación de dos
operandos: primer número, operador, segundo número y resultado.
"""

__version__ = "0.1.0"
