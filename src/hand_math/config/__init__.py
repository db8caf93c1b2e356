"""
Módulo de configuración para la calculadora gestual.
Contiene la configuración del motor, la voz y las ayudas visuales.
"""

from .settings import CalculatorConfig, SUPPORTED_LANGUAGES

__all__ = ['CalculatorConfig', 'SUPPORTED_LANGUAGES']
