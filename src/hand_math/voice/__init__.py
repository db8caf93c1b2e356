"""
Módulo de síntesis de voz.
Contiene el narrador de números, operadores y cálculos.
"""

from .feedback import VoiceFeedback, describe_calculation

__all__ = ['VoiceFeedback', 'describe_calculation']
