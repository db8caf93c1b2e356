"""
Módulo de la aplicación principal.
Contiene la clase que integra todos los componentes y el historial.
"""

from .history import CalculationHistory, HistoryEntry

__all__ = ['CalculationHistory', 'HistoryEntry']
