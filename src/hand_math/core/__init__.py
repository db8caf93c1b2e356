"""
Módulo core con la lógica principal de clasificación y captura.
Contiene el clasificador de gestos, el filtro de estabilidad, la máquina de
estados del cálculo y el evaluador.
"""

from .landmarks import LandmarkFrame, InvalidFrame
from .gesture_classifier import GestureClassifier
from .stability import StabilityFilter, StabilityState, CommitEvent
from .capture import (
    CaptureStateMachine, CalculationState, CalculationRecord, Stage, TimerScheduler,
)
from .evaluator import evaluate, format_result
from .pipeline import CalculationEngine, TickResult

__all__ = [
    'LandmarkFrame', 'InvalidFrame', 'GestureClassifier',
    'StabilityFilter', 'StabilityState', 'CommitEvent',
    'CaptureStateMachine', 'CalculationState', 'CalculationRecord', 'Stage',
    'TimerScheduler', 'evaluate', 'format_result',
    'CalculationEngine', 'TickResult',
]
