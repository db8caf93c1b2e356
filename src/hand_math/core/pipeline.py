"""
Pipeline por frame: clasificador -> filtro de estabilidad -> máquina de estados.

Cada frame (o su ausencia) es un mensaje que se procesa completo y en orden
antes del siguiente.
"""

from dataclasses import dataclass
from typing import Optional

from ..config import CalculatorConfig
from . import symbols
from .capture import CaptureStateMachine
from .gesture_classifier import GestureClassifier
from .landmarks import InvalidFrame
from .stability import StabilityFilter, CommitEvent


@dataclass(frozen=True)
class TickResult:
    """Resultado de procesar un frame."""
    symbol: str
    commit: Optional[CommitEvent] = None
    advanced: bool = False      # El commit produjo una transición de etapa


class CalculationEngine:
    """
    Motor de captura de cálculos por gestos.

    Uso típico (un consumidor, un frame por tick):
        engine = CalculationEngine(config)
        engine.add_listener(history.add)
        for frame in frames:            # LandmarkFrame o None
            tick = engine.process_frame(frame)

    En modo manual los commits no avanzan la máquina; el llamador usa
    manual_capture() y calculate().
    """

    def __init__(self, config=None, scheduler=None):
        """
        Args:
            config (CalculatorConfig): Umbrales y retardos (opcional)
            scheduler: Planificador del reinicio diferido (opcional, para tests)
        """
        if config is None:
            config = CalculatorConfig()

        self.classifier = GestureClassifier(
            thumb_threshold=config.thumb_extension_threshold,
            circle_threshold=config.circle_threshold,
        )
        self.stability = StabilityFilter(config.get_commit_threshold())
        self.machine = CaptureStateMachine(
            auto_reset_delay=config.get_auto_reset_delay(),
            scheduler=scheduler,
        )
        self.manual_mode = False
        self._invalid_streak = 0

    def process_frame(self, frame):
        """
        Procesa un tick.

        Args:
            frame: LandmarkFrame, secuencia de 21 puntos, o None si no hay mano

        Returns:
            TickResult: Símbolo del frame, commit emitido y si hubo transición

        Un frame mal formado se trata como "none" (no interrumpe el pipeline).
        """
        try:
            symbol = self.classifier.classify(frame)
            self._invalid_streak = 0
        except InvalidFrame as e:
            if self._invalid_streak == 0:
                print(f"⚠ Frame inválido, se trata como sin mano: {e}")
            self._invalid_streak += 1
            symbol = symbols.NONE

        self.machine.observe_symbol(symbol)
        commit = self.stability.observe(symbol)

        advanced = False
        if commit is not None and not self.manual_mode:
            advanced = self.machine.on_commit(commit.symbol)
        return TickResult(symbol=symbol, commit=commit, advanced=advanced)

    # ------------------------------------------------------------------------
    # Control
    # ------------------------------------------------------------------------
    def set_manual_mode(self, enabled):
        """Cambia de modo; siempre empieza un cálculo nuevo."""
        self.manual_mode = bool(enabled)
        self.reset()

    def set_commit_threshold(self, threshold):
        """
        Cambia los frames necesarios para confirmar un gesto.

        La racha en curso se descarta: el gesto sostenido vuelve a contar desde 1.
        """
        self.stability = StabilityFilter(threshold)

    def manual_capture(self, slot):
        return self.machine.manual_capture(slot)

    def calculate(self):
        return self.machine.calculate()

    def reset(self):
        self.machine.reset()
        self.stability.reset()

    def add_listener(self, callback):
        self.machine.add_listener(callback)

    # ------------------------------------------------------------------------
    # Salidas para la presentación
    # ------------------------------------------------------------------------
    @property
    def stage(self):
        return self.machine.stage

    @property
    def last_symbol(self):
        return self.machine.last_symbol

    def snapshot(self):
        return self.machine.snapshot()

    def pending_slots(self):
        return self.machine.pending_slots()

    @property
    def stability_progress(self):
        return self.stability.progress
