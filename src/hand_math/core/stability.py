"""
Filtro de estabilidad temporal.

Convierte la secuencia ruidosa de símbolos por frame en eventos de
confirmación: un símbolo se confirma cuando se repite durante N frames
consecutivos.
"""

from dataclasses import dataclass
from typing import Optional

from . import symbols


@dataclass
class StabilityState:
    """Último símbolo observado y longitud de su racha actual."""
    last_symbol: Optional[str] = None
    run_length: int = 0


@dataclass(frozen=True)
class CommitEvent:
    """Símbolo que se mantuvo estable el número requerido de frames."""
    symbol: str


class StabilityFilter:
    """
    Denoiser por longitud de racha.

    - Mismo símbolo que el anterior: la racha crece en 1
    - Símbolo distinto: la racha se reinicia a 1
    - Al llegar exactamente al umbral se emite un único CommitEvent;
      la racha puede seguir creciendo sin volver a emitir

    El filtro no conoce la etapa del cálculo. "none" cuenta como un símbolo
    más para las rachas, pero nunca produce una confirmación.
    """

    def __init__(self, threshold=10):
        if threshold < 1:
            raise ValueError("El umbral de confirmación debe ser >= 1")
        self.threshold = threshold
        self.state = StabilityState()

    def observe(self, symbol):
        """
        Registra el símbolo de un frame.

        Args:
            symbol (str): Símbolo clasificado en este frame

        Returns:
            CommitEvent | None: Evento si la racha acaba de alcanzar el umbral
        """
        state = self.state
        if symbol == state.last_symbol:
            state.run_length += 1
        else:
            state.last_symbol = symbol
            state.run_length = 1

        if state.run_length == self.threshold and symbol != symbols.NONE:
            return CommitEvent(symbol)
        return None

    @property
    def progress(self):
        """Fracción (0.0-1.0) de la racha actual respecto al umbral."""
        if self.state.last_symbol in (None, symbols.NONE):
            return 0.0
        return min(self.state.run_length / self.threshold, 1.0)

    def reset(self):
        self.state = StabilityState()
