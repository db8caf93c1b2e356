"""
Máquina de estados de captura del cálculo.

Acumula los símbolos confirmados en cuatro casillas, en orden:
primer número -> operador -> segundo número -> resultado.
Soporta avance automático (eventos del filtro de estabilidad) y captura
manual de una casilla a partir del último símbolo observado.
"""

import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from . import symbols
from .evaluator import evaluate


Number = Union[int, float]

SLOT_FIRST = "first"
SLOT_OPERATOR = "operator"
SLOT_SECOND = "second"
SLOTS = (SLOT_FIRST, SLOT_OPERATOR, SLOT_SECOND)


class Stage(Enum):
    """Etapas del cálculo (el valor es el texto del overlay, sin tildes para OpenCV)."""
    AWAITING_HAND = "Sin mano detectada"
    DETECTING = "Detectando gesto..."
    GOT_FIRST = "Primer numero detectado"
    GOT_OPERATOR = "Operador detectado"
    GOT_SECOND = "Segundo numero detectado"
    COMPLETE = "Calculo completo"


@dataclass(frozen=True)
class CalculationState:
    """Instantánea de solo lectura del cálculo en curso."""
    stage: Stage = Stage.DETECTING
    first_operand: Optional[int] = None
    operator: Optional[str] = None
    second_operand: Optional[int] = None
    result: Optional[Number] = None


@dataclass(frozen=True)
class CalculationRecord:
    """Cálculo completado, para historial y narración."""
    first_operand: int
    operator: str
    second_operand: int
    result: Number


class TimerScheduler:
    """Programa callbacks diferidos con threading.Timer (hilos daemon)."""

    def schedule(self, delay, callback):
        """
        Returns:
            threading.Timer: Tarea ya iniciada; se cancela con .cancel()
        """
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer


# ============================================================================
# CLASE: CaptureStateMachine
# Propósito: Construir una operación de dos operandos a partir de gestos
# Responsabilidades:
#   - Avanzar de etapa con cada símbolo confirmado válido
#   - Captura manual por casilla (sin debounce ni orden de etapas)
#   - Evaluar al completar el segundo operando
#   - Programar el reinicio automático tras completar
# ============================================================================
class CaptureStateMachine:
    """
    Máquina de estados del cálculo.

    Transiciones automáticas (on_commit):
        AWAITING_HAND / DETECTING + dígito 1-5   -> GOT_FIRST
        GOT_FIRST + gesto de operador            -> GOT_OPERATOR
        GOT_OPERATOR + dígito 1-5                -> COMPLETE (evalúa)
        cualquier otra combinación               -> se ignora

    Todas las mutaciones se hacen bajo un lock porque el reinicio diferido
    se ejecuta en el hilo del temporizador.
    """

    def __init__(self, auto_reset_delay=2.0, scheduler=None):
        """
        Args:
            auto_reset_delay (float): Segundos en COMPLETE antes de volver a
                DETECTING (None desactiva el reinicio automático)
            scheduler: Objeto con schedule(delay, callback) que devuelve una
                tarea cancelable. Por defecto TimerScheduler
        """
        self.auto_reset_delay = auto_reset_delay
        self.scheduler = scheduler if scheduler else TimerScheduler()
        self.last_symbol = symbols.NONE

        self._lock = threading.RLock()
        self._listeners = []
        self._pending_reset = None
        self._generation = 0

        self._stage = Stage.AWAITING_HAND
        self._first = None
        self._operator = None
        self._second = None
        self._result = None

    # ------------------------------------------------------------------------
    # Salidas para la presentación
    # ------------------------------------------------------------------------
    @property
    def stage(self):
        return self._stage

    def snapshot(self):
        """Estado actual como CalculationState inmutable."""
        with self._lock:
            return CalculationState(
                stage=self._stage,
                first_operand=self._first,
                operator=self._operator,
                second_operand=self._second,
                result=self._result,
            )

    def pending_slots(self):
        """Casillas aún vacías, en orden de captura."""
        with self._lock:
            values = {
                SLOT_FIRST: self._first,
                SLOT_OPERATOR: self._operator,
                SLOT_SECOND: self._second,
            }
            return [slot for slot in SLOTS if values[slot] is None]

    def add_listener(self, callback):
        """Registra callback(record: CalculationRecord) para cada cálculo completado."""
        self._listeners.append(callback)

    # ------------------------------------------------------------------------
    # Entradas
    # ------------------------------------------------------------------------
    def observe_symbol(self, symbol):
        """
        Registra el último símbolo observado (confirmado o no).

        Solo alterna entre AWAITING_HAND y DETECTING según haya mano;
        nunca toca los operandos.
        """
        with self._lock:
            self.last_symbol = symbol
            if symbol == symbols.NONE and self._stage == Stage.DETECTING:
                self._stage = Stage.AWAITING_HAND
            elif symbol != symbols.NONE and self._stage == Stage.AWAITING_HAND:
                self._stage = Stage.DETECTING

    def on_commit(self, symbol):
        """
        Avance automático con un símbolo confirmado.

        Returns:
            bool: True si el símbolo produjo una transición
        """
        with self._lock:
            stage = self._stage

            if stage in (Stage.AWAITING_HAND, Stage.DETECTING):
                if not symbols.is_operand(symbol):
                    return False
                self._first = symbols.digit_value(symbol)
                self._stage = Stage.GOT_FIRST
                return True

            if stage == Stage.GOT_FIRST:
                if not symbols.is_operator(symbol):
                    return False
                self._operator = symbols.operator_for(symbol)
                self._stage = Stage.GOT_OPERATOR
                return True

            if stage == Stage.GOT_OPERATOR:
                if not symbols.is_operand(symbol):
                    return False
                self._second = symbols.digit_value(symbol)
                record = self._complete()
                self._schedule_reset()
                # Listeners al final: un listener que falla no deja COMPLETE sin reinicio
                self._notify(record)
                return True

            return False

    def manual_capture(self, slot):
        """
        Captura manual de una casilla con el último símbolo observado.

        Ignora la etapa actual: una llamada fuera de orden que cumple el tipo
        de la casilla la sobrescribe igualmente (permite corregir una casilla).

        Args:
            slot (str): "first", "operator" o "second"

        Returns:
            bool: True si el símbolo era válido para la casilla y se aplicó

        Raises:
            ValueError: Si el nombre de casilla no existe
        """
        if slot not in SLOTS:
            raise ValueError(f"Casilla desconocida: {slot!r}")

        with self._lock:
            symbol = self.last_symbol
            if slot == SLOT_OPERATOR:
                if not symbols.is_operator(symbol):
                    return False
                self._operator = symbols.operator_for(symbol)
                self._stage = Stage.GOT_OPERATOR
            else:
                if not symbols.is_operand(symbol):
                    return False
                if slot == SLOT_FIRST:
                    self._first = symbols.digit_value(symbol)
                    self._stage = Stage.GOT_FIRST
                else:
                    self._second = symbols.digit_value(symbol)
                    self._stage = Stage.GOT_SECOND

            self._cancel_pending_reset()
            self._result = None
            return True

    def calculate(self):
        """
        Evalúa manualmente si las tres casillas están completas.

        Returns:
            int | float | None: Resultado, o None si falta alguna casilla
        """
        with self._lock:
            if None in (self._first, self._operator, self._second):
                return None
            self._cancel_pending_reset()
            record = self._complete()
            self._notify(record)
            return record.result

    def reset(self):
        """Vacía las cuatro casillas y vuelve a DETECTING desde cualquier etapa."""
        with self._lock:
            self._cancel_pending_reset()
            self._first = None
            self._operator = None
            self._second = None
            self._result = None
            self._stage = Stage.DETECTING

    # ------------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------------
    def _complete(self):
        self._result = evaluate(self._first, self._operator, self._second)
        self._stage = Stage.COMPLETE
        record = CalculationRecord(
            first_operand=self._first,
            operator=self._operator,
            second_operand=self._second,
            result=self._result,
        )
        return record

    def _notify(self, record):
        for listener in list(self._listeners):
            listener(record)

    def _schedule_reset(self):
        # Una única tarea pendiente: la nueva reemplaza a la anterior
        self._cancel_pending_reset()
        if self.auto_reset_delay is None:
            return
        generation = self._generation
        self._pending_reset = self.scheduler.schedule(
            self.auto_reset_delay, lambda: self._on_reset_timer(generation)
        )

    def _cancel_pending_reset(self):
        self._generation += 1
        if self._pending_reset is not None:
            self._pending_reset.cancel()
            self._pending_reset = None

    def _on_reset_timer(self, generation):
        with self._lock:
            if generation != self._generation:
                return
            self._pending_reset = None
            self.reset()
