"""
Historial en memoria de cálculos completados (no persistente).
"""

from collections import deque
from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class HistoryEntry:
    record: object
    timestamp: datetime = field(default_factory=datetime.now)


class CalculationHistory:
    """
    Últimos N cálculos, el más reciente primero.

    Se registra como listener del motor: engine.add_listener(history.add)
    """

    def __init__(self, size=10):
        self._entries = deque(maxlen=size)

    def add(self, record):
        entry = HistoryEntry(record)
        self._entries.appendleft(entry)
        return entry

    def entries(self):
        return list(self._entries)

    def clear(self):
        self._entries.clear()

    def __len__(self):
        return len(self._entries)
