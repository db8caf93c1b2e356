"""
Constructores de frames sintéticos para los tests.

Geometría (coordenadas normalizadas, y crece hacia abajo):
    - Cada dedo tiene su PIP (tip - 2) en y=0.5; la punta queda en y=0.3 si
      está extendido y en y=0.58 si está flexionado.
    - El MCP del pulgar (landmark 2) está en (0.4, 0.6). La punta del pulgar
      se coloca según la pose: "folded", "side" (extendido, no arriba) o
      "up" (extendido y por encima del landmark 2).
"""

from types import SimpleNamespace


FINGER_X = {8: 0.45, 12: 0.5, 16: 0.55, 20: 0.6}

THUMB_TIPS = {
    "folded": (0.35, 0.65),
    "side": (0.25, 0.65),
    "up": (0.25, 0.4),
}


def make_hand(index=False, middle=False, ring=False, pinky=False,
              thumb="folded", pinch=False):
    """
    Returns:
        list: 21 tuplas (x, y, z)
    """
    points = [[0.5, 0.5, 0.0] for _ in range(21)]
    points[0] = [0.5, 0.8, 0.0]
    points[1] = [0.42, 0.7, 0.0]
    points[2] = [0.4, 0.6, 0.0]

    for tip, extended in zip((8, 12, 16, 20), (index, middle, ring, pinky)):
        x = FINGER_X[tip]
        points[tip - 3] = [x, 0.6, 0.0]
        points[tip - 2] = [x, 0.5, 0.0]
        points[tip - 1] = [x, 0.4 if extended else 0.55, 0.0]
        points[tip] = [x, 0.3 if extended else 0.58, 0.0]

    if pinch:
        tip_x, tip_y = points[8][0] + 0.01, points[8][1] + 0.01
    else:
        tip_x, tip_y = THUMB_TIPS[thumb]
    points[4] = [tip_x, tip_y, 0.0]
    points[3] = [(tip_x + 0.4) / 2, (tip_y + 0.6) / 2, 0.0]

    return [tuple(p) for p in points]


def hand_for_digit(n):
    """Mano que el clasificador lee como el dígito n (0-5)."""
    return {
        0: make_hand(),
        1: make_hand(index=True),
        2: make_hand(index=True, thumb="side"),
        3: make_hand(index=True, middle=True, ring=True),
        4: make_hand(index=True, middle=True, ring=True, pinky=True),
        5: make_hand(index=True, middle=True, ring=True, pinky=True, thumb="side"),
    }[n]


OPERATOR_HANDS = {
    "circle": make_hand(middle=True, pinch=True),
    "rock": make_hand(thumb="side"),
    "victory": make_hand(index=True, middle=True),
    "thumbsup": make_hand(thumb="up"),
}


def as_mediapipe(points):
    """Imita un NormalizedLandmarkList de MediaPipe."""
    return SimpleNamespace(
        landmark=[SimpleNamespace(x=x, y=y, z=z) for x, y, z in points]
    )


class FakeTask:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True

    def fire(self):
        # Simula un temporizador que ya había arrancado: ignora cancel()
        self.callback()


class FakeScheduler:
    """Planificador determinista: las tareas solo se ejecutan con fire()."""

    def __init__(self):
        self.tasks = []

    def schedule(self, delay, callback):
        task = FakeTask(delay, callback)
        self.tasks.append(task)
        return task

    @property
    def last(self):
        return self.tasks[-1]

    def active(self):
        return [t for t in self.tasks if not t.cancelled]
