"""
Frame de landmarks de una mano.

Numeración anatómica de MediaPipe Hands (21 puntos):
    0: muñeca
    1-4: pulgar (CMC, MCP, IP, punta)
    5-8: índice, 9-12: medio, 13-16: anular, 17-20: meñique
Coordenadas normalizadas (0-1) respecto al ancho/alto del frame.
"""

import numpy as np


NUM_LANDMARKS = 21

WRIST = 0
THUMB_MCP = 2
THUMB_TIP = 4
INDEX_TIP = 8
MIDDLE_TIP = 12
RING_TIP = 16
PINKY_TIP = 20

FINGER_TIPS = (INDEX_TIP, MIDDLE_TIP, RING_TIP, PINKY_TIP)


class InvalidFrame(ValueError):
    """Frame de landmarks mal formado (número de puntos o coordenadas inválidas)."""


def _point_coords(point):
    # Acepta objetos MediaPipe (.x/.y/.z), diccionarios y tuplas (x, y[, z])
    if hasattr(point, "x") and hasattr(point, "y"):
        return (point.x, point.y, getattr(point, "z", 0.0))
    if isinstance(point, dict):
        return (point["x"], point["y"], point.get("z", 0.0))
    coords = tuple(point)
    if len(coords) == 2:
        return coords + (0.0,)
    if len(coords) == 3:
        return coords
    raise InvalidFrame(f"Punto con {len(coords)} coordenadas")


class LandmarkFrame:
    """
    Pose de una mano en un único frame: 21 puntos (x, y, z) inmutables.

    Args:
        points: Secuencia de 21 puntos. Cada punto puede ser una tupla
                (x, y) o (x, y, z), un diccionario {'x', 'y', 'z'} o un
                landmark de MediaPipe.

    Raises:
        InvalidFrame: Si no hay exactamente 21 puntos o alguna coordenada
                      no es numérica/finita
    """

    def __init__(self, points):
        try:
            coords = [_point_coords(p) for p in points]
        except (TypeError, KeyError) as e:
            raise InvalidFrame(f"Landmark ilegible: {e}") from e

        if len(coords) != NUM_LANDMARKS:
            raise InvalidFrame(
                f"Se esperaban {NUM_LANDMARKS} landmarks, recibidos {len(coords)}"
            )

        try:
            array = np.asarray(coords, dtype=float)
        except (TypeError, ValueError) as e:
            raise InvalidFrame(f"Coordenadas no numéricas: {e}") from e
        if not np.all(np.isfinite(array)):
            raise InvalidFrame("Coordenadas no finitas en el frame")

        array.flags.writeable = False
        self._points = array

    @classmethod
    def from_mediapipe(cls, hand_landmarks):
        """Construye el frame a partir de un NormalizedLandmarkList de MediaPipe."""
        return cls(hand_landmarks.landmark)

    @property
    def points(self):
        """Array NumPy (21, 3) de solo lectura."""
        return self._points

    def x(self, index):
        return float(self._points[index, 0])

    def y(self, index):
        return float(self._points[index, 1])

    def planar_distance(self, a, b):
        """Distancia euclidiana en el plano (x, y) entre dos landmarks."""
        return float(np.linalg.norm(self._points[a, :2] - self._points[b, :2]))

    def bounding_box(self):
        """(min_x, min_y, max_x, max_y) en coordenadas normalizadas."""
        xy = self._points[:, :2]
        min_x, min_y = xy.min(axis=0)
        max_x, max_y = xy.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)

    def __len__(self):
        return NUM_LANDMARKS

    def __eq__(self, other):
        if not isinstance(other, LandmarkFrame):
            return NotImplemented
        return np.array_equal(self._points, other._points)

    def __hash__(self):
        return hash(self._points.tobytes())
