"""
Clasificador geométrico de gestos.

Este módulo convierte un frame de landmarks en un símbolo discreto:
un dígito 0-5 o uno de los cuatro gestos de operador.
"""

from .landmarks import (
    LandmarkFrame, FINGER_TIPS, THUMB_MCP, THUMB_TIP, INDEX_TIP,
)
from . import symbols


# ============================================================================
# CLASE: GestureClassifier
# Propósito: Clasificar un frame de landmarks en un símbolo
# Responsabilidades:
#   - Detectar dedos extendidos (4 dedos + pulgar)
#   - Reconocer gestos de operador con precedencia fija
#   - Contar dedos como alternativa numérica
# ============================================================================
class GestureClassifier:
    """
    Clasificador determinista y sin estado.

    Precedencia fija (el primer gesto que coincide gana):
        1. Círculo (pulgar toca índice)       -> "circle"   (+)
        2. Rock (puño, pulgar lateral)        -> "rock"     (−)
        3. Victoria (índice + medio)          -> "victory"  (×)
        4. Pulgar arriba (puño, pulgar arriba) -> "thumbsup" (÷)
        5. Conteo de dedos extendidos         -> "0" ... "5"

    El orden importa porque una misma pose puede cumplir varios predicados
    (un puño con pulgar lateral es "rock" y también el número 1).
    """

    def __init__(self, thumb_threshold=0.1, circle_threshold=0.05):
        """
        Args:
            thumb_threshold (float): Desplazamiento horizontal mínimo de la punta
                del pulgar respecto a su MCP (landmark 2) para considerarlo extendido
            circle_threshold (float): Distancia máxima pulgar-índice para el gesto
                de círculo, en unidades normalizadas
        """
        self.thumb_threshold = thumb_threshold
        self.circle_threshold = circle_threshold

    def finger_extension(self, frame):
        """
        Vector de extensión de los cuatro dedos (sin pulgar).

        Un dedo está extendido si su punta está por encima (y menor) de la
        articulación dos posiciones más proximal (tip - 2).

        Returns:
            list: [índice, medio, anular, meñique] como booleanos
        """
        return [frame.y(tip) < frame.y(tip - 2) for tip in FINGER_TIPS]

    def thumb_extended(self, frame):
        """Pulgar extendido si se separa lateralmente más del umbral."""
        return abs(frame.x(THUMB_TIP) - frame.x(THUMB_MCP)) > self.thumb_threshold

    def thumb_pointing_up(self, frame):
        return frame.y(THUMB_TIP) < frame.y(THUMB_MCP)

    def classify(self, frame):
        """
        Clasifica un frame de landmarks.

        Args:
            frame (LandmarkFrame | None): Pose de la mano, o None si no hay mano.
                También acepta una secuencia de 21 puntos.

        Returns:
            str: Símbolo ("0"-"5", "circle", "rock", "victory", "thumbsup", "none")

        Raises:
            InvalidFrame: Si el frame no tiene 21 landmarks válidos
        """
        if frame is None:
            return symbols.NONE
        if not isinstance(frame, LandmarkFrame):
            frame = LandmarkFrame(frame)

        index, middle, ring, pinky = fingers = self.finger_extension(frame)
        thumb = self.thumb_extended(frame)
        thumb_up = self.thumb_pointing_up(frame)
        fist = not any(fingers)

        # ====================================================================
        # GESTOS DE OPERADOR (en orden de precedencia)
        # ====================================================================
        if frame.planar_distance(THUMB_TIP, INDEX_TIP) < self.circle_threshold:
            return symbols.CIRCLE

        if fist and thumb and not thumb_up:
            return symbols.ROCK

        if index and middle and not ring and not pinky and not thumb:
            return symbols.VICTORY

        if fist and thumb and thumb_up:
            return symbols.THUMBSUP

        # ====================================================================
        # NÚMEROS 0-5: dedos extendidos + pulgar
        # ====================================================================
        return str(sum(fingers) + (1 if thumb else 0))
