"""
Proveedor de landmarks usando MediaPipe Hands.

Este módulo extrae la pose de una mano por frame y la entrega al motor
como LandmarkFrame (coordenadas normalizadas).
"""

import cv2
import mediapipe as mp

from .landmarks import LandmarkFrame


# ============================================================================
class HandTracker:
    """
    Seguimiento de una sola mano con MediaPipe Hands.

    Configuración:
        - max_num_hands=1: la calculadora se maneja con una mano
        - model_complexity=1: equilibrio entre precisión y rendimiento
        - static_image_mode=False: optimizado para video en tiempo real
    """

    def __init__(self, detection_confidence=0.85, tracking_confidence=0.85):
        """
        Args:
            detection_confidence (float): Confianza mínima para detectar la mano
            tracking_confidence (float): Confianza mínima para seguirla entre frames
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=1,
            min_detection_confidence=detection_confidence,
            min_tracking_confidence=tracking_confidence,
            model_complexity=1
        )
        self.mp_draw = mp.solutions.drawing_utils
        self.mp_draw_styles = mp.solutions.drawing_styles

    @classmethod
    def from_config(cls, config):
        confidence = config.get_detection_confidence()
        return cls(detection_confidence=confidence, tracking_confidence=confidence)

    def get_frame(self, img):
        """
        Extrae el LandmarkFrame de la mano visible en la imagen.

        Args:
            img (np.array): Imagen BGR capturada de la cámara

        Returns:
            tuple: (frame, results)
                - frame: LandmarkFrame normalizado, o None si no hay mano
                - results: Objeto results de MediaPipe (para dibujar)
        """
        # MediaPipe solo procesa RGB
        img_rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)
        img_rgb.flags.writeable = False
        results = self.hands.process(img_rgb)
        img_rgb.flags.writeable = True

        if not results.multi_hand_landmarks:
            return None, results
        return LandmarkFrame.from_mediapipe(results.multi_hand_landmarks[0]), results

    def draw_hands(self, img, results):
        """Dibuja landmarks y conexiones con los estilos predefinidos de MediaPipe."""
        if results.multi_hand_landmarks:
            for hand_landmarks in results.multi_hand_landmarks:
                self.mp_draw.draw_landmarks(
                    img, hand_landmarks, self.mp_hands.HAND_CONNECTIONS,
                    self.mp_draw_styles.get_default_hand_landmarks_style(),
                    self.mp_draw_styles.get_default_hand_connections_style()
                )
        return img

    def close(self):
        self.hands.close()
