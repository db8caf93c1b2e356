"""
Configuración de la calculadora gestual.

Este módulo centraliza umbrales del motor, opciones de cámara, voz,
accesibilidad y ayudas visuales.
"""

SUPPORTED_LANGUAGES = ('es', 'en')


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración de la calculadora (se pasa al construir)
# Responsabilidades:
#   - Umbrales geométricos y de estabilidad del motor
#   - Preferencias de voz (volumen, velocidad, idioma)
#   - Modo de gestos extendidos (para movilidad reducida)
#   - Cámara y ayudas visuales
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora gestual.

    Los componentes del motor leen estos valores al construirse y no los
    modifican. La aplicación sí puede alternar opciones de presentación
    (voz, historial) en tiempo de ejecución.
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # MOTOR DE GESTOS
        # ====================================================================
        self.commit_threshold = 10              # Frames idénticos para confirmar
        self.thumb_extension_threshold = 0.1    # Separación lateral del pulgar (normalizada)
        self.circle_threshold = 0.05            # Distancia pulgar-índice para "círculo"
        self.auto_reset_delay_ms = 2000         # Espera en COMPLETE antes de reiniciar

        # ====================================================================
        # MODO GESTOS EXTENDIDOS (para usuarios con movilidad reducida)
        # ====================================================================
        self.extended_gestures = False
        self.extended_commit_threshold = 20     # Más frames para confirmar

        # ====================================================================
        # DETECCIÓN Y CÁMARA
        # ====================================================================
        self.sensitivity = 7                    # 1-10, ajusta confianza de MediaPipe
        self.camera_index = 0
        self.frame_width = 1280
        self.frame_height = 720
        self.mirror = True                      # Espejear imagen (cámara frontal)

        # ====================================================================
        # CONFIGURACIÓN DE VOZ
        # ====================================================================
        self.voice_enabled = True
        self.voice_volume = 0.8                 # Volumen (0.0-1.0)
        self.voice_rate = 150                   # Palabras por minuto
        self.voice_language = 'es'              # 'es' o 'en'

        # ====================================================================
        # AYUDAS VISUALES E HISTORIAL
        # ====================================================================
        self.show_hand_outline = True           # Recuadro alrededor de la mano
        self.show_finger_markers = True         # Marcadores en las puntas
        self.show_guide = True                  # Guía lateral de gestos
        self.history_size = 10                  # Cálculos recientes a conservar

    def get_commit_threshold(self):
        """Frames de estabilidad según el modo activo."""
        return self.extended_commit_threshold if self.extended_gestures else self.commit_threshold

    def get_auto_reset_delay(self):
        """Retardo del reinicio automático en segundos."""
        return self.auto_reset_delay_ms / 1000.0

    def get_detection_confidence(self):
        """
        Confianza mínima de detección/seguimiento para MediaPipe.

        Returns:
            float: 0.5 + sensitivity / 20, limitado a [0.0, 1.0]
                   (sensibilidad 7 -> 0.85)
        """
        return max(0.0, min(1.0, 0.5 + self.sensitivity / 20))

    def validate(self):
        """
        Comprueba rangos de todos los valores.

        Raises:
            ValueError: Con el primer valor fuera de rango
        """
        if self.commit_threshold < 1 or self.extended_commit_threshold < 1:
            raise ValueError("El umbral de confirmación debe ser >= 1")
        if self.thumb_extension_threshold <= 0 or self.circle_threshold <= 0:
            raise ValueError("Los umbrales geométricos deben ser positivos")
        if self.auto_reset_delay_ms < 0:
            raise ValueError("auto_reset_delay_ms no puede ser negativo")
        if not 1 <= self.sensitivity <= 10:
            raise ValueError(f"Sensibilidad fuera de rango (1-10): {self.sensitivity}")
        if not 0.0 <= self.voice_volume <= 1.0:
            raise ValueError(f"Volumen fuera de rango (0-1): {self.voice_volume}")
        if self.voice_language not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Idioma no soportado: {self.voice_language!r}")
        if self.history_size < 1:
            raise ValueError("history_size debe ser >= 1")
        return self
