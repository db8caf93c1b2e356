"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el estado del cálculo,
el gesto detectado y las ayudas visuales sobre el frame de la cámara.
"""

import time

import cv2
import numpy as np

from ..config import CalculatorConfig
from ..core import symbols
from ..core.capture import Stage, SLOT_FIRST, SLOT_OPERATOR, SLOT_SECOND
from ..core.evaluator import format_result, is_division_by_zero
from ..core.landmarks import FINGER_TIPS, THUMB_TIP


# OpenCV (Hershey) no dibuja "−", "×" ni "÷"
ASCII_OPERATORS = {
    symbols.ADD: "+",
    symbols.SUBTRACT: "-",
    symbols.MULTIPLY: "x",
    symbols.DIVIDE: "/",
}

GESTURE_LABELS = {
    symbols.CIRCLE: "Suma (+)",
    symbols.ROCK: "Resta (-)",
    symbols.VICTORY: "Multiplicar (x)",
    symbols.THUMBSUP: "Dividir (/)",
}

SLOT_HINTS = {
    SLOT_FIRST: "Muestra el primer numero (1-5 dedos)",
    SLOT_OPERATOR: "Muestra un operador",
    SLOT_SECOND: "Muestra el segundo numero (1-5 dedos)",
}

FINGER_NAMES = ("Pulgar", "Indice", "Medio", "Anular", "Menique")


def to_ascii(text):
    """Sustituye los operadores tipográficos por equivalentes ASCII."""
    for op, ascii_op in ASCII_OPERATORS.items():
        text = text.replace(op, ascii_op)
    return text


def gesture_label(symbol):
    if symbol == symbols.NONE:
        return ""
    if symbol in GESTURE_LABELS:
        return GESTURE_LABELS[symbol]
    return f"Numero {symbol}"


def expression_text(state):
    """
    Expresión visible para un CalculationState, p. ej. "3 x 2 = 6".
    Las casillas vacías se muestran como "?".
    """
    first = "?" if state.first_operand is None else str(state.first_operand)
    op = "?" if state.operator is None else ASCII_OPERATORS.get(state.operator, "?")
    second = "?" if state.second_operand is None else str(state.second_operand)
    text = f"{first} {op} {second}"
    if state.result is not None:
        text += f" = {to_ascii(format_result(state.result))}"
    return text


# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora gestual.

    Componentes visuales:
        1. Display principal: expresión, resultado y etapa actual
        2. Mano: recuadro y marcadores en las puntas de los dedos
        3. Indicador de gesto con barra de estabilidad
        4. Guía lateral de gestos
        5. Feedback temporal de confirmación/error
        6. Historial de cálculos recientes
        7. Ayuda del modo manual
    """

    def __init__(self, width, height, config=None):
        """
        Args:
            width (int): Ancho de la ventana en píxeles
            height (int): Alto de la ventana en píxeles
            config (CalculatorConfig): Configuración (opcional)
        """
        self.width = width
        self.height = height
        self.config = config if config else CalculatorConfig()
        self.feedback_msg = ""
        self.feedback_timer = 0
        self.feedback_color = (0, 255, 0)
        self.show_history = True

    def show_feedback(self, msg, color=(0, 255, 0), duration=40):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames (~40 frames = 1.3 s @ 30fps)
        """
        self.feedback_msg = to_ascii(msg)
        self.feedback_color = color
        self.feedback_timer = duration

    def draw_display(self, img, state, pending_slots, manual_mode=False):
        """
        Dibuja el display principal del cálculo.

        Colores del resultado:
            - Verde: resultado válido
            - Rojo: división entre cero
        """
        x, y, w, h = 30, 30, min(self.width - 60, 640), 200

        overlay = img.copy()
        cv2.rectangle(overlay, (x, y), (x + w, y + h), (35, 35, 35), -1)
        cv2.addWeighted(overlay, 0.92, img, 0.08, 0, img)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 200, 255), 4)

        title = "CALCULADORA GESTUAL" + (" [MANUAL]" if manual_mode else "")
        cv2.putText(img, title, (x + 20, y + 40),
                   cv2.FONT_HERSHEY_DUPLEX, 1.0, (200, 200, 200), 2)

        cv2.putText(img, state.stage.value, (x + 20, y + 75),
                   cv2.FONT_HERSHEY_SIMPLEX, 0.7, (180, 180, 180), 2)

        color = (255, 255, 255)
        if state.result is not None:
            color = (100, 100, 255) if is_division_by_zero(state.result) else (100, 255, 100)
        text = expression_text(state)
        font_scale = 2.2 if len(text) < 14 else 1.5
        cv2.putText(img, text, (x + 20, y + 145),
                   cv2.FONT_HERSHEY_DUPLEX, font_scale, color, 3)

        if pending_slots:
            cv2.putText(img, SLOT_HINTS[pending_slots[0]], (x + 20, y + 185),
                       cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 200, 255), 1)

    def draw_hand(self, img, frame, symbol):
        """
        Recuadro alrededor de la mano, marcadores de puntas y etiqueta del gesto.

        Args:
            img (np.array): Imagen sobre la cual dibujar
            frame (LandmarkFrame | None): Pose de la mano
            symbol (str): Símbolo clasificado en este frame
        """
        if frame is None:
            return

        points = frame.points[:, :2] * np.array([self.width, self.height])
        box_x1, box_y1, box_x2, box_y2 = frame.bounding_box()
        min_x, min_y = int(box_x1 * self.width) - 20, int(box_y1 * self.height) - 20
        max_x, max_y = int(box_x2 * self.width) + 20, int(box_y2 * self.height) + 20
        min_x, min_y = max(min_x, 0), max(min_y, 0)
        max_x, max_y = min(max_x, self.width), min(max_y, self.height)

        if self.config.show_hand_outline:
            cv2.rectangle(img, (min_x, min_y), (max_x, max_y), (0, 0, 255), 3)

        if self.config.show_finger_markers:
            for name, idx in zip(FINGER_NAMES, (THUMB_TIP,) + FINGER_TIPS):
                px, py = (int(v) for v in points[idx])
                cv2.circle(img, (px, py), 8, (0, 0, 255), -1)
                cv2.putText(img, name, (px - 20, py - 15),
                           cv2.FONT_HERSHEY_SIMPLEX, 0.5, (0, 0, 0), 3)
                cv2.putText(img, name, (px - 20, py - 15),
                           cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

        label = gesture_label(symbol)
        if label:
            top = max(min_y - 30, 0)
            cv2.rectangle(img, (min_x, top), (min_x + 220, top + 25), (0, 0, 0), -1)
            cv2.putText(img, f"Detectado: {label}", (min_x + 8, top + 18),
                       cv2.FONT_HERSHEY_SIMPLEX, 0.55, (255, 255, 255), 1)

    def draw_stability(self, img, progress):
        """Barra de estabilidad: cuánto falta para confirmar el gesto actual."""
        if progress <= 0:
            return
        x, y = 50, 260
        w = int(300 * progress)
        color = (0, 255, 0) if progress >= 1.0 else (255, 200, 0)
        cv2.rectangle(img, (x, y), (x + 300, y + 18), (80, 80, 80), 2)
        cv2.rectangle(img, (x, y), (x + w, y + 18), color, -1)
        cv2.putText(img, "Manten el gesto..." if progress < 1.0 else "Gesto confirmado",
                   (x, y - 10), cv2.FONT_HERSHEY_SIMPLEX, 0.6, color, 2)

    def draw_guide(self, img):
        if not self.config.show_guide:
            return

        x, y = self.width - 380, 30
        w, h = 350, 380

        overlay = img.copy()
        cv2.rectangle(overlay, (x, y), (x + w, y + h), (25, 25, 25), -1)
        cv2.addWeighted(overlay, 0.90, img, 0.10, 0, img)
        cv2.rectangle(img, (x, y), (x + w, y + h), (100, 100, 100), 3)

        guide = [
            "NUMEROS",
            "  1-5: Dedos levantados",
            "",
            "OPERACIONES",
            "  Suma: Circulo pulgar+indice",
            "  Resta: Puno, pulgar al lado",
            "  Multiplicar: V (indice+medio)",
            "  Dividir: Pulgar arriba",
            "",
            "CONTROL",
            "  r: reiniciar  m: modo manual",
        ]

        cy = y + 40
        for label in guide:
            if not label:
                cy += 12
                continue
            if label.isupper() and not label.startswith(" "):
                cv2.putText(img, label, (x + 20, cy),
                           cv2.FONT_HERSHEY_DUPLEX, 0.7, (100, 200, 255), 2)
            else:
                cv2.putText(img, label, (x + 20, cy),
                           cv2.FONT_HERSHEY_SIMPLEX, 0.55, (200, 200, 200), 1)
            cy += 32

    def draw_manual_help(self, img, manual_mode):
        if not manual_mode:
            return
        cv2.putText(img, "1: capturar numero  2: operador  3: segundo  c: calcular",
                   (50, self.height - 70), cv2.FONT_HERSHEY_SIMPLEX, 0.6, (0, 200, 255), 2)

    def draw_history(self, img, entries):
        """Lista de cálculos recientes (más reciente arriba)."""
        if not self.show_history or not entries:
            return

        x, y = 30, 320
        cv2.putText(img, "HISTORIAL", (x, y),
                   cv2.FONT_HERSHEY_DUPLEX, 0.7, (100, 200, 255), 2)
        for i, entry in enumerate(entries):
            record = entry.record
            line = "{} {} {} = {}".format(
                record.first_operand,
                ASCII_OPERATORS.get(record.operator, "?"),
                record.second_operand,
                to_ascii(format_result(record.result)),
            )
            cv2.putText(img, f"{entry.timestamp:%H:%M:%S}  {line}", (x, y + 28 * (i + 1)),
                       cv2.FONT_HERSHEY_SIMPLEX, 0.55, (220, 220, 220), 1)

    def draw_feedback(self, img):
        """
        Dibuja mensaje de feedback temporal en la parte inferior de la pantalla,
        con fade-out controlado por feedback_timer.
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            alpha = min(self.feedback_timer / 20.0, 1.0)

            x, y = self.width // 2 - 250, self.height - 120

            overlay = img.copy()
            cv2.rectangle(overlay, (x - 20, y - 50), (x + 520, y + 10), (40, 40, 40), -1)
            cv2.addWeighted(overlay, alpha * 0.88, img, 1 - alpha * 0.88, 0, img)

            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, self.feedback_msg, (x, y),
                       cv2.FONT_HERSHEY_DUPLEX, 1.2, color, 3)

    def draw_waiting_indicator(self, img, stage):
        """Punto parpadeante mientras no hay mano."""
        if stage == Stage.AWAITING_HAND and int(time.time() * 2) % 2 == 0:
            cv2.circle(img, (self.width // 2, self.height // 2), 10, (0, 255, 0), -1)
            cv2.putText(img, "COLOQUE SU MANO", (self.width // 2 - 130, self.height // 2 + 45),
                       cv2.FONT_HERSHEY_DUPLEX, 0.9, (255, 255, 255), 2)
