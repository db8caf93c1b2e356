"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase GestureCalculatorApp.
"""

import time

import cv2

from ..config import CalculatorConfig
from ..core import symbols
from ..core.capture import SLOT_FIRST, SLOT_OPERATOR, SLOT_SECOND
from ..core.evaluator import format_result
from ..core.hand_tracker import HandTracker
from ..core.pipeline import CalculationEngine
from ..ui.renderer import UIRenderer, gesture_label
from ..voice.feedback import VoiceFeedback, describe_calculation
from .history import CalculationHistory


MANUAL_KEYS = {
    ord('1'): SLOT_FIRST,
    ord('2'): SLOT_OPERATOR,
    ord('3'): SLOT_SECOND,
}


# ============================================================================
class GestureCalculatorApp:
    """
    Aplicación principal de calculadora gestual.

    Arquitectura:
        - HandTracker: Extrae landmarks de la mano (MediaPipe)
        - CalculationEngine: Clasifica, estabiliza y captura el cálculo
        - CalculationHistory: Últimos cálculos completados
        - VoiceFeedback: Narración de números y resultados
        - UIRenderer: Renderizado de interfaz gráfica
        - GestureCalculatorApp: Coordinador y loop principal

    Modo automático: cada gesto se confirma al mantenerlo 10 frames.
    Modo manual: el usuario captura cada casilla con el teclado (1, 2, 3)
    y calcula con 'c'.
    """

    def __init__(self, config=None, manual_mode=False):
        """
        Inicializa la aplicación y configura la cámara.

        Args:
            config (CalculatorConfig): Configuración (opcional)
            manual_mode (bool): Arrancar en modo manual

        Raises:
            RuntimeError: Si no se puede abrir la cámara
        """
        self.config = (config if config else CalculatorConfig()).validate()

        self.cap = cv2.VideoCapture(self.config.camera_index)
        if not self.cap.isOpened():
            raise RuntimeError("Error al abrir cámara")

        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.frame_width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.frame_height)
        self.cap.set(cv2.CAP_PROP_FPS, 30)
        self.cap.set(cv2.CAP_PROP_BUFFERSIZE, 1)       # Buffer mínimo para baja latencia

        self.width = int(self.cap.get(cv2.CAP_PROP_FRAME_WIDTH))
        self.height = int(self.cap.get(cv2.CAP_PROP_FRAME_HEIGHT))
        print(f"OK Camara: {self.width}x{self.height}")

        self.tracker = HandTracker.from_config(self.config)
        self.engine = CalculationEngine(self.config)
        self.history = CalculationHistory(self.config.history_size)
        self.voice = VoiceFeedback(self.config)
        self.ui = UIRenderer(self.width, self.height, self.config)

        self.engine.add_listener(self.on_calculation)
        if manual_mode:
            self.engine.set_manual_mode(True)

        self.fps_time = time.time()
        self.fps = 0

        if self.config.extended_gestures:
            print("✓ Modo Gestos Extendidos ACTIVADO (para movilidad reducida)")
        if self.config.voice_enabled:
            print("✓ Feedback por voz ACTIVADO")

    def on_calculation(self, record):
        """Listener del motor: guarda en historial, narra y muestra el resultado."""
        self.history.add(record)
        self.voice.speak_calculation(record)
        print(f"= {describe_calculation(record, self.config.voice_language)}")
        self.ui.show_feedback(f"= {format_result(record.result)}", (0, 255, 255), 60)

    def on_tick(self, tick):
        """Feedback inmediato cuando un gesto confirmado avanza el cálculo."""
        if not tick.advanced:
            return
        symbol = tick.commit.symbol
        if symbols.is_operator(symbol):
            op = symbols.operator_for(symbol)
            self.ui.show_feedback(f"OK {op}", (0, 255, 0))
            self.voice.speak_operation(op)
        elif self.engine.snapshot().result is None:
            # El segundo número se narra junto con el resultado
            digit = symbols.digit_value(symbol)
            self.ui.show_feedback(f"OK {digit}", (100, 255, 100))
            self.voice.speak_number(digit)

    def handle_key(self, key):
        """
        Procesa una tecla.

        Returns:
            bool: False si la aplicación debe terminar
        """
        if key == 27 or key == ord('q'):
            return False

        if key == ord('r'):
            self.engine.reset()
            self.ui.show_feedback("REINICIADO", (255, 50, 50))

        elif key == ord('m'):
            self.engine.set_manual_mode(not self.engine.manual_mode)
            status = "MANUAL" if self.engine.manual_mode else "AUTOMATICO"
            print(f"Modo: {status}")
            self.ui.show_feedback(f"MODO {status}", (0, 255, 255), 60)

        elif key in MANUAL_KEYS and self.engine.manual_mode:
            slot = MANUAL_KEYS[key]
            if self.engine.manual_capture(slot):
                self.ui.show_feedback(f"OK {gesture_label(self.engine.last_symbol)}", (100, 255, 100))
            else:
                self.ui.show_feedback("Haz un gesto valido", (255, 50, 50))

        elif key == ord('c') and self.engine.manual_mode:
            if self.engine.calculate() is None:
                self.ui.show_feedback("Faltan casillas", (255, 50, 50))

        elif key == ord('v'):
            self.config.voice_enabled = not self.config.voice_enabled
            status = "ACTIVADA" if self.config.voice_enabled else "DESACTIVADA"
            print(f"🔊 Voz: {status}")
            self.ui.show_feedback(f"VOZ {status}", (0, 255, 255), 60)

        elif key == ord('a'):
            self.config.extended_gestures = not self.config.extended_gestures
            self.engine.set_commit_threshold(self.config.get_commit_threshold())
            status = "ACTIVADO" if self.config.extended_gestures else "DESACTIVADO"
            print(f"♿ Modo Accesibilidad: {status}")
            self.ui.show_feedback(f"ACCESIBILIDAD {status}", (255, 200, 0), 60)

        elif key == ord('h'):
            self.ui.show_history = not self.ui.show_history

        return True

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución (un frame por tick, procesado completo y en orden):
            1. Capturar y espejear frame
            2. Extraer landmarks con MediaPipe
            3. Procesar el frame en el motor (símbolo, commit, transición)
            4. Renderizar UI y procesar teclado
        """
        print("\n" + "=" * 70)
        print("CALCULADORA GESTUAL - UNA MANO")
        print("=" * 70)
        print("\nNumeros: 1-5 dedos levantados")
        print("Suma: Circulo con pulgar e indice")
        print("Resta: Puno con pulgar hacia un lado")
        print("Multiplicar: V con indice y medio")
        print("Dividir: Pulgar arriba")
        print("\nESC/q: salir | r: reiniciar | m: modo manual | v: voz | a: accesibilidad | h: historial")
        print("=" * 70 + "\n")

        try:
            while True:
                ret, img = self.cap.read()
                if not ret:
                    break
                if self.config.mirror:
                    img = cv2.flip(img, 1)

                frame, results = self.tracker.get_frame(img)
                img = self.tracker.draw_hands(img, results)

                tick = self.engine.process_frame(frame)
                self.on_tick(tick)

                self.ui.draw_hand(img, frame, tick.symbol)
                self.ui.draw_display(img, self.engine.snapshot(),
                                     self.engine.pending_slots(), self.engine.manual_mode)
                self.ui.draw_stability(img, self.engine.stability_progress)
                self.ui.draw_guide(img)
                self.ui.draw_history(img, self.history.entries())
                self.ui.draw_manual_help(img, self.engine.manual_mode)
                self.ui.draw_waiting_indicator(img, self.engine.stage)
                self.ui.draw_feedback(img)

                current_time = time.time()
                self.fps = 1 / (current_time - self.fps_time + 1e-6)
                self.fps_time = current_time
                cv2.putText(img, f"FPS: {int(self.fps)}", (self.width - 150, self.height - 30),
                           cv2.FONT_HERSHEY_SIMPLEX, 0.7, (0, 255, 0), 2)

                cv2.imshow('Calculadora Gestual', img)
                key = cv2.waitKey(1) & 0xFF
                if key != 255 and not self.handle_key(key):
                    break
        finally:
            self.engine.reset()
            self.tracker.close()
            self.cap.release()
            cv2.destroyAllWindows()
            print("\nOK Aplicacion cerrada correctamente")
