"""
Sistema de feedback por voz usando pyttsx3.

Este módulo narra los números, operadores y cálculos completados,
ejecutándose de forma asíncrona para no bloquear el bucle de video.
"""

import threading
from collections import deque

import pyttsx3

from ..core.evaluator import is_division_by_zero
from ..core.symbols import ADD, SUBTRACT, MULTIPLY, DIVIDE


NUMBER_WORDS = {
    'es': {0: "cero", 1: "uno", 2: "dos", 3: "tres", 4: "cuatro", 5: "cinco"},
    'en': {0: "zero", 1: "one", 2: "two", 3: "three", 4: "four", 5: "five"},
}

OPERATOR_WORDS = {
    'es': {ADD: "más", SUBTRACT: "menos", MULTIPLY: "por", DIVIDE: "dividido entre"},
    'en': {ADD: "plus", SUBTRACT: "minus", MULTIPLY: "times", DIVIDE: "divided by"},
}

PHRASES = {
    'es': {
        'equals': "{a} {op} {b} igual a {result}",
        'div_zero': "No se puede dividir {a} entre cero",
        'decimal': "coma",
    },
    'en': {
        'equals': "{a} {op} {b} equals {result}",
        'div_zero': "Cannot divide {a} by zero",
        'decimal': "point",
    },
}

# Fragmentos de nombre/id de voz preferidos por idioma
PREFERRED_VOICES = {
    'es': (['monica', 'paulina', 'jorge', 'juan', 'diego'], 'es'),
    'en': (['samantha', 'alex', 'daniel', 'karen'], 'en'),
}


def _spoken_number(value, language):
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        # Resultados decimales: 2 decimales en voz
        text = f"{value:.2f}".rstrip('0').rstrip('.')
        return text.replace('.', f" {PHRASES[language]['decimal']} ")
    return str(value)


def describe_calculation(record, language='es'):
    """
    Frase para narrar un cálculo completado.

    Args:
        record (CalculationRecord): Cálculo completado
        language (str): 'es' o 'en'

    Returns:
        str: p. ej. "3 más 2 igual a 5" o "Cannot divide 6 by zero"
    """
    phrases = PHRASES[language]
    if record.operator == DIVIDE and is_division_by_zero(record.result):
        return phrases['div_zero'].format(a=record.first_operand)

    op_word = OPERATOR_WORDS[language].get(record.operator, record.operator)
    return phrases['equals'].format(
        a=record.first_operand,
        op=op_word,
        b=record.second_operand,
        result=_spoken_number(record.result, language),
    )


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz en el idioma configurado
#   - Ejecutar en hilo separado para no bloquear UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Narrador por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (máximo 5 pendientes)
        - Volumen, velocidad e idioma configurables
    """

    def __init__(self, config):
        """
        Args:
            config (CalculatorConfig): Configuración con las preferencias de voz
        """
        self.config = config
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._queue_lock = threading.Lock()

        try:
            self.engine = pyttsx3.init()
            self._configure_engine()
            print("✓ Sistema de voz inicializado correctamente")
        except Exception as e:
            print(f"⚠ Advertencia: No se pudo inicializar el sistema de voz: {e}")
            self.config.voice_enabled = False

    @property
    def language(self):
        return self.config.voice_language

    def _configure_engine(self):
        """Aplica volumen y velocidad, y busca una voz del idioma configurado."""
        if not self.engine:
            return

        try:
            self.engine.setProperty('volume', self.config.voice_volume)
            self.engine.setProperty('rate', self.config.voice_rate)

            names, prefix = PREFERRED_VOICES[self.language]
            voices = self.engine.getProperty('voices') or []

            # PRIORIDAD 1: voces con nombre conocido; PRIORIDAD 2: cualquier voz del idioma
            chosen = None
            for voice in voices:
                if any(name in voice.name.lower() for name in names):
                    chosen = voice
                    break
            if chosen is None:
                for voice in voices:
                    if f"{prefix}-" in voice.id.lower() or f"{prefix}_" in voice.id.lower():
                        chosen = voice
                        break

            if chosen is not None:
                self.engine.setProperty('voice', chosen.id)
                print(f"✓ Voz seleccionada: {chosen.name}")
            else:
                print(f"⚠ No se encontró voz para '{self.language}'. Usando voz predeterminada.")
        except Exception as e:
            print(f"⚠ Error al configurar voz: {e}")

    def speak(self, text):
        """
        Encola un mensaje y lo reproduce en un hilo daemon.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.config.voice_enabled or not self.engine:
            return

        with self._queue_lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._queue_lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                print(f"⚠ Error al reproducir voz: {e}")

    def speak_number(self, number):
        words = NUMBER_WORDS[self.language]
        self.speak(words.get(number, str(number)))

    def speak_operation(self, operation):
        words = OPERATOR_WORDS[self.language]
        self.speak(words.get(operation, operation))

    def speak_calculation(self, record):
        """Narra un cálculo completado (listener del motor)."""
        self.speak(describe_calculation(record, self.language))
