"""
Punto de entrada de la calculadora gestual.

Ejecución:
    hand-math [--camera N] [--sensitivity S] [--language es|en] [--no-voice]
              [--manual] [--extended]
"""

import argparse
import traceback

from .config import CalculatorConfig, SUPPORTED_LANGUAGES


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Calculadora gestual: operaciones de dos números con una mano."
    )
    parser.add_argument(
        "--camera", type=int, default=0,
        help="Índice de la cámara (0 = predeterminada)",
    )
    parser.add_argument(
        "--sensitivity", type=int, default=7,
        help="Sensibilidad de detección 1-10 (por defecto 7)",
    )
    parser.add_argument(
        "--language", choices=SUPPORTED_LANGUAGES, default="es",
        help="Idioma de la narración por voz",
    )
    parser.add_argument(
        "--no-voice", action="store_true",
        help="Desactiva el feedback por voz",
    )
    parser.add_argument(
        "--manual", action="store_true",
        help="Arranca en modo de captura manual",
    )
    parser.add_argument(
        "--extended", action="store_true",
        help="Modo gestos extendidos (más frames para confirmar)",
    )
    return parser.parse_args(argv)


def build_config(args):
    """Traduce los argumentos de línea de comandos a CalculatorConfig validada."""
    config = CalculatorConfig()
    config.camera_index = args.camera
    config.sensitivity = args.sensitivity
    config.voice_language = args.language
    config.voice_enabled = not args.no_voice
    config.extended_gestures = args.extended
    return config.validate()


def main(argv=None):
    """
    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): cierre ordenado
        - Exception general: muestra el error y el traceback
    """
    args = parse_args(argv)
    try:
        config = build_config(args)
    except ValueError as e:
        print(f"\nError de configuración: {e}")
        return 2

    # Import diferido: OpenCV/MediaPipe solo hacen falta para la app interactiva
    from .app.gesture_app import GestureCalculatorApp

    try:
        app = GestureCalculatorApp(config, manual_mode=args.manual)
        app.run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception as e:
        print(f"\nError: {e}")
        traceback.print_exc()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
