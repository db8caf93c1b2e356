"""
Tests de configuración y de la línea de comandos.
"""
import unittest

from hand_math.config import CalculatorConfig
from hand_math.main import parse_args, build_config


class TestCalculatorConfig(unittest.TestCase):

    def setUp(self):
        self.cfg = CalculatorConfig()

    def test_engine_defaults(self):
        self.assertEqual(self.cfg.get_commit_threshold(), 10)
        self.assertEqual(self.cfg.thumb_extension_threshold, 0.1)
        self.assertEqual(self.cfg.circle_threshold, 0.05)
        self.assertEqual(self.cfg.get_auto_reset_delay(), 2.0)

    def test_extended_gestures_threshold(self):
        self.cfg.extended_gestures = True
        self.assertEqual(self.cfg.get_commit_threshold(), 20)

    def test_detection_confidence(self):
        self.assertAlmostEqual(self.cfg.get_detection_confidence(), 0.85)
        self.cfg.sensitivity = 10
        self.assertEqual(self.cfg.get_detection_confidence(), 1.0)

    def test_validate(self):
        self.assertIs(self.cfg.validate(), self.cfg)
        invalid = [
            ('commit_threshold', 0),
            ('circle_threshold', 0),
            ('sensitivity', 11),
            ('voice_volume', 1.5),
            ('voice_language', 'fr'),
            ('auto_reset_delay_ms', -1),
            ('history_size', 0),
        ]
        for name, value in invalid:
            with self.subTest(option=name):
                cfg = CalculatorConfig()
                setattr(cfg, name, value)
                with self.assertRaises(ValueError):
                    cfg.validate()


class TestCommandLine(unittest.TestCase):

    def test_defaults(self):
        cfg = build_config(parse_args([]))
        self.assertEqual(cfg.camera_index, 0)
        self.assertTrue(cfg.voice_enabled)
        self.assertEqual(cfg.voice_language, 'es')

    def test_options(self):
        args = parse_args(["--camera", "2", "--sensitivity", "3", "--language", "en",
                           "--no-voice", "--extended", "--manual"])
        cfg = build_config(args)
        self.assertEqual(cfg.camera_index, 2)
        self.assertEqual(cfg.sensitivity, 3)
        self.assertEqual(cfg.voice_language, 'en')
        self.assertFalse(cfg.voice_enabled)
        self.assertEqual(cfg.get_commit_threshold(), 20)
        self.assertTrue(args.manual)

    def test_out_of_range_sensitivity(self):
        with self.assertRaises(ValueError):
            build_config(parse_args(["--sensitivity", "0"]))


if __name__ == '__main__':
    unittest.main()
