"""
Tests de los textos del overlay y un dibujado básico sobre una imagen vacía.
"""
import math
import unittest

import numpy as np

from hand_math.config import CalculatorConfig
from hand_math.core import symbols
from hand_math.core.capture import CalculationState, Stage
from hand_math.core.landmarks import LandmarkFrame
from hand_math.ui.renderer import UIRenderer, expression_text, gesture_label, to_ascii

from tests.factories import hand_for_digit


class TestOverlayText(unittest.TestCase):

    def test_expression_with_pending_slots(self):
        state = CalculationState(Stage.GOT_FIRST, 3, None, None, None)
        self.assertEqual(expression_text(state), "3 ? ?")

    def test_complete_expression_is_ascii(self):
        state = CalculationState(Stage.COMPLETE, 5, "÷", 2, 2.5)
        self.assertEqual(expression_text(state), "5 / 2 = 2.5")
        state = CalculationState(Stage.COMPLETE, 6, "÷", 0, math.nan)
        self.assertEqual(expression_text(state), "6 / 0 = Error: /0")

    def test_gesture_labels(self):
        self.assertEqual(gesture_label("circle"), "Suma (+)")
        self.assertEqual(gesture_label("4"), "Numero 4")
        self.assertEqual(gesture_label("none"), "")

    def test_to_ascii(self):
        self.assertEqual(to_ascii("3 × 2 − 1"), "3 x 2 - 1")


class TestDrawing(unittest.TestCase):

    def test_draws_without_errors(self):
        img = np.zeros((720, 1280, 3), dtype=np.uint8)
        ui = UIRenderer(1280, 720)
        state = CalculationState(Stage.GOT_OPERATOR, 3, "×", None, None)

        ui.draw_display(img, state, ["second"], manual_mode=True)
        ui.draw_hand(img, LandmarkFrame(hand_for_digit(3)), "3")
        ui.draw_stability(img, 0.5)
        ui.draw_guide(img)
        ui.show_feedback("OK ×")
        ui.draw_feedback(img)

        self.assertEqual(ui.feedback_msg, "OK x")
        self.assertGreater(int(img.sum()), 0)

    def test_hand_box_follows_landmark_extent(self):
        img = np.zeros((720, 1280, 3), dtype=np.uint8)
        config = CalculatorConfig()
        config.show_finger_markers = False
        ui = UIRenderer(1280, 720, config)
        frame = LandmarkFrame(hand_for_digit(3))

        for got, expected in zip(frame.bounding_box(), (0.35, 0.3, 0.6, 0.8)):
            self.assertAlmostEqual(got, expected)
        ui.draw_hand(img, frame, symbols.NONE)

        _, _, box_x2, box_y2 = frame.bounding_box()
        corner_x, corner_y = int(box_x2 * 1280) + 20, int(box_y2 * 720) + 20
        self.assertEqual(img[corner_y, corner_x].tolist(), [0, 0, 255])
        self.assertEqual(img[corner_y + 5, corner_x + 5].tolist(), [0, 0, 0])

    def test_stage_text_is_drawable(self):
        for stage in Stage:
            with self.subTest(stage=stage):
                self.assertTrue(stage.value.isascii())
                self.assertEqual(to_ascii(stage.value), stage.value)
        self.assertEqual(Stage.COMPLETE.value, "Calculo completo")


if __name__ == '__main__':
    unittest.main()
