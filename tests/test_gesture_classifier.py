"""
Tests del clasificador geométrico con manos sintéticas.
"""
import unittest

from hand_math.core.gesture_classifier import GestureClassifier
from hand_math.core.landmarks import LandmarkFrame, InvalidFrame
from hand_math.core import symbols

from tests.factories import make_hand, hand_for_digit, OPERATOR_HANDS, as_mediapipe


class TestFingerCounting(unittest.TestCase):
    """Conteo de dedos como alternativa numérica."""

    def setUp(self):
        self.classifier = GestureClassifier()

    def test_digits_zero_to_five(self):
        for n in range(6):
            with self.subTest(digit=n):
                self.assertEqual(self.classifier.classify(hand_for_digit(n)), str(n))

    def test_extension_vector(self):
        frame = LandmarkFrame(make_hand(index=True, ring=True))
        self.assertEqual(self.classifier.finger_extension(frame), [True, False, True, False])

    def test_thumb_up_with_finger_is_a_digit(self):
        # Pulgar arriba solo es división con el puño cerrado
        symbol = self.classifier.classify(make_hand(index=True, thumb="up"))
        self.assertEqual(symbol, "2")

    def test_victory_shape_with_thumb_out_counts_three(self):
        symbol = self.classifier.classify(make_hand(index=True, middle=True, thumb="side"))
        self.assertEqual(symbol, "3")


class TestOperatorGestures(unittest.TestCase):
    """Gestos de operador y su precedencia."""

    def setUp(self):
        self.classifier = GestureClassifier()

    def test_each_operator_gesture(self):
        for name, hand in OPERATOR_HANDS.items():
            with self.subTest(gesture=name):
                self.assertEqual(self.classifier.classify(hand), name)

    def test_circle_beats_digit_count(self):
        hand = make_hand(index=True, middle=True, ring=True, pinch=True)
        self.assertEqual(self.classifier.classify(hand), symbols.CIRCLE)

    def test_circle_beats_victory(self):
        hand = make_hand(index=True, middle=True, pinch=True)
        self.assertEqual(self.classifier.classify(hand), symbols.CIRCLE)

    def test_rock_beats_digit_one(self):
        # Puño con pulgar lateral también sería "1"
        self.assertEqual(self.classifier.classify(make_hand(thumb="side")), symbols.ROCK)

    def test_victory_beats_digit_two(self):
        self.assertEqual(
            self.classifier.classify(make_hand(index=True, middle=True)), symbols.VICTORY
        )

    def test_thumbs_up_is_not_rock(self):
        self.assertEqual(self.classifier.classify(make_hand(thumb="up")), symbols.THUMBSUP)

    def test_thresholds_are_configurable(self):
        # Con un umbral de pulgar mayor que 0.15 el pulgar lateral ya no cuenta
        strict = GestureClassifier(thumb_threshold=0.2)
        self.assertEqual(strict.classify(make_hand(thumb="side")), "0")

        loose = GestureClassifier(circle_threshold=0.5)
        self.assertEqual(loose.classify(make_hand(index=True)), symbols.CIRCLE)


class TestFrameContract(unittest.TestCase):

    def setUp(self):
        self.classifier = GestureClassifier()

    def test_no_frame_is_none(self):
        self.assertEqual(self.classifier.classify(None), symbols.NONE)

    def test_deterministic(self):
        frame = LandmarkFrame(hand_for_digit(3))
        results = {self.classifier.classify(frame) for _ in range(20)}
        self.assertEqual(results, {"3"})

    def test_wrong_point_count_raises(self):
        with self.assertRaises(InvalidFrame):
            self.classifier.classify(hand_for_digit(3)[:20])

    def test_non_numeric_coordinates_raise(self):
        points = hand_for_digit(3)
        points[5] = ("a", "b", "c")
        with self.assertRaises(InvalidFrame):
            LandmarkFrame(points)

    def test_accepts_dicts_and_mediapipe_objects(self):
        points = hand_for_digit(4)
        as_dicts = [{'x': x, 'y': y, 'z': z} for x, y, z in points]
        self.assertEqual(self.classifier.classify(as_dicts), "4")

        frame = LandmarkFrame.from_mediapipe(as_mediapipe(points))
        self.assertEqual(self.classifier.classify(frame), "4")
        self.assertEqual(frame, LandmarkFrame(points))

    def test_two_dimensional_points(self):
        points = [(x, y) for x, y, _ in hand_for_digit(1)]
        self.assertEqual(self.classifier.classify(points), "1")

    def test_frame_is_read_only(self):
        frame = LandmarkFrame(hand_for_digit(1))
        with self.assertRaises(ValueError):
            frame.points[0, 0] = 0.0


if __name__ == '__main__':
    unittest.main()
