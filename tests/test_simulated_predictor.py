import random
import unittest

from heartcheck.services.simulated_predictor import (
    format_simulated_risk,
    predict_simulated_risk,
)


class FixedRng:
    """Pins the jitter term."""

    def __init__(self, value):
        self.value = value

    def uniform(self, a, b):
        return self.value


class TestSimulatedPredictor(unittest.TestCase):

    def test_always_in_range(self):
        picker = random.Random(1234)
        for _ in range(10000):
            score = picker.randint(0, 60)
            age = picker.randint(1, 120)
            value = predict_simulated_risk(score, age)
            self.assertGreaterEqual(value, 1)
            self.assertLessEqual(value, 95)

    def test_extremes_with_pinned_jitter(self):
        self.assertEqual(predict_simulated_risk(0, 1, rng=FixedRng(-2.5)), 1)
        self.assertLessEqual(predict_simulated_risk(60, 120, rng=FixedRng(2.5)), 95)

    def test_jitter_is_bounded(self):
        low = predict_simulated_risk(30, 50, rng=FixedRng(-2.5))
        high = predict_simulated_risk(30, 50, rng=FixedRng(2.5))
        self.assertLessEqual(high - low, 5.0 + 1e-9)
        self.assertTrue(1 <= low <= high <= 95)

    def test_format(self):
        self.assertEqual(format_simulated_risk(12.34), "12.3% 10-year risk (simulated)")


if __name__ == "__main__":
    unittest.main()
