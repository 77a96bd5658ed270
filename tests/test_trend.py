import unittest

from heartcheck.models.records import TrendDirection
from heartcheck.services.trend import analyze_trend, describe_trend
from tests.factories import make_record


class TestTrend(unittest.TestCase):

    def test_increasing(self):
        trend = analyze_trend([make_record(30), make_record(20)])
        self.assertEqual(trend.direction, TrendDirection.INCREASING)
        self.assertEqual(trend.magnitude, 10)

    def test_decreasing(self):
        trend = analyze_trend([make_record(12), make_record(25)])
        self.assertEqual(trend.direction, TrendDirection.DECREASING)
        self.assertEqual(trend.magnitude, 13)

    def test_stable(self):
        trend = analyze_trend([make_record(20), make_record(20)])
        self.assertEqual(trend.direction, TrendDirection.STABLE)
        self.assertEqual(trend.magnitude, 0)

    def test_only_two_newest_count(self):
        trend = analyze_trend([make_record(10), make_record(15), make_record(60)])
        self.assertEqual(trend.direction, TrendDirection.DECREASING)
        self.assertEqual(trend.magnitude, 5)

    def test_unavailable_with_fewer_than_two(self):
        self.assertIsNone(analyze_trend([]))
        self.assertIsNone(analyze_trend([make_record(30)]))

    def test_describe(self):
        trend = analyze_trend([make_record(30), make_record(20)])
        self.assertEqual(describe_trend(trend), "Risk increasing: 10 points since last check")


if __name__ == "__main__":
    unittest.main()
