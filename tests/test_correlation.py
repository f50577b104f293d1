# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from typing import Dict

from fittrack.analytics.correlation import (
    AlignedPoint,
    Band,
    Trend,
    classify,
    conclude,
    describe_trend,
    interpret,
    merge_by_year,
    pearson,
)
from fittrack.analytics.datasets import AnalysisType
from fittrack.analytics.service import run_analysis
from fittrack.errors import InsufficientDataError, ValidationError


class _FakeSource:
    def __init__(self, health: Dict[int, float], economic: Dict[int, float]) -> None:
        self.health = health
        self.economic = economic
        self.calls = []

    def health_series(self, indicator, country, start, end):
        self.calls.append(("health", indicator, country, start, end))
        return {y: v for y, v in self.health.items() if start <= y <= end}

    def economic_series(self, indicator, country, start, end):
        self.calls.append(("economic", indicator, country, start, end))
        return {y: v for y, v in self.economic.items() if start <= y <= end}

    def countries(self):
        return [{"code": "POL", "name": "Poland", "region": "Europe & Central Asia"}]

    def available_years(self, analysis_type, country):
        return sorted(set(self.health) & set(self.economic))


class TestPearson(unittest.TestCase):
    def test_perfect_negative(self) -> None:
        r = pearson([10, 20, 30], [30, 20, 10])
        self.assertAlmostEqual(r, -1.0, places=9)
        self.assertEqual(classify(r), Band.strong)

    def test_perfect_positive_is_clamped(self) -> None:
        r = pearson([1.1, 2.2, 3.3, 4.4], [2.2, 4.4, 6.6, 8.8])
        self.assertLessEqual(r, 1.0)
        self.assertAlmostEqual(r, 1.0, places=9)

    def test_symmetric(self) -> None:
        x = [1.0, 4.0, 2.0, 8.0, 5.0]
        y = [3.0, 1.0, 4.0, 1.0, 5.0]
        self.assertAlmostEqual(pearson(x, y), pearson(y, x), places=12)

    def test_zero_variance_yields_zero(self) -> None:
        self.assertEqual(pearson([5, 5, 5], [1, 2, 3]), 0.0)
        self.assertEqual(interpret(0.0, "en"), "No correlation")

    def test_insufficient_data(self) -> None:
        for x, y in (([], []), ([1.0], [2.0]), ([1, 2, 3], [1, 2])):
            with self.subTest(x=x, y=y):
                with self.assertRaises(InsufficientDataError):
                    pearson(x, y)


class TestBands(unittest.TestCase):
    def test_thresholds(self) -> None:
        cases = [
            (0.95, Band.strong),
            (-0.7, Band.strong),
            (0.69, Band.moderate),
            (-0.5, Band.moderate),
            (0.49, Band.weak),
            (0.3, Band.weak),
            (-0.29, Band.very_weak),
            (0.0, Band.very_weak),
        ]
        for r, band in cases:
            with self.subTest(r=r):
                self.assertEqual(classify(r), band)

    def test_interpretation_is_localized(self) -> None:
        self.assertEqual(interpret(-0.8, "en"), "Strong negative correlation")
        self.assertEqual(interpret(0.4, "pl"), "Słaba korelacja dodatnia")


class TestAlignment(unittest.TestCase):
    def test_merge_keeps_shared_years_in_order(self) -> None:
        points = merge_by_year({2012: 1.0, 2010: 2.0, 2011: 3.0}, {2011: 30.0, 2012: 40.0, 2013: 50.0})
        self.assertEqual([p.year for p in points], [2011, 2012])
        self.assertEqual(points[0], AlignedPoint(2011, 3.0, 30.0))

    def test_trend(self) -> None:
        up = [AlignedPoint(2000, 1.0, 1.0), AlignedPoint(2001, 2.0, 2.0)]
        mixed = [AlignedPoint(2000, 1.0, 5.0), AlignedPoint(2001, 2.0, 3.0)]
        other = [AlignedPoint(2000, 3.0, 1.0), AlignedPoint(2001, 2.0, 3.0)]
        flat = [AlignedPoint(2000, 1.0, 1.0), AlignedPoint(2001, 1.0, 1.0)]
        self.assertEqual(describe_trend(up), Trend.both_increase)
        self.assertEqual(describe_trend(mixed), Trend.health_increase_economic_decrease)
        self.assertEqual(describe_trend(other), Trend.health_decrease_economic_increase)
        self.assertEqual(describe_trend(flat), Trend.both_decrease)


class TestConclusion(unittest.TestCase):
    def test_text_depends_on_type_sign_and_trend(self) -> None:
        texts = set()
        for analysis_type in AnalysisType:
            for r in (0.6, -0.6):
                for trend in Trend:
                    for locale in ("en", "pl"):
                        text = conclude(analysis_type.value, r, trend, locale)
                        self.assertFalse(text.startswith("interpretation."), (analysis_type, r, trend, locale))
                        texts.add(text)
        self.assertEqual(len(texts), len(AnalysisType) * 2 * len(Trend) * 2)

    def test_sign_picks_the_text(self) -> None:
        positive = conclude("diabetes_vs_gini_index", 0.4, Trend.both_increase, "pl")
        negative = conclude("diabetes_vs_gini_index", -0.4, Trend.both_increase, "pl")
        self.assertTrue(positive.startswith("Dodatnia korelacja"))
        self.assertTrue(negative.startswith("Ujemna korelacja"))
        self.assertEqual(conclude("diabetes_vs_gini_index", 0.0, Trend.both_increase, "pl"), positive)
        self.assertIn("income inequality", conclude("diabetes_vs_gini_index", 0.4, Trend.both_increase, "en"))


class TestRunAnalysis(unittest.TestCase):
    def test_result(self) -> None:
        source = _FakeSource(
            health={2015: 20.1, 2016: 20.8, 2017: 21.4, 2018: 22.0},
            economic={2015: 6.3, 2016: 6.5, 2017: 6.6, 2018: 6.9, 2019: 6.5},
        )
        result = run_analysis(source, AnalysisType.obesity_vs_health_expenditure, "pol", 2015, 2019, "en")
        self.assertEqual(result.country_code, "POL")
        self.assertEqual([p.year for p in result.data], [2015, 2016, 2017, 2018])
        self.assertEqual(source.calls[0], ("health", "NCD_BMI_30A", "POL", 2015, 2019))
        self.assertEqual(source.calls[1], ("economic", "SH.XPD.CHEX.GD.ZS", "POL", 2015, 2019))
        self.assertGreaterEqual(result.correlation, -1.0)
        self.assertLessEqual(result.correlation, 1.0)
        self.assertEqual(result.band, classify(result.correlation).value)
        self.assertEqual(result.trend, Trend.both_increase.value)
        self.assertEqual(result.direction, "positive")
        self.assertEqual(
            result.conclusion,
            conclude(AnalysisType.obesity_vs_health_expenditure.value, result.correlation, Trend.both_increase, "en"),
        )
        self.assertIn("obesity", result.conclusion)

    def test_too_few_shared_years(self) -> None:
        source = _FakeSource(health={2015: 1.0, 2016: 2.0}, economic={2016: 3.0, 2017: 4.0})
        with self.assertRaises(InsufficientDataError):
            run_analysis(source, AnalysisType.gdp_vs_physical_activity, "DEU", 2015, 2017)

    def test_inverted_range(self) -> None:
        source = _FakeSource(health={}, economic={})
        with self.assertRaises(ValidationError):
            run_analysis(source, AnalysisType.diabetes_vs_gini_index, "DEU", 2020, 2010)
        self.assertEqual(source.calls, [])


if __name__ == "__main__":
    unittest.main()
