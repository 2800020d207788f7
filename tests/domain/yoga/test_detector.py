import copy
import unittest
from unittest.mock import patch

from kundali_yoga.domain.yoga import YogaDetector
from kundali_yoga.domain.yoga.constants import (
    DHANA_YOGA,
    MAHAPURUSHA_YOGA,
    RAJA_YOGA,
    SPECIAL_YOGAS,
)
from kundali_yoga.domain.yoga.errors import ValidationError, YogaDetectionError
from kundali_yoga.domain.yoga.schemas import PlanetPlacement
from kundali_yoga.domain.yoga.validator import ChartValidator
from tests.domain.yoga.charts import NO_YOGAS, RICH, build_chart


RICH_YOGAS = [
    "Kendra-Trikona Raja Yoga",
    "Dharma-Karma Raja Yoga",
    "Jupiter-Venus Dhana Yoga",
    "Malavya Yoga",
    "Sasha Yoga",
    "MOON Mahapurusha Yoga",
    "Gaja Kesari Yoga",
]


class TestYogaDetectorConstruction(unittest.TestCase):
    def test_missing_moon(self):
        chart = copy.deepcopy(NO_YOGAS)
        del chart["planets"]["MOON"]

        with self.assertRaises(ValidationError) as ctx:
            YogaDetector(chart)

        self.assertTrue(str(ctx.exception).startswith("Birth chart validation failed"))
        self.assertIn("MOON", str(ctx.exception))
        self.assertEqual(ctx.exception.field, "planets.MOON")

    def test_queries_before_detection_are_empty(self):
        detector = YogaDetector(RICH)
        summary = detector.get_yoga_summary()

        self.assertEqual(detector.detected_yogas, [])
        self.assertEqual(summary.total_yogas, 0)
        self.assertIsNone(summary.dominant_category)
        self.assertEqual(detector.get_yogas_by_strength(0.0), [])


class TestDetectAllYogas(unittest.TestCase):
    def test_no_yogas_scenario(self):
        detector = YogaDetector(NO_YOGAS)
        self.assertEqual(detector.detect_all_yogas(), [])

    def test_gaja_kesari_scenario(self):
        detector = YogaDetector(build_chart(MOON=(10, 1), JUPITER=(190, 7)))

        special = detector.detect_special_yogas()
        gaja = [y for y in special if y.name == "Gaja Kesari Yoga"]

        self.assertEqual(len(gaja), 1)
        self.assertEqual(gaja[0].type, "MOON_JUPITER_KENDRA")
        self.assertEqual(list(gaja[0].planets), ["MOON", "JUPITER"])
        self.assertEqual([y.name for y in detector.detect_all_yogas()], ["Gaja Kesari Yoga"])

    def test_families_are_concatenated_in_order(self):
        detector = YogaDetector(RICH)
        yogas = detector.detect_all_yogas()

        self.assertEqual([y.name for y in yogas], RICH_YOGAS)
        self.assertEqual(
            [y.category for y in yogas],
            [RAJA_YOGA, RAJA_YOGA, DHANA_YOGA, MAHAPURUSHA_YOGA,
             MAHAPURUSHA_YOGA, MAHAPURUSHA_YOGA, SPECIAL_YOGAS],
        )

    def test_detection_is_deterministic(self):
        detector = YogaDetector(RICH)
        first = detector.detect_all_yogas()
        second = detector.detect_all_yogas()

        self.assertEqual(first, second)
        self.assertEqual(YogaDetector(RICH).detect_all_yogas(), first)

    def test_strengths_are_bounded(self):
        for chart in (NO_YOGAS, RICH, build_chart(SUN=(190, 7), VENUS=(350, 12))):
            for yoga in YogaDetector(chart).detect_all_yogas():
                self.assertGreaterEqual(yoga.strength, 0.0)
                self.assertLessEqual(yoga.strength, 1.0)

    def test_returned_list_does_not_alias_result(self):
        detector = YogaDetector(RICH)
        yogas = detector.detect_all_yogas()
        yogas.clear()

        self.assertEqual(len(detector.detected_yogas), len(RICH_YOGAS))

    def test_returned_yogas_cannot_alter_result(self):
        detector = YogaDetector(RICH)
        yogas = detector.detect_all_yogas()
        power = yogas[0].effects["power"]

        with self.assertRaises(TypeError):
            yogas[0].effects["power"] = "changed"

        self.assertEqual(detector.detected_yogas[0].effects["power"], power)

    def test_chart_is_fixed_after_construction(self):
        detector = YogaDetector(NO_YOGAS)

        with self.assertRaises(TypeError):
            detector.chart.planets["MOON"] = PlanetPlacement(longitude=100, house=4)
        with self.assertRaises(AttributeError):
            detector.chart = ChartValidator().validate(RICH)

        self.assertEqual(detector.detect_all_yogas(), [])


class TestFailFast(unittest.TestCase):
    def test_family_failure_keeps_previous_result(self):
        detector = YogaDetector(RICH)
        previous = detector.detect_all_yogas()

        with patch.object(detector.special, "detect", side_effect=RuntimeError("boom")):
            with self.assertLogs("kundali_yoga.domain.yoga.detector", level="ERROR"):
                with self.assertRaises(YogaDetectionError) as ctx:
                    detector.detect_all_yogas()

        self.assertEqual(str(ctx.exception), "Yoga detection failed: boom")
        self.assertEqual(ctx.exception.phase, "special")
        self.assertIsInstance(ctx.exception.__cause__, RuntimeError)
        self.assertEqual(detector.detected_yogas, previous)

    def test_first_family_failure_stops_later_families(self):
        detector = YogaDetector(RICH)

        with patch.object(detector.raja, "detect", side_effect=KeyError("SUN")), \
                patch.object(detector.dhana, "detect") as dhana:
            with self.assertRaises(YogaDetectionError) as ctx:
                detector.detect_all_yogas()

        self.assertEqual(ctx.exception.phase, "raja")
        dhana.assert_not_called()
        self.assertEqual(detector.detected_yogas, [])


class TestQueries(unittest.TestCase):
    def setUp(self):
        self.detector = YogaDetector(RICH)
        self.detector.detect_all_yogas()

    def test_summary(self):
        summary = self.detector.get_yoga_summary()

        self.assertEqual(summary.total_yogas, 7)
        self.assertEqual(
            summary.categories,
            {RAJA_YOGA: 2, DHANA_YOGA: 1, MAHAPURUSHA_YOGA: 3, SPECIAL_YOGAS: 1},
        )
        self.assertEqual(sum(summary.categories.values()), summary.total_yogas)
        self.assertEqual(summary.dominant_category, MAHAPURUSHA_YOGA)
        self.assertEqual(summary.strongest_yoga.name, "Kendra-Trikona Raja Yoga")

    def test_by_strength(self):
        strong = self.detector.get_yogas_by_strength(0.9)

        self.assertEqual(len(strong), 6)
        self.assertNotIn("Dharma-Karma Raja Yoga", [y.name for y in strong])
        self.assertEqual(len(self.detector.get_yogas_by_strength()), 7)

    def test_by_category_accepts_key_name_or_label(self):
        self.assertEqual(len(self.detector.get_yogas_by_category(RAJA_YOGA)), 2)
        self.assertEqual(len(self.detector.get_yogas_by_category("Raja Yoga")), 2)
        self.assertEqual(len(self.detector.get_yogas_by_category("Great Person")), 3)
        self.assertEqual(self.detector.get_yogas_by_category("Unknown"), [])

    def test_filters_do_not_rerun_detection(self):
        with patch.object(self.detector, "detect_all_yogas") as detect:
            self.detector.get_yoga_summary()
            self.detector.get_yogas_by_strength(0.5)
            self.detector.get_yogas_by_category("Wealth and Prosperity")

        detect.assert_not_called()

    def test_yoga_category(self):
        yogas = self.detector.detected_yogas

        self.assertEqual(self.detector.get_yoga_category(yogas[0]), "Power and Authority")
        self.assertEqual(self.detector.get_yoga_category(yogas[-1]), "Unique Combinations")


if __name__ == "__main__":
    unittest.main()
