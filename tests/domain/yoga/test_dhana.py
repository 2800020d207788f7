import unittest

from kundali_yoga.domain.yoga.constants import DHANA_YOGA
from kundali_yoga.domain.yoga.detectors.dhana import DhanaYogaDetector
from kundali_yoga.domain.yoga.validator import ChartValidator
from tests.domain.yoga.charts import NO_YOGAS, RICH, build_chart


class TestDhanaYogaDetector(unittest.TestCase):
    def setUp(self):
        self.detector = DhanaYogaDetector()
        self.validator = ChartValidator()

    def detect(self, chart):
        return self.detector.detect(self.validator.validate(chart))

    def test_no_dhana_yogas(self):
        self.assertEqual(self.detect(NO_YOGAS), [])

    def test_labha_dhana_mutual_houses(self):
        # Venus (lord of 2) in the 11th, Saturn (lord of 11) in the 2nd
        yogas = self.detect(build_chart(VENUS=(305, 11), SATURN=(40, 2)))

        self.assertEqual(len(yogas), 1)
        yoga = yogas[0]
        self.assertEqual(yoga.name, "Labha-Dhana Yoga")
        self.assertEqual(yoga.type, "MUTUAL_HOUSES")
        self.assertEqual(yoga.category, DHANA_YOGA)
        self.assertEqual(yoga.planets, ("VENUS", "SATURN"))
        self.assertEqual(yoga.houses, (2, 11))
        self.assertEqual(yoga.strength, 1.0)
        self.assertEqual(
            yoga.effects["wealth"], "Exceptional financial success and abundance"
        )

    def test_jupiter_venus_in_dhana_houses(self):
        yogas = self.detect(build_chart(JUPITER=(35, 2), VENUS=(305, 11)))

        self.assertEqual(len(yogas), 1)
        yoga = yogas[0]
        self.assertEqual(yoga.name, "Jupiter-Venus Dhana Yoga")
        self.assertEqual(yoga.type, "BOTH_IN_DHANA_HOUSES")
        self.assertEqual(yoga.houses, (2, 11))
        self.assertAlmostEqual(yoga.strength, 0.875)
        self.assertEqual(yoga.effects["wealth"], "Strong financial position")

    def test_jupiter_venus_in_trikonas(self):
        yogas = self.detect(build_chart(JUPITER=(125, 5), VENUS=(245, 9)))

        self.assertEqual(len(yogas), 1)
        self.assertEqual(yogas[0].type, "BOTH_IN_TRIKONA_HOUSES")
        self.assertEqual(yogas[0].houses, (5, 9))
        self.assertAlmostEqual(yogas[0].strength, 0.9)

    def test_jupiter_venus_mutual_aspect(self):
        yogas = self.detect(RICH)

        self.assertEqual(len(yogas), 1)
        self.assertEqual(yogas[0].name, "Jupiter-Venus Dhana Yoga")
        self.assertEqual(yogas[0].type, "MUTUAL_ASPECT")
        self.assertEqual(yogas[0].houses, (1, 7))
        self.assertEqual(yogas[0].strength, 1.0)

    def test_one_sided_aspect_is_not_enough(self):
        # 7th -> 10th is a 4th-house aspect, 10th -> 7th is none
        yogas = self.detect(build_chart(JUPITER=(5, 7), VENUS=(200, 10)))
        self.assertEqual(yogas, [])


if __name__ == "__main__":
    unittest.main()
