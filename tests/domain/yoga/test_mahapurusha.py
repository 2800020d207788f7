import unittest

from kundali_yoga.domain.yoga.constants import MAHAPURUSHA_YOGA
from kundali_yoga.domain.yoga.detectors.mahapurusha import MahapurushaYogaDetector
from kundali_yoga.domain.yoga.validator import ChartValidator
from tests.domain.yoga.charts import NO_YOGAS, RICH, build_chart


class TestMahapurushaYogaDetector(unittest.TestCase):
    def setUp(self):
        self.detector = MahapurushaYogaDetector()
        self.validator = ChartValidator()

    def detect(self, chart):
        return self.detector.detect(self.validator.validate(chart))

    def test_no_mahapurusha_yogas(self):
        self.assertEqual(self.detect(NO_YOGAS), [])

    def test_pancha_mahapurusha(self):
        chart = build_chart(
            MARS=(5, 1),        # Aries, own sign
            JUPITER=(95, 4),    # Cancer, exalted
            VENUS=(200, 7),     # Libra, own sign
            SATURN=(290, 10),   # Capricorn, own sign
        )
        yogas = self.detect(chart)

        self.assertEqual(
            [y.name for y in yogas],
            ["Ruchaka Yoga", "Hamsa Yoga", "Malavya Yoga", "Sasha Yoga"],
        )
        for yoga in yogas:
            self.assertEqual(yoga.type, "PANCHA_MAHAPURUSHA")
            self.assertEqual(yoga.category, MAHAPURUSHA_YOGA)
            self.assertEqual(yoga.strength, 1.0)

        hamsa = yogas[1]
        self.assertEqual(hamsa.planets, ("JUPITER",))
        self.assertEqual(hamsa.houses, (4,))
        self.assertEqual(hamsa.description, "JUPITER in exalted position in house 4")
        self.assertEqual(hamsa.effects["intensity"], "Exceptional manifestation")

    def test_dignified_planet_outside_kendra(self):
        # Mercury in Gemini (own) in the 3rd, Saturn exalted in the 11th
        chart = build_chart(MERCURY=(70, 3), SATURN=(190, 11))
        self.assertEqual(self.detect(chart), [])

    def test_exalted_mars_in_second_house(self):
        yogas = self.detect(build_chart(MARS=(280, 2)))
        self.assertNotIn("Ruchaka Yoga", [y.name for y in yogas])

    def test_general_mahapurusha_for_moon(self):
        yogas = self.detect(build_chart(MOON=(100, 4)))

        self.assertEqual(len(yogas), 1)
        self.assertEqual(yogas[0].name, "MOON Mahapurusha Yoga")
        self.assertEqual(yogas[0].type, "GENERAL_MAHAPURUSHA")
        self.assertEqual(yogas[0].effects["qualities"], "Emotional intelligence, nurturing, intuition")

    def test_exalted_sun_is_not_general_mahapurusha(self):
        self.assertEqual(self.detect(build_chart(SUN=(10, 1))), [])

    def test_rich_chart(self):
        yogas = self.detect(RICH)

        self.assertEqual(
            [(y.name, y.type) for y in yogas],
            [
                ("Malavya Yoga", "PANCHA_MAHAPURUSHA"),
                ("Sasha Yoga", "PANCHA_MAHAPURUSHA"),
                ("MOON Mahapurusha Yoga", "GENERAL_MAHAPURUSHA"),
            ],
        )


if __name__ == "__main__":
    unittest.main()
