import logging
from typing import List, Optional, Tuple

from kundali_yoga.domain.yoga.constants import DHANA_YOGA, YOGA_CONSTANTS
from kundali_yoga.domain.yoga.effects import get_dhana_yoga_effects
from kundali_yoga.domain.yoga.houses import HouseRelationEngine
from kundali_yoga.domain.yoga.schemas import BirthChart, Yoga


logger = logging.getLogger(__name__)


class DhanaYogaDetector:
    """
    Detects Dhana Yogas (wealth).

    Current support:
    - Labha-Dhana Yoga (2nd / 11th lords)
    - Jupiter-Venus Dhana Yoga
    """

    def __init__(self, houses: Optional[HouseRelationEngine] = None):
        self.houses = houses or HouseRelationEngine()

    def detect(self, chart: BirthChart) -> List[Yoga]:
        yogas: List[Yoga] = []

        yogas.extend(self._detect_labha_dhana(chart))
        yogas.extend(self._detect_jupiter_venus(chart))

        return yogas

    # ─────────────────────────────────────────────
    # Labha-Dhana
    # ─────────────────────────────────────────────

    def _detect_labha_dhana(self, chart: BirthChart) -> List[Yoga]:
        ascendant = chart.ascendant.sign
        second_lord = self.houses.house_lord(2, ascendant)
        eleventh_lord = self.houses.house_lord(11, ascendant)

        second_house = chart.planets[second_lord].house
        eleventh_house = chart.planets[eleventh_lord].house
        base = self.houses.calculate_yoga_strength(chart, [second_lord, eleventh_lord])

        match: Optional[Tuple[str, float]] = None
        if second_house == 11 and eleventh_house == 2:
            match = ("MUTUAL_HOUSES", base)
        elif self.houses.is_in_dhana_house(second_house) and self.houses.is_in_dhana_house(eleventh_house):
            match = (
                "BOTH_IN_DHANA_HOUSES",
                base * YOGA_CONSTANTS["BOTH_IN_DHANA_HOUSES_FACTOR"],
            )
        else:
            aspect = self.houses.mutual_aspect_strength(second_house, eleventh_house)
            if aspect > 0:
                match = ("MUTUAL_ASPECT", base * aspect)

        if match is None:
            return []

        yoga_type, strength = match
        if strength < YOGA_CONSTANTS["MINIMUM_YOGA_STRENGTH"]:
            logger.debug(f"Dropped Labha-Dhana candidate with strength {strength:.2f}")
            return []

        return [
            Yoga(
                name="Labha-Dhana Yoga",
                type=yoga_type,
                category=DHANA_YOGA,
                planets=(second_lord, eleventh_lord),
                houses=(2, 11),
                strength=strength,
                description=(
                    f"2nd lord {second_lord} and 11th lord {eleventh_lord} "
                    "create wealth combination"
                ),
                effects=get_dhana_yoga_effects(strength),
            )
        ]

    # ─────────────────────────────────────────────
    # Jupiter-Venus
    # ─────────────────────────────────────────────

    def _detect_jupiter_venus(self, chart: BirthChart) -> List[Yoga]:
        jupiter_house = chart.planets["JUPITER"].house
        venus_house = chart.planets["VENUS"].house
        base = self.houses.calculate_yoga_strength(chart, ["JUPITER", "VENUS"])

        match: Optional[Tuple[str, float]] = None
        if self.houses.is_in_dhana_house(jupiter_house) and self.houses.is_in_dhana_house(venus_house):
            match = ("BOTH_IN_DHANA_HOUSES", base)
        elif self.houses.is_in_trikona(jupiter_house) and self.houses.is_in_trikona(venus_house):
            match = (
                "BOTH_IN_TRIKONA_HOUSES",
                base * YOGA_CONSTANTS["BOTH_IN_TRIKONA_HOUSES_FACTOR"],
            )
        else:
            aspect = self.houses.mutual_aspect_strength(jupiter_house, venus_house)
            if aspect > 0:
                match = ("MUTUAL_ASPECT", base * aspect)

        if match is None:
            return []

        yoga_type, strength = match
        if strength < YOGA_CONSTANTS["MINIMUM_YOGA_STRENGTH"]:
            logger.debug(f"Dropped Jupiter-Venus candidate with strength {strength:.2f}")
            return []

        return [
            Yoga(
                name="Jupiter-Venus Dhana Yoga",
                type=yoga_type,
                category=DHANA_YOGA,
                planets=("JUPITER", "VENUS"),
                houses=(jupiter_house, venus_house),
                strength=strength,
                description="Jupiter and Venus combination for wealth and prosperity",
                effects=get_dhana_yoga_effects(strength),
            )
        ]
