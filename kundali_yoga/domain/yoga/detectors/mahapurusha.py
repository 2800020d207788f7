from typing import List, Optional

from kundali_yoga.domain.yoga.constants import (
    GENERAL_MAHAPURUSHA_PLANETS,
    MAHAPURUSHA_YOGA,
    PANCHA_MAHAPURUSHA_YOGAS,
)
from kundali_yoga.domain.yoga.effects import get_mahapurusha_effects
from kundali_yoga.domain.yoga.houses import HouseRelationEngine
from kundali_yoga.domain.yoga.schemas import BirthChart, Yoga


class MahapurushaYogaDetector:
    """
    Detects Mahapurusha Yogas: a planet in its own or
    exaltation sign placed in a kendra.
    """

    def __init__(self, houses: Optional[HouseRelationEngine] = None):
        self.houses = houses or HouseRelationEngine()
        self.dignity = self.houses.dignity

    def detect(self, chart: BirthChart) -> List[Yoga]:
        yogas: List[Yoga] = []

        for planet, name in PANCHA_MAHAPURUSHA_YOGAS.items():
            placement = chart.planets[planet]
            if not self.houses.is_in_kendra(placement.house):
                continue

            sign = placement.sign
            if not (
                self.dignity.is_exalted(planet, sign)
                or self.dignity.is_own_sign(planet, sign)
            ):
                continue

            yogas.append(
                self._build(planet, name, "PANCHA_MAHAPURUSHA", placement.house, sign)
            )

        for planet in GENERAL_MAHAPURUSHA_PLANETS:
            placement = chart.planets[planet]
            if not self.houses.is_in_kendra(placement.house):
                continue
            if not self.dignity.is_own_sign(planet, placement.sign):
                continue

            yogas.append(
                self._build(
                    planet,
                    f"{planet} Mahapurusha Yoga",
                    "GENERAL_MAHAPURUSHA",
                    placement.house,
                    placement.sign,
                )
            )

        return yogas

    def _build(
        self,
        planet: str,
        name: str,
        yoga_type: str,
        house: int,
        sign: int,
    ) -> Yoga:
        strength = min(self.dignity.dignity_multiplier(planet, sign), 1.0)

        return Yoga(
            name=name,
            type=yoga_type,
            category=MAHAPURUSHA_YOGA,
            planets=(planet,),
            houses=(house,),
            strength=strength,
            description=(
                f"{planet} in {self.dignity.dignity_label(planet, sign)} "
                f"position in house {house}"
            ),
            effects=get_mahapurusha_effects(planet, strength),
        )
