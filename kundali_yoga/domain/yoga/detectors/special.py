import logging
from typing import List, Optional

from kundali_yoga.domain.yoga.constants import (
    ALL_PLANETS,
    OPTIONAL_PLANETS,
    SIGN_LORDS,
    SPECIAL_YOGAS,
    YOGA_CONSTANTS,
)
from kundali_yoga.domain.yoga.effects import (
    get_gaja_kesari_effects,
    get_neecha_bhanga_effects,
    get_viparita_raja_effects,
)
from kundali_yoga.domain.yoga.houses import HouseRelationEngine
from kundali_yoga.domain.yoga.schemas import BirthChart, Yoga


logger = logging.getLogger(__name__)


# Inclusive house counts that put one body in a kendra from another
KENDRA_DISTANCES = {1, 4, 7, 10}


class SpecialYogaDetector:
    """
    Detects special yogas.

    Current support:
    - Gaja Kesari Yoga
    - Neecha Bhanga Raja Yoga
    - Viparita Raja Yoga
    """

    def __init__(self, houses: Optional[HouseRelationEngine] = None):
        self.houses = houses or HouseRelationEngine()
        self.dignity = self.houses.dignity

    def detect(self, chart: BirthChart) -> List[Yoga]:
        yogas: List[Yoga] = []

        yogas.extend(self._detect_gaja_kesari(chart))
        yogas.extend(self._detect_neecha_bhanga(chart))
        yogas.extend(self._detect_viparita_raja(chart))

        return yogas

    # ─────────────────────────────────────────────
    # Gaja Kesari
    # ─────────────────────────────────────────────

    def _detect_gaja_kesari(self, chart: BirthChart) -> List[Yoga]:
        """
        Jupiter in a kendra counted from the Moon.
        A Moon or Jupiter in a dusthana does not qualify.
        """
        moon_house = chart.planets["MOON"].house
        jupiter_house = chart.planets["JUPITER"].house

        if self.houses.kendra_distance(moon_house, jupiter_house) not in KENDRA_DISTANCES:
            return []

        if self.houses.is_in_malefic_house(moon_house) or self.houses.is_in_malefic_house(jupiter_house):
            return []

        strength = self.houses.calculate_yoga_strength(chart, ["MOON", "JUPITER"])
        if strength < YOGA_CONSTANTS["MINIMUM_YOGA_STRENGTH"]:
            logger.debug(f"Dropped Gaja Kesari candidate with strength {strength:.2f}")
            return []

        return [
            Yoga(
                name="Gaja Kesari Yoga",
                type="MOON_JUPITER_KENDRA",
                category=SPECIAL_YOGAS,
                planets=("MOON", "JUPITER"),
                houses=(moon_house, jupiter_house),
                strength=strength,
                description="Moon and Jupiter in kendra positions from each other",
                effects=get_gaja_kesari_effects(strength),
            )
        ]

    # ─────────────────────────────────────────────
    # Neecha Bhanga
    # ─────────────────────────────────────────────

    def _detect_neecha_bhanga(self, chart: BirthChart) -> List[Yoga]:
        yogas: List[Yoga] = []

        for planet in ALL_PLANETS:
            placement = chart.placement(planet)
            if placement is None:
                continue

            sign = placement.sign
            if not self.dignity.is_debilitated(planet, sign):
                continue

            dispositor = SIGN_LORDS[sign]
            dispositor_sign = chart.planets[dispositor].sign

            strength = 0.0
            factors: List[str] = []
            involved = [planet]

            if self.dignity.is_exalted(dispositor, dispositor_sign):
                strength += YOGA_CONSTANTS["EXALTED_DISPOSITOR_WEIGHT"]
                factors.append("EXALTED_DISPOSITOR")
                involved.append(dispositor)
            elif self.dignity.is_own_sign(dispositor, dispositor_sign):
                strength += YOGA_CONSTANTS["OWN_SIGN_DISPOSITOR_WEIGHT"]
                factors.append("OWN_SIGN_DISPOSITOR")
                involved.append(dispositor)

            if self.houses.is_in_kendra(placement.house):
                strength += YOGA_CONSTANTS["KENDRA_CANCELLATION_WEIGHT"]
                factors.append("IN_KENDRA")

            if not factors:
                continue

            strength = min(strength, 1.0)
            yogas.append(
                Yoga(
                    name="Neecha Bhanga Raja Yoga",
                    type="DEBILITATION_CANCELLATION",
                    category=SPECIAL_YOGAS,
                    planets=tuple(involved),
                    houses=(placement.house,),
                    strength=strength,
                    description=(
                        f"{planet} debilitation cancelled by {', '.join(factors)}"
                    ),
                    effects=get_neecha_bhanga_effects(planet, strength),
                )
            )

        return yogas

    # ─────────────────────────────────────────────
    # Viparita Raja
    # ─────────────────────────────────────────────

    def _detect_viparita_raja(self, chart: BirthChart) -> List[Yoga]:
        """
        Lords of one dusthana placed in another dusthana.

        Any occupant of that house which owns no dusthana at
        all spoils the combination. Nodes own no house and are
        ignored.
        """
        yogas: List[Yoga] = []
        ascendant = chart.ascendant.sign
        dusthanas = YOGA_CONSTANTS["MALEFIC_HOUSES"]

        owned = {
            planet: set(self.houses.houses_owned_by(planet, ascendant))
            for planet in chart.planets
        }

        for house in dusthanas:
            occupants = [
                planet for planet in chart.planets_in_house(house)
                if planet not in OPTIONAL_PLANETS
            ]

            lords = [
                planet for planet in occupants
                if owned[planet] & (set(dusthanas) - {house})
            ]
            if not lords:
                continue

            spoilers = [
                planet for planet in occupants
                if not owned[planet] & set(dusthanas)
            ]
            if spoilers:
                logger.debug(
                    f"Viparita Raja in house {house} spoiled by {', '.join(spoilers)}"
                )
                continue

            strength = self.houses.calculate_yoga_strength(chart, lords)
            if strength < YOGA_CONSTANTS["MINIMUM_YOGA_STRENGTH"]:
                logger.debug(
                    f"Dropped Viparita Raja candidate in house {house} "
                    f"with strength {strength:.2f}"
                )
                continue

            yogas.append(
                Yoga(
                    name=f"Viparita Raja Yoga ({house}th House)",
                    type="MALEFIC_HOUSE_BENEFIC",
                    category=SPECIAL_YOGAS,
                    planets=tuple(lords),
                    houses=(house,),
                    strength=strength,
                    description=(
                        f"Lords of other dusthanas placed in the {house}th house"
                    ),
                    effects=get_viparita_raja_effects(house, strength),
                )
            )

        return yogas
