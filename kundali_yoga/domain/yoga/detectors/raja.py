import logging
from typing import List, Optional, Tuple

from kundali_yoga.domain.yoga.constants import RAJA_YOGA, YOGA_CONSTANTS
from kundali_yoga.domain.yoga.effects import get_raja_yoga_effects
from kundali_yoga.domain.yoga.houses import HouseRelationEngine
from kundali_yoga.domain.yoga.schemas import BirthChart, Yoga


logger = logging.getLogger(__name__)


class RajaYogaDetector:
    """
    Detects Raja Yogas (power and authority).

    Current support:
    - Kendra-Trikona Raja Yoga (lord exchange)
    - Dharma-Karma Raja Yoga (9th / 10th lords)
    """

    def __init__(self, houses: Optional[HouseRelationEngine] = None):
        self.houses = houses or HouseRelationEngine()

    def detect(self, chart: BirthChart) -> List[Yoga]:
        yogas: List[Yoga] = []

        yogas.extend(self._detect_kendra_trikona(chart))
        yogas.extend(self._detect_dharma_karma(chart))

        return yogas

    # ─────────────────────────────────────────────
    # Kendra-Trikona
    # ─────────────────────────────────────────────

    def _detect_kendra_trikona(self, chart: BirthChart) -> List[Yoga]:
        """
        A kendra lord sitting in the trikona while that trikona's
        lord sits in the kendra.
        """
        yogas: List[Yoga] = []
        ascendant = chart.ascendant.sign

        for kendra in YOGA_CONSTANTS["KENDRA_HOUSES"]:
            for trikona in YOGA_CONSTANTS["TRIKONA_HOUSES"]:
                if kendra == trikona:
                    continue

                kendra_lord = self.houses.house_lord(kendra, ascendant)
                trikona_lord = self.houses.house_lord(trikona, ascendant)
                if kendra_lord == trikona_lord:
                    continue

                if (
                    chart.planets[kendra_lord].house != trikona
                    or chart.planets[trikona_lord].house != kendra
                ):
                    continue

                strength = self.houses.calculate_yoga_strength(
                    chart, [kendra_lord, trikona_lord]
                )
                if not self._meets_minimum("Kendra-Trikona", strength):
                    continue

                yogas.append(
                    Yoga(
                        name="Kendra-Trikona Raja Yoga",
                        type="PARIVARTANA",
                        category=RAJA_YOGA,
                        planets=(kendra_lord, trikona_lord),
                        houses=(kendra, trikona),
                        strength=strength,
                        description=(
                            f"{kendra_lord} (lord of {kendra}) and "
                            f"{trikona_lord} (lord of {trikona}) exchange houses"
                        ),
                        effects=get_raja_yoga_effects(strength),
                    )
                )

        return yogas

    # ─────────────────────────────────────────────
    # Dharma-Karma
    # ─────────────────────────────────────────────

    def _detect_dharma_karma(self, chart: BirthChart) -> List[Yoga]:
        ascendant = chart.ascendant.sign
        ninth_lord = self.houses.house_lord(9, ascendant)
        tenth_lord = self.houses.house_lord(10, ascendant)

        ninth_house = chart.planets[ninth_lord].house
        tenth_house = chart.planets[tenth_lord].house

        match = self._classify_pair(chart, ninth_lord, tenth_lord, ninth_house, tenth_house)
        if match is None:
            return []

        yoga_type, strength = match
        if not self._meets_minimum("Dharma-Karma", strength):
            return []

        return [
            Yoga(
                name="Dharma-Karma Raja Yoga",
                type=yoga_type,
                category=RAJA_YOGA,
                planets=(ninth_lord, tenth_lord),
                houses=(9, 10),
                strength=strength,
                description=(
                    f"9th lord {ninth_lord} and 10th lord {tenth_lord} "
                    "form powerful combination"
                ),
                effects=get_raja_yoga_effects(strength),
            )
        ]

    def _classify_pair(
        self,
        chart: BirthChart,
        ninth_lord: str,
        tenth_lord: str,
        ninth_house: int,
        tenth_house: int,
    ) -> Optional[Tuple[str, float]]:
        base = self.houses.calculate_yoga_strength(chart, [ninth_lord, tenth_lord])

        if ninth_house == 10 and tenth_house == 9:
            return "MUTUAL_HOUSES", base

        if self.houses.is_in_kendra(ninth_house) and self.houses.is_in_kendra(tenth_house):
            return "BOTH_IN_KENDRAS", base * YOGA_CONSTANTS["BOTH_IN_KENDRAS_FACTOR"]

        aspect = self.houses.mutual_aspect_strength(ninth_house, tenth_house)
        if aspect > 0:
            return "MUTUAL_ASPECT", base * aspect

        return None

    def _meets_minimum(self, label: str, strength: float) -> bool:
        if strength >= YOGA_CONSTANTS["MINIMUM_YOGA_STRENGTH"]:
            return True
        logger.debug(f"Dropped {label} candidate with strength {strength:.2f}")
        return False
