from typing import Iterable, List, Optional

from kundali_yoga.domain.yoga.constants import SIGN_LORDS, YOGA_CONSTANTS
from kundali_yoga.domain.yoga.dignity import DignityEvaluator
from kundali_yoga.domain.yoga.schemas import BirthChart


# House distance (to - from, mod 12) -> aspect constant
ASPECT_BY_DISTANCE = {
    6: "FULL_ASPECT",
    3: "THREE_QUARTER_ASPECT",
    4: "HALF_ASPECT",
    1: "QUARTER_ASPECT",
}


class HouseRelationEngine:
    """
    House classification, whole-sign lordship, aspects and
    the generic strength score shared by all yoga families.
    """

    def __init__(self, dignity: Optional[DignityEvaluator] = None):
        self.dignity = dignity or DignityEvaluator()

    # ─────────────────────────────────────────────
    # Classification
    # ─────────────────────────────────────────────

    def is_in_kendra(self, house: int) -> bool:
        return house in YOGA_CONSTANTS["KENDRA_HOUSES"]

    def is_in_trikona(self, house: int) -> bool:
        return house in YOGA_CONSTANTS["TRIKONA_HOUSES"]

    def is_in_dhana_house(self, house: int) -> bool:
        return house in YOGA_CONSTANTS["DHANA_HOUSES"]

    def is_in_malefic_house(self, house: int) -> bool:
        return house in YOGA_CONSTANTS["MALEFIC_HOUSES"]

    # ─────────────────────────────────────────────
    # Lordship
    # ─────────────────────────────────────────────

    def house_sign(self, house: int, ascendant_sign: int) -> int:
        return (ascendant_sign + house - 1) % 12

    def house_lord(self, house: int, ascendant_sign: int) -> str:
        return SIGN_LORDS[self.house_sign(house, ascendant_sign)]

    def houses_owned_by(self, planet: str, ascendant_sign: int) -> List[int]:
        return [
            house for house in range(1, 13)
            if self.house_lord(house, ascendant_sign) == planet
        ]

    # ─────────────────────────────────────────────
    # Aspects
    # ─────────────────────────────────────────────

    def aspect_strength(self, from_house: int, to_house: int) -> float:
        """
        Strength of the aspect cast from one house onto another.

        Counted forward: 7th = full, 4th = three quarter,
        5th = half, 2nd = quarter.
        """
        key = ASPECT_BY_DISTANCE.get((to_house - from_house) % 12)
        if key is None:
            return 0.0
        return YOGA_CONSTANTS[key]

    def mutual_aspect_strength(self, house_a: int, house_b: int) -> float:
        return min(
            self.aspect_strength(house_a, house_b),
            self.aspect_strength(house_b, house_a),
        )

    def kendra_distance(self, from_house: int, to_house: int) -> int:
        """
        Inclusive house count, e.g. 1 -> 7 is the 7th house.
        """
        return ((to_house - from_house) % 12) + 1

    # ─────────────────────────────────────────────
    # Generic yoga strength
    # ─────────────────────────────────────────────

    def house_factor(self, house: int) -> float:
        if self.is_in_kendra(house):
            return YOGA_CONSTANTS["KENDRA_PLACEMENT_FACTOR"]
        if self.is_in_trikona(house):
            return YOGA_CONSTANTS["TRIKONA_PLACEMENT_FACTOR"]
        if self.is_in_malefic_house(house):
            return YOGA_CONSTANTS["MALEFIC_PLACEMENT_FACTOR"]
        return 1.0

    def calculate_yoga_strength(
        self,
        chart: BirthChart,
        planets: Iterable[str]
    ) -> float:
        """
        Mean of dignity x house placement x Shad Bala factor over
        the participating planets, clamped to [0, 1].
        """
        total = 0.0
        count = 0

        for planet in planets:
            placement = chart.placement(planet)
            if placement is None:
                continue

            strength = self.dignity.dignity_multiplier(planet, placement.sign)
            strength *= self.house_factor(placement.house)

            overall = chart.strengths.get(planet)
            if overall is not None:
                strength *= 0.5 + 0.5 * overall

            total += strength
            count += 1

        if count == 0:
            return 0.0

        return max(0.0, min(total / count, 1.0))
