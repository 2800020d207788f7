from typing import List

from kundali_yoga.domain.yoga.constants import (
    PLANETARY_DIGNITIES,
    PLANETARY_RELATIONSHIPS,
    SIGN_LORDS,
    YOGA_CONSTANTS,
)


class DignityEvaluator:
    """
    Evaluates a planet's dignity in a zodiac sign.

    Precedence:
    exaltation > own sign > enemy sign > neutral
    """

    def dignity_multiplier(self, planet: str, sign: int) -> float:
        if self.is_exalted(planet, sign):
            return YOGA_CONSTANTS["EXALTED_MULTIPLIER"]
        if self.is_own_sign(planet, sign):
            return YOGA_CONSTANTS["OWN_SIGN_MULTIPLIER"]
        if self.is_enemy_sign(planet, sign):
            return YOGA_CONSTANTS["ENEMY_SIGN_MULTIPLIER"]
        return 1.0

    def dignity_label(self, planet: str, sign: int) -> str:
        if self.is_exalted(planet, sign):
            return "exalted"
        if self.is_own_sign(planet, sign):
            return "own sign"
        if self.is_debilitated(planet, sign):
            return "debilitated"
        if self.is_enemy_sign(planet, sign):
            return "enemy sign"
        return "neutral"

    # ─────────────────────────────────────────────
    # Predicates
    # ─────────────────────────────────────────────

    def is_exalted(self, planet: str, sign: int) -> bool:
        dignity = PLANETARY_DIGNITIES.get(planet)
        return dignity is not None and dignity["exaltation"] == sign

    def is_debilitated(self, planet: str, sign: int) -> bool:
        dignity = PLANETARY_DIGNITIES.get(planet)
        return dignity is not None and dignity["debilitation"] == sign

    def is_own_sign(self, planet: str, sign: int) -> bool:
        dignity = PLANETARY_DIGNITIES.get(planet)
        return dignity is not None and sign in dignity["own_signs"]

    def is_enemy_sign(self, planet: str, sign: int) -> bool:
        relationship = PLANETARY_RELATIONSHIPS.get(planet)
        if relationship is None:
            return False
        return SIGN_LORDS[sign % 12] in relationship["enemies"]

    def enemy_signs(self, planet: str) -> List[int]:
        return [sign for sign in range(12) if self.is_enemy_sign(planet, sign)]

    @staticmethod
    def sign_of(longitude: float) -> int:
        """
        Zodiac sign index (0 = Aries) of a sidereal longitude.
        """
        return int(longitude // 30) % 12
