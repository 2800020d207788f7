from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from kundali_yoga.domain.yoga.effects import get_strength_level


def _read_only(value: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(value))


# ─────────────────────────────────────────────
# Birth Chart
# ─────────────────────────────────────────────

class PlanetPlacement(BaseModel):
    """
    Sidereal longitude and whole-sign house of one body.
    """
    longitude: float = Field(ge=0.0, lt=360.0)
    house: int = Field(ge=1, le=12)

    model_config = ConfigDict(frozen=True)

    @property
    def sign(self) -> int:
        return int(self.longitude // 30) % 12


class Ascendant(BaseModel):
    sign: int = Field(ge=0, le=11)

    model_config = ConfigDict(frozen=True)


class BirthChart(BaseModel):
    """
    Validated natal chart consumed by every detector.

    `strengths` optionally carries an overall Shad Bala
    fraction (0..1) per planet. Both mappings are read-only.
    """
    ascendant: Ascendant
    planets: Mapping[str, PlanetPlacement]
    strengths: Mapping[str, float] = Field(default_factory=dict, validate_default=True)

    model_config = ConfigDict(frozen=True)

    _freeze_mappings = field_validator("planets", "strengths")(_read_only)

    @field_serializer("planets")
    def _dump_planets(self, value: Mapping[str, PlanetPlacement]) -> Dict[str, PlanetPlacement]:
        return dict(value)

    @field_serializer("strengths")
    def _dump_strengths(self, value: Mapping[str, float]) -> Dict[str, float]:
        return dict(value)

    def __hash__(self) -> int:
        return hash((
            self.ascendant,
            tuple(self.planets.items()),
            tuple(self.strengths.items()),
        ))

    def placement(self, planet: str) -> Optional[PlanetPlacement]:
        return self.planets.get(planet)

    def planets_in_house(self, house: int) -> Tuple[str, ...]:
        return tuple(
            name for name, placement in self.planets.items()
            if placement.house == house
        )


# ─────────────────────────────────────────────
# Detected Yogas
# ─────────────────────────────────────────────

class Yoga(BaseModel):
    """
    Represents a yoga formed in the chart.
    """
    name: str
    type: str
    category: str
    planets: Tuple[str, ...] = ()
    houses: Tuple[int, ...] = ()
    strength: float = Field(ge=0.0, le=1.0)
    description: str = ""
    effects: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    model_config = ConfigDict(frozen=True)

    _freeze_effects = field_validator("effects")(_read_only)

    @field_validator("planets")
    @classmethod
    def _collapse_duplicates(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(value))

    @field_serializer("effects")
    def _dump_effects(self, value: Mapping[str, str]) -> Dict[str, str]:
        return dict(value)

    def __hash__(self) -> int:
        return hash((
            self.name,
            self.type,
            self.category,
            self.planets,
            self.houses,
            self.strength,
            self.description,
            tuple(self.effects.items()),
        ))

    @property
    def strength_level(self) -> str:
        """
        Band name from YOGA_STRENGTH_LEVELS (WEAK .. VERY_STRONG).
        """
        return get_strength_level(self.strength)


class YogaSummary(BaseModel):
    """
    Aggregate view over one detection result.
    """
    total_yogas: int = 0
    categories: Dict[str, int] = Field(default_factory=dict)
    dominant_category: Optional[str] = None
    strongest_yoga: Optional[Yoga] = None
