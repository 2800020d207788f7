"""
Yoga Detection

Detects Raja, Dhana, Mahapurusha and special yogas in a birth chart,
scores them and attaches effect text.
"""

from kundali_yoga.domain.yoga.constants import (
    PLANETARY_DIGNITIES,
    PLANETARY_RELATIONSHIPS,
    SIGN_LORDS,
    YOGA_CATEGORIES,
    YOGA_CONSTANTS,
    YOGA_STRENGTH_LEVELS,
)
from kundali_yoga.domain.yoga.detector import YogaDetector
from kundali_yoga.domain.yoga.dignity import DignityEvaluator
from kundali_yoga.domain.yoga.effects import (
    get_dhana_yoga_effects,
    get_gaja_kesari_effects,
    get_mahapurusha_effects,
    get_neecha_bhanga_effects,
    get_raja_yoga_effects,
    get_strength_level,
    get_viparita_raja_effects,
)
from kundali_yoga.domain.yoga.errors import (
    ValidationError,
    YogaDetectionError,
    YogaError,
)
from kundali_yoga.domain.yoga.houses import HouseRelationEngine
from kundali_yoga.domain.yoga.schemas import (
    Ascendant,
    BirthChart,
    PlanetPlacement,
    Yoga,
    YogaSummary,
)
from kundali_yoga.domain.yoga.validator import ChartValidator

__all__ = [
    "YogaDetector",
    "ChartValidator",
    "DignityEvaluator",
    "HouseRelationEngine",
    "Ascendant",
    "BirthChart",
    "PlanetPlacement",
    "Yoga",
    "YogaSummary",
    "YogaError",
    "ValidationError",
    "YogaDetectionError",
    "YOGA_CONSTANTS",
    "PLANETARY_RELATIONSHIPS",
    "SIGN_LORDS",
    "PLANETARY_DIGNITIES",
    "YOGA_CATEGORIES",
    "YOGA_STRENGTH_LEVELS",
    "get_raja_yoga_effects",
    "get_dhana_yoga_effects",
    "get_mahapurusha_effects",
    "get_gaja_kesari_effects",
    "get_neecha_bhanga_effects",
    "get_viparita_raja_effects",
    "get_strength_level",
]
