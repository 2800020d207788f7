from types import MappingProxyType
from typing import Any


# ─────────────────────────────────────────────
# Planets
# ─────────────────────────────────────────────

REQUIRED_PLANETS = (
    "SUN", "MOON", "MARS", "MERCURY",
    "JUPITER", "VENUS", "SATURN",
)

OPTIONAL_PLANETS = ("RAHU", "KETU")

ALL_PLANETS = REQUIRED_PLANETS + OPTIONAL_PLANETS


def freeze_table(value: Any) -> Any:
    """
    Read-only view of a nested rule table: dicts become
    MappingProxyType and lists become tuples.
    """
    if isinstance(value, dict):
        return MappingProxyType({key: freeze_table(item) for key, item in value.items()})
    if isinstance(value, list):
        return tuple(freeze_table(item) for item in value)
    return value


# ─────────────────────────────────────────────
# Yoga analysis constants
# ─────────────────────────────────────────────

YOGA_CONSTANTS = MappingProxyType({
    # House classifications
    "KENDRA_HOUSES": (1, 4, 7, 10),
    "TRIKONA_HOUSES": (1, 5, 9),
    "DHANA_HOUSES": (2, 11),
    "MALEFIC_HOUSES": (6, 8, 12),

    # Dignity multipliers
    "EXALTED_MULTIPLIER": 1.5,
    "OWN_SIGN_MULTIPLIER": 1.25,
    "ENEMY_SIGN_MULTIPLIER": 0.75,

    # House placement factors for generic yoga strength
    "KENDRA_PLACEMENT_FACTOR": 1.2,
    "TRIKONA_PLACEMENT_FACTOR": 1.1,
    "MALEFIC_PLACEMENT_FACTOR": 0.8,

    # Aspect strengths (by house distance)
    "FULL_ASPECT": 1.0,             # 7th house
    "THREE_QUARTER_ASPECT": 0.75,   # 4th house
    "HALF_ASPECT": 0.5,             # 5th house
    "QUARTER_ASPECT": 0.25,         # 2nd house

    # Secondary placement discounts
    "BOTH_IN_KENDRAS_FACTOR": 0.8,
    "BOTH_IN_DHANA_HOUSES_FACTOR": 0.9,
    "BOTH_IN_TRIKONA_HOUSES_FACTOR": 0.9,

    # Neecha Bhanga cancellation weights
    "EXALTED_DISPOSITOR_WEIGHT": 0.4,
    "OWN_SIGN_DISPOSITOR_WEIGHT": 0.3,
    "KENDRA_CANCELLATION_WEIGHT": 0.3,

    # Formation thresholds
    "MINIMUM_YOGA_STRENGTH": 0.6,
    "MODERATE_YOGA_THRESHOLD": 0.7,
    "STRONG_YOGA_THRESHOLD": 0.8,
    "VERY_STRONG_YOGA_THRESHOLD": 0.9,
})


# ─────────────────────────────────────────────
# Planetary relationships
# ─────────────────────────────────────────────

# The Sun counts the Moon as an enemy, so Cancer is an enemy sign for it.
PLANETARY_RELATIONSHIPS = freeze_table({
    "SUN": {
        "friends": ["MARS", "JUPITER"],
        "enemies": ["MOON", "VENUS", "SATURN"],
        "neutral": ["MERCURY"],
    },
    "MOON": {
        "friends": ["SUN", "MERCURY"],
        "enemies": ["RAHU", "KETU"],
        "neutral": ["MARS", "JUPITER", "VENUS", "SATURN"],
    },
    "MARS": {
        "friends": ["SUN", "MOON", "JUPITER"],
        "enemies": ["MERCURY"],
        "neutral": ["VENUS", "SATURN"],
    },
    "MERCURY": {
        "friends": ["SUN", "VENUS"],
        "enemies": ["MOON"],
        "neutral": ["MARS", "JUPITER", "SATURN"],
    },
    "JUPITER": {
        "friends": ["SUN", "MOON", "MARS"],
        "enemies": ["MERCURY", "VENUS"],
        "neutral": ["SATURN"],
    },
    "VENUS": {
        "friends": ["MERCURY", "SATURN"],
        "enemies": ["SUN", "MOON"],
        "neutral": ["MARS", "JUPITER"],
    },
    "SATURN": {
        "friends": ["MERCURY", "VENUS"],
        "enemies": ["SUN", "MOON", "MARS"],
        "neutral": ["JUPITER"],
    },
    "RAHU": {
        "friends": ["VENUS", "SATURN"],
        "enemies": ["SUN", "MOON"],
        "neutral": ["MARS", "MERCURY", "JUPITER"],
    },
    "KETU": {
        "friends": ["VENUS", "SATURN"],
        "enemies": ["SUN", "MOON"],
        "neutral": ["MARS", "MERCURY", "JUPITER"],
    },
})


# ─────────────────────────────────────────────
# Sign lords (Aries → Pisces)
# ─────────────────────────────────────────────

SIGN_LORDS = (
    "MARS",     # Aries
    "VENUS",    # Taurus
    "MERCURY",  # Gemini
    "MOON",     # Cancer
    "SUN",      # Leo
    "MERCURY",  # Virgo
    "VENUS",    # Libra
    "MARS",     # Scorpio
    "JUPITER",  # Sagittarius
    "SATURN",   # Capricorn
    "SATURN",   # Aquarius
    "JUPITER",  # Pisces
)


# ─────────────────────────────────────────────
# Exaltation, debilitation and own signs
# ─────────────────────────────────────────────

# Virgo is counted among the Sun's own signs.
PLANETARY_DIGNITIES = freeze_table({
    "SUN": {"exaltation": 0, "debilitation": 6, "own_signs": [4, 5]},
    "MOON": {"exaltation": 1, "debilitation": 7, "own_signs": [3]},
    "MARS": {"exaltation": 9, "debilitation": 3, "own_signs": [0, 7]},
    "MERCURY": {"exaltation": 5, "debilitation": 11, "own_signs": [2, 5]},
    "JUPITER": {"exaltation": 3, "debilitation": 9, "own_signs": [8, 11]},
    "VENUS": {"exaltation": 11, "debilitation": 5, "own_signs": [1, 6]},
    "SATURN": {"exaltation": 6, "debilitation": 0, "own_signs": [9, 10]},
    "RAHU": {"exaltation": 2, "debilitation": 8, "own_signs": []},
    "KETU": {"exaltation": 8, "debilitation": 2, "own_signs": []},
})


# ─────────────────────────────────────────────
# Yoga families
# ─────────────────────────────────────────────

RAJA_YOGA = "RAJA_YOGA"
DHANA_YOGA = "DHANA_YOGA"
MAHAPURUSHA_YOGA = "MAHAPURUSHA_YOGA"
SPECIAL_YOGAS = "SPECIAL_YOGAS"

# Declaration order doubles as the tie-break priority for summaries.
YOGA_CATEGORIES = freeze_table({
    RAJA_YOGA: {
        "name": "Raja Yoga",
        "category": "Power and Authority",
        "description": "Combinations indicating leadership, power, and high status",
        "types": ["Kendra-Trikona Yoga", "Dharma-Karma Yoga"],
    },
    DHANA_YOGA: {
        "name": "Dhana Yoga",
        "category": "Wealth and Prosperity",
        "description": "Combinations indicating financial success and material abundance",
        "types": ["Labha-Dhana Yoga", "Jupiter-Venus Yoga"],
    },
    MAHAPURUSHA_YOGA: {
        "name": "Mahapurusha Yoga",
        "category": "Great Person",
        "description": "Combinations formed by planets in own or exalted signs in kendras",
        "types": ["Pancha Mahapurusha", "Individual Planet Yogas"],
    },
    SPECIAL_YOGAS: {
        "name": "Special Yogas",
        "category": "Unique Combinations",
        "description": "Rare and powerful planetary combinations",
        "types": ["Gaja Kesari", "Neecha Bhanga", "Viparita Raja"],
    },
})

YOGA_STRENGTH_LEVELS = freeze_table({
    "WEAK": {"min": 0.6, "max": 0.7, "description": "Present but weak influence"},
    "MODERATE": {"min": 0.7, "max": 0.8, "description": "Noticeable influence"},
    "STRONG": {"min": 0.8, "max": 0.9, "description": "Strong influence on life"},
    "VERY_STRONG": {"min": 0.9, "max": 1.0, "description": "Dominant life influence"},
})


# ─────────────────────────────────────────────
# Pancha Mahapurusha names
# ─────────────────────────────────────────────

PANCHA_MAHAPURUSHA_YOGAS = MappingProxyType({
    "MARS": "Ruchaka Yoga",
    "MERCURY": "Bhadra Yoga",
    "JUPITER": "Hamsa Yoga",
    "VENUS": "Malavya Yoga",
    "SATURN": "Sasha Yoga",
})

GENERAL_MAHAPURUSHA_PLANETS = ("SUN", "MOON")
