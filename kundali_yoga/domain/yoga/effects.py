"""
Qualitative effect text for detected yogas.

Every lookup is keyed by strength band so detectors never
branch on wording.
"""

from typing import Dict

from kundali_yoga.domain.yoga.constants import YOGA_CONSTANTS, freeze_table


# ─────────────────────────────────────────────
# Strength bands
# ─────────────────────────────────────────────

def get_strength_level(strength: float) -> str:
    """
    Map a yoga strength to its band name.
    """
    if strength >= YOGA_CONSTANTS["VERY_STRONG_YOGA_THRESHOLD"]:
        return "VERY_STRONG"
    if strength >= YOGA_CONSTANTS["STRONG_YOGA_THRESHOLD"]:
        return "STRONG"
    if strength >= YOGA_CONSTANTS["MODERATE_YOGA_THRESHOLD"]:
        return "MODERATE"
    return "WEAK"


# ─────────────────────────────────────────────
# Effect tables
# ─────────────────────────────────────────────

RAJA_YOGA_EFFECTS = freeze_table({
    "VERY_STRONG": {
        "power": "Exceptional leadership and authority",
        "career": "High-level executive positions, government roles",
        "wealth": "Substantial wealth through position and influence",
        "recognition": "National or international fame",
        "duration": "Lifelong influence",
    },
    "STRONG": {
        "power": "Strong leadership qualities",
        "career": "Management positions, influential roles",
        "wealth": "Good income through career",
        "recognition": "Local or professional recognition",
        "duration": "Major part of career",
    },
    "MODERATE": {
        "power": "Leadership potential",
        "career": "Supervisory or team lead positions",
        "wealth": "Above average income",
        "recognition": "Professional respect",
        "duration": "Intermittent influence",
    },
    "WEAK": {
        "power": "Latent leadership that needs effort to surface",
        "career": "Occasional responsibility at work",
        "wealth": "Modest gains through position",
        "recognition": "Respect within a small circle",
        "duration": "Brief favourable periods",
    },
})

DHANA_YOGA_EFFECTS = freeze_table({
    "VERY_STRONG": {
        "wealth": "Exceptional financial success and abundance",
        "sources": "Multiple income sources, investments, business",
        "stability": "Long-term financial security",
        "generosity": "Philanthropic tendencies",
        "duration": "Lifelong prosperity",
    },
    "STRONG": {
        "wealth": "Strong financial position",
        "sources": "Good career income, property gains",
        "stability": "Financial stability with occasional windfalls",
        "generosity": "Charitable nature",
        "duration": "Most of adult life",
    },
    "MODERATE": {
        "wealth": "Above average financial status",
        "sources": "Steady income, occasional gains",
        "stability": "Reasonable financial security",
        "generosity": "Generous when possible",
        "duration": "Intermittent financial success",
    },
    "WEAK": {
        "wealth": "Modest financial improvement",
        "sources": "Income mainly from regular work",
        "stability": "Savings require discipline",
        "generosity": "Helpful in small ways",
        "duration": "Short favourable phases",
    },
})

GAJA_KESARI_EFFECTS = freeze_table({
    "VERY_STRONG": {
        "wisdom": "Exceptional wisdom and intelligence",
        "wealth": "Wealth through wisdom and guidance",
        "fame": "Recognition as knowledgeable person",
        "career": "Teaching, counseling, advisory roles",
        "duration": "Lifelong influence",
    },
    "STRONG": {
        "wisdom": "Sound judgement and quick learning",
        "wealth": "Wealth through knowledge and good advice",
        "fame": "Respected for learning",
        "career": "Teaching, counseling, advisory roles",
        "duration": "Most of adult life",
    },
    "MODERATE": {
        "wisdom": "Good intelligence and learning ability",
        "wealth": "Comfortable financial position",
        "fame": "Local recognition",
        "career": "Educational or advisory roles",
        "duration": "Career support",
    },
    "WEAK": {
        "wisdom": "Curiosity and willingness to learn",
        "wealth": "Adequate means",
        "fame": "Known within family and friends",
        "career": "Supportive or assisting roles",
        "duration": "Occasional support",
    },
})

MAHAPURUSHA_QUALITIES = freeze_table({
    "SUN": {
        "qualities": "Leadership, vitality, authority",
        "career": "Government, administration, politics",
        "personality": "Confident, ambitious, charismatic",
    },
    "MOON": {
        "qualities": "Emotional intelligence, nurturing, intuition",
        "career": "Healthcare, counseling, public service",
        "personality": "Empathetic, caring, intuitive",
    },
    "MARS": {
        "qualities": "Courage, leadership, military prowess",
        "career": "Military, police, sports, surgery",
        "personality": "Brave, competitive, pioneering spirit",
    },
    "MERCURY": {
        "qualities": "Intelligence, communication, business acumen",
        "career": "Business, writing, teaching, law",
        "personality": "Intelligent, adaptable, good communicator",
    },
    "JUPITER": {
        "qualities": "Wisdom, spirituality, teaching ability",
        "career": "Teaching, religion, law, counseling",
        "personality": "Wise, philosophical, benevolent",
    },
    "VENUS": {
        "qualities": "Artistic talent, luxury, relationship skills",
        "career": "Arts, entertainment, luxury goods, diplomacy",
        "personality": "Charming, artistic, pleasure-loving",
    },
    "SATURN": {
        "qualities": "Discipline, perseverance, justice",
        "career": "Government, law, engineering, agriculture",
        "personality": "Disciplined, responsible, serious",
    },
})

MAHAPURUSHA_INTENSITY = freeze_table({
    "VERY_STRONG": {
        "intensity": "Exceptional manifestation",
        "fame": "National recognition",
        "duration": "Lifelong influence",
    },
    "STRONG": {
        "intensity": "Strong manifestation",
        "fame": "Professional recognition",
        "duration": "Major career influence",
    },
    "MODERATE": {
        "intensity": "Moderate manifestation",
        "fame": "Local recognition",
        "duration": "Career support",
    },
    "WEAK": {
        "intensity": "Mild manifestation",
        "fame": "Recognition among peers",
        "duration": "Periodic support",
    },
})

NEECHA_BHANGA_TRANSFORMATIONS = freeze_table({
    "SUN": "Leadership despite challenges",
    "MOON": "Emotional strength despite difficulties",
    "MARS": "Courage overcoming obstacles",
    "MERCURY": "Intelligence overcoming communication barriers",
    "JUPITER": "Wisdom gained through hardship",
    "VENUS": "Beauty and harmony despite struggles",
    "SATURN": "Discipline and success through perseverance",
    "RAHU": "Ambition redirected into constructive goals",
    "KETU": "Insight gained through loss and detachment",
})

VIPARITA_RAJA_TRANSFORMATIONS = freeze_table({
    6: "Success through overcoming enemies and obstacles",
    8: "Transformation and success through crisis management",
    12: "Spiritual growth and success through detachment",
})


# ─────────────────────────────────────────────
# Lookups
# ─────────────────────────────────────────────

def get_raja_yoga_effects(strength: float) -> Dict[str, str]:
    return dict(RAJA_YOGA_EFFECTS[get_strength_level(strength)])


def get_dhana_yoga_effects(strength: float) -> Dict[str, str]:
    return dict(DHANA_YOGA_EFFECTS[get_strength_level(strength)])


def get_gaja_kesari_effects(strength: float) -> Dict[str, str]:
    return dict(GAJA_KESARI_EFFECTS[get_strength_level(strength)])


def get_mahapurusha_effects(planet: str, strength: float) -> Dict[str, str]:
    """
    Planet qualities merged with the intensity text of the band.

    Covers the five Pancha Mahapurusha planets as well as the
    Sun and Moon.
    """
    effects = dict(MAHAPURUSHA_QUALITIES.get(planet, {}))
    effects.update(MAHAPURUSHA_INTENSITY[get_strength_level(strength)])
    return effects


def get_neecha_bhanga_effects(planet: str, strength: float) -> Dict[str, str]:
    return {
        "transformation": NEECHA_BHANGA_TRANSFORMATIONS.get(
            planet, "Weakness turned into strength"
        ),
        "strength": "Overcoming inherent weaknesses",
        "success": "Success despite difficult circumstances",
        "duration": (
            "Lifelong transformation"
            if strength >= YOGA_CONSTANTS["STRONG_YOGA_THRESHOLD"]
            else "Major life periods"
        ),
    }


def get_viparita_raja_effects(house: int, strength: float) -> Dict[str, str]:
    return {
        "transformation": VIPARITA_RAJA_TRANSFORMATIONS.get(
            house, "Success through adversity"
        ),
        "strength": "Turning challenges into opportunities",
        "success": "Unexpected success through difficult situations",
        "duration": (
            "Lifelong pattern"
            if strength >= YOGA_CONSTANTS["STRONG_YOGA_THRESHOLD"]
            else "Intermittent influence"
        ),
    }
