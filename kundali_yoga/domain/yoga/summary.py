from typing import Dict, List, Optional, Sequence

from kundali_yoga.domain.yoga.constants import YOGA_CATEGORIES
from kundali_yoga.domain.yoga.schemas import Yoga, YogaSummary


def resolve_category(category: str) -> Optional[str]:
    """
    Resolve a family key ("RAJA_YOGA"), family name ("Raja Yoga")
    or category label ("Power and Authority") to its family key.
    """
    for key, info in YOGA_CATEGORIES.items():
        if category in (key, info["name"], info["category"]):
            return key
    return None


def category_label(yoga: Yoga) -> str:
    return YOGA_CATEGORIES[yoga.category]["category"]


def summarize(yogas: Sequence[Yoga]) -> YogaSummary:
    counts: Dict[str, int] = {key: 0 for key in YOGA_CATEGORIES}
    strongest: Optional[Yoga] = None

    for yoga in yogas:
        counts[yoga.category] += 1
        if strongest is None or yoga.strength > strongest.strength:
            strongest = yoga

    # Ties resolve to the earliest family in YOGA_CATEGORIES
    dominant: Optional[str] = None
    for key, count in counts.items():
        if count > 0 and (dominant is None or count > counts[dominant]):
            dominant = key

    return YogaSummary(
        total_yogas=len(yogas),
        categories=counts,
        dominant_category=dominant,
        strongest_yoga=strongest,
    )


def filter_by_strength(yogas: Sequence[Yoga], min_strength: float = 0.0) -> List[Yoga]:
    return [yoga for yoga in yogas if yoga.strength >= min_strength]


def filter_by_category(yogas: Sequence[Yoga], category: str) -> List[Yoga]:
    key = resolve_category(category)
    if key is None:
        return []
    return [yoga for yoga in yogas if yoga.category == key]
