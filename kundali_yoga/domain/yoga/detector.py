import logging
from collections.abc import Mapping
from typing import List, Optional, Tuple, Union

from kundali_yoga.domain.yoga.detectors.dhana import DhanaYogaDetector
from kundali_yoga.domain.yoga.detectors.mahapurusha import MahapurushaYogaDetector
from kundali_yoga.domain.yoga.detectors.raja import RajaYogaDetector
from kundali_yoga.domain.yoga.detectors.special import SpecialYogaDetector
from kundali_yoga.domain.yoga.errors import ValidationError, YogaDetectionError
from kundali_yoga.domain.yoga.houses import HouseRelationEngine
from kundali_yoga.domain.yoga.schemas import BirthChart, Yoga, YogaSummary
from kundali_yoga.domain.yoga.summary import (
    category_label,
    filter_by_category,
    filter_by_strength,
    summarize,
)
from kundali_yoga.domain.yoga.validator import ChartValidator


logger = logging.getLogger(__name__)


class YogaDetector:
    """
    Orchestrates yoga detection for one birth chart.

    This class:
    - Validates the chart on construction
    - Runs the Raja, Dhana, Mahapurusha and Special families
    - Keeps the latest result for summaries and filters

    Detection is:
    - Pure
    - Deterministic
    - Side-effect free (beyond the stored result)
    """

    def __init__(
        self,
        chart: Union[BirthChart, Mapping],
        validator: Optional[ChartValidator] = None,
        houses: Optional[HouseRelationEngine] = None,
    ):
        validator = validator or ChartValidator()
        try:
            self._chart = validator.validate(chart)
        except ValidationError as exc:
            logger.error(f"Birth chart validation failed: {exc}")
            raise ValidationError(
                f"Birth chart validation failed: {exc}", field=exc.field
            ) from exc

        houses = houses or HouseRelationEngine()
        self.raja = RajaYogaDetector(houses)
        self.dhana = DhanaYogaDetector(houses)
        self.mahapurusha = MahapurushaYogaDetector(houses)
        self.special = SpecialYogaDetector(houses)

        self._yogas: Tuple[Yoga, ...] = ()

    @property
    def chart(self) -> BirthChart:
        return self._chart

    @property
    def detected_yogas(self) -> List[Yoga]:
        return list(self._yogas)

    # ─────────────────────────────────────────────
    # Detection
    # ─────────────────────────────────────────────

    def detect_all_yogas(self) -> List[Yoga]:
        """
        Run every family in order and replace the stored result.

        A failure in any family aborts the pass and leaves the
        previous result untouched.
        """
        yogas: List[Yoga] = []

        yogas.extend(self.detect_raja_yogas())
        yogas.extend(self.detect_dhana_yogas())
        yogas.extend(self.detect_mahapurusha_yogas())
        yogas.extend(self.detect_special_yogas())

        self._yogas = tuple(yogas)
        logger.info(f"Detected {len(yogas)} yogas")

        return list(self._yogas)

    def detect_raja_yogas(self) -> List[Yoga]:
        return self._run_family("raja", self.raja.detect)

    def detect_dhana_yogas(self) -> List[Yoga]:
        return self._run_family("dhana", self.dhana.detect)

    def detect_mahapurusha_yogas(self) -> List[Yoga]:
        return self._run_family("mahapurusha", self.mahapurusha.detect)

    def detect_special_yogas(self) -> List[Yoga]:
        return self._run_family("special", self.special.detect)

    def _run_family(self, phase: str, detect) -> List[Yoga]:
        try:
            yogas = detect(self._chart)
        except Exception as exc:
            logger.error(f"Yoga detection failed during {phase} phase: {exc}")
            raise YogaDetectionError(
                f"Yoga detection failed: {exc}", phase=phase
            ) from exc

        logger.debug(f"{phase} phase produced {len(yogas)} yogas")
        return yogas

    # ─────────────────────────────────────────────
    # Queries over the latest result
    # ─────────────────────────────────────────────

    def get_yoga_summary(self) -> YogaSummary:
        return summarize(self._yogas)

    def get_yogas_by_strength(self, min_strength: float = 0.0) -> List[Yoga]:
        return filter_by_strength(self._yogas, min_strength)

    def get_yogas_by_category(self, category: str) -> List[Yoga]:
        return filter_by_category(self._yogas, category)

    def get_yoga_category(self, yoga: Yoga) -> str:
        """
        Category label of a yoga, e.g. "Power and Authority".
        """
        return category_label(yoga)
