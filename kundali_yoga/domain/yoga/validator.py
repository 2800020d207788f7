import logging
import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, Dict, Union

from pydantic import ValidationError as PydanticValidationError

from kundali_yoga.domain.yoga.constants import (
    ALL_PLANETS,
    OPTIONAL_PLANETS,
    REQUIRED_PLANETS,
)
from kundali_yoga.domain.yoga.errors import ValidationError
from kundali_yoga.domain.yoga.schemas import BirthChart


logger = logging.getLogger(__name__)


def _is_real(value: Any) -> bool:
    return (
        isinstance(value, Real)
        and not isinstance(value, bool)
        and not math.isnan(value)
    )


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ChartValidator:
    """
    Turns raw chart input into a BirthChart.

    Checks run in a fixed order and the first violation aborts
    with a ValidationError naming the offending field. Bodies
    outside the nine grahas are ignored.
    """

    def validate(
        self,
        chart: Union[BirthChart, Mapping, None]
    ) -> BirthChart:
        if isinstance(chart, BirthChart):
            chart = chart.model_dump()

        if chart is None or not isinstance(chart, Mapping):
            raise ValidationError("Birth chart data is required", field="chart")

        planets = chart.get("planets")
        if not isinstance(planets, Mapping):
            raise ValidationError(
                "Planetary positions are required", field="planets"
            )

        ascendant = self._validate_ascendant(chart.get("ascendant"))

        placements: Dict[str, Dict[str, Any]] = {}
        for planet in REQUIRED_PLANETS:
            if planet not in planets:
                raise ValidationError(
                    f"Missing planetary data for {planet}",
                    field=f"planets.{planet}",
                )
            placements[planet] = self._validate_placement(planet, planets[planet])

        for planet in OPTIONAL_PLANETS:
            if planets.get(planet) is not None:
                placements[planet] = self._validate_placement(
                    planet, planets[planet]
                )

        ignored = [name for name in planets if name not in ALL_PLANETS]
        if ignored:
            logger.debug(f"Ignoring unsupported bodies: {', '.join(map(str, ignored))}")

        strengths = self._validate_strengths(chart.get("strengths"))

        try:
            return BirthChart(
                ascendant=ascendant,
                planets=placements,
                strengths=strengths,
            )
        except PydanticValidationError as exc:
            raise ValidationError(str(exc), field="chart") from exc

    # ─────────────────────────────────────────────
    # Field checks
    # ─────────────────────────────────────────────

    def _validate_ascendant(self, ascendant: Any) -> Dict[str, int]:
        if not isinstance(ascendant, Mapping) or "sign" not in ascendant:
            raise ValidationError(
                "Ascendant sign is required", field="ascendant.sign"
            )

        sign = ascendant["sign"]
        if not _is_int(sign) or not 0 <= sign <= 11:
            raise ValidationError(
                f"Invalid ascendant sign: {sign!r} (expected 0-11)",
                field="ascendant.sign",
            )

        return {"sign": sign}

    def _validate_placement(self, planet: str, data: Any) -> Dict[str, Any]:
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Invalid planetary data for {planet}",
                field=f"planets.{planet}",
            )

        longitude = data.get("longitude")
        if not _is_real(longitude) or not 0 <= longitude < 360:
            raise ValidationError(
                f"Invalid longitude for {planet}: {longitude!r}",
                field=f"planets.{planet}.longitude",
            )

        house = data.get("house")
        if not _is_int(house) or not 1 <= house <= 12:
            raise ValidationError(
                f"Invalid house for {planet}: {house!r}",
                field=f"planets.{planet}.house",
            )

        return {"longitude": float(longitude), "house": house}

    def _validate_strengths(self, strengths: Any) -> Dict[str, float]:
        """
        Accepts either a bare fraction or a Shad Bala record
        with an `overall` key per planet.
        """
        if strengths is None:
            return {}

        if not isinstance(strengths, Mapping):
            raise ValidationError(
                "Planetary strengths must be a mapping", field="strengths"
            )

        result: Dict[str, float] = {}
        for planet, value in strengths.items():
            if planet not in ALL_PLANETS:
                continue

            if isinstance(value, Mapping):
                value = value.get("overall")

            if not _is_real(value) or not 0 <= value <= 1:
                raise ValidationError(
                    f"Invalid strength for {planet}: {value!r} (expected 0-1)",
                    field=f"strengths.{planet}",
                )
            result[planet] = float(value)

        return result
