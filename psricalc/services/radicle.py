# psricalc/services/radicle.py
from typing import Mapping, Optional, Union

from pydantic import ValidationError

from psricalc.schemas import RadicleSummary
from psricalc.services.validation import InvalidInput

HIGH_VIGOR_COUNT = 15
MID_VIGOR_COUNT = 8

HIGH_VIGOR_FACTOR = 1.10
MID_VIGOR_FACTOR = 1.05
NO_VIGOR_FACTOR = 1.0


def as_radicle_summary(summary: Union[RadicleSummary, Mapping, None]) -> Optional[RadicleSummary]:
    if summary is None or isinstance(summary, RadicleSummary):
        return summary
    try:
        return RadicleSummary.model_validate(summary)
    except ValidationError as exc:
        raise InvalidInput(f"invalid radicle_summary: {exc.errors()[0]['msg']}") from exc


def radicle_vigor_factor(summary: Optional[RadicleSummary]) -> float:
    if summary is None or summary.total_count <= 0:
        return NO_VIGOR_FACTOR

    if summary.total_count >= HIGH_VIGOR_COUNT:
        return HIGH_VIGOR_FACTOR
    if summary.total_count >= MID_VIGOR_COUNT:
        return MID_VIGOR_FACTOR
    return NO_VIGOR_FACTOR
