# psricalc/services/psri.py
"""
Plant Stress Response Index (PSRI) from cumulative germination counts.

PSRI = (MSG * MRG * (1 - MTG)) ** (1/3), scaled by a radicle vigor factor.
Walne et al. (2020), Agrosystems, Geosciences & Environment 3(1), e20087.
"""
from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence, Union

import numpy as np

from psricalc.schemas import PSRIResult, RadicleSummary
from psricalc.services.radicle import as_radicle_summary, radicle_vigor_factor
from psricalc.services.validation import (
    InvalidInput,
    check_final_germinated,
    validate_series,
    validate_total_seeds,
)

log = logging.getLogger(__name__)

DEFAULT_TIME_POINTS = (3.0, 5.0, 7.0)

# used as-is when the series shows no germination progress at all
MRG_FALLBACK = 0.1
T50_FRACTION = 0.5


def _adjust_for_disease(counts: np.ndarray, diseased: Optional[np.ndarray]) -> np.ndarray:
    if diseased is None:
        return counts
    return np.maximum(0.0, counts - diseased)


def _max_rate_of_germination(adjusted: np.ndarray, times: np.ndarray, total_seeds: float) -> float:
    time_diff = np.diff(times)
    germ_diff = np.maximum(0.0, np.diff(adjusted))

    keep = time_diff > 0
    rates = germ_diff[keep] / time_diff[keep] / total_seeds

    if rates.size == 0 or not np.any(rates > 0):
        log.info("no germination progress between time points; MRG falls back to %s", MRG_FALLBACK)
        return MRG_FALLBACK
    return float(np.mean(rates) * np.max(times))


def _time_to_half_germination(adjusted: np.ndarray, times: np.ndarray, final_germinated: float) -> float:
    t_max = float(np.max(times))
    if final_germinated <= 0:
        log.info("no seeds germinated; t50 set to end of trial (%s)", t_max)
        return t_max

    target = final_germinated * T50_FRACTION

    # first bracketing interval wins
    for i in range(adjusted.size - 1):
        lo, hi = adjusted[i], adjusted[i + 1]
        if lo <= target <= hi:
            if hi > lo:
                fraction = (target - lo) / (hi - lo)
                return float(times[i] + fraction * (times[i + 1] - times[i]))
            return float(times[i])

    # never crossed the target: weight each time point by its new germinations
    weights = np.diff(np.concatenate(([0.0], adjusted)))
    weight_sum = float(np.sum(weights))
    if weight_sum == 0:
        log.info("germination weights cancel out; t50 set to end of trial (%s)", t_max)
        return t_max

    log.info("t50 target %.3f never bracketed; using weighted mean time", target)
    return float(np.sum(weights * times) / weight_sum)


def _signed_cbrt(value: float) -> float:
    # real cube root, keeps the sign of negative products
    return float(np.cbrt(value))


def compute_psri(
    germination_counts: Sequence[float],
    time_points: Sequence[float] = DEFAULT_TIME_POINTS,
    *,
    total_seeds: float,
    species: str,
    radicle_summary: Union[RadicleSummary, Mapping, None] = None,
    diseased_counts: Optional[Sequence[float]] = None,
) -> PSRIResult:
    """
    Compute the PSRI for one replicate.

    germination_counts: cumulative germinated seeds at each time point.
    time_points: strictly increasing observation days (default days 3, 5, 7).
    total_seeds: seeds placed in the replicate, > 0.
    species: label echoed back in the result.
    radicle_summary: optional record with ``total_count``; selects the vigor factor.
    diseased_counts: optional diseased seeds per time point, subtracted from the counts.

    Raises InvalidInput before any metric is computed if the input is malformed.
    """
    if not isinstance(species, str):
        raise InvalidInput("species must be a string label")
    total = validate_total_seeds(total_seeds)
    counts, times, diseased = validate_series(germination_counts, time_points, diseased_counts)
    summary = as_radicle_summary(radicle_summary)

    adjusted = _adjust_for_disease(counts, diseased)
    total_diseased = float(np.sum(diseased)) if diseased is not None else 0.0

    final_germinated = float(np.max(adjusted))
    check_final_germinated(final_germinated, total)

    MSG = final_germinated / total
    MRG = _max_rate_of_germination(adjusted, times, total)

    t50 = _time_to_half_germination(adjusted, times, final_germinated)
    MTG = t50 / float(np.max(times))

    product = MSG * MRG * (1.0 - MTG)
    if product < 0:
        log.warning("negative PSRI base product %.6f for %s; using signed cube root", product, species)
    PSRI_base = _signed_cbrt(product)

    vigor = radicle_vigor_factor(summary)
    PSRI = PSRI_base * vigor

    log.debug(
        "%s: MSG=%.4f MRG=%.4f MTG=%.4f t50=%.3f PSRI_base=%.4f vigor=%.2f",
        species, MSG, MRG, MTG, t50, PSRI_base, vigor,
    )

    return PSRIResult(
        MSG=MSG,
        MRG=MRG,
        MTG=MTG,
        PSRI=PSRI,
        PSRI_base=PSRI_base,
        t50=t50,
        final_germinated=final_germinated,
        germination_rate=MSG,
        radicle_vigor_factor=vigor,
        total_diseased=total_diseased,
        species=species,
        total_seeds=total,
        time_points=tuple(float(t) for t in times),
        adjusted_germination=tuple(float(a) for a in adjusted),
    )
