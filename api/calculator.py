"""
Dosage calculator.

Turns a weekly target dose, a medication strength and an injection frequency
into the volume and mass of a single shot. Pure: no I/O beyond debug logging.
"""
import logging
from typing import Optional

from models.dosage_models import DosageRequest, DosageResult

logger = logging.getLogger("calculator")


class DosageValidationError(ValueError):
    """Raised when calculator input breaks a domain rule."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


MAX_WEEKLY_DOSE_MG = 1000
MAX_STRENGTH_MG_PER_ML = 500
MAX_SHOTS_PER_WEEK = 7
MAX_DAYS_BETWEEN_SHOTS = 30
DAYS_PER_WEEK = 7


def _in_range(value: Optional[float], upper: float) -> bool:
    # NaN fails both comparisons
    return value is not None and 0 < value <= upper


def _is_provided(value: Optional[float]) -> bool:
    # zero means "not chosen", matching an empty form field
    return value is not None and value != 0


def format_number(value: float) -> str:
    """Render a user-supplied number the way it was typed: 7 -> "7", 3.5 -> "3.5"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def describe_frequency(shots_per_week: Optional[float], shot_every_x_days: Optional[float]) -> str:
    if _is_provided(shot_every_x_days):
        return f"Every {format_number(shot_every_x_days)} days"
    if shots_per_week == 1:
        return "Once weekly"
    return f"{format_number(shots_per_week)} times per week"


def calculate_dose(request: DosageRequest) -> DosageResult:
    """
    Validate ``request`` and compute the per-shot dose.

    Checks run in a fixed order and the first failure is raised as a
    DosageValidationError carrying a user-facing message.
    """
    if not _in_range(request.target_weekly_dose, MAX_WEEKLY_DOSE_MG):
        raise DosageValidationError(f"Target weekly dose must be between 0 and {MAX_WEEKLY_DOSE_MG} mg")

    if not _in_range(request.testosterone_strength, MAX_STRENGTH_MG_PER_ML):
        raise DosageValidationError(
            f"Testosterone strength must be between 0 and {MAX_STRENGTH_MG_PER_ML} mg/ml"
        )

    has_shots = _is_provided(request.shots_per_week)
    has_interval = _is_provided(request.shot_every_x_days)

    if not has_shots and not has_interval:
        raise DosageValidationError("Please specify either shots per week or days between shots")

    if has_shots and has_interval:
        raise DosageValidationError("Please specify only one frequency option")

    if has_interval:
        if not _in_range(request.shot_every_x_days, MAX_DAYS_BETWEEN_SHOTS):
            raise DosageValidationError(f"Days between shots must be between 0 and {MAX_DAYS_BETWEEN_SHOTS}")
        effective_shots_per_week = DAYS_PER_WEEK / request.shot_every_x_days
    else:
        if not _in_range(request.shots_per_week, MAX_SHOTS_PER_WEEK):
            raise DosageValidationError(f"Shots per week must be between 0 and {MAX_SHOTS_PER_WEEK}")
        effective_shots_per_week = request.shots_per_week

    dose_per_shot_mg = request.target_weekly_dose / effective_shots_per_week
    dose_per_shot_ml = dose_per_shot_mg / request.testosterone_strength

    logger.debug(
        "Calculated dose: %.4f mg / %.4f ml per shot at %.4f shots per week",
        dose_per_shot_mg,
        dose_per_shot_ml,
        effective_shots_per_week,
    )

    return DosageResult(
        dose_per_shot_ml=format(dose_per_shot_ml, ".3f"),
        dose_per_shot_mg=format(dose_per_shot_mg, ".1f"),
        shots_per_week=format(effective_shots_per_week, ".2f"),
        frequency=describe_frequency(request.shots_per_week, request.shot_every_x_days),
    )
