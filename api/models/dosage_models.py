from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DosageRequest(CamelModel):
    """
    Normalized calculator input.

    Every field is optional here; presence and range rules live in the
    calculator so that callers get its exact error messages. Strict, so JSON
    booleans and numeric strings are rejected instead of coerced.
    """

    model_config = ConfigDict(strict=True)

    target_weekly_dose: Optional[float] = None  # mg
    testosterone_strength: Optional[float] = None  # mg/ml
    shots_per_week: Optional[float] = None
    shot_every_x_days: Optional[float] = None


class DosageResult(CamelModel):
    dose_per_shot_ml: str  # 3 decimal places
    dose_per_shot_mg: str  # 1 decimal place
    shots_per_week: str  # effective weekly frequency, 2 decimal places
    frequency: str


class LegacyDoseResponse(CamelModel):
    """Trimmed payload returned by the legacy /calculate-dose endpoint."""

    dose_per_shot_ml: str


class ErrorResponse(BaseModel):
    error: str


class HealthResponse(BaseModel):
    status: str
