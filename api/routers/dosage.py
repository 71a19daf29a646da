"""
Dosage endpoints: the legacy query endpoint and the versioned JSON API.
"""
import re
from typing import Optional

import logfire
from fastapi import APIRouter, Query, Request
from pydantic import ValidationError

from calculator import calculate_dose
from errors import MalformedRequestError
from models.dosage_models import DosageRequest, DosageResult, ErrorResponse, LegacyDoseResponse

router = APIRouter()

_LEADING_FLOAT = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_LEADING_INT = re.compile(r"\s*[+-]?\d+")

ERROR_RESPONSES = {400: {"model": ErrorResponse, "description": "Invalid input"}}

# OPTIONS never reaches a route, the CORS middleware answers it
ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE"]


# --- Query parsing helpers ---

def parse_float(raw: Optional[str]) -> Optional[float]:
    """
    Parse the numeric prefix of a query value ("3.5days" -> 3.5).
    Absent, empty or non-numeric values give None so they read as "not provided".
    """
    if not raw:
        return None
    match = _LEADING_FLOAT.match(raw)
    if not match:
        return None
    return float(match.group())


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Parse the leading integer of a query value, truncating any fraction ("1.5" -> 1)."""
    if not raw:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group())


def request_from_query(
    target_weekly_dose: Optional[str],
    testosterone_strength: Optional[str],
    shots_per_week: Optional[str],
    shot_every_x_days: Optional[str],
    integer_shots: bool = False,
) -> DosageRequest:
    parse_shots = parse_int if integer_shots else parse_float
    return DosageRequest(
        target_weekly_dose=parse_float(target_weekly_dose),
        testosterone_strength=parse_float(testosterone_strength),
        shots_per_week=parse_shots(shots_per_week),
        shot_every_x_days=parse_float(shot_every_x_days),
    )


async def request_from_body(request: Request) -> DosageRequest:
    """Decode the raw body as a JSON object and validate it into a DosageRequest."""
    try:
        payload = await request.json()
    except ValueError as e:
        raise MalformedRequestError(f"Body is not valid JSON: {e}") from e
    try:
        return DosageRequest.model_validate(payload)
    except ValidationError as e:
        raise MalformedRequestError(str(e)) from e


def _run_calculation(dosage_request: DosageRequest, endpoint: str) -> DosageResult:
    with logfire.span("calculate_dose", endpoint=endpoint):
        result = calculate_dose(dosage_request)
        logfire.info(
            "Dose calculated",
            endpoint=endpoint,
            request=dosage_request.model_dump(),
            result=result.model_dump(),
        )
        return result


# --- Endpoints ---

@router.api_route(
    "/calculate-dose",
    methods=ANY_METHOD,
    response_model=LegacyDoseResponse,
    responses=ERROR_RESPONSES,
)
async def calculate_dose_legacy(
    target_weekly_dose: Optional[str] = Query(None, alias="targetWeeklyDose"),
    testosterone_strength: Optional[str] = Query(None, alias="testosteroneStrength"),
    shots_per_week: Optional[str] = Query(None, alias="shotsPerWeek"),
    shot_every_x_days: Optional[str] = Query(None, alias="shotEveryXDays"),
):
    """
    Legacy query endpoint. Returns only the volume.
    Answers any method and always reads the query string; shotsPerWeek is
    read as an integer here, fractions are truncated.
    """
    dosage_request = request_from_query(
        target_weekly_dose,
        testosterone_strength,
        shots_per_week,
        shot_every_x_days,
        integer_shots=True,
    )
    result = _run_calculation(dosage_request, "legacy")
    return LegacyDoseResponse(dose_per_shot_ml=result.dose_per_shot_ml)


@router.get("/api/v1/calculate", response_model=DosageResult, responses=ERROR_RESPONSES)
async def calculate_dose_v1_query(
    target_weekly_dose: Optional[str] = Query(None, alias="targetWeeklyDose"),
    testosterone_strength: Optional[str] = Query(None, alias="testosteroneStrength"),
    shots_per_week: Optional[str] = Query(None, alias="shotsPerWeek"),
    shot_every_x_days: Optional[str] = Query(None, alias="shotEveryXDays"),
):
    """Full calculation result from query parameters."""
    dosage_request = request_from_query(
        target_weekly_dose,
        testosterone_strength,
        shots_per_week,
        shot_every_x_days,
    )
    return _run_calculation(dosage_request, "v1-get")


@router.post(
    "/api/v1/calculate",
    response_model=DosageResult,
    responses=ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": DosageRequest.model_json_schema(by_alias=True)}},
        }
    },
)
async def calculate_dose_v1_body(request: Request):
    """
    Full calculation result from a JSON body with the same camelCase fields.
    The body is decoded as JSON whatever Content-Type the client sent.
    """
    dosage_request = await request_from_body(request)
    return _run_calculation(dosage_request, "v1-post")
