"""
FastAPI web application for the Tower of Hanoi solver.

Exposes POST /api/solve, which accepts {"numberOfDisks": n} and returns
either the full move list (n <= 10) or only the total move count (n > 10).

Architecture notes:
- Async endpoint reading the raw body: an empty body, unparsable JSON and an
  invalid disk count each map to their own status and message, which
  FastAPI's automatic body validation (422 for everything) cannot express.
  The solve itself is at most 1023 moves, so it runs inline.
- Error bodies are always {"error": "<message>"}. Parse failures and
  unexpected exceptions are logged and reported as a generic 500.
- CORS headers are added to every response by middleware so error
  responses carry them too.
- Stateless per request: nothing is kept between requests.
"""

import json
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from hanoi.constants import (
    ENUMERATION_LIMIT,
    INTERNAL_ERROR_MESSAGE,
    INVALID_DISKS_MESSAGE,
    MAX_DISK_COUNT,
    MISSING_BODY_MESSAGE,
    TOO_MANY_DISKS_MESSAGE,
    Peg,
)
from hanoi.solver import Move, solve

# ---------------------------------------------------------------------------
# Setup
# ---------------------------------------------------------------------------

logging.basicConfig(level=logging.INFO)
_log = logging.getLogger(__name__)

_CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type",
    "Access-Control-Allow-Methods": "POST, OPTIONS",
}

app = FastAPI(title="Tower of Hanoi Solver", version="1.0.0")


# ---------------------------------------------------------------------------
# Request / response models
# ---------------------------------------------------------------------------


class SolveRequest(BaseModel):
    """
    Client request to the solver.

    Fields:
        numberOfDisks: Number of disks to solve for. Strict int, so strings,
                       booleans, null and fractional numbers are rejected
                       rather than coerced. Integral floats such as 3.0 or
                       1e2 are JSON numbers like any other and are accepted.
                       Must be between 1 and MAX_DISK_COUNT.
    """

    model_config = ConfigDict(populate_by_name=True)

    number_of_disks: int = Field(
        alias="numberOfDisks", strict=True, ge=1, le=MAX_DISK_COUNT
    )

    @field_validator("number_of_disks", mode="before")
    @classmethod
    def integral_float_to_int(cls, v: object) -> object:
        """Turn 3.0 into 3; anything else is left for the strict int check."""
        if isinstance(v, float) and v.is_integer():
            return int(v)
        return v


class StepModel(BaseModel):
    """One move in the solution, serialized with the wire field names."""

    model_config = ConfigDict(populate_by_name=True)

    step_number: int = Field(alias="stepNumber")
    from_peg: Peg = Field(alias="from")
    to_peg: Peg = Field(alias="to")
    disk: int

    @classmethod
    def from_move(cls, move: Move) -> "StepModel":
        return cls(
            step_number=move.sequence_number,
            from_peg=move.from_peg,
            to_peg=move.to_peg,
            disk=move.disk_size,
        )


class SolutionResponse(BaseModel):
    """Full solution: every step plus the step count."""

    model_config = ConfigDict(populate_by_name=True)

    steps: list[StepModel]
    total_steps: int = Field(alias="totalSteps")


class TotalStepsResponse(BaseModel):
    """Count-only answer for disk counts above the enumeration limit."""

    model_config = ConfigDict(populate_by_name=True)

    total_steps: int = Field(alias="totalSteps")


class ErrorResponse(BaseModel):
    error: str


def _json(status_code: int, model: BaseModel) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=model.model_dump(mode="json", by_alias=True),
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return _json(status_code, ErrorResponse(error=message))


# ---------------------------------------------------------------------------
# Middleware
# ---------------------------------------------------------------------------


@app.middleware("http")
async def add_cors_headers(request: Request, call_next) -> Response:
    """Attach the CORS headers to every response, errors included."""
    response = await call_next(request)
    for name, value in _CORS_HEADERS.items():
        response.headers[name] = value
    return response


# ---------------------------------------------------------------------------
# API routes
# ---------------------------------------------------------------------------


@app.post("/api/solve")
@app.post("/solve", include_in_schema=False)
async def api_solve(request: Request) -> JSONResponse:
    """
    Solve the puzzle for the requested number of disks.

    Validation happens entirely before the solver runs:
        - empty body                        -> 400 "Request body is required"
        - body is not JSON                  -> 500 "Internal server error"
        - body is the JSON literal null     -> 500 "Internal server error"
        - numberOfDisks missing, not an
          integer, or below 1               -> 400 "numberOfDisks must be ..."
        - numberOfDisks above MAX_DISK_COUNT -> 400 "numberOfDisks must not ..."

    The MAX_DISK_COUNT bound belongs to the transport, not the solver: solve()
    returns an exact count for any n > 10, but the JSON encoder refuses ints
    longer than 4300 digits and a huge n would make 2^n itself expensive.

    Args:
        request: Incoming request; only the raw body is read.

    Returns:
        200 with SolutionResponse when numberOfDisks <= ENUMERATION_LIMIT,
        200 with TotalStepsResponse (no "steps" key) above it, or an
        ErrorResponse with the status listed above.
    """
    body = await request.body()
    if not body:
        return _error(400, MISSING_BODY_MESSAGE)

    # --- Parse the payload ---
    try:
        payload = json.loads(body)
    except ValueError:
        _log.exception("Error processing request: body is not valid JSON")
        return _error(500, INTERNAL_ERROR_MESSAGE)

    if payload is None:
        _log.error("Error processing request: body is null")
        return _error(500, INTERNAL_ERROR_MESSAGE)

    # --- Validate the disk count ---
    try:
        solve_request = SolveRequest.model_validate(payload)
    except ValidationError as exc:
        _log.info("Rejected solve request: %d validation error(s)", exc.error_count())
        if any(err["type"] == "less_than_equal" for err in exc.errors()):
            return _error(400, TOO_MANY_DISKS_MESSAGE)
        return _error(400, INVALID_DISKS_MESSAGE)

    # --- Run the solver and build the response ---
    disks = solve_request.number_of_disks
    try:
        result = solve(disks)
        if isinstance(result, int):
            response = _json(200, TotalStepsResponse(total_steps=result))
        else:
            response = _json(
                200,
                SolutionResponse(
                    steps=[StepModel.from_move(move) for move in result],
                    total_steps=len(result),
                ),
            )
    except Exception:
        _log.exception("Solver failed for numberOfDisks=%d", disks)
        return _error(500, INTERNAL_ERROR_MESSAGE)

    _log.info(
        "Solved disks=%d mode=%s",
        disks,
        "count" if disks > ENUMERATION_LIMIT else "steps",
    )
    return response


@app.options("/api/solve", include_in_schema=False)
@app.options("/solve", include_in_schema=False)
def api_solve_preflight() -> Response:
    """Answer CORS preflight requests with an empty 200."""
    return Response(status_code=200)


@app.get("/api/health")
def api_health() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
