"""REST API routes for the match log and predictions."""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from predictor.config import CHART_SERIES_POINTS, TEMPERATURE_BOUNDS, config_from_env
from predictor.records import Result

from ..transformers.prediction_transformer import (
    transform_prediction,
    transform_record,
    transform_series,
)
from ...application.use_cases.match_log import MatchLogSession
from ...infrastructure.adapters.json_record_store_adapter import JsonRecordStoreAdapter

router = APIRouter(prefix="/api", tags=["predictor"])

_session: Optional[MatchLogSession] = None


def get_session() -> MatchLogSession:
    """Process-wide session, created (and the log loaded) on first use."""
    global _session
    if _session is None:
        config = config_from_env()
        _session = MatchLogSession(
            JsonRecordStoreAdapter(config.store_path),
            decay_factor=config.decay_factor,
        )
    return _session


class AddRecordRequest(BaseModel):
    """Request body for recording a match."""

    opponent_name: str = Field(
        ...,
        alias="opponentName",
        description="Opponent name; blank names are ignored",
    )
    result: Result = Field(default=Result.WIN, description="Match result")
    note: str = Field(default="", description="Optional note")

    class Config:
        populate_by_name = True


class PredictRequest(BaseModel):
    """Request body for running a prediction."""

    temperature_control: float = Field(
        default=0.0,
        alias="temperatureControl",
        ge=TEMPERATURE_BOUNDS[0],
        le=TEMPERATURE_BOUNDS[1],
        description="Sharpen (<0) or flatten (>0) the distribution",
    )

    class Config:
        populate_by_name = True


def _error(status_code: int, code: str, message: str, **details) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={
            "error": {
                "code": code,
                "message": message,
                "details": details,
            }
        },
    )


@router.get("/records")
async def list_records(session: MatchLogSession = Depends(get_session)):
    """Return the record log, newest first."""
    return {"records": [transform_record(r) for r in session.records]}


@router.post("/records", status_code=201)
async def create_record(
    request: AddRecordRequest,
    session: MatchLogSession = Depends(get_session),
):
    """Record a match against an opponent.

    A blank opponent name is silently ignored: nothing is stored and
    ``created`` is false.
    """
    record = session.add_record(request.opponent_name, request.result, request.note)
    return {
        "created": record is not None,
        "record": transform_record(record) if record else None,
    }


@router.delete("/records")
async def clear_records(session: MatchLogSession = Depends(get_session)):
    """Delete every record."""
    session.clear()
    return {"cleared": True}


@router.post("/predictions")
async def run_prediction(
    request: PredictRequest,
    session: MatchLogSession = Depends(get_session),
):
    """Rank the opponents most likely to be faced next."""
    result = session.run_predict(request.temperature_control)
    if result is None:
        raise _error(404, "NO_DATA", "No match records available for prediction")
    return transform_prediction(result, session.state.temperature_control)


@router.get("/opponents")
async def list_opponents(session: MatchLogSession = Depends(get_session)):
    """Distinct opponent names, most recently recorded first."""
    return {"opponents": session.opponents()}


@router.get("/opponents/{name}/series")
async def get_series(
    name: str,
    points: int = Query(CHART_SERIES_POINTS, ge=1, le=500),
    session: MatchLogSession = Depends(get_session),
):
    """Cumulative performance series against one opponent."""
    if name not in session.opponents():
        raise _error(404, "OPPONENT_NOT_FOUND", f"No records for opponent '{name}'", name=name)
    series = session.series(name, points)
    return transform_series(name, series)
