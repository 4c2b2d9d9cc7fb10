"""Solar position endpoints."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import APIRouter, HTTPException, status

from solpos import PositionRecord, Request, Stage, describe_errors, solpos
from solpos_api.config import settings
from solpos_api.schemas.solpos import (
    AirmassRequest,
    AirmassResult,
    BatchRequest,
    BatchResult,
    PositionInput,
    PositionResult,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _compute(body: PositionInput) -> PositionResult:
    record = body.to_record()
    code = solpos(record, body.to_request())
    if code:
        logger.info("Computed with input errors", extra={"error_code": int(code)})
    return PositionResult.model_validate(
        {
            **asdict(record),
            "error_code": int(code),
            "errors": describe_errors(code, record),
        }
    )


@router.post(
    "",
    response_model=PositionResult,
    summary="Solar position",
    description="Compute the requested solar position, airmass and irradiance outputs "
    "for one observer location and local standard time.",
)
async def compute_position(body: PositionInput) -> PositionResult:
    return _compute(body)


@router.post(
    "/batch",
    response_model=BatchResult,
    summary="Solar positions (batch)",
    description="Compute several independent positions in one request.",
)
async def compute_batch(body: BatchRequest) -> BatchResult:
    if len(body.positions) > settings.max_batch_size:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Batch too large. Max {settings.max_batch_size} positions per request.",
        )
    return BatchResult(results=[_compute(p) for p in body.positions])


@router.post(
    "/airmass",
    response_model=AirmassResult,
    summary="Airmass",
    description="Relative and pressure-corrected airmass for a refracted zenith angle, "
    "independent of date and location.",
)
async def compute_airmass(body: AirmassRequest) -> AirmassResult:
    record = PositionRecord(zenith_ref=body.zenith_ref, pressure=body.pressure)
    solpos(record, Request.primitive(Stage.AIRMASS))
    return AirmassResult(
        zenith_ref=body.zenith_ref,
        pressure=body.pressure,
        airmass=record.airmass,
        airmass_pressure=record.airmass_pressure,
    )
