# -*- coding: utf-8 -*-
"""Body measurements — API endpoints."""

from __future__ import annotations

from urllib.parse import unquote

from fastapi import APIRouter, Depends

from ..deps import Services, get_services
from .models import MeasurementUpsertRequest, MeasurementsResponse, MeasurementsUpdateResponse

router = APIRouter(prefix="/api/measurements", tags=["Measurements"])


@router.get("/{user}", response_model=MeasurementsResponse, summary="Measurement history (newest first)")
def list_measurements(user: str, services: Services = Depends(get_services)):
    return MeasurementsResponse.model_validate({"measurements": services.measurements.list_entries(user)})


@router.post("/{user}", response_model=MeasurementsUpdateResponse, summary="Insert or replace the entry for a date")
def upsert_measurement(user: str, request: MeasurementUpsertRequest, services: Services = Depends(get_services)):
    data = services.measurements.upsert(user, request.model_dump())
    return MeasurementsUpdateResponse.model_validate({"measurements": data})


@router.delete("/{user}/{date:path}", response_model=MeasurementsUpdateResponse, summary="Delete entries for a date")
def delete_measurement(user: str, date: str, services: Services = Depends(get_services)):
    # Clients encode the date themselves; the router has already decoded one layer.
    data = services.measurements.remove(user, unquote(date))
    return MeasurementsUpdateResponse.model_validate({"measurements": data})
