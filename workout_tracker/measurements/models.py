# -*- coding: utf-8 -*-
"""Body measurements — Pydantic models."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

MeasureValue = Union[str, int, float, None]

MEASURE_FIELDS = ("weight", "waist", "chest", "arm", "thigh", "hip")


def measure_text(value: Any) -> str:
    """Stored form of a measurement value: blanks and zero become ""."""
    if value is None or value == "" or value is False:
        return ""
    if isinstance(value, float):
        if value == 0:
            return ""
        return str(int(value)) if value.is_integer() else str(value)
    if isinstance(value, int):
        return str(value) if value else ""
    return str(value)


class MeasurementUpsertRequest(BaseModel):
    date: Optional[str] = Field(None, description="YYYY-MM-DD")
    weight: MeasureValue = None
    waist: MeasureValue = None
    chest: MeasureValue = None
    arm: MeasureValue = None
    thigh: MeasureValue = None
    hip: MeasureValue = None
    memo: Optional[str] = Field(None, max_length=2000)


class MeasurementEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    date: str = ""
    weight: str = ""
    waist: str = ""
    chest: str = ""
    arm: str = ""
    thigh: str = ""
    hip: str = ""
    memo: str = ""
    updated_at: str = Field("", alias="updatedAt")

    # Older documents may hold raw client numbers; read them back as text.
    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> str:
        return measure_text(value)


class MeasurementsResponse(BaseModel):
    measurements: List[MeasurementEntry]


class MeasurementsUpdateResponse(BaseModel):
    ok: bool = True
    measurements: List[MeasurementEntry]
