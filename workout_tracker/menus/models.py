# -*- coding: utf-8 -*-
"""Menus — Pydantic models.

Menu documents are stored exactly as the client sent them. The models only
check the shape at the request boundary; unknown keys are kept so a saved
document reads back unchanged.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# JSON numbers stay numbers; blank inputs arrive as "".
Amount = Union[int, float, str, None]


class WorkoutSet(BaseModel):
    model_config = ConfigDict(extra="allow")

    kg: Amount = ""
    reps: Amount = ""


class WorkoutRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    date: str = Field("", description="YYYY-MM-DD")
    sets: List[WorkoutSet] = Field(default_factory=list)


class Exercise(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    name: str = ""
    body: str = Field("", description="Body part")
    rep_range: str = Field("", alias="repRange")
    records: List[WorkoutRecord] = Field(default_factory=list)


def exercises_to_document(exercises: List[Exercise]) -> List[Dict[str, Any]]:
    return [ex.model_dump(by_alias=True, exclude_unset=True) for ex in exercises]


class MenusReplaceRequest(BaseModel):
    menus: Optional[Dict[str, List[Exercise]]] = None

    def to_document(self) -> Optional[Dict[str, Any]]:
        if self.menus is None:
            return None
        return {tab: exercises_to_document(exs) for tab, exs in self.menus.items()}


class MenuTabPatchRequest(BaseModel):
    exercises: Optional[List[Exercise]] = None

    def to_document(self) -> Optional[List[Dict[str, Any]]]:
        if self.exercises is None:
            return None
        return exercises_to_document(self.exercises)


class OkResponse(BaseModel):
    ok: bool = True
