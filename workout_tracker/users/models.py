# -*- coding: utf-8 -*-
"""Users — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class UserRegistry(BaseModel):
    users: List[str] = Field(default_factory=list)
    current: str = ""


class UserRegisterRequest(BaseModel):
    name: Optional[str] = Field(None, max_length=64)


class UserRegisterResponse(BaseModel):
    ok: bool = True
    users: List[str]
