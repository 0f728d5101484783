# -*- coding: utf-8 -*-
"""Comments — Pydantic models."""

from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class Comment(BaseModel):
    author: str
    text: str
    time: str = Field(..., description="ISO8601 UTC timestamp")


class CommentCreateRequest(BaseModel):
    key: Optional[str] = Field(None, description="<date>_<menu tab>")
    author: Optional[str] = Field(None, max_length=64)
    text: Optional[str] = Field(None, max_length=5000)


class CommentsResponse(BaseModel):
    comments: Dict[str, List[Comment]]


class CommentCreateResponse(BaseModel):
    ok: bool = True
    comments: List[Comment]
