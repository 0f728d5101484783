# -*- coding: utf-8 -*-
"""Comments — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import Services, get_services
from .models import CommentCreateRequest, CommentCreateResponse, CommentsResponse

router = APIRouter(prefix="/api/comments", tags=["Comments"])


@router.get("/{user}", response_model=CommentsResponse, summary="All comment threads for a user")
def get_comments(user: str, services: Services = Depends(get_services)):
    return CommentsResponse.model_validate({"comments": services.comments.get_comments(user)})


@router.post("/{user}", response_model=CommentCreateResponse, summary="Append a comment to a session thread")
def add_comment(user: str, request: CommentCreateRequest, services: Services = Depends(get_services)):
    thread = services.comments.add_comment(user, request.key, request.text, author=request.author)
    return CommentCreateResponse.model_validate({"comments": thread})
