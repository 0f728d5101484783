# -*- coding: utf-8 -*-
"""Users — API endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from ..deps import Services, get_services
from .models import UserRegisterRequest, UserRegisterResponse, UserRegistry

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=UserRegistry, summary="List known users")
def list_users(services: Services = Depends(get_services)):
    return UserRegistry.model_validate(services.users.list_users())


@router.post("", response_model=UserRegisterResponse, summary="Register a user (idempotent)")
def register_user(request: UserRegisterRequest, services: Services = Depends(get_services)):
    data = services.users.register_user(request.name)
    return UserRegisterResponse(users=data["users"])
